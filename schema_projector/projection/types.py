"""
Record types for schema projection.

This module defines the values that flow through the projector:

    GeneratedSchemaDocument: named schema definitions produced by a generator
    ProjectionInput: a document plus the caller's strictness flag
    ProjectedSchema: one schema in the layout of OpenAI's ``json_schema`` field
    ResponseEnvelope: a ProjectedSchema wrapped as a ``response_format`` value

Optional fields that the caller did not supply hold the ``UNSET`` sentinel
rather than ``None``, because ``strict=None`` is a meaningful value for the
downstream API and must survive the round trip.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

JSON_SCHEMA_KIND = "json_schema"


class _Unset:
    """Marker type for "not supplied"."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Unset":
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = _Unset()

SchemaDefinition = Dict[str, Any]
StrictFlag = Union[bool, None, _Unset]


@dataclass(frozen=True)
class GeneratedSchemaDocument:
    """
    Named schema definitions produced by an external schema generator.

    Attributes:
        schemas: Mapping from schema name to its JSON Schema body, in the
            order the generator emitted them. ``None`` when the generator
            produced no mapping at all.
    """

    schemas: Optional[Mapping[str, SchemaDefinition]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneratedSchemaDocument":
        """
        Build a document from a generator's raw output.

        The definitions are read from ``data["components"]["schemas"]``, the
        layout shared by Typia's ``json.application`` and OpenAPI documents.
        A missing key at either level gives a document with no mapping.

        Args:
            data: Parsed generator output

        Returns:
            GeneratedSchemaDocument: Document wrapping the definitions

        Raises:
            TypeError: If ``components`` or ``schemas`` is not a mapping

        Example:
            ```python
            doc = GeneratedSchemaDocument.from_dict({
                "version": "3.1",
                "components": {"schemas": {"Output": {"type": "object"}}},
                "schemas": [{"$ref": "#/components/schemas/Output"}],
            })
            assert list(doc.schemas) == ["Output"]
            ```
        """
        components = data.get("components")
        if components is None:
            return cls(schemas=None)
        if not isinstance(components, Mapping):
            raise TypeError(
                f"'components' must be a mapping, got: {type(components).__name__}"
            )

        schemas = components.get("schemas")
        if schemas is not None and not isinstance(schemas, Mapping):
            raise TypeError(
                f"'components.schemas' must be a mapping, got: {type(schemas).__name__}"
            )
        return cls(schemas=schemas)


@dataclass(frozen=True)
class ProjectionInput:
    """
    Arguments for a single projection.

    Attributes:
        document: Document holding the schema to project
        strict: Strictness flag forwarded to the downstream API as-is
    """

    document: GeneratedSchemaDocument
    strict: StrictFlag = UNSET


@dataclass(frozen=True)
class ProjectedSchema:
    """
    One schema in the layout of OpenAI's ``response_format.json_schema``.

    Attributes:
        name: Name of the selected schema definition
        schema: The definition body, passed through untouched
        description: The body's top-level ``description``, or ``UNSET``
        strict: The caller's strictness flag, or ``UNSET``
    """

    name: str
    schema: SchemaDefinition
    description: Union[str, _Unset] = UNSET
    strict: StrictFlag = UNSET

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the request-parameter dict.

        ``UNSET`` fields are left out; an explicit ``strict=None`` is kept.

        Returns:
            Dict: ``{"name", "schema", "description"?, "strict"?}``
        """
        result: Dict[str, Any] = {"name": self.name, "schema": self.schema}
        if self.description is not UNSET:
            result["description"] = self.description
        if self.strict is not UNSET:
            result["strict"] = self.strict
        return result


@dataclass(frozen=True)
class ResponseEnvelope:
    """
    A ProjectedSchema wrapped as a ``response_format`` value.

    Attributes:
        json_schema: The projected schema
        kind: Discriminator, always ``"json_schema"``; sent as ``"type"``
    """

    json_schema: ProjectedSchema
    kind: str = field(default=JSON_SCHEMA_KIND, init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to ``{"type": "json_schema", "json_schema": {...}}``."""
        return {"type": self.kind, "json_schema": self.json_schema.to_dict()}
