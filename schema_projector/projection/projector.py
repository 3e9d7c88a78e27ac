"""
Schema projector - repackage a generated schema for OpenAI Structured Outputs.

Takes the first definition of a generated document and lays it out the way
the ``response_format`` request field expects:

    {
        "type": "json_schema",
        "json_schema": {
            "name": "<definition name>",
            "schema": {...definition body...},
            "description": "<body description>",
            "strict": true
        }
    }

Usage:
    ```python
    from schema_projector import to_response_format

    document = {
        "components": {
            "schemas": {
                "Output": {
                    "type": "object",
                    "properties": {"id": {"type": "string"}},
                    "description": "an output",
                }
            }
        }
    }

    response_format = to_response_format(document, strict=True).to_dict()
    client.chat.completions.create(..., response_format=response_format)
    ```

When a document holds several definitions the first one, in the order the
generator emitted them, is used and the rest are ignored.
"""

import logging
from typing import Mapping

from schema_projector.projection.document import DocumentLike, coerce_document
from schema_projector.projection.errors import MissingSchemaMapError, NoSchemaFoundError
from schema_projector.projection.types import (
    UNSET,
    ProjectedSchema,
    ProjectionInput,
    ResponseEnvelope,
    StrictFlag,
)

logger = logging.getLogger(__name__)


def project(params: ProjectionInput) -> ProjectedSchema:
    """
    Project the first schema definition of a document.

    Args:
        params: Document and strictness flag

    Returns:
        ProjectedSchema: Name, body, description and strict flag

    Raises:
        MissingSchemaMapError: If the document has no schema mapping
        NoSchemaFoundError: If the schema mapping is empty
        TypeError: If the selected definition is not a JSON object

    Example:
        ```python
        doc = GeneratedSchemaDocument(schemas={"Output": {"type": "object"}})
        result = project(ProjectionInput(document=doc, strict=True))
        assert result.name == "Output"
        ```
    """
    schemas = params.document.schemas
    if schemas is None:
        raise MissingSchemaMapError()

    name = next(iter(schemas), None)
    if name is None:
        raise NoSchemaFoundError()

    if len(schemas) > 1:
        ignored = [key for key in schemas if key != name]
        logger.debug(f"Using first schema '{name}', ignoring: {', '.join(ignored)}")

    body = schemas[name]
    if not isinstance(body, Mapping):
        raise TypeError(
            f"Schema definition '{name}' must be a JSON object, got: {type(body).__name__}"
        )

    return ProjectedSchema(
        name=name,
        schema=body,
        description=body["description"] if "description" in body else UNSET,
        strict=params.strict,
    )


def project_as_envelope(params: ProjectionInput) -> ResponseEnvelope:
    """
    Project a document and wrap the result as a ``response_format`` value.

    Args:
        params: Document and strictness flag

    Returns:
        ResponseEnvelope: ``json_schema`` envelope around the projection

    Raises:
        MissingSchemaMapError: If the document has no schema mapping
        NoSchemaFoundError: If the schema mapping is empty
    """
    return ResponseEnvelope(json_schema=project(params))


def to_json_schema(document: DocumentLike, strict: StrictFlag = UNSET) -> ProjectedSchema:
    """
    Project any accepted document form.

    Args:
        document: GeneratedSchemaDocument, raw generator output, or Pydantic model class
        strict: Strictness flag; left out of the output when not given

    Returns:
        ProjectedSchema: The projected schema
    """
    return project(ProjectionInput(document=coerce_document(document), strict=strict))


def to_response_format(document: DocumentLike, strict: StrictFlag = UNSET) -> ResponseEnvelope:
    """
    Build a ``response_format`` envelope from any accepted document form.

    Args:
        document: GeneratedSchemaDocument, raw generator output, or Pydantic model class
        strict: Strictness flag; left out of the output when not given

    Returns:
        ResponseEnvelope: The envelope
    """
    return project_as_envelope(ProjectionInput(document=coerce_document(document), strict=strict))
