"""
Schema projection module.

This module locates the schema of interest in a generated JSON-Schema document
and repackages it for OpenAI Structured Outputs.

Components:
    - types: Document, input and output records plus the UNSET sentinel
    - errors: Failures for documents without a usable schema
    - document: Coercion of raw mappings, files and models into documents
    - pydantic_adapter: Wrap a Pydantic model's JSON Schema as a document
    - projector: The projection itself

Example:
    ```python
    from schema_projector.projection import to_json_schema

    document = {"components": {"schemas": {"Output": {"type": "object"}}}}
    projected = to_json_schema(document, strict=True)
    projected.to_dict()
    # {"name": "Output", "schema": {"type": "object"}, "strict": True}
    ```
"""

from schema_projector.projection.document import coerce_document, load_document
from schema_projector.projection.errors import (
    MissingSchemaMapError,
    NoSchemaFoundError,
    ProjectionError,
)
from schema_projector.projection.projector import (
    project,
    project_as_envelope,
    to_json_schema,
    to_response_format,
)
from schema_projector.projection.pydantic_adapter import is_pydantic_model, pydantic_to_document
from schema_projector.projection.types import (
    UNSET,
    GeneratedSchemaDocument,
    ProjectedSchema,
    ProjectionInput,
    ResponseEnvelope,
)

__all__ = [
    "project",
    "project_as_envelope",
    "to_json_schema",
    "to_response_format",
    "coerce_document",
    "load_document",
    "is_pydantic_model",
    "pydantic_to_document",
    "GeneratedSchemaDocument",
    "ProjectionInput",
    "ProjectedSchema",
    "ResponseEnvelope",
    "UNSET",
    "ProjectionError",
    "MissingSchemaMapError",
    "NoSchemaFoundError",
]
