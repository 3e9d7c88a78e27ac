"""
High-level Python API for SchemaProjector.

This module provides the main user-facing functions for turning generated
schema documents into OpenAI ``response_format`` values.
"""

from schema_projector.projection import (
    UNSET,
    GeneratedSchemaDocument,
    MissingSchemaMapError,
    NoSchemaFoundError,
    ProjectedSchema,
    ProjectionError,
    ProjectionInput,
    ResponseEnvelope,
    project,
    project_as_envelope,
    to_json_schema,
    to_response_format,
)

# Re-export for convenience
__all__ = [
    "to_json_schema",
    "to_response_format",
    "project",
    "project_as_envelope",
    "GeneratedSchemaDocument",
    "ProjectionInput",
    "ProjectedSchema",
    "ResponseEnvelope",
    "UNSET",
    "ProjectionError",
    "MissingSchemaMapError",
    "NoSchemaFoundError",
]
