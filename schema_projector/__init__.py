"""
SchemaProjector: Generated JSON Schema to OpenAI Structured Outputs

SchemaProjector takes the JSON-Schema document emitted by a schema generator
(Typia's ``json.application``, an OpenAPI ``components`` section, or a
Pydantic model) and repackages its schema as the ``response_format`` value
expected by OpenAI's Structured Outputs.

Key Features:
    - Picks the schema out of a generated ``components.schemas`` section
    - Copies the schema's top-level description into the request field
    - Forwards the ``strict`` flag untouched, including an explicit ``None``
    - Accepts Pydantic models through the same entry points
    - Command-line interface for projecting documents stored as JSON files

Quick Start:
    ```python
    import json
    from pathlib import Path

    from openai import OpenAI
    from schema_projector import to_response_format

    document = json.loads(Path("output.schema.json").read_text())

    client = OpenAI()
    chat = client.chat.completions.create(
        model="gpt-4o-mini",
        response_format=to_response_format(document, strict=True).to_dict(),
        messages=[
            {
                "role": "system",
                "content": "Extract information and return as the structured data following schema",
            },
        ],
    )
    ```

Architecture:
    1. Document loading: raw mapping / JSON file / Pydantic model -> GeneratedSchemaDocument
    2. Projection: first definition -> ProjectedSchema
    3. Envelope: ProjectedSchema -> ResponseEnvelope -> request dict
"""

__version__ = "0.1.0"

# Main API exports - these are the primary user-facing functions
from schema_projector.api import (  # noqa: F401
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
