#!/usr/bin/env python3
"""
Demo: Projecting a generated schema document for OpenAI Structured Outputs.

This demonstrates:
- Projecting the schema stored in a generator's components.schemas section
- Wrapping it as a response_format envelope
- Doing the same with a Pydantic model
- The errors raised for documents without a usable schema
"""

import json

from pydantic import BaseModel, Field

from schema_projector import NoSchemaFoundError, to_json_schema, to_response_format


class Output(BaseModel):
    """add description as a docstring"""

    id: int = Field(ge=0, description="id of the entity")
    name: str = Field(min_length=1, description="name of the entity")


def main():
    print("=" * 60)
    print("SchemaProjector Demo: Generated schema -> response_format")
    print("=" * 60)

    # Output of a schema generator such as typia.json.application<[Output]>()
    document = {
        "version": "3.1",
        "components": {
            "schemas": {
                "Output": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer", "minimum": 0, "description": "id of the entity"},
                        "name": {"type": "string", "minLength": 1, "description": "name of the entity"},
                    },
                    "required": ["id", "name"],
                    "description": "add description as a JSDoc",
                }
            }
        },
        "schemas": [{"$ref": "#/components/schemas/Output"}],
    }

    print("\n1. Projected json_schema:")
    print(json.dumps(to_json_schema(document, strict=True).to_dict(), indent=2))

    print("\n2. response_format envelope:")
    print(json.dumps(to_response_format(document, strict=True).to_dict(), indent=2))

    print("\n3. From a Pydantic model:")
    print(json.dumps(to_response_format(Output).to_dict(), indent=2))

    print("\n4. Empty document:")
    try:
        to_json_schema({"components": {"schemas": {}}})
    except NoSchemaFoundError as e:
        print(f"   NoSchemaFoundError: {e}")


if __name__ == "__main__":
    main()
