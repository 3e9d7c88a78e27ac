"""
Command-line interface module.

This module provides a rich terminal interface for SchemaProjector using Typer and Rich.

Commands:
    - project: Print the projected json_schema descriptor
    - envelope: Print the full response_format envelope

Example Usage:
    ```bash
    # Projected schema with a summary table
    schema-projector project \\
        --document output.schema.json \\
        --strict \\
        --summary

    # Envelope saved to a file
    schema-projector envelope \\
        --document output.schema.json \\
        --output response_format.json
    ```
"""

from .main import app

__all__ = ["app"]
