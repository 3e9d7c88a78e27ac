"""
CLI command implementations.

This module contains the business logic for each CLI command:
- project: Print the projected ``json_schema`` descriptor
- envelope: Print the full ``response_format`` envelope
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from schema_projector.projection import (
    UNSET,
    ProjectionInput,
    load_document,
    project,
    project_as_envelope,
)

from .display import (
    print_header,
    print_json,
    print_projection_summary,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)


def write_output_file(data: Dict[str, Any], output_path: Path) -> None:
    """
    Write a result dict to a JSON file.

    Args:
        data: JSON-serializable result
        output_path: Destination path
    """
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def _build_input(document_path: Path, strict: Optional[bool]) -> ProjectionInput:
    document = load_document(document_path)
    schemas = document.schemas or {}
    if len(schemas) > 1:
        print_warning(
            f"Document holds {len(schemas)} schemas; only the first one is used"
        )
    return ProjectionInput(document=document, strict=UNSET if strict is None else strict)


def project_command(
    document_path: Path,
    strict: Optional[bool],
    output_path: Optional[Path],
    show_summary: bool,
) -> None:
    """
    Execute the project command.

    Args:
        document_path: Path to the generated document JSON file
        strict: Strictness flag, or None when not given on the command line
        output_path: Optional path to save the result JSON
        show_summary: Whether to print the summary table
    """
    params = _build_input(document_path, strict)
    result = project(params).to_dict()
    logger.info(f"Projected schema '{result['name']}' from {document_path}")

    if show_summary:
        print_header("SchemaProjector - Projection")
        print_projection_summary(result, len(params.document.schemas or {}))

    if output_path:
        write_output_file(result, output_path)
        print_success(f"Saved projected schema to: {output_path}")
    else:
        print_json(result, title="json_schema")


def envelope_command(
    document_path: Path,
    strict: Optional[bool],
    output_path: Optional[Path],
) -> None:
    """
    Execute the envelope command.

    Args:
        document_path: Path to the generated document JSON file
        strict: Strictness flag, or None when not given on the command line
        output_path: Optional path to save the result JSON
    """
    params = _build_input(document_path, strict)
    result = project_as_envelope(params).to_dict()
    logger.info(f"Built response_format for '{result['json_schema']['name']}' from {document_path}")

    if output_path:
        write_output_file(result, output_path)
        print_success(f"Saved response_format to: {output_path}")
    else:
        print_json(result, title="response_format")
