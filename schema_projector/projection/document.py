"""
Document loading - turn caller input into a GeneratedSchemaDocument.

Accepted forms:
    - GeneratedSchemaDocument: returned unchanged
    - Mapping: raw generator output with a ``components.schemas`` section
    - Pydantic model class: converted through the pydantic adapter
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from schema_projector.projection.pydantic_adapter import is_pydantic_model, pydantic_to_document
from schema_projector.projection.types import GeneratedSchemaDocument

logger = logging.getLogger(__name__)

DocumentLike = Union[GeneratedSchemaDocument, Mapping[str, Any], type]


def coerce_document(document: DocumentLike) -> GeneratedSchemaDocument:
    """
    Convert any accepted document form to a GeneratedSchemaDocument.

    Args:
        document: Document, raw generator output, or Pydantic model class

    Returns:
        GeneratedSchemaDocument: Normalized document

    Raises:
        TypeError: If the input is none of the accepted forms
    """
    if isinstance(document, GeneratedSchemaDocument):
        return document
    if isinstance(document, Mapping):
        return GeneratedSchemaDocument.from_dict(document)
    if is_pydantic_model(document):
        return pydantic_to_document(document)

    raise TypeError(
        "Expected a GeneratedSchemaDocument, a mapping or a Pydantic model class, "
        f"got: {type(document).__name__}"
    )


def load_document(path: Union[str, Path]) -> GeneratedSchemaDocument:
    """
    Load a generated document from a JSON file.

    Args:
        path: Path to the generator's JSON output

    Returns:
        GeneratedSchemaDocument: Parsed document

    Raises:
        ValueError: If the file is missing, unreadable, or not a JSON object
    """
    path = Path(path)
    if not path.exists():
        raise ValueError(f"Document file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in document file: {e}")
    except OSError as e:
        raise ValueError(f"Cannot read document file {path}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Document must be a JSON object, got: {type(data).__name__}")

    logger.debug(f"Loaded generated document from {path}")

    try:
        return GeneratedSchemaDocument.from_dict(data)
    except TypeError as e:
        raise ValueError(f"Malformed document {path}: {e}")
