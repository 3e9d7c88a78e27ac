"""
Pydantic adapter - wrap a model's generated JSON Schema as a document.

Pydantic generates the schema; this module only places it in the
``components.schemas`` layout the projector reads, so a model class can be
used anywhere a generated document is accepted.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel

from schema_projector.projection.types import GeneratedSchemaDocument

logger = logging.getLogger(__name__)


def is_pydantic_model(obj: Any) -> bool:
    """
    Check whether ``obj`` is a Pydantic model class.

    Args:
        obj: Any object

    Returns:
        bool: True for subclasses of ``pydantic.BaseModel``
    """
    return isinstance(obj, type) and issubclass(obj, BaseModel)


def pydantic_to_document(
    model: type,
    name: Optional[str] = None,
) -> GeneratedSchemaDocument:
    """
    Build a one-entry document from a Pydantic model.

    Nested models stay in the body's own ``$defs`` section, so ``$ref``
    pointers resolve against the projected body.

    Args:
        model: Pydantic ``BaseModel`` subclass
        name: Schema name; defaults to the schema ``title``, then the class name

    Returns:
        GeneratedSchemaDocument: Document with a single definition

    Raises:
        TypeError: If ``model`` is not a Pydantic model class

    Example:
        ```python
        class Output(BaseModel):
            \"\"\"An output.\"\"\"
            id: int

        doc = pydantic_to_document(Output)
        assert list(doc.schemas) == ["Output"]
        ```
    """
    if not is_pydantic_model(model):
        raise TypeError(f"Expected a Pydantic model class, got: {model!r}")

    body = model.model_json_schema()
    schema_name = name or body.get("title") or model.__name__
    logger.debug(f"Generated JSON Schema for model {model.__name__} as '{schema_name}'")

    return GeneratedSchemaDocument(schemas={schema_name: body})
