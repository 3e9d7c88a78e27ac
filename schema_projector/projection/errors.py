"""
Exceptions raised when a document holds no usable schema.

Both subclass ValueError so callers that already guard schema handling with
``except ValueError`` keep working.
"""


class ProjectionError(ValueError):
    """Base class for projection failures."""


class MissingSchemaMapError(ProjectionError):
    """The document has no schema mapping at all."""

    def __init__(self, message: str = "components.schemas is missing from the document"):
        super().__init__(message)


class NoSchemaFoundError(ProjectionError):
    """The document's schema mapping is present but empty."""

    def __init__(self, message: str = "components.schemas contains no schema definitions"):
        super().__init__(message)
