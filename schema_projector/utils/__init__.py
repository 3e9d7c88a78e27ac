"""
Utility functions and helpers.

Components:
    - logging_utils: Logging configuration for the CLI

Example:
    ```python
    from schema_projector.utils import setup_logging

    setup_logging(level="DEBUG", log_file="schema_projector.log")
    ```
"""

from schema_projector.utils.logging_utils import setup_logging

__all__ = ["setup_logging"]
