"""
Logging configuration for the command-line interface.

Library modules only create module-level loggers; handlers are configured
here, by the application that embeds the package, or not at all.
"""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
HANDLER_NAME = "schema_projector"


def setup_logging(level: Union[int, str] = "WARNING", log_file: Optional[str] = None) -> logging.Handler:
    """
    Configure the root logger.

    Installs one handler on the root logger, replacing the one a previous call
    installed. Handlers added by other code are left in place.

    Args:
        level: Logging level name or number
        log_file: Optional file to write records to instead of stderr

    Returns:
        logging.Handler: The installed handler
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)
    return handler
