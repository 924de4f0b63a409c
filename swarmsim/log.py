"""Logging setup for the fleet engine.

Every module logs through ``logging.getLogger(__name__)``; nothing is shown
until an application calls :func:`setup_logging`, which routes the
``swarmsim`` logger to a rich console.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "swarmsim"
DEFAULT_LOG_LEVEL = logging.INFO


def setup_logging(
    level: int = DEFAULT_LOG_LEVEL,
    console: Console | None = None,
    show_path: bool = False,
) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Calling it again replaces the previous handler rather than stacking a
    second one.

    Args:
        level: Logging level for the package logger.
        console: Console to write to. Defaults to a new stderr console.
        show_path: Whether to print the emitting file and line.

    Returns:
        logging.Logger: The configured ``swarmsim`` logger.

    Example:
        >>> import logging
        >>> from swarmsim.log import setup_logging
        >>> logger = setup_logging(logging.DEBUG)
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        level=level,
        console=console or Console(stderr=True),
        show_path=show_path,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    return logger
