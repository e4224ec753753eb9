import logging
from rich.console import Console
from rich.logging import RichHandler

import dicetable.config as config

console = Console()


def enable_logging(level=None, markup=True):
    """Send dicetable's log records to a rich console.

    Args:
      level: A level name or `logging` constant. Defaults to the
        `DICETABLE_LOG_LEVEL` environment variable.
      markup: Passed through to `RichHandler`.

    Returns:
      The installed handler.
    """
    if not isinstance(level, int):
        level = config.log_level(level)

    logger = logging.getLogger("dicetable")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(markup=markup, show_time=False, console=console)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
