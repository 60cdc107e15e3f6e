"""Logging configuration"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import Settings

PACKAGE_LOGGER = "gerrit_trigger"


def setup_logging(settings: Settings) -> None:
    """Route all logging through Rich.

    ``settings.log_level`` applies to the ``gerrit_trigger`` loggers; set it to
    DEBUG to see the per-comment pattern trace. Other libraries log at
    WARNING and above.
    """
    level = getattr(logging, settings.log_level, logging.INFO)

    rich_handler = RichHandler(
        console=Console(width=120),
        show_path=settings.is_development,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%Y-%m-%d %H:%M:%S]"))

    # force: uvicorn installs its own root handlers first
    logging.basicConfig(level=logging.WARNING, handlers=[rich_handler], force=True)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    # uvicorn startup lines stay visible, per-request access lines do not
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging: {settings.log_level} | Env: {settings.environment}"
    )
