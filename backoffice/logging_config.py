"""Root logging configuration shared by the API and the command line scripts."""

import logging

from backoffice.config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured = False


def configure_logging(settings: Settings) -> None:
    """Install a single console handler on the root logger.

    Calling this more than once is a no-op so the app factory can be invoked
    repeatedly from tests.
    """

    global _configured
    if _configured:
        return

    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)
    root.setLevel(level)

    # uvicorn ships its own handlers; send everything through the root one.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True

    _configured = True


__all__ = ["configure_logging", "LOG_FORMAT"]
