"""
Logging configuration for the Catalog API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Application modules log through
``logging.getLogger(__name__)``; resolver failures raised while
executing a GraphQL document are reported by strawberry on its
``strawberry.execution`` logger and end up in the same handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives a copy of the log.  Relative
        paths are resolved against the current working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a second create_app call.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
