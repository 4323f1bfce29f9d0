"""
Logging setup shared by the API server and the command line scripts.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Request bodies dumped by the middleware
and the token exchange both log through module loggers, so they end up
in the same handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third‑party loggers that are chatty at INFO/DEBUG.
_NOISY_LOGGERS = ("urllib3", "httpx", "multipart")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a log file, opened in append mode.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a previous create_app().
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
