"""
Logging setup shared by the API server, ``run.py`` and ``create_token.py``.

Everything logs through the root logger: a console stream always, plus
a UTF‑8 file when ``LOG_FILE`` is configured.  Services only call
``logging.getLogger(__name__)``; they never attach handlers themselves.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(root: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Install the console (and optional file) handler on the root logger.

    ``level`` is a level name such as ``"debug"`` or ``"INFO"``; an
    unknown name means ``INFO``.  ``logfile`` is resolved against the
    working directory.  Calling this again is a no-op once the root
    logger has handlers, which keeps repeated ``create_app`` calls and
    pytest's own capture handlers from doubling every line.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _attach(root, logging.StreamHandler())
    if logfile:
        _attach(root, logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
