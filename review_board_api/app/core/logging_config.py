"""
Logging configuration for the Review Board API.

``setup_logging`` may run more than once in a process: the module-level
``app`` in ``main`` is built from the environment on import, and the
launcher or a test then builds another app from its own ``Settings``.
Every call applies the requested level to the root logger.  Handlers
installed here carry a name, so a repeated call reuses them instead of
stacking duplicates, and handlers attached by someone else (pytest,
uvicorn) are left alone.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "review_board.console"
FILE_HANDLER_PREFIX = "review_board.file:"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Set the root level and make sure our handlers are attached.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to log to, in addition to the console.  Parent
        directories are created.  Relative paths are resolved against
        the current working directory.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Only add a console handler to an otherwise unconfigured root logger.
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        handler_name = FILE_HANDLER_PREFIX + str(log_path)
        if not _has_handler(root, handler_name):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(handler_name)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
