"""
Logging setup shared by the catalog and Pokédex services.

Both application factories call ``setup_logging`` with their settings,
and ``run.py`` builds both apps in one process, so the function is
idempotent: the root level always follows the latest call, the console
handler is attached once, and a file handler is attached once per log
file path.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_HANDLER_NAME = "doc_agent_api.console"


def _formatter() -> logging.Formatter:
    return logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)


def _has_file_handler(root: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename).resolve() == path
        for handler in root.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``level`` to the root logger and make sure our handlers exist.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Also write records to this file when given.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in root.handlers):
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER_NAME)
        console.setFormatter(_formatter())
        root.addHandler(console)

    if logfile:
        path = Path(logfile).resolve()
        if not _has_file_handler(root, path):
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(_formatter())
            root.addHandler(file_handler)
