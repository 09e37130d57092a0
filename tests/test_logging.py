"""Tests for the logging setup applied by the application factories."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Iterator

import pytest

from doc_agent_api.app.main import create_app as create_catalog_app
from doc_agent_api.core.config import Settings
from doc_agent_api.core.logging_config import CONSOLE_HANDLER_NAME, setup_logging
from doc_agent_api.pokedex.main import create_app as create_pokedex_app


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Give the test the root logger and put its level and handlers back afterwards."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _file_handlers(root: logging.Logger, path: Path):
    return [
        h
        for h in root.handlers
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename).resolve() == path.resolve()
    ]


def test_factory_applies_level_and_log_file(root_logger: logging.Logger, tmp_path: Path):
    logfile = tmp_path / "catalog.log"
    settings = dataclasses.replace(Settings(), log_level="WARNING", log_file=str(logfile))

    create_catalog_app(settings)

    assert root_logger.level == logging.WARNING
    handlers = _file_handlers(root_logger, logfile)
    assert len(handlers) == 1

    logging.getLogger("doc_agent_api.tests").warning("written to file")
    logging.getLogger("doc_agent_api.tests").info("filtered out")
    handlers[0].flush()
    content = logfile.read_text(encoding="utf-8")
    assert "[WARNING] doc_agent_api.tests: written to file" in content
    assert "filtered out" not in content


def test_later_factory_call_changes_level(root_logger: logging.Logger):
    base = Settings()
    create_pokedex_app(dataclasses.replace(base, log_level="ERROR", log_file=""))
    assert root_logger.level == logging.ERROR

    create_pokedex_app(dataclasses.replace(base, log_level="debug", log_file=""))
    assert root_logger.level == logging.DEBUG


def test_handlers_are_not_duplicated(root_logger: logging.Logger, tmp_path: Path):
    logfile = tmp_path / "services.log"
    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))
    setup_logging("WARNING", str(tmp_path / "." / "services.log"))

    consoles = [h for h in root_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
    assert len(consoles) == 1
    assert len(_file_handlers(root_logger, logfile)) == 1


def test_unknown_level_falls_back_to_info(root_logger: logging.Logger):
    setup_logging("chatty")
    assert root_logger.level == logging.INFO
