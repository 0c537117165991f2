# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from chatterbox.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    # pytest manages its own capture handlers; only undo what setup_logging added
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
                h.close()
        root.setLevel(level)
        logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_lets_own_logs_through() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("chatterbox.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("chatterbox", logging.INFO))


def test_console_filter_hides_third_party_noise() -> None:
    f = _ConsoleNoiseFilter()
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    # prefix match must not leak to similarly named packages
    assert not f.filter(_record("chatterboxish", logging.INFO))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logger: None) -> None:
    log_file = tmp_path / "logs" / "chatterbox.log"
    setup_logging(log_file=log_file, console_level=logging.CRITICAL)

    logging.getLogger("chatterbox.test").debug("hello %s", "file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "DEBUG chatterbox.test: hello file" in log_file.read_text("utf-8")


def test_setup_logging_replaces_handlers(restore_root_logger: None) -> None:
    setup_logging()
    setup_logging()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
