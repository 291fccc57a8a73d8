from __future__ import annotations

import logging
from pathlib import Path

import pytest

from quiz_content_api.app.core.logging_config import setup_logging


def bare_root_logger(monkeypatch: pytest.MonkeyPatch) -> logging.Logger:
    # pytest attaches its capture handlers to the root logger for the test
    # call, so they have to be detached inside the test body.
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


def test_setup_logging_adds_console_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    root = bare_root_logger(monkeypatch)
    setup_logging("debug")

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_setup_logging_with_log_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    root = bare_root_logger(monkeypatch)
    log_file = tmp_path / "api.log"
    setup_logging("INFO", str(log_file))

    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    logging.getLogger("quiz_content_api.test").info("hello")
    file_handlers[0].flush()
    assert "[INFO] quiz_content_api.test: hello" in log_file.read_text(encoding="utf-8")
    file_handlers[0].close()


def test_setup_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    root = bare_root_logger(monkeypatch)
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_setup_logging_unknown_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    root = bare_root_logger(monkeypatch)
    setup_logging("chatty")
    assert root.level == logging.INFO


def test_setup_logging_creates_log_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    root = bare_root_logger(monkeypatch)
    log_file = tmp_path / "logs" / "nested" / "api.log"

    setup_logging("INFO", str(log_file))

    assert log_file.parent.is_dir()
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()


def test_setup_logging_routes_uvicorn_loggers_to_root(monkeypatch: pytest.MonkeyPatch) -> None:
    bare_root_logger(monkeypatch)
    uvicorn_error = logging.getLogger("uvicorn.error")
    monkeypatch.setattr(uvicorn_error, "handlers", [logging.StreamHandler()])
    monkeypatch.setattr(uvicorn_error, "propagate", False)

    setup_logging("INFO")

    assert uvicorn_error.handlers == []
    assert uvicorn_error.propagate is True
