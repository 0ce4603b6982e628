"""Root logger setup."""

import logging

from homecare_api.app.core.logging_config import LOG_FORMAT, setup_logging


def test_configured_root_is_left_alone(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    monkeypatch.setattr(root, "level", logging.WARNING)

    assert setup_logging("DEBUG") is False
    assert root.handlers == [existing]
    assert root.level == logging.WARNING


def test_attaches_console_and_file_handlers(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)
    logfile = tmp_path / "logs" / "api.log"

    try:
        assert setup_logging("debug", str(logfile)) is True
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [logging.StreamHandler, logging.FileHandler]
        assert all(h.formatter._fmt == LOG_FORMAT for h in root.handlers)
        assert logfile.parent.is_dir()
    finally:
        for handler in root.handlers:
            handler.close()


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)

    setup_logging("chatty")
    assert root.level == logging.INFO
