"""Root logger configuration."""

import logging

import pytest

from social_media_api.app.core.config import Settings
from social_media_api.app.core.logging_config import setup_logging
from social_media_api.app.main import create_app


@pytest.fixture
def bare_root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    yield root
    for handler in root.handlers:
        handler.close()


def file_handlers(root):
    return [h for h in root.handlers if isinstance(h, logging.FileHandler)]


def test_console_only_by_default(bare_root):
    setup_logging("DEBUG")
    assert len(bare_root.handlers) == 1
    assert file_handlers(bare_root) == []
    assert bare_root.level == logging.DEBUG


def test_logfile_adds_file_handler(bare_root, tmp_path):
    log_path = tmp_path / "app.log"
    setup_logging("INFO", str(log_path))
    (handler,) = file_handlers(bare_root)
    assert handler.baseFilename == str(log_path.resolve())

    logging.getLogger("social_media_api.test").info("hello file")
    handler.flush()
    assert "hello file" in log_path.read_text(encoding="utf-8")


def test_second_call_is_a_no_op(bare_root, tmp_path):
    setup_logging("INFO")
    setup_logging("INFO", str(tmp_path / "late.log"))
    assert len(bare_root.handlers) == 1


def test_create_app_uses_log_file_setting(bare_root, tmp_path):
    log_path = tmp_path / "api.log"
    create_app(Settings(secret_key="s", seed_demo_data=False, log_level="INFO", log_file=str(log_path)))
    assert len(file_handlers(bare_root)) == 1
    assert log_path.exists()
