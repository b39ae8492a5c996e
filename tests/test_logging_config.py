import logging
from datetime import datetime

import pytest

import faviconkit.logging_config as logging_config


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    touched = [name for names in logging_config.COMPONENT_LOGGERS.values() for name in names]
    saved_components = {name: logging.getLogger(name).level for name in touched}
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_components.items():
        logging.getLogger(name).setLevel(level)


def test_setup_logging_writes_dated_file(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("FAVICON_LOG_DIR", str(tmp_path))

    logging_config.setup_logging(log_file="test.log", console=False)
    logging.getLogger("faviconkit.publisher").info("registered favicon routes")
    for handler in logging.getLogger().handlers:
        handler.flush()

    date_str = datetime.now().strftime("%Y%m%d")
    expected = tmp_path / f"{date_str}_test.log"
    assert expected.exists()
    assert "registered favicon routes" in expected.read_text()


def test_log_dir_follows_env(tmp_path, monkeypatch):
    monkeypatch.setenv("FAVICON_LOG_DIR", str(tmp_path / "custom"))
    assert logging_config.log_dir() == tmp_path / "custom"


def test_unwritable_log_dir_keeps_console(tmp_path, monkeypatch, restore_root_logger):
    blocker = tmp_path / "file"
    blocker.write_text("")
    monkeypatch.setenv("FAVICON_LOG_DIR", str(blocker / "logs"))

    root = logging_config.setup_logging(log_file="test.log", console=True)
    assert [type(h) for h in root.handlers] == [logging.StreamHandler]


def test_render_loggers_follow_their_own_level(monkeypatch, restore_root_logger):
    monkeypatch.setenv("FAVICON_RENDER_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("FAVICON_ROUTES_LOG_LEVEL", raising=False)

    applied = logging_config.configure_component_levels(logging.WARNING)

    assert applied["faviconkit.icon_set"] == logging.DEBUG
    assert applied["faviconkit.image_io"] == logging.DEBUG
    assert applied["faviconkit.publisher"] == logging.WARNING
    assert logging.getLogger("faviconkit.icon_set").isEnabledFor(logging.DEBUG)


def test_get_log_level_from_env(monkeypatch):
    monkeypatch.setenv("FAVICON_LOG_LEVEL", "DEBUG")
    assert logging_config.get_log_level("FAVICON_LOG_LEVEL") == 10


def test_get_log_level_unknown_falls_back(monkeypatch):
    monkeypatch.setenv("FAVICON_LOG_LEVEL", "LOUD")
    assert logging_config.get_log_level("FAVICON_LOG_LEVEL") == logging.INFO
