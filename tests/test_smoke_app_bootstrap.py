from __future__ import annotations

import logging

import pytest


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_logging_setup_imports(tmp_path, restore_root_logging) -> None:
    # Import should be side-effect free and not require GUI.
    from templateapp.core.observability.logging_config import setup_logging

    setup_logging(level="INFO", state_dir=tmp_path)
    logging.getLogger(__name__).info("smoke", extra={"theme": "dark"})

    assert (tmp_path / "logs" / "app.log").exists()


def test_json_formatter_includes_theme_extra() -> None:
    import json

    from templateapp.core.observability.logging_config import _JsonFormatter

    record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)
    record.theme = "light"
    payload = json.loads(_JsonFormatter().format(record))

    assert payload["msg"] == "hello"
    assert payload["theme"] == "light"


def test_container_can_be_constructed_headless() -> None:
    # The container and broadcaster are pure Python until Qt scheduling is requested.
    from templateapp.ui.infrastructure.di import Container

    container = Container(schedule=lambda fn: fn())

    assert container.theme_broadcaster is container.theme_broadcaster
    assert container.theme_broadcaster.listener_count == 0


def test_setup_logging_installs_stream_and_file_handlers(tmp_path, restore_root_logging) -> None:
    from logging.handlers import RotatingFileHandler

    from templateapp.core.observability.logging_config import setup_logging

    setup_logging(level="DEBUG", log_to_file=True, state_dir=tmp_path)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert sum(isinstance(h, RotatingFileHandler) for h in root.handlers) == 1
