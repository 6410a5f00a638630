"""Tests for the module logger setup."""

from logging.handlers import RotatingFileHandler

from blueprint_module.app.utils.logging import LOGGER_NAME, setup_logging


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def test_console_only_when_file_logging_disabled():
    logger = setup_logging(log_level="DEBUG", log_to_file=False)
    assert logger.name == LOGGER_NAME
    assert logger.handlers
    assert _file_handlers(logger) == []


def test_file_handler_writes_to_log_dir(tmp_path, monkeypatch):
    from blueprint_module.app.config.settings import settings

    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    logger = setup_logging(log_level="INFO", log_to_file=True)
    try:
        [handler] = _file_handlers(logger)
        assert handler.baseFilename.startswith(str(tmp_path / "logs"))
    finally:
        for handler in _file_handlers(logger):
            handler.close()
        setup_logging(log_to_file=False)


def test_repeated_setup_does_not_stack_handlers():
    first = len(setup_logging(log_to_file=False).handlers)
    second = len(setup_logging(log_to_file=False).handlers)
    assert first == second
