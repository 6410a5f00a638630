import logging
import coloredlogs
from logging.handlers import RotatingFileHandler

from ..config.settings import settings

LOGGER_NAME = "scene_blueprint_module"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
LOG_FILE_NAME = "blueprint_module.log"
LOG_FILE_MAX_BYTES = 2 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def _file_handler() -> RotatingFileHandler:
    """Rotating file handler that records debug output from every compile and edit."""
    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        settings.LOG_DIR / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding='utf-8'
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(log_level=settings.LOG_LEVEL.upper(), log_to_file=settings.LOG_TO_FILE):
    """
    Colored console logging for the blueprint store, normalizer and compiler.
    Pass log_to_file=False (or set LOG_TO_FILE=false) for tests and one-off runs.
    """
    logger = logging.getLogger(LOGGER_NAME)

    # setup_logging may run again with new settings; start from a clean slate
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(log_level)

    coloredlogs.install(
        level=log_level,
        logger=logger,
        fmt=LOG_FORMAT,
        level_styles={
            'debug': {'color': 'green'},
            'info': {'color': 'cyan'},
            'warning': {'color': 'yellow'},
            'error': {'color': 'red', 'bold': True},
        }
    )

    if log_to_file:
        logger.addHandler(_file_handler())

    return logger

logger = setup_logging()
