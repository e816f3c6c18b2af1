"""
Logging Configuration

Библиотечный код только получает логгеры через logging.getLogger(__name__);
обработчики ставит точка входа (CLI) через setup_logging.
"""

import logging
from typing import Final

DEFAULT_LOGGER_NAME: Final[str] = "src"
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", logger_name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Настройка логирования для пакета.

    Args:
        level: Уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Имя корневого логгера пакета

    Returns:
        Настроенный логгер

    Raises:
        ValueError: Если уровень неизвестен
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(logger_name)

    # Повторный вызов не должен дублировать вывод
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
