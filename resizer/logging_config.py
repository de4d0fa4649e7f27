"""Настройка логирования: все сообщения пользователю идут в stdout без префиксов."""
from __future__ import annotations

import logging
import sys

LOGGER_NAME = "resizer"
LOG_FORMAT = "%(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Ставит на логгер `resizer` один обработчик stdout.

    Прежние обработчики удаляются, чтобы повторные запуски в одном процессе
    не дублировали вывод.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
