"""
Настройка журнала
Подключает обработчики к логгеру пакета для консольного инструмента.
"""
import logging
import sys
from typing import Optional

from skybox_slicer.config import LOG_DATE_FORMAT, LOG_FORMAT


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Настраивает логгер пространства имён 'skybox_slicer'.

    Args:
        level: Уровень журнала (logging.DEBUG, logging.INFO, ...).
        log_file: Необязательный путь к файлу журнала.
    """
    logger = logging.getLogger("skybox_slicer")
    logger.setLevel(level)

    # повторный вызов main() не должен дублировать записи
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # stderr: записи журнала не смешиваются с вопросами на stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Журнал настроен.")
