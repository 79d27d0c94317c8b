# roster/io_utils.py
"""Модуль для операций ввода/вывода: чтение и запись файлов целиком."""
import logging

from . import config
from .errors import FileProcessingError

logger = logging.getLogger(__name__)


def read_text(filepath) -> str:
    """Читает файл целиком. BOM в начале файла пропускается."""
    try:
        with open(filepath, mode='r', encoding=config.READ_ENCODING, newline='') as file:
            return file.read()
    except FileNotFoundError:
        logger.error("Файл не найден: %s", filepath)
        raise FileProcessingError(f"Файл не найден по пути: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Не удалось прочитать %s: %s", filepath, e)
        raise FileProcessingError(f"Не удалось прочитать файл {filepath}: {e}")


def write_text(filepath, text: str):
    """Записывает текст в файл целиком, заменяя прежнее содержимое."""
    try:
        with open(filepath, mode='w', encoding=config.FILE_ENCODING, newline='') as file:
            file.write(text)
    except OSError as e:
        logger.error("Не удалось записать %s: %s", filepath, e)
        raise FileProcessingError(f"Ошибка записи в файл {filepath}: {e}")
