# roster/errors.py
"""Модуль для определения пользовательских исключений приложения."""
from typing import Optional


class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass


class ValidationError(StudentAppError):
    """Поле формы не прошло проверку. Хранит имя поля и причину."""

    def __init__(self, field: str, reason: str):
        super().__init__(reason)
        self.field = field
        self.reason = reason


class ParseError(StudentAppError):
    """Некорректный текст JSON или CSV. Загрузка прерывается целиком."""

    def __init__(self, source: str, detail: str, line: Optional[int] = None):
        self.source = source
        self.detail = detail
        self.line = line
        where = f"{source}, строка {line}" if line is not None else source
        super().__init__(f"Ошибка разбора ({where}): {detail}")


class FileProcessingError(StudentAppError):
    """Исключение, связанное с ошибками файловых операций."""
    pass


class StudentNotFoundError(StudentAppError):
    """Исключение, когда студент по заданной позиции не найден."""
    pass
