# roster/store.py
"""Хранилище записей: упорядоченный список студентов текущего сеанса.

Хранилище не проверяет записи, это делает вызывающий код. Каждое изменение
рассылает подписчикам событие StoreEvent, по которому интерфейс
перерисовывает таблицу.
"""
import logging
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from .errors import StudentNotFoundError
from .models import Student

logger = logging.getLogger(__name__)

Position = Union[int, Student]


class ChangeKind(Enum):
    """Тип изменения хранилища."""
    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"
    REPLACED = "replaced"


class StoreEvent:
    """Событие изменения: тип, позиция и затронутая запись (для REPLACED позиция и запись пусты)."""
    def __init__(self, kind: ChangeKind, index: Optional[int] = None, record: Optional[Student] = None):
        self.kind = kind
        self.index = index
        self.record = record

    def __repr__(self) -> str:
        return f"StoreEvent(kind={self.kind.value}, index={self.index})"


Listener = Callable[[StoreEvent], None]


class StudentStore:
    """Упорядоченная коллекция студентов с подпиской на изменения."""

    def __init__(self, records: Iterable[Student] = ()):
        self._records: List[Student] = list(records)
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener):
        """Регистрирует обработчик событий изменения."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: StoreEvent):
        for listener in list(self._listeners):
            listener(event)

    def _resolve(self, position: Position) -> int:
        """Переводит индекс или ссылку на запись в индекс списка."""
        if isinstance(position, Student):
            # Ищем именно этот объект, а не равную ему запись
            for i, record in enumerate(self._records):
                if record is position:
                    return i
            raise StudentNotFoundError(f"Запись {position!r} отсутствует в списке.")

        if isinstance(position, bool) or not isinstance(position, int):
            raise StudentNotFoundError(f"Недопустимая позиция записи: {position!r}.")
        if position < 0 or position >= len(self._records):
            raise StudentNotFoundError(f"Студент с индексом {position} не найден.")
        return position

    def add(self, record: Student) -> int:
        """Добавляет запись в конец списка и возвращает ее индекс."""
        self._records.append(record)
        index = len(self._records) - 1
        logger.debug("Добавлена запись #%d: %r", index, record)
        self._notify(StoreEvent(ChangeKind.ADDED, index, record))
        return index

    def update(self, position: Position, record: Student) -> int:
        """Заменяет запись на указанной позиции новой."""
        index = self._resolve(position)
        self._records[index] = record
        logger.debug("Изменена запись #%d: %r", index, record)
        self._notify(StoreEvent(ChangeKind.UPDATED, index, record))
        return index

    def remove(self, position: Position) -> Student:
        """Удаляет запись на указанной позиции и возвращает ее."""
        index = self._resolve(position)
        record = self._records.pop(index)
        logger.debug("Удалена запись #%d: %r", index, record)
        self._notify(StoreEvent(ChangeKind.REMOVED, index, record))
        return record

    def replace_all(self, records: Iterable[Student]):
        """Очищает список и заполняет его заново (загрузка и импорт)."""
        self._records = list(records)
        logger.debug("Список заменен целиком: %d записей", len(self._records))
        self._notify(StoreEvent(ChangeKind.REPLACED))

    def all(self) -> Tuple[Student, ...]:
        """Все записи в порядке добавления (только для чтения)."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Student]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> Student:
        return self._records[self._resolve(index)]
