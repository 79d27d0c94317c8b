# roster/session.py
"""Сеанс работы со списком студентов.

Сеанс владеет хранилищем, флагом несохраненных изменений и путем к текущему
JSON-файлу. Методы соответствуют кнопкам формы: добавить, изменить, удалить,
сохранить, загрузить, экспорт, импорт, статистика.
"""
import logging
from datetime import date
from typing import Optional

from . import csv_io, json_io, processing
from .errors import FileProcessingError
from .models import Student, StudentForm
from .store import Position, StoreEvent, StudentStore
from .validation import build_student

logger = logging.getLogger(__name__)


class RosterSession:
    def __init__(self, store: Optional[StudentStore] = None):
        self.store = store if store is not None else StudentStore()
        self.current_file_path: Optional[str] = None
        self._modified = False
        self.store.subscribe(self._on_store_changed)

    def _on_store_changed(self, event: StoreEvent):
        self._modified = True

    @property
    def is_modified(self) -> bool:
        """Есть ли изменения, не сохраненные в JSON (о них спрашивают перед выходом)."""
        return self._modified

    def add_student(self, form: StudentForm, today: Optional[date] = None) -> Student:
        student = build_student(form, today)
        self.store.add(student)
        return student

    def edit_student(self, position: Position, form: StudentForm, today: Optional[date] = None) -> Student:
        student = build_student(form, today)
        self.store.update(position, student)
        return student

    def delete_student(self, position: Position) -> Student:
        return self.store.remove(position)

    def save(self, filepath: Optional[str] = None):
        """Сохраняет список в JSON. Без пути пишет в текущий файл."""
        filepath = filepath or self.current_file_path
        if not filepath:
            raise FileProcessingError("Не указан файл для сохранения.")
        json_io.save_json(filepath, self.store.all())
        self.current_file_path = str(filepath)
        self._modified = False

    def load(self, filepath: str):
        """Загружает список из JSON. При ошибке текущий список не меняется."""
        students = json_io.load_json(filepath)
        self.store.replace_all(students)
        self.current_file_path = str(filepath)
        self._modified = False

    def export_csv(self, filepath: str):
        csv_io.export_csv(filepath, self.store.all())

    def import_csv(self, filepath: str):
        """Импортирует список из CSV, заменяя текущий. Результат считается несохраненным."""
        students = csv_io.import_csv(filepath)
        self.store.replace_all(students)

    def statistics(self) -> str:
        return processing.format_statistics(self.store.all())
