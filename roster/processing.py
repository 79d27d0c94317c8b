# roster/processing.py
"""Модуль для обработки данных: статистика по курсам и группам, сортировка."""
from typing import Iterable, List, Tuple

import pandas as pd

from .models import Student

SORT_KEYS = {
    'name': lambda s: (s.last_name, s.first_name, s.middle_name),
    'course': lambda s: (s.course, s.last_name),
    'group': lambda s: (s.group, s.last_name),
    'birth_date': lambda s: s.birth_date,
}


def _count_by(values: list) -> List[Tuple]:
    """Количество повторений каждого значения, по возрастанию значения."""
    if not values:
        return []
    counts = pd.Series(values, dtype=object).value_counts().sort_index()
    return [(key, int(count)) for key, count in counts.items()]


def count_by_course(students: Iterable[Student]) -> List[Tuple[int, int]]:
    """Число студентов на каждом курсе, курсы по возрастанию."""
    return [(int(course), count) for course, count in _count_by([s.course for s in students])]


def count_by_group(students: Iterable[Student]) -> List[Tuple[str, int]]:
    """Число студентов в каждой группе, группы в лексикографическом порядке."""
    return [(str(group), count) for group, count in _count_by([s.group for s in students])]


def format_statistics(students: Iterable[Student]) -> str:
    """Текст статистики в том виде, в каком его показывает окно «Статистика»."""
    students = list(students)
    lines = ["Статистика по курсам:"]
    for course, count in count_by_course(students):
        lines.append(f"Курс {course}: {count} студентов")

    lines.append("")
    lines.append("Статистика по группам:")
    for group, count in count_by_group(students):
        lines.append(f"Группа {group}: {count} студентов")
    return "\n".join(lines)


def sort_students(students: Iterable[Student], by: str) -> List[Student]:
    """Возвращает отсортированную копию списка. Само хранилище не меняется."""
    if by not in SORT_KEYS:
        raise ValueError(f"Неверный ключ для сортировки. Доступно: {', '.join(SORT_KEYS)}.")
    return sorted(students, key=SORT_KEYS[by])
