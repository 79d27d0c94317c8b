# roster/json_io.py
"""Сохранение и загрузка списка студентов в формате JSON.

Файл содержит массив объектов с полями LastName, FirstName, MiddleName,
Course, Group, BirthDate, Email, Phone. BirthDate пишется как дата-время
ISO-8601 на полночь, при чтении допускается и просто дата.
"""
import json
import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List

from .errors import ParseError
from .io_utils import read_text, write_text
from .models import Student
from .validation import COURSE_MAX, COURSE_MIN

logger = logging.getLogger(__name__)

SOURCE = "JSON"

STRING_FIELDS = [
    ("LastName", "last_name"),
    ("FirstName", "first_name"),
    ("Group", "group"),
    ("Email", "email"),
    ("Phone", "phone"),
]


def student_to_dict(student: Student) -> Dict[str, Any]:
    return {
        "LastName": student.last_name,
        "FirstName": student.first_name,
        "MiddleName": student.middle_name,
        "Course": student.course,
        "Group": student.group,
        "BirthDate": datetime.combine(student.birth_date, datetime.min.time()).isoformat(),
        "Email": student.email,
        "Phone": student.phone,
    }


def serialize(students: Iterable[Student]) -> str:
    """Превращает список студентов в JSON-текст."""
    return json.dumps([student_to_dict(s) for s in students], ensure_ascii=False, indent=2)


def _parse_birth_date(value: Any, item_no: int) -> date:
    if not isinstance(value, str):
        raise ParseError(SOURCE, f"запись {item_no}: поле BirthDate должно быть строкой")
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise ParseError(SOURCE, f"запись {item_no}: некорректная дата '{value}'")


def student_from_dict(item: Any, item_no: int) -> Student:
    """Строит запись из объекта JSON, проверяя типы полей."""
    if not isinstance(item, dict):
        raise ParseError(SOURCE, f"запись {item_no}: ожидается объект")

    values = {}
    for key, attr in STRING_FIELDS:
        value = item.get(key)
        if not isinstance(value, str):
            raise ParseError(SOURCE, f"запись {item_no}: поле {key} отсутствует или не является строкой")
        values[attr] = value

    middle_name = item.get("MiddleName")
    if middle_name is not None and not isinstance(middle_name, str):
        raise ParseError(SOURCE, f"запись {item_no}: поле MiddleName не является строкой")

    course = item.get("Course")
    # bool является подклассом int, но курсом быть не может
    if isinstance(course, bool) or not isinstance(course, int):
        raise ParseError(SOURCE, f"запись {item_no}: поле Course должно быть целым числом")
    if course < COURSE_MIN or course > COURSE_MAX:
        raise ParseError(SOURCE, f"запись {item_no}: значение Course {course} вне допустимого диапазона")

    return Student(
        middle_name=middle_name or "",
        course=course,
        birth_date=_parse_birth_date(item.get("BirthDate"), item_no),
        **values,
    )


def deserialize(text: str) -> List[Student]:
    """Разбирает JSON-текст в список студентов. Любая ошибка прерывает разбор целиком."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(SOURCE, f"некорректный JSON: {e.msg}", line=e.lineno)
    except ValueError as e:
        raise ParseError(SOURCE, f"некорректный JSON: {e}")
    except RecursionError:
        raise ParseError(SOURCE, "слишком глубокая вложенность")

    if not isinstance(data, list):
        raise ParseError(SOURCE, "ожидается массив записей")

    return [student_from_dict(item, i) for i, item in enumerate(data, start=1)]


def save_json(filepath, students: Iterable[Student]):
    """Сохраняет список студентов в JSON-файл."""
    students = list(students)
    write_text(filepath, serialize(students))
    logger.info("Сохранено %d записей в %s", len(students), filepath)


def load_json(filepath) -> List[Student]:
    """Загружает список студентов из JSON-файла."""
    students = deserialize(read_text(filepath))
    logger.info("Загружено %d записей из %s", len(students), filepath)
    return students
