# roster/csv_io.py
"""Экспорт и импорт списка студентов в CSV.

Формат повторяет исходное приложение: поля соединяются запятой без кавычек
и экранирования. Запятая внутри поля сдвигает колонки строки; это известное
ограничение формата, а не ошибка разбора.
"""
import csv
import io
import logging
import re
from datetime import datetime, date
from typing import Iterable, List

from . import config
from .errors import ParseError
from .io_utils import read_text, write_text
from .models import Student
from .validation import parse_course

logger = logging.getLogger(__name__)

SOURCE = "CSV"
FIELD_COUNT = len(config.CSV_COLUMNS)
DATE_RE = re.compile(r"^\d{2}\.\d{2}\.\d{4}$", re.ASCII)


def student_to_row(student: Student) -> str:
    return ",".join([
        student.last_name,
        student.first_name,
        student.middle_name,
        str(student.course),
        student.group,
        student.birth_date.strftime(config.CSV_DATE_FORMAT),
        student.email,
        student.phone,
    ])


def serialize_csv(students: Iterable[Student]) -> str:
    """Заголовок и по одной строке на студента."""
    lines = [config.CSV_HEADER] + [student_to_row(s) for s in students]
    return "\n".join(lines) + "\n"


def parse_birth_date(value: str) -> date:
    """Строгий разбор даты в формате дд.мм.гггг."""
    if not DATE_RE.match(value):
        raise ValueError(f"дата '{value}' не в формате дд.мм.гггг")
    try:
        return datetime.strptime(value, config.CSV_DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"несуществующая дата '{value}'")


def row_to_student(row: List[str]) -> Student:
    last_name, first_name, middle_name, course, group, birth_date, email, phone = row[:FIELD_COUNT]
    return Student(
        last_name=last_name,
        first_name=first_name,
        middle_name=middle_name,
        course=parse_course(course),
        group=group,
        birth_date=parse_birth_date(birth_date),
        email=email,
        phone=phone,
    )


def parse_csv(text: str) -> List[Student]:
    """Разбирает CSV-текст в список студентов.

    Строки могут разделяться \n, \r\n или одиночным \r.
    Первая строка всегда считается заголовком. Строки, где меньше восьми
    значений, пропускаются без ошибки; лишние значения отбрасываются.
    Некорректный курс или дата в принятой строке прерывают весь импорт.
    """
    students = []
    reader = csv.reader(io.StringIO(text, newline=None), delimiter=',', quoting=csv.QUOTE_NONE)

    try:
        for line_num, row in enumerate(reader, start=1):
            if line_num == 1:
                continue
            if len(row) < FIELD_COUNT:
                logger.debug("Строка %d пропущена: %d значений вместо %d", line_num, len(row), FIELD_COUNT)
                continue
            try:
                students.append(row_to_student(row))
            except ValueError as e:
                raise ParseError(SOURCE, str(e), line=line_num)
    except csv.Error as e:
        raise ParseError(SOURCE, str(e), line=reader.line_num)

    return students


def export_csv(filepath, students: Iterable[Student]):
    """Экспортирует список студентов в CSV-файл."""
    students = list(students)
    write_text(filepath, serialize_csv(students))
    logger.info("Экспортировано %d записей в %s", len(students), filepath)


def import_csv(filepath) -> List[Student]:
    """Импортирует список студентов из CSV-файла."""
    students = parse_csv(read_text(filepath))
    logger.info("Импортировано %d записей из %s", len(students), filepath)
    return students
