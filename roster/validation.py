# roster/validation.py
"""Проверка полей формы студента.

Поля проверяются в фиксированном порядке, проверка останавливается на первой
ошибке: пользователь видит одно сообщение за раз.
"""
import re
from datetime import date
from typing import Callable, List, Optional, Tuple

from . import config
from .errors import ValidationError
from .models import Student, StudentForm

EMAIL_RE = re.compile(
    r"^[^@]{3,}@(" + "|".join(re.escape(d) for d in config.ALLOWED_EMAIL_DOMAINS) + r")$",
    re.IGNORECASE,
)
PHONE_RE = re.compile(r"^\+7-\d{3}-\d{3}-\d{2}-\d{2}$", re.ASCII)
COURSE_RE = re.compile(r"^\s*[+-]?(\d+)\s*$", re.ASCII)

# Диапазон 32-битного целого со знаком
COURSE_MIN = -2**31
COURSE_MAX = 2**31 - 1


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_course(text: str) -> int:
    """Разбирает номер курса. Допускаются знак и пробелы по краям."""
    match = COURSE_RE.match(text) if text is not None else None
    if not match:
        raise ValueError(f"'{text}' не является целым числом.")
    # Длинные строки цифр не переводим в int: заведомо вне диапазона
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > len(str(COURSE_MAX)):
        raise ValueError(f"'{text.strip()}' вне допустимого диапазона.")
    value = -int(digits) if text.strip().startswith("-") else int(digits)
    if value < COURSE_MIN or value > COURSE_MAX:
        raise ValueError(f"'{text.strip()}' вне допустимого диапазона.")
    return value


def check_last_name(value: str) -> Optional[str]:
    if _is_blank(value):
        return "Фамилия обязательна для заполнения"
    return None


def check_first_name(value: str) -> Optional[str]:
    if _is_blank(value):
        return "Имя обязательно для заполнения"
    return None


def check_course(value: str) -> Optional[str]:
    if _is_blank(value):
        return "Курс должен быть числом"
    try:
        parse_course(value)
    except ValueError:
        return "Курс должен быть числом"
    return None


def check_group(value: str) -> Optional[str]:
    if _is_blank(value):
        return "Группа обязательна для заполнения"
    return None


def check_email(value: str) -> Optional[str]:
    if _is_blank(value) or not EMAIL_RE.fullmatch(value):
        domains = ", ".join(config.ALLOWED_EMAIL_DOMAINS)
        return f"Некорректный email. Допустимые домены: {domains}"
    return None


def check_phone(value: str) -> Optional[str]:
    if _is_blank(value) or not PHONE_RE.fullmatch(value):
        return "Телефон должен быть в формате +7-XXX-XXX-XX-XX"
    return None


def check_birth_date(value: date, today: Optional[date] = None) -> Optional[str]:
    today = today or date.today()
    if value is None or value < config.MIN_BIRTH_DATE or value > today:
        return (f"Дата рождения должна быть в диапазоне "
                f"{config.MIN_BIRTH_DATE:%d.%m.%Y} - {today:%d.%m.%Y}")
    return None


# Порядок важен: сообщается только первая ошибка
FIELD_CHECKS: List[Tuple[str, Callable[[str], Optional[str]]]] = [
    ("last_name", check_last_name),
    ("first_name", check_first_name),
    ("course", check_course),
    ("group", check_group),
    ("email", check_email),
    ("phone", check_phone),
]


class ValidationResult:
    """Результат проверки формы: успех или первое непрошедшее поле с причиной."""
    def __init__(self, field: Optional[str] = None, reason: Optional[str] = None):
        self.field = field
        self.reason = reason

    @property
    def is_valid(self) -> bool:
        return self.field is None

    def raise_for_error(self):
        """Выбрасывает ValidationError, если проверка не пройдена."""
        if not self.is_valid:
            raise ValidationError(self.field, self.reason)

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(ok)"
        return f"ValidationResult(field='{self.field}', reason='{self.reason}')"


def validate(candidate: StudentForm, today: Optional[date] = None) -> ValidationResult:
    """Проверяет форму по порядку полей и останавливается на первой ошибке."""
    for field, check in FIELD_CHECKS:
        reason = check(getattr(candidate, field))
        if reason is not None:
            return ValidationResult(field, reason)

    if config.CHECK_BIRTH_DATE:
        reason = check_birth_date(candidate.birth_date, today)
        if reason is not None:
            return ValidationResult("birth_date", reason)

    return ValidationResult()


def build_student(candidate: StudentForm, today: Optional[date] = None) -> Student:
    """Проверяет форму и создает из нее запись студента."""
    validate(candidate, today).raise_for_error()
    return Student(
        last_name=candidate.last_name,
        first_name=candidate.first_name,
        middle_name=candidate.middle_name,
        course=parse_course(candidate.course),
        group=candidate.group,
        birth_date=candidate.birth_date,
        email=candidate.email,
        phone=candidate.phone,
    )
