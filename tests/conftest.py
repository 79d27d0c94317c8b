# tests/conftest.py
import pytest
from datetime import date
from typing import List
from roster.models import Student, StudentForm

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("Иванов", "Иван", "Иванович", 2, "ИВТ-21", date(2003, 3, 14), "ivanov@yandex.ru", "+7-912-345-67-89"),
        Student("Петров", "Петр", "", 1, "ПМИ-11", date(2005, 11, 2), "petrov@gmail.com", "+7-900-111-22-33"),
        Student("Сидорова", "Анна", "Сергеевна", 2, "ИВТ-22", date(2002, 7, 30), "sidorova@icloud.com", "+7-999-000-11-22"),
    ]

@pytest.fixture
def valid_form() -> StudentForm:
    """Корректно заполненная форма ввода."""
    return StudentForm(
        last_name="Котова",
        first_name="Анна",
        middle_name="Павловна",
        course="3",
        group="БИ-31",
        birth_date=date(2001, 5, 20),
        email="kotova@gmail.com",
        phone="+7-123-456-78-90",
    )
