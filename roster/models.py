# roster/models.py
"""Модуль, определяющий основные модели данных: запись студента и данные формы ввода."""
from datetime import date
from typing import Any


class Student:
    """Представляет студента: ФИО, курс, группу, дату рождения и контакты.

    Запись не проверяет себя сама: проверка выполняется в validation.py
    перед добавлением или изменением. Записи, прочитанные из файлов,
    попадают в хранилище без повторной проверки.
    """
    def __init__(self, last_name: str, first_name: str, middle_name: str, course: int,
                 group: str, birth_date: date, email: str, phone: str):
        self.last_name = last_name
        self.first_name = first_name
        self.middle_name = middle_name or ""
        self.course = course
        self.group = group
        self.birth_date = birth_date
        self.email = email
        self.phone = phone

    @property
    def full_name(self) -> str:
        """ФИО одной строкой. Пустое отчество пропускается."""
        parts = [self.last_name, self.first_name, self.middle_name]
        return " ".join(p for p in parts if p)

    def as_tuple(self) -> tuple:
        return (self.last_name, self.first_name, self.middle_name, self.course,
                self.group, self.birth_date, self.email, self.phone)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    # Записи изменяемые, поэтому не хешируются
    __hash__ = None

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return (f"Student(last_name='{self.last_name}', first_name='{self.first_name}', "
                f"course={self.course}, group='{self.group}', birth_date={self.birth_date})")

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        return (f"{self.full_name:<30} | Курс: {self.course:<2} | Группа: {self.group:<8} | "
                f"{self.birth_date:%d.%m.%Y} | {self.email:<25} | {self.phone}")


class StudentForm:
    """Сырые данные формы ввода: все поля строками, дата рождения объектом date."""
    def __init__(self, last_name: str = "", first_name: str = "", middle_name: str = "",
                 course: str = "", group: str = "", birth_date: date = None,
                 email: str = "", phone: str = ""):
        self.last_name = last_name
        self.first_name = first_name
        self.middle_name = middle_name
        self.course = course
        self.group = group
        self.birth_date = birth_date if birth_date is not None else date.today()
        self.email = email
        self.phone = phone

    @classmethod
    def from_student(cls, student: Student) -> "StudentForm":
        """Заполняет форму значениями существующей записи (как при выборе строки в таблице)."""
        return cls(student.last_name, student.first_name, student.middle_name, str(student.course),
                   student.group, student.birth_date, student.email, student.phone)
