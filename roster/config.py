# roster/config.py
"""Настройки приложения. Часть значений можно переопределить переменными окружения."""
import os
from datetime import date

# --- КОНФИГУРАЦИЯ ---
LOG_LEVEL = os.environ.get("ROSTER_LOG_LEVEL", "INFO").upper()

DEFAULT_JSON_PATH = os.environ.get("ROSTER_JSON_PATH", "students.json")
DEFAULT_CSV_PATH = os.environ.get("ROSTER_CSV_PATH", "students.csv")

# Файлы пишутся без BOM, при чтении BOM допускается
FILE_ENCODING = "utf-8"
READ_ENCODING = "utf-8-sig"

# Границы даты рождения (раньше их задавал виджет выбора даты)
MIN_BIRTH_DATE = date(1991, 12, 25)
CHECK_BIRTH_DATE = True

ALLOWED_EMAIL_DOMAINS = ("yandex.ru", "gmail.com", "icloud.com")

CSV_COLUMNS = ["LastName", "FirstName", "MiddleName", "Course", "Group", "BirthDate", "Email", "Phone"]
CSV_HEADER = ",".join(CSV_COLUMNS)
CSV_DATE_FORMAT = "%d.%m.%Y"
