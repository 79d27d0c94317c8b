# roster/main.py
"""Главный модуль, реализующий консольный интерфейс (CLI) для управления студентами."""
import logging
import traceback
from typing import Optional

from . import config, errors, processing
from .csv_io import parse_birth_date
from .models import Student, StudentForm
from .session import RosterSession
from .store import ChangeKind, StoreEvent

FIELD_PROMPTS = [
    ("last_name", "Фамилия"),
    ("first_name", "Имя"),
    ("middle_name", "Отчество"),
    ("course", "Курс"),
    ("group", "Группа"),
    ("email", "Email"),
    ("phone", "Телефон (+7-XXX-XXX-XX-XX)"),
]

YES_ANSWERS = ('д', 'да', 'y', 'yes')

# Ввод при изменении записи, который очищает поле (например, отчество)
CLEAR_MARK = "-"

CHANGE_LABELS = {
    ChangeKind.ADDED: "добавлена",
    ChangeKind.UPDATED: "изменена",
    ChangeKind.REMOVED: "удалена",
}


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("   УПРАВЛЕНИЕ СТУДЕНТАМИ")
    print("="*30)
    print("1. Показать всех студентов")
    print("2. Добавить студента")
    print("3. Изменить студента")
    print("4. Удалить студента")
    print("5. Сохранить в JSON")
    print("6. Загрузить из JSON")
    print("7. Экспорт в CSV")
    print("8. Импорт из CSV")
    print("9. Статистика")
    print("0. Выход")
    print("="*30)


def print_change(event: StoreEvent):
    """Сообщает об изменении списка (вместо перерисовки таблицы)."""
    if event.kind == ChangeKind.REPLACED:
        print("ℹ️ Список студентов обновлен.")
    else:
        print(f"ℹ️ Запись №{event.index + 1} {CHANGE_LABELS[event.kind]}.")


def print_students(session: RosterSession, sort_key: str = ""):
    students = session.store.all()
    if not students:
        print("ℹ️ Список студентов пуст.")
        return

    if sort_key:
        # Номера остаются номерами в исходном списке
        positions = {id(s): i for i, s in enumerate(students, start=1)}
        numbered = [(positions[id(s)], s) for s in processing.sort_students(students, sort_key)]
    else:
        numbered = list(enumerate(students, start=1))

    print("\n--- Список студентов ---")
    for number, student in numbered:
        print(f"{number:>3}. {student}")


def read_path(prompt: str, default: str) -> str:
    filepath = input(f"{prompt} [{default}]: ").strip().strip('"').strip("'")
    return filepath or default


def read_form(current: Optional[Student] = None) -> StudentForm:
    """Запрашивает поля формы.

    При изменении пустой ввод оставляет прежнее значение, а CLEAR_MARK очищает поле.
    """
    form = StudentForm.from_student(current) if current else StudentForm()
    for field, label in FIELD_PROMPTS:
        shown = f" [{getattr(form, field)}]" if current else ""
        value = input(f"{label}{shown}: ")
        if current and value.strip() == CLEAR_MARK:
            setattr(form, field, "")
        elif value or not current:
            setattr(form, field, value)

    shown = f" [{form.birth_date:%d.%m.%Y}]" if current else ""
    value = input(f"Дата рождения (дд.мм.гггг){shown}: ").strip()
    if value:
        form.birth_date = parse_birth_date(value)
    elif not current:
        raise ValueError("дата рождения обязательна")
    return form


def read_position() -> int:
    number = int(input("Введите номер студента: "))
    return number - 1


def confirm_exit(session: RosterSession) -> bool:
    """Спрашивает о сохранении несохраненных изменений. False означает отмену выхода."""
    if not session.is_modified:
        return True

    answer = input("Есть несохраненные изменения. Сохранить перед выходом? (д/н/о - отмена): ").strip().lower()
    if answer in YES_ANSWERS:
        filepath = session.current_file_path
        if not filepath:
            filepath = input("Введите путь к файлу для сохранения: ").strip().strip('"').strip("'")
            if not filepath:
                return False
        session.save(filepath)
        print(f"✅ Данные успешно сохранены в {filepath}.")
        return True
    if answer in ('н', 'нет', 'n', 'no'):
        return True
    return False


def main_cli(session: Optional[RosterSession] = None):
    """Основной цикл консольного приложения."""
    session = session if session is not None else RosterSession()
    session.store.subscribe(print_change)

    while True:
        print_menu()
        choice = input("Выберите пункт меню: ").strip()

        try:
            if choice == '1':
                sort_key = input("Сортировка (name, course, group, birth_date или Enter): ").strip().lower()
                try:
                    print_students(session, sort_key)
                except ValueError as ve:
                    print(f"❌ Ошибка сортировки: {ve}")

            elif choice == '2':
                try:
                    student = session.add_student(read_form())
                    print(f"✅ Студент {student.full_name} успешно добавлен.")
                except ValueError as e:
                    print(f"❌ Ошибка данных: {e}")

            elif choice == '3':
                try:
                    position = read_position()
                    print(f"Enter - оставить значение, '{CLEAR_MARK}' - очистить поле.")
                    form = read_form(session.store[position])
                    student = session.edit_student(position, form)
                    print(f"✅ Данные студента {student.full_name} обновлены.")
                except ValueError as e:
                    print(f"❌ Ошибка данных: {e}")

            elif choice == '4':
                try:
                    position = read_position()
                    student = session.store[position]
                    answer = input(f"Вы уверены, что хотите удалить студента {student.full_name}? (д/н): ")
                    if answer.strip().lower() in YES_ANSWERS:
                        session.delete_student(position)
                        print("✅ Студент удален.")
                except ValueError:
                    print("❌ Ошибка ввода: номер должен быть числом.")

            elif choice == '5':
                filepath = read_path("Введите путь к файлу для сохранения",
                                     session.current_file_path or config.DEFAULT_JSON_PATH)
                session.save(filepath)
                print(f"✅ Данные успешно сохранены в {filepath}.")

            elif choice == '6':
                filepath = read_path("Введите путь к файлу для загрузки", config.DEFAULT_JSON_PATH)
                session.load(filepath)
                print(f"✅ Успешно загружено {len(session.store)} студентов.")

            elif choice == '7':
                filepath = read_path("Введите путь к файлу для экспорта", config.DEFAULT_CSV_PATH)
                session.export_csv(filepath)
                print(f"✅ Данные успешно экспортированы в {filepath}.")

            elif choice == '8':
                filepath = read_path("Введите путь к файлу для импорта", config.DEFAULT_CSV_PATH)
                session.import_csv(filepath)
                print(f"✅ Успешно импортировано {len(session.store)} студентов.")

            elif choice == '9':
                print()
                print(session.statistics())

            elif choice == '0':
                if confirm_exit(session):
                    print("👋 До свидания!")
                    break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 9.")

        except errors.ValidationError as e:
            print(f"❌ Ошибка ввода: {e.reason}")
        except errors.StudentAppError as e:
            print(f"❌ Ошибка: {e}")
        except Exception as e:
            logging.getLogger(__name__).exception("Непредвиденная ошибка")
            print(f"❌ Произошла непредвиденная ошибка: {e}")

    session.store.unsubscribe(print_change)


def main():
    """Точка входа консольного скрипта."""
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        main_cli()
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()


if __name__ == '__main__':
    main()
