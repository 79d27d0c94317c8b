# tests/test_main_cli.py
import pytest
from unittest.mock import patch
from roster.main import main_cli
from roster.session import RosterSession

def run_with_input(monkeypatch, answers, session=None):
    """Запускает меню с заранее заданным вводом пользователя."""
    input_sequence = iter(answers)

    def mock_input(prompt=""):
        """Имитация пользовательского ввода."""
        try:
            return next(input_sequence)
        except StopIteration:
            # Ввод закончился: выходим без сохранения, чтобы не зависнуть
            return "0" if prompt.startswith("Выберите") else "н"

    monkeypatch.setattr('builtins.input', mock_input)
    main_cli(session)

def test_cli_load_and_show_students(monkeypatch, capsys, sample_students):
    """Тестирует базовый сценарий: загрузка и отображение студентов."""
    with patch('roster.json_io.load_json', return_value=sample_students) as mock_load:
        run_with_input(monkeypatch, ['6', 'data/test.json', '1', '', '0'])
        mock_load.assert_called_once_with('data/test.json')

    output = capsys.readouterr().out
    assert "Успешно загружено 3 студентов" in output
    assert "Иванов Иван Иванович" in output
    assert "Сидорова Анна Сергеевна" in output
    assert "Петров Петр" in output
    assert "До свидания!" in output
    # После загрузки изменений нет, вопроса о сохранении быть не должно
    assert "несохраненные" not in output

def test_cli_add_student_then_exit_without_saving(monkeypatch, capsys):
    session = RosterSession()
    answers = [
        '2', 'Иванов', 'Иван', 'Иванович', '2', 'ИВТ-21', 'ivanov@yandex.ru', '+7-912-345-67-89', '14.03.2003',
        '0', 'н',
    ]
    run_with_input(monkeypatch, answers, session)

    output = capsys.readouterr().out
    assert "Студент Иванов Иван Иванович успешно добавлен" in output
    assert "Запись №1 добавлена" in output
    assert len(session.store) == 1
    assert session.store[0].course == 2

def test_cli_reports_first_validation_error(monkeypatch, capsys):
    session = RosterSession()
    answers = ['2', 'Иванов', 'Иван', '', '2', 'ИВТ-21', 'iv@yandex.ru', 'bad-phone', '14.03.2003', '0']
    run_with_input(monkeypatch, answers, session)

    output = capsys.readouterr().out
    assert "Ошибка ввода: Некорректный email" in output
    assert "Телефон" not in output
    assert len(session.store) == 0

def test_cli_exit_cancel_then_save(monkeypatch, capsys, sample_students, tmp_path):
    session = RosterSession()
    session.store.replace_all(sample_students)
    filepath = tmp_path / "out.json"
    answers = ['0', 'о', '0', 'д', str(filepath)]
    run_with_input(monkeypatch, answers, session)

    output = capsys.readouterr().out
    assert "Данные успешно сохранены" in output
    assert filepath.exists()
    assert not session.is_modified

def test_cli_edit_and_delete(monkeypatch, capsys, sample_students):
    session = RosterSession()
    session.store.replace_all(sample_students)
    answers = [
        '3', '2', '', '', '', '3', '', '', '', '',
        '4', '1', 'д',
        '4', '9',
        '0', 'н',
    ]
    run_with_input(monkeypatch, answers, session)

    output = capsys.readouterr().out
    assert "Данные студента Петров Петр обновлены" in output
    assert "Студент удален" in output
    assert "не найден" in output
    assert [s.last_name for s in session.store] == ["Петров", "Сидорова"]
    assert session.store[0].course == 3

def test_cli_bad_menu_choice(monkeypatch, capsys):
    run_with_input(monkeypatch, ['42', '0'])
    assert "Неверный выбор" in capsys.readouterr().out

def test_cli_edit_can_clear_middle_name(monkeypatch, capsys, sample_students):
    session = RosterSession()
    session.store.replace_all(sample_students)
    # Отчество очищается вводом "-", остальные поля остаются прежними
    answers = ['3', '1', '', '', '-', '', '', '', '', '', '0', 'н']
    run_with_input(monkeypatch, answers, session)

    output = capsys.readouterr().out
    assert "Данные студента Иванов Иван обновлены" in output
    assert session.store[0].middle_name == ""
    assert session.store[0].last_name == "Иванов"
    assert session.store[0].course == 2

def test_cli_exit_asks_only_when_modified(monkeypatch, capsys, sample_students):
    session = RosterSession()
    session.store.replace_all(sample_students)
    prompts = []
    answers = iter(['0', 'о', '0', 'н'])

    def mock_input(prompt=""):
        prompts.append(prompt)
        return next(answers)

    monkeypatch.setattr('builtins.input', mock_input)
    main_cli(session)

    assert sum("несохраненные изменения" in p for p in prompts) == 2
    assert session.is_modified
