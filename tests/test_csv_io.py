# tests/test_csv_io.py
import logging
import pytest
from datetime import date
from roster import config
from roster.errors import ParseError, FileProcessingError
from roster.csv_io import serialize_csv, parse_csv, export_csv, import_csv

VALID_ROW = "Орлов,Олег,,1,А-1,01.09.2004,orlov@gmail.com,+7-000-000-00-00"

def test_serialize_layout(sample_students):
    lines = serialize_csv(sample_students).splitlines()
    assert lines[0] == config.CSV_HEADER
    assert lines[2] == "Петров,Петр,,1,ПМИ-11,02.11.2005,petrov@gmail.com,+7-900-111-22-33"
    assert len(lines) == 4

def test_csv_roundtrip(sample_students):
    assert parse_csv(serialize_csv(sample_students)) == sample_students

def test_file_roundtrip(sample_students, tmp_path):
    """Тестирует полный цикл: экспорт в CSV и импорт обратно."""
    filepath = tmp_path / "students.csv"
    export_csv(filepath, sample_students)
    read_students = import_csv(filepath)
    assert len(read_students) == len(sample_students)
    for original, read in zip(sample_students, read_students):
        assert original.birth_date == read.birth_date
        assert original == read

def test_first_line_is_always_skipped():
    # Заголовка нет: первая строка с данными все равно пропускается
    text = VALID_ROW + "\n" + VALID_ROW.replace("Орлов", "Волков") + "\n"
    students = parse_csv(text)
    assert [s.last_name for s in students] == ["Волков"]

def test_short_rows_are_dropped(caplog):
    caplog.set_level(logging.DEBUG, logger="roster.csv_io")
    text = "\n".join([
        config.CSV_HEADER,
        "Короткая,строка,1",
        "",
        VALID_ROW,
        "не,число,,x",
    ])
    students = parse_csv(text)
    assert len(students) == 1
    assert students[0].birth_date == date(2004, 9, 1)
    assert "пропущена" in caplog.text

def test_extra_values_are_ignored():
    students = parse_csv(config.CSV_HEADER + "\n" + VALID_ROW + ",лишнее,еще\n")
    assert students[0].phone == "+7-000-000-00-00"

def test_comma_in_field_shifts_columns():
    # Запятая внутри поля не экранируется и ломает строку
    text = config.CSV_HEADER + "\n" + 'Орлов,"Олег, мл.",,1,А-1,01.09.2004,orlov@gmail.com,+7-000-000-00-00\n'
    with pytest.raises(ParseError):
        parse_csv(text)

@pytest.mark.parametrize("row", [
    "Орлов,Олег,,первый,А-1,01.09.2004,orlov@gmail.com,+7-000-000-00-00",
    "Орлов,Олег,,1,А-1,1.9.2004,orlov@gmail.com,+7-000-000-00-00",
    "Орлов,Олег,,1,А-1,2004-09-01,orlov@gmail.com,+7-000-000-00-00",
    "Орлов,Олег,,1,А-1,31.02.2004,orlov@gmail.com,+7-000-000-00-00",
])
def test_bad_course_or_date_aborts_import(row):
    text = "\n".join([config.CSV_HEADER, VALID_ROW, row])
    with pytest.raises(ParseError) as exc_info:
        parse_csv(text)
    assert exc_info.value.source == "CSV"
    assert exc_info.value.line == 3

def test_parsed_rows_are_not_validated():
    row = "Орлов,Олег,,1,А-1,01.09.2004,плохой-email,123"
    [student] = parse_csv(config.CSV_HEADER + "\n" + row)
    assert student.email == "плохой-email"

def test_windows_line_endings(tmp_path):
    filepath = tmp_path / "win.csv"
    filepath.write_bytes((config.CSV_HEADER + "\r\n" + VALID_ROW + "\r\n").encode("utf-8-sig"))
    [student] = import_csv(filepath)
    assert student.phone == "+7-000-000-00-00"

def test_missing_file(tmp_path):
    with pytest.raises(FileProcessingError):
        import_csv(tmp_path / "nope.csv")

def test_bare_carriage_return_line_endings():
    text = config.CSV_HEADER + "\r" + VALID_ROW + "\r" + VALID_ROW.replace("Орлов", "Волков")
    students = parse_csv(text)
    assert [s.last_name for s in students] == ["Орлов", "Волков"]

def test_course_out_of_int32_range_aborts_import():
    row = VALID_ROW.replace(",1,А-1,", ",2147483648,А-1,")
    with pytest.raises(ParseError) as exc_info:
        parse_csv(config.CSV_HEADER + "\n" + row)
    assert exc_info.value.line == 2
