import pytest
from grade_tracker import (
    GradeParseError,
    NameValidationError,
    Registry,
    get_default_config,
    parse_grades,
    validate_config,
    validate_name,
    validate_students,
)


def test_parse_grades_trims_and_skips_empty_tokens():
    assert parse_grades(" 85, 90 ,,78, ").values == (85, 90, 78)


def test_parse_grades_clamps_negatives():
    assert parse_grades("-5, 10, -3").values == (0, 10, 0)


def test_parse_grades_accepts_plus_sign():
    assert parse_grades("+7").values == (7,)


@pytest.mark.parametrize("text", ["", "   ", ",", " , ,"])
def test_parse_grades_blank_input_is_empty(text):
    assert parse_grades(text).values == ()


@pytest.mark.parametrize("text, token", [
    ("70, abc, 66", "abc"),
    ("8.5", "8.5"),
    ("1_000", "1_000"),
    ("9 9", "9 9"),
    ("2147483648", "2147483648"),
    ("-2147483649", "-2147483649"),
    ("100000000000000000000000000", "100000000000000000000000000"),
    ("1" + "0" * 5000, "1" + "0" * 5000),
])
def test_parse_grades_rejects_non_integers(text, token):
    with pytest.raises(GradeParseError) as excinfo:
        parse_grades(text)
    assert excinfo.value.token == token


def test_validate_name():
    assert validate_name("  Alice ") == "Alice"
    with pytest.raises(NameValidationError):
        validate_name("   ")


def test_default_config_is_valid():
    assert validate_config(get_default_config()) == []


def test_validate_config_reports_problems():
    config = get_default_config()
    config["chart"]["chart_type"] = "pie_chart"
    config["view"]["sort"] = "Shoe size"
    config["seed_students"].append({"name": "Eve", "grades": "1, x"})
    config["seed_students"].append({"grades": "1"})

    messages = [i["message"] for i in validate_config(config) if i["type"] == "error"]

    assert len(messages) == 4
    assert any("pie_chart" in m for m in messages)
    assert any("Shoe size" in m for m in messages)
    assert any("Eve" in m for m in messages)


def test_validate_students_warns_on_duplicate_names():
    reg = Registry()
    reg.add("Alice", "1")
    reg.add("alice", "2")
    reg.add("Bob", "3")

    issues = validate_students(reg.all())

    assert len(issues) == 1
    assert issues[0]["type"] == "warning"
    assert "alice" in issues[0]["message"]


def test_parse_grades_accepts_32_bit_bounds():
    assert parse_grades("2147483647, -2147483648, 007").values == (2147483647, 0, 7)


def test_validate_students_lists_each_duplicate_once():
    reg = Registry()
    reg.add("Alice", "1")
    reg.add("ALICE", "2")
    reg.add("alice", "3")

    issues = validate_students(reg.all())

    assert issues[0]["message"] == "Duplicate student names: ALICE"
