from openpyxl import load_workbook

from generate import load_students, main, parse_roster_line
from grade_tracker import Registry


def test_parse_roster_line():
    assert parse_roster_line("Alice: 85, 92") == ("Alice", " 85, 92")
    assert parse_roster_line("Dr. No: 1") == ("Dr. No", " 1")
    assert parse_roster_line("Mx: Who: 7") == ("Mx: Who", " 7")
    assert parse_roster_line("Solo") == ("Solo", "")


def test_load_students_skips_bad_lines(tmp_path):
    roster = tmp_path / "students.txt"
    roster.write_text("# header\n\nAlice: 85, 92, 78\nBob: 70, abc\n: 5\nCarol\n", encoding="utf-8")
    reg = Registry()

    problems = load_students(reg, roster)

    assert [r.name for r in reg.all()] == ["Alice", "Carol"]
    assert len(problems) == 2
    assert problems[0].startswith("Line 4:")
    assert problems[1].startswith("Line 5:")


def test_main_writes_sorted_filtered_report(tmp_path, capsys):
    roster = tmp_path / "students.txt"
    roster.write_text("Alice: 85, 92, 78\nBob: 70, 66, 77\nCharlie: 95, 90, 93\n", encoding="utf-8")
    output = tmp_path / "report.xlsx"

    code = main([
        "--config", str(tmp_path / "none.json"),
        "--students", str(roster),
        "--output", str(output),
        "--search", "c",
        "--sort", "Average (High→Low)",
    ])

    assert code == 0
    wb = load_workbook(output)
    assert wb["Chart"]["A2"].value == "Charlie"
    assert wb["Chart"]["A3"].value == "Alice"
    assert wb["Chart"]["A4"].value is None
    out = capsys.readouterr().out
    assert "Loaded 3 students" in out
    assert "Students in report: 2" in out


def test_main_uses_seed_students(tmp_path, capsys):
    output = tmp_path / "seed.xlsx"

    assert main(["--config", str(tmp_path / "none.json"), "--output", str(output)]) == 0

    wb = load_workbook(output)
    assert wb["Report"]["A3"].value == "Name: Alice | Grades: 85, 92, 78 | Average: 85.00 | Highest: 92 | Lowest: 78"
    assert "Using 4 seed students" in capsys.readouterr().out


def test_main_missing_roster(tmp_path, capsys):
    code = main(["--config", str(tmp_path / "none.json"), "--students", str(tmp_path / "nope.txt")])

    assert code == 1
    assert "not found" in capsys.readouterr().out


def test_main_rejects_invalid_config(tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text('{"chart": {"chart_type": "pie_chart"}}', encoding="utf-8")

    assert main(["--config", str(config), "--output", str(tmp_path / "x.xlsx")]) == 1
    assert "pie_chart" in capsys.readouterr().out
    assert not (tmp_path / "x.xlsx").exists()
