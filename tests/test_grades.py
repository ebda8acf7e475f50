import pytest
from grade_tracker import GradeSet, StudentRecord


def test_statistics():
    grades = GradeSet.of([85, 92, 78])
    assert grades.average == 85.0
    assert grades.highest == 92
    assert grades.lowest == 78
    assert grades.count == 3
    assert grades.total == 255


def test_empty_grade_set_is_all_zero():
    grades = GradeSet()
    assert grades.average == 0
    assert grades.highest == 0
    assert grades.lowest == 0
    assert grades.as_text() == ""


def test_negative_grades_are_clamped():
    assert GradeSet.of([-5, 10, -3]).values == (0, 10, 0)


def test_order_is_preserved():
    assert list(GradeSet.of([3, 1, 2])) == [3, 1, 2]


def test_grade_set_is_immutable():
    grades = GradeSet.of([1, 2])
    with pytest.raises(AttributeError):
        grades.values = (5,)


@pytest.mark.parametrize("values", [[1], [0, 0, 0], [100, 3, 57, 57], [1, 2, 3, 4, 5, 6, 7]])
def test_average_bounds_and_sum(values):
    grades = GradeSet.of(values)
    assert grades.lowest <= grades.average <= grades.highest
    assert grades.average * grades.count == pytest.approx(sum(values))


def test_as_text():
    assert GradeSet.of([85, 92, 78]).as_text() == "85, 92, 78"


def test_record_passes_statistics_through():
    record = StudentRecord(1, "Alice", GradeSet.of([90, 80]))
    assert record.average == 85.0
    assert record.highest == 90
    assert record.lowest == 80
