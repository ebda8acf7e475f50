"""Report model assembly: text lines plus the chart series of averages."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

import pandas as pd

from .grades import StudentRecord

REPORT_TITLE = "Student Grade Report"
SERIES_NAME = "Average"


def round_half_up(value: float, places: int = 2) -> Decimal:
    """Round half away from zero, e.g. 2.675 -> 2.68."""
    quantum = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def format_line(record: StudentRecord) -> str:
    """One report line for a record."""
    grades = record.grades
    return (
        f"Name: {record.name} | Grades: {grades.as_text()} | "
        f"Average: {round_half_up(grades.average)} | "
        f"Highest: {grades.highest} | Lowest: {grades.lowest}"
    )


@dataclass(frozen=True)
class ReportModel:
    """Renderer-agnostic report: ordered text lines and one named series."""

    lines: tuple[str, ...] = field(default_factory=tuple)
    series: tuple[tuple[str, float], ...] = field(default_factory=tuple)
    title: str = REPORT_TITLE
    series_name: str = SERIES_NAME

    def is_empty(self) -> bool:
        return not self.lines

    def to_frame(self) -> pd.DataFrame:
        """Series as a DataFrame with 'Student' and series-name columns."""
        return pd.DataFrame(list(self.series), columns=["Student", self.series_name])


def build_report(records: Iterable[StudentRecord], title: str = REPORT_TITLE) -> ReportModel:
    """Build the report for ``records`` in the order given."""
    lines = []
    series = []
    for record in records:
        lines.append(format_line(record))
        series.append((record.name, float(round_half_up(record.grades.average))))
    return ReportModel(lines=tuple(lines), series=tuple(series), title=title)
