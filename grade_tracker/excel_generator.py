"""Excel workbook generation for student grade reports."""

import io
from typing import Any
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter
from openpyxl.chart import BarChart, LineChart, AreaChart, Reference

from .config_schema import CHART_TYPES, get_default_config
from .report import ReportModel

REPORT_SHEET = "Report"
CHART_SHEET = "Chart"

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
CENTER_ALIGN = Alignment(horizontal="center", vertical="center")
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin")
)


def col_letter(col_num: int) -> str:
    """Convert 1-based column number to Excel column letter."""
    return get_column_letter(col_num)


def make_chart(chart_type: str):
    """Return an empty openpyxl chart of the requested type."""
    if chart_type not in CHART_TYPES:
        raise ValueError(f"Unknown chart type: {chart_type}")
    if chart_type == "line_chart":
        return LineChart()
    if chart_type == "area_chart":
        return AreaChart()
    return BarChart()


def create_report_sheet(ws, report: ReportModel):
    """Write the title followed by one report line per row."""
    ws["A1"] = report.title
    ws["A1"].font = Font(bold=True, size=16)

    if report.is_empty():
        ws["A3"] = "No students to report"
    for row, line in enumerate(report.lines, 3):
        ws.cell(row=row, column=1, value=line)

    width = max((len(line) for line in report.lines), default=len(report.title))
    ws.column_dimensions["A"].width = max(50, width + 2)


def create_chart_sheet(ws, report: ReportModel, chart_config: dict[str, Any]):
    """
    Create a sheet with the series data and an embedded chart.

    Args:
        ws: Worksheet to populate
        report: ReportModel whose series is plotted
        chart_config: Dict with 'title', 'x_axis', 'y_axis' and 'chart_type' keys
    """
    if not report.series:
        ws["A1"] = "No chart data available"
        return

    # Write headers
    for col_idx, col_name in enumerate(("Student", report.series_name), 1):
        cell = ws.cell(row=1, column=col_idx, value=col_name)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER_ALIGN
        cell.border = THIN_BORDER

    # Write data
    for row_idx, (label, value) in enumerate(report.series, 2):
        for col_idx, cell_value in enumerate((label, value), 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=cell_value)
            cell.alignment = CENTER_ALIGN
            cell.border = THIN_BORDER
        ws.cell(row=row_idx, column=2).number_format = "0.00"

    longest_name = max(len(label) for label, _ in report.series)
    ws.column_dimensions[col_letter(1)].width = max(15, longest_name + 2)
    ws.column_dimensions[col_letter(2)].width = 15

    chart = make_chart(chart_config.get("chart_type", "bar_chart"))
    chart.title = chart_config.get("title", "Student Averages")
    chart.style = 10
    chart.x_axis.title = chart_config.get("x_axis", "Student")
    chart.y_axis.title = chart_config.get("y_axis", report.series_name)
    chart.legend = None

    num_rows = len(report.series) + 1  # +1 for header

    data = Reference(ws, min_col=2, min_row=1, max_col=2, max_row=num_rows)
    cats = Reference(ws, min_col=1, min_row=2, max_row=num_rows)
    chart.add_data(data, titles_from_data=True)
    chart.set_categories(cats)

    chart.width = 20
    chart.height = 12

    # Place chart to the right of the data
    ws.add_chart(chart, "D2")


def generate_workbook(report: ReportModel, config: dict[str, Any] | None = None) -> Workbook:
    """
    Render a report model into an Excel workbook.

    Args:
        report: ReportModel produced by build_report
        config: Optional configuration dictionary (defaults used when omitted)

    Returns:
        openpyxl Workbook object with "Report" and "Chart" sheets
    """
    config = config or get_default_config()

    wb = Workbook()

    # Remove default sheet
    wb.remove(wb.active)

    create_report_sheet(wb.create_sheet(title=REPORT_SHEET), report)
    create_chart_sheet(wb.create_sheet(title=CHART_SHEET), report, config.get("chart", {}))

    return wb


def workbook_to_bytes(wb: Workbook) -> bytes:
    """Serialize a workbook for download buttons and HTTP responses."""
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
