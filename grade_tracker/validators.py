"""Validation utilities for student input, rosters and configuration."""

import re
from typing import Any, Iterable

from .config_schema import CHART_TYPES
from .errors import GradeParseError, NameValidationError
from .grades import GradeSet, StudentRecord
from .views import SortKey

_INTEGER = re.compile(r"[+-]?[0-9]+")

# 32-bit signed range
GRADE_MIN = -2**31
GRADE_MAX = 2**31 - 1


def validate_name(name: str | None) -> str:
    """Return the trimmed name, or raise NameValidationError if it is blank."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise NameValidationError("Enter student name.")
    return cleaned


def parse_grades(text: str | None) -> GradeSet:
    """
    Parse comma separated grades such as "85, 90, 78".

    Empty tokens (from ",," or a trailing comma) are skipped and negative
    grades become 0. A single token that is not a 32-bit integer rejects
    the whole text.

    Raises:
        GradeParseError: naming the first offending token.
    """
    grades = []
    for part in (text or "").split(","):
        token = part.strip()
        if not token:
            continue
        if not _INTEGER.fullmatch(token):
            raise GradeParseError(token)
        # a 32-bit int has at most ten digits
        if len(token.lstrip("+-").lstrip("0")) > 10:
            raise GradeParseError(token)
        value = int(token)
        if not GRADE_MIN <= value <= GRADE_MAX:
            raise GradeParseError(token)
        grades.append(value)
    return GradeSet.of(grades)


def validate_config(config: dict[str, Any]) -> list[dict[str, str]]:
    """
    Validate configuration and return list of issues.

    Returns:
        List of dicts with 'type' (error/warning) and 'message'.
    """
    issues = []

    if not str(config.get("report", {}).get("title", "")).strip():
        issues.append({
            "type": "warning",
            "message": "Report title is empty"
        })

    chart_type = config.get("chart", {}).get("chart_type", "bar_chart")
    if chart_type not in CHART_TYPES:
        issues.append({
            "type": "error",
            "message": f"Unknown chart type '{chart_type}' (expected one of: {', '.join(CHART_TYPES)})"
        })

    sort_label = config.get("view", {}).get("sort")
    if sort_label is not None and sort_label not in SortKey.labels():
        issues.append({
            "type": "error",
            "message": f"Unknown sort key '{sort_label}'"
        })

    for position, seed in enumerate(config.get("seed_students", []), 1):
        if not isinstance(seed, dict) or not str(seed.get("name", "")).strip():
            issues.append({
                "type": "error",
                "message": f"Seed student #{position} has no name"
            })
            continue
        try:
            parse_grades(seed.get("grades", ""))
        except GradeParseError as e:
            issues.append({
                "type": "error",
                "message": f"Seed student '{seed['name']}': {e}"
            })

    return issues


def validate_students(records: Iterable[StudentRecord]) -> list[dict[str, str]]:
    """
    Validate the student list and return issues.

    Duplicate names are allowed but reported as warnings.

    Returns:
        List of dicts with 'type' and 'message'.
    """
    issues = []

    seen = set()
    reported = set()
    duplicates = []
    for record in records:
        key = record.name.casefold()
        if key in seen and key not in reported:
            duplicates.append(record.name)
            reported.add(key)
        seen.add(key)

    if duplicates:
        issues.append({
            "type": "warning",
            "message": f"Duplicate student names: {', '.join(duplicates)}"
        })

    return issues
