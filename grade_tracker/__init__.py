"""Core module for student grade tracking and reporting."""

from .config_schema import DEFAULT_CONFIG, get_default_config, merge_config, load_config
from .errors import GradeTrackerError, NameValidationError, GradeParseError
from .grades import GradeSet, StudentRecord
from .response import ErrorCode, Response
from .registry import Registry, seed_registry
from .views import SortKey, filter_by_name, sort_by, build_view
from .report import ReportModel, build_report, round_half_up
from .validators import parse_grades, validate_name, validate_config, validate_students
from .excel_generator import generate_workbook, workbook_to_bytes

__all__ = [
    "DEFAULT_CONFIG",
    "get_default_config",
    "merge_config",
    "load_config",
    "GradeTrackerError",
    "NameValidationError",
    "GradeParseError",
    "GradeSet",
    "StudentRecord",
    "ErrorCode",
    "Response",
    "Registry",
    "seed_registry",
    "SortKey",
    "filter_by_name",
    "sort_by",
    "build_view",
    "ReportModel",
    "build_report",
    "round_half_up",
    "parse_grades",
    "validate_name",
    "validate_config",
    "validate_students",
    "generate_workbook",
    "workbook_to_bytes",
]
