"""Configuration schema and defaults for the grade tracker."""

from typing import Any
from pathlib import Path
import copy
import json

CHART_TYPES = ("bar_chart", "line_chart", "area_chart")

DEFAULT_CONFIG: dict[str, Any] = {
    "report": {
        "title": "Student Grade Report"
    },
    "chart": {
        "title": "Student Averages",
        "x_axis": "Student",
        "y_axis": "Average",
        "chart_type": "bar_chart"
    },
    "view": {
        "search": "",
        "sort": None
    },
    "seed_students": [
        {"name": "Alice", "grades": "85, 92, 78"},
        {"name": "Bob", "grades": "70, 66, 77"},
        {"name": "Charlie", "grades": "95, 90, 93"},
        {"name": "Dana", "grades": "58, 64, 70"}
    ],
    "output_file": "StudentReport.xlsx",
    "log_level": "INFO"
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def merge_config(user_config: dict[str, Any]) -> dict[str, Any]:
    """
    Merge user configuration with defaults.

    User config values override defaults. Missing keys use default values.
    """
    result = get_default_config()

    for section in ("report", "chart", "view"):
        if section in user_config:
            result[section].update(user_config[section])

    if "seed_students" in user_config:
        result["seed_students"] = list(user_config["seed_students"])

    if "output_file" in user_config:
        result["output_file"] = user_config["output_file"]

    if "log_level" in user_config:
        result["log_level"] = str(user_config["log_level"]).upper()

    return result


def load_config(config_path: str | Path = "config.json") -> dict[str, Any]:
    """Load configuration from a JSON file, falling back to defaults if it is missing."""
    path = Path(config_path)
    if not path.exists():
        return get_default_config()
    with open(path, "r", encoding="utf-8") as f:
        return merge_config(json.load(f))
