#!/usr/bin/env python3
"""
Student Grade Report Generator

Reads an optional config.json and a roster of students with their grades,
then writes an Excel report with one text line per student and a chart of
student averages.

Usage:
    1. Optionally edit config.json (chart type, titles, default view)
    2. Put students into students.txt, one per line: "Alice: 85, 92, 78"
    3. Run: python generate.py --students students.txt
    4. Open the generated Excel file
"""

import argparse
import logging
import sys
from pathlib import Path

from grade_tracker import (
    Registry,
    SortKey,
    build_report,
    build_view,
    generate_workbook,
    load_config,
    seed_registry,
    validate_config,
    validate_students,
)

logger = logging.getLogger("generate")


def parse_roster_line(line: str) -> tuple[str, str]:
    """Split "Name: 85, 90" into its name and grades text."""
    name, sep, grades = line.rpartition(":")
    if not sep:
        return line, ""
    return name, grades


def load_students(registry: Registry, students_path: str | Path) -> list[str]:
    """
    Add every roster line to the registry, ignoring comments and empty lines.

    Returns:
        Messages for lines that were rejected; those lines are skipped.
    """
    problems = []
    with open(students_path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue
            name, grades = parse_roster_line(line)
            response = registry.add(name, grades)
            if not response.success:
                problems.append(f"Line {line_num}: {response.detail}")
    return problems


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export a student grade report to Excel.")
    parser.add_argument("--config", default="config.json", help="JSON configuration file")
    parser.add_argument("--students", help="Roster file (default: seed students from config)")
    parser.add_argument("--output", help="Output .xlsx path (default: config output_file)")
    parser.add_argument("--search", help="Only include students whose name contains this text")
    parser.add_argument("--sort", choices=SortKey.labels(), help="Sort order for the report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    print("📊 Student Grade Report Generator")
    print("=" * 40)

    errors = [i for i in validate_config(config) if i["type"] == "error"]
    if errors:
        for issue in errors:
            print(f"❌ Config error: {issue['message']}")
        return 1

    registry = Registry()
    if args.students:
        students_path = Path(args.students)
        if not students_path.exists():
            print(f"❌ Error: {students_path} not found!")
            print("   Create it with one student per line, e.g. \"Alice: 85, 92, 78\".")
            return 1
        for problem in load_students(registry, students_path):
            print(f"⚠️ Skipped {problem}")
        print(f"✓ Loaded {len(registry)} students from {students_path}")
    else:
        seed_registry(registry, config["seed_students"])
        print(f"✓ Using {len(registry)} seed students from configuration")

    for issue in validate_students(registry.all()):
        print(f"⚠️ {issue['message']}")

    search = args.search if args.search is not None else config["view"]["search"]
    sort = args.sort or config["view"]["sort"]
    view = build_view(registry.all(), search, sort)
    logger.debug("View has %d of %d students (search=%r, sort=%r)", len(view), len(registry), search, sort)

    report = build_report(view, title=config["report"]["title"])

    print("\n📝 Generating Excel file...")
    wb = generate_workbook(report, config)

    output_file = args.output or config["output_file"]
    wb.save(output_file)
    logger.info("Wrote %d report lines to %s", len(report.lines), output_file)
    print(f"✓ Saved to {output_file}")

    # Summary
    print("\n" + "=" * 40)
    print("📋 Summary:")
    print(f"   Students in report: {len(report.lines)}")
    for line in report.lines:
        print(f"   {line}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
