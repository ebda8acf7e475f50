"""
The student registry: sole owner of every StudentRecord.

Records are addressed by a stable ``record_id`` handed out at creation time,
so a selection made against a filtered or sorted view stays valid after the
underlying list changes order. Every mutating method returns a Response and
leaves the registry untouched when it fails.
"""

import dataclasses
import logging
from typing import Iterator, Sequence

from .errors import GradeParseError, NameValidationError
from .grades import GradeSet, StudentRecord
from .response import ErrorCode, Response
from .validators import parse_grades, validate_name

logger = logging.getLogger(__name__)


class Registry:
    def __init__(self):
        self._records: list[StudentRecord] = []
        self._next_id = 1

    # --- queries ---

    def all(self) -> tuple[StudentRecord, ...]:
        """Snapshot of every record in insertion order."""
        return tuple(self._records)

    def get(self, record_id: int) -> StudentRecord | None:
        position = self._position_of(record_id)
        return None if position is None else self._records[position]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self.all())

    def __contains__(self, record_id: object) -> bool:
        return any(r.record_id == record_id for r in self._records)

    def record_id_at(self, position: int, view: Sequence[StudentRecord] | None = None) -> Response:
        """Translate a row position in ``view`` (default: all records) into an id."""
        rows = self.all() if view is None else view
        if not 0 <= position < len(rows):
            return Response.fail(
                detail=f"No student at row {position}.",
                error=ErrorCode.INDEX_ERROR,
            )
        return Response.succeed(data={"record_id": rows[position].record_id})

    # --- mutations ---

    def add(self, name: str, raw_grades_text: str) -> Response:
        checked = self._check_input(name, raw_grades_text)
        if not checked.success:
            logger.warning("Rejected new student: %s", checked.detail)
            return checked

        record = StudentRecord(self._next_id, checked.data["name"], checked.data["grades"])
        self._next_id += 1
        self._records.append(record)
        logger.info("Added student #%d %r", record.record_id, record.name)

        return Response.succeed(detail="Student added.", data={"record": record})

    def update(self, record_id: int, name: str, raw_grades_text: str) -> Response:
        position = self._position_of(record_id)
        if position is None:
            logger.warning("Rejected update of unknown student #%s", record_id)
            return self._unknown(record_id)

        checked = self._check_input(name, raw_grades_text)
        if not checked.success:
            logger.warning("Rejected update of student #%d: %s", record_id, checked.detail)
            return checked

        record = dataclasses.replace(
            self._records[position],
            name=checked.data["name"],
            grades=checked.data["grades"],
        )
        self._records[position] = record
        logger.info("Updated student #%d %r", record_id, record.name)

        return Response.succeed(detail="Student updated.", data={"record": record})

    def delete(self, record_id: int) -> Response:
        position = self._position_of(record_id)
        if position is None:
            logger.warning("Rejected delete of unknown student #%s", record_id)
            return self._unknown(record_id)

        record = self._records.pop(position)
        logger.info("Deleted student #%d %r", record_id, record.name)

        return Response.succeed(detail="Student deleted.", data={"record": record})

    # --- helpers ---

    def _position_of(self, record_id: int) -> int | None:
        for position, record in enumerate(self._records):
            if record.record_id == record_id:
                return position
        return None

    @staticmethod
    def _unknown(record_id: int) -> Response:
        return Response.fail(
            detail=f"No student with id {record_id}.",
            error=ErrorCode.INDEX_ERROR,
        )

    @staticmethod
    def _check_input(name: str, raw_grades_text: str) -> Response:
        try:
            cleaned = validate_name(name)
        except NameValidationError as e:
            return Response.fail(detail=str(e), error=ErrorCode.VALIDATION_ERROR)

        try:
            grades: GradeSet = parse_grades(raw_grades_text)
        except GradeParseError as e:
            return Response.fail(
                detail=f"{e}. Use comma separated integers.",
                error=ErrorCode.PARSE_ERROR,
            )

        return Response.succeed(data={"name": cleaned, "grades": grades})


def seed_registry(registry: Registry, seeds: list[dict]) -> list[Response]:
    """Add each ``{"name": ..., "grades": ...}`` entry, returning one Response per seed."""
    return [registry.add(seed.get("name", ""), seed.get("grades", "")) for seed in seeds]
