"""Read-only filtered and sorted views over student records."""

from enum import Enum
from typing import Callable, Iterable

from .grades import StudentRecord


class SortKey(str, Enum):
    NAME = "Name (A-Z)"
    AVERAGE_DESC = "Average (High→Low)"
    AVERAGE_ASC = "Average (Low→High)"
    HIGHEST_DESC = "Highest (High→Low)"
    LOWEST_ASC = "Lowest (Low→High)"

    @classmethod
    def labels(cls) -> list[str]:
        return [key.value for key in cls]


# (key function, reverse). Python's sort is stable in both directions.
_ORDERINGS: dict[SortKey, tuple[Callable[[StudentRecord], object], bool]] = {
    SortKey.NAME: (lambda r: r.name.casefold(), False),
    SortKey.AVERAGE_DESC: (lambda r: r.grades.average, True),
    SortKey.AVERAGE_ASC: (lambda r: r.grades.average, False),
    SortKey.HIGHEST_DESC: (lambda r: r.grades.highest, True),
    SortKey.LOWEST_ASC: (lambda r: r.grades.lowest, False),
}


def filter_by_name(records: Iterable[StudentRecord], term: str | None) -> tuple[StudentRecord, ...]:
    """Case-insensitive substring match on name. A blank term keeps everything."""
    needle = (term or "").strip().casefold()
    if not needle:
        return tuple(records)
    return tuple(r for r in records if needle in r.name.casefold())


def sort_by(records: Iterable[StudentRecord], key: SortKey | str) -> tuple[StudentRecord, ...]:
    """
    Stable sort by one of the five SortKey orderings.

    Raises:
        ValueError: if ``key`` is not a SortKey or one of its labels.
    """
    key_func, reverse = _ORDERINGS[SortKey(key)]
    return tuple(sorted(records, key=key_func, reverse=reverse))


def build_view(
    records: Iterable[StudentRecord],
    term: str | None = "",
    key: SortKey | str | None = None
) -> tuple[StudentRecord, ...]:
    """Filter by name, then sort if a key is given."""
    view = filter_by_name(records, term)
    if key is not None:
        view = sort_by(view, key)
    return view
