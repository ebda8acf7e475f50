"""Grade data model: the immutable grade set and the student record."""

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class GradeSet:
    """
    Ordered, immutable sequence of non-negative integer grades.

    Negative values are clamped to 0 on construction. Statistics are derived
    on every access and are all 0 for an empty set.
    """

    values: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # frozen dataclass, so normalise through object.__setattr__
        object.__setattr__(self, "values", tuple(max(0, int(v)) for v in self.values))

    @classmethod
    def of(cls, grades: Iterable[int]) -> "GradeSet":
        """Build a GradeSet from any iterable of ints."""
        return cls(tuple(grades))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    @property
    def count(self) -> int:
        return len(self.values)

    @property
    def total(self) -> int:
        return sum(self.values)

    @property
    def average(self) -> float:
        """Arithmetic mean, 0.0 if there are no grades."""
        if not self.values:
            return 0.0
        return sum(self.values) / len(self.values)

    @property
    def highest(self) -> int:
        return max(self.values, default=0)

    @property
    def lowest(self) -> int:
        return min(self.values, default=0)

    def as_text(self) -> str:
        """Render grades as they are typed into the form, e.g. "85, 92, 78"."""
        return ", ".join(str(v) for v in self.values)


@dataclass(frozen=True)
class StudentRecord:
    """A student's name bound to one GradeSet, identified by the registry."""

    record_id: int
    name: str
    grades: GradeSet = field(default_factory=GradeSet)

    @property
    def average(self) -> float:
        return self.grades.average

    @property
    def highest(self) -> int:
        return self.grades.highest

    @property
    def lowest(self) -> int:
        return self.grades.lowest
