from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class GradeScaleEntry:
    letter: str
    min: float
    max: float
    points: float

    def contains(self, percentage: float) -> bool:
        return self.min <= percentage <= self.max


class GradeScale:
    """Ordered percentage bands mapped to a letter and GPA points.

    Lookup returns the first band containing the percentage (both ends
    inclusive). Values that fall between two integer bands, e.g. 59.5 or
    84.5, match nothing and resolve to the lowest band.
    """

    def __init__(self, entries: Iterable[GradeScaleEntry]) -> None:
        self.entries: Tuple[GradeScaleEntry, ...] = tuple(entries)
        if not self.entries:
            raise ValueError("A grade scale needs at least one band")

    @property
    def lowest(self) -> GradeScaleEntry:
        return self.entries[-1]

    def entry_for(self, percentage: float) -> GradeScaleEntry:
        for entry in self.entries:
            if entry.contains(percentage):
                return entry
        return self.lowest

    def letter_for(self, percentage: float) -> str:
        return self.entry_for(percentage).letter

    def points_for(self, percentage: float) -> float:
        return self.entry_for(percentage).points

    def target_options(self) -> List[Tuple[int, str]]:
        options: List[Tuple[int, str]] = []
        for entry in self.entries:
            if entry.min <= 0:
                continue
            value = int(entry.min)
            options.append((value, f"{value}% ({entry.letter})"))
        return options


DEFAULT_GRADE_SCALE = GradeScale(
    [
        GradeScaleEntry("A+", 90, 100, 4.0),
        GradeScaleEntry("A", 85, 89, 4.0),
        GradeScaleEntry("A-", 80, 84, 3.7),
        GradeScaleEntry("B+", 77, 79, 3.3),
        GradeScaleEntry("B", 73, 76, 3.0),
        GradeScaleEntry("B-", 70, 72, 2.7),
        GradeScaleEntry("C+", 67, 69, 2.3),
        GradeScaleEntry("C", 63, 66, 2.0),
        GradeScaleEntry("C-", 60, 62, 1.7),
        GradeScaleEntry("D", 50, 59, 1.0),
        GradeScaleEntry("F", 0, 49, 0.0),
    ]
)


def get_grade_letter(percentage: float) -> str:
    return DEFAULT_GRADE_SCALE.letter_for(percentage)


def get_grade_points(percentage: float) -> float:
    return DEFAULT_GRADE_SCALE.points_for(percentage)
