from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

ScoreInput = Union[float, int, str, None]


def clamp_0_100(value: float) -> float:
    return max(0.0, min(100.0, value))


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_score(value: Any) -> Optional[float]:
    """Return the value as a finite float, or None when blank or non-numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


@dataclass
class GradeComponent:
    name: str
    weight: float
    difficulty: int = 1
    score: ScoreInput = None
    target: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GradeComponent":
        return cls(
            name=str(data.get("name", "")),
            weight=float(data.get("weight", 0) or 0),
            difficulty=int(data.get("difficulty") or 1),
            score=data.get("score"),
            target=parse_score(data.get("target")),
        )

    @property
    def numeric_score(self) -> Optional[float]:
        return parse_score(self.score)

    @property
    def is_completed(self) -> bool:
        return self.numeric_score is not None

    @property
    def effective_difficulty(self) -> int:
        return self.difficulty or 1
