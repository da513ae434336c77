from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from gradeplannr.core.components import GradeComponent, is_blank
from gradeplannr.core.grade_scale import DEFAULT_GRADE_SCALE, GradeScale

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
STUDY_PLAN_SIZE = 3


@dataclass(frozen=True)
class GradeResult:
    percentage: float
    letter: str

    @property
    def is_available(self) -> bool:
        return self.letter != NOT_AVAILABLE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RequiredGrade:
    required_grade: float
    remaining_weight: float
    is_achievable: bool
    current_grade: float

    @property
    def has_remaining(self) -> bool:
        return self.remaining_weight > 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class StudyRecommendation:
    component: GradeComponent
    priority: float
    current_score: float
    is_completed: bool = False

    @property
    def name(self) -> str:
        return self.component.name

    @property
    def weight(self) -> float:
        return self.component.weight

    @property
    def difficulty(self) -> int:
        return self.component.effective_difficulty

    @property
    def target(self) -> Optional[float]:
        return self.component.target

    def aim_for(self, target_grade: float) -> float:
        return self.target or target_grade

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "weight": self.weight,
            "difficulty": self.difficulty,
            "target": self.target,
            "priority": self.priority,
            "current_score": self.current_score,
            "is_completed": self.is_completed,
        }


@dataclass(frozen=True)
class GradeSummary:
    current: GradeResult
    required: RequiredGrade
    study_plan: List[StudyRecommendation] = field(default_factory=list)
    final: Optional[GradeResult] = None


def _not_available() -> GradeResult:
    return GradeResult(percentage=0.0, letter=NOT_AVAILABLE)


def calculate_current_grade(
    components: Iterable[GradeComponent],
    *,
    scale: GradeScale = DEFAULT_GRADE_SCALE,
    round_to: int = 2,
) -> GradeResult:
    """
    Weighted average over completed components only:
    Σ(score * weight / 100) / Σ(weight) * 100
    """
    weighted_sum = 0.0
    total_weight = 0.0
    has_scores = False

    for component in components:
        score = component.numeric_score
        if score is None:
            continue
        weighted_sum += score * component.weight / 100
        total_weight += component.weight
        has_scores = True

    if not has_scores or total_weight == 0:
        return _not_available()

    percentage = weighted_sum / total_weight * 100
    return GradeResult(percentage=round(percentage, round_to), letter=scale.letter_for(percentage))


def calculate_required_grade(
    target_grade: float,
    components: Iterable[GradeComponent],
    *,
    round_to: int = 2,
) -> RequiredGrade:
    """
    Uniform score x needed on every remaining component so that
    completed_score + x * remaining_weight / 100 == target_grade.
    """
    completed_weight = 0.0
    completed_score = 0.0
    remaining_weight = 0.0

    for component in components:
        score = component.numeric_score
        if score is None:
            remaining_weight += component.weight
        else:
            completed_score += score * component.weight / 100
            completed_weight += component.weight

    current = completed_score / completed_weight * 100 if completed_weight else 0.0

    if remaining_weight == 0:
        return RequiredGrade(
            required_grade=0.0,
            remaining_weight=0.0,
            is_achievable=completed_weight > 0 and current >= target_grade,
            current_grade=round(current, round_to),
        )

    required_score = (target_grade - completed_score) / (remaining_weight / 100)
    return RequiredGrade(
        required_grade=round(max(0.0, required_score), round_to),
        remaining_weight=remaining_weight,
        is_achievable=required_score <= 100,
        current_grade=round(current, round_to),
    )


def generate_study_plan(
    components: Iterable[GradeComponent],
    target_grade: float,
    *,
    limit: int = STUDY_PLAN_SIZE,
) -> List[StudyRecommendation]:
    """Rank incomplete components by weight * difficulty, scaled by the gap to the target."""
    candidates: List[StudyRecommendation] = []

    for component in components:
        if component.is_completed:
            continue
        current_score = 0.0
        priority = component.weight * component.effective_difficulty
        # unparsable scores get no gap boost
        if target_grade > 0 and is_blank(component.score) and current_score < target_grade:
            gap = target_grade - current_score
            priority *= 1 + gap / 20
        candidates.append(
            StudyRecommendation(component=component, priority=priority, current_score=current_score)
        )

    # sorted() is stable, so equal priorities keep their input order
    ranked = sorted(candidates, key=lambda item: item.priority, reverse=True)
    return ranked[:limit]


def calculate_final_grade(
    components: Iterable[GradeComponent],
    *,
    scale: GradeScale = DEFAULT_GRADE_SCALE,
    round_to: int = 2,
) -> GradeResult:
    """Every component counts at full weight; missing scores count as 0."""
    weighted_sum = 0.0
    total_weight = 0.0

    for component in components:
        score = component.numeric_score or 0.0
        weighted_sum += score * component.weight / 100
        total_weight += component.weight

    if total_weight == 0:
        return _not_available()

    percentage = weighted_sum / (total_weight / 100)
    return GradeResult(percentage=round(percentage, round_to), letter=scale.letter_for(percentage))


@dataclass(frozen=True)
class GradeEngine:
    scale: GradeScale = DEFAULT_GRADE_SCALE
    study_plan_size: int = STUDY_PLAN_SIZE

    def calculate_current_grade(self, components: Iterable[GradeComponent]) -> GradeResult:
        return calculate_current_grade(components, scale=self.scale)

    def calculate_required_grade(
        self, target_grade: float, components: Iterable[GradeComponent]
    ) -> RequiredGrade:
        return calculate_required_grade(target_grade, components)

    def generate_study_plan(
        self, components: Iterable[GradeComponent], target_grade: float
    ) -> List[StudyRecommendation]:
        return generate_study_plan(components, target_grade, limit=self.study_plan_size)

    def calculate_final_grade(self, components: Iterable[GradeComponent]) -> GradeResult:
        return calculate_final_grade(components, scale=self.scale)

    def letter_for(self, percentage: float) -> str:
        return self.scale.letter_for(percentage)

    def points_for(self, percentage: float) -> float:
        return self.scale.points_for(percentage)

    def summarize(
        self,
        components: Iterable[GradeComponent],
        target_grade: float,
        *,
        log_context: Optional[Dict[str, Any]] = None,
    ) -> GradeSummary:
        items = list(components)
        summary = GradeSummary(
            current=self.calculate_current_grade(items),
            required=self.calculate_required_grade(target_grade, items),
            study_plan=self.generate_study_plan(items, target_grade),
            final=self.calculate_final_grade(items),
        )
        logger.debug(
            "Summarized %d components for target %s: current=%s required=%s",
            len(items),
            target_grade,
            summary.current.percentage,
            summary.required.required_grade,
            extra=log_context,
        )
        return summary
