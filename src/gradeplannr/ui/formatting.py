from typing import List, Optional, Tuple

from gradeplannr.core.engine import GradeResult, RequiredGrade, StudyRecommendation
from gradeplannr.core.grade_scale import DEFAULT_GRADE_SCALE, GradeScale

SUCCESS = "success"
WARNING = "warning"
DANGER = "danger"

PRIORITY_LABELS = ("high", "medium", "low")
PRIORITY_ICONS = ("exclamation-circle", "exclamation-triangle", "info-circle")

NO_COMPONENTS_MESSAGE = "Select a course and professor to see grade components"
NO_STUDY_PLAN_MESSAGE = "Enter your grades to see personalized study recommendations"
ALL_COMPLETED_MESSAGE = "All components completed! Great job!"
NO_CURRENT_GRADE_MESSAGE = "Enter your scores to see current grade"


def _fmt(value: float) -> str:
    return f"{value:g}"


def grade_color(percentage: float) -> str:
    if percentage >= 85:
        return SUCCESS
    if percentage >= 70:
        return WARNING
    return DANGER


def priority_label(index: int) -> str:
    if 0 <= index < len(PRIORITY_LABELS):
        return PRIORITY_LABELS[index]
    return ""


def priority_icon(index: int) -> str:
    if 0 <= index < len(PRIORITY_ICONS):
        return PRIORITY_ICONS[index]
    return PRIORITY_ICONS[-1]


def difficulty_stars(difficulty: int, slots: int = 5) -> str:
    filled = max(0, min(slots, difficulty))
    return "★" * filled + "☆" * (slots - filled)


def describe_current(result: GradeResult) -> str:
    if not result.is_available:
        return NO_CURRENT_GRADE_MESSAGE
    return f"{_fmt(result.percentage)}% ({result.letter})"


def describe_target(target_grade: float, scale: GradeScale = DEFAULT_GRADE_SCALE) -> str:
    return f"{_fmt(target_grade)}% ({scale.letter_for(target_grade)})"


def describe_required(required: RequiredGrade, scale: GradeScale = DEFAULT_GRADE_SCALE) -> str:
    if not required.has_remaining:
        return "All components completed"
    text = f"{_fmt(required.required_grade)}% ({scale.letter_for(required.required_grade)})"
    if not required.is_achievable:
        text += " (Not achievable)"
    return text


def required_color(required: RequiredGrade) -> Optional[str]:
    if not required.has_remaining:
        return None
    if not required.is_achievable:
        return DANGER
    return grade_color(required.required_grade)


def describe_recommendation(item: StudyRecommendation, target_grade: float) -> str:
    aim = _fmt(item.aim_for(target_grade))
    if item.current_score > 0:
        return f"Current: {_fmt(item.current_score)}% (Aim for: {aim}%)"
    return f"Not yet started • Target: {aim}%"


def describe_weight(item: StudyRecommendation) -> str:
    return f"{_fmt(item.weight)}% of grade • Difficulty: {difficulty_stars(item.difficulty)}"


def describe_final(final: Optional[GradeResult], current: GradeResult) -> str:
    """Only shown once at least one score has been entered."""
    if final is None or not final.is_available or not current.is_available:
        return ""
    return f"If nothing else is scored: {describe_current(final)}"


def target_grade_options(target_grade: float, scale: GradeScale = DEFAULT_GRADE_SCALE) -> List[Tuple[str, str]]:
    options = [(str(value), label) for value, label in scale.target_options()]
    selected = f"{target_grade:g}"
    if selected not in [value for value, _ in options]:
        options.append((selected, describe_target(target_grade, scale)))
        options.sort(key=lambda option: float(option[0]), reverse=True)
    return options
