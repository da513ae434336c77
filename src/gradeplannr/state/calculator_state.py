from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

from gradeplannr.config.settings import settings
from gradeplannr.core.components import GradeComponent, clamp_0_100, is_blank, parse_score


@dataclass
class CalculatorState:
    course_id: Optional[str] = None
    professor_id: Optional[str] = None
    target_grade: float = settings.default_target_grade
    components: List[GradeComponent] = field(default_factory=list)

    @property
    def has_components(self) -> bool:
        return bool(self.components)

    def load_components(self, components: Iterable[GradeComponent]) -> None:
        self.components = [replace(component) for component in components]

    def select_course(self, course_id: Optional[str]) -> None:
        self.course_id = course_id or None
        self.professor_id = None
        self.components = []

    def select_professor(self, professor_id: Optional[str], components: Iterable[GradeComponent] = ()) -> None:
        self.professor_id = professor_id or None
        if self.professor_id is None:
            self.components = []
            return
        self.load_components(components)

    def set_target_grade(self, raw: object) -> float:
        value = parse_score(raw)
        if value is not None:
            self.target_grade = value
        return self.target_grade

    def set_score(self, index: int, raw: object) -> Optional[float]:
        """Blank clears the score, numbers are clamped, anything else leaves it unchanged."""
        component = self.components[index]
        if is_blank(raw):
            component.score = None
            return None
        value = parse_score(raw)
        if value is not None:
            component.score = clamp_0_100(value)
        return component.numeric_score

    def set_target(self, index: int, raw: object) -> Optional[float]:
        component = self.components[index]
        if is_blank(raw):
            component.target = None
            return None
        value = parse_score(raw)
        if value is not None:
            component.target = clamp_0_100(value)
        return component.target

    def clear(self) -> None:
        self.course_id = None
        self.professor_id = None
        self.target_grade = settings.default_target_grade
        self.components = []
