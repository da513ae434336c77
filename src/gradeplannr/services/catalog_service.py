from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, Field, ValidationError

from gradeplannr.core.components import GradeComponent
from gradeplannr.data.courses import COURSES

logger = logging.getLogger(__name__)


class CatalogServiceError(Exception):
    pass


class ComponentTemplate(BaseModel):
    name: str
    weight: float = Field(ge=0, le=100)
    difficulty: int = Field(default=1, ge=1, le=5)

    def to_component(self) -> GradeComponent:
        return GradeComponent(name=self.name, weight=self.weight, difficulty=self.difficulty)


class Professor(BaseModel):
    id: str
    name: str
    grade_components: List[ComponentTemplate] = Field(default_factory=list)


class Course(BaseModel):
    id: str
    name: str
    professors: List[Professor] = Field(default_factory=list)


class CatalogService:
    """Read-only lookup over the static course table."""

    def __init__(self, courses: Dict[str, Course]) -> None:
        self._courses = courses

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, Any]]) -> "CatalogService":
        courses: Dict[str, Course] = {}
        try:
            for course_id, data in raw.items():
                courses[course_id] = Course.model_validate({"id": course_id, **data})
        except ValidationError as exc:
            raise CatalogServiceError(f"Invalid course catalog entry '{course_id}': {exc}") from exc
        logger.debug("Loaded %d courses into the catalog", len(courses))
        return cls(courses)

    @classmethod
    def from_settings(cls) -> "CatalogService":
        return cls.from_mapping(COURSES)

    def list_courses(self) -> List[Course]:
        return list(self._courses.values())

    def get_course(self, course_id: str) -> Course:
        try:
            return self._courses[course_id]
        except KeyError as exc:
            raise CatalogServiceError(f"Unknown course: {course_id}") from exc

    def list_professors(self, course_id: str) -> List[Professor]:
        return list(self.get_course(course_id).professors)

    def get_professor(self, course_id: str, professor_id: str) -> Professor:
        for professor in self.get_course(course_id).professors:
            if professor.id == professor_id:
                return professor
        raise CatalogServiceError(f"Unknown professor '{professor_id}' for course {course_id}")

    def build_components(self, course_id: str, professor_id: str) -> List[GradeComponent]:
        professor = self.get_professor(course_id, professor_id)
        return [template.to_component() for template in professor.grade_components]
