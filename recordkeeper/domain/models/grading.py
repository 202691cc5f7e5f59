"""Student result domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import Grade


class Student(BaseModel):
    """A student's exam result.

    score is an integer percentage in [0, 100]; grade is derived from it
    and never stored.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    full_name: str
    score: int = Field(ge=0, le=100)

    @property
    def key(self) -> int:
        return self.id

    @property
    def grade(self) -> Grade:
        return Grade.for_score(self.score)

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade.value}"


class GradeDistribution(BaseModel):
    """Per-grade student counts and the class average.

    average is None when there are no students.
    """

    model_config = ConfigDict(frozen=True)

    counts: dict[Grade, int]
    total_students: int
    average: float | None = None
