"""Grading service: letter-grade distribution and class average."""

from __future__ import annotations

from collections.abc import Iterable

from recordkeeper.domain.models.enums import Grade
from recordkeeper.domain.models.grading import GradeDistribution, Student


class GradingService:
    """Pure computation over parsed student results.

    The class is stateless; all inputs are passed per-call.
    """

    def distribution(self, students: Iterable[Student]) -> GradeDistribution:
        """Count students per letter grade and compute the mean score.

        Every grade appears in counts, with 0 for grades nobody received.
        average is None for an empty input rather than a division by zero.
        """
        counts = {grade: 0 for grade in Grade}
        total_score = 0
        total_students = 0
        for student in students:
            counts[student.grade] += 1
            total_score += student.score
            total_students += 1

        average = total_score / total_students if total_students else None
        return GradeDistribution(counts=counts, total_students=total_students, average=average)
