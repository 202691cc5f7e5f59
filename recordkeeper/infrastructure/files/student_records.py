"""Student result file reader and grade report writer.

Input format: one ``id, name, score`` record per line, no header, no quoting.
Blank lines are skipped.  Reading is strict: the first bad line raises and
nothing from the file is returned.

ID and score are parsed as signed 32-bit base-10 integers; anything else
(decimals, underscores, hex, overflow) is an InvalidFormatError.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from recordkeeper.domain.exceptions import InvalidFormatError, MissingFieldError
from recordkeeper.domain.models.enums import Grade
from recordkeeper.domain.models.grading import Student
from recordkeeper.domain.services.grading import GradingService

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_EXPECTED_FIELDS = 3
_RULE = "-" * 50

REPORT_TITLE = "=== SCHOOL GRADING REPORT ==="
DISTRIBUTION_TITLE = "=== GRADE DISTRIBUTION ==="


def _parse_int(text: str, line_number: int, line: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise InvalidFormatError(
            line_number, line, f"Unable to convert ID or Score to integer. Line content: '{line}'"
        )
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise InvalidFormatError(
            line_number, line, f"ID or Score value is too large. Line content: '{line}'"
        )
    return value


def parse_student_line(line: str, line_number: int = 1) -> Student:
    """Parse one non-blank record line into a Student.

    Raises MissingFieldError if the line does not hold exactly three
    comma-separated fields or a field is empty after trimming.
    Raises InvalidFormatError if id or score is not an integer or the score
    is outside [0, 100].
    """
    fields = line.split(",")
    if len(fields) != _EXPECTED_FIELDS:
        raise MissingFieldError(
            line_number,
            line,
            f"Expected 3 fields (ID, Name, Score) but found {len(fields)}. Line content: '{line}'",
        )

    raw_id, full_name, raw_score = (field.strip() for field in fields)
    if not raw_id or not full_name or not raw_score:
        raise MissingFieldError(
            line_number, line, f"One or more fields are empty. Line content: '{line}'"
        )

    student_id = _parse_int(raw_id, line_number, line)
    score = _parse_int(raw_score, line_number, line)
    if not 0 <= score <= 100:
        raise InvalidFormatError(
            line_number, line, f"Score must be between 0 and 100. Found: {score}"
        )

    return Student(id=student_id, full_name=full_name, score=score)


def read_student_records(path: str | Path) -> list[Student]:
    """Read every record in path.  OSError propagates if the file cannot be opened."""
    students: list[Student] = []
    with open(path, encoding="utf-8") as handle:
        for line_number, raw in enumerate(handle, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            students.append(parse_student_line(line, line_number))
    logger.info("Read %d student records from %s", len(students), path)
    return students


def render_grade_report(
    students: list[Student],
    generated_at: datetime,
    grading: GradingService | None = None,
) -> list[str]:
    """Return the report as a list of lines (without newlines)."""
    distribution = (grading or GradingService()).distribution(students)
    counts = distribution.counts

    lines = [
        REPORT_TITLE,
        f"Generated on: {generated_at:%Y-%m-%d %H:%M:%S}",
        f"Total Students: {len(students)}",
        _RULE,
        "",
    ]
    lines.extend(str(student) for student in students)
    lines.extend(
        [
            "",
            _RULE,
            DISTRIBUTION_TITLE,
            f"Grade A (80-100): {counts[Grade.A]} students",
            f"Grade B (70-79):  {counts[Grade.B]} students",
            f"Grade C (60-69):  {counts[Grade.C]} students",
            f"Grade D (50-59):  {counts[Grade.D]} students",
            f"Grade F (0-49):   {counts[Grade.F]} students",
        ]
    )
    if distribution.average is not None:
        lines.append(f"Class Average: {distribution.average:.2f}")
    return lines


def write_grade_report(
    students: list[Student],
    path: str | Path,
    generated_at: datetime | None = None,
) -> None:
    """Write the grade report to path, replacing any existing file."""
    lines = render_grade_report(students, generated_at or datetime.now())
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")
    logger.info("Wrote grade report for %d students to %s", len(students), path)


def write_student_records(students: Iterable[tuple[int, str, int]], path: str | Path) -> None:
    """Write raw (id, name, score) rows in the input format."""
    with open(path, "w", encoding="utf-8") as handle:
        for student_id, full_name, score in students:
            handle.write(f"{student_id}, {full_name}, {score}\n")
