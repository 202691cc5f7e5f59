"""School grading demo.

Writes a sample student file, reads it back strictly, writes the grade
report, and previews the results.  Any read or write error stops the demo
with a message; there is no partial report.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import click

from recordkeeper.domain.exceptions import InvalidFormatError, MissingFieldError
from recordkeeper.domain.models.grading import Student
from recordkeeper.infrastructure.files.student_records import (
    read_student_records,
    write_grade_report,
    write_student_records,
)

from .output import OutputSink

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS: list[tuple[int, str, int]] = [
    (101, "Alice Smith", 85),
    (102, "Bob Johnson", 72),
    (103, "Carol Williams", 91),
    (104, "David Brown", 68),
    (105, "Emma Davis", 45),
    (106, "Frank Miller", 88),
    (107, "Grace Wilson", 76),
]


class GradingApp:
    def __init__(
        self,
        input_path: str | Path,
        report_path: str | Path,
        echo: OutputSink = click.echo,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._input_path = Path(input_path)
        self._report_path = Path(report_path)
        self._echo = echo
        self._now = now

    def create_sample_input_file(self) -> None:
        try:
            write_student_records(SAMPLE_STUDENTS, self._input_path)
        except OSError as exc:
            self._echo(f"Warning: Could not create sample file. {exc}")
            return
        self._echo(f"Sample input file '{self._input_path}' created with test data.")

    def run(self) -> list[Student] | None:
        """Read, report and preview.  Returns the students, or None if a step failed."""
        try:
            self._echo(f"Reading student data from: {self._input_path}")
            students = read_student_records(self._input_path)
            self._echo(f"Successfully read {len(students)} student records.")

            self._echo(f"Writing report to: {self._report_path}")
            write_grade_report(students, self._report_path, self._now())
        except FileNotFoundError as exc:
            self._echo("✗ File Error: The input file was not found.")
            self._echo(f"Details: {exc}")
            return None
        except InvalidFormatError as exc:
            self._echo(f"✗ Score Format Error: {exc.message}")
            return None
        except MissingFieldError as exc:
            self._echo(f"✗ Missing Field Error: {exc.message}")
            return None
        except PermissionError as exc:
            self._echo("✗ Access Error: Unable to access the file.")
            self._echo(f"Details: {exc}")
            return None
        except OSError as exc:
            logger.error("Grading I/O failure: %s", exc)
            self._echo("✗ IO Error: Problem reading or writing file.")
            self._echo(f"Details: {exc}")
            return None
        except UnicodeDecodeError as exc:
            self._echo("✗ Encoding Error: The input file is not valid UTF-8 text.")
            self._echo(f"Details: {exc}")
            return None
        except Exception as exc:
            logger.exception("Unexpected grading failure")
            self._echo(f"✗ Unexpected Error: {type(exc).__name__}")
            self._echo(f"Details: {exc}")
            return None

        self._echo("✓ Grade report generated successfully!")
        self._echo("\n=== PREVIEW OF RESULTS ===")
        for student in students:
            self._echo(str(student))
        self._echo(f"\nFull report saved to: {self._report_path}")
        return students


def run_grading_demo(
    input_path: str | Path,
    report_path: str | Path,
    echo: OutputSink = click.echo,
) -> list[Student] | None:
    echo("=== School Grading System ===\n")
    app = GradingApp(input_path, report_path, echo=echo)
    app.create_sample_input_file()
    return app.run()
