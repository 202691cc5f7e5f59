"""Line-oriented text file readers and writers."""

from .student_records import (
    parse_student_line,
    read_student_records,
    render_grade_report,
    write_grade_report,
    write_student_records,
)

__all__ = [
    "parse_student_line",
    "read_student_records",
    "render_grade_report",
    "write_grade_report",
    "write_student_records",
]
