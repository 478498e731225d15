"""
Student result file reader and grade report writer.

Input files are plain comma-delimited text, one student per line:

    id,full_name,score

Every error raised while reading names the 1-based line number it came from.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List

from recordkeeper.domain.models import Student
from recordkeeper.exceptions import (
    InvalidFormatError,
    InvalidScoreFormatError,
    MissingFieldError,
    StorageIOError,
)
from recordkeeper.reporter import format_student
from recordkeeper.utils.logging import get_logger

log = get_logger(__name__)

FIELD_COUNT = 3
DELIMITER = ","
ENCODING = "utf-8"

# ASCII digits only, optional sign and surrounding blanks; no underscores.
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def _is_integer(raw: str) -> bool:
    return _INTEGER.fullmatch(raw) is not None


def parse_student_line(line: str, line_number: int, path: Path | str = "") -> Student:
    """Parse one `id,full_name,score` line into a Student."""
    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise MissingFieldError(
            f"Line {line_number}: Missing field(s).", line_number=line_number, path=path
        )

    raw_id, raw_name, raw_score = parts
    if not _is_integer(raw_id):
        raise InvalidFormatError(
            f"Line {line_number}: Invalid ID format.", line_number=line_number, path=path
        )
    student_id = int(raw_id)

    name = raw_name.strip()
    if not name:
        raise MissingFieldError(
            f"Line {line_number}: Name is missing.", line_number=line_number, path=path
        )

    if not _is_integer(raw_score):
        raise InvalidScoreFormatError(
            f"Line {line_number}: Invalid score format.", line_number=line_number, path=path
        )
    score = int(raw_score)

    return Student(id=student_id, full_name=name, score=score)


def read_students(path: Path | str) -> List[Student]:
    """
    Read every student from `path`.

    Whitespace-only lines are skipped but still counted for line numbers.

    Raises
    ------
    StorageIOError
        If the file is missing or unreadable.
    MissingFieldError, InvalidFormatError, InvalidScoreFormatError
        On the first malformed line, including one that is not valid UTF-8.
    """
    path = Path(path)
    students: List[Student] = []
    try:
        with path.open("rb") as f:
            for line_number, raw in enumerate(f, start=1):
                try:
                    line = raw.decode(ENCODING)
                except UnicodeDecodeError:
                    raise InvalidFormatError(
                        f"Line {line_number}: Not valid {ENCODING} text.",
                        line_number=line_number,
                        path=path,
                    ) from None
                if not line.strip():
                    continue
                students.append(parse_student_line(line, line_number, path))
    except OSError as exc:
        raise StorageIOError(f"Cannot read {path}: {exc}", path=path) from exc

    log.info("Students loaded", extra={"path": str(path), "count": len(students)})
    return students


def write_report(students: Iterable[Student], path: Path | str) -> int:
    """Write one formatted line per student to `path`; returns the line count."""
    path = Path(path)
    written = 0
    try:
        with path.open("w", encoding="utf-8") as f:
            for student in students:
                f.write(format_student(student) + "\n")
                written += 1
    except OSError as exc:
        raise StorageIOError(f"Cannot write {path}: {exc}", path=path) from exc

    log.info("Report written", extra={"path": str(path), "count": written})
    return written


__all__ = [
    "FIELD_COUNT",
    "parse_student_line",
    "read_students",
    "write_report",
]
