"""Line-based parser for student result files."""

import logging
from typing import Iterable, List

from recordkeeper.domain.entities import MAX_SCORE, MIN_SCORE, Student
from recordkeeper.domain.errors import ErrorKind, RecordError
from recordkeeper.infrastructure.text_fields import parse_integer

logger = logging.getLogger(__name__)

DELIMITER = ","
FIELD_COUNT = 3


def parse_line(line: str, line_number: int = 1) -> Student:
    """
    Parse one "id,full name,score" line.

    Args:
        line: Raw line without its trailing newline
        line_number: 1-based position, reported in errors

    Returns:
        The parsed Student

    Raises:
        RecordError: MISSING_FIELD for a wrong field count, INVALID_FORMAT for
            a non-integer id or score, INVALID_ARGUMENT for a score outside
            0..100
    """
    parts = line.split(DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise RecordError(
            ErrorKind.MISSING_FIELD,
            f"Missing field(s) in line {line_number}: {line}",
            details={"line_number": line_number, "line": line},
        )

    id_text, full_name, score_text = (part.strip() for part in parts)
    student_id = _parse_int("id", id_text, line, line_number)
    score = _parse_int("score", score_text, line, line_number)

    if score < MIN_SCORE or score > MAX_SCORE:
        raise RecordError(
            ErrorKind.INVALID_ARGUMENT,
            f"Score out of range in line {line_number}: {line}",
            details={"line_number": line_number, "line": line, "field": "score", "value": score},
        )

    return Student(id=student_id, full_name=full_name, score=score)


def parse_lines(lines: Iterable[str]) -> List[Student]:
    """Parse every line; the first bad line aborts the whole read."""
    students = []
    for line_number, line in enumerate(lines, start=1):
        students.append(parse_line(line.rstrip("\r\n"), line_number))
    return students


def read_students(input_file_path: str) -> List[Student]:
    """
    Read all students from a file.

    Raises:
        RecordError: IO_FAILURE if the file cannot be read, or any parse error
    """
    try:
        with open(input_file_path, "r", encoding="utf-8-sig") as f:
            students = parse_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        raise RecordError(
            ErrorKind.IO_FAILURE,
            f"Cannot read input file {input_file_path}: {e}",
            details={"path": input_file_path},
        ) from e

    logger.info(f"Read {len(students)} students from {input_file_path}")
    return students


def _parse_int(field: str, text: str, line: str, line_number: int) -> int:
    value = parse_integer(text)
    if value is None:
        raise RecordError(
            ErrorKind.INVALID_FORMAT,
            f"Invalid {field} format in line {line_number}: {line}",
            details={"line_number": line_number, "line": line, "field": field},
        )
    return value
