"""
Record parsing.

This module turns plain JSON-style dicts (from a working-set file or a
remote records service) into Student and Course objects.
"""

from ..errors import InvalidArgumentError
from ..models import Course, Grade, Semester, Student, StudentStatus


class RecordParser:
    """
    Converts raw record dicts into model objects.

    KEY RESPONSIBILITY: Validation happens in the model constructors, so a
    malformed record raises InvalidArgumentError right here instead of
    producing a half-valid object.

    FIELD NAMES:
    Both snake_case ("reg_no", "full_name") and the older camelCase
    ("regNo", "fullName") spellings are accepted because exports from the
    previous system used the latter.
    """

    def parse_student(self, data: dict, student_id: int = None) -> Student:
        """
        Parse a single student record.

        Args:
            data: Raw record; "id" is optional when student_id is given
            student_id: Id to use when the record carries none

        Returns:
            Student with its course-membership set populated from "courses"
        """
        raw_id = data.get("id")
        if raw_id is None:
            raw_id = student_id
        if raw_id is None:
            raise InvalidArgumentError(f"Student record has no id: {data!r}")
        try:
            parsed_id = int(raw_id)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Invalid student id: {raw_id!r}") from None

        return Student(
            id=parsed_id,
            reg_no=_first(data, "reg_no", "regNo"),
            full_name=_first(data, "full_name", "fullName", default=""),
            email=data.get("email", "") or "",
            status=self.parse_status(data.get("status", "ACTIVE")),
            courses=set(data.get("courses", []) or []),
        )

    def parse_course(self, data: dict) -> Course:
        """Parse a single course record; "active" defaults to True."""
        credits = data.get("credits")
        if isinstance(credits, str) and credits.strip().isdigit():
            credits = int(credits)
        return Course(
            code=data.get("code"),
            title=data.get("title", ""),
            credits=credits,
            instructor=data.get("instructor", ""),
            semester=Semester.parse(data.get("semester", "")),
            department=data.get("department", "") or "",
            active=bool(data.get("active", True)),
        )

    @staticmethod
    def parse_status(text) -> StudentStatus:
        if isinstance(text, StudentStatus):
            return text
        key = (text or "").strip().upper()
        try:
            return StudentStatus[key]
        except KeyError:
            raise InvalidArgumentError(f"Unknown student status: {text!r}") from None

    @staticmethod
    def parse_grade(text):
        """Return a Grade, or None when the record has no grade yet."""
        if text is None or (isinstance(text, str) and not text.strip()):
            return None
        return Grade.parse(text)


def _first(data: dict, *keys, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default
