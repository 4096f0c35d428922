"""
Course data model.

Contains the Course dataclass and the CourseValidator rules applied when a
course is built or edited.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime

from ..config import (
    COURSE_CODE_PATTERN,
    HIGH_CREDIT_THRESHOLD,
    MAX_COURSE_CREDITS,
    MIN_COURSE_CREDITS,
    MIN_TITLE_LENGTH,
)
from ..errors import InvalidArgumentError
from .enums import Semester

_CODE_RE = re.compile(COURSE_CODE_PATTERN)


class CourseValidator:
    """Field rules shared by construction and the setters."""

    @staticmethod
    def is_valid_code(code) -> bool:
        return isinstance(code, str) and bool(_CODE_RE.match(code))

    @staticmethod
    def is_valid_title(title) -> bool:
        return isinstance(title, str) and len(title.strip()) >= MIN_TITLE_LENGTH

    @staticmethod
    def is_valid_credits(credits) -> bool:
        if isinstance(credits, bool) or not isinstance(credits, int):
            return False
        return MIN_COURSE_CREDITS <= credits <= MAX_COURSE_CREDITS


@dataclass(eq=False)
class Course:
    """
    Represents a course offering in the catalog.

    The course code is the identity and never changes after construction.
    Deactivating a course keeps the record so that historical enrollments
    still resolve; it only blocks new enrollments.

    Attributes:
        code: Course code, upper-cased (e.g., "CS101")
        title: Human-readable course title (at least 3 characters)
        credits: Credit hours, 1-6
        instructor: Instructor display name
        semester: Semester the course runs in
        department: Owning department
        active: False once the course is withdrawn from the catalog
    """
    code: str
    title: str
    credits: int
    instructor: str
    semester: Semester
    department: str = ""
    active: bool = True
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if self.code is None:
            raise InvalidArgumentError("Course code cannot be null")
        self.code = str(self.code).strip().upper()
        if not CourseValidator.is_valid_code(self.code):
            raise InvalidArgumentError(f"Invalid course code format: {self.code}")
        if not CourseValidator.is_valid_title(self.title):
            raise InvalidArgumentError(f"Invalid course title: {self.title!r}")
        if not CourseValidator.is_valid_credits(self.credits):
            raise InvalidArgumentError(
                f"Credits must be between {MIN_COURSE_CREDITS} and {MAX_COURSE_CREDITS}, got {self.credits!r}"
            )
        if self.instructor is None:
            raise InvalidArgumentError("Instructor cannot be null")
        self.semester = Semester.parse(self.semester)

    # ------------------------------------------------------------------
    # Setters (validate, then bump updated_at)
    # ------------------------------------------------------------------

    def set_title(self, title: str):
        if not CourseValidator.is_valid_title(title):
            raise InvalidArgumentError("Invalid course title")
        self.title = title
        self._touch()

    def set_credits(self, credits: int):
        if not CourseValidator.is_valid_credits(credits):
            raise InvalidArgumentError(
                f"Credits must be between {MIN_COURSE_CREDITS} and {MAX_COURSE_CREDITS}"
            )
        self.credits = credits
        self._touch()

    def set_instructor(self, instructor: str):
        self.instructor = instructor
        self._touch()

    def set_semester(self, semester):
        self.semester = Semester.parse(semester)
        self._touch()

    def set_department(self, department: str):
        self.department = department
        self._touch()

    def set_active(self, active: bool):
        self.active = bool(active)
        self._touch()

    def deactivate(self):
        self.set_active(False)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def is_high_credit(self) -> bool:
        return self.credits >= HIGH_CREDIT_THRESHOLD

    def summary(self) -> str:
        dept = f" from {self.department}" if self.department else ""
        return (
            f"Course: {self.title} ({self.code}) - {self.credits} credits, "
            f"taught by {self.instructor} in {self.semester}{dept}"
        )

    def _touch(self):
        self.updated_at = datetime.now()

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return self.code == other.code

    def __hash__(self):
        return hash(self.code)

    def __repr__(self):
        return (
            f"Course(code={self.code!r}, title={self.title!r}, credits={self.credits}, "
            f"instructor={self.instructor!r}, semester={self.semester.name}, dept={self.department!r})"
        )
