"""
Student data model.

A Student is owned by the student directory (or a remote records service);
the registry only reads it and keeps its course-membership set in sync.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ..errors import InvalidArgumentError
from .enums import StudentStatus


@dataclass(eq=False)
class Student:
    """
    Represents a single student record.

    Attributes:
        id: Numeric identity, stable for the process lifetime
        reg_no: Registration number (unique within a directory)
        full_name: Display name
        email: Contact email
        status: StudentStatus; only ACTIVE students may enroll
        courses: Course codes the student is currently registered in.
                 This is a denormalized index maintained by the registry.
    """
    id: int
    reg_no: str
    full_name: str
    email: str = ""
    status: StudentStatus = StudentStatus.ACTIVE
    courses: set = field(default_factory=set)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidArgumentError(f"Student id must be an integer, got {self.id!r}")
        if not self.reg_no or not str(self.reg_no).strip():
            raise InvalidArgumentError("Registration number cannot be blank")
        if not isinstance(self.status, StudentStatus):
            raise InvalidArgumentError(f"Invalid student status: {self.status!r}")
        self.reg_no = str(self.reg_no).strip()
        self.courses = set(self.courses)

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status is StudentStatus.ACTIVE

    def set_status(self, status: StudentStatus):
        if not isinstance(status, StudentStatus):
            raise InvalidArgumentError(f"Invalid student status: {status!r}")
        self.status = status
        self._touch()

    def deactivate(self):
        self.set_status(StudentStatus.INACTIVE)

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def set_full_name(self, full_name: str):
        self.full_name = full_name
        self._touch()

    def set_email(self, email: str):
        self.email = email
        self._touch()

    @property
    def display_type(self) -> str:
        return "STUDENT"

    def profile(self) -> str:
        """Multi-line profile used by the terminal display."""
        courses = ", ".join(sorted(self.courses)) or "None"
        lines = [
            "Student Profile",
            "===============",
            f"ID: {self.id}",
            f"Registration No: {self.reg_no}",
            f"Name: {self.full_name}",
            f"Email: {self.email}",
            f"Status: {self.status}",
            f"Enrolled Courses: {courses}",
            f"Created: {self.created_at:%Y-%m-%d %H:%M}",
        ]
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Course membership (registry-maintained)
    # ------------------------------------------------------------------

    def add_course(self, course_code: str):
        self.courses.add(course_code)
        self._touch()

    def remove_course(self, course_code: str):
        self.courses.discard(course_code)
        self._touch()

    def is_enrolled_in(self, course_code: str) -> bool:
        return course_code in self.courses

    def _touch(self):
        self.updated_at = datetime.now()

    def __eq__(self, other):
        if not isinstance(other, Student):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f"Student(id={self.id}, reg_no={self.reg_no!r}, name={self.full_name!r}, status={self.status.name})"
