"""
Enrollment data model.

An Enrollment links exactly one Student to one Course and carries the
status and grade of that link. Status, grade and grade date are read-only
from outside; only the registry drives the private transitions, and it
hands callers detached copies (see copy()).
"""

import copy
from datetime import datetime
from typing import Optional

from ..errors import (
    CourseInactiveError,
    GradeNotAllowedError,
    InvalidArgumentError,
    StudentInactiveError,
)
from .course import Course
from .enums import EnrollmentStatus, Grade
from .student import Student


class Enrollment:
    """
    The student-course link record.

    STATE MACHINE:
    --------------
        ENROLLED --_assign_grade(g), g not in {I, W}--> COMPLETED
        ENROLLED --_withdraw()-----------------------> WITHDRAWN (grade = W)

    COMPLETED and WITHDRAWN are terminal. _assign_grade() with I or W records
    the grade but leaves the status ENROLLED. DROPPED exists in the status
    vocabulary but nothing here produces it.

    IDENTITY:
    ---------
    Two enrollments are equal when they link the same student id to the
    same course code, regardless of their ids. The registry relies on this
    to spot duplicate attempts.

    The ACTIVE-student / active-course rule is checked once, here at
    construction. Later status changes on the student or course do not
    invalidate an existing enrollment.
    """

    def __init__(self, enrollment_id: int, student: Student, course: Course,
                 enrollment_date: Optional[datetime] = None):
        if student is None:
            raise InvalidArgumentError("Student cannot be null")
        if course is None:
            raise InvalidArgumentError("Course cannot be null")
        if not student.is_active:
            raise StudentInactiveError(
                f"Cannot enroll student {student.reg_no}: status is {student.status}"
            )
        if not course.active:
            raise CourseInactiveError(f"Cannot enroll in inactive course {course.code}")

        self._id = enrollment_id
        self._student = student
        self._course = course
        self._enrollment_date = enrollment_date or datetime.now()
        self._grade: Optional[Grade] = None
        self._grade_date: Optional[datetime] = None
        self._status = EnrollmentStatus.ENROLLED

    # Fixed at construction
    @property
    def id(self) -> int:
        return self._id

    @property
    def student(self) -> Student:
        return self._student

    @property
    def course(self) -> Course:
        return self._course

    @property
    def enrollment_date(self) -> datetime:
        return self._enrollment_date

    # Changed only through the transitions below
    @property
    def grade(self) -> Optional[Grade]:
        return self._grade

    @property
    def grade_date(self) -> Optional[datetime]:
        return self._grade_date

    @property
    def status(self) -> EnrollmentStatus:
        return self._status

    @property
    def key(self) -> tuple:
        """(student id, course code): the identity used for equality."""
        return (self._student.id, self._course.code)

    # ------------------------------------------------------------------
    # Transitions (registry only, under its lock)
    # ------------------------------------------------------------------

    def _assign_grade(self, grade: Grade):
        """Record a grade on an ENROLLED enrollment; completes it unless I/W."""
        if self._status is not EnrollmentStatus.ENROLLED:
            raise GradeNotAllowedError(
                f"Cannot assign grade to enrollment in status {self._status} "
                f"({self._student.reg_no} / {self._course.code})"
            )
        grade = _require_grade(grade)
        self._grade = grade
        self._grade_date = datetime.now()
        if grade.completes_enrollment:
            self._status = EnrollmentStatus.COMPLETED

    def _correct_grade(self, grade: Grade):
        """Correct the grade whatever the status; the status is left alone."""
        self._grade = _require_grade(grade)
        self._grade_date = datetime.now()

    def _withdraw(self):
        self._grade = Grade.W
        self._grade_date = datetime.now()
        self._status = EnrollmentStatus.WITHDRAWN

    def copy(self) -> "Enrollment":
        """Detached copy; later transitions on the original do not reach it."""
        return copy.copy(self)

    # ------------------------------------------------------------------
    # Derived
    # ------------------------------------------------------------------

    @property
    def has_grade(self) -> bool:
        return self.grade is not None

    @property
    def is_active(self) -> bool:
        return self.status is EnrollmentStatus.ENROLLED

    @property
    def is_completed(self) -> bool:
        return self.status is EnrollmentStatus.COMPLETED

    @property
    def credits(self) -> int:
        return self._course.credits

    @property
    def quality_points(self) -> float:
        """Grade points x credits (0.0 when ungraded)."""
        if self.grade is None:
            return 0.0
        return self.grade.points * self._course.credits

    def __eq__(self, other):
        if not isinstance(other, Enrollment):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        grade = self.grade.display if self.grade else "No Grade"
        return (
            f"Enrollment(id={self._id}, student={self._student.reg_no!r}, "
            f"course={self._course.code!r}, grade={grade}, status={self.status.name}, "
            f"date={self._enrollment_date:%Y-%m-%d})"
        )


def _require_grade(grade) -> Grade:
    if grade is None:
        raise InvalidArgumentError("Grade cannot be null")
    if not isinstance(grade, Grade):
        raise InvalidArgumentError(f"Invalid grade: {grade!r}")
    return grade
