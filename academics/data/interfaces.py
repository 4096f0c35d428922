"""
Collaborator interfaces used by the registry.

The registry never owns students or courses. It reaches them through these
narrow capabilities, which the in-memory directories and the remote records
client both implement.
"""

from typing import Protocol, runtime_checkable

from ..models import Course, Lookup, Student


@runtime_checkable
class StudentLookup(Protocol):
    def find_student_by_id(self, student_id: int) -> Lookup[Student]:
        ...


@runtime_checkable
class CourseLookup(Protocol):
    def find_course_by_code(self, code: str) -> Lookup[Course]:
        ...


@runtime_checkable
class MembershipUpdater(Protocol):
    """Keeps a student's registered-course set in step with enrollments."""

    def add_course_membership(self, student_id: int, code: str) -> None:
        ...

    def remove_course_membership(self, student_id: int, code: str) -> None:
        ...
