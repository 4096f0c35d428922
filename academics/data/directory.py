"""
In-memory student and course directories.

These hold the working set the registry operates on. They implement the
collaborator interfaces in interfaces.py and add the lookups and searches a
front end needs (by registration number, department, instructor, ...).
"""

import logging
from typing import Callable, Optional

from ..errors import (
    CourseNotFoundError,
    DuplicateCourseError,
    DuplicateStudentError,
    StudentNotFoundError,
)
from ..models import (
    Course,
    IdSequence,
    Lookup,
    Semester,
    Student,
    StudentStatus,
)

logger = logging.getLogger(__name__)


class StudentDirectory:
    """
    Stores students by id with a secondary index on registration number.

    Ids come from the injected IdSequence, so two directories never share a
    counter unless the caller hands them the same one.

    Usage:
        students = StudentDirectory()
        alice = students.create_student("2024CS001", "Alice Smith", "alice@uni.edu")
        students.find_student_by_id(alice.id).value   # -> alice
    """

    def __init__(self, id_source: Optional[IdSequence] = None):
        self._ids = id_source or IdSequence()
        self._students = {}     # id -> Student
        self._reg_no_index = {}  # reg_no -> id

    def create_student(self, reg_no: str, full_name: str, email: str = "",
                       status: StudentStatus = StudentStatus.ACTIVE) -> Student:
        """Build a student with a fresh id and add it to the directory."""
        if reg_no in self._reg_no_index:
            raise DuplicateStudentError(f"Student with registration number {reg_no} already exists")
        student = Student(
            id=self._ids.next_id(),
            reg_no=reg_no,
            full_name=full_name,
            email=email,
            status=status,
        )
        self.add_student(student)
        return student

    def add_student(self, student: Student):
        if student.reg_no in self._reg_no_index:
            raise DuplicateStudentError(
                f"Student with registration number {student.reg_no} already exists"
            )
        if student.id in self._students:
            raise DuplicateStudentError(f"Student with ID {student.id} already exists")
        self._students[student.id] = student
        self._reg_no_index[student.reg_no] = student.id
        logger.debug(f"Added student {student.reg_no} (id={student.id})")

    def update_student(self, student: Student):
        if student.id not in self._students:
            raise StudentNotFoundError(f"Student with ID {student.id} not found")
        owner = self._reg_no_index.get(student.reg_no)
        if owner is not None and owner != student.id:
            raise DuplicateStudentError(
                f"Student with registration number {student.reg_no} already exists"
            )
        # The caller may have mutated the stored instance, so find the old key by id
        stale = [reg_no for reg_no, sid in self._reg_no_index.items()
                 if sid == student.id and reg_no != student.reg_no]
        for reg_no in stale:
            del self._reg_no_index[reg_no]
        self._reg_no_index[student.reg_no] = student.id
        self._students[student.id] = student

    def deactivate_student(self, student_id: int) -> Student:
        student = self._require(student_id)
        student.deactivate()
        logger.info(f"Deactivated student {student.reg_no}")
        return student

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_student_by_id(self, student_id: int) -> Lookup[Student]:
        return Lookup.of(self._students.get(student_id))

    def find_student_by_reg_no(self, reg_no: str) -> Lookup[Student]:
        student_id = self._reg_no_index.get(reg_no)
        if student_id is None:
            return Lookup.missing()
        return self.find_student_by_id(student_id)

    def get_all_students(self) -> list:
        return list(self._students.values())

    def get_students_by_status(self, status: StudentStatus) -> list:
        return [s for s in self._students.values() if s.status is status]

    def get_active_students(self) -> list:
        return self.get_students_by_status(StudentStatus.ACTIVE)

    def search(self, query: str) -> list:
        """Case-insensitive substring match on name, email and reg no."""
        needle = query.lower()
        return [
            s for s in self._students.values()
            if needle in s.full_name.lower()
            or needle in (s.email or "").lower()
            or needle in s.reg_no.lower()
        ]

    def filter(self, predicate: Callable[[Student], bool]) -> list:
        return [s for s in self._students.values() if predicate(s)]

    def exists(self, student_id: int) -> bool:
        return student_id in self._students

    def count(self) -> int:
        return len(self._students)

    # ------------------------------------------------------------------
    # Membership updates (called by the registry)
    # ------------------------------------------------------------------

    def add_course_membership(self, student_id: int, code: str):
        self._require(student_id).add_course(code)

    def remove_course_membership(self, student_id: int, code: str):
        self._require(student_id).remove_course(code)

    def _require(self, student_id: int) -> Student:
        student = self._students.get(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student with ID {student_id} not found")
        return student


class CourseDirectory:
    """
    Stores courses by (upper-cased) course code.

    Courses are never removed; deactivate_course() keeps the record so
    historical enrollments still resolve.
    """

    def __init__(self):
        self._courses = {}  # code -> Course

    def add_course(self, course: Course):
        if course.code in self._courses:
            raise DuplicateCourseError(f"Course with code {course.code} already exists")
        self._courses[course.code] = course
        logger.debug(f"Added course {course.code}")

    def update_course(self, course: Course):
        if course.code not in self._courses:
            raise CourseNotFoundError(f"Course with code {course.code} not found")
        self._courses[course.code] = course

    def deactivate_course(self, code: str) -> Course:
        course = self.find_course_by_code(code).value_or(None)
        if course is None:
            raise CourseNotFoundError(f"Course with code {code} not found")
        course.deactivate()
        logger.info(f"Deactivated course {course.code}")
        return course

    def find_course_by_code(self, code: str) -> Lookup[Course]:
        if code is None:
            return Lookup.missing()
        return Lookup.of(self._courses.get(code.strip().upper()))

    def get_all_courses(self) -> list:
        return list(self._courses.values())

    def get_active_courses(self) -> list:
        return [c for c in self._courses.values() if c.active]

    def find_courses_by_department(self, department: str) -> list:
        wanted = department.lower()
        return [c for c in self._courses.values() if (c.department or "").lower() == wanted]

    def find_courses_by_instructor(self, instructor: str) -> list:
        wanted = instructor.lower()
        return [c for c in self._courses.values() if (c.instructor or "").lower() == wanted]

    def find_courses_by_semester(self, semester) -> list:
        semester = Semester.parse(semester)
        return [c for c in self._courses.values() if c.semester is semester]

    def find_courses_by_credits(self, credits: int) -> list:
        return [c for c in self._courses.values() if c.credits == credits]

    def search(self, query: str) -> list:
        """Case-insensitive substring match on code, title and instructor."""
        needle = query.lower()
        return [
            c for c in self._courses.values()
            if needle in c.code.lower()
            or needle in c.title.lower()
            or needle in (c.instructor or "").lower()
        ]

    def filter(self, predicate: Callable[[Course], bool]) -> list:
        return [c for c in self._courses.values() if predicate(c)]

    def exists(self, code: str) -> bool:
        return self.find_course_by_code(code).is_found

    def count(self) -> int:
        return len(self._courses)
