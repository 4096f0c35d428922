"""
Enrollment Registry.

This module owns the enrollment collection and every rule about changing
it: who may enroll, the credit ceiling, duplicate prevention, grading and
withdrawal.
"""

import logging
import threading
from typing import Optional

from ..config import RegistryConfig
from ..errors import (
    AcademicsError,
    CourseInactiveError,
    CourseNotFoundError,
    CreditLimitExceededError,
    DuplicateEnrollmentError,
    EnrollmentNotFoundError,
    StudentInactiveError,
    StudentNotFoundError,
)
from ..models import (
    Course,
    Enrollment,
    EnrollmentStatus,
    Grade,
    IdSequence,
    Lookup,
    Student,
)
from .transcript import TranscriptCalculator

logger = logging.getLogger(__name__)


class EnrollmentRegistry:
    """
    Single source of truth for who is enrolled in what.

    COLLABORATORS:
    --------------
    Students and courses live elsewhere. The registry resolves them on
    every operation through:
        students.find_student_by_id(id)            -> Lookup[Student]
        students.add_course_membership(id, code)
        students.remove_course_membership(id, code)
        courses.find_course_by_code(code)          -> Lookup[Course]

    The student's membership set is a denormalized index of the courses the
    student is registered in: added by enroll(), removed by unenroll() and
    withdraw(). Grading does not touch it. It is updated inside the same
    critical section as the enrollment collection, so the two are never
    observed out of step.

    ALL-OR-NOTHING:
    ---------------
    Every mutating operation does its fallible steps (lookups, validation,
    the collaborator membership call) before touching the collection. If
    any of them raises, nothing has changed.

    CONCURRENCY:
    ------------
    Mutations and reads are serialized with one re-entrant lock. Every
    Enrollment handed out, by queries and mutations alike, is a copy taken
    under the lock, so callers never hold a live record or a half-applied
    transition.
    Collaborator errors propagate as-is; nothing is retried.
    """

    def __init__(self, students, courses, config: Optional[RegistryConfig] = None,
                 id_source: Optional[IdSequence] = None,
                 calculator: Optional[TranscriptCalculator] = None):
        self.students = students
        self.courses = courses
        self.config = config or RegistryConfig()
        self.calculator = calculator or TranscriptCalculator()
        self._ids = id_source or IdSequence()
        self._enrollments = []
        self._lock = threading.RLock()

    @property
    def max_credits(self) -> int:
        return self.config.max_credits_per_term

    # ==================================================================
    # MUTATIONS
    # ==================================================================

    def enroll(self, student_id: int, course_code: str) -> Enrollment:
        """
        Enroll a student in a course.

        Checks, in order: student exists, course exists, student is ACTIVE,
        course is active, no ENROLLED record for the pair, and the credit
        ceiling.

        Returns:
            The new Enrollment (status ENROLLED)

        Raises:
            StudentNotFoundError, CourseNotFoundError, StudentInactiveError,
            CourseInactiveError, DuplicateEnrollmentError,
            CreditLimitExceededError
        """
        with self._lock:
            try:
                student = self._resolve_student(student_id)
                course = self._resolve_course(course_code)

                if not student.is_active:
                    raise StudentInactiveError(
                        f"Cannot enroll student {student.reg_no}: status is {student.status}"
                    )
                if not course.active:
                    raise CourseInactiveError(f"Cannot enroll in inactive course {course.code}")

                if self._find_active(student.id, course.code) is not None:
                    raise DuplicateEnrollmentError(
                        f"Student {student.reg_no} is already enrolled in course {course.code}"
                    )

                current = self._credit_hours(student.id)
                attempted = current + course.credits
                if attempted > self.max_credits:
                    raise CreditLimitExceededError(
                        f"Enrollment would exceed credit limit. Current: {attempted}, "
                        f"Limit: {self.max_credits}",
                        attempted=attempted,
                        limit=self.max_credits,
                    )
            except AcademicsError as e:
                logger.warning(f"Enroll rejected for student {student_id} in {course_code}: {e}")
                raise

            enrollment = Enrollment(self._ids.next_id(), student, course)
            self.students.add_course_membership(student.id, course.code)
            self._enrollments.append(enrollment)

            logger.info(
                f"Enrolled {student.reg_no} in {course.code} "
                f"(enrollment {enrollment.id}, load {attempted}/{self.max_credits} credits)"
            )
            return enrollment.copy()

    def unenroll(self, student_id: int, course_code: str) -> Enrollment:
        """
        Remove a student from a course they are currently ENROLLED in.

        If a grade is already on file (e.g. an I), the record is kept and
        withdrawn (status WITHDRAWN, grade W). Otherwise it is deleted.
        The student's membership set loses the course either way.

        Returns:
            The withdrawn or removed Enrollment

        Raises:
            EnrollmentNotFoundError: No ENROLLED record for the pair
        """
        with self._lock:
            code = _normalize_code(course_code)
            enrollment = self._find_active(student_id, code)
            if enrollment is None:
                logger.warning(f"Unenroll rejected: no active enrollment for student {student_id} in {code}")
                raise EnrollmentNotFoundError(
                    f"Enrollment not found for student {student_id} in course {code}"
                )

            self.students.remove_course_membership(student_id, code)

            if enrollment.has_grade:
                enrollment._withdraw()
                logger.info(f"Withdrew {enrollment.student.reg_no} from {code} (record kept, grade W)")
            else:
                self._enrollments.remove(enrollment)
                logger.info(f"Removed ungraded enrollment of {enrollment.student.reg_no} in {code}")
            return enrollment.copy()

    def withdraw(self, student_id: int, course_code: str) -> Enrollment:
        """
        Withdraw from an ENROLLED course, always keeping the record.

        Unlike unenroll(), the enrollment is never deleted: it becomes
        WITHDRAWN with grade W even if no grade was on file.

        Raises:
            EnrollmentNotFoundError: No ENROLLED record for the pair
        """
        with self._lock:
            code = _normalize_code(course_code)
            enrollment = self._find_active(student_id, code)
            if enrollment is None:
                logger.warning(f"Withdraw rejected: no active enrollment for student {student_id} in {code}")
                raise EnrollmentNotFoundError(
                    f"Enrollment not found for student {student_id} in course {code}"
                )

            self.students.remove_course_membership(student_id, code)
            enrollment._withdraw()
            logger.info(f"Withdrew {enrollment.student.reg_no} from {code}")
            return enrollment.copy()

    def record_grade(self, student_id: int, course_code: str, grade) -> Enrollment:
        """
        Record the grade for an ENROLLED course.

        Any grade other than I or W completes the enrollment. I and W are
        stored but the status stays ENROLLED (use withdraw() to leave).

        Args:
            grade: Grade, or a letter such as "B" / "s+"

        Raises:
            EnrollmentNotFoundError: No enrollment for the pair
            GradeNotAllowedError: The enrollment is not ENROLLED
            InvalidArgumentError: Unknown grade letter
        """
        grade = Grade.parse(grade)
        with self._lock:
            enrollment = self._require_enrollment(student_id, course_code)
            try:
                enrollment._assign_grade(grade)
            except AcademicsError as e:
                logger.warning(f"Grade rejected for student {student_id} in {enrollment.course.code}: {e}")
                raise

            logger.info(
                f"Recorded grade {grade.display} for {enrollment.student.reg_no} "
                f"in {enrollment.course.code} -> {enrollment.status}"
            )
            return enrollment.copy()

    def update_grade(self, student_id: int, course_code: str, grade) -> Enrollment:
        """
        Correct the grade on any enrollment for the pair.

        This is the correction path: it has no status precondition and does
        not re-derive the status (a COMPLETED record changed from B to F
        stays COMPLETED).

        Raises:
            EnrollmentNotFoundError: No enrollment for the pair
        """
        grade = Grade.parse(grade)
        with self._lock:
            enrollment = self._require_enrollment(student_id, course_code)
            previous = enrollment.grade
            enrollment._correct_grade(grade)
            logger.info(
                f"Corrected grade for {enrollment.student.reg_no} in {enrollment.course.code}: "
                f"{previous.display if previous else 'none'} -> {grade.display} "
                f"(status {enrollment.status} unchanged)"
            )
            return enrollment.copy()

    # ==================================================================
    # QUERIES
    # ==================================================================

    def find_enrollment(self, student_id: int, course_code: str) -> Lookup[Enrollment]:
        """
        Find the enrollment for a (student, course) pair.

        Prefers the ENROLLED record; otherwise returns the most recent
        historical one (a student may have re-enrolled after withdrawing).
        """
        with self._lock:
            found = self._find(student_id, _normalize_code(course_code))
            return Lookup.of(found.copy() if found is not None else None)

    def get_student_enrollments(self, student_id: int) -> list:
        with self._lock:
            return [e.copy() for e in self._enrollments if e.student.id == student_id]

    def get_course_enrollments(self, course_code: str) -> list:
        code = _normalize_code(course_code)
        with self._lock:
            return [e.copy() for e in self._enrollments if e.course.code == code]

    def get_all_enrollments(self) -> list:
        with self._lock:
            return [e.copy() for e in self._enrollments]

    def get_enrollments_by_status(self, status: EnrollmentStatus) -> list:
        with self._lock:
            return [e.copy() for e in self._enrollments if e.status is status]

    def is_student_enrolled(self, student_id: int, course_code: str) -> bool:
        with self._lock:
            return self._find_active(student_id, _normalize_code(course_code)) is not None

    def get_student_credit_hours(self, student_id: int) -> int:
        """Credits across ENROLLED records only (the current load)."""
        with self._lock:
            return self._credit_hours(student_id)

    def calculate_student_gpa(self, student_id: int) -> float:
        """Same rule as TranscriptCalculator.compute_gpa."""
        return self.calculator.compute_gpa(self.get_student_enrollments(student_id))

    def count(self) -> int:
        with self._lock:
            return len(self._enrollments)

    def __len__(self):
        return self.count()

    # ==================================================================
    # INTERNALS (call with the lock held)
    # ==================================================================

    def _resolve_student(self, student_id: int) -> Student:
        result = self.students.find_student_by_id(student_id)
        if not result:
            raise StudentNotFoundError(f"Student with ID {student_id} not found")
        return result.value

    def _resolve_course(self, course_code: str) -> Course:
        result = self.courses.find_course_by_code(course_code)
        if not result:
            raise CourseNotFoundError(f"Course with code {course_code} not found")
        return result.value

    def _find_active(self, student_id: int, code: str) -> Optional[Enrollment]:
        for e in self._enrollments:
            if e.status is EnrollmentStatus.ENROLLED and e.key == (student_id, code):
                return e
        return None

    def _find(self, student_id: int, code: str) -> Optional[Enrollment]:
        active = self._find_active(student_id, code)
        if active is not None:
            return active
        for e in reversed(self._enrollments):
            if e.key == (student_id, code):
                return e
        return None

    def _require_enrollment(self, student_id: int, course_code: str) -> Enrollment:
        code = _normalize_code(course_code)
        enrollment = self._find(student_id, code)
        if enrollment is None:
            logger.warning(f"No enrollment for student {student_id} in {code}")
            raise EnrollmentNotFoundError(
                f"Enrollment not found for student {student_id} in course {code}"
            )
        return enrollment

    def _credit_hours(self, student_id: int) -> int:
        return sum(
            e.course.credits
            for e in self._enrollments
            if e.student.id == student_id and e.status is EnrollmentStatus.ENROLLED
        )


def _normalize_code(course_code: str) -> str:
    return (course_code or "").strip().upper()
