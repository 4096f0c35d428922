"""
Records Office - Main Orchestrator.

This module contains the RecordsOffice class that connects the registry,
transcript calculator and report engine to the presentation layer.

NOTE: Don't run this file directly. Run from the repository root:
    python -m academics
"""

import logging

from .config import DEFAULT_TOP_STUDENTS, DEFAULT_WORKING_SET, RegistryConfig
from .data import CourseDirectory, StudentDirectory, WorkingSet, WorkingSetLoader
from .engines import EnrollmentRegistry, ReportEngine, TranscriptCalculator
from .errors import StudentNotFoundError
from .models import Enrollment, Student, Transcript
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class RecordsOffice:
    """
    Main interface for the enrollment and transcript system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the engine layer to the presentation layer:

    1. Receives a request (enroll, grade, show transcript, ...)
    2. Calls the registry / calculator / report engine (pure data)
    3. Passes that data to the display

    Errors from the engine layer are NOT caught here. The caller (cli.py)
    decides how to present them.

    TO CHANGE THE UI:
    -----------------
    Pass a different display class:

        office = RecordsOffice(working_set, display=WebDisplay())

    Every method also returns the data it displayed, so an API can ignore
    the display entirely.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        office = RecordsOffice.from_file("data/working_set.json")
        office.enroll(1, "CS101")
        office.record_grade(1, "CS101", "A")
        office.show_transcript(1)
    """

    def __init__(self, working_set: WorkingSet = None, display=None):
        if working_set is None:
            students = StudentDirectory()
            courses = CourseDirectory()
            registry = EnrollmentRegistry(students, courses, config=RegistryConfig.from_env())
            working_set = WorkingSet(students=students, courses=courses, registry=registry)

        self.students = working_set.students
        self.courses = working_set.courses
        self.registry = working_set.registry
        self.calculator: TranscriptCalculator = self.registry.calculator
        self.reports = ReportEngine(self.registry, self.calculator)
        self.display = display or TerminalDisplay()

    @classmethod
    def from_file(cls, path=DEFAULT_WORKING_SET, config: RegistryConfig = None, display=None):
        """Build an office from a working-set JSON file."""
        logger.info(f"Opening records office from {path}")
        working_set = WorkingSetLoader(path).build(config)
        return cls(working_set, display=display)

    # ==================================================================
    # ENROLLMENT ACTIONS
    # ==================================================================

    def enroll(self, student_id: int, course_code: str) -> Enrollment:
        enrollment = self.registry.enroll(student_id, course_code)
        self.display.print_success(
            f"Enrolled {enrollment.student.reg_no} in {enrollment.course.code} "
            f"(enrollment #{enrollment.id})"
        )
        return enrollment

    def unenroll(self, student_id: int, course_code: str) -> Enrollment:
        enrollment = self.registry.unenroll(student_id, course_code)
        # An ungraded record is deleted and keeps its ENROLLED status
        outcome = "record withdrawn" if enrollment.has_grade else "record removed"
        self.display.print_success(
            f"Unenrolled {enrollment.student.reg_no} from {enrollment.course.code} ({outcome})"
        )
        return enrollment

    def withdraw(self, student_id: int, course_code: str) -> Enrollment:
        enrollment = self.registry.withdraw(student_id, course_code)
        self.display.print_success(
            f"Withdrew {enrollment.student.reg_no} from {enrollment.course.code}"
        )
        return enrollment

    def record_grade(self, student_id: int, course_code: str, grade) -> Enrollment:
        enrollment = self.registry.record_grade(student_id, course_code, grade)
        self.display.print_success(
            f"Recorded {enrollment.grade.display} for {enrollment.student.reg_no} "
            f"in {enrollment.course.code} ({enrollment.status})"
        )
        return enrollment

    def update_grade(self, student_id: int, course_code: str, grade) -> Enrollment:
        enrollment = self.registry.update_grade(student_id, course_code, grade)
        self.display.print_success(
            f"Updated grade to {enrollment.grade.display} for {enrollment.student.reg_no} "
            f"in {enrollment.course.code}"
        )
        return enrollment

    # ==================================================================
    # VIEWS
    # ==================================================================

    def show_student(self, student_id: int) -> Student:
        """Print a student's profile and their enrollments."""
        student = self._require_student(student_id)
        self.display.print_student_info(student)
        enrollments = self.registry.get_student_enrollments(student.id)
        self.display.print_enrollments(enrollments, title="Enrollments")
        credits = self.registry.get_student_credit_hours(student.id)
        self.display.print_subheader(f"Current load: {credits}/{self.registry.max_credits} credits")
        return student

    def show_course_enrollments(self, course_code: str) -> list:
        enrollments = self.registry.get_course_enrollments(course_code)
        self.display.print_enrollments(enrollments, title=f"Enrollments in {course_code.upper()}")
        return enrollments

    def show_transcript(self, student_id: int) -> Transcript:
        student = self._require_student(student_id)
        transcript = self.calculator.generate_transcript(student, self.registry)
        self.display.print_transcript(transcript)
        return transcript

    # ==================================================================
    # REPORTS
    # ==================================================================

    def show_gpa_distribution(self) -> list:
        bands = self.reports.gpa_distribution(self.students.get_all_students())
        self.display.print_gpa_distribution(bands)
        return bands

    def show_top_students(self, limit: int = DEFAULT_TOP_STUDENTS) -> list:
        ranked = self.reports.top_students(self.students.get_all_students(), limit)
        self.display.print_top_students(ranked)
        return ranked

    def show_enrollment_stats(self):
        stats = self.reports.course_enrollment_stats(self.courses.get_all_courses())
        self.display.print_enrollment_stats(stats)
        return stats

    def show_department_stats(self) -> dict:
        counts = self.reports.department_course_counts(self.courses.get_all_courses())
        self.display.print_department_stats(counts)
        return counts

    def show_grade_distribution(self):
        report = self.reports.grade_distribution_report(self.students.get_all_students())
        self.display.print_grade_distribution(report)
        return report

    def _require_student(self, student_id: int) -> Student:
        result = self.students.find_student_by_id(student_id)
        if not result:
            raise StudentNotFoundError(f"Student not found with ID: {student_id}")
        return result.value
