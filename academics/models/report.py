"""
Report data models.

Dataclasses returned by the ReportEngine. They carry numbers only; the
terminal display decides how to lay them out.
"""

from dataclasses import dataclass

from .course import Course
from .enums import Grade
from .student import Student


@dataclass
class GpaBand:
    """One row of the GPA distribution report."""
    label: str              # e.g. "Good (3.0-3.49)"
    lower_bound: float      # Inclusive lower GPA bound
    student_count: int


@dataclass
class RankedStudent:
    """A student's place in the top-students report."""
    rank: int
    student: Student
    gpa: float


@dataclass
class CourseEnrollmentCount:
    course: Course
    enrolled: int           # Every enrollment record for the course, any status


@dataclass
class CourseEnrollmentStats:
    """Per-course enrollment counts plus catalog-wide totals."""
    rows: list              # List of CourseEnrollmentCount
    total_courses: int
    total_enrollments: int
    average_per_course: float


@dataclass
class GradeShare:
    """Count and percentage of one grade across all graded enrollments."""
    grade: Grade
    count: int
    percentage: float


@dataclass
class GradeDistributionReport:
    rows: list              # List of GradeShare in Grade order
    total_graded: int
