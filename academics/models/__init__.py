"""
Data models for the enrollment engine.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the registry, the calculator, the data
collaborators and the presentation layer.
"""

from .enums import (
    StudentStatus,
    Semester,
    Grade,
    EnrollmentStatus,
    AcademicStanding,
)
from .identity import IdSequence
from .lookup import Lookup
from .student import Student
from .course import Course, CourseValidator
from .enrollment import Enrollment
from .transcript import StudentSnapshot, Transcript, TranscriptEntry
from .report import (
    GpaBand,
    RankedStudent,
    CourseEnrollmentCount,
    CourseEnrollmentStats,
    GradeShare,
    GradeDistributionReport,
)

__all__ = [
    # Value types
    "StudentStatus",
    "Semester",
    "Grade",
    "EnrollmentStatus",
    "AcademicStanding",
    # Identity / lookup
    "IdSequence",
    "Lookup",
    # Entities
    "Student",
    "Course",
    "CourseValidator",
    "Enrollment",
    "Transcript",
    "TranscriptEntry",
    "StudentSnapshot",
    # Reports
    "GpaBand",
    "RankedStudent",
    "CourseEnrollmentCount",
    "CourseEnrollmentStats",
    "GradeShare",
    "GradeDistributionReport",
]
