"""
Student Enrollment & Transcript Package
=======================================

The enrollment core of a student records system: who is registered in
which course, what grade they earned, and what that adds up to.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                          ENGINE LAYER                                   │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌────────────────────┐  ┌─────────────────────┐  ┌─────────────────┐   │
│  │ EnrollmentRegistry │  │ TranscriptCalculator│  │  ReportEngine   │   │
│  │ (mutations, rules) │  │ (GPA, standing)     │  │ (institutional) │   │
│  └────────────────────┘  └─────────────────────┘  └─────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                 │ resolves students/courses through
                 ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                       COLLABORATORS (data/)                             │
│                                                                         │
│  StudentLookup / CourseLookup / MembershipUpdater protocols             │
│  ├── StudentDirectory, CourseDirectory   (in-memory)                    │
│  └── RemoteDirectory                     (HTTP records service)         │
│  WorkingSetLoader                        (JSON bootstrap)               │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│  TerminalDisplay  (can be replaced with WebDisplay, APIResponse, ...)   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         RecordsOffice                                   │
│          (Orchestrator - connects engines to presentation)              │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

academics/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants, RegistryConfig
├── errors.py            # AcademicsError hierarchy
├── office.py            # RecordsOffice orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Entities, enums and result types
│   ├── enums.py         # StudentStatus, Semester, Grade, EnrollmentStatus, AcademicStanding
│   ├── identity.py      # IdSequence
│   ├── lookup.py        # Lookup (found / missing)
│   ├── student.py       # Student
│   ├── course.py        # Course, CourseValidator
│   ├── enrollment.py    # Enrollment
│   ├── transcript.py    # Transcript, TranscriptEntry, StudentSnapshot
│   └── report.py        # Report rows
│
├── data/                # Collaborators and loading
│   ├── interfaces.py    # StudentLookup, CourseLookup, MembershipUpdater
│   ├── directory.py     # StudentDirectory, CourseDirectory
│   ├── parser.py        # RecordParser
│   ├── remote.py        # RemoteDirectory
│   └── loader.py        # WorkingSetLoader
│
├── engines/
│   ├── registry.py      # EnrollmentRegistry
│   ├── transcript.py    # TranscriptCalculator
│   └── reports.py       # ReportEngine
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

Basic usage:

    from academics import Course, CourseDirectory, EnrollmentRegistry, StudentDirectory

    students = StudentDirectory()
    courses = CourseDirectory()
    registry = EnrollmentRegistry(students, courses)

    alice = students.create_student("2024CS001", "Alice Smith")
    courses.add_course(Course("CS101", "Intro to Programming", 3, "Dr. Lee", "FALL"))

    registry.enroll(alice.id, "CS101")
    registry.record_grade(alice.id, "CS101", "A")

    transcript = registry.calculator.generate_transcript(alice, registry)
    print(transcript.render())

Running from command line:

    python -m academics

"""

# Version
__version__ = "1.0.0"

# Main exports
from .office import RecordsOffice
from .cli import main

# Model exports (for programmatic use)
from .models import (
    StudentStatus,
    Semester,
    Grade,
    EnrollmentStatus,
    AcademicStanding,
    IdSequence,
    Lookup,
    Student,
    Course,
    Enrollment,
    Transcript,
    TranscriptEntry,
    StudentSnapshot,
)

# Engine exports
from .engines import (
    EnrollmentRegistry,
    TranscriptCalculator,
    ReportEngine,
)

# Data exports
from .data import (
    StudentDirectory,
    CourseDirectory,
    RemoteDirectory,
    WorkingSetLoader,
)

# UI exports
from .ui import TerminalDisplay

# Configuration and errors
from .config import RegistryConfig, MAX_CREDITS_PER_TERM
from .errors import (
    AcademicsError,
    NotFoundError,
    ConflictError,
    InvalidStateError,
    InvalidArgumentError,
    StudentNotFoundError,
    CourseNotFoundError,
    EnrollmentNotFoundError,
    DuplicateEnrollmentError,
    CreditLimitExceededError,
    StudentInactiveError,
    CourseInactiveError,
    GradeNotAllowedError,
    CollaboratorError,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "RecordsOffice",
    "main",
    # Models
    "StudentStatus",
    "Semester",
    "Grade",
    "EnrollmentStatus",
    "AcademicStanding",
    "IdSequence",
    "Lookup",
    "Student",
    "Course",
    "Enrollment",
    "Transcript",
    "TranscriptEntry",
    "StudentSnapshot",
    # Engines
    "EnrollmentRegistry",
    "TranscriptCalculator",
    "ReportEngine",
    # Data
    "StudentDirectory",
    "CourseDirectory",
    "RemoteDirectory",
    "WorkingSetLoader",
    # UI
    "TerminalDisplay",
    # Config
    "RegistryConfig",
    "MAX_CREDITS_PER_TERM",
    # Errors
    "AcademicsError",
    "NotFoundError",
    "ConflictError",
    "InvalidStateError",
    "InvalidArgumentError",
    "StudentNotFoundError",
    "CourseNotFoundError",
    "EnrollmentNotFoundError",
    "DuplicateEnrollmentError",
    "CreditLimitExceededError",
    "StudentInactiveError",
    "CourseInactiveError",
    "GradeNotAllowedError",
    "CollaboratorError",
]
