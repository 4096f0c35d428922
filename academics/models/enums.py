"""
Value types for the enrollment domain.

Contains the enums that describe students, terms, grades, enrollment
lifecycle and academic standing. Each member carries its display data so
the presentation layer never has to map names to labels itself.
"""

from enum import Enum

from ..errors import InvalidArgumentError


class StudentStatus(Enum):
    """
    Lifecycle state of a student record.

    Only ACTIVE students may enroll. Students are never deleted; they are
    moved to one of the other states instead.
    """
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    GRADUATED = "Graduated"
    SUSPENDED = "Suspended"
    TRANSFERRED = "Transferred"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self):
        return self.value


class Semester(Enum):
    """Academic term a course is offered in, in calendar order."""
    SPRING = ("Spring", 1)
    SUMMER = ("Summer", 2)
    FALL = ("Fall", 3)

    def __init__(self, display_name: str, order: int):
        self.display_name = display_name
        self.order = order

    def next(self) -> "Semester":
        """Return the following term (FALL wraps around to SPRING)."""
        members = list(Semester)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def parse(cls, text: str) -> "Semester":
        """Parse "fall", "FALL" or "Fall" into a Semester."""
        if isinstance(text, Semester):
            return text
        key = (text or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise InvalidArgumentError(f"Unknown semester: {text!r}") from None

    def __str__(self):
        return self.display_name


class Grade(Enum):
    """
    Letter grades, best first.

    Each grade carries:
        display: Label printed on transcripts ("S+" for S)
        points: Grade-point value used in GPA
        passing: Whether the grade earns the course credits
        description: Human-readable meaning

    GPA EXCLUSIONS:
    ---------------
    I (Incomplete) and W (Withdrawn) are left out of GPA entirely. They are
    not zero-weighted; their credits never enter the denominator. F is a
    real 0.0 and does count.
    """
    S = ("S+", 4.0, True, "Outstanding")
    A = ("A", 4.0, True, "Excellent")
    B = ("B", 3.0, True, "Good")
    C = ("C", 2.0, True, "Satisfactory")
    D = ("D", 1.0, True, "Below Average")
    F = ("F", 0.0, False, "Fail")
    I = ("I", 0.0, False, "Incomplete")
    W = ("W", 0.0, False, "Withdrawn")

    def __init__(self, display: str, points: float, passing: bool, description: str):
        self.display = display
        self.points = points
        self.passing = passing
        self.description = description

    @property
    def counts_toward_gpa(self) -> bool:
        return self not in (Grade.I, Grade.W)

    @property
    def completes_enrollment(self) -> bool:
        """True when recording this grade closes out an ENROLLED course."""
        return self.counts_toward_gpa

    @classmethod
    def parse(cls, text: str) -> "Grade":
        """
        Parse a grade letter (case-insensitive). "S+" is accepted for S.

        Raises:
            InvalidArgumentError: If the text is not a known grade
        """
        if isinstance(text, Grade):
            return text
        key = (text or "").strip().upper()
        if key == "S+":
            key = "S"
        try:
            return cls[key]
        except KeyError:
            raise InvalidArgumentError(f"Invalid grade: {text!r}") from None

    @classmethod
    def from_points(cls, points: float) -> "Grade":
        """Map a grade-point value back to a letter (4.0 maps to A, not S)."""
        if points >= 4.0:
            return cls.A
        elif points >= 3.0:
            return cls.B
        elif points >= 2.0:
            return cls.C
        elif points >= 1.0:
            return cls.D
        return cls.F

    def __str__(self):
        return self.display


class EnrollmentStatus(Enum):
    """
    Possible states for an enrollment record.

    ENROLLED: Student is registered and the course is in progress
    COMPLETED: A final (non I/W) grade was recorded
    WITHDRAWN: Student left after a grade was on file; grade forced to W
    DROPPED: Reserved for administrative action outside the registry.
             No registry operation produces it.
    """
    ENROLLED = "Enrolled"
    COMPLETED = "Completed"
    WITHDRAWN = "Withdrawn"
    DROPPED = "Dropped"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self is not EnrollmentStatus.ENROLLED

    def __str__(self):
        return self.value


class AcademicStanding(Enum):
    """Banded classification derived solely from GPA."""
    DEAN_LIST = ("Dean's List", "GPA 3.5 or above")
    GOOD_STANDING = ("Good Standing", "GPA 3.0 - 3.49")
    SATISFACTORY = ("Satisfactory", "GPA 2.0 - 2.99")
    PROBATION = ("Academic Probation", "GPA 1.0 - 1.99")
    SUSPENSION = ("Academic Suspension", "GPA below 1.0")

    def __init__(self, display_name: str, description: str):
        self.display_name = display_name
        self.description = description

    def __str__(self):
        return self.display_name
