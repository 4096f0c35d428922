"""
Exception hierarchy for the enrollment engine.

Errors are grouped by kind so callers can handle a whole family at once:

    NotFoundError        student / course / enrollment absent
    ConflictError        duplicate enrollment, credit limit, duplicate records
    InvalidStateError    operation not allowed in the record's current state
    InvalidArgumentError malformed values caught while building entities

NotFound and Conflict are expected, recoverable outcomes (show a message and
carry on). InvalidArgument means the caller passed bad data and is raised
immediately instead of being defaulted.
"""


class AcademicsError(Exception):
    """Base class for every error raised by the academics package."""

    default_code = "ACADEMICS_ERROR"

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


# =============================================================================
# ERROR KINDS
# =============================================================================

class NotFoundError(AcademicsError):
    default_code = "NOT_FOUND"


class ConflictError(AcademicsError):
    default_code = "CONFLICT"


class InvalidStateError(AcademicsError):
    default_code = "INVALID_STATE"


class InvalidArgumentError(AcademicsError, ValueError):
    default_code = "INVALID_ARGUMENT"


# =============================================================================
# CONCRETE ERRORS
# =============================================================================

class StudentNotFoundError(NotFoundError):
    default_code = "STUDENT_NOT_FOUND"


class CourseNotFoundError(NotFoundError):
    default_code = "COURSE_NOT_FOUND"


class EnrollmentNotFoundError(NotFoundError):
    default_code = "ENROLLMENT_NOT_FOUND"


class DuplicateEnrollmentError(ConflictError):
    default_code = "DUPLICATE_ENROLLMENT"


class CreditLimitExceededError(ConflictError):
    """Raised when an enrollment would push a student past the credit ceiling."""

    default_code = "CREDIT_LIMIT_EXCEEDED"

    def __init__(self, message: str, attempted: int, limit: int):
        super().__init__(message)
        self.attempted = attempted
        self.limit = limit


class DuplicateStudentError(ConflictError):
    default_code = "DUPLICATE_STUDENT"


class DuplicateCourseError(ConflictError):
    default_code = "DUPLICATE_COURSE"


class StudentInactiveError(InvalidStateError):
    default_code = "STUDENT_INACTIVE"


class CourseInactiveError(InvalidStateError):
    default_code = "COURSE_INACTIVE"


class GradeNotAllowedError(InvalidStateError):
    """Raised when a grade is recorded against an enrollment that is not ENROLLED."""

    default_code = "GRADE_NOT_ALLOWED"


class CollaboratorError(AcademicsError):
    """
    A student/course collaborator failed to answer (transport or server error).

    The engine never retries; this is surfaced to the caller as-is.
    """

    default_code = "COLLABORATOR_ERROR"
