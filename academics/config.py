"""
Configuration constants for the enrollment engine.

This module contains all configuration values and constants used throughout
the registry and transcript calculator. Centralizing these makes it easy to
adjust behavior as academic policies change.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_WORKING_SET = DATA_DIR / "working_set.json"


# =============================================================================
# ENROLLMENT RULES
# =============================================================================

# Maximum sum of credits a student may hold in ENROLLED status at once.
# Completed and withdrawn courses do not count toward the current load.
MAX_CREDITS_PER_TERM = 18

# Environment variable that overrides MAX_CREDITS_PER_TERM
MAX_CREDITS_ENV_VAR = "ACADEMICS_MAX_CREDITS"


# =============================================================================
# COURSE VALIDATION
# =============================================================================

# 2-4 uppercase letters followed by 3 digits, e.g. "CS101", "MATH201"
COURSE_CODE_PATTERN = r"^[A-Z]{2,4}\d{3}$"
MIN_TITLE_LENGTH = 3
MIN_COURSE_CREDITS = 1
MAX_COURSE_CREDITS = 6

# Courses at or above this many credits are reported as "high credit"
HIGH_CREDIT_THRESHOLD = 4


# =============================================================================
# ACADEMIC STANDING
# =============================================================================

# Lower bounds (inclusive) of each standing band. Anything below
# PROBATION_GPA is SUSPENSION.
DEAN_LIST_GPA = 3.5
GOOD_STANDING_GPA = 3.0
SATISFACTORY_GPA = 2.0
PROBATION_GPA = 1.0


# =============================================================================
# REPORTS
# =============================================================================

# GPA bands for the institutional GPA distribution report, highest first.
# Each entry is (lower bound, label).
GPA_REPORT_BANDS = [
    (3.5, "Excellent (3.5-4.0)"),
    (3.0, "Good (3.0-3.49)"),
    (2.5, "Average (2.5-2.99)"),
    (0.0, "Below Average (<2.5)"),
]

DEFAULT_TOP_STUDENTS = 10


# =============================================================================
# REMOTE RECORDS SERVICE
# =============================================================================

REMOTE_TIMEOUT_SECONDS = 15


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL_ENV_VAR = "ACADEMICS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class RegistryConfig:
    """
    Tunable enrollment rules for an EnrollmentRegistry (immutable).

    Attributes:
        max_credits_per_term: Ceiling on the ENROLLED credit sum per student
    """
    max_credits_per_term: int = MAX_CREDITS_PER_TERM

    def __post_init__(self):
        if isinstance(self.max_credits_per_term, bool) or not isinstance(self.max_credits_per_term, int):
            raise ValueError(f"max_credits_per_term must be an integer, got {self.max_credits_per_term!r}")
        if self.max_credits_per_term <= 0:
            raise ValueError(f"max_credits_per_term must be positive, got {self.max_credits_per_term}")

    @classmethod
    def from_env(cls, environ=None) -> "RegistryConfig":
        """Build a config, honouring ACADEMICS_MAX_CREDITS when it is set."""
        environ = os.environ if environ is None else environ
        raw = environ.get(MAX_CREDITS_ENV_VAR)
        if raw is None or not raw.strip():
            return cls()
        try:
            value = int(raw)
        except ValueError:
            raise ValueError(f"{MAX_CREDITS_ENV_VAR} must be an integer, got {raw!r}") from None
        return cls(max_credits_per_term=value)
