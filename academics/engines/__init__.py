"""
Enrollment, transcript and report engines.

This package contains the engines that perform the core business logic:
the registry mutates enrollments, the calculator and report engine only
read them.
"""

from .transcript import TranscriptCalculator
from .registry import EnrollmentRegistry
from .reports import ReportEngine

__all__ = [
    "EnrollmentRegistry",
    "TranscriptCalculator",
    "ReportEngine",
]
