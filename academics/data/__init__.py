"""
Student/course collaborators and working-set loading.

This package holds everything the registry talks to but does not own: the
collaborator interfaces, the in-memory and HTTP implementations of them,
record parsing and the JSON working-set loader.
"""

from .interfaces import StudentLookup, CourseLookup, MembershipUpdater
from .directory import StudentDirectory, CourseDirectory
from .parser import RecordParser
from .remote import RemoteDirectory
from .loader import WorkingSetLoader, WorkingSet

__all__ = [
    "StudentLookup",
    "CourseLookup",
    "MembershipUpdater",
    "StudentDirectory",
    "CourseDirectory",
    "RecordParser",
    "RemoteDirectory",
    "WorkingSetLoader",
    "WorkingSet",
]
