"""
Transcript data model.

A Transcript is a point-in-time snapshot built by the TranscriptCalculator.
It copies what it needs out of the student and each enrollment, so later
registry changes never show up in it: re-request a transcript to see them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional

from .enums import AcademicStanding, EnrollmentStatus, Grade, Semester
from .student import Student

TITLE_WIDTH = 30


@dataclass(frozen=True)
class StudentSnapshot:
    """The student details a transcript prints, frozen at generation time."""
    id: int
    reg_no: str
    full_name: str
    email: str
    courses: frozenset = frozenset()

    @classmethod
    def from_student(cls, student: Student) -> "StudentSnapshot":
        return cls(
            id=student.id,
            reg_no=student.reg_no,
            full_name=student.full_name,
            email=student.email,
            courses=frozenset(student.courses),
        )


@dataclass(frozen=True)
class TranscriptEntry:
    """One course line on a transcript, frozen at generation time."""
    enrollment_id: int
    course_code: str
    title: str
    credits: int
    semester: Semester
    grade: Optional[Grade]
    status: EnrollmentStatus

    @classmethod
    def from_enrollment(cls, enrollment) -> "TranscriptEntry":
        course = enrollment.course
        return cls(
            enrollment_id=enrollment.id,
            course_code=course.code,
            title=course.title,
            credits=course.credits,
            semester=course.semester,
            grade=enrollment.grade,
            status=enrollment.status,
        )


@dataclass(frozen=True)
class Transcript:
    """
    Derived academic summary for one student.

    Attributes:
        student: StudentSnapshot of the student the transcript belongs to
        entries: Tuple of TranscriptEntry, one per enrollment
        gpa: Credit-weighted GPA (I/W excluded, 0.0 when nothing qualifies)
        total_credits: Credits across every enrollment, graded or not
        completed_credits: Credits for enrollments with a passing grade
        standing: AcademicStanding derived from gpa
        grade_distribution: Read-only {Grade: count} over graded enrollments
        generated_at: When the snapshot was taken
    """
    student: StudentSnapshot
    entries: tuple
    gpa: float
    total_credits: int
    completed_credits: int
    standing: AcademicStanding
    grade_distribution: Mapping = field(default_factory=dict)
    generated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if isinstance(self.student, Student):
            object.__setattr__(self, "student", StudentSnapshot.from_student(self.student))
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "grade_distribution", MappingProxyType(dict(self.grade_distribution)))

    @property
    def graded_count(self) -> int:
        return sum(self.grade_distribution.values())

    def count_for(self, grade: Grade) -> int:
        return self.grade_distribution.get(grade, 0)

    def entries_by_semester(self) -> dict:
        """{Semester: [TranscriptEntry, ...]} in Semester order."""
        grouped = {}
        for entry in self.entries:
            grouped.setdefault(entry.semester, []).append(entry)
        return {semester: grouped[semester] for semester in Semester if semester in grouped}

    def render(self) -> str:
        """Plain-text official transcript."""
        student = self.student
        lines = [
            "OFFICIAL ACADEMIC TRANSCRIPT",
            "==========================",
            "",
            "Student Information:",
            f"Name: {student.full_name}",
            f"Registration No: {student.reg_no}",
            f"Student ID: {student.id}",
            f"Email: {student.email}",
            "",
            "Academic Summary:",
            f"Total Credits Attempted: {self.total_credits}",
            f"Credits Completed: {self.completed_credits}",
            f"Cumulative GPA: {self.gpa:.3f}",
            f"Academic Standing: {self.standing}",
            "",
            "Course History:",
            "==============",
        ]

        for semester, entries in self.entries_by_semester().items():
            lines.append("")
            lines.append(f"{semester} Semester:")
            lines.append(f"{'Course':<10} {'Title':<{TITLE_WIDTH}} {'Credits':<8} {'Grade':<6}")
            lines.append("-" * 55)
            for entry in entries:
                grade = entry.grade.display if entry.grade else "N/A"
                lines.append(
                    f"{entry.course_code:<10} {_truncate(entry.title):<{TITLE_WIDTH}} "
                    f"{entry.credits:<8d} {grade:<6}"
                )

        lines.append("")
        lines.append("")
        lines.append(f"Transcript generated on: {self.generated_at:%Y-%m-%d %H:%M:%S}")
        return "\n".join(lines) + "\n"


def _truncate(title: str) -> str:
    if len(title) > TITLE_WIDTH:
        return title[:TITLE_WIDTH - 3] + "..."
    return title
