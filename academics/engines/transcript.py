"""
Transcript Calculator.

This module derives GPA, credit totals, grade distribution and academic
standing from a student's enrollments. Nothing here is stored; every call
recomputes from the enrollments it is handed.
"""

from ..config import (
    DEAN_LIST_GPA,
    GOOD_STANDING_GPA,
    PROBATION_GPA,
    SATISFACTORY_GPA,
)
from ..errors import InvalidArgumentError
from ..models import (
    AcademicStanding,
    Grade,
    Semester,
    Student,
    StudentSnapshot,
    Transcript,
    TranscriptEntry,
)


class TranscriptCalculator:
    """
    Pure derivations over an enrollment set.

    GPA RULE:
    ---------
    Only enrollments with a grade, and whose grade is not I or W, take part.

        GPA = sum(points(grade) * credits) / sum(credits)

    This is a credit-weighted average, not a mean of grade points. An empty
    set gives exactly 0.0.

    Example:
        {3cr B, 4cr A, 2cr W}  ->  (3*3.0 + 4*4.0) / (3+4) = 25/7 ~= 3.571
        total credits = 9 (W counted), completed credits = 7

    The calculator holds no state, so one instance can be shared freely
    between threads.
    """

    def compute_gpa(self, enrollments) -> float:
        graded = [
            e for e in enrollments
            if e.grade is not None and e.grade.counts_toward_gpa
        ]
        if not graded:
            return 0.0

        quality_points = sum(e.grade.points * e.course.credits for e in graded)
        credits = sum(e.course.credits for e in graded)
        return quality_points / credits if credits > 0 else 0.0

    def compute_completed_credits(self, enrollments) -> int:
        """Credits for enrollments whose grade is passing (S, A, B, C, D)."""
        return sum(
            e.course.credits
            for e in enrollments
            if e.grade is not None and e.grade.passing
        )

    def compute_total_credits(self, enrollments) -> int:
        """Credits across every enrollment, whatever its grade or status."""
        return sum(e.course.credits for e in enrollments)

    @staticmethod
    def academic_standing(gpa: float) -> AcademicStanding:
        """Band a GPA; each band includes its lower bound."""
        if gpa >= DEAN_LIST_GPA:
            return AcademicStanding.DEAN_LIST
        elif gpa >= GOOD_STANDING_GPA:
            return AcademicStanding.GOOD_STANDING
        elif gpa >= SATISFACTORY_GPA:
            return AcademicStanding.SATISFACTORY
        elif gpa >= PROBATION_GPA:
            return AcademicStanding.PROBATION
        return AcademicStanding.SUSPENSION

    def grade_distribution(self, enrollments) -> dict:
        """{Grade: count} over graded enrollments, in Grade order."""
        counts = {}
        for e in enrollments:
            if e.grade is not None:
                counts[e.grade] = counts.get(e.grade, 0) + 1
        return {grade: counts[grade] for grade in Grade if grade in counts}

    def enrollments_by_semester(self, enrollments) -> dict:
        """{Semester: [Enrollment, ...]} in Semester order; empty terms omitted."""
        grouped = {}
        for e in enrollments:
            grouped.setdefault(e.course.semester, []).append(e)
        return {semester: grouped[semester] for semester in Semester if semester in grouped}

    # ------------------------------------------------------------------
    # Transcript snapshots
    # ------------------------------------------------------------------

    def build_transcript(self, student: Student, enrollments) -> Transcript:
        """Take a snapshot; later registry changes do not show up in it."""
        if student is None:
            raise InvalidArgumentError("Student cannot be null")
        enrollments = tuple(enrollments)
        gpa = self.compute_gpa(enrollments)
        return Transcript(
            student=StudentSnapshot.from_student(student),
            entries=tuple(TranscriptEntry.from_enrollment(e) for e in enrollments),
            gpa=gpa,
            total_credits=self.compute_total_credits(enrollments),
            completed_credits=self.compute_completed_credits(enrollments),
            standing=self.academic_standing(gpa),
            grade_distribution=self.grade_distribution(enrollments),
        )

    def generate_transcript(self, student: Student, registry) -> Transcript:
        """Build a transcript from the registry's current enrollments for the student."""
        return self.build_transcript(student, registry.get_student_enrollments(student.id))

    def generate_report(self, student: Student, registry) -> str:
        return self.generate_transcript(student, registry).render()
