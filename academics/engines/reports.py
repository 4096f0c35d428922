"""
Institutional Reports Engine.

This module produces the registrar's summary reports: GPA distribution,
top students, per-course enrollment counts, department course counts and
the grade distribution across all students.
"""

from ..config import DEFAULT_TOP_STUDENTS, GPA_REPORT_BANDS
from ..models import (
    CourseEnrollmentCount,
    CourseEnrollmentStats,
    GpaBand,
    Grade,
    GradeDistributionReport,
    GradeShare,
    RankedStudent,
)
from .transcript import TranscriptCalculator


class ReportEngine:
    """
    Builds reports by reading the registry; never writes to it.

    STUDENTS WITHOUT GRADES:
    ------------------------
    The GPA distribution and top-students reports skip students whose GPA
    is 0.0. Such a student either has no qualifying grades yet or failed
    everything, and in both cases ranking them adds only noise.
    """

    def __init__(self, registry, calculator: TranscriptCalculator = None):
        self.registry = registry
        self.calculator = calculator or registry.calculator

    def _gpa(self, student) -> float:
        return self.calculator.compute_gpa(self.registry.get_student_enrollments(student.id))

    def gpa_distribution(self, students) -> list:
        """
        Count students per GPA band.

        Returns:
            List of GpaBand, highest band first, including empty bands
        """
        counts = {label: 0 for _, label in GPA_REPORT_BANDS}
        for student in students:
            gpa = self._gpa(student)
            if gpa <= 0:
                continue
            for lower, label in GPA_REPORT_BANDS:
                if gpa >= lower:
                    counts[label] += 1
                    break
        return [GpaBand(label=label, lower_bound=lower, student_count=counts[label])
                for lower, label in GPA_REPORT_BANDS]

    def top_students(self, students, limit: int = DEFAULT_TOP_STUDENTS) -> list:
        """Rank students by GPA (highest first), ties broken by reg no."""
        if limit <= 0:
            return []
        scored = [(self._gpa(s), s) for s in students]
        scored = [(gpa, s) for gpa, s in scored if gpa > 0]
        scored.sort(key=lambda pair: (-pair[0], pair[1].reg_no))
        return [
            RankedStudent(rank=i, student=s, gpa=gpa)
            for i, (gpa, s) in enumerate(scored[:limit], 1)
        ]

    def course_enrollment_stats(self, courses) -> CourseEnrollmentStats:
        rows = [
            CourseEnrollmentCount(course=c, enrolled=len(self.registry.get_course_enrollments(c.code)))
            for c in courses
        ]
        total = sum(r.enrolled for r in rows)
        average = total / len(rows) if rows else 0.0
        return CourseEnrollmentStats(
            rows=rows,
            total_courses=len(rows),
            total_enrollments=total,
            average_per_course=average,
        )

    @staticmethod
    def department_course_counts(courses) -> dict:
        """{department: course count}, largest department first."""
        counts = {}
        for c in courses:
            counts[c.department] = counts.get(c.department, 0) + 1
        return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))

    def grade_distribution_report(self, students) -> GradeDistributionReport:
        """Share of each grade across every graded enrollment of the given students."""
        graded = []
        for s in students:
            graded.extend(e for e in self.registry.get_student_enrollments(s.id) if e.has_grade)

        counts = self.calculator.grade_distribution(graded)
        total = len(graded)
        rows = [
            GradeShare(
                grade=grade,
                count=counts.get(grade, 0),
                percentage=(counts.get(grade, 0) * 100.0 / total) if total else 0.0,
            )
            for grade in Grade
        ]
        return GradeDistributionReport(rows=rows, total_graded=total)
