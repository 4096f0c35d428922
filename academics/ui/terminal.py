"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place (besides the interactive prompts in cli.py) where
printing happens in the academics package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import (
    AcademicStanding,
    CourseEnrollmentStats,
    Enrollment,
    EnrollmentStatus,
    GradeDistributionReport,
    Student,
    Transcript,
)
from ..models.transcript import TITLE_WIDTH


class TerminalDisplay:
    """
    Pretty terminal output for enrollment records, transcripts and reports.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and serialize the dataclasses the engines
       return (Transcript, GpaBand, GradeDistributionReport, ...).

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_success(cls, message: str):
        print(f"  {cls.GREEN}✓ {message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"  {cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def standing_badge(cls, standing: AcademicStanding) -> str:
        """Return a colored badge for an academic standing."""
        if standing in (AcademicStanding.DEAN_LIST, AcademicStanding.GOOD_STANDING):
            return f"{cls.BG_GREEN}{cls.WHITE} {standing.display_name} {cls.RESET}"
        elif standing is AcademicStanding.SATISFACTORY:
            return f"{cls.BG_YELLOW}{cls.WHITE} {standing.display_name} {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} {standing.display_name} {cls.RESET}"

    @classmethod
    def _status_color(cls, status: EnrollmentStatus) -> str:
        if status is EnrollmentStatus.COMPLETED:
            return cls.GREEN
        elif status is EnrollmentStatus.ENROLLED:
            return cls.YELLOW
        return cls.RED

    # ------------------------------------------------------------------
    # Students and enrollments
    # ------------------------------------------------------------------

    @classmethod
    def print_student_info(cls, student: Student):
        """Print student identification information."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.full_name}")
        print(f"  {cls.BOLD}Registration No:{cls.RESET} {student.reg_no}")
        print(f"  {cls.BOLD}Email:{cls.RESET} {student.email or 'Unknown'}")
        print(f"  {cls.BOLD}Status:{cls.RESET} {student.status}")
        courses = ", ".join(sorted(student.courses)) or "(none)"
        print(f"  {cls.BOLD}Registered In:{cls.RESET} {courses}")

    @classmethod
    def print_enrollments(cls, enrollments: list, title: str = "Enrollments"):
        """Print enrollment rows; course title is truncated to fit."""
        cls.print_subheader(title)
        if not enrollments:
            print(f"  {cls.DIM}(none){cls.RESET}")
            return

        print(f"\n  {cls.BOLD}{'ID':<5} {'STUDENT':<12} {'COURSE':<8} {'TITLE':<{TITLE_WIDTH}} {'GRADE':<6} {'STATUS'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 76}{cls.RESET}")
        for e in enrollments:
            cls._print_enrollment_row(e)

    @classmethod
    def _print_enrollment_row(cls, e: Enrollment):
        title = e.course.title
        if len(title) > TITLE_WIDTH:
            title = title[:TITLE_WIDTH - 3] + "..."
        grade = e.grade.display if e.grade else "-"
        color = cls._status_color(e.status)
        print(
            f"  {e.id:<5} {e.student.reg_no:<12} {e.course.code:<8} {title:<{TITLE_WIDTH}} "
            f"{grade:<6} {color}{e.status}{cls.RESET}"
        )

    # ------------------------------------------------------------------
    # Transcript
    # ------------------------------------------------------------------

    @classmethod
    def print_transcript(cls, transcript: Transcript):
        """Print a transcript snapshot with a coloured summary block."""
        student = transcript.student
        cls.print_header(f"ACADEMIC TRANSCRIPT: {student.full_name.upper()}")
        print(f"  {cls.BOLD}Registration No:{cls.RESET} {student.reg_no}")
        print(f"  {cls.BOLD}Student ID:{cls.RESET} {student.id}")
        print(f"\n  {cls.BOLD}Cumulative GPA:{cls.RESET} {transcript.gpa:.3f}")
        print(f"  {cls.BOLD}Standing:{cls.RESET} {cls.standing_badge(transcript.standing)}")
        print(f"  {cls.BOLD}Credits:{cls.RESET} {transcript.completed_credits} completed / "
              f"{transcript.total_credits} attempted")

        by_semester = transcript.entries_by_semester()
        if not by_semester:
            print(f"\n  {cls.DIM}No course history.{cls.RESET}")
        for semester, entries in by_semester.items():
            cls.print_subheader(f"{semester} Semester")
            print(f"  {cls.BOLD}{'COURSE':<10} {'TITLE':<{TITLE_WIDTH}} {'CREDITS':<8} {'GRADE'}{cls.RESET}")
            for entry in entries:
                title = entry.title
                if len(title) > TITLE_WIDTH:
                    title = title[:TITLE_WIDTH - 3] + "..."
                grade = entry.grade.display if entry.grade else "N/A"
                color = cls._status_color(entry.status)
                print(f"  {color}{entry.course_code:<10}{cls.RESET} {title:<{TITLE_WIDTH}} "
                      f"{entry.credits:<8} {grade}")

        print(f"\n  {cls.DIM}Generated {transcript.generated_at:%Y-%m-%d %H:%M:%S}{cls.RESET}")

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    @classmethod
    def print_gpa_distribution(cls, bands: list):
        cls.print_header("GPA DISTRIBUTION")
        if not any(b.student_count for b in bands):
            print(f"\n  {cls.DIM}No students with grades found.{cls.RESET}")
            return
        for band in sorted(bands, key=lambda b: -b.student_count):
            print(f"  {band.label:<20}: {band.student_count} students")

    @classmethod
    def print_top_students(cls, ranked: list):
        cls.print_header(f"TOP {len(ranked)} STUDENTS")
        if not ranked:
            print(f"\n  {cls.DIM}No students with grades found.{cls.RESET}")
            return
        print(f"  {cls.BOLD}{'RANK':<5} {'REG NO':<15} {'NAME':<25} {'GPA':<10}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 60}{cls.RESET}")
        for r in ranked:
            print(f"  {r.rank:<5} {r.student.reg_no:<15} {r.student.full_name:<25} {r.gpa:<10.2f}")

    @classmethod
    def print_enrollment_stats(cls, stats: CourseEnrollmentStats):
        cls.print_header("COURSE ENROLLMENT STATISTICS")
        print(f"  {cls.BOLD}{'CODE':<10} {'TITLE':<{TITLE_WIDTH}} {'ENROLLED':<12}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 55}{cls.RESET}")
        for row in stats.rows:
            title = row.course.title
            if len(title) > TITLE_WIDTH:
                title = title[:TITLE_WIDTH - 3] + "..."
            print(f"  {row.course.code:<10} {title:<{TITLE_WIDTH}} {row.enrolled:<12}")
        print(f"  {cls.DIM}{'-' * 55}{cls.RESET}")
        print(f"  Total Courses: {stats.total_courses}")
        print(f"  Total Enrollments: {stats.total_enrollments}")
        print(f"  Average Enrollment per Course: {stats.average_per_course:.2f}")

    @classmethod
    def print_department_stats(cls, counts: dict):
        cls.print_header("DEPARTMENT-WISE COURSE STATISTICS")
        print(f"  {cls.BOLD}{'DEPARTMENT':<25} {'COURSES':<10}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 40}{cls.RESET}")
        for department, count in counts.items():
            print(f"  {department or '(unassigned)':<25} {count:<10}")

    @classmethod
    def print_grade_distribution(cls, report: GradeDistributionReport):
        cls.print_header("GRADE DISTRIBUTION")
        if report.total_graded == 0:
            print(f"\n  {cls.DIM}No graded enrollments found.{cls.RESET}")
            return
        print(f"  {cls.BOLD}{'GRADE':<6} {'COUNT':<10} {'PERCENTAGE':<10}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 30}{cls.RESET}")
        for row in report.rows:
            print(f"  {row.grade.display:<6} {row.count:<10} {row.percentage:<9.1f}%")
        print(f"  {cls.DIM}{'-' * 30}{cls.RESET}")
        print(f"  Total: {report.total_graded} enrollments")
