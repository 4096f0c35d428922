"""
Command-Line Interface for the Enrollment System.

This module provides the interactive CLI for the records office.
It handles user input and leaves all result formatting to TerminalDisplay.

MENU:
-----
1-5. Enrollment actions (enroll, unenroll, withdraw, record/update grade)
6-8. Views (student record, course roster, transcript)
9.   Institutional reports

NOTE: Don't run this file directly. Run from the repository root:
    python -m academics [path/to/working_set.json]
"""

import logging
import os
import sys

from .config import DEFAULT_LOG_LEVEL, DEFAULT_WORKING_SET, LOG_FORMAT, LOG_LEVEL_ENV_VAR
from .errors import AcademicsError
from .models import Grade
from .office import RecordsOffice
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)

GRADE_CHOICES = ", ".join(g.display for g in Grade)


def configure_logging(environ=None):
    """Set up root logging from ACADEMICS_LOG_LEVEL (default WARNING)."""
    environ = os.environ if environ is None else environ
    level_name = (environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level


def _ask_student_id() -> int:
    return int(input("  Student ID: ").strip())


def _ask_course_code() -> str:
    return input("  Course code (e.g., CS101): ").strip().upper()


def _ask_grade(label: str) -> str:
    return input(f"  {label} ({GRADE_CHOICES}): ").strip()


def _run_reports_menu(office: RecordsOffice):
    """
    Institutional reports submenu.

    Each report is computed fresh from the registry, so it reflects every
    change made earlier in the session.
    """
    TerminalDisplay.print_subheader("Reports")
    print("    1. GPA distribution")
    print("    2. Top students")
    print("    3. Course enrollment statistics")
    print("    4. Department course counts")
    print("    5. Grade distribution")

    try:
        choice = input("\n  Select report (1-5): ").strip()
    except EOFError:
        return

    if choice == "1":
        office.show_gpa_distribution()
    elif choice == "2":
        try:
            limit = int(input("  How many students? (default 10): ").strip())
        except (ValueError, EOFError):
            limit = 10
            print(f"  → Using default: {limit}")
        office.show_top_students(limit)
    elif choice == "3":
        office.show_enrollment_stats()
    elif choice == "4":
        office.show_department_stats()
    elif choice == "5":
        office.show_grade_distribution()
    else:
        TerminalDisplay.print_error("Unknown report")


def _dispatch(office: RecordsOffice, choice: str):
    """Run one menu action. Raises ValueError on unparsable input."""
    if choice == "1":
        office.enroll(_ask_student_id(), _ask_course_code())
    elif choice == "2":
        office.unenroll(_ask_student_id(), _ask_course_code())
    elif choice == "3":
        office.withdraw(_ask_student_id(), _ask_course_code())
    elif choice == "4":
        student_id, code = _ask_student_id(), _ask_course_code()
        grade = _ask_grade("Grade")
        office.record_grade(student_id, code, grade)
    elif choice == "5":
        student_id, code = _ask_student_id(), _ask_course_code()
        grade = _ask_grade("Corrected grade")
        office.update_grade(student_id, code, grade)
    elif choice == "6":
        office.show_student(_ask_student_id())
    elif choice == "7":
        office.show_course_enrollments(_ask_course_code())
    elif choice == "8":
        office.show_transcript(_ask_student_id())
    elif choice == "9":
        _run_reports_menu(office)
    else:
        TerminalDisplay.print_error(f"Unknown option: {choice!r}")


def _print_banner():
    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║              STUDENT ENROLLMENT & TRANSCRIPT SYSTEM              ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. Enroll in course          6. View student record             ║")
    print("║  2. Unenroll from course      7. View course roster              ║")
    print("║  3. Withdraw from course      8. View transcript                 ║")
    print("║  4. Record grade              9. Reports                         ║")
    print("║  5. Update grade              0. Exit                            ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")


def main(argv=None):
    """
    Command-line interface for the records office.

    ═══════════════════════════════════════════════════════════════════════════
    USAGE
    ═══════════════════════════════════════════════════════════════════════════

        academics                       # uses data/working_set.json
        academics my_working_set.json   # uses a different working set

    Business-rule violations (duplicate enrollment, credit limit, inactive
    student, ...) are shown as messages and the menu continues. Input that
    cannot be parsed is reported the same way.

    Environment:
        ACADEMICS_LOG_LEVEL    DEBUG, INFO, WARNING (default), ERROR
        ACADEMICS_MAX_CREDITS  Credit ceiling per student (default 18)

    ═══════════════════════════════════════════════════════════════════════════
    """
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else DEFAULT_WORKING_SET

    try:
        office = RecordsOffice.from_file(path)
    except (FileNotFoundError, ValueError, AcademicsError) as e:
        logger.error(f"Could not load working set {path}: {e}")
        TerminalDisplay.print_error(f"Could not load working set: {e}")
        return 1

    while True:
        _print_banner()
        try:
            choice = input(f"{TerminalDisplay.BOLD}Select option (0-9): {TerminalDisplay.RESET}").strip()
        except EOFError:
            choice = "0"

        if choice == "0":
            print(f"\n  {TerminalDisplay.DIM}Goodbye.{TerminalDisplay.RESET}\n")
            return 0

        try:
            _dispatch(office, choice)
        except AcademicsError as e:
            TerminalDisplay.print_error(e.message)
        except ValueError:
            TerminalDisplay.print_error("Invalid input. Please enter a number where one is expected.")
        except EOFError:
            return 0


if __name__ == "__main__":
    sys.exit(main())
