import pytest

from academics.config import RegistryConfig
from academics.data import CourseDirectory, StudentDirectory
from academics.engines import EnrollmentRegistry, TranscriptCalculator
from academics.models import Course, StudentStatus


# Common test fixtures
@pytest.fixture
def students():
    """Empty in-memory student directory."""
    return StudentDirectory()


@pytest.fixture
def courses():
    """Course directory with a small catalog (credits in brackets).

    CS101 [3], CS201 [4], CS301 [4], MATH101 [4], PHYS101 [4],
    ENG101 [2], MATH201 [3]
    """
    directory = CourseDirectory()
    for code, title, credits, semester, dept in [
        ("CS101", "Introduction to Programming", 3, "FALL", "Computer Science"),
        ("CS201", "Data Structures and Algorithms", 4, "SPRING", "Computer Science"),
        ("CS301", "Operating Systems", 4, "FALL", "Computer Science"),
        ("MATH101", "Calculus I", 4, "FALL", "Mathematics"),
        ("PHYS101", "General Physics I", 4, "SPRING", "Physics"),
        ("ENG101", "Academic Writing", 2, "SUMMER", "English"),
        ("MATH201", "Linear Algebra", 3, "SPRING", "Mathematics"),
    ]:
        directory.add_course(Course(code, title, credits, "Dr. Staff", semester, department=dept))
    return directory


@pytest.fixture
def calculator():
    return TranscriptCalculator()


@pytest.fixture
def registry(students, courses, calculator):
    """Registry with the default 18-credit ceiling."""
    return EnrollmentRegistry(students, courses, config=RegistryConfig(), calculator=calculator)


@pytest.fixture
def alice(students):
    return students.create_student("2024CS001", "Alice Smith", "alice@university.edu")


@pytest.fixture
def bob(students):
    return students.create_student("2024CS002", "Bob Johnson", "bob@university.edu")


@pytest.fixture
def graduate(students):
    return students.create_student("2020PH001", "Grace Hopper", status=StudentStatus.GRADUATED)
