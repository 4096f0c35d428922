"""
Unit Tests for the domain models

Tests value types, entity validation, the Enrollment state machine,
IdSequence and Lookup.
"""

import threading

import pytest

from academics.errors import (
    CourseInactiveError,
    GradeNotAllowedError,
    InvalidArgumentError,
    StudentInactiveError,
)
from academics.models import (
    Course,
    Enrollment,
    EnrollmentStatus,
    Grade,
    IdSequence,
    Lookup,
    Semester,
    Student,
    StudentStatus,
)


def _course(code="CS101", credits=3, **kwargs):
    return Course(code, "Introduction to Programming", credits, "Dr. Lee", "FALL", **kwargs)


def _student(student_id=1, status=StudentStatus.ACTIVE):
    return Student(id=student_id, reg_no=f"2024CS{student_id:03d}", full_name="Test Student", status=status)


class TestGrade:
    """Tests for the Grade value type."""

    @pytest.mark.parametrize("text, expected", [
        ("A", Grade.A),
        ("b", Grade.B),
        (" c ", Grade.C),
        ("S+", Grade.S),
        ("s+", Grade.S),
        ("S", Grade.S),
        ("w", Grade.W),
    ])
    def test_parse_when_known_letter_then_returns_grade(self, text, expected):
        assert Grade.parse(text) is expected

    def test_parse_when_unknown_letter_then_raises(self):
        with pytest.raises(InvalidArgumentError, match="Invalid grade"):
            Grade.parse("Z")

    def test_parse_when_blank_then_raises(self):
        with pytest.raises(InvalidArgumentError):
            Grade.parse("")

    def test_points_when_scale_then_matches_table(self):
        assert [g.points for g in Grade] == [4.0, 4.0, 3.0, 2.0, 1.0, 0.0, 0.0, 0.0]

    def test_counts_toward_gpa_when_i_or_w_then_false(self):
        assert not Grade.I.counts_toward_gpa
        assert not Grade.W.counts_toward_gpa
        assert Grade.F.counts_toward_gpa

    def test_passing_when_d_or_better_then_true(self):
        passing = [g for g in Grade if g.passing]
        assert passing == [Grade.S, Grade.A, Grade.B, Grade.C, Grade.D]

    def test_display_when_s_then_s_plus(self):
        assert Grade.S.display == "S+"
        assert str(Grade.S) == "S+"

    @pytest.mark.parametrize("points, expected", [
        (4.0, Grade.A), (3.5, Grade.B), (2.0, Grade.C), (1.2, Grade.D), (0.5, Grade.F),
    ])
    def test_from_points_when_value_then_floor_letter(self, points, expected):
        assert Grade.from_points(points) is expected


class TestSemester:
    """Tests for Semester parsing and ordering."""

    def test_parse_when_mixed_case_then_member(self):
        assert Semester.parse("fall") is Semester.FALL
        assert Semester.parse("Spring") is Semester.SPRING

    def test_parse_when_unknown_then_raises(self):
        with pytest.raises(InvalidArgumentError, match="Unknown semester"):
            Semester.parse("WINTER")

    def test_next_when_fall_then_wraps_to_spring(self):
        assert Semester.SPRING.next() is Semester.SUMMER
        assert Semester.FALL.next() is Semester.SPRING

    def test_order_when_listed_then_calendar(self):
        assert [s.order for s in Semester] == [1, 2, 3]


class TestEnrollmentStatus:

    def test_is_terminal_when_enrolled_then_false(self):
        assert not EnrollmentStatus.ENROLLED.is_terminal
        assert EnrollmentStatus.COMPLETED.is_terminal
        assert EnrollmentStatus.WITHDRAWN.is_terminal
        assert EnrollmentStatus.DROPPED.is_terminal


class TestStudent:
    """Tests for Student construction and behaviour."""

    def test_init_when_valid_then_defaults(self):
        s = _student()
        assert s.status is StudentStatus.ACTIVE
        assert s.courses == set()
        assert s.is_active

    def test_init_when_blank_reg_no_then_raises(self):
        with pytest.raises(InvalidArgumentError, match="Registration number"):
            Student(id=1, reg_no="  ", full_name="X")

    def test_init_when_non_integer_id_then_raises(self):
        with pytest.raises(InvalidArgumentError):
            Student(id="1", reg_no="2024CS001", full_name="X")

    def test_set_status_when_changed_then_touches_updated_at(self):
        s = _student()
        before = s.updated_at
        s.set_status(StudentStatus.GRADUATED)
        assert s.status is StudentStatus.GRADUATED
        assert s.updated_at >= before
        assert not s.is_active

    def test_equality_when_same_id_then_equal(self):
        assert _student(1) == Student(id=1, reg_no="OTHER", full_name="Someone Else")
        assert _student(1) != _student(2)

    def test_profile_when_courses_then_listed_sorted(self):
        s = _student()
        s.add_course("MATH101")
        s.add_course("CS101")
        assert "Enrolled Courses: CS101, MATH101" in s.profile()


class TestCourse:
    """Tests for Course validation."""

    def test_init_when_lowercase_code_then_upper_cased(self):
        assert _course("cs101").code == "CS101"

    @pytest.mark.parametrize("code", ["C101", "CSABC101", "CS10", "101CS"])
    def test_init_when_bad_code_then_raises(self, code):
        with pytest.raises(InvalidArgumentError, match="Invalid course code"):
            _course(code)

    @pytest.mark.parametrize("credits", [0, 7, -1])
    def test_init_when_credits_out_of_range_then_raises(self, credits):
        with pytest.raises(InvalidArgumentError, match="Credits must be between 1 and 6"):
            _course(credits=credits)

    def test_init_when_short_title_then_raises(self):
        with pytest.raises(InvalidArgumentError, match="Invalid course title"):
            Course("CS101", "AB", 3, "Dr. Lee", "FALL")

    def test_is_high_credit_when_four_or_more_then_true(self):
        assert _course(credits=4).is_high_credit
        assert not _course(credits=3).is_high_credit

    def test_summary_when_department_then_included(self):
        summary = _course(department="Computer Science").summary()
        assert "(CS101)" in summary
        assert "from Computer Science" in summary


class TestEnrollment:
    """Tests for the Enrollment state machine."""

    def test_init_when_inactive_student_then_raises(self):
        with pytest.raises(StudentInactiveError):
            Enrollment(1, _student(status=StudentStatus.SUSPENDED), _course())

    def test_init_when_inactive_course_then_raises(self):
        with pytest.raises(CourseInactiveError):
            Enrollment(1, _student(), _course(active=False))

    def test_assign_grade_when_final_then_completed(self):
        e = Enrollment(1, _student(), _course())
        e._assign_grade(Grade.C)
        assert e.status is EnrollmentStatus.COMPLETED
        assert e.quality_points == 6.0

    def test_assign_grade_when_w_then_stays_enrolled(self):
        e = Enrollment(1, _student(), _course())
        e._assign_grade(Grade.W)
        assert e.status is EnrollmentStatus.ENROLLED

    def test_assign_grade_when_completed_then_raises(self):
        e = Enrollment(1, _student(), _course())
        e._assign_grade(Grade.A)
        with pytest.raises(GradeNotAllowedError):
            e._assign_grade(Grade.B)

    def test_assign_grade_when_none_then_raises(self):
        e = Enrollment(1, _student(), _course())
        with pytest.raises(InvalidArgumentError, match="Grade cannot be null"):
            e._assign_grade(None)

    def test_withdraw_when_enrolled_then_w(self):
        e = Enrollment(1, _student(), _course())
        e._withdraw()
        assert e.status is EnrollmentStatus.WITHDRAWN
        assert e.grade is Grade.W
        assert e.grade_date is not None

    def test_equality_when_same_pair_then_equal(self):
        student, course = _student(), _course()
        assert Enrollment(1, student, course) == Enrollment(2, student, course)
        assert hash(Enrollment(1, student, course)) == hash(Enrollment(2, student, course))

    def test_key_when_built_then_student_id_and_code(self):
        assert Enrollment(1, _student(7), _course("MATH101")).key == (7, "MATH101")

    def test_id_when_assigned_then_read_only(self):
        e = Enrollment(1, _student(), _course())
        with pytest.raises(AttributeError):
            e.id = 5

    @pytest.mark.parametrize("attribute, value", [
        ("status", EnrollmentStatus.COMPLETED),
        ("grade", Grade.A),
        ("grade_date", None),
    ])
    def test_state_when_assigned_then_read_only(self, attribute, value):
        e = Enrollment(1, _student(), _course())
        with pytest.raises(AttributeError):
            setattr(e, attribute, value)

    def test_copy_when_original_transitions_then_copy_unchanged(self):
        e = Enrollment(1, _student(), _course())
        snapshot = e.copy()
        e._assign_grade(Grade.B)
        assert snapshot.status is EnrollmentStatus.ENROLLED
        assert snapshot.grade is None
        assert snapshot == e
        assert snapshot.id == e.id


class TestIdSequence:
    """Tests for IdSequence."""

    def test_next_id_when_default_then_starts_at_one(self):
        ids = IdSequence()
        assert [ids.next_id(), ids.next_id(), ids()] == [1, 2, 3]
        assert ids.last_issued == 3

    def test_next_id_when_custom_start_then_honoured(self):
        assert IdSequence(start=100).next_id() == 100

    def test_init_when_negative_start_then_raises(self):
        with pytest.raises(ValueError):
            IdSequence(start=-1)

    def test_next_id_when_threads_then_no_duplicates(self):
        ids = IdSequence()
        issued = []
        lock = threading.Lock()

        def worker():
            local = [ids.next_id() for _ in range(200)]
            with lock:
                issued.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(issued) == 2000
        assert len(set(issued)) == 2000


class TestLookup:
    """Tests for the Lookup result type."""

    def test_found_when_value_then_truthy(self):
        result = Lookup.found("x")
        assert result
        assert result.is_found
        assert result.value == "x"

    def test_found_when_none_then_raises(self):
        with pytest.raises(ValueError):
            Lookup.found(None)

    def test_missing_when_value_read_then_raises(self):
        result = Lookup.missing()
        assert not result
        with pytest.raises(LookupError):
            result.value

    def test_value_or_when_missing_then_default(self):
        assert Lookup.missing().value_or(42) == 42

    def test_of_when_none_then_missing(self):
        assert Lookup.of(None) == Lookup.missing()
        assert Lookup.of(0) == Lookup.found(0)
