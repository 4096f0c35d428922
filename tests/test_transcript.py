"""
Unit Tests for TranscriptCalculator and Transcript

Tests GPA weighting, credit totals, standing bands and transcript snapshots.
"""

import dataclasses

import pytest

from academics.engines import TranscriptCalculator
from academics.errors import InvalidArgumentError
from academics.models import (
    AcademicStanding,
    EnrollmentStatus,
    Grade,
    Semester,
    StudentSnapshot,
    Transcript,
)


@pytest.fixture
def mixed_record(registry, alice):
    """alice: CS101 [3] B, MATH101 [4] A, ENG101 [2] withdrawn (W)."""
    registry.enroll(alice.id, "CS101")
    registry.enroll(alice.id, "MATH101")
    registry.enroll(alice.id, "ENG101")
    registry.record_grade(alice.id, "CS101", "B")
    registry.record_grade(alice.id, "MATH101", "A")
    registry.withdraw(alice.id, "ENG101")
    return registry.get_student_enrollments(alice.id)


class TestComputeGpa:
    """Tests for the credit-weighted GPA rule."""

    def test_compute_gpa_when_withdrawn_present_then_excluded(self, calculator, mixed_record):
        """(3*3.0 + 4*4.0) / 7 = 25/7; the W never enters the denominator."""
        assert calculator.compute_gpa(mixed_record) == pytest.approx(25 / 7)

    def test_compute_gpa_when_empty_then_zero(self, calculator):
        assert calculator.compute_gpa([]) == 0.0

    def test_compute_gpa_when_only_ungraded_then_zero(self, calculator, registry, alice):
        registry.enroll(alice.id, "CS101")
        assert calculator.compute_gpa(registry.get_student_enrollments(alice.id)) == 0.0

    def test_compute_gpa_when_only_incomplete_then_zero(self, calculator, registry, alice):
        registry.enroll(alice.id, "CS101")
        registry.record_grade(alice.id, "CS101", "I")
        assert calculator.compute_gpa(registry.get_student_enrollments(alice.id)) == 0.0

    def test_compute_gpa_when_failed_then_counts_as_zero_points(self, calculator, registry, alice):
        """F is a real 0.0 and does count."""
        registry.enroll(alice.id, "CS101")    # 3 credits
        registry.enroll(alice.id, "ENG101")   # 2 credits
        registry.record_grade(alice.id, "CS101", "A")
        registry.record_grade(alice.id, "ENG101", "F")
        assert calculator.compute_gpa(registry.get_student_enrollments(alice.id)) == pytest.approx(12 / 5)

    def test_compute_gpa_when_s_plus_then_four_points(self, calculator, registry, alice):
        registry.enroll(alice.id, "CS101")
        registry.record_grade(alice.id, "CS101", "S+")
        assert calculator.compute_gpa(registry.get_student_enrollments(alice.id)) == 4.0


class TestCredits:
    """Tests for total and completed credit sums."""

    def test_total_credits_when_mixed_then_counts_everything(self, calculator, mixed_record):
        assert calculator.compute_total_credits(mixed_record) == 9

    def test_completed_credits_when_mixed_then_only_passing(self, calculator, mixed_record):
        assert calculator.compute_completed_credits(mixed_record) == 7

    def test_completed_credits_when_failed_then_not_counted(self, calculator, registry, alice):
        registry.enroll(alice.id, "CS101")
        registry.record_grade(alice.id, "CS101", "F")
        assert calculator.compute_completed_credits(registry.get_student_enrollments(alice.id)) == 0


class TestAcademicStanding:
    """Standing bands include their lower bound."""

    @pytest.mark.parametrize("gpa, expected", [
        (4.0, AcademicStanding.DEAN_LIST),
        (3.5, AcademicStanding.DEAN_LIST),
        (3.499, AcademicStanding.GOOD_STANDING),
        (3.0, AcademicStanding.GOOD_STANDING),
        (2.999, AcademicStanding.SATISFACTORY),
        (2.0, AcademicStanding.SATISFACTORY),
        (1.0, AcademicStanding.PROBATION),
        (0.999, AcademicStanding.SUSPENSION),
        (0.0, AcademicStanding.SUSPENSION),
    ])
    def test_academic_standing_when_gpa_then_band(self, gpa, expected):
        assert TranscriptCalculator.academic_standing(gpa) is expected


class TestGrouping:
    """Tests for grade distribution and semester grouping."""

    def test_grade_distribution_when_mixed_then_counts_per_grade(self, calculator, mixed_record):
        assert calculator.grade_distribution(mixed_record) == {Grade.A: 1, Grade.B: 1, Grade.W: 1}

    def test_grade_distribution_when_mixed_then_grade_order(self, calculator, mixed_record):
        assert list(calculator.grade_distribution(mixed_record)) == [Grade.A, Grade.B, Grade.W]

    def test_enrollments_by_semester_when_mixed_then_calendar_order(self, calculator, mixed_record):
        grouped = calculator.enrollments_by_semester(mixed_record)
        assert list(grouped) == [Semester.SUMMER, Semester.FALL]
        assert {e.course.code for e in grouped[Semester.FALL]} == {"CS101", "MATH101"}


class TestTranscript:
    """Tests for transcript snapshots."""

    def test_generate_transcript_when_mixed_then_summary_fields(self, calculator, registry, alice, mixed_record):
        t = calculator.generate_transcript(alice, registry)
        assert t.student.id == alice.id
        assert t.student.reg_no == "2024CS001"
        assert t.student.courses == {"CS101", "MATH101"}
        assert t.gpa == pytest.approx(25 / 7)
        assert t.total_credits == 9
        assert t.completed_credits == 7
        assert t.standing is AcademicStanding.DEAN_LIST
        assert t.graded_count == 3
        assert t.count_for(Grade.W) == 1
        assert t.count_for(Grade.F) == 0

    def test_generate_transcript_when_registry_changes_later_then_snapshot_unchanged(
            self, calculator, registry, alice, mixed_record):
        """Grade corrections after generation do not leak into the snapshot."""
        t = calculator.generate_transcript(alice, registry)
        registry.update_grade(alice.id, "CS101", "F")
        registry.enroll(alice.id, "PHYS101")

        cs101 = next(entry for entry in t.entries if entry.course_code == "CS101")
        assert cs101.grade is Grade.B
        assert len(t.entries) == 3
        assert t.gpa == pytest.approx(25 / 7)

    def test_generate_transcript_when_enrolled_later_then_student_unchanged(
            self, calculator, registry, alice, mixed_record):
        """The student details are copied, not shared with the directory."""
        t = calculator.generate_transcript(alice, registry)
        registry.enroll(alice.id, "PHYS101")
        alice.set_full_name("Alice Jones")
        assert t.student.courses == {"CS101", "MATH101"}
        assert t.student.full_name == "Alice Smith"
        assert "PHYS101" in alice.courses

    def test_grade_distribution_when_assigned_then_read_only(self, calculator, registry, alice, mixed_record):
        t = calculator.generate_transcript(alice, registry)
        with pytest.raises(TypeError):
            t.grade_distribution[Grade.F] = 99
        assert t.graded_count == 3

    def test_init_when_built_directly_then_inputs_copied(self, alice):
        counts = {Grade.A: 1}
        t = Transcript(
            student=alice, entries=[], gpa=0.0, total_credits=0, completed_credits=0,
            standing=AcademicStanding.SUSPENSION, grade_distribution=counts,
        )
        counts[Grade.F] = 5
        assert isinstance(t.student, StudentSnapshot)
        assert t.entries == ()
        assert t.graded_count == 1

    def test_transcript_when_assigned_then_frozen(self, calculator, registry, alice, mixed_record):
        t = calculator.generate_transcript(alice, registry)
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.gpa = 0.0

    def test_build_transcript_when_no_enrollments_then_suspension_and_zero(self, calculator, alice):
        t = calculator.build_transcript(alice, [])
        assert t.gpa == 0.0
        assert t.entries == ()
        assert t.standing is AcademicStanding.SUSPENSION

    def test_build_transcript_when_student_none_then_raises(self, calculator):
        with pytest.raises(InvalidArgumentError, match="Student cannot be null"):
            calculator.build_transcript(None, [])

    def test_entries_when_withdrawn_then_status_captured(self, calculator, registry, alice, mixed_record):
        t = calculator.generate_transcript(alice, registry)
        eng = next(entry for entry in t.entries if entry.course_code == "ENG101")
        assert eng.status is EnrollmentStatus.WITHDRAWN
        assert eng.grade is Grade.W


class TestRender:
    """Tests for the plain-text official transcript."""

    def test_render_when_mixed_then_contains_summary(self, calculator, registry, alice, mixed_record):
        text = calculator.generate_report(alice, registry)
        assert text.startswith("OFFICIAL ACADEMIC TRANSCRIPT")
        assert "Name: Alice Smith" in text
        assert "Registration No: 2024CS001" in text
        assert "Total Credits Attempted: 9" in text
        assert "Credits Completed: 7" in text
        assert "Cumulative GPA: 3.571" in text
        assert "Academic Standing: Dean's List" in text

    def test_render_when_mixed_then_semesters_in_order(self, calculator, registry, alice, mixed_record):
        text = calculator.generate_report(alice, registry)
        assert text.index("Summer Semester:") < text.index("Fall Semester:")
        assert "Spring Semester:" not in text

    def test_render_when_long_title_then_truncated(self, calculator, registry, alice):
        registry.enroll(alice.id, "CS201")  # "Data Structures and Algorithms" is exactly 30 chars
        text = calculator.generate_report(alice, registry)
        assert "Data Structures and Algorithms" in text

        registry.courses.find_course_by_code("CS201").value.set_title(
            "Data Structures and Algorithm Design"
        )
        text = calculator.generate_report(alice, registry)
        assert "Data Structures and Algorit..." in text
        assert "N/A" in text
