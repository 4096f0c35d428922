"""
Working-set loading.

This module reads a JSON working set (students, courses and their
enrollment history) and builds populated directories and a registry from
it. It is a bootstrap for demos and tests, not a persistence layer.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import DEFAULT_WORKING_SET, RegistryConfig
from ..engines import EnrollmentRegistry
from ..errors import StudentNotFoundError
from ..models import EnrollmentStatus, IdSequence, StudentStatus
from .directory import CourseDirectory, StudentDirectory
from .parser import RecordParser

logger = logging.getLogger(__name__)


@dataclass
class WorkingSet:
    """Everything the engine needs, built from one working-set file."""
    students: StudentDirectory
    courses: CourseDirectory
    registry: EnrollmentRegistry


class WorkingSetLoader:
    """
    Loads and caches a working-set document.

    FILE SHAPE:
        {
            "students": [{"id": 1, "reg_no": "2024CS001", "full_name": ..., "status": "ACTIVE"}, ...],
            "courses": [{"code": "CS101", "title": ..., "credits": 3, "semester": "FALL", ...}, ...],
            "enrollments": [{"student": "2024CS001", "course": "CS101", "grade": "B"}, ...]
        }

    WHY REPLAY: Enrollments are not copied in directly. Each record is
    pushed through the registry (enroll, then grade or withdraw) so every
    business rule applies to loaded data exactly as it does to live calls.

    HISTORICAL RECORDS: A graduated student or a retired course still has
    enrollments that were valid when they were made. Students and courses
    are therefore replayed as ACTIVE and given their recorded status after
    all enrollments are in.

    Usage:
        ws = WorkingSetLoader("data/working_set.json").build()
        ws.registry.get_student_enrollments(1)
    """

    def __init__(self, path=DEFAULT_WORKING_SET, parser: RecordParser = None):
        self.path = Path(path)
        self.parser = parser or RecordParser()
        self._document = None  # None means "not loaded yet"

    @property
    def document(self) -> dict:
        if self._document is None:
            if not self.path.exists():
                raise FileNotFoundError(f"Working set not found: {self.path}")
            with open(self.path, "r", encoding="utf-8") as f:
                self._document = json.load(f)
            logger.debug(f"Loaded working set from {self.path}")
        return self._document

    def build(self, config: RegistryConfig = None) -> WorkingSet:
        doc = self.document
        raw_students = doc.get("students", [])
        parsed = [self.parser.parse_student(raw) for raw in raw_students if raw.get("id") is not None]
        # Records without an "id", and students created later, are numbered
        # after the highest explicit id
        ids = IdSequence(start=max((s.id for s in parsed), default=0) + 1)
        parsed += [
            self.parser.parse_student(raw, student_id=ids.next_id())
            for raw in raw_students if raw.get("id") is None
        ]
        students = StudentDirectory(id_source=ids)
        courses = CourseDirectory()

        final_status = {}
        for student in parsed:
            final_status[student.id] = student.status
            student.status = StudentStatus.ACTIVE
            student.courses.clear()
            students.add_student(student)

        retired = []
        for raw in doc.get("courses", []):
            course = self.parser.parse_course(raw)
            if not course.active:
                retired.append(course)
                course.active = True
            courses.add_course(course)

        registry = EnrollmentRegistry(students, courses, config=config or RegistryConfig.from_env())
        for raw in doc.get("enrollments", []):
            self._replay(raw, students, registry)

        for student_id, status in final_status.items():
            student = students.find_student_by_id(student_id).value
            if student.status is not status:
                student.set_status(status)
        for course in retired:
            course.deactivate()

        logger.info(
            f"Working set ready: {students.count()} students, {courses.count()} courses, "
            f"{registry.count()} enrollments"
        )
        return WorkingSet(students=students, courses=courses, registry=registry)

    def _replay(self, raw: dict, students: StudentDirectory, registry: EnrollmentRegistry):
        student_id = self._student_id(raw, students)
        code = raw.get("course")
        registry.enroll(student_id, code)

        status = (raw.get("status") or "").strip().upper()
        grade = self.parser.parse_grade(raw.get("grade"))
        if status == EnrollmentStatus.WITHDRAWN.name:
            registry.withdraw(student_id, code)
        elif grade is not None:
            registry.record_grade(student_id, code, grade)

    @staticmethod
    def _student_id(raw: dict, students: StudentDirectory) -> int:
        if "student_id" in raw:
            return int(raw["student_id"])
        reg_no = raw.get("student")
        result = students.find_student_by_reg_no(reg_no)
        if not result:
            raise StudentNotFoundError(f"Enrollment refers to unknown student {reg_no!r}")
        return result.value.id
