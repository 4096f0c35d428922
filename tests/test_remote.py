"""
Unit Tests for RemoteDirectory

The HTTP session is replaced with a MagicMock, so no network access is
needed.
"""

from unittest.mock import MagicMock

import pytest
import requests

from academics.data import CourseDirectory, RemoteDirectory
from academics.engines import EnrollmentRegistry
from academics.errors import CollaboratorError, StudentNotFoundError
from academics.models import Course


def _response(status_code=200, payload=None, json_error=False):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("not json")
    else:
        resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def remote(session):
    return RemoteDirectory("https://records.example.edu/api/", session=session, timeout=5)


STUDENT_PAYLOAD = {"id": 7, "reg_no": "2024CS007", "full_name": "Remote Student", "status": "ACTIVE"}
COURSE_PAYLOAD = {
    "code": "CS101", "title": "Introduction to Programming", "credits": 3,
    "instructor": "Dr. Lee", "semester": "FALL",
}


class TestLookups:
    """Tests for GET-based lookups."""

    def test_find_student_by_id_when_ok_then_parsed(self, remote, session):
        session.get.return_value = _response(payload=STUDENT_PAYLOAD)
        result = remote.find_student_by_id(7)
        assert result.value.reg_no == "2024CS007"
        session.get.assert_called_once_with("https://records.example.edu/api/students/7", timeout=5)

    def test_find_student_by_id_when_404_then_missing(self, remote, session):
        session.get.return_value = _response(status_code=404)
        assert not remote.find_student_by_id(7)

    def test_find_course_by_code_when_lowercase_then_upper_in_url(self, remote, session):
        session.get.return_value = _response(payload=COURSE_PAYLOAD)
        course = remote.find_course_by_code("cs101").value
        assert course.code == "CS101"
        session.get.assert_called_once_with("https://records.example.edu/api/courses/CS101", timeout=5)

    @pytest.mark.parametrize("code", [None, "", "   "])
    def test_find_course_by_code_when_blank_then_missing_without_request(self, remote, session, code):
        """Same answer as CourseDirectory for a missing code."""
        assert not remote.find_course_by_code(code)
        assert not CourseDirectory().find_course_by_code(code)
        session.get.assert_not_called()

    def test_find_student_by_id_when_server_error_then_collaborator_error(self, remote, session):
        session.get.return_value = _response(status_code=503)
        with pytest.raises(CollaboratorError, match="503"):
            remote.find_student_by_id(7)

    def test_find_student_by_id_when_timeout_then_collaborator_error(self, remote, session):
        session.get.side_effect = requests.Timeout("timed out")
        with pytest.raises(CollaboratorError, match="timed out"):
            remote.find_student_by_id(7)

    def test_find_course_by_code_when_invalid_json_then_collaborator_error(self, remote, session):
        session.get.return_value = _response(json_error=True)
        with pytest.raises(CollaboratorError, match="invalid JSON"):
            remote.find_course_by_code("CS101")


class TestMembership:
    """Tests for POST/DELETE membership updates."""

    def test_add_course_membership_when_ok_then_posts(self, remote, session):
        session.request.return_value = _response(status_code=204)
        remote.add_course_membership(7, "CS101")
        session.request.assert_called_once_with(
            "POST", "https://records.example.edu/api/students/7/courses/CS101", timeout=5
        )

    def test_remove_course_membership_when_ok_then_deletes(self, remote, session):
        session.request.return_value = _response(status_code=204)
        remote.remove_course_membership(7, "CS101")
        assert session.request.call_args.args[0] == "DELETE"

    def test_add_course_membership_when_404_then_student_not_found(self, remote, session):
        session.request.return_value = _response(status_code=404)
        with pytest.raises(StudentNotFoundError):
            remote.add_course_membership(7, "CS101")

    def test_add_course_membership_when_connection_error_then_collaborator_error(self, remote, session):
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(CollaboratorError):
            remote.add_course_membership(7, "CS101")


class TestRegistryWithRemote:
    """A registry wired to the remote client behaves like the in-memory one."""

    def test_enroll_when_membership_post_fails_then_no_enrollment(self, remote, session):
        courses = CourseDirectory()
        courses.add_course(Course("CS101", "Introduction to Programming", 3, "Dr. Lee", "FALL"))
        registry = EnrollmentRegistry(students=remote, courses=courses)

        session.get.return_value = _response(payload=STUDENT_PAYLOAD)
        session.request.return_value = _response(status_code=500)

        with pytest.raises(CollaboratorError):
            registry.enroll(7, "CS101")
        assert registry.count() == 0

    def test_enroll_when_remote_ok_then_recorded(self, remote, session):
        registry = EnrollmentRegistry(students=remote, courses=remote)
        session.get.side_effect = [_response(payload=STUDENT_PAYLOAD), _response(payload=COURSE_PAYLOAD)]
        session.request.return_value = _response(status_code=201)

        e = registry.enroll(7, "CS101")
        assert e.key == (7, "CS101")
        assert registry.count() == 1
