"""
HTTP client for a remote records service.

RemoteDirectory implements the same collaborator interfaces as the
in-memory directories, so a registry can run against students and courses
held by another service.

ENDPOINTS:
    GET    {base}/students/{id}                 -> student record
    GET    {base}/courses/{code}                -> course record
    POST   {base}/students/{id}/courses/{code}  -> add membership
    DELETE {base}/students/{id}/courses/{code}  -> remove membership

A 404 on a GET means "not found" and comes back as Lookup.missing().
Anything else that fails (timeouts, connection errors, 5xx) is raised as
CollaboratorError. There are no retries: the registry surfaces the failure
to its caller immediately.
"""

import logging
import urllib.parse

import requests

from ..config import REMOTE_TIMEOUT_SECONDS
from ..errors import CollaboratorError, StudentNotFoundError
from ..models import Course, Lookup, Student
from .parser import RecordParser

logger = logging.getLogger(__name__)


class RemoteDirectory:
    """
    Student/course collaborator backed by HTTP calls.

    Usage:
        remote = RemoteDirectory("https://records.example.edu/api")
        registry = EnrollmentRegistry(students=remote, courses=remote)
    """

    def __init__(self, base_url: str, session: requests.Session = None,
                 timeout: float = REMOTE_TIMEOUT_SECONDS, parser: RecordParser = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.parser = parser or RecordParser()

    def find_student_by_id(self, student_id: int) -> Lookup[Student]:
        data = self._get_json(f"students/{int(student_id)}")
        if data is None:
            return Lookup.missing()
        return Lookup.found(self.parser.parse_student(data, student_id=student_id))

    def find_course_by_code(self, code: str) -> Lookup[Course]:
        code = (code or "").strip().upper()
        if not code:
            return Lookup.missing()
        data = self._get_json(f"courses/{_quote(code)}")
        if data is None:
            return Lookup.missing()
        return Lookup.found(self.parser.parse_course(data))

    def add_course_membership(self, student_id: int, code: str):
        self._send("POST", student_id, code)

    def remove_course_membership(self, student_id: int, code: str):
        self._send("DELETE", student_id, code)

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def _get_json(self, path: str):
        url = self._url(path)
        logger.debug(f"GET {url}")
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise CollaboratorError(f"Lookup failed for {url}: {e}") from e

        if resp.status_code == 404:
            return None
        try:
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as e:
            raise CollaboratorError(f"Records service returned {resp.status_code} for {url}") from e
        except ValueError as e:
            raise CollaboratorError(f"Records service sent invalid JSON for {url}") from e

    def _send(self, method: str, student_id: int, code: str):
        url = self._url(f"students/{int(student_id)}/courses/{_quote(code)}")
        logger.debug(f"{method} {url}")
        try:
            resp = self.session.request(method, url, timeout=self.timeout)
        except requests.RequestException as e:
            raise CollaboratorError(f"Membership update failed for {url}: {e}") from e

        if resp.status_code == 404:
            raise StudentNotFoundError(f"Student with ID {student_id} not found")
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise CollaboratorError(f"Records service returned {resp.status_code} for {url}") from e


def _quote(segment: str) -> str:
    return urllib.parse.quote(str(segment), safe="")
