from typing import List, Optional

import requests

from .schemas import Student


class StudentClientError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class StudentClient:
    """Thin ``requests`` wrapper around the student registry HTTP API."""

    def __init__(self, base_url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _check(self, resp: requests.Response, expected: int) -> requests.Response:
        if resp.status_code != expected:
            raise StudentClientError(resp.status_code, resp.text.strip())
        return resp

    def list_students(self) -> List[Student]:
        resp = self._check(self.session.get(self._url("/students"), timeout=self.timeout), 200)
        return [Student.model_validate(item) for item in resp.json()]

    def get_student(self, student_id: int) -> Student:
        resp = self._check(self.session.get(self._url(f"/students/{student_id}"), timeout=self.timeout), 200)
        return Student.model_validate(resp.json())

    def next_student(self) -> Student:
        resp = self._check(self.session.get(self._url("/students/next"), timeout=self.timeout), 200)
        return Student.model_validate(resp.json())

    def create_student(self, name: str, age: int, score: int) -> Student:
        payload = {"Name": name, "Age": age, "Score": score}
        resp = self._check(self.session.post(self._url("/students"), json=payload, timeout=self.timeout), 201)
        return Student.model_validate(resp.json())

    def delete_student(self, student_id: int) -> None:
        self._check(self.session.delete(self._url(f"/students/{student_id}"), timeout=self.timeout), 200)
