from unittest.mock import MagicMock, patch

import pytest

from student_registry.client import StudentClient, StudentClientError
from student_registry.schemas import Student


@pytest.fixture
def api(client):
    # TestClient speaks the same get/post/delete interface as requests.Session
    return StudentClient("http://testserver/", session=client)


def test_client_round_trip(api):
    assert len(api.list_students()) == 10

    created = api.create_student("zzz", 9, 50)
    assert created == Student(id=11, name="zzz", age=9, score=50)

    assert api.get_student(3).name == "ccc"
    assert api.next_student().id == 4

    api.delete_student(11)
    with pytest.raises(StudentClientError) as info:
        api.get_student(11)
    assert info.value.status_code == 404
    assert info.value.message == "Student not found"


def test_client_next_without_query(api):
    with pytest.raises(StudentClientError) as info:
        api.next_student()
    assert info.value.status_code == 404


def test_client_uses_base_url_and_timeout():
    session = MagicMock()
    session.get.return_value.status_code = 200
    session.get.return_value.json.return_value = {"Id": 7, "Name": "fff", "Age": 44, "Score": 83}

    api = StudentClient("http://registry:3000/", timeout=2.5, session=session)
    student = api.get_student(7)

    session.get.assert_called_once_with("http://registry:3000/students/7", timeout=2.5)
    assert student.age == 44


def test_client_error_status():
    session = MagicMock()
    session.delete.return_value.status_code = 404
    session.delete.return_value.text = "Student not found\n"

    api = StudentClient("http://registry:3000", session=session)
    with pytest.raises(StudentClientError) as info:
        api.delete_student(99)
    assert info.value.status_code == 404
    assert info.value.message == "Student not found"


def test_client_opens_its_own_session():
    with patch("student_registry.client.requests.Session") as session_cls:
        session = session_cls.return_value
        session.post.return_value.status_code = 201
        session.post.return_value.json.return_value = {"Id": 11, "Name": "zzz", "Age": 9, "Score": 50}

        student = StudentClient("http://registry:3000").create_student("zzz", 9, 50)

    session_cls.assert_called_once_with()
    session.post.assert_called_once_with(
        "http://registry:3000/students",
        json={"Name": "zzz", "Age": 9, "Score": 50},
        timeout=5.0,
    )
    assert student.id == 11
