import logging
import threading
from typing import Dict, Iterable, List

from .schemas import Student, StudentCreate

logger = logging.getLogger(__name__)

SEED_STUDENTS: List[Student] = [
    Student(id=1, name="aaa", age=16, score=87),
    Student(id=2, name="bbb", age=18, score=98),
    Student(id=3, name="ccc", age=20, score=85),
    Student(id=4, name="ccc", age=11, score=70),
    Student(id=5, name="ddd", age=22, score=76),
    Student(id=6, name="eee", age=33, score=82),
    Student(id=7, name="fff", age=44, score=83),
    Student(id=8, name="ggg", age=55, score=96),
    Student(id=9, name="hhh", age=66, score=62),
    Student(id=10, name="iii", age=77, score=34),
]


class StudentStoreError(Exception):
    pass


class StudentNotFound(StudentStoreError):
    def __init__(self, student_id: int):
        super().__init__(f"Student {student_id} not found")
        self.student_id = student_id


class NoNextStudent(StudentStoreError):
    """Raised when the cursor is unset or the record after it is missing."""

    def __init__(self, last_queried_id: int):
        if last_queried_id == 0:
            msg = "No student has been queried yet"
        else:
            msg = f"No student after {last_queried_id}"
        super().__init__(msg)
        self.last_queried_id = last_queried_id


class StudentStore:
    """In-memory student records plus the "next" cursor.

    Every public method takes the same lock, so concurrent request
    threads see each operation as a single step.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: Dict[int, Student] = {}
        self._last_id = 0  # highest id ever assigned, never reused
        self._last_queried_id = 0  # 0 means nothing queried yet

    @property
    def last_id(self) -> int:
        with self._lock:
            return self._last_id

    @property
    def last_queried_id(self) -> int:
        with self._lock:
            return self._last_queried_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def seed(self, students: Iterable[Student]) -> None:
        with self._lock:
            for student in students:
                self._records[student.id] = student.model_copy()
                self._last_id = max(self._last_id, student.id)
            count, last_id = len(self._records), self._last_id
        logger.info("Seeded store with %d students (last id %d)", count, last_id)

    def list_students(self) -> List[Student]:
        with self._lock:
            return [self._records[k].model_copy() for k in sorted(self._records)]

    def get_student(self, student_id: int) -> Student:
        with self._lock:
            student = self._records.get(student_id)
            if student is None:
                logger.debug("Student %s not found", student_id)
                raise StudentNotFound(student_id)
            self._last_queried_id = student_id
            return student.model_copy()

    def create_student(self, data: StudentCreate) -> Student:
        with self._lock:
            self._last_id += 1
            student = Student(id=self._last_id, name=data.name, age=data.age, score=data.score)
            self._records[student.id] = student
        logger.info("Created student %s", student.id)
        return student.model_copy()

    def delete_student(self, student_id: int) -> None:
        with self._lock:
            if student_id not in self._records:
                logger.debug("Student %s not found", student_id)
                raise StudentNotFound(student_id)
            del self._records[student_id]
        logger.info("Deleted student %s", student_id)

    def next_student(self) -> Student:
        with self._lock:
            if self._last_queried_id == 0:
                raise NoNextStudent(0)
            next_id = self._last_queried_id + 1
            student = self._records.get(next_id)
            if student is None:
                raise NoNextStudent(self._last_queried_id)
            self._last_queried_id = next_id
            return student.model_copy()

    def snapshot(self) -> List[str]:
        with self._lock:
            return [
                f"ID: {s.id}, Name: {s.name}, Age: {s.age}, Score: {s.score}"
                for _, s in sorted(self._records.items())
            ]
