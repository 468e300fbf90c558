import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .logging_config import setup_logging
from .schemas import Student, StudentCreate
from .store import SEED_STUDENTS, NoNextStudent, StudentNotFound, StudentStore

logger = logging.getLogger(__name__)

router = APIRouter()

_ID_PATTERN = re.compile(r"[0-9]+")
_MAX_ID = 2**63 - 1


def _parse_id(raw: str) -> Optional[int]:
    """Digits only, within the signed 64-bit range; anything else is None."""
    if not _ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    return value if value <= _MAX_ID else None


def get_store(request: Request) -> StudentStore:
    return request.app.state.store


@router.get("/students", response_model=List[Student])
def list_students(store: StudentStore = Depends(get_store)):
    return store.list_students()


# must be registered before /students/{student_id}
@router.get("/students/next", response_model=Student)
def next_student(store: StudentStore = Depends(get_store)):
    try:
        return store.next_student()
    except NoNextStudent as e:
        if e.last_queried_id == 0:
            raise HTTPException(status_code=404, detail="No student has been queried yet")
        raise HTTPException(status_code=404, detail="Next student not found")


@router.get("/students/{student_id}", response_model=Student)
def get_student(student_id: str, store: StudentStore = Depends(get_store)):
    key = _parse_id(student_id)
    if key is None:
        raise HTTPException(status_code=400, detail="Invalid student ID")
    try:
        return store.get_student(key)
    except StudentNotFound:
        raise HTTPException(status_code=404, detail="Student not found")


@router.post("/students", response_model=Student, status_code=201)
def create_student(student: StudentCreate, store: StudentStore = Depends(get_store)):
    return store.create_student(student)


@router.delete("/students/{student_id}")
def delete_student(student_id: str, store: StudentStore = Depends(get_store)):
    # a malformed id is looked up as 0, which never exists
    key = _parse_id(student_id) or 0
    try:
        store.delete_student(key)
    except StudentNotFound:
        raise HTTPException(status_code=404, detail="Student not found")
    return Response(status_code=200)


@router.get("/health")
def health():
    return {"status": "ok"}


async def _plain_http_error(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def _invalid_body(request: Request, exc: RequestValidationError):
    logger.debug("Rejected request body for %s %s", request.method, request.url.path)
    return PlainTextResponse("Invalid request body", status_code=400)


def create_app(store: Optional[StudentStore] = None) -> FastAPI:
    """Build the service around ``store``, or a freshly seeded one."""
    setup_logging(settings.log_level)

    if store is None:
        store = StudentStore()
        store.seed(SEED_STUDENTS)
    for line in store.snapshot():
        logger.debug(line)

    app = FastAPI(title="Student Registry")
    app.state.store = store
    app.add_exception_handler(StarletteHTTPException, _plain_http_error)
    app.add_exception_handler(RequestValidationError, _invalid_body)
    app.include_router(router)
    return app


app = create_app()
