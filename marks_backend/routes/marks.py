from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pymongo.database import Database

from ..database import get_db
from ..schemas.marks import (
    MarksCreate,
    MarksDelete,
    MarksIdResponse,
    MarksListResponse,
    MarksOut,
    MarksUpdate,
)
from ..services.errors import PersistenceError
from ..services.marks import MarksService

router = APIRouter()

INVALID_INPUT = "Invalid input"
NOT_FOUND = "Marks record not found"


def get_marks_service(db: Database = Depends(get_db)) -> MarksService:
    return MarksService(db)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, "success": False})


def marks_doc_to_out(doc: dict) -> MarksOut:
    return MarksOut(
        id=str(doc["_id"]),
        roll_number=doc["roll_number"],
        name=doc["name"],
        grade=doc["grade"],
        section=doc["section"],
        subject=doc["subject"],
        marks=doc["marks"],
        created_at=doc.get("created_at"),
        updated_at=doc.get("updated_at"),
    )


@router.get("", response_model=MarksListResponse)
def list_marks(
    roll_number: Optional[str] = Query(None, alias="rollNumber", description="The roll number of the student"),
    service: MarksService = Depends(get_marks_service),
):
    try:
        docs = service.get_marks_data(roll_number)
    except PersistenceError as e:
        return _error(500, str(e))
    return MarksListResponse(marks_list=[marks_doc_to_out(d) for d in docs])


@router.post("", response_model=MarksIdResponse, status_code=201)
def add_marks(
    payload: MarksCreate,
    service: MarksService = Depends(get_marks_service),
):
    try:
        inserted_id = service.add_marks(
            payload.roll_number,
            payload.name,
            payload.grade,
            payload.section,
            payload.subject,
            payload.marks,
        )
    except PersistenceError as e:
        return _error(500, str(e))
    return MarksIdResponse(id=inserted_id)


@router.patch("", response_model=MarksIdResponse)
def update_marks(
    payload: MarksUpdate,
    service: MarksService = Depends(get_marks_service),
):
    try:
        updated_id = service.update_marks(payload.roll_number, **payload.changes())
    except PersistenceError as e:
        return _error(500, str(e))
    if updated_id is None:
        return _error(404, NOT_FOUND)
    return MarksIdResponse(id=updated_id)


@router.delete("", response_model=MarksIdResponse)
def delete_marks(
    payload: MarksDelete,
    service: MarksService = Depends(get_marks_service),
):
    try:
        deleted_id = service.delete_marks(payload.roll_number, payload.subject)
    except PersistenceError as e:
        return _error(500, str(e))
    if deleted_id is None:
        return _error(404, NOT_FOUND)
    return MarksIdResponse(id=deleted_id)
