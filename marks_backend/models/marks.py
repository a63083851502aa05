"""
Persistence model for the marks collection.

Documents are stored with snake_case keys. The API layer exposes them in
camelCase (see ``schemas.marks``).
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field
from pymongo import ASCENDING
from pymongo.database import Database

MARKS_COLLECTION = "marks"

UPDATABLE_FIELDS = ("name", "grade", "section", "subject", "marks")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MarksRecord(BaseModel):
    """A single student-subject mark entry (collection: marks)"""
    roll_number: str = Field(..., min_length=1, max_length=255, description="Student roll number, unique")
    name: str = Field(..., min_length=1, max_length=255, description="Student name")
    grade: str = Field(..., min_length=1, description="Class / grade")
    section: str = Field(..., min_length=1, description="Section within the grade")
    subject: str = Field(..., min_length=1, description="Subject name")
    marks: float = Field(..., ge=0, strict=True, allow_inf_nan=False, description="Marks obtained")
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


def ensure_marks_indexes(db: Database) -> None:
    db[MARKS_COLLECTION].create_index(
        [("roll_number", ASCENDING)], unique=True, name="roll_number_unique"
    )
