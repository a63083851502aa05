import logging
from typing import Optional

import pydantic
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..models.marks import MARKS_COLLECTION, UPDATABLE_FIELDS, MarksRecord, utcnow
from .errors import PersistenceError

logger = logging.getLogger(__name__)


class MarksService:
    """Create, query, update and delete marks records.

    Holds no state besides the collection handle; every failure raised by the
    store (or by record validation at write time) surfaces as
    ``PersistenceError`` carrying the original message. Nothing is retried.
    """

    def __init__(self, db: Database):
        self.collection = db[MARKS_COLLECTION]

    def add_marks(
        self,
        roll_number: str,
        name: str,
        grade: str,
        section: str,
        subject: str,
        marks: float,
    ) -> str:
        try:
            now = utcnow()
            record = MarksRecord(
                roll_number=roll_number,
                name=name,
                grade=grade,
                section=section,
                subject=subject,
                marks=marks,
                created_at=now,
                updated_at=now,
            )
            result = self.collection.insert_one(record.model_dump())
        except (pydantic.ValidationError, PyMongoError) as e:
            logger.error("%s while adding marks", e)
            raise PersistenceError(str(e)) from e
        logger.info("Added marks for roll number %s", roll_number)
        return str(result.inserted_id)

    def get_marks_data(self, roll_number: Optional[str] = None) -> list[dict]:
        query: dict = {}
        if roll_number:
            query = {"roll_number": roll_number}
        try:
            return list(self.collection.find(query))
        except PyMongoError as e:
            logger.error("%s while fetching marks data", e)
            raise PersistenceError(str(e)) from e

    def update_marks(self, roll_number: str, /, **fields) -> Optional[str]:
        changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
        changes["updated_at"] = utcnow()
        try:
            doc = self.collection.find_one_and_update(
                {"roll_number": roll_number}, {"$set": changes}, projection={"_id": 1}
            )
        except PyMongoError as e:
            logger.error("%s while updating marks", e)
            raise PersistenceError(str(e)) from e
        if doc is None:
            return None
        logger.info("Updated marks for roll number %s", roll_number)
        return str(doc["_id"])

    def delete_marks(self, roll_number: str, subject: Optional[str] = None) -> Optional[str]:
        query = {"roll_number": roll_number}
        if subject:
            query["subject"] = subject
        try:
            doc = self.collection.find_one_and_delete(query)
        except PyMongoError as e:
            logger.error("%s while deleting marks", e)
            raise PersistenceError(str(e)) from e
        if doc is None:
            return None
        logger.info("Deleted marks for roll number %s", roll_number)
        return str(doc["_id"])
