import logging

from .config import MONGO_DB_NAME
from .database import close_mongo_client, create_mongo_client
from .logging_config import configure_logging
from .models.marks import ensure_marks_indexes
from .services.errors import PersistenceError
from .services.marks import MarksService

logger = logging.getLogger(__name__)

SAMPLE_MARKS = [
    {"roll_number": "001", "name": "Jhon", "grade": "10", "section": "B", "subject": "Science", "marks": 60},
    {"roll_number": "002", "name": "Priya", "grade": "10", "section": "A", "subject": "Math", "marks": 88},
    {"roll_number": "003", "name": "Arjun", "grade": "9", "section": "C", "subject": "English", "marks": 74},
]


def main():
    """
    One-off script to load a few sample marks records so the UI has data.
    Records whose roll number already exists are skipped.
    """
    configure_logging()
    client = create_mongo_client()
    try:
        db = client[MONGO_DB_NAME]
        ensure_marks_indexes(db)
        service = MarksService(db)
        for record in SAMPLE_MARKS:
            if service.get_marks_data(record["roll_number"]):
                logger.info("Roll number %s already exists, skipping", record["roll_number"])
                continue
            try:
                service.add_marks(**record)
            except PersistenceError:
                logger.warning("Could not add roll number %s", record["roll_number"])
    finally:
        close_mongo_client(client)


if __name__ == "__main__":
    main()
