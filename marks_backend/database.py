import logging

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from .config import MONGO_DB_NAME, MONGO_SERVER_SELECTION_TIMEOUT_MS, MONGO_URL

logger = logging.getLogger(__name__)


def create_mongo_client(url: str = MONGO_URL) -> MongoClient:
    # MongoClient connects lazily; this only validates the URL.
    client = MongoClient(url, serverSelectionTimeoutMS=MONGO_SERVER_SELECTION_TIMEOUT_MS)
    logger.info("MongoDB client created for database %s", MONGO_DB_NAME)
    return client


def close_mongo_client(client: MongoClient) -> None:
    client.close()
    logger.info("MongoDB client closed")


def get_db(request: Request) -> Database:
    client: MongoClient = request.app.state.mongo_client
    return client[MONGO_DB_NAME]
