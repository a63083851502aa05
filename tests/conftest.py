"""
Pytest configuration and fixtures
"""
import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from marks_backend.database import get_db
from marks_backend.main import app
from marks_backend.models.marks import MARKS_COLLECTION, ensure_marks_indexes
from marks_backend.services.marks import MarksService


class FakeInsertOneResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCollection:
    """In-memory stand-in for the pymongo collection methods the app uses."""

    def __init__(self, name):
        self.name = name
        self.docs = []
        self.unique_keys = []

    def _matches(self, doc, query):
        return all(doc.get(k) == v for k, v in query.items())

    def _project(self, doc, projection):
        if not projection:
            return copy.deepcopy(doc)
        keys = set(projection) | {"_id"}
        return {k: copy.deepcopy(v) for k, v in doc.items() if k in keys}

    def create_index(self, keys, unique=False, name=None):
        if unique:
            self.unique_keys.extend(k for k, _ in keys)
        return name

    def insert_one(self, doc):
        for key in self.unique_keys:
            if any(existing.get(key) == doc.get(key) for existing in self.docs):
                raise DuplicateKeyError(
                    f"E11000 duplicate key error collection: marksdb.{self.name} "
                    f"dup key: {{ {key}: \"{doc.get(key)}\" }}",
                    11000,
                )
        stored = copy.deepcopy(doc)
        stored.setdefault("_id", ObjectId())
        doc["_id"] = stored["_id"]
        self.docs.append(stored)
        return FakeInsertOneResult(stored["_id"])

    def find(self, query=None):
        query = query or {}
        return [copy.deepcopy(d) for d in self.docs if self._matches(d, query)]

    def find_one_and_update(self, query, update, projection=None):
        for doc in self.docs:
            if self._matches(doc, query):
                before = self._project(doc, projection)
                doc.update(copy.deepcopy(update.get("$set", {})))
                return before
        return None

    def find_one_and_delete(self, query):
        for i, doc in enumerate(self.docs):
            if self._matches(doc, query):
                return self.docs.pop(i)
        return None


class FakeDatabase:
    def __init__(self, name="marksdb"):
        self.name = name
        self._collections = {}

    def __getitem__(self, name):
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]


@pytest.fixture
def empty_db():
    return FakeDatabase()


@pytest.fixture
def fake_db():
    db = FakeDatabase()
    ensure_marks_indexes(db)
    return db


@pytest.fixture
def marks_collection(fake_db):
    return fake_db[MARKS_COLLECTION]


@pytest.fixture
def service(fake_db):
    return MarksService(fake_db)


@pytest.fixture
def client(fake_db):
    # Not used as a context manager, so the lifespan (real MongoClient) never runs.
    app.dependency_overrides[get_db] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_record():
    return {
        "rollNumber": "001",
        "name": "Jhon",
        "grade": "10",
        "section": "B",
        "subject": "Science",
        "marks": 60,
    }
