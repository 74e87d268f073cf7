"""
Food Circle Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set before any `foodcircle` import so the
       settings singleton picks up test values. MongoDB is replaced by a small
       in-memory double that implements the part of the Motor collection API
       the services use (find/to_list, find_one, insert_one, update_one,
       delete_one) and the database `ping` command.

Fixtures:
    ├── fake_database: in-memory database with `foods` and `foodRequest`
    ├── sample_food: a food document as the web client posts it
    ├── test_app: FastAPI app bound to fake_database
    └── test_client: HTTPX AsyncClient talking to test_app
"""

import copy
import os
import re
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["ENVIRONMENT"] = "development"
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

_MISSING = object()


# ══════════════════════════════════════════════════════════════════════════
# In-Memory MongoDB Double
# ══════════════════════════════════════════════════════════════════════════


def _resolve(document: Dict[str, Any], dotted_key: str) -> Any:
    value: Any = document
    for part in dotted_key.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _matches(document: Dict[str, Any], query: Optional[Dict[str, Any]]) -> bool:
    for key, condition in (query or {}).items():
        value = _resolve(document, key)
        if isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif value is _MISSING or value != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        if length is None:
            return list(self._documents)
        return self._documents[:length]


class FakeCollection:
    """Motor-shaped collection storing documents in a list."""

    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []

    def find(self, filter: Optional[Dict[str, Any]] = None, sort=None) -> FakeCursor:
        found = [copy.deepcopy(d) for d in self.documents if _matches(d, filter)]
        for key, direction in reversed(sort or []):
            found.sort(key=lambda d: _resolve(d, key), reverse=direction == -1)
        return FakeCursor(found)

    async def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if _matches(document, filter):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document: Dict[str, Any]):
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(acknowledged=True, inserted_id=document["_id"])

    async def update_one(self, filter: Dict[str, Any], update: Dict[str, Any], upsert: bool = False):
        fields = update.get("$set", {})
        for document in self.documents:
            if _matches(document, filter):
                changed = any(document.get(k, _MISSING) != v for k, v in fields.items())
                document.update(copy.deepcopy(fields))
                return SimpleNamespace(
                    acknowledged=True,
                    matched_count=1,
                    modified_count=1 if changed else 0,
                    upserted_id=None,
                )
        upserted_id = None
        if upsert:
            document = {k: v for k, v in filter.items() if not k.startswith("$")}
            document.update(copy.deepcopy(fields))
            document.setdefault("_id", ObjectId())
            self.documents.append(document)
            upserted_id = document["_id"]
        return SimpleNamespace(
            acknowledged=True, matched_count=0, modified_count=0, upserted_id=upserted_id
        )

    async def delete_one(self, filter: Dict[str, Any]):
        for index, document in enumerate(self.documents):
            if _matches(document, filter):
                del self.documents[index]
                return SimpleNamespace(acknowledged=True, deleted_count=1)
        return SimpleNamespace(acknowledged=True, deleted_count=0)


class FakeDatabase:
    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}
        self.ping_ok = True

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def command(self, name: str):
        if name == "ping" and not self.ping_ok:
            from pymongo.errors import ServerSelectionTimeoutError

            raise ServerSelectionTimeoutError("cluster unreachable")
        return {"ok": 1.0}


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def foods_collection(fake_database):
    return fake_database["foods"]


@pytest.fixture
def requests_collection(fake_database):
    return fake_database["foodRequest"]


@pytest.fixture
def sample_food():
    """A donation body as the Add Food page posts it."""
    return {
        "name": "Fried Rice",
        "image": "https://example.com/rice.jpg",
        "quantity": "4",
        "pickupLocation": "Dhaka",
        "expiredDate": "2026-11-02",
        "notes": "Vegetarian",
        "status": "available",
        "donator": {
            "donatorEmail": "donor@example.com",
            "donatorName": "Dana Donor",
            "donatorImage": "https://example.com/dana.png",
        },
    }


@pytest.fixture
def test_app(fake_database):
    from foodcircle.main import create_app

    return create_app(database=fake_database)


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed straight into the app (no server, no lifespan).

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def _login(client: AsyncClient, email: str) -> str:
    """Issue a session for `email` and make it the client's only cookie."""
    response = await client.post("/jwt", json={"email": email})
    assert response.status_code == 200
    token = response.cookies["token"]
    client.cookies.clear()
    client.cookies.set("token", token)
    return token


@pytest.fixture
def login():
    """Coroutine function: `await login(test_client, email)`."""
    return _login
