"""Shared pytest fixtures.

MongoDB is replaced by a small in-memory database double that implements the
slice of the pymongo async collection API the services use.
"""

from collections.abc import Iterator
from copy import deepcopy
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from gatekeeper.app import App
from gatekeeper.config import Config
from gatekeeper.web.server import create_basic_app, create_session_app


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    for key, condition in query.items():
        value = doc.get(key)
        if isinstance(condition, dict):
            for op, operand in condition.items():
                if op != "$lt":
                    raise NotImplementedError(op)
                if value is None or not value < operand:
                    return False
        elif value != condition:
            return False
    return True


class FakeCollection:
    def __init__(self) -> None:
        self.documents: dict[Any, dict[str, Any]] = {}
        self.indexes: list[tuple[list[tuple[str, int]], dict[str, Any]]] = []

    async def create_index(self, keys: list[tuple[str, int]], **kwargs: Any) -> str:
        self.indexes.append((keys, kwargs))
        return "_".join(f"{name}_{direction}" for name, direction in keys)

    async def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        if document["_id"] in self.documents:
            raise DuplicateKeyError("duplicate _id")
        self.documents[document["_id"]] = deepcopy(document)
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        for doc in self.documents.values():
            if _matches(doc, query):
                return deepcopy(doc)
        return None

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        for key, doc in list(self.documents.items()):
            if _matches(doc, query):
                del self.documents[key]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query: dict[str, Any]) -> SimpleNamespace:
        keys = [key for key, doc in self.documents.items() if _matches(doc, query)]
        for key in keys:
            del self.documents[key]
        return SimpleNamespace(deleted_count=len(keys))


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def config():
    """Configuration with defaults only, ignoring any local .env file."""
    return Config(_env_file=None, database_url="mongodb://localhost:27017/gatekeeper_test")


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def sessions(fake_db):
    """The in-memory sessions collection."""
    return fake_db.get_collection("sessions")


@pytest.fixture
def session_app(config, fake_db):
    return App(config, database=fake_db)


@pytest.fixture
def session_client(session_app, config) -> Iterator[TestClient]:
    with TestClient(create_session_app(session_app, config)) as client:
        yield client


@pytest.fixture
def basic_client(config) -> Iterator[TestClient]:
    with TestClient(create_basic_app(config)) as client:
        yield client
