"""
Pytest configuration for the Sales CRUD CLI.

Provides fixtures for:
- An in-memory fake of the pymongo Collection surface the operations use
- Scripted prompts and a capturing rich console for driving the menu
- Settings and a real MongoDB collection for opt-in integration tests
"""

from __future__ import annotations

import io
import os
from typing import Any, Callable, Dict, Generator, Iterable, Iterator, List, Optional

import pytest
from bson import ObjectId
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import OperationFailure, PyMongoError
from pymongo.results import DeleteResult, InsertOneResult
from rich.console import Console

from sales_crud.config import Settings


class FakeCollection:
    """
    Dict-backed stand-in for `pymongo.collection.Collection`.

    Records every call name in `calls`; operations listed in `fail_on` raise
    OperationFailure instead of touching the data.
    """

    def __init__(self, documents: Iterable[Dict[str, Any]] = (), fail_on: Iterable[str] = ()) -> None:
        self.documents: Dict[Any, Dict[str, Any]] = {}
        self.calls: List[str] = []
        self.fail_on = set(fail_on)
        for document in documents:
            doc = dict(document)
            self.documents[doc.setdefault("_id", ObjectId())] = doc

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise OperationFailure(f"{operation} rejected by fake")

    def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        self._record("insert_one")
        doc = dict(document)
        object_id = doc.setdefault("_id", ObjectId())
        self.documents[object_id] = doc
        return InsertOneResult(object_id, acknowledged=True)

    def find(self, filter: Optional[Dict[str, Any]] = None) -> Iterator[Dict[str, Any]]:
        self._record("find")
        return iter([dict(doc) for doc in self.documents.values()])

    def find_one_and_update(
        self,
        filter: Dict[str, Any],
        update: Dict[str, Any],
        return_document: bool = ReturnDocument.BEFORE,
    ) -> Optional[Dict[str, Any]]:
        self._record("find_one_and_update")
        doc = self.documents.get(filter["_id"])
        if doc is None:
            return None
        before = dict(doc)
        doc.update(update["$set"])
        return dict(doc) if return_document else before

    def delete_one(self, filter: Dict[str, Any]) -> DeleteResult:
        self._record("delete_one")
        removed = self.documents.pop(filter["_id"], None)
        return DeleteResult({"n": 0 if removed is None else 1, "ok": 1.0}, acknowledged=True)


def scripted_prompt(*answers: str) -> Callable[[str], str]:
    """Prompt callable returning `answers` in order; asked texts land in `.asked`."""
    remaining = iter(answers)
    asked: List[str] = []

    def prompt(text: str) -> str:
        asked.append(text)
        return next(remaining)

    prompt.asked = asked  # type: ignore[attr-defined]
    return prompt


@pytest.fixture
def fake_collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """Plain-text rich console writing into `console_buffer`."""
    return Console(file=console_buffer, width=120, color_system=None, highlight=False)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        mongo_uri=os.getenv("MONGO_URI"),
        mongo_host=os.getenv("MONGO_HOST", "localhost"),
        mongo_port=int(os.getenv("MONGO_PORT", "27017")),
        mongo_db=os.getenv("MONGO_DB", "sales_crud_test"),
        mongo_collection="sales",
        mongo_timeout_ms=2000,
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def mongo_client(test_settings: Settings) -> Generator[MongoClient, None, None]:
    """
    Session-scoped client for integration tests.

    Skips tests if the server is not reachable.
    """
    client: MongoClient = MongoClient(
        test_settings.connection_uri(),
        serverSelectionTimeoutMS=test_settings.mongo_timeout_ms,
    )
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        pytest.skip("MongoDB not available for integration tests")
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def sales_collection(
    mongo_client: MongoClient, test_settings: Settings
) -> Generator[Collection, None, None]:
    """
    Empty sales collection for each test function; dropped afterwards.
    """
    collection = mongo_client[test_settings.mongo_db][test_settings.mongo_collection]
    collection.delete_many({})
    yield collection
    collection.drop()


@pytest.fixture
def make_collection() -> Callable[..., FakeCollection]:
    """Factory for FakeCollection with seeded documents or failing operations."""
    return FakeCollection


@pytest.fixture
def make_prompt() -> Callable[..., Callable[[str], str]]:
    """Factory for scripted prompt callables."""
    return scripted_prompt
