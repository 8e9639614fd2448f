"""
Abstract operation interfaces and result contracts for the Sales CRUD CLI.

Concrete operations (create, read-all, update, delete) implement the
RecordOperation ABC and return an OperationResult TypedDict so the dispatcher
and reporter can treat them uniformly. Non-fatal store failures are reported
through the result (`ok=False`, `error`); fatal conditions raise.
"""

from __future__ import annotations

import abc
from typing import List, Optional, TypedDict

from pymongo.collection import Collection

from sales_crud.domain.models import Record


class OperationResult(TypedDict, total=False):
    """
    Outcome of a single record operation.

    Only `operation` and `ok` are always present; the rest depend on the
    operation that produced the result.
    """

    operation: str
    ok: bool
    record_id: Optional[str]
    record: Optional[Record]
    records: List[Record]
    deleted_count: int
    error: Optional[str]


class RecordOperation(abc.ABC):
    """
    Base class for class-based operations bound to one collection.

    Subclasses set `name` and `description` and implement `execute`, whose
    arguments vary per operation.
    """

    name: str
    description: str

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    @abc.abstractmethod
    def execute(self, *args, **kwargs) -> OperationResult:  # pragma: no cover - interface only
        """Issue one request to the store and return its outcome."""
        raise NotImplementedError

    def _failure(self, error: str, **fields) -> OperationResult:
        result = OperationResult(operation=self.name, ok=False, error=error)
        result.update(fields)  # type: ignore[typeddict-item]
        return result


__all__ = [
    "OperationResult",
    "RecordOperation",
]
