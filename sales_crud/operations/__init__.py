"""
Operations package for the Sales CRUD CLI.

Re-exports the abstract contract, the four record operations, and the
operation registry so callers can import from `sales_crud.operations`.
"""

from typing import Callable, Dict, List

from pymongo.collection import Collection

from sales_crud.operations.abstract import OperationResult, RecordOperation
from sales_crud.operations.create import CreateRecordOperation
from sales_crud.operations.delete import DeleteRecordOperation
from sales_crud.operations.read_all import ReadAllRecordsOperation
from sales_crud.operations.update import UpdateRecordOperation


def _operation_factories() -> Dict[str, Callable[[Collection], RecordOperation]]:
    """Registry of available operations."""
    return {
        CreateRecordOperation.name: CreateRecordOperation,
        ReadAllRecordsOperation.name: ReadAllRecordsOperation,
        UpdateRecordOperation.name: UpdateRecordOperation,
        DeleteRecordOperation.name: DeleteRecordOperation,
    }


def available_operations() -> List[str]:
    """List available operation names."""
    return sorted(_operation_factories().keys())


def resolve_operation(name: str, collection: Collection) -> RecordOperation:
    factories = _operation_factories()
    if name not in factories:
        raise ValueError(f"Unknown operation '{name}'. Available: {', '.join(factories)}")
    return factories[name](collection)


__all__ = [
    # Abstracts
    "OperationResult",
    "RecordOperation",
    # Concrete operations
    "CreateRecordOperation",
    "DeleteRecordOperation",
    "ReadAllRecordsOperation",
    "UpdateRecordOperation",
    # Registry
    "available_operations",
    "resolve_operation",
]
