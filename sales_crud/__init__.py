"""
Sales CRUD CLI - interactive create/read/update/delete over a MongoDB collection.

One process holds one MongoClient, shows a numbered menu, runs a single record
operation against the `sales` collection, prints the outcome and exits:

- Create: insert a record (name, revenue) and report its assigned id
- Read: list every record in the collection
- Update: set name and revenue on a record by id
- Delete: remove a record by id and report how many were removed
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from sales_crud.config import Settings, get_settings
from sales_crud.dispatcher import Command, MenuDispatcher, parse_command
from sales_crud.domain.models import Record, RecordFields, parse_record_id
from sales_crud.errors import (
    ConnectionConfigError,
    CrudError,
    CrudFatalError,
    InvalidMenuChoiceError,
    InvalidRecordIdError,
    RecordDecodeError,
)
from sales_crud.operations import (
    CreateRecordOperation,
    DeleteRecordOperation,
    OperationResult,
    ReadAllRecordsOperation,
    RecordOperation,
    UpdateRecordOperation,
    available_operations,
)
from sales_crud.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Menu
    "Command",
    "MenuDispatcher",
    "parse_command",
    # Domain
    "Record",
    "RecordFields",
    "parse_record_id",
    # Errors
    "CrudError",
    "CrudFatalError",
    "ConnectionConfigError",
    "InvalidMenuChoiceError",
    "InvalidRecordIdError",
    "RecordDecodeError",
    # Operations
    "RecordOperation",
    "OperationResult",
    "CreateRecordOperation",
    "ReadAllRecordsOperation",
    "UpdateRecordOperation",
    "DeleteRecordOperation",
    "available_operations",
    # Logging
    "configure_logging",
    "get_logger",
]
