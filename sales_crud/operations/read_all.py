"""
Read-all operation: fetch every document in the collection, unfiltered.
"""

from __future__ import annotations

from typing import List

from bson.errors import BSONError
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from sales_crud.domain.models import Record
from sales_crud.errors import RecordDecodeError
from sales_crud.operations.abstract import OperationResult, RecordOperation
from sales_crud.utils.logging import get_logger

log = get_logger(__name__)


class ReadAllRecordsOperation(RecordOperation):
    """
    Fetch all documents and decode them into Records.

    Documents missing `name` or `revenue` are listed with those fields empty.
    A failure while reading the cursor, or a document without `_id`, raises
    RecordDecodeError, which aborts the process.
    """

    name: str = "read"
    description: str = "Read record"

    def execute(self) -> OperationResult:
        records: List[Record] = []
        try:
            for document in self.collection.find({}):
                records.append(Record.from_document(document))
        except (PyMongoError, BSONError) as exc:
            log.error("Could not read records", extra={"operation": self.name})
            raise RecordDecodeError("Could not read records", str(exc)) from exc
        except ValidationError as exc:
            log.error("Could not decode record", extra={"operation": self.name})
            raise RecordDecodeError(
                "Could not decode record", f"{exc.error_count()} invalid field(s)"
            ) from exc

        log.info("Records read", extra={"operation": self.name, "count": len(records)})
        return OperationResult(operation=self.name, ok=True, records=records)


__all__ = ["ReadAllRecordsOperation"]
