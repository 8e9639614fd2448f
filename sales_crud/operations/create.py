"""
Create operation: insert one sales document and report its assigned id.
"""

from __future__ import annotations

from pymongo.errors import PyMongoError

from sales_crud.domain.models import RecordFields
from sales_crud.operations.abstract import OperationResult, RecordOperation
from sales_crud.utils.logging import get_logger

log = get_logger(__name__)


class CreateRecordOperation(RecordOperation):
    """
    Insert a new document holding `name` and `revenue`; the store assigns `_id`.

    An insert failure is reported, not raised.
    """

    name: str = "create"
    description: str = "Create record to be inserted"

    def execute(self, fields: RecordFields) -> OperationResult:
        document = fields.to_document()
        try:
            inserted = self.collection.insert_one(document)
        except PyMongoError as exc:
            log.error("Could not insert record", extra={"operation": self.name, "error": str(exc)})
            return self._failure(f"Could not insert record: {exc}", record_id=None)

        record_id = str(inserted.inserted_id)
        log.info("Record created", extra={"operation": self.name, "record_id": record_id})
        return OperationResult(operation=self.name, ok=True, record_id=record_id)


__all__ = ["CreateRecordOperation"]
