"""
Update operation: partial `$set` of name and revenue on one document by id.
"""

from __future__ import annotations

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from sales_crud.domain.models import Record, RecordFields
from sales_crud.operations.abstract import OperationResult, RecordOperation
from sales_crud.utils.logging import get_logger

log = get_logger(__name__)


class UpdateRecordOperation(RecordOperation):
    """
    Set `name` and `revenue` on the document matching `object_id` and return
    the post-update document. The identifier itself is never modified.

    A missing document or store error is reported, not raised.
    """

    name: str = "update"
    description: str = "Update record"

    def execute(self, object_id: ObjectId, fields: RecordFields) -> OperationResult:
        record_id = str(object_id)
        try:
            updated = self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": fields.to_document()},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            log.error(
                "Failed to update record",
                extra={"operation": self.name, "record_id": record_id, "error": str(exc)},
            )
            return self._failure(f"Failed to update record: {exc}", record_id=record_id)

        if updated is None:
            log.info(
                "No record matched for update",
                extra={"operation": self.name, "record_id": record_id},
            )
            return self._failure(
                f"Failed to update record: no record with id {record_id}", record_id=record_id
            )

        record = Record.from_document(updated)
        log.info("Record updated", extra={"operation": self.name, "record_id": record_id})
        return OperationResult(operation=self.name, ok=True, record_id=record_id, record=record)


__all__ = ["UpdateRecordOperation"]
