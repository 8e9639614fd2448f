"""
Delete operation: remove a single document by id and report how many went.
"""

from __future__ import annotations

from bson import ObjectId
from pymongo.errors import PyMongoError

from sales_crud.operations.abstract import OperationResult, RecordOperation
from sales_crud.utils.logging import get_logger

log = get_logger(__name__)


class DeleteRecordOperation(RecordOperation):
    """
    Remove the document matching `object_id`.

    `deleted_count` is 0 when nothing matched; that is a success, not an error.
    """

    name: str = "delete"
    description: str = "Delete Record"

    def execute(self, object_id: ObjectId) -> OperationResult:
        record_id = str(object_id)
        try:
            deleted = self.collection.delete_one({"_id": object_id})
        except PyMongoError as exc:
            log.error(
                "Could not delete record",
                extra={"operation": self.name, "record_id": record_id, "error": str(exc)},
            )
            return self._failure(
                f"Could not delete record: {exc}", record_id=record_id, deleted_count=0
            )

        log.info(
            "Record delete issued",
            extra={
                "operation": self.name,
                "record_id": record_id,
                "deleted_count": deleted.deleted_count,
            },
        )
        return OperationResult(
            operation=self.name,
            ok=True,
            record_id=record_id,
            deleted_count=deleted.deleted_count,
        )


__all__ = ["DeleteRecordOperation"]
