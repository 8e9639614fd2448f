"""
Domain models for the Sales CRUD CLI.

`RecordFields` holds the user-editable part of a sales document and is built
once per prompt sequence; `Record` is a document read back from the store,
identified by the string form of its `_id`.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional

from bson import Decimal128, ObjectId
from pydantic import BaseModel, Field

from sales_crud.errors import InvalidRecordIdError


class RecordFields(BaseModel):
    """
    Editable fields of a sales record (no identifier).
    """

    name: str = Field("", description="Free-text record name.")
    revenue: float = Field(0.0, description="Revenue amount.")

    model_config = {
        "frozen": True,
    }

    def to_document(self) -> dict[str, Any]:
        """Document body for insert or `$set`; never carries `_id`."""
        return {"name": self.name, "revenue": self.revenue}


class Record(BaseModel):
    """
    Representation of a single document in the sales collection.

    The collection is schema-flexible: `name` and `revenue` are None when a
    document lacks them or holds a value that cannot be read as text/number.
    """

    id: str = Field(..., min_length=1, description="String form of the document `_id`.")
    name: Optional[str] = Field(None, description="Free-text record name.")
    revenue: Optional[float] = Field(None, description="Revenue amount.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Record":
        """
        Build a Record from a raw document, keeping whatever fields exist.

        Raises pydantic.ValidationError only when the document has no `_id`.
        """
        return cls(
            id=str(document.get("_id", "")),
            name=_as_text(document.get("name")),
            revenue=_as_number(document.get("revenue")),
        )


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal128):
        value = value.to_decimal()
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def parse_record_id(raw_id: str) -> ObjectId:
    """
    Convert a hex identifier into an ObjectId.

    Raises
    ------
    InvalidRecordIdError
        If `raw_id` is not a 24-character hex string.
    """
    if not isinstance(raw_id, str) or not ObjectId.is_valid(raw_id):
        raise InvalidRecordIdError(raw_id)
    return ObjectId(raw_id)


__all__ = ["Record", "RecordFields", "parse_record_id"]
