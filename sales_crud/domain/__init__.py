"""
Domain package for the Sales CRUD CLI.

Exports the record models and identifier parsing shared by the operations and
the menu dispatcher.
"""

from sales_crud.domain.models import Record, RecordFields, parse_record_id

__all__ = [
    "Record",
    "RecordFields",
    "parse_record_id",
]
