"""
Utilities package for the Sales CRUD CLI.

Exports shared logging helpers. Keep this package free of domain logic.
"""

from sales_crud.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
