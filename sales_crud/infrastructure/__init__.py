"""
Infrastructure package for the Sales CRUD CLI.

Centralizes database connectivity (the single MongoClient handle). Keep this
layer focused on I/O and resource management, decoupled from the record
operations and the menu.
"""

from sales_crud.infrastructure.db_factory import (
    ClientManager,
    get_client,
    get_collection,
)

__all__ = [
    "ClientManager",
    "get_client",
    "get_collection",
]
