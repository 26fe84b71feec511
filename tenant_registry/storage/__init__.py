# tenant_registry/storage/__init__.py

"""Storage module initialization.

Opens SQLite connections and creates the tenant registry schema.
"""

from .sqlite_base import (
    IN_MEMORY_DB_PATH,
    open_sqlite_db_connection,
    init_sqlite_db,
    close_sqlite_db_connection
)

__all__ = [
    "IN_MEMORY_DB_PATH",
    "open_sqlite_db_connection",
    "init_sqlite_db",
    "close_sqlite_db_connection"
]
