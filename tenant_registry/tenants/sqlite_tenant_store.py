# tenant_registry/tenants/sqlite_tenant_store.py
import sqlite3
import logging
from typing import Optional, List
from datetime import datetime, timezone

from .storage_interfaces import AbstractTenantStore
from .models import TenantInDB
from .errors import TenantStoreUnavailableError
from ..storage.sqlite_base import open_sqlite_db_connection, close_sqlite_db_connection

logger = logging.getLogger(__name__)

SQLITE_MAX_INTEGER = 2**63 - 1


class SQLiteTenantStore(AbstractTenantStore):
    """SQLite implementation of the tenant storage interface."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    async def initialize(self) -> None:
        """Open the database connection and ensure the tenants table exists."""
        if self._conn is not None:
            return
        try:
            self._conn = open_sqlite_db_connection(self.db_path)
        except sqlite3.Error as e:
            raise TenantStoreUnavailableError("initialize", str(e)) from e
        logger.info(f"SQLiteTenantStore initialized at '{self.db_path}'.")

    async def teardown(self) -> None:
        if self._conn is not None:
            close_sqlite_db_connection(self._conn)
            self._conn = None
        logger.info("SQLiteTenantStore teardown complete.")

    def _connection(self, operation: str) -> sqlite3.Connection:
        if self._conn is None:
            raise TenantStoreUnavailableError(operation, "store is not initialized")
        return self._conn

    async def _execute_query(
        self, operation: str, query: str, params: tuple = (), commit: bool = True
    ) -> sqlite3.Cursor:
        """
        Execute a SQL query with transaction management.

        Raises:
            TenantStoreUnavailableError: If query execution fails
        """
        conn = self._connection(operation)
        cursor = conn.cursor()
        try:
            cursor.execute(query, params)
            if commit:
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"SQLite error executing query '{query}': {e}", exc_info=True)
            if commit:
                conn.rollback()
            raise TenantStoreUnavailableError(operation, str(e)) from e
        return cursor

    def _row_to_tenant_in_db(self, row: sqlite3.Row) -> TenantInDB:
        return TenantInDB(
            id=row["id"],
            name=row["name"],
            domain=row["domain"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    async def insert(self, name: str, domain: Optional[str]) -> TenantInDB:
        created_at_dt = datetime.now(timezone.utc)

        query = "INSERT INTO tenants (name, domain, created_at) VALUES (?, ?, ?)"
        cursor = await self._execute_query(
            "insert", query, (name, domain, created_at_dt.isoformat())
        )
        tenant_id = cursor.lastrowid
        logger.debug(f"Inserted tenant row with id {tenant_id}.")

        return TenantInDB(id=tenant_id, name=name, domain=domain, created_at=created_at_dt)

    async def find_by_id(self, tenant_id: int) -> Optional[TenantInDB]:
        # Ids beyond SQLite's INTEGER range can never have been assigned
        if not 1 <= tenant_id <= SQLITE_MAX_INTEGER:
            return None
        query = "SELECT id, name, domain, created_at FROM tenants WHERE id = ?"
        cursor = await self._execute_query("find_by_id", query, (tenant_id,), commit=False)
        row = cursor.fetchone()
        return self._row_to_tenant_in_db(row) if row else None

    async def list_all(self) -> List[TenantInDB]:
        query = "SELECT id, name, domain, created_at FROM tenants ORDER BY id"
        cursor = await self._execute_query("list_all", query, commit=False)
        return [self._row_to_tenant_in_db(row) for row in cursor.fetchall()]
