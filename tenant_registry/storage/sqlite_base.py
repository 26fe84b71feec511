# tenant_registry/storage/sqlite_base.py
import sqlite3
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

IN_MEMORY_DB_PATH = ":memory:"


def open_sqlite_db_connection(db_path: str) -> sqlite3.Connection:
    """
    Open a SQLite database connection and make sure the schema exists.

    Creates the parent directory of file-backed databases. The special
    path ":memory:" opens a private in-memory database.

    Raises:
        sqlite3.Error: If the database cannot be opened or initialized
    """
    if db_path == IN_MEMORY_DB_PATH:
        target = IN_MEMORY_DB_PATH
    else:
        resolved = Path(db_path).resolve()
        resolved.parent.mkdir(parents=True, exist_ok=True)
        target = str(resolved)

    logger.info(f"Attempting to connect to SQLite DB at: {target}")
    try:
        # One connection is shared by every request handled on the event loop
        conn = sqlite3.connect(target, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        init_sqlite_db(conn)
    except sqlite3.Error as e:
        logger.error(f"Error connecting to SQLite database at {target}: {e}", exc_info=True)
        raise
    logger.info(f"Successfully connected to SQLite DB: {target}")
    return conn


def init_sqlite_db(conn: sqlite3.Connection) -> None:
    """
    Create the tenant registry schema. Safe to call repeatedly.

    AUTOINCREMENT guarantees ids are never reused, even after the row
    with the highest id disappears.
    """
    cursor = conn.cursor()
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS tenants (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL CHECK (length(trim(name)) > 0),
        domain TEXT,
        created_at TEXT NOT NULL
    )
    ''')
    logger.info("Ensured 'tenants' table exists.")
    conn.commit()


def close_sqlite_db_connection(conn: sqlite3.Connection) -> None:
    logger.info("Closing SQLite DB connection.")
    conn.close()
    logger.info("SQLite DB connection closed.")
