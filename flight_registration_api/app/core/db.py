"""
SQLite access for the flight registration store.

``get_connection`` opens a connection to the configured database file
and ``init_db`` creates the ``flight_data`` table on application start.
Applied schema versions are recorded in the ``migrations`` table, so
``init_db`` is safe to run on every start.
"""

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from .config import settings

logger = logging.getLogger(__name__)

# Relative DATABASE_URL values are resolved against the package directory.
PACKAGE_ROOT = Path(__file__).resolve().parents[2]

SCHEMA_VERSIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS flight_data (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            flight_name TEXT NOT NULL,
            starting_latitude REAL NOT NULL,
            starting_longitude REAL NOT NULL,
            ending_latitude REAL NOT NULL,
            ending_longitude REAL NOT NULL,
            launch_date_and_time TIMESTAMP NOT NULL,
            landing_date_and_time TIMESTAMP NOT NULL,
            max_altitude REAL NOT NULL,
            model_of_space_craft TEXT NOT NULL
        );
        """,
    ),
]


def get_database_path() -> str:
    """Return the database file named by ``settings.database_url``."""
    path = Path(settings.database_url)
    if path.is_absolute():
        return str(path)
    return str((PACKAGE_ROOT / path).resolve())


def get_connection() -> sqlite3.Connection:
    """Open a connection whose rows can be read by column name.

    Timestamps are not converted; they come back as the ISO text the
    store wrote.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


def init_db() -> None:
    """Create the schema, applying any versions not yet recorded."""
    with closing(get_connection()) as conn:
        conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        applied = {row["version"] for row in conn.execute("SELECT version FROM migrations")}
        for version, sql in SCHEMA_VERSIONS:
            if version in applied:
                continue
            conn.executescript(sql)
            conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            conn.commit()
            logger.info("Applied schema version %s", version)
        conn.commit()
