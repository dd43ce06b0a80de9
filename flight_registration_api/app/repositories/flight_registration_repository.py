"""
Record store for flight registrations.

``FlightRegistrationRepository`` wraps the ``flight_data`` table with
exactly the operations the service needs: ``save`` (insert or full
overwrite), ``find_all``, ``find_by_id`` and ``delete_by_id``.  All
statements are parameterized.  Each call opens its own connection and
closes it before returning.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Callable, List, Optional

from flight_registration_api.app.core.db import get_connection
from flight_registration_api.app.schemas.flight_registration import (
    FlightRegistrationCreate,
    FlightRegistrationRead,
)

logger = logging.getLogger(__name__)

_COLUMNS = (
    "flight_name",
    "starting_latitude",
    "starting_longitude",
    "ending_latitude",
    "ending_longitude",
    "launch_date_and_time",
    "landing_date_and_time",
    "max_altitude",
    "model_of_space_craft",
)


class FlightRegistrationRepository:
    """Persistence of flight registrations keyed by ``id``."""

    def __init__(self, connection_factory: Callable[[], sqlite3.Connection] = get_connection) -> None:
        self._connect = connection_factory

    def save(
        self,
        record: FlightRegistrationCreate,
        record_id: Optional[int] = None,
    ) -> FlightRegistrationRead:
        """Insert ``record`` or overwrite the row identified by ``record_id``.

        Without ``record_id`` a new row is inserted and the database
        assigns its identity.  With ``record_id`` every column of the
        matching row is replaced.  When no row matches, a new row is
        inserted under a freshly assigned identity instead; the caller's
        id is not reused.
        """
        values = self._to_params(record)
        conn = self._connect()
        try:
            cursor = conn.cursor()
            if record_id is not None:
                assignments = ", ".join(f"{col} = ?" for col in _COLUMNS)
                cursor.execute(
                    f"UPDATE flight_data SET {assignments} WHERE id = ?",
                    (*values, record_id),
                )
                if cursor.rowcount:
                    stored_id = record_id
                    logger.info("Updated flight registration %s", stored_id)
                else:
                    stored_id = self._insert(cursor, values)
                    logger.warning(
                        "Flight registration %s does not exist; inserted as %s",
                        record_id,
                        stored_id,
                    )
            else:
                stored_id = self._insert(cursor, values)
                logger.info("Created flight registration %s", stored_id)
            conn.commit()
            row = cursor.execute(
                "SELECT * FROM flight_data WHERE id = ?", (stored_id,)
            ).fetchone()
            return self._row_to_read(row)
        finally:
            conn.close()

    def find_all(self) -> List[FlightRegistrationRead]:
        """Return every stored registration in insertion order."""
        conn = self._connect()
        try:
            rows = conn.execute("SELECT * FROM flight_data ORDER BY id ASC").fetchall()
            return [self._row_to_read(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, record_id: int) -> Optional[FlightRegistrationRead]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT * FROM flight_data WHERE id = ?", (record_id,)
            ).fetchone()
            if not row:
                return None
            return self._row_to_read(row)
        finally:
            conn.close()

    def delete_by_id(self, record_id: int) -> bool:
        """Delete the row with ``record_id``.

        Deleting an id that does not exist is not an error.  Returns
        ``True`` if a row was removed.
        """
        conn = self._connect()
        try:
            cursor = conn.execute("DELETE FROM flight_data WHERE id = ?", (record_id,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted flight registration %s", record_id)
            else:
                logger.debug("No flight registration %s to delete", record_id)
            return affected > 0
        finally:
            conn.close()

    @staticmethod
    def _insert(cursor: sqlite3.Cursor, values: tuple) -> int:
        placeholders = ", ".join("?" for _ in _COLUMNS)
        cursor.execute(
            f"INSERT INTO flight_data ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
            values,
        )
        return cursor.lastrowid

    @staticmethod
    def _to_params(record: FlightRegistrationCreate) -> tuple:
        # Timestamps are stored as ISO text so they round-trip unchanged.
        return (
            record.flight_name,
            record.starting_latitude,
            record.starting_longitude,
            record.ending_latitude,
            record.ending_longitude,
            record.launch_date_and_time.isoformat(),
            record.landing_date_and_time.isoformat(),
            record.max_altitude,
            record.model_of_space_craft,
        )

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> FlightRegistrationRead:
        """Convert a database row to a FlightRegistrationRead instance."""
        return FlightRegistrationRead.model_validate(dict(row))
