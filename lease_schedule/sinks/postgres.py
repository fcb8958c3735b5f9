"""PostgreSQL sink for persisting payment records."""

import logging
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

import psycopg

from lease_schedule.exceptions import SinkError

logger = logging.getLogger(__name__)


class PostgresSink:
    """Write payment records to PostgreSQL.

    Rows that collide with an existing obligation (same tenant, property,
    payment type and due date) are skipped, so re-running a schedule only
    inserts the missing payments.
    """

    TABLE_COLUMNS: dict[str, list[str]] = {
        "payments": [
            "payment_id",
            "tenant_id",
            "property_id",
            "payment_type",
            "amount",
            "due_date",
            "payment_status",
            "notes",
            "created_by",
            "created_at",
        ],
    }

    CREATE_TABLES_SQL = """
    CREATE TABLE IF NOT EXISTS payments (
        payment_id      TEXT PRIMARY KEY,
        tenant_id       TEXT NOT NULL,
        property_id     TEXT NOT NULL,
        payment_type    TEXT NOT NULL,
        amount          NUMERIC(15, 2) NOT NULL,
        due_date        DATE NOT NULL,
        payment_status  TEXT NOT NULL DEFAULT 'pending',
        notes           TEXT,
        created_by      TEXT,
        created_at      TIMESTAMP,
        UNIQUE (tenant_id, property_id, payment_type, due_date)
    );
    CREATE INDEX IF NOT EXISTS idx_payments_tenant ON payments (tenant_id);
    CREATE INDEX IF NOT EXISTS idx_payments_property ON payments (property_id);
    """

    def __init__(self, connection_string: str) -> None:
        """Initialize PostgreSQL sink.

        Parameters
        ----------
        connection_string : str
            PostgreSQL connection URL.

        Raises
        ------
        SinkError
            If the database cannot be reached.
        """
        try:
            self.conn = psycopg.connect(connection_string)
        except psycopg.Error as exc:
            raise SinkError(f"Failed to connect to PostgreSQL: {exc}") from exc
        self._counts: dict[str, int] = {}

    def create_tables(self) -> None:
        """Create tables if they do not exist."""
        self._execute(self.CREATE_TABLES_SQL)
        logger.info("Payment tables ready")

    def truncate_tables(self) -> None:
        """Remove all rows from managed tables."""
        self._execute(f"TRUNCATE TABLE {', '.join(self.TABLE_COLUMNS)}")

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Insert a batch of records.

        Parameters
        ----------
        entity_type : str
            Target table name.
        records : list[Any]
            Dataclass instances or dicts keyed by column name.

        Raises
        ------
        SinkError
            If the database rejects the batch.
        """
        if not records:
            return

        columns = self.TABLE_COLUMNS.get(entity_type)
        if columns is None:
            logger.warning("Unknown entity type %s, skipping %d records", entity_type, len(records))
            return

        placeholders = ", ".join(["%s"] * len(columns))
        query = (
            f"INSERT INTO {entity_type} ({', '.join(columns)}) "
            f"VALUES ({placeholders}) ON CONFLICT DO NOTHING"
        )
        rows = [self._to_row(record, columns) for record in records]

        try:
            with self.conn.cursor() as cur:
                cur.executemany(query, rows)
                inserted = max(cur.rowcount, 0)
            self.conn.commit()
        except psycopg.Error as exc:
            self.conn.rollback()
            raise SinkError(f"Failed to write {len(rows)} {entity_type}: {exc}") from exc

        # Rows skipped by ON CONFLICT are not counted
        self._counts[entity_type] = self._counts.get(entity_type, 0) + inserted
        logger.debug("Wrote %d of %d %s", inserted, len(rows), entity_type)

    def close(self) -> None:
        """Close the connection."""
        for entity_type, count in self._counts.items():
            logger.info("PostgreSQL %s: %d records", entity_type, count)
        self.conn.close()

    def _execute(self, statement: str) -> None:
        try:
            with self.conn.cursor() as cur:
                cur.execute(statement)
            self.conn.commit()
        except psycopg.Error as exc:
            self.conn.rollback()
            raise SinkError(str(exc)) from exc

    @staticmethod
    def _to_row(record: Any, columns: list[str]) -> tuple:
        """Extract column values, unwrapping enums."""
        if is_dataclass(record) and not isinstance(record, type):
            data = {f.name: getattr(record, f.name) for f in fields(record)}
        else:
            data = record
        return tuple(
            value.value if isinstance(value, Enum) else value
            for value in (data.get(column) for column in columns)
        )
