"""SQLite counter store adapter.

Implements the core CounterStorePort using a simple SQLite database.
"""

from __future__ import annotations

import sqlite3
from typing import List

from core.errors import CounterStoreError
from core.models import Absent, CounterLookup, CounterRecord, Found


class SQLiteCounterStore:
    """Thin SQLite wrapper that satisfies the CounterStorePort contract."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Create the counters table if it does not exist.

        counters keeps one row per nickname; rows are never deleted.
        Fields:
        - nickname: counter key as written in the chat (PRIMARY KEY)
        - count: current tally, may go negative
        """

        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS counters (
                        nickname TEXT PRIMARY KEY,
                        count INTEGER NOT NULL
                    )
                    """
                )
        except sqlite3.Error as exc:
            raise CounterStoreError(f"creating counters table failed: {exc}") from exc

    def get(self, nickname: str) -> CounterLookup:
        """Return the record for a nickname, or Absent if it was never counted."""

        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT nickname, count FROM counters WHERE nickname = ?",
                    (nickname,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise CounterStoreError(f"read of {nickname!r} failed: {exc}") from exc
        if row is None:
            return Absent(nickname=nickname)
        return Found(CounterRecord(nickname=row["nickname"], count=int(row["count"])))

    def put(self, record: CounterRecord) -> None:
        """Upsert the record for its nickname."""

        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO counters (nickname, count)
                    VALUES (?, ?)
                    ON CONFLICT(nickname) DO UPDATE SET count = excluded.count
                    """,
                    (record.nickname, record.count),
                )
        except sqlite3.Error as exc:
            raise CounterStoreError(f"write of {record.nickname!r} failed: {exc}") from exc

    def list_records(self) -> List[CounterRecord]:
        """Return all counters, highest tally first."""

        try:
            with self._connect() as conn:
                rows = conn.execute(
                    "SELECT nickname, count FROM counters ORDER BY count DESC, nickname"
                ).fetchall()
        except sqlite3.Error as exc:
            raise CounterStoreError(f"listing counters failed: {exc}") from exc
        return [CounterRecord(nickname=row["nickname"], count=int(row["count"])) for row in rows]
