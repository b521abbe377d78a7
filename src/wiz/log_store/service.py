"""Read-only access to the SQLite logs written by llm."""

from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path

from loguru import logger

from wiz.core.types import HistoryRecord, StoreStatus
from wiz.errors import LogStoreNotFoundError, LogStoreReadError

COST_KEY = '"cost":'
COST_TERMINATORS = (",", "}")
COUNTED_TABLES = ("conversations", "responses")


def extract_cost(token_details: str | None) -> float:
    """Pull the USD cost out of a ``token_details`` JSON blob, 0.0 when absent."""

    if not token_details:
        return 0.0
    start = token_details.find(COST_KEY)
    if start < 0:
        return 0.0
    rest = token_details[start + len(COST_KEY) :]
    end = min((pos for pos in (rest.find(ch) for ch in COST_TERMINATORS) if pos >= 0), default=len(rest))
    try:
        return float(rest[:end].strip())
    except ValueError:
        return 0.0


class LogStore:
    """One llm log database, opened read-only per query."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _connect(self) -> sqlite3.Connection:
        if not self.path.exists():
            raise LogStoreNotFoundError(self.path)
        try:
            conn = sqlite3.connect(f"{self.path.resolve().as_uri()}?mode=ro", uri=True)
        except sqlite3.Error as exc:
            raise LogStoreReadError(self.path, str(exc)) from exc
        conn.row_factory = sqlite3.Row
        return conn

    def recent(self, limit: int = 5) -> list[HistoryRecord]:
        """Return the newest ``limit`` responses, newest first."""
        with closing(self._connect()) as conn:
            try:
                rows = conn.execute(
                    """SELECT prompt, response, token_details, model, datetime_utc
                    FROM responses ORDER BY datetime_utc DESC LIMIT ?""",
                    (limit,),
                ).fetchall()
            except sqlite3.Error as exc:
                raise LogStoreReadError(self.path, str(exc)) from exc

        return [
            HistoryRecord(
                prompt=row["prompt"] or "",
                response=row["response"] or "",
                token_details=row["token_details"] or "",
                model=row["model"] or "",
                datetime_utc=row["datetime_utc"] or "",
                cost=extract_cost(row["token_details"]),
            )
            for row in rows
        ]

    def count(self, conn: sqlite3.Connection, table: str) -> int:
        if table not in COUNTED_TABLES:
            raise ValueError(f"unknown table: {table}")
        try:
            row = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()  # noqa: S608
        except sqlite3.Error as exc:
            logger.debug("log_store.count_failed table={} error={}", table, exc)
            return 0
        return int(row[0]) if row else 0

    def status(self) -> StoreStatus:
        with closing(self._connect()) as conn:
            conversations = self.count(conn, "conversations")
            responses = self.count(conn, "responses")
        return StoreStatus(
            path=self.path,
            conversations=conversations,
            responses=responses,
            size_bytes=self.path.stat().st_size,
        )
