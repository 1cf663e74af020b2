"""
SQLite persistence for processed articles.
"""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiosqlite
import structlog

from ..config.config import StorageConfig
from ..exceptions import StorageError
from ..protocols import ArticleRecord

logger = structlog.get_logger(__name__)

# Increment whenever SCHEMA changes.
CURRENT_SCHEMA_VERSION = 1

SCHEMA = """
CREATE TABLE IF NOT EXISTS articles (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    url TEXT NOT NULL,
    content TEXT NOT NULL,
    summary TEXT NOT NULL,
    summary_urdu TEXT NOT NULL,
    key_points TEXT NOT NULL DEFAULT '[]',
    word_count INTEGER NOT NULL DEFAULT 0,
    original_length INTEGER NOT NULL DEFAULT 0,
    scraped_at TEXT,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_articles_url ON articles(url);
CREATE INDEX IF NOT EXISTS idx_articles_created_at ON articles(created_at);
"""

COLUMNS = (
    "title",
    "url",
    "content",
    "summary",
    "summary_urdu",
    "key_points",
    "word_count",
    "original_length",
    "scraped_at",
    "created_at",
)


def _to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _from_iso(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _row_to_record(row: aiosqlite.Row) -> ArticleRecord:
    return ArticleRecord(
        id=row["id"],
        title=row["title"],
        url=row["url"],
        content=row["content"],
        summary=row["summary"],
        summary_urdu=row["summary_urdu"],
        key_points=json.loads(row["key_points"] or "[]"),
        word_count=row["word_count"],
        original_length=row["original_length"],
        scraped_at=_from_iso(row["scraped_at"]),
        created_at=_from_iso(row["created_at"]),
    )


class SQLiteArticleStore:
    """ArticleStore backed by a single aiosqlite connection."""

    def __init__(self, config: Optional[StorageConfig] = None, db_path: Optional[Path] = None):
        self.config = config or StorageConfig()
        self.db_path = Path(db_path) if db_path is not None else Path(self.config.db_path)
        self._conn: Optional[aiosqlite.Connection] = None

    async def initialize(self) -> None:
        """Open the database and apply the schema if it is out of date."""
        if self._conn is not None:
            return
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = await aiosqlite.connect(self.db_path)
            conn.row_factory = aiosqlite.Row
            await conn.execute("PRAGMA busy_timeout = 5000;")
            await self._run_migrations(conn)
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Failed to open article store at {self.db_path}: {e}") from e
        self._conn = conn
        logger.info("Article store initialized", db_path=str(self.db_path))

    async def _run_migrations(self, conn: aiosqlite.Connection) -> None:
        cursor = await conn.execute("PRAGMA user_version;")
        row = await cursor.fetchone()
        current_version = row[0] if row is not None else 0

        if current_version < CURRENT_SCHEMA_VERSION:
            logger.info("Migrating article store schema", from_version=current_version, to_version=CURRENT_SCHEMA_VERSION)
            await conn.executescript(SCHEMA)
            await conn.execute(f"PRAGMA user_version = {CURRENT_SCHEMA_VERSION};")
            await conn.commit()

    async def _connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            await self.initialize()
        assert self._conn is not None
        return self._conn

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None

    async def __aenter__(self) -> "SQLiteArticleStore":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def store(self, record: ArticleRecord) -> int:
        """Insert ``record`` and return its new id."""
        created_at = record.created_at or datetime.now(timezone.utc)
        values = (
            record.title,
            record.url,
            record.content,
            record.summary,
            record.summary_urdu,
            json.dumps(record.key_points, ensure_ascii=False),
            record.word_count,
            record.original_length,
            _to_iso(record.scraped_at),
            _to_iso(created_at),
        )
        placeholders = ", ".join("?" for _ in COLUMNS)
        sql = f"INSERT INTO articles ({', '.join(COLUMNS)}) VALUES ({placeholders})"

        conn = await self._connection()
        try:
            cursor = await conn.execute(sql, values)
            await conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to store article {record.url}: {e}") from e

        record_id = cursor.lastrowid
        if record_id is None:
            raise StorageError(f"Failed to store article {record.url}: no row id returned")
        logger.debug("Stored article", id=record_id, url=record.url)
        return record_id

    async def _fetch(self, sql: str, params: tuple[Any, ...]) -> List[ArticleRecord]:
        conn = await self._connection()
        try:
            cursor = await conn.execute(sql, params)
            rows = await cursor.fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Article query failed: {e}") from e
        return [_row_to_record(row) for row in rows]

    async def get(self, record_id: int) -> Optional[ArticleRecord]:
        records = await self._fetch("SELECT * FROM articles WHERE id = ?", (record_id,))
        return records[0] if records else None

    async def recent(self, limit: int = 10) -> List[ArticleRecord]:
        """Most recently stored articles first."""
        return await self._fetch("SELECT * FROM articles ORDER BY created_at DESC, id DESC LIMIT ?", (limit,))

    async def search(self, term: str, limit: int = 20) -> List[ArticleRecord]:
        """Case-insensitive substring search over titles and summaries."""
        pattern = f"%{term}%"
        return await self._fetch(
            "SELECT * FROM articles WHERE title LIKE ? OR summary LIKE ? ORDER BY id DESC LIMIT ?",
            (pattern, pattern, limit),
        )

    async def health(self) -> Dict[str, Any]:
        """Report whether the database answers queries and how many articles it holds."""
        try:
            conn = await self._connection()
            cursor = await conn.execute("SELECT COUNT(*) FROM articles")
            row = await cursor.fetchone()
        except (StorageError, sqlite3.Error) as e:
            logger.warning("Article store health check failed", error=str(e))
            return {"healthy": False, "db_path": str(self.db_path), "error": str(e)}
        return {"healthy": True, "db_path": str(self.db_path), "articles": row[0] if row else 0}
