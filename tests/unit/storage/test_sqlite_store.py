"""
Unit tests for SQLiteArticleStore.
"""

from datetime import datetime, timedelta, timezone

import aiosqlite
import pytest

from blogsum.exceptions import StorageError
from blogsum.protocols import ArticleRecord, ArticleStore
from blogsum.storage import SQLiteArticleStore
from blogsum.storage.sqlite_store import CURRENT_SCHEMA_VERSION


def make_record(**overrides) -> ArticleRecord:
    fields = dict(
        title="AI in Healthcare",
        url="https://blog.example.com/post",
        content="Full article body.",
        summary="AI is changing diagnosis.",
        summary_urdu="مصنوعی ذہانت تشخیص کو بدل رہی ہے۔",
        key_points=["Faster diagnosis", "Bias must be reviewed"],
        word_count=3,
        original_length=18,
        scraped_at=datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return ArticleRecord(**fields)


def test_satisfies_protocol(tmp_path):
    assert isinstance(SQLiteArticleStore(db_path=tmp_path / "a.db"), ArticleStore)


@pytest.mark.asyncio
async def test_store_and_get_round_trip(article_store):
    record_id = await article_store.store(make_record())
    loaded = await article_store.get(record_id)

    assert loaded is not None
    assert loaded.id == record_id
    assert loaded.title == "AI in Healthcare"
    assert loaded.summary_urdu == "مصنوعی ذہانت تشخیص کو بدل رہی ہے۔"
    assert loaded.key_points == ["Faster diagnosis", "Bias must be reviewed"]
    assert loaded.scraped_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert loaded.created_at is not None


@pytest.mark.asyncio
async def test_get_missing_returns_none(article_store):
    assert await article_store.get(999) is None


@pytest.mark.asyncio
async def test_recent_orders_newest_first(article_store):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for i in range(3):
        await article_store.store(make_record(title=f"Post {i}", created_at=base + timedelta(days=i)))

    titles = [record.title for record in await article_store.recent(limit=2)]
    assert titles == ["Post 2", "Post 1"]


@pytest.mark.asyncio
async def test_search_matches_title_and_summary(article_store):
    await article_store.store(make_record(title="Cooking tips", summary="How to bake bread."))
    await article_store.store(make_record(title="Gardening", summary="Bread wheat grows well in spring."))
    await article_store.store(make_record(title="Travel", summary="Visiting mountains."))

    titles = sorted(record.title for record in await article_store.search("bread"))
    assert titles == ["Cooking tips", "Gardening"]


@pytest.mark.asyncio
async def test_schema_version_is_set(tmp_path):
    db_path = tmp_path / "versioned.db"
    async with SQLiteArticleStore(db_path=db_path):
        pass

    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("PRAGMA user_version;")
        row = await cursor.fetchone()
    assert row[0] == CURRENT_SCHEMA_VERSION


@pytest.mark.asyncio
async def test_data_survives_reopen(tmp_path):
    db_path = tmp_path / "reopen.db"
    async with SQLiteArticleStore(db_path=db_path) as store:
        record_id = await store.store(make_record())

    async with SQLiteArticleStore(db_path=db_path) as store:
        assert (await store.get(record_id)).url == "https://blog.example.com/post"


@pytest.mark.asyncio
async def test_unopenable_path_raises_storage_error(tmp_path):
    store = SQLiteArticleStore(db_path=tmp_path)
    with pytest.raises(StorageError):
        await store.initialize()


@pytest.mark.asyncio
async def test_health(article_store, tmp_path):
    await article_store.store(make_record())
    assert await article_store.health() == {
        "healthy": True,
        "db_path": str(article_store.db_path),
        "articles": 1,
    }

    broken = await SQLiteArticleStore(db_path=tmp_path).health()
    assert broken["healthy"] is False
    assert "error" in broken
