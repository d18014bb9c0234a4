"""Tests for the in-memory link store."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

from tinylink.database import MemoryLinkStore
from tinylink.errors import DuplicateKeyError


@pytest.mark.asyncio
class TestMemoryLinkStore:
    """Store contract against the volatile backend."""

    async def test_link_lifecycle(self, memory_store, clock):
        created = await memory_store.create("abc123", "https://example.com")
        assert created.clicks == 0
        assert created.last_clicked is None

        found = await memory_store.find("abc123")
        assert found.original_url == "https://example.com"
        assert found.clicks == 0
        assert found.last_clicked is None

        clicked = await memory_store.increment_clicks("abc123")
        assert clicked.clicks == 1
        assert clicked.last_clicked == clock.readings[-1]

        assert await memory_store.find("nonexistent") is None

        assert await memory_store.delete("abc123") is True
        assert await memory_store.find("abc123") is None

    async def test_created_at_comes_from_clock(self, memory_store, clock):
        link = await memory_store.create("abc", "https://example.com")

        assert link.created_at == clock.readings[0]

    async def test_explicit_created_at(self, memory_store):
        when = datetime(2020, 5, 17, tzinfo=timezone.utc)

        link = await memory_store.create("old", "https://example.com", created_at=when)

        assert link.created_at == when

    async def test_duplicate_create_rejected(self, memory_store):
        await memory_store.create("dup", "https://example.com/first")

        with pytest.raises(DuplicateKeyError):
            await memory_store.create("dup", "https://example.com/second")

        link = await memory_store.find("dup")
        assert link.original_url == "https://example.com/first"
        assert len(memory_store) == 1

    async def test_delete_twice(self, memory_store):
        await memory_store.create("gone", "https://example.com")

        assert await memory_store.delete("gone") is True
        assert await memory_store.delete("gone") is False
        assert not await memory_store.exists("gone")

    async def test_exists(self, memory_store):
        assert not await memory_store.exists("abc")
        await memory_store.create("abc", "https://example.com")
        assert await memory_store.exists("abc")

    async def test_increment_missing_code(self, memory_store):
        assert await memory_store.increment_clicks("missing") is None
        assert await memory_store.find("missing") is None

    async def test_last_clicked_moves_forward(self, memory_store):
        await memory_store.create("abc", "https://example.com")

        first = await memory_store.increment_clicks("abc")
        second = await memory_store.increment_clicks("abc")

        assert second.clicks == 2
        assert second.last_clicked > first.last_clicked

    async def test_list_newest_first(self, memory_store):
        t1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
        await memory_store.create("second", "https://example.com/2", created_at=t1 + timedelta(hours=1))
        await memory_store.create("first", "https://example.com/1", created_at=t1)
        await memory_store.create("third", "https://example.com/3", created_at=t1 + timedelta(hours=2))

        links = await memory_store.list_all()

        assert [link.short_code for link in links] == ["third", "second", "first"]

    async def test_list_ties_newest_insert_first(self, memory_store):
        when = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for code in ("a", "b", "c"):
            await memory_store.create(code, "https://example.com", created_at=when)

        links = await memory_store.list_all()

        assert [link.short_code for link in links] == ["c", "b", "a"]

    async def test_list_is_a_snapshot(self, memory_store):
        await memory_store.create("one", "https://example.com/1")
        snapshot = await memory_store.list_all()

        await memory_store.create("two", "https://example.com/2")
        await memory_store.increment_clicks("one")

        assert [link.short_code for link in snapshot] == ["one"]
        assert snapshot[0].clicks == 0
        assert len(await memory_store.list_all()) == 2

    async def test_returned_records_are_copies(self, memory_store):
        link = await memory_store.create("abc", "https://example.com")
        link.clicks = 99
        link.original_url = "https://evil.example"

        stored = await memory_store.find("abc")
        assert stored.clicks == 0
        assert stored.original_url == "https://example.com"

    async def test_concurrent_increments(self, memory_store):
        await memory_store.create("hot", "https://example.com")

        results = await asyncio.gather(
            *[memory_store.increment_clicks("hot") for _ in range(100)]
        )

        assert (await memory_store.find("hot")).clicks == 100
        assert sorted(link.clicks for link in results) == list(range(1, 101))

    async def test_concurrent_creates_same_code(self, memory_store):
        results = await asyncio.gather(
            *[memory_store.create("race", f"https://example.com/{i}") for i in range(10)],
            return_exceptions=True,
        )

        created = [r for r in results if not isinstance(r, Exception)]
        rejected = [r for r in results if isinstance(r, DuplicateKeyError)]
        assert len(created) == 1
        assert len(rejected) == 9

    async def test_health_check(self, memory_store):
        assert await memory_store.health_check() is True


class TestMemoryLinkStoreThreads:
    """The mutex also holds when several event loops share the store."""

    def test_increments_from_threads(self):
        store = MemoryLinkStore()
        asyncio.run(store.create("shared", "https://example.com"))

        def click(_):
            return asyncio.run(store.increment_clicks("shared"))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(click, range(200)))

        assert asyncio.run(store.find("shared")).clicks == 200

    def test_creates_from_threads(self):
        store = MemoryLinkStore()

        def create(i):
            try:
                asyncio.run(store.create("same", f"https://example.com/{i}"))
                return True
            except DuplicateKeyError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(create, range(50)))

        assert outcomes.count(True) == 1
        assert len(store) == 1
