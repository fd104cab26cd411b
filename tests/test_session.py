"""Tests for FeedSession."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from feedview.data import Article, LoadResult, RevealedArticle
from feedview.errors import LoadFailure
from feedview.loader import FileArticleLoader
from feedview.reveal import ManualProximityTrigger
from feedview.session import FeedSession, SessionState


class StaticLoader:
    """Loader returning a fixed result, or raising LoadFailure."""

    def __init__(self, result: LoadResult | None = None, *, error: str | None = None) -> None:
        self._result = result or LoadResult()
        self._error = error
        self.calls = 0

    async def load(self) -> LoadResult:
        self.calls += 1
        if self._error is not None:
            raise LoadFailure(self._error)
        return self._result


class SlowLoader(StaticLoader):
    """Loader that yields to the event loop before returning."""

    async def load(self) -> LoadResult:
        await asyncio.sleep(0.01)
        return await super().load()


def _article(title: str) -> Article:
    return Article(title=title, url=f"https://example.com/{title}", source="Example")


def _feed(titles: list[str], last_updated: str | None = "2026-02-01T12:00:00Z") -> LoadResult:
    return LoadResult(articles=tuple(_article(t) for t in titles), last_updated=last_updated)


class TestStart:
    """Tests for FeedSession.start."""

    async def test_shows_all_articles_initially(self) -> None:
        session = FeedSession(StaticLoader(_feed([f"a{i}" for i in range(45)])), batch_size=20)
        batches: list[list[RevealedArticle]] = []
        session.controller.replaced.connect(batches.append)

        assert await session.start()

        assert session.state is SessionState.READY
        assert session.filtered_count == 45
        assert [len(b) for b in batches] == [20]
        assert session.last_updated == "2026-02-01T12:00:00Z"

    async def test_emits_count_and_last_updated(self) -> None:
        session = FeedSession(StaticLoader(_feed(["x", "y"])))
        counts: list[int] = []
        stamps: list[str | None] = []
        session.count_changed.connect(counts.append)
        session.last_updated_changed.connect(stamps.append)

        await session.start()

        assert counts == [2]
        assert stamps == ["2026-02-01T12:00:00Z"]

    async def test_applies_query_set_before_loading(self) -> None:
        session = FeedSession(StaticLoader(_feed(["Tokyo summit", "Osaka expo"])))
        session.set_query("osaka")

        await session.start()

        assert session.controller.view == (_article("Osaka expo"),)

    async def test_load_failure_is_terminal(self) -> None:
        loader = StaticLoader(error="HTTP 500")
        session = FeedSession(loader)
        failures: list[str] = []
        replaced: list[list[RevealedArticle]] = []
        session.load_failed.connect(failures.append)
        session.controller.replaced.connect(replaced.append)

        assert not await session.start()
        session.set_query("anything")
        session.controller.on_proximity_signal()

        assert session.state is SessionState.FAILED
        assert failures == ["HTTP 500"]
        assert replaced == []
        assert session.filtered_count == 0
        assert loader.calls == 1

    async def test_start_twice_raises(self) -> None:
        session = FeedSession(StaticLoader(_feed(["x"])))
        await session.start()
        with pytest.raises(RuntimeError, match="already started"):
            await session.start()

    async def test_concurrent_start_loads_once(self) -> None:
        loader = SlowLoader(_feed(["x", "y"]))
        session = FeedSession(loader)

        results = await asyncio.gather(session.start(), session.start(), return_exceptions=True)

        assert results[0] is True
        assert isinstance(results[1], RuntimeError)
        assert loader.calls == 1
        assert session.state is SessionState.READY

    async def test_undecodable_feed_fails_session(self, tmp_path: Path) -> None:
        path = tmp_path / "articles.json"
        path.write_bytes(b'{"articles":[{"title":"\xff\xfe"}]}')
        session = FeedSession(FileArticleLoader(path))
        failures: list[str] = []
        session.load_failed.connect(failures.append)

        assert not await session.start()

        assert session.state is SessionState.FAILED
        assert len(failures) == 1
        assert "Invalid JSON" in failures[0]

    async def test_empty_feed_only_emits_empty_marker(self) -> None:
        session = FeedSession(StaticLoader(_feed([])))
        events: list[str] = []
        session.controller.replaced.connect(lambda batch: events.append(f"replaced:{len(batch)}"))
        session.controller.appended.connect(lambda batch: events.append("appended"))

        await session.start()
        session.set_query("tokyo")
        session.controller.on_proximity_signal()

        assert events == ["replaced:0", "replaced:0"]
        assert session.filtered_count == 0


class TestSetQuery:
    """Tests for the query mutation flow."""

    async def test_filters_by_title(self) -> None:
        session = FeedSession(
            StaticLoader(_feed(["Tokyo summit", "Fishing rights talk", "tokyo accord"]))
        )
        await session.start()

        session.set_query("Tokyo")

        assert session.controller.view == (_article("Tokyo summit"), _article("tokyo accord"))
        assert session.filtered_count == 2
        assert session.query == "Tokyo"

    async def test_query_change_resets_cursor(self) -> None:
        titles = [f"item {i}" for i in range(60)]
        trigger = ManualProximityTrigger()
        session = FeedSession(StaticLoader(_feed(titles)), batch_size=20, trigger=trigger)
        await session.start()
        trigger.fire()
        assert session.controller.cursor == 40

        session.set_query("item 1")

        # "item 1" and "item 10".."item 19"
        assert session.filtered_count == 11
        assert session.controller.cursor == 11
        assert not trigger.armed

    async def test_change_to_no_matches(self) -> None:
        titles = [f"a{i}" for i in range(12)] + ["b"]
        session = FeedSession(StaticLoader(_feed(titles)), batch_size=20)
        await session.start()
        session.set_query("a")
        assert session.filtered_count == 12
        events: list[tuple[str, int]] = []
        session.controller.replaced.connect(lambda batch: events.append(("replaced", len(batch))))
        session.controller.appended.connect(lambda batch: events.append(("appended", len(batch))))
        counts: list[int] = []
        session.count_changed.connect(counts.append)

        session.set_query("zzz")

        assert session.controller.cursor == 0
        assert events == [("replaced", 0)]
        assert counts == [0]

    async def test_clear_query_shows_everything(self) -> None:
        session = FeedSession(StaticLoader(_feed(["Tokyo summit", "Osaka expo"])))
        await session.start()
        session.set_query("osaka")

        session.clear_query()

        assert session.query == ""
        assert session.filtered_count == 2

    async def test_every_keystroke_is_consistent(self) -> None:
        session = FeedSession(StaticLoader(_feed(["Tokyo summit", "Tokyo accord", "Kyoto"])))
        await session.start()

        for partial in ["t", "to", "tok", "toky", "tokyo", "tokyo a"]:
            session.set_query(partial)
            assert session.controller.cursor == session.filtered_count
            assert session.controller.revealed == session.controller.view

        assert session.controller.view == (_article("Tokyo accord"),)
