"""Unit tests for ConcurrentCache and concurrent mapping."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from field_mapper.core.cache import ConcurrentCache
from field_mapper.mapping.engine import ObjectMapper


@dataclass
class Item:
    item_id: int = 0
    label: str = ""


class TestConcurrentCache:
    def test_get_missing(self) -> None:
        cache: ConcurrentCache[str, int] = ConcurrentCache()
        assert cache.get("a") is None
        assert "a" not in cache

    def test_put_returns_value(self) -> None:
        cache: ConcurrentCache[str, int] = ConcurrentCache()
        assert cache.put("a", 1) == 1
        assert cache.get("a") == 1
        assert len(cache) == 1

    def test_get_or_compute_runs_factory_once(self) -> None:
        cache: ConcurrentCache[str, int] = ConcurrentCache()
        calls: list[int] = []

        def factory() -> int:
            calls.append(1)
            return 42

        assert cache.get_or_compute("a", factory) == 42
        assert cache.get_or_compute("a", factory) == 42
        assert len(calls) == 1

    def test_last_write_wins(self) -> None:
        cache: ConcurrentCache[str, int] = ConcurrentCache()
        cache.put("a", 1)
        cache.put("a", 2)
        assert cache.get("a") == 2

    def test_clear(self) -> None:
        cache: ConcurrentCache[str, int] = ConcurrentCache()
        cache.put("a", 1)
        cache.clear()
        assert len(cache) == 0


class TestConcurrentMapping:
    def test_parallel_callers_share_caches(self, mapper: ObjectMapper) -> None:
        sources = [{"itemId": str(i), "label": f"item-{i}"} for i in range(200)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda s: mapper.mapping(s, Item), sources))

        assert [r.item_id for r in results] == list(range(200))
        assert results[7].label == "item-7"
        plan = mapper.plan_for(sources[0], Item)
        assert plan.as_dict() == {"itemId": "item_id", "label": "label"}
