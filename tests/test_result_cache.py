"""Tests for the per-file result cache."""

import pytest

from resume_analyzer.core.document_assembler import parse_text
from resume_analyzer.core.result_cache import ResultCache, content_key


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def document():
    return parse_text("SKILLS\nPython, SQL", person_extractor=None, organization_extractor=None)


def test_content_key_is_sha256_hex_per_kind():
    key = content_key(b"resume bytes", "pdf")

    assert key.startswith("pdf:")
    assert len(key.split(":", 1)[1]) == 64
    assert key == content_key(b"resume bytes", "pdf")
    assert key != content_key(b"other bytes", "pdf")
    assert key != content_key(b"resume bytes", "txt")


def test_hit_within_ttl(document):
    clock = FakeClock()
    cache = ResultCache(ttl_seconds=300, clock=clock)
    cache.set("k", document)

    clock.now = 299
    assert cache.get("k") is document
    assert cache.stats()["hit_rate"] == 1.0


def test_expired_entry_is_evicted(document):
    clock = FakeClock()
    cache = ResultCache(ttl_seconds=300, clock=clock)
    cache.set("k", document)

    clock.now = 301
    assert cache.stats()["expired_entries"] == 1
    assert cache.get("k") is None
    assert cache.stats()["total_entries"] == 0


def test_per_entry_ttl_override(document):
    clock = FakeClock()
    cache = ResultCache(ttl_seconds=300, clock=clock)
    cache.set("short", document, ttl_seconds=10)
    cache.set("long", document)

    clock.now = 11
    assert cache.get("short") is None
    assert cache.get("long") is document


def test_clear(document):
    cache = ResultCache(clock=FakeClock())
    cache.set("a", document)
    cache.set("b", document)

    cache.clear("a")
    assert cache.get("a") is None
    assert cache.get("b") is document

    cache.clear()
    assert cache.stats()["total_entries"] == 0


def test_stats_counts_hits_and_misses(document):
    cache = ResultCache(clock=FakeClock())
    cache.get("missing")
    cache.set("k", document)
    cache.get("k")

    stats = cache.stats()
    assert stats["valid_entries"] == 1
    assert stats["hit_rate"] == 0.5


def test_storing_purges_expired_entries(document):
    clock = FakeClock()
    cache = ResultCache(ttl_seconds=1, max_entries=5000, clock=clock)
    for i in range(1000):
        cache.set(f"k{i}", document)

    clock.now = 10
    cache.set("fresh", document)

    assert cache.stats() == {"total_entries": 1, "valid_entries": 1, "expired_entries": 0, "hit_rate": 0.0}


def test_oldest_entry_gives_way_when_full(document):
    cache = ResultCache(max_entries=2, clock=FakeClock())
    cache.set("a", document)
    cache.set("b", document)
    cache.set("c", document)

    assert cache.get("a") is None
    assert cache.get("b") is document
    assert cache.get("c") is document
    assert cache.stats()["total_entries"] == 2


def test_overwriting_a_key_does_not_evict_others(document):
    cache = ResultCache(max_entries=2, clock=FakeClock())
    cache.set("a", document)
    cache.set("b", document)
    cache.set("b", document)

    assert cache.get("a") is document
