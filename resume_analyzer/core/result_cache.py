"""
Best-effort per-file result cache.

Keyed by the parser kind plus the SHA-256 of the uploaded bytes, so the same
bytes uploaded as text and as PDF never share an entry. Entries expire after
a TTL; expired entries are purged whenever a new one is stored, and the
oldest entries give way once the cache is full. Parsing is deterministic, so
a hit is always equal to a fresh parse; the cache only saves work.
"""

import hashlib
import time
from typing import Callable, Dict, Optional, Tuple

from resume_analyzer.core.config import settings
from resume_analyzer.core.schemas import ParsedDocument


def content_key(file_bytes: bytes, kind: str) -> str:
    """Cache key for bytes parsed as `kind` ("pdf" or "txt")."""
    return f"{kind}:{hashlib.sha256(file_bytes).hexdigest()}"


class ResultCache:
    def __init__(
        self,
        ttl_seconds: float = settings.RESULT_CACHE_TTL_SECONDS,
        max_entries: int = settings.RESULT_CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        # Insertion ordered, so the first key is the oldest entry
        self._entries: Dict[str, Tuple[float, ParsedDocument]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[ParsedDocument]:
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return None
        expires_at, document = entry
        if self._clock() > expires_at:
            del self._entries[key]
            self.misses += 1
            return None
        self.hits += 1
        return document

    def set(self, key: str, document: ParsedDocument, ttl_seconds: Optional[float] = None) -> None:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self.purge_expired()
        self._entries.pop(key, None)
        while self._entries and len(self._entries) >= self.max_entries:
            del self._entries[next(iter(self._entries))]
        self._entries[key] = (self._clock() + ttl, document)

    def purge_expired(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now > expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self, key: Optional[str] = None) -> None:
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)

    def stats(self) -> Dict[str, float]:
        now = self._clock()
        valid = sum(1 for expires_at, _ in self._entries.values() if now <= expires_at)
        lookups = self.hits + self.misses
        return {
            "total_entries": len(self._entries),
            "valid_entries": valid,
            "expired_entries": len(self._entries) - valid,
            "hit_rate": self.hits / lookups if lookups else 0.0,
        }


result_cache = ResultCache()
