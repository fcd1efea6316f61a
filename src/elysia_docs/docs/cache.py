"""
Document Cache - time-bounded memo over fetch + normalize.

Entries are never evicted; a stale entry is simply refetched and replaced.
A failed refresh propagates the error and leaves the stale entry in place
without serving it.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from .normalizer import normalize_markdown

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60

FetchFn = Callable[[str], Awaitable[str]]
NormalizeFn = Callable[[str], str]
Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry:
	"""Normalized content captured at a point in time."""
	content: str
	timestamp: float

	def is_fresh(self, now: float, ttl: float) -> bool:
		return now - self.timestamp < ttl


@dataclass
class CacheStats:
	"""Counters exposed by the health check."""
	entries: int
	fresh_entries: int
	hits: int
	misses: int
	errors: int


class DocCache:
	"""
	Path-keyed document cache.

	Usage:
		cache = DocCache(DocFetcher())
		content = await cache.get_document("/essential/route")

	Concurrent misses for the same path each fetch independently; the last
	write wins.
	"""

	def __init__(
		self,
		fetch: FetchFn,
		normalize: NormalizeFn = normalize_markdown,
		ttl: float = DEFAULT_TTL_SECONDS,
		clock: Clock = time.monotonic,
	):
		self._fetch = fetch
		self._normalize = normalize
		self.ttl = ttl
		self._clock = clock
		self._entries: dict[str, CacheEntry] = {}
		# Guards _entries and counters; never held across an await.
		self._lock = threading.Lock()
		self._hits = 0
		self._misses = 0
		self._errors = 0

	def peek(self, path: str) -> Optional[CacheEntry]:
		"""Return the stored entry for a path, fresh or not."""
		with self._lock:
			return self._entries.get(path)

	async def get_document(self, path: str) -> str:
		"""
		Return normalized content for a path, fetching on a miss or expiry.

		Raises:
			DocFetchError: propagated unchanged from the fetch function
		"""
		with self._lock:
			entry = self._entries.get(path)
			if entry is not None and entry.is_fresh(self._clock(), self.ttl):
				self._hits += 1
				return entry.content
			self._misses += 1

		logger.debug(f"Cache miss for {path}" if entry is None else f"Cache entry expired for {path}")

		try:
			raw = await self._fetch(path)
		except Exception:
			with self._lock:
				self._errors += 1
			raise

		content = self._normalize(raw)
		with self._lock:
			self._entries[path] = CacheEntry(content=content, timestamp=self._clock())
		return content

	def stats(self) -> CacheStats:
		with self._lock:
			now = self._clock()
			fresh = sum(1 for e in self._entries.values() if e.is_fresh(now, self.ttl))
			return CacheStats(
				entries=len(self._entries),
				fresh_entries=fresh,
				hits=self._hits,
				misses=self._misses,
				errors=self._errors,
			)
