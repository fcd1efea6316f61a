"""
Example Patterns - named bundles of related documentation pages.

Each pattern maps to an ordered list of catalog paths. Unknown pattern names
fall back to DEFAULT_EXAMPLE_PATH instead of failing; the fallback is
reported on the result so callers can say so.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from .cache import DocCache
from .catalog import DEFAULT_CATALOG, Catalog, DocDescriptor
from .errors import UnknownPathError

logger = logging.getLogger(__name__)

PATTERN_DOCS: dict[str, tuple[str, ...]] = {
	"route": ("/essential/route", "/essential/handler"),
	"handler": ("/essential/handler", "/essential/route"),
	"plugin": ("/essential/plugin", "/plugins/overview"),
	"middleware": ("/essential/life-cycle", "/patterns/extends-context"),
	"validation": ("/essential/validation", "/patterns/typebox"),
	"error-handling": ("/patterns/error-handling", "/essential/life-cycle"),
	"authentication": ("/plugins/jwt", "/plugins/bearer"),
	"websocket": ("/patterns/websocket", "/eden/treaty/websocket"),
	"cors": ("/plugins/cors",),
	"jwt": ("/plugins/jwt",),
	"testing": ("/patterns/unit-test", "/eden/treaty/unit-test"),
	"cookie": ("/patterns/cookie",),
}

DEFAULT_EXAMPLE_PATH = "/essential/route"

EXAMPLE_PATTERNS: tuple[str, ...] = tuple(sorted(PATTERN_DOCS))


@dataclass(frozen=True)
class PatternPaths:
	"""Paths a pattern resolves to, and whether the default was used."""
	paths: tuple[str, ...]
	is_fallback: bool


@dataclass
class ExamplePage:
	"""One fetched page of an example bundle."""
	path: str
	descriptor: Optional[DocDescriptor]
	content: str

	@property
	def title(self) -> str:
		return self.descriptor.title if self.descriptor else self.path


@dataclass
class ExampleBundle:
	"""All pages for a pattern, in mapping order."""
	pattern: str
	is_fallback: bool
	pages: list[ExamplePage] = field(default_factory=list)


def validate_patterns(catalog: Catalog = DEFAULT_CATALOG) -> None:
	"""
	Check every mapped path exists in the catalog.

	Raises:
		UnknownPathError: a pattern (or the fallback) names an uncatalogued path
	"""
	for pattern, paths in PATTERN_DOCS.items():
		for path in paths:
			try:
				catalog.require(path)
			except UnknownPathError:
				logger.error(f"Pattern '{pattern}' references unknown path {path}")
				raise
	catalog.require(DEFAULT_EXAMPLE_PATH)


def paths_for_pattern(pattern: str) -> PatternPaths:
	"""Look up a pattern, falling back to the default page when unknown."""
	paths = PATTERN_DOCS.get(pattern)
	if paths is None:
		logger.info(f"Unknown example pattern '{pattern}', using {DEFAULT_EXAMPLE_PATH}")
		return PatternPaths(paths=(DEFAULT_EXAMPLE_PATH,), is_fallback=True)
	return PatternPaths(paths=paths, is_fallback=False)


async def resolve_example(
	pattern: str,
	cache: DocCache,
	catalog: Catalog = DEFAULT_CATALOG,
) -> ExampleBundle:
	"""
	Fetch every page mapped to a pattern.

	Pages are fetched concurrently through the cache. If any fetch fails the
	error propagates and no bundle is returned.
	"""
	resolved = paths_for_pattern(pattern)
	contents = await asyncio.gather(*(cache.get_document(path) for path in resolved.paths))

	return ExampleBundle(
		pattern=pattern,
		is_fallback=resolved.is_fallback,
		pages=[
			ExamplePage(path=path, descriptor=catalog.find_by_path(path), content=content)
			for path, content in zip(resolved.paths, contents)
		],
	)


validate_patterns()
