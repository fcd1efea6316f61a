"""Keyword search over the documentation catalog."""

from typing import Optional

from .catalog import DEFAULT_CATALOG, Catalog, DocDescriptor

MAX_RESULTS = 10


class SearchIndex:
	"""
	Substring keyword matcher.

	A page matches when any whitespace-separated keyword appears in its
	title, description, category or path (case-insensitive). Results keep
	catalog order; they are not ranked.
	"""

	def __init__(self, catalog: Catalog = DEFAULT_CATALOG):
		self.catalog = catalog
		self._entries: list[tuple[DocDescriptor, str]] = [
			(
				section,
				f"{section.title} {section.description} {section.category.value} {section.path}".lower(),
			)
			for section in catalog.list_all()
		]

	def search(self, query: str, limit: int = MAX_RESULTS) -> list[DocDescriptor]:
		keywords = query.lower().split()
		if not keywords:
			return [section for section, _ in self._entries[:limit]]

		results: list[DocDescriptor] = []
		for section, haystack in self._entries:
			if any(keyword in haystack for keyword in keywords):
				results.append(section)
				if len(results) >= limit:
					break
		return results


_default_index: Optional[SearchIndex] = None


def search_catalog(query: str, limit: int = MAX_RESULTS) -> list[DocDescriptor]:
	"""Search the default catalog."""
	global _default_index
	if _default_index is None:
		_default_index = SearchIndex(DEFAULT_CATALOG)
	return _default_index.search(query, limit=limit)
