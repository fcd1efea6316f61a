"""
Documentation Retriever - renders the four documentation queries as text.

Every method returns markdown text. Fetch failures are rendered into the
response rather than raised, so tool callers always get something readable.
"""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from .cache import DocCache
from .catalog import DEFAULT_CATALOG, Catalog, DocDescriptor, normalize_doc_path
from .errors import DocsError
from .fetcher import DocFetcher
from .patterns import resolve_example
from .search import SearchIndex

if TYPE_CHECKING:
	from ..config import Config

logger = logging.getLogger(__name__)

# How many catalog paths to suggest when get_doc fails
SUGGESTED_PATHS = 10


def _group_by_category(sections: Iterable[DocDescriptor]) -> dict[str, list[DocDescriptor]]:
	grouped: dict[str, list[DocDescriptor]] = {}
	for section in sections:
		grouped.setdefault(section.category.value, []).append(section)
	return grouped


class DocsRetriever:
	"""
	Query front-end over the catalog, search index and document cache.

	Usage:
		retriever = DocsRetriever(cache, docs_url="https://elysiajs.com")
		text = await retriever.get_doc("/essential/route")
	"""

	def __init__(
		self,
		cache: DocCache,
		catalog: Catalog = DEFAULT_CATALOG,
		docs_url: str = "https://elysiajs.com",
	):
		self.cache = cache
		self.catalog = catalog
		self.index = SearchIndex(catalog)
		self.docs_url = docs_url.rstrip("/")

	def source_url(self, path: str) -> str:
		return f"{self.docs_url}{path}"

	def search_docs(self, query: str) -> str:
		"""Keyword search, grouped by category."""
		results = self.index.search(query)

		if not results:
			return (
				f'No documentation found for "{query}". '
				"Try different keywords or use elysia_list_docs to see all available sections."
			)

		lines = [f'Found {len(results)} documentation pages for "{query}":', ""]
		for category, pages in _group_by_category(results).items():
			lines.append(f"### {category}")
			for page in pages:
				lines.append(f"- **{page.title}** (`{page.path}`)")
				lines.append(f"  {page.description}")
			lines.append("")
		return "\n".join(lines)

	async def get_doc(self, path: str) -> str:
		"""Full normalized page with a title/category header."""
		doc_path = normalize_doc_path(path)
		try:
			content = await self.cache.get_document(doc_path)
		except DocsError as e:
			logger.error(f"Get doc error: {e}")
			valid_paths = "\n".join(
				f"  - {s.path}" for s in self.catalog.list_all()[:SUGGESTED_PATHS]
			)
			return (
				f"Error fetching documentation: {e}\n\n"
				f"Valid paths include:\n{valid_paths}\n\n"
				"Use elysia_list_docs to see all available documentation."
			)

		section = self.catalog.find_by_path(doc_path)
		title = section.title if section else doc_path
		category = section.category.value if section else "Unknown"
		return (
			f"# {title}\n\n"
			f"**Category:** {category}  \n"
			f"**Source:** {self.source_url(doc_path)}\n\n"
			f"---\n\n"
			f"{content}"
		)

	def list_docs(self, category: Optional[str] = None) -> str:
		"""All pages, or one category's pages, grouped by category."""
		if category:
			sections = self.catalog.filter_by_category(category)
			if not sections:
				valid = ", ".join(self.catalog.categories())
				return f'Unknown category "{category}". Valid categories: {valid}'
		else:
			sections = self.catalog.list_all()

		lines = [f"Available Elysia.js documentation ({len(sections)} pages):", ""]
		for cat, pages in _group_by_category(sections).items():
			lines.append(f"### {cat} ({len(pages)} pages)")
			for page in pages:
				lines.append(f"- **{page.title}** (`{page.path}`) - {page.description}")
			lines.append("")

		lines.append("Use `elysia_get_doc` with a path to fetch full content.")
		lines.append('Example: `elysia_get_doc("/essential/route")`')
		return "\n".join(lines)

	async def get_example(self, pattern: str) -> str:
		"""All pages mapped to a pattern, concatenated; all or nothing."""
		try:
			bundle = await resolve_example(pattern, self.cache, self.catalog)
		except DocsError as e:
			logger.error(f"Get example error: {e}")
			return f"Error fetching examples: {e}"

		header = f"# Examples for: {pattern}\n\n"
		if bundle.is_fallback:
			header += (
				f"_No curated examples for \"{pattern}\"; showing the default page "
				f"({bundle.pages[0].path})._\n\n"
			)

		pages = [
			f"## {page.title}\n\nSource: {self.source_url(page.path)}\n\n{page.content}"
			for page in bundle.pages
		]
		return header + "\n\n---\n\n".join(pages)


def build_retriever(config: "Config") -> DocsRetriever:
	"""Wire fetcher, cache and retriever from configuration."""
	fetcher = DocFetcher(
		base_url=config.raw_docs_url,
		timeout=config.fetch_timeout,
		user_agent=config.user_agent,
	)
	cache = DocCache(fetcher, ttl=config.cache_ttl_seconds)
	return DocsRetriever(cache, docs_url=config.docs_url)


# Global retriever instance
_retriever: Optional[DocsRetriever] = None


def get_retriever() -> DocsRetriever:
	"""Get or create the global retriever built from the loaded config."""
	global _retriever
	if _retriever is None:
		from ..config import get_config
		_retriever = build_retriever(get_config())
	return _retriever
