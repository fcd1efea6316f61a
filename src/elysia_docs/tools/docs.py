"""Elysia.js documentation tools - search, fetch, list, examples."""

from typing import Literal, Optional

from mcp.server.fastmcp import FastMCP

from ..config import Config
from ..docs.retriever import DocsRetriever, get_retriever

CategoryName = Literal[
	"Getting Started", "Essential", "Patterns", "Eden",
	"Plugins", "Migration", "Integrations", "Internal",
]

PatternName = Literal[
	"route", "handler", "plugin", "middleware", "validation", "error-handling",
	"authentication", "websocket", "cors", "jwt", "testing", "cookie",
]

DOCS_TOOL_NAMES = [
	"elysia_search_docs",
	"elysia_get_doc",
	"elysia_list_docs",
	"elysia_get_example",
]


def register_docs_tools(
	mcp: FastMCP,
	config: Config,
	retriever: Optional[DocsRetriever] = None,
) -> None:
	"""Register documentation tools."""

	def _retriever() -> DocsRetriever:
		return retriever if retriever is not None else get_retriever()

	@mcp.tool()
	async def elysia_search_docs(query: str) -> str:
		"""
		Search Elysia.js documentation for relevant topics.
		Returns matching documentation pages from elysiajs.com.

		Args:
			query: Search query (e.g., "route", "authentication", "websocket", "error")
		"""
		return _retriever().search_docs(query)

	@mcp.tool()
	async def elysia_get_doc(path: str) -> str:
		"""
		Fetch the content of a specific Elysia.js documentation page.

		Args:
			path: Documentation path (e.g., "/essential/route", "/patterns/error-handling", "/plugins/jwt")
		"""
		return await _retriever().get_doc(path)

	@mcp.tool()
	async def elysia_list_docs(category: Optional[CategoryName] = None) -> str:
		"""
		List all available Elysia.js documentation sections and pages.

		Args:
			category: Filter by category (e.g., "Essential", "Patterns", "Plugins", "Integrations")
		"""
		return _retriever().list_docs(category)

	@mcp.tool()
	async def elysia_get_example(pattern: PatternName) -> str:
		"""
		Get code examples for common Elysia patterns by fetching relevant documentation.

		Args:
			pattern: Pattern to get examples for
		"""
		return await _retriever().get_example(pattern)
