"""Core health check tool."""

import json
from dataclasses import asdict
from typing import Optional

from mcp.server.fastmcp import FastMCP

from ..config import Config
from ..docs.catalog import DEFAULT_CATALOG
from ..docs.retriever import DocsRetriever, get_retriever


def register_core_tools(
	mcp: FastMCP,
	config: Config,
	retriever: Optional[DocsRetriever] = None,
) -> None:
	"""Register core tools."""

	@mcp.tool()
	async def health_check() -> str:
		"""
		Check the health of the elysia-docs server.
		Returns configuration and document cache status.
		"""
		active = retriever if retriever is not None else get_retriever()
		status = {
			"server": "running",
			"docs_url": config.docs_url,
			"raw_docs_url": config.raw_docs_url,
			"cache_ttl_seconds": config.cache_ttl_seconds,
			"fetch_timeout": config.fetch_timeout,
			"catalog_pages": len(DEFAULT_CATALOG),
			"cache": asdict(active.cache.stats()),
		}
		return json.dumps(status, indent=2)
