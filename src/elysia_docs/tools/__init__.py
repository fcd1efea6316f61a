"""MCP tool registration - modular tool definitions."""

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from ..config import Config
from ..docs.retriever import DocsRetriever
from .core import register_core_tools
from .docs import register_docs_tools

logger = logging.getLogger(__name__)


def register_all_tools(
	mcp: FastMCP,
	config: Config,
	retriever: Optional[DocsRetriever] = None,
) -> None:
	"""Register all MCP tools."""
	register_core_tools(mcp, config, retriever)
	register_docs_tools(mcp, config, retriever)
	logger.debug("Registered core and documentation tools")
