"""Elysia.js documentation MCP server: catalog, fetch, cache, search."""

__version__ = "0.1.0"
