"""elysia-docs MCP server."""

from mcp.server.fastmcp import FastMCP

from .config import load_config
from .tools import register_all_tools

mcp = FastMCP("elysia-docs")
config = load_config()
register_all_tools(mcp, config)
