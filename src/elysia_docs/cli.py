"""CLI for elysia-docs: setup, serve, doctor, and one-shot documentation queries."""

import argparse
import asyncio
import json
import platform
import sys
from pathlib import Path

from importlib.metadata import version as pkg_version

from .config import Config, load_config
from .docs.errors import DocsError
from .docs.patterns import EXAMPLE_PATTERNS
from .docs.retriever import build_retriever
from .logging_config import setup_logging

# Page fetched by `doctor` to check upstream reachability
PROBE_PATH = "/at-glance"


# Claude Code settings files, relative to the home directory, in lookup order
CLAUDE_CONFIG_CANDIDATES = (
	Path(".claude") / "claude_code_config.json",
	Path(".claude.json"),
)


def _detect_claude_code_config(home: Path | None = None) -> Path:
	"""Return the first existing settings file, or where the first one would go."""
	home = home or Path.home()
	for candidate in CLAUDE_CONFIG_CANDIDATES:
		if (home / candidate).exists():
			return home / candidate
	return home / CLAUDE_CONFIG_CANDIDATES[0]


MCP_ENTRY = {
	"type": "stdio",
	"command": "elysia-docs",
	"args": ["serve"],
}


def _inject_mcp_config(config_path: Path) -> bool:
	"""Inject elysia-docs entry into an MCP config file."""
	try:
		if config_path.exists():
			with open(config_path) as f:
				data = json.load(f)
		else:
			data = {}

		if "mcpServers" not in data:
			data["mcpServers"] = {}

		if "elysia-docs" in data["mcpServers"]:
			print(f"  Already configured in {config_path}")
			return True

		data["mcpServers"]["elysia-docs"] = MCP_ENTRY
		config_path.parent.mkdir(parents=True, exist_ok=True)
		with open(config_path, "w") as f:
			json.dump(data, f, indent=2)
		print(f"  Added to {config_path}")
		return True
	except (json.JSONDecodeError, IOError) as e:
		print(f"  Failed to update {config_path}: {e}")
		return False


DEFAULT_CONFIG_TOML = (
	"# elysia-docs configuration\n"
	"# Environment variables (ELYSIA_DOCS_*) take precedence over this file.\n"
	"\n"
	'# docs_url = "https://elysiajs.com"\n'
	'# raw_docs_url = "https://raw.githubusercontent.com/elysiajs/documentation/main/docs"\n'
	"# cache_ttl_seconds = 3600\n"
	"# fetch_timeout = 30\n"
	'# log_level = "INFO"\n'
)


def cmd_setup(args: argparse.Namespace) -> None:
	"""Create directories, default config, and register with Claude Code."""
	if args.check:
		cmd_setup_check()
		return

	print("elysia-docs setup")
	print(f"{'=' * 40}")
	print()

	config = load_config()
	print("[1/3] Directories")
	print(f"  Config: {config.config_dir}")
	print(f"  Data:   {config.data_dir}")
	print()

	if not config.config_file.exists():
		config.config_file.write_text(DEFAULT_CONFIG_TOML)
		print(f"[2/3] Config file created: {config.config_file}")
	else:
		print(f"[2/3] Config file exists: {config.config_file}")
	print()

	print("[3/3] MCP configuration")
	_inject_mcp_config(_detect_claude_code_config())
	print()
	print("Done. Run 'elysia-docs doctor' to verify.")


def cmd_setup_check() -> None:
	"""Check current configuration status."""
	print("elysia-docs config check")
	print(f"{'=' * 40}")
	print()

	config = load_config()

	checks = [
		("Config dir", config.config_dir, config.config_dir.exists()),
		("Data dir", config.data_dir, config.data_dir.exists()),
		("Config file", config.config_file, config.config_file.exists()),
		("Log dir", config.log_dir, config.log_dir.exists()),
	]

	all_ok = True
	for label, path, exists in checks:
		status = "OK" if exists else "MISSING"
		if not exists:
			all_ok = False
		print(f"  [{status:7s}] {label}: {path}")

	print()
	if not all_ok:
		print("  Some paths are missing. Run 'elysia-docs setup' to configure.")
	else:
		print("  All paths configured.")


def cmd_serve(args: argparse.Namespace) -> None:
	"""Run the MCP server (stdio transport)."""
	config = load_config()
	level = "DEBUG" if getattr(args, "verbose", False) else config.log_level
	setup_logging(level, config.log_dir)
	from .server import mcp
	mcp.run()


def _check_server_startup() -> tuple[str, str | None]:
	"""Try importing and counting registered tools. Returns (status, issue_or_none)."""
	try:
		from .server import mcp as server_instance
		tools = server_instance._tool_manager._tools
		return f"OK ({len(tools)} tools registered)", None
	except Exception as e:
		return f"FAILED ({e})", f"Server startup failed: {e}"


def _check_upstream(config: Config) -> tuple[str, str | None]:
	"""Fetch one page through the real pipeline. Returns (status, issue_or_none)."""
	retriever = build_retriever(config)
	try:
		content = asyncio.run(retriever.cache.get_document(PROBE_PATH))
	except DocsError as e:
		return f"FAILED ({e})", f"Upstream unreachable: {e}"
	return f"OK ({len(content)} chars from {PROBE_PATH})", None


def cmd_doctor(args: argparse.Namespace) -> None:
	"""Health check - verify installation, configuration and upstream access."""
	print("elysia-docs doctor")
	print(f"{'=' * 40}")

	issues: list[str] = []
	try:
		config = load_config()
	except ValueError as e:
		print(f"  Config:       INVALID ({e})")
		sys.exit(1)

	py_ver = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
	print(f"  Python:       {py_ver}")
	print(f"  Platform:     {platform.system()} {platform.machine()}")
	print()

	print("  Core deps:")
	for dep in ["mcp", "aiohttp", "platformdirs", "pydantic"]:
		try:
			print(f"    {dep:22s} {pkg_version(dep)}")
		except Exception:
			print(f"    {dep:22s} NOT INSTALLED")
			issues.append(f"{dep} package not installed")
	print()

	print("  Config:")
	print(f"    docs_url:            {config.docs_url}")
	print(f"    raw_docs_url:        {config.raw_docs_url}")
	print(f"    cache_ttl_seconds:   {config.cache_ttl_seconds}")
	print(f"    fetch_timeout:       {config.fetch_timeout}")
	print()

	print("  Server:")
	server_status, server_issue = _check_server_startup()
	print(f"    {server_status}")
	if server_issue:
		issues.append(server_issue)
	print()

	print("  Upstream:")
	upstream_status, upstream_issue = _check_upstream(config)
	print(f"    {upstream_status}")
	if upstream_issue:
		issues.append(upstream_issue)
	print()

	if issues:
		print(f"  {len(issues)} issue(s) found:")
		for issue in issues:
			print(f"    - {issue}")
		sys.exit(1)
	else:
		print("  All checks passed.")


def cmd_search(args: argparse.Namespace) -> None:
	"""Print keyword search results."""
	retriever = build_retriever(load_config())
	print(retriever.search_docs(args.query))


def cmd_list(args: argparse.Namespace) -> None:
	"""Print the catalog, optionally for one category."""
	retriever = build_retriever(load_config())
	print(retriever.list_docs(args.category))


def cmd_get(args: argparse.Namespace) -> None:
	"""Fetch and print one documentation page."""
	retriever = build_retriever(load_config())
	print(asyncio.run(retriever.get_doc(args.path)))


def cmd_example(args: argparse.Namespace) -> None:
	"""Fetch and print the example bundle for a pattern."""
	retriever = build_retriever(load_config())
	print(asyncio.run(retriever.get_example(args.pattern)))


def main() -> None:
	"""CLI entry point."""
	parser = argparse.ArgumentParser(
		prog="elysia-docs",
		description="MCP server serving Elysia.js documentation",
	)
	parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
	subparsers = parser.add_subparsers(dest="command")

	# setup
	setup_parser = subparsers.add_parser("setup", help="Create config and register with Claude Code")
	setup_parser.add_argument("--check", action="store_true", help="Check current config")
	setup_parser.set_defaults(func=cmd_setup)

	# serve
	serve_parser = subparsers.add_parser("serve", help="Run MCP server (stdio)")
	serve_parser.set_defaults(func=cmd_serve)

	# doctor
	doctor_parser = subparsers.add_parser("doctor", help="Health check")
	doctor_parser.set_defaults(func=cmd_doctor)

	# search
	search_parser = subparsers.add_parser("search", help="Search the documentation catalog")
	search_parser.add_argument("query", type=str, help="Keywords (e.g. 'route websocket')")
	search_parser.set_defaults(func=cmd_search)

	# list
	list_parser = subparsers.add_parser("list", help="List documentation pages")
	list_parser.add_argument("--category", type=str, default=None, help="Only this category")
	list_parser.set_defaults(func=cmd_list)

	# get
	get_parser = subparsers.add_parser("get", help="Fetch one documentation page")
	get_parser.add_argument("path", type=str, help="Documentation path (e.g. /essential/route)")
	get_parser.set_defaults(func=cmd_get)

	# example
	example_parser = subparsers.add_parser("example", help="Fetch the pages for an example pattern")
	example_parser.add_argument("pattern", type=str, help=f"One of: {', '.join(EXAMPLE_PATTERNS)}")
	example_parser.set_defaults(func=cmd_example)

	args = parser.parse_args()

	if not args.command:
		parser.print_help()
		sys.exit(1)

	if args.verbose and args.command != "serve":
		setup_logging("DEBUG")

	args.func(args)
