"""Tests for the CLI module."""

import argparse
import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from elysia_docs.cli import (
	DEFAULT_CONFIG_TOML,
	_check_upstream,
	_detect_claude_code_config,
	_inject_mcp_config,
	cmd_get,
	cmd_setup,
	main,
)
from elysia_docs.config import Config
from elysia_docs.docs.errors import TransportError


@pytest.fixture
def isolated_env(tmp_path: Path):
	with patch.dict(os.environ, {
		"ELYSIA_DOCS_CONFIG_DIR": str(tmp_path / "config"),
		"ELYSIA_DOCS_DATA_DIR": str(tmp_path / "data"),
	}):
		yield tmp_path


def test_detect_claude_code_config_defaults_when_missing(tmp_path: Path):
	assert _detect_claude_code_config(tmp_path) == tmp_path / ".claude" / "claude_code_config.json"


def test_detect_claude_code_config_finds_home_file(tmp_path: Path):
	(tmp_path / ".claude.json").write_text("{}")
	assert _detect_claude_code_config(tmp_path) == tmp_path / ".claude.json"


def test_detect_claude_code_config_prefers_first_candidate(tmp_path: Path):
	(tmp_path / ".claude").mkdir()
	(tmp_path / ".claude" / "claude_code_config.json").write_text("{}")
	(tmp_path / ".claude.json").write_text("{}")
	assert _detect_claude_code_config(tmp_path) == tmp_path / ".claude" / "claude_code_config.json"


def test_inject_mcp_config_creates_entry(tmp_path: Path):
	"""MCP config injection should add the server entry."""
	config_file = tmp_path / "claude_code_config.json"
	config_file.write_text(json.dumps({"mcpServers": {}}))

	result = _inject_mcp_config(config_file)
	assert result is True

	data = json.loads(config_file.read_text())
	entry = data["mcpServers"]["elysia-docs"]
	assert entry["type"] == "stdio"
	assert entry["command"] == "elysia-docs"
	assert entry["args"] == ["serve"]


def test_inject_mcp_config_idempotent(tmp_path: Path):
	"""Injecting twice should not duplicate the entry."""
	config_file = tmp_path / "claude_code_config.json"
	config_file.write_text(json.dumps({"mcpServers": {}}))

	_inject_mcp_config(config_file)
	_inject_mcp_config(config_file)

	data = json.loads(config_file.read_text())
	assert len(data["mcpServers"]) == 1


def test_inject_mcp_config_creates_file(tmp_path: Path):
	"""Injection should work even if config file doesn't exist yet."""
	config_file = tmp_path / "nested" / "new_config.json"

	assert _inject_mcp_config(config_file) is True
	data = json.loads(config_file.read_text())
	assert "elysia-docs" in data["mcpServers"]


def test_inject_mcp_config_preserves_existing(tmp_path: Path):
	"""Injection should not remove existing MCP entries."""
	config_file = tmp_path / "config.json"
	config_file.write_text(json.dumps({
		"mcpServers": {"other-server": {"type": "stdio", "command": "other"}},
		"someOtherKey": True,
	}))

	_inject_mcp_config(config_file)

	data = json.loads(config_file.read_text())
	assert "other-server" in data["mcpServers"]
	assert "elysia-docs" in data["mcpServers"]
	assert data["someOtherKey"] is True


def test_inject_mcp_config_invalid_json(tmp_path: Path):
	config_file = tmp_path / "broken.json"
	config_file.write_text("{not json")
	assert _inject_mcp_config(config_file) is False


def test_setup_writes_default_toml(isolated_env: Path, capsys):
	claude_config = isolated_env / "claude.json"
	with patch("elysia_docs.cli._detect_claude_code_config", return_value=claude_config):
		cmd_setup(argparse.Namespace(check=False))

	assert (isolated_env / "config" / "config.toml").read_text() == DEFAULT_CONFIG_TOML
	assert "elysia-docs" in json.loads(claude_config.read_text())["mcpServers"]
	assert "Done." in capsys.readouterr().out


def test_check_upstream_reports_failure(tmp_path: Path):
	config = Config(config_dir=tmp_path / "c", data_dir=tmp_path / "d")

	async def failing_fetch(self, path: str) -> str:
		raise TransportError(path, "connection refused")

	with patch("elysia_docs.docs.fetcher.DocFetcher.fetch_raw", failing_fetch):
		status, issue = _check_upstream(config)

	assert status.startswith("FAILED")
	assert "connection refused" in issue


def test_check_upstream_reports_success(tmp_path: Path):
	config = Config(config_dir=tmp_path / "c", data_dir=tmp_path / "d")

	async def fake_fetch(self, path: str) -> str:
		return "# At Glance"

	with patch("elysia_docs.docs.fetcher.DocFetcher.fetch_raw", fake_fetch):
		status, issue = _check_upstream(config)

	assert status == "OK (11 chars from /at-glance)"
	assert issue is None


def test_cmd_get_prints_rendered_doc(isolated_env: Path, capsys):
	async def fake_fetch(self, path: str) -> str:
		return "---\ntitle: Route\n---\n# Route"

	with patch("elysia_docs.docs.fetcher.DocFetcher.fetch_raw", fake_fetch):
		cmd_get(argparse.Namespace(path="/essential/route"))

	out = capsys.readouterr().out
	assert out.startswith("# Route\n\n**Category:** Essential")
	assert "title: Route" not in out


def test_main_search(isolated_env: Path, capsys):
	with patch("sys.argv", ["elysia-docs", "search", "cors"]):
		main()
	assert "- **CORS** (`/plugins/cors`)" in capsys.readouterr().out


def test_main_list_category(isolated_env: Path, capsys):
	with patch("sys.argv", ["elysia-docs", "list", "--category", "Migration"]):
		main()
	out = capsys.readouterr().out
	assert "(4 pages)" in out
	assert "From Express" in out


def test_main_without_command_exits(capsys):
	with patch("sys.argv", ["elysia-docs"]):
		with pytest.raises(SystemExit) as exc_info:
			main()
	assert exc_info.value.code == 1
