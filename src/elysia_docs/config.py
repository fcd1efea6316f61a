"""Configuration system using platformdirs for cross-platform paths."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import platformdirs

from .docs.cache import DEFAULT_TTL_SECONDS
from .docs.fetcher import DEFAULT_RAW_DOCS_URL, DEFAULT_USER_AGENT

APP_NAME = "elysia-docs"

DEFAULT_DOCS_URL = "https://elysiajs.com"


@dataclass
class Config:
	"""Central configuration with XDG/platform conventions."""

	config_dir: Path = field(default_factory=lambda: Path(platformdirs.user_config_dir(APP_NAME)))
	data_dir: Path = field(default_factory=lambda: Path(platformdirs.user_data_dir(APP_NAME)))

	# Derived paths
	config_file: Path = field(init=False)
	log_dir: Path = field(init=False)

	# User-configurable
	docs_url: str = DEFAULT_DOCS_URL
	raw_docs_url: str = DEFAULT_RAW_DOCS_URL
	cache_ttl_seconds: float = DEFAULT_TTL_SECONDS
	fetch_timeout: float = 30.0
	user_agent: str = DEFAULT_USER_AGENT
	log_level: str = "INFO"

	def __post_init__(self) -> None:
		self.config_file = self.config_dir / "config.toml"
		self.log_dir = self.data_dir / "logs"

	def ensure_dirs(self) -> None:
		"""Create all required directories."""
		self.config_dir.mkdir(parents=True, exist_ok=True)
		self.data_dir.mkdir(parents=True, exist_ok=True)
		self.log_dir.mkdir(parents=True, exist_ok=True)


PATH_FIELDS = {"config_dir", "data_dir"}
FLOAT_FIELDS = {"cache_ttl_seconds", "fetch_timeout"}
STR_FIELDS = {"docs_url", "raw_docs_url", "user_agent", "log_level"}


def _coerce(key: str, val: object) -> object:
	"""Convert a raw TOML/env value to the type of the named field."""
	if key in PATH_FIELDS:
		return Path(os.path.expanduser(str(val)))
	if key in FLOAT_FIELDS:
		try:
			number = float(val)  # type: ignore[arg-type]
		except (TypeError, ValueError):
			raise ValueError(f"Invalid value for {key}: {val!r}") from None
		if number <= 0:
			raise ValueError(f"{key} must be positive, got {val!r}")
		return number
	return str(val)


def _apply_env_overrides(config: Config) -> Config:
	"""Apply ELYSIA_DOCS_* environment variable overrides."""
	env_map = {
		"ELYSIA_DOCS_CONFIG_DIR": "config_dir",
		"ELYSIA_DOCS_DATA_DIR": "data_dir",
		"ELYSIA_DOCS_URL": "docs_url",
		"ELYSIA_DOCS_RAW_URL": "raw_docs_url",
		"ELYSIA_DOCS_CACHE_TTL": "cache_ttl_seconds",
		"ELYSIA_DOCS_FETCH_TIMEOUT": "fetch_timeout",
		"ELYSIA_DOCS_LOG_LEVEL": "log_level",
	}
	for env_key, attr in env_map.items():
		val = os.getenv(env_key)
		if val:
			setattr(config, attr, _coerce(attr, val))
	# Recompute derived paths after overrides
	config.__post_init__()
	return config


def _apply_toml(config: Config) -> Config:
	"""Apply config.toml overrides if file exists."""
	if not config.config_file.exists():
		return config

	with open(config.config_file, "rb") as f:
		data = tomllib.load(f)

	for key, val in data.items():
		if key in PATH_FIELDS | FLOAT_FIELDS | STR_FIELDS:
			setattr(config, key, _coerce(key, val))

	# Recompute derived paths after toml overrides
	config.__post_init__()
	return config


def load_config() -> Config:
	"""Load config with precedence: env vars > config.toml > defaults."""
	config = Config()
	# The config dir itself may be overridden from the environment
	config_dir = os.getenv("ELYSIA_DOCS_CONFIG_DIR")
	if config_dir:
		config.config_dir = Path(os.path.expanduser(config_dir))
		config.__post_init__()
	config = _apply_toml(config)
	config = _apply_env_overrides(config)
	config.ensure_dirs()
	return config


# Singleton
_config: Config | None = None


def get_config() -> Config:
	"""Get or create the global config instance."""
	global _config
	if _config is None:
		_config = load_config()
	return _config
