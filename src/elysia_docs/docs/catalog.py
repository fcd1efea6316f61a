"""
Documentation Catalog - static table of known Elysia.js documentation pages.

Every page the server knows about is described by a DocDescriptor. The table
is built once at import time and never mutated.
"""

from enum import Enum
from typing import Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownPathError


class DocCategory(str, Enum):
	"""Closed set of documentation categories."""
	GETTING_STARTED = "Getting Started"
	ESSENTIAL = "Essential"
	PATTERNS = "Patterns"
	EDEN = "Eden"
	PLUGINS = "Plugins"
	MIGRATION = "Migration"
	INTEGRATIONS = "Integrations"
	INTERNAL = "Internal"


class DocDescriptor(BaseModel):
	"""A single known documentation page."""
	model_config = ConfigDict(frozen=True)

	path: str = Field(description="Slash-rooted path, unique key (e.g., '/essential/route')")
	title: str = Field(description="Human readable page title")
	category: DocCategory = Field(description="Section the page belongs to")
	description: str = Field(description="One-line summary of the page")


def _doc(path: str, title: str, category: DocCategory, description: str) -> DocDescriptor:
	return DocDescriptor(path=path, title=title, category=category, description=description)


_GS = DocCategory.GETTING_STARTED
_ES = DocCategory.ESSENTIAL
_PA = DocCategory.PATTERNS
_ED = DocCategory.EDEN
_PL = DocCategory.PLUGINS
_MI = DocCategory.MIGRATION
_IN = DocCategory.INTEGRATIONS
_IT = DocCategory.INTERNAL

DOC_SECTIONS: tuple[DocDescriptor, ...] = (
	# Getting Started
	_doc("/at-glance", "At Glance", _GS, "Overview of Elysia features"),
	_doc("/quick-start", "Quick Start", _GS, "Get started quickly"),
	_doc("/table-of-content", "Table of Content", _GS, "Documentation index"),
	_doc("/key-concept", "Key Concept", _GS, "Core concepts of Elysia"),

	# Essential
	_doc("/essential/route", "Route", _ES, "Routing and HTTP methods"),
	_doc("/essential/handler", "Handler", _ES, "Route handlers and context"),
	_doc("/essential/plugin", "Plugin", _ES, "Creating and using plugins"),
	_doc("/essential/life-cycle", "Life Cycle", _ES, "Request lifecycle and hooks"),
	_doc("/essential/validation", "Validation", _ES, "Request validation with schemas"),
	_doc("/essential/best-practice", "Best Practice", _ES, "Recommended patterns"),

	# Patterns
	_doc("/patterns/configuration", "Configuration", _PA, "App configuration"),
	_doc("/patterns/cookie", "Cookie", _PA, "Cookie handling"),
	_doc("/patterns/deploy", "Deploy to Production", _PA, "Production deployment"),
	_doc("/patterns/error-handling", "Error Handling", _PA, "Error handling patterns"),
	_doc("/patterns/extends-context", "Extends Context", _PA, "Extending context with decorators"),
	_doc("/patterns/fullstack-dev-server", "Fullstack Dev Server", _PA, "Fullstack development"),
	_doc("/patterns/macro", "Macro", _PA, "Macro configuration"),
	_doc("/patterns/mount", "Mount", _PA, "Mounting other apps"),
	_doc("/patterns/openapi", "OpenAPI", _PA, "OpenAPI documentation"),
	_doc("/patterns/opentelemetry", "OpenTelemetry", _PA, "Telemetry integration"),
	_doc("/patterns/trace", "Trace", _PA, "Request tracing"),
	_doc("/patterns/typebox", "TypeBox (Elysia.t)", _PA, "Built-in TypeBox schemas"),
	_doc("/patterns/typescript", "TypeScript", _PA, "TypeScript configuration"),
	_doc("/patterns/unit-test", "Unit Test", _PA, "Testing Elysia apps"),
	_doc("/patterns/websocket", "WebSocket", _PA, "WebSocket support"),

	# Eden (client)
	_doc("/eden/overview", "Eden Overview", _ED, "Eden client overview"),
	_doc("/eden/installation", "Eden Installation", _ED, "Installing Eden"),
	_doc("/eden/treaty/overview", "Eden Treaty Overview", _ED, "Type-safe client"),
	_doc("/eden/treaty/parameters", "Eden Treaty Parameters", _ED, "Client parameters"),
	_doc("/eden/treaty/response", "Eden Treaty Response", _ED, "Handling responses"),
	_doc("/eden/treaty/websocket", "Eden Treaty WebSocket", _ED, "WebSocket client"),
	_doc("/eden/treaty/config", "Eden Treaty Config", _ED, "Client configuration"),
	_doc("/eden/treaty/unit-test", "Eden Treaty Unit Test", _ED, "Testing with Eden"),
	_doc("/eden/fetch", "Eden Fetch", _ED, "Fetch-based client"),

	# Plugins
	_doc("/plugins/overview", "Plugins Overview", _PL, "Plugin ecosystem"),
	_doc("/plugins/bearer", "Bearer", _PL, "Bearer token auth"),
	_doc("/plugins/cors", "CORS", _PL, "CORS configuration"),
	_doc("/plugins/cron", "Cron", _PL, "Scheduled tasks"),
	_doc("/plugins/graphql-apollo", "GraphQL Apollo", _PL, "GraphQL with Apollo"),
	_doc("/plugins/graphql-yoga", "GraphQL Yoga", _PL, "GraphQL with Yoga"),
	_doc("/plugins/html", "HTML", _PL, "HTML rendering"),
	_doc("/plugins/jwt", "JWT", _PL, "JWT authentication"),
	_doc("/plugins/openapi", "OpenAPI Plugin", _PL, "OpenAPI/Swagger docs"),
	_doc("/plugins/opentelemetry", "OpenTelemetry Plugin", _PL, "Telemetry plugin"),
	_doc("/plugins/server-timing", "Server Timing", _PL, "Server timing headers"),
	_doc("/plugins/static", "Static", _PL, "Static file serving"),

	# Migration
	_doc("/migrate/from-express", "From Express", _MI, "Migrate from Express"),
	_doc("/migrate/from-fastify", "From Fastify", _MI, "Migrate from Fastify"),
	_doc("/migrate/from-hono", "From Hono", _MI, "Migrate from Hono"),
	_doc("/migrate/from-trpc", "From tRPC", _MI, "Migrate from tRPC"),

	# Integrations
	_doc("/integrations/ai-sdk", "AI SDK", _IN, "Vercel AI SDK integration"),
	_doc("/integrations/astro", "Astro", _IN, "Astro integration"),
	_doc("/integrations/better-auth", "Better Auth", _IN, "Better Auth integration"),
	_doc("/integrations/cloudflare-worker", "Cloudflare Worker", _IN, "Cloudflare deployment"),
	_doc("/integrations/deno", "Deno", _IN, "Deno deployment"),
	_doc("/integrations/drizzle", "Drizzle", _IN, "Drizzle ORM integration"),
	_doc("/integrations/expo", "Expo", _IN, "Expo/React Native"),
	_doc("/integrations/netlify", "Netlify", _IN, "Netlify deployment"),
	_doc("/integrations/nextjs", "Next.js", _IN, "Next.js integration"),
	_doc("/integrations/node", "Node.js", _IN, "Node.js deployment"),
	_doc("/integrations/nuxt", "Nuxt", _IN, "Nuxt integration"),
	_doc("/integrations/prisma", "Prisma", _IN, "Prisma ORM integration"),
	_doc("/integrations/react-email", "React Email", _IN, "Email with React"),
	_doc("/integrations/sveltekit", "SvelteKit", _IN, "SvelteKit integration"),
	_doc("/integrations/tanstack-start", "TanStack Start", _IN, "TanStack Start integration"),
	_doc("/integrations/vercel", "Vercel", _IN, "Vercel deployment"),

	# Internal
	_doc("/internal/jit-compiler", "JIT Compiler", _IT, "Just-in-time compiler internals"),
)


def normalize_doc_path(path: str) -> str:
	"""Canonicalize a user supplied path: '/essential/route.md' -> '/essential/route'."""
	path = path.strip()
	if path.endswith(".md"):
		path = path[:-3]
	path = path.rstrip("/")
	if not path.startswith("/"):
		path = "/" + path
	return path


class Catalog:
	"""
	Read-only lookup over a fixed sequence of DocDescriptors.

	Usage:
		catalog = Catalog(DOC_SECTIONS)
		catalog.find_by_path("/essential/route")
		catalog.filter_by_category("Plugins")
	"""

	def __init__(self, sections: Iterable[DocDescriptor]):
		self._sections: tuple[DocDescriptor, ...] = tuple(sections)
		self._by_path: dict[str, DocDescriptor] = {}
		for section in self._sections:
			if section.path in self._by_path:
				raise ValueError(f"Duplicate catalog path: {section.path}")
			self._by_path[section.path] = section

	def __len__(self) -> int:
		return len(self._sections)

	def __contains__(self, path: object) -> bool:
		return path in self._by_path

	def list_all(self) -> list[DocDescriptor]:
		"""All descriptors in insertion order."""
		return list(self._sections)

	def filter_by_category(self, category: Union[DocCategory, str]) -> list[DocDescriptor]:
		"""Descriptors in the given category, catalog order preserved."""
		value = category.value if isinstance(category, DocCategory) else category
		return [s for s in self._sections if s.category.value == value]

	def find_by_path(self, path: str) -> Optional[DocDescriptor]:
		return self._by_path.get(path)

	def require(self, path: str) -> DocDescriptor:
		"""Strict lookup; raises UnknownPathError on a miss."""
		section = self._by_path.get(path)
		if section is None:
			raise UnknownPathError(path)
		return section

	def categories(self) -> list[str]:
		"""Categories present in the catalog, in first-seen order."""
		seen: dict[str, None] = {}
		for section in self._sections:
			seen.setdefault(section.category.value, None)
		return list(seen)


DEFAULT_CATALOG = Catalog(DOC_SECTIONS)
