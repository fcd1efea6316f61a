"""Shared test fixtures and helpers for elysia-docs tests."""

from typing import Callable, Optional, Union


def capture_tools(config, register_fn: Callable) -> dict:
	"""Register tools on a mock MCP and return the captured tool functions.

	Args:
		config: Config object to pass to the registration function
		register_fn: The registration function (e.g., register_docs_tools)

	Returns:
		Dict mapping tool name to the tool function
	"""
	captured = {}

	class MockMCP:
		def tool(self):
			def decorator(fn):
				captured[fn.__name__] = fn
				return fn
			return decorator

	register_fn(MockMCP(), config)
	return captured


class FakeClock:
	"""Manually advanced clock for TTL tests."""

	def __init__(self, start: float = 1000.0):
		self.now = start

	def __call__(self) -> float:
		return self.now

	def advance(self, seconds: float) -> None:
		self.now += seconds


class FakeFetch:
	"""Async fetch function serving canned pages and counting calls."""

	def __init__(self, pages: Optional[dict[str, str]] = None, errors: Optional[dict[str, Exception]] = None):
		self.pages = pages or {}
		self.errors = errors or {}
		self.calls: list[str] = []

	async def __call__(self, path: str) -> str:
		self.calls.append(path)
		if path in self.errors:
			raise self.errors[path]
		if path in self.pages:
			return self.pages[path]
		return f"# {path}\n\nContent for {path}."


class FakeResponse:
	def __init__(self, status: int, body: Union[str, bytes]):
		self.status = status
		self._body = body

	async def text(self, encoding: Optional[str] = None, errors: str = "strict") -> str:
		if isinstance(self._body, bytes):
			return self._body.decode(encoding or "utf-8", errors)
		return self._body

	async def __aenter__(self):
		return self

	async def __aexit__(self, *exc):
		return False


class FakeRequest:
	def __init__(self, response: Optional[FakeResponse], error: Optional[Exception]):
		self._response = response
		self._error = error

	async def __aenter__(self):
		if self._error is not None:
			raise self._error
		return self._response

	async def __aexit__(self, *exc):
		return False


class FakeSession:
	"""Stand-in for aiohttp.ClientSession recording requested URLs.

	Usage:
		session = FakeSession(status=200, body="# Hi")
		with patch("elysia_docs.docs.fetcher.aiohttp.ClientSession", session.factory):
			...
	"""

	def __init__(self, status: int = 200, body: Union[str, bytes] = "", error: Optional[Exception] = None):
		self.status = status
		self.body = body
		self.error = error
		self.urls: list[str] = []
		self.session_kwargs: list[dict] = []

	def factory(self, **kwargs):
		self.session_kwargs.append(kwargs)
		return self

	def get(self, url: str):
		self.urls.append(url)
		response = None if self.error else FakeResponse(self.status, self.body)
		return FakeRequest(response, self.error)

	async def __aenter__(self):
		return self

	async def __aexit__(self, *exc):
		return False
