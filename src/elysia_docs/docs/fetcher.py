"""
Documentation Fetcher - retrieves raw markdown pages over HTTP.

One GET per call, no retries and no caching; callers decide what to do with
failures.
"""

import asyncio
import logging

import aiohttp

from .errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_RAW_DOCS_URL = "https://raw.githubusercontent.com/elysiajs/documentation/main/docs"
DEFAULT_USER_AGENT = "elysia-docs-mcp/0.1"


class DocFetcher:
	"""
	Fetches raw documentation markdown.

	Usage:
		fetcher = DocFetcher()
		raw = await fetcher.fetch_raw("/essential/route")
	"""

	def __init__(
		self,
		base_url: str = DEFAULT_RAW_DOCS_URL,
		timeout: float = 30.0,
		user_agent: str = DEFAULT_USER_AGENT,
	):
		"""
		Initialize the fetcher.

		Args:
			base_url: Upstream root the page path is appended to
			timeout: Total request timeout in seconds
			user_agent: User agent string
		"""
		self.base_url = base_url.rstrip("/")
		self.timeout = timeout
		self.user_agent = user_agent

	def url_for(self, path: str) -> str:
		"""Upstream address for a documentation path."""
		return f"{self.base_url}{path}.md"

	async def fetch_raw(self, path: str) -> str:
		"""
		Fetch the raw markdown for a documentation path.

		Raises:
			UpstreamError: upstream answered with a non-2xx status
			TransportError: the request never got a response
		"""
		url = self.url_for(path)
		logger.debug(f"Fetching {url}")

		try:
			async with aiohttp.ClientSession(
				headers={"User-Agent": self.user_agent},
				timeout=aiohttp.ClientTimeout(total=self.timeout),
			) as session:
				async with session.get(url) as response:
					if not 200 <= response.status < 300:
						logger.warning(f"Failed to fetch {url}: {response.status}")
						raise UpstreamError(path, response.status)
					return await response.text(errors="replace")
		except (aiohttp.ClientError, asyncio.TimeoutError) as e:
			logger.warning(f"Error fetching {url}: {e!r}")
			raise TransportError(path, str(e) or type(e).__name__) from e

	async def __call__(self, path: str) -> str:
		return await self.fetch_raw(path)
