"""Tests for the HTTP documentation fetcher."""

import asyncio
from unittest.mock import patch

import aiohttp
import pytest

from elysia_docs.docs.cache import DocCache
from elysia_docs.docs.errors import DocFetchError, TransportError, UpstreamError
from elysia_docs.docs.fetcher import DEFAULT_RAW_DOCS_URL, DocFetcher
from elysia_docs.docs.retriever import DocsRetriever
from tests.helpers import FakeSession

SESSION_TARGET = "elysia_docs.docs.fetcher.aiohttp.ClientSession"


class TestUrlFor:
	def test_default_base(self):
		fetcher = DocFetcher()
		assert fetcher.url_for("/essential/route") == f"{DEFAULT_RAW_DOCS_URL}/essential/route.md"

	def test_trailing_slash_tolerated(self):
		fetcher = DocFetcher(base_url="https://example.test/docs/")
		assert fetcher.url_for("/plugins/cors") == "https://example.test/docs/plugins/cors.md"


class TestFetchRaw:
	@pytest.mark.asyncio
	async def test_success_returns_body(self):
		session = FakeSession(status=200, body="# Route")
		fetcher = DocFetcher(base_url="https://example.test", timeout=5, user_agent="test-agent")

		with patch(SESSION_TARGET, session.factory):
			body = await fetcher.fetch_raw("/essential/route")

		assert body == "# Route"
		assert session.urls == ["https://example.test/essential/route.md"]
		kwargs = session.session_kwargs[0]
		assert kwargs["headers"]["User-Agent"] == "test-agent"
		assert kwargs["timeout"].total == 5

	@pytest.mark.asyncio
	async def test_not_found_raises_upstream_error(self):
		session = FakeSession(status=404, body="Not Found")
		fetcher = DocFetcher()

		with patch(SESSION_TARGET, session.factory):
			with pytest.raises(UpstreamError) as exc_info:
				await fetcher.fetch_raw("/missing")

		assert exc_info.value.status == 404
		assert exc_info.value.path == "/missing"
		assert str(exc_info.value) == "Failed to fetch /missing: HTTP 404"

	@pytest.mark.asyncio
	async def test_server_error_raises_upstream_error(self):
		session = FakeSession(status=503)
		with patch(SESSION_TARGET, session.factory):
			with pytest.raises(UpstreamError):
				await DocFetcher().fetch_raw("/at-glance")

	@pytest.mark.asyncio
	async def test_connection_error_raises_transport_error(self):
		session = FakeSession(error=aiohttp.ClientConnectionError("connection refused"))

		with patch(SESSION_TARGET, session.factory):
			with pytest.raises(TransportError) as exc_info:
				await DocFetcher().fetch_raw("/at-glance")

		assert "connection refused" in str(exc_info.value)
		assert "/at-glance" in str(exc_info.value)
		assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

	@pytest.mark.asyncio
	async def test_timeout_raises_transport_error(self):
		session = FakeSession(error=asyncio.TimeoutError())

		with patch(SESSION_TARGET, session.factory):
			with pytest.raises(TransportError) as exc_info:
				await DocFetcher().fetch_raw("/at-glance")

		assert "TimeoutError" in exc_info.value.cause

	@pytest.mark.asyncio
	async def test_errors_share_base_class(self):
		session = FakeSession(status=500)
		with patch(SESSION_TARGET, session.factory):
			with pytest.raises(DocFetchError):
				await DocFetcher().fetch_raw("/x")

	@pytest.mark.asyncio
	async def test_callable_delegates_to_fetch_raw(self):
		session = FakeSession(status=200, body="body")
		with patch(SESSION_TARGET, session.factory):
			assert await DocFetcher()("/x") == "body"

	@pytest.mark.asyncio
	async def test_invalid_utf8_body_is_decoded_with_replacement(self):
		session = FakeSession(status=200, body=b"# Hi \xff\xfe broken")

		with patch(SESSION_TARGET, session.factory):
			body = await DocFetcher().fetch_raw("/essential/route")

		assert body == "# Hi �� broken"


@pytest.mark.asyncio
async def test_invalid_utf8_page_renders_through_retriever():
	session = FakeSession(status=200, body=b"# Hi \xff\xfe broken")
	retriever = DocsRetriever(DocCache(DocFetcher(base_url="https://example.test")))

	with patch(SESSION_TARGET, session.factory):
		text = await retriever.get_doc("/essential/route")

	assert text.startswith("# Route\n")
	assert "# Hi �� broken" in text
