"""Tests for chunkwise.services.fetcher.fetch_page.

Network access is replaced with :class:`httpx.MockTransport` and DNS-based
address checks are patched out unless a test exercises them.
"""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from chunkwise.services.fetcher import MAX_CONTENT_SIZE, fetch_page


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=False)


def _fetch(url: str, handler):
    async def run():
        async with _client(handler) as client:
            return await fetch_page(url, client)

    return asyncio.run(run())


@pytest.fixture(autouse=True)
def public_addresses():
    with patch("chunkwise.services.fetcher._is_private_address", return_value=False):
        yield


class TestFetchPage:
    def test_returns_body_and_url(self):
        def handler(request):
            return httpx.Response(200, html="<html>ok</html>")

        page = _fetch("https://example.com/page", handler)
        assert page.url == "https://example.com/page"
        assert page.html == "<html>ok</html>"

    def test_follows_redirects_and_reports_final_url(self):
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"location": "/new"})
            return httpx.Response(200, html="moved here")

        page = _fetch("https://example.com/old", handler)
        assert page.url == "https://example.com/new"
        assert page.html == "moved here"

    def test_too_many_redirects(self):
        def handler(request):
            return httpx.Response(302, headers={"location": "/loop"})

        with pytest.raises(RuntimeError):
            _fetch("https://example.com/loop", handler)

    def test_http_error_status_raises(self):
        def handler(request):
            return httpx.Response(404, text="missing")

        with pytest.raises(httpx.HTTPStatusError):
            _fetch("https://example.com/missing", handler)

    def test_declared_oversized_body_raises(self):
        def handler(request):
            return httpx.Response(
                200, headers={"content-length": str(MAX_CONTENT_SIZE + 1)}, content=b"x"
            )

        with pytest.raises(RuntimeError):
            _fetch("https://example.com/huge", handler)


class TestContentType:
    def test_rejects_plain_text(self):
        def handler(request):
            return httpx.Response(200, text="Plain text file. Not an HTML page at all. " * 20)

        with pytest.raises(RuntimeError, match="text/plain"):
            _fetch("https://example.com/notes.txt", handler)

    def test_rejects_binary_content(self):
        def handler(request):
            return httpx.Response(
                200, headers={"content-type": "application/pdf"}, content=b"%PDF-1.7"
            )

        with pytest.raises(RuntimeError):
            _fetch("https://example.com/report.pdf", handler)

    def test_accepts_xhtml_with_parameters(self):
        def handler(request):
            return httpx.Response(
                200,
                headers={"content-type": "Application/XHTML+XML; charset=utf-8"},
                content=b"<html>ok</html>",
            )

        assert _fetch("https://example.com/page", handler).html == "<html>ok</html>"

    def test_missing_content_type_is_treated_as_html(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>ok</html>")

        assert _fetch("https://example.com/page", handler).html == "<html>ok</html>"


class TestUrlValidation:
    def test_rejects_non_http_scheme(self):
        with pytest.raises(ValueError):
            asyncio.run(fetch_page("ftp://example.com/file"))

    def test_rejects_missing_hostname(self):
        with pytest.raises(ValueError):
            asyncio.run(fetch_page("https:///path"))

    def test_rejects_private_address(self):
        with patch("chunkwise.services.fetcher._is_private_address", return_value=True):
            with pytest.raises(ValueError):
                asyncio.run(fetch_page("https://intranet.local/"))

    def test_rejects_private_redirect_target(self):
        def handler(request):
            return httpx.Response(302, headers={"location": "https://internal.example/"})

        def is_private(hostname):
            return hostname == "internal.example"

        with patch("chunkwise.services.fetcher._is_private_address", side_effect=is_private):
            with pytest.raises(ValueError):
                _fetch("https://example.com/", handler)
