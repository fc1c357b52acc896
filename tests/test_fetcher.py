"""
Tests for analyzer.fetcher — httpx-backed document fetch.
"""

import logging

import httpx
import pytest
from unittest.mock import patch, MagicMock, AsyncMock

from analyzer.config import Config
from analyzer.fetcher import FetchError, fetch_document, fetch_lines


def make_client(status_code=200, text="", side_effect=None):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.text = text

    mock_client = AsyncMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    if side_effect is not None:
        mock_client.get = AsyncMock(side_effect=side_effect)
    else:
        mock_client.get = AsyncMock(return_value=mock_response)
    return mock_client


class TestFetchDocument:
    @pytest.mark.asyncio
    async def test_success(self):
        client = make_client(text="<p>\nhello\n</p>")
        with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client):
            body = await fetch_document("https://example.com")
        assert body == "<p>\nhello\n</p>"
        client.get.assert_awaited_once_with("https://example.com")

    @pytest.mark.asyncio
    async def test_client_settings(self):
        client = make_client(text="")
        with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client) as mock_cls:
            await fetch_document("https://example.com")
        kwargs = mock_cls.call_args.kwargs
        assert kwargs["timeout"] == Config.TIMEOUT
        assert kwargs["follow_redirects"] is True
        assert kwargs["headers"]["User-Agent"] == Config.USER_AGENT

    @pytest.mark.asyncio
    async def test_overrides(self):
        client = make_client(text="")
        with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client) as mock_cls:
            await fetch_document("https://example.com", timeout=1.5, user_agent="probe/1")
        kwargs = mock_cls.call_args.kwargs
        assert kwargs["timeout"] == 1.5
        assert kwargs["headers"]["User-Agent"] == "probe/1"

    @pytest.mark.asyncio
    async def test_zero_timeout_is_passed_through(self):
        client = make_client(text="")
        with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client) as mock_cls:
            await fetch_document("https://example.com", timeout=0)
        assert mock_cls.call_args.kwargs["timeout"] == 0

    @pytest.mark.asyncio
    async def test_non_200_status(self):
        client = make_client(status_code=404, text="not found")
        with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client):
            with pytest.raises(FetchError) as exc_info:
                await fetch_document("https://example.com/missing")
        assert exc_info.value.status_code == 404
        assert "404" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_other_2xx_is_rejected(self):
        client = make_client(status_code=204)
        with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client):
            with pytest.raises(FetchError) as exc_info:
                await fetch_document("https://example.com")
        assert exc_info.value.status_code == 204

    @pytest.mark.asyncio
    async def test_connection_error(self):
        client = make_client(side_effect=httpx.ConnectError("connection refused"))
        with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client):
            with pytest.raises(FetchError) as exc_info:
                await fetch_document("https://example.com")
        assert exc_info.value.status_code is None
        assert exc_info.value.reason == "connection refused"
        assert "Failed to connect to URL" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_failure_is_not_logged_at_warning(self, caplog):
        """The caller reports fetch failures; the fetcher only logs them at info."""
        client = make_client(status_code=503)
        with caplog.at_level(logging.WARNING, logger="html-analyzer.fetcher"):
            with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client):
                with pytest.raises(FetchError):
                    await fetch_document("https://example.com")
        assert caplog.records == []

    @pytest.mark.asyncio
    async def test_missing_scheme(self):
        """A URL without http(s) fails before any network access."""
        with pytest.raises(FetchError) as exc_info:
            await fetch_document("not-a-url")
        assert exc_info.value.status_code is None
        assert exc_info.value.url == "not-a-url"


class TestFetchLines:
    @pytest.mark.asyncio
    async def test_splits_body(self):
        client = make_client(text="<a>\nx\n</a>\n")
        with patch("analyzer.fetcher.httpx.AsyncClient", return_value=client):
            lines = await fetch_lines("https://example.com")
        assert lines == ["<a>", "x", "</a>"]
