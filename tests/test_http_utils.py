"""Tests for HTTP utilities module."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from wireframe2svg.exceptions import FetchError
from wireframe2svg.http_utils import RETRY_STATUS_CODES, fetch_with_retries


def _mock_client(**get_kwargs) -> AsyncMock:
    client = AsyncMock()
    client.get = AsyncMock(**get_kwargs)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.raise_for_status = MagicMock()
    return response


class TestRetryStatusCodes:
    """Tests for RETRY_STATUS_CODES constant."""

    def test_contains_expected_codes(self) -> None:
        assert RETRY_STATUS_CODES == frozenset({429, 500, 502, 503, 504})


class TestFetchWithRetries:
    """Tests for fetch_with_retries function."""

    @pytest.mark.asyncio
    async def test_returns_text(self) -> None:
        mock_client = _mock_client(return_value=_response(200, '{"categories": []}'))

        with patch("wireframe2svg.http_utils.httpx.AsyncClient", return_value=mock_client):
            result = await fetch_with_retries("https://example.com/patterns.json")

        assert result == '{"categories": []}'

    @pytest.mark.asyncio
    async def test_raises_on_404_without_retrying(self) -> None:
        mock_client = _mock_client(return_value=_response(404))

        with patch("wireframe2svg.http_utils.httpx.AsyncClient", return_value=mock_client):
            with pytest.raises(FetchError, match="Resource not found"):
                await fetch_with_retries("https://example.com/missing.json")

        assert mock_client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_retries_on_503(self) -> None:
        """A transient status is retried until it succeeds."""
        mock_client = _mock_client(side_effect=[_response(503), _response(200, "success")])

        with (
            patch("wireframe2svg.http_utils.WIREFRAME2SVG_FETCH_MAX_RETRIES", 2),
            patch("wireframe2svg.http_utils.WIREFRAME2SVG_FETCH_BACKOFF_S", 0.01),
            patch("wireframe2svg.http_utils.httpx.AsyncClient", return_value=mock_client),
        ):
            result = await fetch_with_retries("https://example.com")

        assert result == "success"
        assert mock_client.get.call_count == 2

    @pytest.mark.asyncio
    async def test_raises_after_max_retries(self) -> None:
        mock_client = _mock_client(return_value=_response(503))

        with (
            patch("wireframe2svg.http_utils.WIREFRAME2SVG_FETCH_MAX_RETRIES", 2),
            patch("wireframe2svg.http_utils.WIREFRAME2SVG_FETCH_BACKOFF_S", 0.01),
            patch("wireframe2svg.http_utils.httpx.AsyncClient", return_value=mock_client),
        ):
            with pytest.raises(FetchError, match="Failed to fetch"):
                await fetch_with_retries("https://example.com")

        # Initial attempt + 2 retries
        assert mock_client.get.call_count == 3

    @pytest.mark.asyncio
    async def test_retries_on_request_error(self) -> None:
        mock_client = _mock_client(
            side_effect=[httpx.RequestError("Connection failed"), _response(200, "success")]
        )

        with (
            patch("wireframe2svg.http_utils.WIREFRAME2SVG_FETCH_MAX_RETRIES", 1),
            patch("wireframe2svg.http_utils.WIREFRAME2SVG_FETCH_BACKOFF_S", 0.01),
            patch("wireframe2svg.http_utils.httpx.AsyncClient", return_value=mock_client),
        ):
            result = await fetch_with_retries("https://example.com")

        assert result == "success"

    @pytest.mark.asyncio
    async def test_uses_provided_client(self) -> None:
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(return_value=_response(200, "shared"))

        with patch("wireframe2svg.http_utils.httpx.AsyncClient") as mock_client_class:
            result = await fetch_with_retries("https://example.com", client=mock_client)

        assert result == "shared"
        mock_client.get.assert_called_once_with("https://example.com")
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_client_settings(self) -> None:
        mock_client = _mock_client(return_value=_response(200, "ok"))

        with patch("wireframe2svg.http_utils.httpx.AsyncClient", return_value=mock_client) as mock_client_class:
            await fetch_with_retries("https://example.com")

        call_kwargs = mock_client_class.call_args.kwargs
        assert call_kwargs["follow_redirects"] is True
        assert call_kwargs["max_redirects"] == 5
        assert call_kwargs["headers"]["User-Agent"].startswith("wireframe2svg/")
