"""Tests for shared HTTP client configuration."""

import httpx
import pytest

from fluentrest._internal.http import DEFAULT_TIMEOUT, create_http_client, has_error_status_code
from fluentrest._version import __version__


class TestCreateHttpClient:
    """Tests for create_http_client()."""

    @pytest.mark.asyncio
    async def test_sets_user_agent(self):
        """Should send a fluentrest User-Agent."""
        async with create_http_client() as client:
            assert isinstance(client, httpx.AsyncClient)
            assert client.headers["User-Agent"] == f"fluentrest/{__version__}"

    @pytest.mark.asyncio
    async def test_merges_default_headers(self):
        """Should add caller headers next to the User-Agent."""
        async with create_http_client(headers={"X-Api-Key": "abc"}) as client:
            assert client.headers["X-Api-Key"] == "abc"
            assert "fluentrest/" in client.headers["User-Agent"]

    @pytest.mark.asyncio
    async def test_applies_timeout(self):
        """Should apply the timeout to all phases."""
        async with create_http_client(timeout=2.5) as client:
            assert client.timeout.read == 2.5
        async with create_http_client() as client:
            assert client.timeout.connect == DEFAULT_TIMEOUT


class TestHasErrorStatusCode:
    """Tests for has_error_status_code()."""

    @pytest.mark.parametrize("code", [200, 201, 204, 299])
    def test_success_range(self, code):
        """2xx codes should not be errors."""
        assert has_error_status_code(code) is False

    @pytest.mark.parametrize("code", [100, 199, 300, 304, 404, 500])
    def test_outside_success_range(self, code):
        """Codes outside 2xx should be errors."""
        assert has_error_status_code(code) is True
