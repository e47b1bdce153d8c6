"""Tests for APIClient construction from stored configuration."""

from __future__ import annotations

import httpx
import pytest

from focusforge.services.api.client import APIClient


@pytest.mark.asyncio
async def test_client_reads_config_and_token(tmp_config):
    tmp_config.set("backend.url", "https://db.example.com")
    tmp_config.set("backend.api_key", "anon")
    tmp_config.save_credentials("user-1", "jwt")

    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[])

    async with APIClient(transport=httpx.MockTransport(handler)) as client:
        assert client.base_url == "https://db.example.com/rest/v1"
        await client.get("tasks")

    assert str(seen[0].url) == "https://db.example.com/rest/v1/tasks"
    assert seen[0].headers["Authorization"] == "Bearer jwt"
    assert seen[0].headers["apikey"] == "anon"
    assert client._client is None
