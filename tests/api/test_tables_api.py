"""Wire-level tests for the database client and table endpoints."""

from __future__ import annotations

import json

import httpx
import pytest

from focusforge.models.config_models import BackendConfig
from focusforge.services.api.client import APIClient
from focusforge.services.api.tables import TablesAPI, eq, parse_content_range

BACKEND = BackendConfig(url="https://db.example.com/", api_key="anon-key")


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _tables(response: httpx.Response, token: str | None = None):
    recorder = Recorder(response)
    client = APIClient(BACKEND, access_token=token, transport=httpx.MockTransport(recorder))
    return TablesAPI(client), recorder


@pytest.mark.parametrize(
    ("header", "total"),
    [("0-24/573", 573), ("*/3", 3), ("*/*", 0), (None, 0), ("", 0)],
)
def test_parse_content_range(header, total):
    assert parse_content_range(header) == total


def test_eq_filter_values():
    assert eq("abc") == "eq.abc"
    assert eq(True) == "eq.true"
    assert eq(5) == "eq.5"


@pytest.mark.asyncio
async def test_headers_use_api_key_without_token():
    tables, recorder = _tables(httpx.Response(200, json=[]))
    async with tables.client:
        await tables.select("tasks")

    request = recorder.last
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["Authorization"] == "Bearer anon-key"
    assert str(request.url).startswith("https://db.example.com/rest/v1/tasks")


@pytest.mark.asyncio
async def test_headers_prefer_user_token():
    tables, recorder = _tables(httpx.Response(200, json=[]), token="jwt-123")
    async with tables.client:
        await tables.select("tasks")

    assert recorder.last.headers["Authorization"] == "Bearer jwt-123"


@pytest.mark.asyncio
async def test_select_with_filter_and_order():
    rows = [{"id": "1"}, {"id": "2"}]
    tables, recorder = _tables(httpx.Response(200, json=rows))
    async with tables.client:
        result = await tables.select(
            "tasks", filters={"user_id": eq("u1")}, order="position.asc"
        )

    assert result == rows
    params = recorder.last.url.params
    assert recorder.last.method == "GET"
    assert params["select"] == "*"
    assert params["user_id"] == "eq.u1"
    assert params["order"] == "position.asc"


@pytest.mark.asyncio
async def test_count_uses_head_and_content_range():
    tables, recorder = _tables(
        httpx.Response(200, headers={"Content-Range": "0-4/5"})
    )
    async with tables.client:
        total = await tables.count("focus_sessions", filters={"user_id": eq("u1")})

    assert total == 5
    assert recorder.last.method == "HEAD"
    assert recorder.last.headers["Prefer"] == "count=exact"


@pytest.mark.asyncio
async def test_insert_asks_for_representation():
    tables, recorder = _tables(httpx.Response(201, json=[{"id": "new"}]))
    async with tables.client:
        rows = await tables.insert("tasks", {"title": "A"})

    assert rows == [{"id": "new"}]
    assert recorder.last.method == "POST"
    assert recorder.last.headers["Prefer"] == "return=representation"
    assert json.loads(recorder.last.content) == {"title": "A"}


@pytest.mark.asyncio
async def test_update_filters_by_query():
    tables, recorder = _tables(httpx.Response(200, json=[]))
    async with tables.client:
        await tables.update("tasks", {"position": 2}, filters={"id": eq("t1")})

    assert recorder.last.method == "PATCH"
    assert recorder.last.url.params["id"] == "eq.t1"
    assert json.loads(recorder.last.content) == {"position": 2}


@pytest.mark.asyncio
async def test_delete_filters_by_query():
    tables, recorder = _tables(httpx.Response(204))
    async with tables.client:
        await tables.delete("tasks", filters={"id": eq("t1")})

    assert recorder.last.method == "DELETE"
    assert recorder.last.url.params["id"] == "eq.t1"


@pytest.mark.asyncio
async def test_rpc_posts_params_and_tolerates_empty_body():
    tables, recorder = _tables(httpx.Response(204))
    async with tables.client:
        result = await tables.rpc("increment_user_points", {"user_id": "u1", "points": 10})

    assert result is None
    assert recorder.last.url.path == "/rest/v1/rpc/increment_user_points"
    assert json.loads(recorder.last.content) == {"user_id": "u1", "points": 10}


@pytest.mark.asyncio
async def test_error_status_raises():
    tables, _ = _tables(httpx.Response(500, json={"message": "boom"}))
    async with tables.client:
        with pytest.raises(httpx.HTTPStatusError):
            await tables.select("tasks")
