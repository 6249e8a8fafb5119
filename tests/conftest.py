"""Pytest configuration and shared fixtures for wp-abilities-mcp tests.

This module provides common fixtures used across all test modules, including
test settings and an in-memory fake of the WordPress Abilities API served
through httpx.MockTransport.
"""

import copy
import json
from typing import Any

import httpx
import pytest
import pytest_asyncio

from wp_abilities_mcp import create_app
from wp_abilities_mcp.abilities import AbilitiesClient
from wp_abilities_mcp.config import WordPressMcpSettings

API_BASE = "https://example.com/wp-json/wp-abilities/v1"

SITE_INFO = {
    "name": "core/get-site-info",
    "label": "Get Site Info",
    "description": "Returns basic information about the site.",
    "category": "core",
    "input_schema": [],
    "output_schema": {"type": "object"},
    "meta": {"annotations": {"readonly": True, "idempotent": True}},
}

GET_POST = {
    "name": "content/get-post",
    "label": "Get Post",
    "description": "Fetches a single post.",
    "category": "content",
    "input_schema": {
        "type": "object",
        "properties": {"id": {"type": "integer"}},
        "required": ["id"],
    },
    "output_schema": {"type": "object"},
    "meta": {"annotations": {"readonly": True}},
    "_links": {
        "wp:action-run": [
            {"href": f"{API_BASE}/abilities/content/get-post/run"},
        ],
    },
}

CREATE_POST = {
    "name": "content/create-post",
    "label": "Create Post",
    "description": "Creates a new post.",
    "category": "content",
    "input_schema": {
        "type": "object",
        "properties": {"title": {"type": "string"}},
    },
    "output_schema": {"type": "object"},
}

DELETE_CACHE = {
    "name": "maintenance/flush-cache",
    "label": "Flush Cache",
    "description": "Flushes the object cache.",
    "category": "maintenance",
    "input_schema": [],
    "output_schema": {"type": "object"},
    "meta": {"annotations": {"destructive": True}},
}

ABILITY_RECORDS = [SITE_INFO, GET_POST, CREATE_POST, DELETE_CACHE]


class FakeWordPress:
    """In-memory stand-in for the wp-abilities/v1 REST namespace.

    Every request is recorded. Run endpoints echo back the method and the
    input they received. Responses for a given path can be overridden with
    fail(), which takes precedence over the normal routing.
    """

    def __init__(self, records: list[dict[str, Any]]) -> None:
        self.records = copy.deepcopy(records)
        self.requests: list[httpx.Request] = []
        self.failures: dict[str, tuple[int, str]] = {}

    def fail(self, path: str, status: int, body: str) -> None:
        self.failures[path] = (status, body)

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.failures:
            status, body = self.failures[path]
            return httpx.Response(status, text=body)

        prefix = "/wp-json/wp-abilities/v1/abilities"
        if path == prefix:
            return httpx.Response(200, json=self.records)

        name = path[len(prefix) + 1 :]
        if name.endswith("/run"):
            received = None
            if request.method == "GET" and "input" in request.url.params:
                received = json.loads(request.url.params["input"])
            elif request.method == "POST":
                received = json.loads(request.content).get("input")
            return httpx.Response(
                200,
                json={"method": request.method, "received": received},
            )

        for record in self.records:
            if record["name"] == name:
                return httpx.Response(200, json=record)
        return httpx.Response(
            404,
            json={"code": "rest_ability_not_found", "message": "Ability not found."},
        )


@pytest.fixture
def test_settings():
    """Create test settings that do not depend on the environment.

    Returns:
        WordPressMcpSettings: Settings instance configured for testing.
    """
    return WordPressMcpSettings(
        url="https://example.com/",
        username="admin",
        app_password="abcd efgh ijkl mnop",
        cache_ttl_seconds=60.0,
        per_page=100,
        log_level="DEBUG",
    )


@pytest.fixture
def fake_wordpress():
    """Create a fake Abilities API holding the default ability records."""
    return FakeWordPress(ABILITY_RECORDS)


@pytest_asyncio.fixture
async def abilities_client(fake_wordpress):
    """Create an AbilitiesClient talking to the fake Abilities API.

    Yields:
        AbilitiesClient: Client whose requests are served by fake_wordpress.
    """
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_wordpress.handler))
    client = AbilitiesClient(
        api_base=API_BASE,
        username="admin",
        app_password="abcd efgh ijkl mnop",
        client=http_client,
    )
    yield client
    await http_client.aclose()


@pytest.fixture
def ability_records():
    """Get copies of the default ability records, keyed by ability name."""
    return {record["name"]: copy.deepcopy(record) for record in ABILITY_RECORDS}


@pytest.fixture
def api_base():
    """Get the wp-abilities/v1 base URL used by the fake Abilities API."""
    return API_BASE


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
