"""
Test configuration and fixtures for rigbuilder tests.

Every test injects its own `httpx.MockTransport`; nothing patches a global
HTTP client, so tests stay isolated.
"""
from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from rigbuilder.adapters.http_client import build_async_client
from rigbuilder.core.config import AppSettings
from rigbuilder.core.routes import ApiRoutes

BASE_URL = "http://localhost:8080"

MOCK_COMPONENT: dict[str, Any] = {
    "id": 1,
    "category": "cpu",
    "brand": "Intel",
    "model": "Core i7-12700K",
    "sku": "BX8071512700K",
    "upc": "735858491921",
    "specs": {"socket": "LGA1700", "cores": 12, "threads": 20, "base_clock": "3.6GHz"},
    "release_date": "2021-11-04T00:00:00Z",
    "created_at": "2023-01-01T00:00:00Z",
}


def generate_mock_components(count: int) -> list[dict[str, Any]]:
    return [
        {
            **MOCK_COMPONENT,
            "id": index + 1,
            "model": f"{MOCK_COMPONENT['model']}-{index + 1}",
            "sku": f"{MOCK_COMPONENT['sku']}-{index + 1}",
        }
        for index in range(count)
    ]


class FakeBackend:
    """Scripted responses plus a log of every request received."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[Callable[[httpx.Request], httpx.Response]] = []

    def reply(self, status_code: int = 200, json: Any = None, **kwargs: Any) -> None:
        self._responses.append(lambda request: httpx.Response(status_code, json=json, **kwargs))

    def reply_raw(self, status_code: int, content: bytes) -> None:
        self._responses.append(lambda request: httpx.Response(status_code, content=content))

    def fail(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self._responses.append(_raise)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        return self._responses.pop(0)(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(backend_url=BASE_URL, _env_file=None)


@pytest.fixture
def routes() -> ApiRoutes:
    return ApiRoutes(BASE_URL)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
async def client(settings: AppSettings, backend: FakeBackend):
    async with build_async_client(settings, transport=backend.transport) as client:
        yield client
