"""Tests for the BackendApi facade."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from rigbuilder.adapters.backend_api import BackendApi
from rigbuilder.core.errors import HTTPStatusFailure

from conftest import BASE_URL, generate_mock_components


@pytest.fixture
def api(settings, client):
    return BackendApi(settings, client=client)


async def test_routes_follow_settings(api):
    assert api.routes.health() == f"{BASE_URL}/health"


async def test_components_dispatch(api, backend):
    backend.reply(200, json=generate_mock_components(2))
    backend.reply(200, json=generate_mock_components(1))
    backend.reply(200, json=generate_mock_components(1))
    backend.reply(200, json={"id": 9, "brand": "AMD"})

    await api.components(page="4")
    assert str(backend.last_request.url) == f"{BASE_URL}/components?page=4"

    await api.components_by_category("memory")
    assert str(backend.last_request.url) == f"{BASE_URL}/components/memory?page=1"

    await api.components_by_brand("memory", "G.Skill", page="2")
    assert str(backend.last_request.url) == f"{BASE_URL}/components/memory/G.Skill?page=2"

    item = await api.component("9")
    assert item == {"id": "9", "brand": "AMD"}


async def test_health_is_strict(api, backend):
    backend.reply(502, json={"message": "bad gateway"})

    with pytest.raises(HTTPStatusFailure, match="HTTP 502: Bad Gateway"):
        await api.health()


async def test_invalid_page_is_rejected_before_any_request(api, backend):
    with pytest.raises(ValidationError):
        await api.components(page="zero")
    assert backend.requests == []


async def test_borrowed_client_is_left_open(settings, client):
    async with BackendApi(settings, client=client):
        pass
    assert not client.is_closed


async def test_owned_client_is_closed(settings):
    api = BackendApi(settings)
    async with api:
        pass
    assert api.client.is_closed
