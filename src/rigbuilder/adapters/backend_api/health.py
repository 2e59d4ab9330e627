"""Backend health probe (validated path: non-2xx and bad shapes are fatal)."""

from __future__ import annotations

from typing import Any

from rigbuilder.adapters.http_client import fetch_json
from rigbuilder.core.domain.models import HealthResponse
from rigbuilder.core.interfaces.transport import AsyncHTTPTransport
from rigbuilder.core.routes import ApiRoutes


async def main_health(
    *,
    client: AsyncHTTPTransport,
    routes: ApiRoutes,
    **options: Any,
) -> HealthResponse:
    return await fetch_json(routes.health(), client=client, schema=HealthResponse, **options)
