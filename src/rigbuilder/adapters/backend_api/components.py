"""Component accessors.

These use the raw fetch path: a non-2xx answer is not an error here, its body
goes through the same normalization as a regular one. List accessors may thus
return `[{"error": "..."}]`; callers must tolerate that.
"""

from __future__ import annotations

from typing import Any

from rigbuilder.adapters.http_client import fetch_json
from rigbuilder.core.domain.models import (
    ComponentByIdRequest,
    ComponentsByBrandRequest,
    ComponentsByCategoryRequest,
    PageRequest,
)
from rigbuilder.core.interfaces.transport import AsyncHTTPTransport
from rigbuilder.core.routes import ApiRoutes
from rigbuilder.core.services.normalization import normalize_component, normalize_component_list


async def get_components(
    request: PageRequest | None = None,
    *,
    client: AsyncHTTPTransport,
    routes: ApiRoutes,
    **options: Any,
) -> list[dict[str, Any]]:
    request = request or PageRequest()
    data = await fetch_json(routes.components(request.page), client=client, **options)
    return normalize_component_list(data)


async def get_components_by_category(
    request: ComponentsByCategoryRequest,
    *,
    client: AsyncHTTPTransport,
    routes: ApiRoutes,
    **options: Any,
) -> list[dict[str, Any]]:
    url = routes.components_by_category(request.category, request.page)
    data = await fetch_json(url, client=client, **options)
    return normalize_component_list(data)


async def get_components_by_brand(
    request: ComponentsByBrandRequest,
    *,
    client: AsyncHTTPTransport,
    routes: ApiRoutes,
    **options: Any,
) -> list[dict[str, Any]]:
    url = routes.components_by_brand(request.category, request.brand, request.page)
    data = await fetch_json(url, client=client, **options)
    return normalize_component_list(data)


async def get_component_by_id(
    request: ComponentByIdRequest,
    *,
    client: AsyncHTTPTransport,
    routes: ApiRoutes,
    **options: Any,
) -> dict[str, Any]:
    """Fetch one component; a body without `id` echoes the requested id."""

    url = routes.component_by_id(request.id, request.page)
    data = await fetch_json(url, client=client, **options)
    return normalize_component(data, fallback_id=request.id)
