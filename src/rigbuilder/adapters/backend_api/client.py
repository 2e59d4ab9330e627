"""Facade bundling an HTTP client and the backend routes.

`BackendApi` either borrows an injected client (the caller closes it) or
builds its own from settings and closes it on `aclose()` / context exit.
"""

from __future__ import annotations

from typing import Any

import httpx

from rigbuilder.adapters.backend_api.components import (
    get_component_by_id,
    get_components,
    get_components_by_brand,
    get_components_by_category,
)
from rigbuilder.adapters.backend_api.health import main_health
from rigbuilder.adapters.http_client import build_async_client
from rigbuilder.core.config import AppSettings
from rigbuilder.core.domain.models import (
    ComponentByIdRequest,
    ComponentsByBrandRequest,
    ComponentsByCategoryRequest,
    HealthResponse,
    PageRequest,
)
from rigbuilder.core.interfaces.transport import AsyncHTTPTransport
from rigbuilder.core.routes import DEFAULT_PAGE, ApiRoutes


class BackendApi:
    """Typed access to the desktop-builder backend."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: AsyncHTTPTransport | None = None,
        routes: ApiRoutes | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self.routes = routes or ApiRoutes.from_settings(self._settings)
        self._owns_client = client is None
        self.client: AsyncHTTPTransport = (
            build_async_client(self._settings) if client is None else client
        )

    async def __aenter__(self) -> "BackendApi":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and isinstance(self.client, httpx.AsyncClient):
            await self.client.aclose()

    async def components(self, *, page: str = DEFAULT_PAGE, **options: Any) -> list[dict[str, Any]]:
        return await get_components(
            PageRequest(page=page), client=self.client, routes=self.routes, **options
        )

    async def components_by_category(
        self, category: str, *, page: str = DEFAULT_PAGE, **options: Any
    ) -> list[dict[str, Any]]:
        request = ComponentsByCategoryRequest(category=category, page=page)
        return await get_components_by_category(
            request, client=self.client, routes=self.routes, **options
        )

    async def components_by_brand(
        self, category: str, brand: str, *, page: str = DEFAULT_PAGE, **options: Any
    ) -> list[dict[str, Any]]:
        request = ComponentsByBrandRequest(category=category, brand=brand, page=page)
        return await get_components_by_brand(
            request, client=self.client, routes=self.routes, **options
        )

    async def component(self, id: str, *, page: str = DEFAULT_PAGE, **options: Any) -> dict[str, Any]:
        request = ComponentByIdRequest(id=id, page=page)
        return await get_component_by_id(request, client=self.client, routes=self.routes, **options)

    async def health(self, **options: Any) -> HealthResponse:
        return await main_health(client=self.client, routes=self.routes, **options)
