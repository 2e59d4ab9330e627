"""Transport contract used by the backend accessors.

The accessors never resolve an HTTP client from global state; callers inject
anything matching `AsyncHTTPTransport`. `httpx.AsyncClient` satisfies it, and
tests pass an `httpx.AsyncClient` backed by `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class AsyncHTTPTransport(Protocol):
    """Minimal contract: one asynchronous GET.

    Keyword options (headers, params, timeout, extensions) are forwarded
    unchanged by the accessors.
    """

    async def get(self, url: str, **options: Any) -> httpx.Response:
        ...
