"""httpx wrapper and the validated-fetch contract.

Why a wrapper:
- Standardizes timeouts, headers and logging for every backend call.
- Takes the client as an argument, so tests inject an `httpx.MockTransport`
  instead of patching a global.

Why a single fetch:
- One operation serves every accessor:
  GET -> (optional) success check -> JSON parse -> (optional) shape check.
- The unvalidated path is the same call with no schema.

Note:
- Transport errors and JSON decode errors are never wrapped.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Awaitable, Callable, TypeVar, overload

import httpx
from pydantic import TypeAdapter, ValidationError

from rigbuilder import __version__
from rigbuilder.core.config import AppSettings
from rigbuilder.core.errors import HTTPStatusFailure, ResponseValidationError
from rigbuilder.core.interfaces.transport import AsyncHTTPTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured timeout and headers.

    `transport` replaces the network layer (tests use `httpx.MockTransport`).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "X-Client-Version": __version__,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


@lru_cache(maxsize=None)
def _adapter_for(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def _format_issue(error: dict[str, Any]) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    msg = error.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg


def validate_api_response(schema: type[T], data: Any) -> T:
    """Validate `data` against `schema` or raise `ResponseValidationError`.

    `schema` is anything pydantic can build a `TypeAdapter` for: a model
    class, `list[Model]`, a `TypedDict`...
    """

    try:
        return _adapter_for(schema).validate_python(data)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        logger.error("API response validation error: %s", errors)
        raise ResponseValidationError([_format_issue(e) for e in errors], errors) from exc


def safe_validate_api_response(schema: type[T], data: Any) -> T | None:
    """Like `validate_api_response`, but return None on mismatch."""

    try:
        return _adapter_for(schema).validate_python(data)
    except ValidationError as exc:
        logger.error("API response validation error: %s", exc.errors(include_url=False))
        return None


@overload
async def fetch_json(
    url: str,
    *,
    client: AsyncHTTPTransport,
    schema: None = None,
    require_ok: bool | None = None,
    **options: Any,
) -> Any: ...


@overload
async def fetch_json(
    url: str,
    *,
    client: AsyncHTTPTransport,
    schema: type[T],
    require_ok: bool | None = None,
    **options: Any,
) -> T: ...


async def fetch_json(
    url: str,
    *,
    client: AsyncHTTPTransport,
    schema: Any = None,
    require_ok: bool | None = None,
    **options: Any,
) -> Any:
    """GET `url` and return its JSON body, optionally validated.

    - `require_ok` defaults to `schema is not None`: validated fetches treat a
      non-2xx status as fatal, raw fetches hand the error body back.
    - `options` go to `client.get` unchanged (headers, params, timeout...).
    """

    if require_ok is None:
        require_ok = schema is not None

    logger.debug("GET %s", url)
    response = await client.get(url, **options)
    logger.debug("GET %s -> %s", url, response.status_code)

    if require_ok and not response.is_success:
        raise HTTPStatusFailure(response.status_code, response.reason_phrase, url=url)

    data = response.json()
    if schema is None:
        return data
    return validate_api_response(schema, data)


def create_validated_fetch(
    schema: type[T],
    *,
    client: AsyncHTTPTransport,
) -> Callable[..., Awaitable[T]]:
    """Bind `fetch_json` to a schema and a client.

    The returned coroutine function takes `(url, **options)`.
    """

    async def _fetch(url: str, **options: Any) -> T:
        return await fetch_json(url, client=client, schema=schema, **options)

    return _fetch
