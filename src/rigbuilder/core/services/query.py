"""Query lifecycle for UI consumers.

A query goes `idle -> loading -> success | error` and stops there: it runs
its fetcher once, never retries, and keeps the first outcome. The CLI uses it
to drive the loading spinner and the final success/error rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")


class QueryStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"

    @property
    def settled(self) -> bool:
        return self in (QueryStatus.SUCCESS, QueryStatus.ERROR)


@dataclass
class QueryState(Generic[T]):
    """Snapshot of a query: status plus data or error."""

    key: str
    status: QueryStatus = QueryStatus.IDLE
    data: T | None = None
    error: BaseException | None = None
    _observers: list[Callable[["QueryState[T]"], None]] = field(default_factory=list, repr=False)

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.LOADING

    @property
    def error_message(self) -> str | None:
        """Error text surfaced verbatim, as UI layers display it."""

        if self.error is None:
            return None
        return str(self.error) or "Unknown error"

    def subscribe(self, observer: Callable[["QueryState[T]"], None]) -> None:
        self._observers.append(observer)

    def _transition(self, status: QueryStatus) -> None:
        if self.status.settled:
            raise RuntimeError(f"query {self.key!r} already settled as {self.status.value}")
        self.status = status
        for observer in list(self._observers):
            observer(self)

    async def run(self, fetcher: Callable[[], Awaitable[T]]) -> "QueryState[T]":
        """Run `fetcher` once and settle.

        The fetcher's exception is captured in `error`, not re-raised.
        """

        if self.status is not QueryStatus.IDLE:
            raise RuntimeError(f"query {self.key!r} is not idle ({self.status.value})")

        self._transition(QueryStatus.LOADING)
        try:
            result = await fetcher()
        except Exception as exc:
            self.error = exc
            self._transition(QueryStatus.ERROR)
        else:
            self.data = result
            self._transition(QueryStatus.SUCCESS)
        return self


async def run_query(
    key: str,
    fetcher: Callable[[], Awaitable[T]],
    *,
    on_change: Callable[[QueryState[Any]], None] | None = None,
) -> QueryState[T]:
    """Create a query, subscribe `on_change`, run it to completion."""

    state: QueryState[T] = QueryState(key=key)
    if on_change is not None:
        state.subscribe(on_change)
    return await state.run(fetcher)
