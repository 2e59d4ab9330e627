"""Normalization of component bodies at the response boundary.

Why here:
- Identifiers are numeric on the wire and strings for callers; converting in
  one place keeps it to exactly one conversion per value.
- Kept free of HTTP so the rules can be exercised without a client.

Note:
- Every other field passes through untouched; received objects are copied,
  never mutated.
"""

from __future__ import annotations

from typing import Any


def stringify_id(value: Any) -> str:
    """String form of a wire identifier (`123` -> `"123"`, `7.0` -> `"7"`)."""

    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def normalize_component(item: Any, *, fallback_id: str | None = None) -> Any:
    """Return a copy of `item` with its `id` as a string.

    When `item` has no usable `id` and `fallback_id` is given, the fallback is
    used instead. Values that are not objects are returned unchanged, unless a
    fallback is given, in which case they are replaced by `{"id": fallback_id}`.
    """

    if not isinstance(item, dict):
        if fallback_id is None:
            return item
        return {"id": fallback_id}

    raw_id = item.get("id")
    if raw_id is None or raw_id == "":
        if fallback_id is None:
            return dict(item)
        return {**item, "id": fallback_id}
    return {**item, "id": stringify_id(raw_id)}


def normalize_component_list(data: Any) -> list[Any]:
    """Normalize a list body.

    A body that is not a list (typically an error object from a non-2xx
    response) is wrapped, unchanged, into a one-element list.
    """

    if not isinstance(data, list):
        return [data]
    return [normalize_component(item) for item in data]
