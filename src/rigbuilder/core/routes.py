"""Backend route builder.

Why pure functions:
- (base URL, parameters) -> request URL, with no I/O and no settings lookup
  beyond `ApiRoutes.from_settings`.
- Accessors and the CLI share one definition of every backend path.

Note:
- Path and query values are interpolated verbatim: no percent-encoding
  happens here, so `"cpu cooler"` ends up as `/components/cpu cooler`.
  Existing callers and backend routes rely on that form.
"""

from __future__ import annotations

from dataclasses import dataclass

from rigbuilder.core.config import AppSettings

DEFAULT_PAGE = "1"


@dataclass(frozen=True)
class ApiRoutes:
    """URLs of the backend resources, relative to `base_url`."""

    base_url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "ApiRoutes":
        settings = settings or AppSettings()
        return cls(settings.backend_url)

    def components(self, page: str = DEFAULT_PAGE) -> str:
        return f"{self.base_url}/components?page={page}"

    def components_by_category(self, category: str, page: str = DEFAULT_PAGE) -> str:
        return f"{self.base_url}/components/{category}?page={page}"

    def components_by_brand(self, category: str, brand: str, page: str = DEFAULT_PAGE) -> str:
        return f"{self.base_url}/components/{category}/{brand}?page={page}"

    def component_by_id(self, id: str, page: str = DEFAULT_PAGE) -> str:
        return f"{self.base_url}/components/item/{id}?page={page}"

    def health(self) -> str:
        return f"{self.base_url}/health"
