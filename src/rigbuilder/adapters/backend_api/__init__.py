"""Accessors for the desktop-builder backend.

Each accessor retrieves one resource kind and takes its HTTP client and routes
as keyword arguments.
"""

from rigbuilder.adapters.backend_api.client import BackendApi
from rigbuilder.adapters.backend_api.components import (
    get_component_by_id,
    get_components,
    get_components_by_brand,
    get_components_by_category,
)
from rigbuilder.adapters.backend_api.health import main_health

__all__ = [
    "BackendApi",
    "get_component_by_id",
    "get_components",
    "get_components_by_brand",
    "get_components_by_category",
    "main_health",
]
