"""Domain models (Pydantic v2).

These models are the shape descriptors used to validate backend bodies and to
describe the requests the accessors accept. They say *what* the data is, not
*how* it is fetched.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import AnyUrl, BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from rigbuilder.core.domain.category import Category

Id = Annotated[int, Field(gt=0)]
UserId = Annotated[str, Field(min_length=1)]
Currency = Annotated[str, Field(min_length=3, max_length=3, description="ISO 4217 code.")]
Region = Annotated[str, Field(min_length=2, description="Region/country code.")]
PositivePrice = Annotated[float, Field(ge=0)]
Quantity = Annotated[int, Field(ge=1)]
JsonObject = dict[str, Any]


class BaseEntity(BaseModel):
    """Fields shared by every persisted entity."""

    id: Id
    created_at: datetime


class UpdatableEntity(BaseEntity):
    updated_at: datetime


# Components


class Component(BaseEntity):
    """A single hardware part as served by the backend."""

    category: Category
    brand: str
    model: str
    sku: str | None = None
    upc: str | None = None
    specs: JsonObject = Field(
        ...,
        description="Free-form specifications (cores, clocks, wattage, ...).",
    )
    release_date: datetime | None = None


class ComponentCreate(BaseModel):
    category: Category
    brand: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    sku: str | None = None
    upc: str | None = None
    specs: JsonObject | None = None


class ComponentUpdate(BaseModel):
    category: Category | None = None
    brand: str | None = Field(default=None, min_length=1)
    model: str | None = Field(default=None, min_length=1)
    sku: str | None = None
    upc: str | None = None
    specs: JsonObject | None = None


class ComponentFilter(BaseModel):
    category: Category | None = None
    brand: str | None = None
    model: str | None = None
    sku: str | None = None
    upc: str | None = None


# Retailers


class Retailer(UpdatableEntity):
    name: str
    website_url: AnyUrl | None = None
    logo_url: AnyUrl | None = None
    shipping_info: JsonObject | None = None
    return_policy: JsonObject | None = None
    is_active: bool


class RetailerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    website_url: AnyUrl | None = None
    logo_url: AnyUrl | None = None
    shipping_info: JsonObject | None = None
    return_policy: JsonObject | None = None
    is_active: bool | None = None


class RetailerUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    website_url: AnyUrl | None = None
    logo_url: AnyUrl | None = None
    shipping_info: JsonObject | None = None
    return_policy: JsonObject | None = None
    is_active: bool | None = None


class RetailerFilter(BaseModel):
    name: str | None = None
    is_active: bool | None = None


# Prices


class Price(BaseEntity):
    """Offer of one retailer for one component in one region."""

    component_id: Id
    retailer_id: Id
    region: Region
    currency: Currency
    price: PositivePrice
    in_stock: bool
    product_url: AnyUrl | None = None
    last_updated: datetime


class PriceWithDetails(Price):
    component: Component | None = None
    retailer: Retailer | None = None


class PriceCreate(BaseModel):
    component_id: Id
    retailer_id: Id
    region: Region
    currency: Currency
    price: PositivePrice
    in_stock: bool
    product_url: AnyUrl | None = None


class PriceUpdate(BaseModel):
    region: Region | None = None
    currency: Currency | None = None
    price: PositivePrice | None = None
    in_stock: bool | None = None
    product_url: AnyUrl | None = None


class PriceFilter(BaseModel):
    component_id: Id | None = None
    retailer_id: Id | None = None
    region: Region | None = None
    currency: Currency | None = None
    in_stock: bool | None = None
    min_price: PositivePrice | None = None
    max_price: PositivePrice | None = None


# Builds


class UserBuild(UpdatableEntity):
    """A user's (possibly incomplete) parts list."""

    user_id: UserId
    name: str
    description: str | None = None
    is_public: bool
    is_complete: bool
    total_price: PositivePrice | None = None
    currency: Currency
    region: Region


class UserBuildCreate(BaseModel):
    user_id: UserId
    name: str = Field(..., min_length=1)
    description: str | None = None
    is_public: bool | None = None
    is_complete: bool | None = None
    currency: Currency | None = None
    region: Region | None = None


class UserBuildUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    is_public: bool | None = None
    is_complete: bool | None = None
    total_price: PositivePrice | None = None
    currency: Currency | None = None
    region: Region | None = None


class UserBuildFilter(BaseModel):
    user_id: UserId | None = None
    is_public: bool | None = None
    is_complete: bool | None = None
    currency: Currency | None = None
    region: Region | None = None


class BuildComponent(BaseModel):
    id: Id
    build_id: Id
    component_id: Id
    quantity: Quantity
    selected_price_id: Id | None = None
    notes: str | None = None
    created_at: datetime


class BuildComponentWithDetails(BuildComponent):
    component: Component | None = None
    selected_price: Price | None = None


class BuildComponentCreate(BaseModel):
    build_id: Id
    component_id: Id
    quantity: Quantity | None = None
    selected_price_id: Id | None = None
    notes: str | None = None


class BuildComponentUpdate(BaseModel):
    quantity: Quantity | None = None
    selected_price_id: Id | None = None
    notes: str | None = None


class BuildComponentFilter(BaseModel):
    build_id: Id | None = None
    component_id: Id | None = None


class UserBuildWithComponents(UserBuild):
    components: list[BuildComponentWithDetails] | None = None


# Health


class HealthResponse(BaseModel):
    """Body of `GET /health`."""

    message: str


# Requests accepted by the component accessors


class PageRequest(BaseModel):
    """Pagination cursor; a positive integer carried as a string."""

    model_config = ConfigDict(frozen=True)

    page: str = "1"

    @field_validator("page")
    @classmethod
    def _positive_integer(cls, value: str) -> str:
        if not value.isdigit() or int(value) < 1:
            raise ValueError("page must be a positive integer")
        return value


class ComponentsByCategoryRequest(PageRequest):
    category: str


class ComponentsByBrandRequest(PageRequest):
    category: str
    brand: str


class ComponentByIdRequest(PageRequest):
    id: str
