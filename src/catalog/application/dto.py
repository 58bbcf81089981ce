"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the boundary (CLI, HTTP) and the application
layer without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Mapping

from catalog.domain.model.creation_request import CreationRequest
from catalog.domain.model.product import Product, ProductDetails
from catalog.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductInput:
    """Input: the owner-controlled fields of a product or request."""

    name: str
    organization_id: int
    price: str | int | Decimal
    quantity_in_stock: int
    description: str | None = None
    tags: Iterable[str] = ()
    specs: Mapping[str, str] = field(default_factory=dict)

    def to_details(self) -> ProductDetails:
        """Validate into domain form. Raises ValidationError."""
        return ProductDetails(
            name=self.name,
            organization_id=self.organization_id,
            price=Money.of(self.price),
            quantity_in_stock=self.quantity_in_stock,
            description=self.description,
            tags=frozenset(self.tags),
            specs=dict(self.specs),
        )


@dataclass(frozen=True)
class ProductView:
    """Output: a product as shown to callers.

    ``price_modifier`` and ``effective_price`` are only filled in by the
    read path; mutation results leave them as None.
    """

    id: int
    name: str
    description: str | None
    organization_id: int
    price: Decimal
    quantity_in_stock: int
    tags: tuple[str, ...]
    specs: dict[str, str]
    price_modifier: Decimal | None = None
    effective_price: Decimal | None = None

    @staticmethod
    def from_product(product: Product, price_modifier: Decimal | None = None) -> ProductView:
        details = product.details
        effective_price = None
        if price_modifier is not None:
            effective_price = details.price.scaled(price_modifier).amount
        return ProductView(
            id=product.id,  # type: ignore[arg-type]
            name=details.name,
            description=details.description,
            organization_id=details.organization_id,
            price=details.price.amount,
            quantity_in_stock=details.quantity_in_stock,
            tags=tuple(sorted(details.tags)),
            specs=dict(details.specs),
            price_modifier=price_modifier,
            effective_price=effective_price,
        )


@dataclass(frozen=True)
class RequestView:
    """Output: a pending product creation request."""

    id: int
    name: str
    description: str | None
    organization_id: int
    price: Decimal
    quantity_in_stock: int
    tags: tuple[str, ...]
    specs: dict[str, str]
    status: str

    @staticmethod
    def from_request(request: CreationRequest) -> RequestView:
        details = request.details
        return RequestView(
            id=request.id,  # type: ignore[arg-type]
            name=details.name,
            description=details.description,
            organization_id=details.organization_id,
            price=details.price.amount,
            quantity_in_stock=details.quantity_in_stock,
            tags=tuple(sorted(details.tags)),
            specs=dict(details.specs),
            status=request.status.value,
        )
