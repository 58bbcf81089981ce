"""Product aggregate.

Products are owned by organizations. The descriptive part of a product
(``ProductDetails``) is shared with creation requests so a request can be
promoted to a product without copying fields by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Mapping

from catalog.domain.exceptions import InsufficientStockError, ValidationError
from catalog.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class ProductDetails:
    """Everything a product owner controls about a product.

    Invariants:
    - ``name`` is non-blank (stored stripped)
    - ``quantity_in_stock`` is a non-negative integer
    - every tag and every spec key is a non-blank string
    """

    name: str
    organization_id: int
    price: Money
    quantity_in_stock: int
    description: str | None = None
    tags: frozenset[str] = frozenset()
    specs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.quantity_in_stock, int) or isinstance(self.quantity_in_stock, bool):
            raise ValidationError("Quantity in stock must be an integer")
        if self.quantity_in_stock < 0:
            raise ValidationError("Quantity in stock cannot be negative")
        for tag in self.tags:
            if not isinstance(tag, str) or not tag.strip():
                raise ValidationError("Tags must be non-empty strings")
        for key, value in self.specs.items():
            if not isinstance(key, str) or not key.strip():
                raise ValidationError("Spec names must be non-empty strings")
            if not isinstance(value, str):
                raise ValidationError(f"Spec '{key}' must have a string value")

        # Normalise and copy so callers cannot alias the collections.
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "specs", dict(self.specs))

    def with_quantity(self, quantity_in_stock: int) -> ProductDetails:
        return ProductDetails(
            name=self.name,
            organization_id=self.organization_id,
            price=self.price,
            quantity_in_stock=quantity_in_stock,
            description=self.description,
            tags=self.tags,
            specs=self.specs,
        )


@dataclass(frozen=True)
class Discount:
    """A time-bounded price modifier (e.g. ``0.8`` is 20% off).

    Active from ``discount_start`` (inclusive) until ``discount_end``
    (exclusive); an open-ended discount has no ``discount_end``.
    """

    price_modifier: Decimal
    discount_start: datetime
    discount_end: datetime | None = None
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.price_modifier, Decimal):
            raise ValidationError("Price modifier must be a Decimal")
        if self.price_modifier < Decimal("0"):
            raise ValidationError("Price modifier cannot be negative")
        for moment in (self.discount_start, self.discount_end):
            if moment is not None and moment.tzinfo is None:
                raise ValidationError("Discount times must be timezone-aware")
        if self.discount_end is not None and self.discount_end <= self.discount_start:
            raise ValidationError("Discount must end after it starts")

    def is_active(self, at: datetime) -> bool:
        if self.discount_start > at:
            return False
        return self.discount_end is None or self.discount_end > at


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. ``id`` is ``None`` until the repository
    assigns one on insert. Stock moves only through ``reserve`` and
    ``restock`` (or a wholesale ``apply_details`` by an owner).
    """

    id: int | None
    details: ProductDetails
    discounts: list[Discount] = field(default_factory=list)

    # --- Convenience accessors -------------------------------------------------

    @property
    def name(self) -> str:
        return self.details.name

    @property
    def organization_id(self) -> int:
        return self.details.organization_id

    @property
    def price(self) -> Money:
        return self.details.price

    @property
    def quantity_in_stock(self) -> int:
        return self.details.quantity_in_stock

    # --- Mutations ---------------------------------------------------------------

    def apply_details(self, details: ProductDetails) -> None:
        """Replace every owner-controlled field wholesale.

        Tags and specs are replaced, not merged. Discounts are untouched.
        """
        self.details = details

    def reserve(self, quantity: Quantity) -> None:
        """Take ``quantity`` units out of stock.

        Raises InsufficientStockError if fewer units are in stock.
        """
        if quantity.value > self.quantity_in_stock:
            raise InsufficientStockError(
                available=self.quantity_in_stock, requested=quantity.value
            )
        self.details = self.details.with_quantity(self.quantity_in_stock - quantity.value)

    def restock(self, quantity: Quantity) -> None:
        """Put ``quantity`` units back into stock. No upper bound."""
        self.details = self.details.with_quantity(self.quantity_in_stock + quantity.value)
