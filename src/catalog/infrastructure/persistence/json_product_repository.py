"""JSON-file-backed implementation of ProductRepository.

Tags, specs and discounts are embedded in each product record. Discount
timestamps written without an offset are read as UTC.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from catalog.domain.exceptions import ProductNameConflictError, ProductNotFoundError
from catalog.domain.model.product import Discount, Product, ProductDetails
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.locking import FileKeyedLock
from catalog.infrastructure.persistence.json_file import JsonDocument


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._document = JsonDocument(file_path, "products")
        self._row_locks = FileKeyedLock(file_path.parent / (file_path.name + ".locks"))

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._document.records():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_ids(self, product_ids: Iterable[int]) -> list[Product]:
        wanted = set(product_ids)
        return [self._to_domain(raw) for raw in self._document.records() if raw["id"] in wanted]

    def exists_by_name(self, name: str) -> bool:
        return any(raw["name"] == name for raw in self._document.records())

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._document.records()]

    def add(self, product: Product) -> Product:
        with self._document.transaction() as document:
            records = document["products"]
            self._assert_name_free(records, product.name, exclude_id=None)
            document["sequence"] += 1
            product.id = document["sequence"]
            records.append(self._to_raw(product))
        return product

    def save(self, product: Product) -> None:
        with self._document.transaction() as document:
            records = document["products"]
            self._assert_name_free(records, product.name, exclude_id=product.id)
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    return
            raise ProductNotFoundError(product.id)  # type: ignore[arg-type]

    def delete(self, product_id: int) -> None:
        with self._document.transaction() as document:
            document["products"] = [
                raw for raw in document["products"] if raw["id"] != product_id
            ]

    def locked(self, product_id: int) -> AbstractContextManager[None]:
        return self._row_locks.hold(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _assert_name_free(records: list[dict], name: str, exclude_id: int | None) -> None:
        for raw in records:
            if raw["name"] == name and raw["id"] != exclude_id:
                raise ProductNameConflictError(name)

    @staticmethod
    def _to_raw(product: Product) -> dict:
        details = product.details
        return {
            "id": product.id,
            "name": details.name,
            "description": details.description,
            "organization_id": details.organization_id,
            "price": str(details.price.amount),
            "quantity_in_stock": details.quantity_in_stock,
            "tags": sorted(details.tags),
            "specs": dict(details.specs),
            "discounts": [
                {
                    "id": d.id,
                    "price_modifier": str(d.price_modifier),
                    "discount_start": d.discount_start.isoformat(),
                    "discount_end": d.discount_end.isoformat() if d.discount_end else None,
                }
                for d in product.discounts
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            details=ProductDetails(
                name=raw["name"],
                description=raw.get("description"),
                organization_id=raw["organization_id"],
                price=Money(Decimal(raw["price"])),
                quantity_in_stock=raw["quantity_in_stock"],
                tags=frozenset(raw.get("tags", [])),
                specs=raw.get("specs", {}),
            ),
            discounts=[
                Discount(
                    id=d.get("id"),
                    price_modifier=Decimal(d["price_modifier"]),
                    discount_start=_parse_timestamp(d["discount_start"]),
                    discount_end=(
                        _parse_timestamp(d["discount_end"])
                        if d.get("discount_end") else None
                    ),
                )
                for d in raw.get("discounts", [])
            ],
        )


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
