"""JSON-file-backed implementation of RequestRepository."""

from __future__ import annotations

from contextlib import AbstractContextManager
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.creation_request import CreationRequest
from catalog.domain.model.product import ProductDetails
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.request_repository import RequestRepository
from catalog.infrastructure.locking import FileKeyedLock
from catalog.infrastructure.persistence.json_file import JsonDocument


class JsonRequestRepository(RequestRepository):

    def __init__(self, file_path: Path) -> None:
        self._document = JsonDocument(file_path, "requests")
        self._request_locks = FileKeyedLock(file_path.parent / (file_path.name + ".locks"))

    # --- RequestRepository interface ------------------------------------------

    def get_by_id(self, request_id: int) -> CreationRequest | None:
        for raw in self._document.records():
            if raw["id"] == request_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[CreationRequest]:
        return [self._to_domain(raw) for raw in self._document.records()]

    def add(self, request: CreationRequest) -> CreationRequest:
        with self._document.transaction() as document:
            document["sequence"] += 1
            request.id = document["sequence"]
            document["requests"].append(self._to_raw(request))
        return request

    def delete(self, request_id: int) -> bool:
        with self._document.transaction() as document:
            remaining = [raw for raw in document["requests"] if raw["id"] != request_id]
            removed = len(remaining) != len(document["requests"])
            document["requests"] = remaining
        return removed

    def locked(self, request_id: int) -> AbstractContextManager[None]:
        return self._request_locks.hold(request_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(request: CreationRequest) -> dict:
        details = request.details
        return {
            "id": request.id,
            "name": details.name,
            "description": details.description,
            "organization_id": details.organization_id,
            "price": str(details.price.amount),
            "quantity_in_stock": details.quantity_in_stock,
            "tags": sorted(details.tags),
            "specs": dict(details.specs),
        }

    @staticmethod
    def _to_domain(raw: dict) -> CreationRequest:
        return CreationRequest(
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
        )
