"""CreationRequest — a proposal to add a product to the catalog.

A request is stored only while it is PENDING. Approval promotes it to a
Product; rejection simply discards it. There is no way to edit a request:
the owner withdraws it and submits a new one instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, ProductDetails


class RequestStatus(Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass
class CreationRequest:

    id: int | None
    details: ProductDetails
    status: RequestStatus = RequestStatus.PENDING

    def approve(self) -> Product:
        """Transition PENDING -> APPROVED and build the new product.

        The product has no id yet (the product repository assigns one)
        and starts with no discounts.
        """
        self._assert_pending("approve")
        self.status = RequestStatus.APPROVED
        return Product(id=None, details=self.details)

    def reject(self) -> None:
        """Transition PENDING -> REJECTED."""
        self._assert_pending("reject")
        self.status = RequestStatus.REJECTED

    def _assert_pending(self, action: str) -> None:
        if self.status != RequestStatus.PENDING:
            raise ValidationError(
                f"Cannot {action} request — current status is {self.status.value}, "
                f"expected PENDING"
            )
