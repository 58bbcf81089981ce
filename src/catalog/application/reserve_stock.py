"""Application service: Reserve Stock use case.

Called by the order workflow. The check and the decrement happen under
the product's lock, so concurrent reservations can never both be granted
stock that only one of them can have.
"""

from __future__ import annotations

import logging

from catalog.application.guards import load_product
from catalog.domain.exceptions import InsufficientStockError
from catalog.domain.model.value_objects import Quantity
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ReserveStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, quantity: int) -> None:
        qty = Quantity(quantity)

        with self._product_repo.locked(product_id):
            product = load_product(self._product_repo, product_id)
            try:
                product.reserve(qty)
            except InsufficientStockError:
                logger.warning(
                    "Insufficient quantity of product %s (need %s, have %s)",
                    product_id, qty, product.quantity_in_stock,
                )
                raise
            self._product_repo.save(product)

        logger.info("Reserved %s of product %s", qty, product_id)
