"""Application service: Return Stock use case.

Puts previously reserved units back, e.g. when an order is cancelled.
"""

from __future__ import annotations

import logging

from catalog.application.guards import load_product
from catalog.domain.model.value_objects import Quantity
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ReturnStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, quantity: int) -> None:
        qty = Quantity(quantity)

        with self._product_repo.locked(product_id):
            product = load_product(self._product_repo, product_id)
            product.restock(qty)
            self._product_repo.save(product)

        logger.info("Returned %s of product %s", qty, product_id)
