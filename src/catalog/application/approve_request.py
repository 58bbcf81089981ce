"""Application service: Approve Product Creation Request use case.

Promotes a pending request to a live product. The request stays locked
from the moment it is loaded until it is removed, so a concurrent
rejection or second approval waits and then finds it gone. The product
becomes visible only once the approval is certain.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductView
from catalog.application.show_request import load_request
from catalog.domain.exceptions import ProductNameConflictError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.request_repository import RequestRepository

logger = logging.getLogger(__name__)


class ApproveRequestHandler:

    def __init__(
        self,
        request_repo: RequestRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._request_repo = request_repo
        self._product_repo = product_repo

    def handle(self, request_id: int) -> ProductView:
        with self._request_repo.locked(request_id):
            request = load_request(self._request_repo, request_id)

            if self._product_repo.exists_by_name(request.details.name):
                logger.warning("Product with name %r already exists", request.details.name)
                raise ProductNameConflictError(request.details.name)

            # The store re-checks the name on insert, closing the race with a
            # concurrent approval of another request or a rename.
            product = self._product_repo.add(request.approve())
            self._request_repo.delete(request_id)

        logger.info("Product %s was created from request %s", product.id, request_id)
        return ProductView.from_product(product)
