"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.application.guards import ensure_may_manage, load_product
from catalog.domain.model.organization import CallerIdentity
from catalog.domain.repository.organization_lookup import OrganizationLookup
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        organizations: OrganizationLookup,
    ) -> None:
        self._product_repo = product_repo
        self._organizations = organizations

    def handle(self, caller: CallerIdentity, product_id: int) -> None:
        """Remove a product and its discounts.

        Ownership is checked before anything is deleted; admins may
        delete any product.
        """
        with self._product_repo.locked(product_id):
            product = load_product(self._product_repo, product_id)
            organization = self._organizations.lookup(product.organization_id)

            ensure_may_manage(caller, product.organization_id, organization, admin_override=True)

            self._product_repo.delete(product_id)

        logger.info("Product %s was deleted by %r", product_id, caller.username)
