"""Application service: Edit Product use case.

The edit may move the product to another organization, so the caller
must own both the current and the target organization (unless admin).
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductInput, ProductView
from catalog.application.guards import ensure_may_manage, ensure_not_frozen, load_product
from catalog.domain.exceptions import OrganizationNotFoundError, ProductNameConflictError
from catalog.domain.model.organization import CallerIdentity
from catalog.domain.repository.organization_lookup import OrganizationLookup
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class EditProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        organizations: OrganizationLookup,
    ) -> None:
        self._product_repo = product_repo
        self._organizations = organizations

    def handle(self, caller: CallerIdentity, product_id: int, product: ProductInput) -> ProductView:
        """Overwrite every owner-controlled field of a product.

        Steps:
        1. Load the product and both organizations.
        2. Target organization must exist and not be frozen.
        3. Non-admins must own the current and the target organization.
        4. The new name must not belong to another product.
        """
        details = product.to_details()

        with self._product_repo.locked(product_id):
            existing = load_product(self._product_repo, product_id)

            target = self._organizations.lookup(details.organization_id)
            current = self._organizations.lookup(existing.organization_id)

            if target is None:
                logger.warning("Organization with id %s was not found", details.organization_id)
                raise OrganizationNotFoundError(details.organization_id)
            ensure_not_frozen(target)

            if not caller.is_admin:
                ensure_may_manage(caller, existing.organization_id, current, admin_override=False)
                ensure_may_manage(caller, target.id, target, admin_override=False)

            if details.name != existing.name and self._product_repo.exists_by_name(details.name):
                logger.warning("The product with new name %r already exists", details.name)
                raise ProductNameConflictError(details.name)

            existing.apply_details(details)
            self._product_repo.save(existing)

        if caller.is_admin:
            logger.info("Product %s was edited by admin %r", product_id, caller.username)
        else:
            logger.info("Product %s was edited by %r", product_id, caller.username)
        return ProductView.from_product(existing)
