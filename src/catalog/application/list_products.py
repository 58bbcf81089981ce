"""Application service: List Products use cases (queries)."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable

from catalog.application.dto import ProductView
from catalog.application.get_product import utc_now
from catalog.domain.repository.organization_lookup import OrganizationLookup
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing import effective_price_modifier

logger = logging.getLogger(__name__)


class ListProductsHandler:
    """The public catalog: products of active organizations, by name."""

    def __init__(
        self,
        product_repo: ProductRepository,
        organizations: OrganizationLookup,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._organizations = organizations
        self._clock = clock

    def handle(self) -> list[ProductView]:
        now = self._clock()
        visible: dict[int, bool] = {}
        views: list[ProductView] = []

        for product in self._product_repo.list_all():
            org_id = product.organization_id
            if org_id not in visible:
                visible[org_id] = self._is_visible(org_id)
            if not visible[org_id]:
                continue
            modifier = effective_price_modifier(product, now)
            views.append(ProductView.from_product(product, price_modifier=modifier))

        hidden = sum(1 for shown in visible.values() if not shown)
        if hidden:
            logger.debug("Hid products of %d inactive organization(s)", hidden)
        return sorted(views, key=lambda view: view.name)

    def _is_visible(self, organization_id: int) -> bool:
        organization = self._organizations.lookup(organization_id)
        if organization is None:
            return False
        return not organization.is_frozen and not organization.is_deleted


class GetProductsByIdsHandler:
    """Bulk lookup for the order workflow; ignores unknown IDs."""

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_ids: Iterable[int]) -> list[ProductView]:
        now = self._clock()
        products = self._product_repo.get_by_ids(set(product_ids))
        return [
            ProductView.from_product(p, price_modifier=effective_price_modifier(p, now))
            for p in sorted(products, key=lambda p: p.id)
        ]
