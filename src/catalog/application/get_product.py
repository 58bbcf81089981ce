"""Application service: Get Product use case (query).

A product is only visible while its organization is active; the view
carries the price modifier in effect right now.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from catalog.application.dto import ProductView
from catalog.application.guards import ensure_active, load_product, require_organization
from catalog.domain.repository.organization_lookup import OrganizationLookup
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing import effective_price_modifier


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        organizations: OrganizationLookup,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._organizations = organizations
        self._clock = clock

    def handle(self, product_id: int) -> ProductView:
        product = load_product(self._product_repo, product_id)

        organization = require_organization(self._organizations, product.organization_id)
        ensure_active(organization)

        modifier = effective_price_modifier(product, self._clock())
        return ProductView.from_product(product, price_modifier=modifier)
