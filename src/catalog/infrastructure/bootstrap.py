"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Instances are memoised
so every handler in the process shares one store (and its locks).
"""

from __future__ import annotations

from functools import lru_cache

from catalog.infrastructure.config import get_settings
from catalog.infrastructure.organization.http_organization_lookup import (
    HttpOrganizationLookup,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_request_repository import (
    JsonRequestRepository,
)


@lru_cache
def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


@lru_cache
def request_repository() -> JsonRequestRepository:
    return JsonRequestRepository(get_settings().data_dir / "requests.json")


@lru_cache
def organization_lookup() -> HttpOrganizationLookup:
    settings = get_settings()
    return HttpOrganizationLookup.from_url(
        settings.organization_registry_url,
        timeout=settings.organization_registry_timeout,
    )
