"""Shared checks used by several use cases.

Each guard either returns the loaded object or raises the matching
domain error after logging why.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import (
    InvalidOwnerError,
    OrganizationDeletedError,
    OrganizationFrozenError,
    OrganizationNotFoundError,
    ProductNotFoundError,
)
from catalog.domain.model.organization import CallerIdentity, Organization
from catalog.domain.model.product import Product
from catalog.domain.repository.organization_lookup import OrganizationLookup
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.ownership import may_manage

logger = logging.getLogger(__name__)


def load_product(product_repo: ProductRepository, product_id: int) -> Product:
    product = product_repo.get_by_id(product_id)
    if product is None:
        logger.warning("Product with id %s was not found", product_id)
        raise ProductNotFoundError(product_id)
    return product


def require_organization(lookup: OrganizationLookup, organization_id: int) -> Organization:
    organization = lookup.lookup(organization_id)
    if organization is None:
        logger.warning("Organization with id %s was not found", organization_id)
        raise OrganizationNotFoundError(organization_id)
    return organization


def ensure_not_frozen(organization: Organization) -> None:
    if organization.is_frozen:
        logger.warning("Organization with id %s is frozen", organization.id)
        raise OrganizationFrozenError(organization.id)


def ensure_active(organization: Organization) -> None:
    """Reject frozen and deleted organizations, in that order."""
    ensure_not_frozen(organization)
    if organization.is_deleted:
        logger.warning("Organization with id %s is deleted", organization.id)
        raise OrganizationDeletedError(organization.id)


def ensure_may_manage(
    caller: CallerIdentity,
    organization_id: int,
    organization: Organization | None,
    admin_override: bool,
) -> None:
    """Raise InvalidOwnerError unless ``caller`` may act for the organization.

    A missing organization has no owner, so only an admin override passes.
    """
    owner_id = organization.owner_id if organization is not None else None
    if not may_manage(caller, owner_id, admin_override):
        logger.warning(
            "User %r is not an owner of organization %s", caller.username, organization_id
        )
        raise InvalidOwnerError(organization_id, owner_id, caller.id)
