"""Application service: Submit Product Creation Request use case.

Only the registered owner of an active organization may propose a
product for it. Admin identities get no special treatment here.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductInput, RequestView
from catalog.application.guards import ensure_active, ensure_may_manage, require_organization
from catalog.domain.model.creation_request import CreationRequest
from catalog.domain.model.organization import CallerIdentity
from catalog.domain.repository.organization_lookup import OrganizationLookup
from catalog.domain.repository.request_repository import RequestRepository

logger = logging.getLogger(__name__)


class SubmitRequestHandler:

    def __init__(
        self,
        request_repo: RequestRepository,
        organizations: OrganizationLookup,
    ) -> None:
        self._request_repo = request_repo
        self._organizations = organizations

    def handle(self, caller: CallerIdentity, product: ProductInput) -> RequestView:
        details = product.to_details()

        organization = require_organization(self._organizations, details.organization_id)
        ensure_active(organization)
        ensure_may_manage(caller, organization.id, organization, admin_override=False)

        request = self._request_repo.add(CreationRequest(id=None, details=details))
        logger.info(
            "Product creation request %s for %r submitted by %r",
            request.id, details.name, caller.username,
        )
        return RequestView.from_request(request)
