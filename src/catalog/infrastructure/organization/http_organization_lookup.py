"""OrganizationLookup backed by the organization registry's HTTP API.

``GET {base_url}/api/organization/{id}`` answers with
``{"id", "ownerId", "isFrozen", "isDeleted"}``. A 404 means the
organization does not exist; anything else that is not a well-formed
success is an infrastructure fault.
"""

from __future__ import annotations

import logging

import httpx

from catalog.domain.exceptions import OrganizationRegistryError
from catalog.domain.model.organization import Organization
from catalog.domain.repository.organization_lookup import OrganizationLookup

logger = logging.getLogger(__name__)


class HttpOrganizationLookup(OrganizationLookup):

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @classmethod
    def from_url(cls, base_url: str, timeout: float) -> HttpOrganizationLookup:
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def lookup(self, organization_id: int) -> Organization | None:
        try:
            response = self._client.get(f"/api/organization/{organization_id}")
        except httpx.HTTPError as exc:
            logger.error("Organization registry unreachable: %s", exc)
            raise OrganizationRegistryError(
                f"Could not look up organization {organization_id}: {exc}"
            ) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        if response.is_error:
            logger.error(
                "Organization registry answered %s for organization %s",
                response.status_code, organization_id,
            )
            raise OrganizationRegistryError(
                f"Organization registry answered {response.status_code} "
                f"for organization {organization_id}"
            )

        try:
            body = response.json()
            return Organization(
                id=int(body["id"]),
                owner_id=int(body["ownerId"]),
                is_frozen=_flag(body, "isFrozen"),
                is_deleted=_flag(body, "isDeleted"),
            )
        except (ValueError, KeyError, TypeError) as exc:
            logger.error("Malformed organization %s from registry: %s", organization_id, exc)
            raise OrganizationRegistryError(
                f"Malformed response for organization {organization_id}"
            ) from exc

    def close(self) -> None:
        self._client.close()


def _flag(body: dict, key: str) -> bool:
    value = body.get(key, False)
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a boolean, got {value!r}")
    return value
