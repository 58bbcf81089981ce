"""Abstract client for the external organization registry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.organization import Organization


class OrganizationLookup(ABC):

    @abstractmethod
    def lookup(self, organization_id: int) -> Organization | None:
        """Return the organization's current state, or None if unknown.

        Raises OrganizationRegistryError when the registry cannot answer;
        that is never reported as "not found".
        """
