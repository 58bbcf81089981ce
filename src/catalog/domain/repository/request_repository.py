"""Abstract repository for pending CreationRequests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from catalog.domain.model.creation_request import CreationRequest


class RequestRepository(ABC):

    @abstractmethod
    def get_by_id(self, request_id: int) -> CreationRequest | None:
        """Return a pending request by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[CreationRequest]:
        """Return every pending request."""

    @abstractmethod
    def add(self, request: CreationRequest) -> CreationRequest:
        """Store a new request, assigning its ID from the request sequence."""

    @abstractmethod
    def delete(self, request_id: int) -> bool:
        """Remove a request. Returns False if it was already gone."""

    @abstractmethod
    def locked(self, request_id: int) -> AbstractContextManager[None]:
        """Hold the per-request lock while a request is being resolved.

        Approval and rejection of the same request never overlap.
        """
