"""Application service: Show Product Creation Requests use case (query)."""

from __future__ import annotations

import logging

from catalog.application.dto import RequestView
from catalog.domain.exceptions import RequestNotFoundError
from catalog.domain.model.creation_request import CreationRequest
from catalog.domain.repository.request_repository import RequestRepository

logger = logging.getLogger(__name__)


def load_request(request_repo: RequestRepository, request_id: int) -> CreationRequest:
    request = request_repo.get_by_id(request_id)
    if request is None:
        logger.warning("Request with id %s was not found", request_id)
        raise RequestNotFoundError(request_id)
    return request


class ShowRequestHandler:

    def __init__(self, request_repo: RequestRepository) -> None:
        self._request_repo = request_repo

    def get(self, request_id: int) -> RequestView:
        return RequestView.from_request(load_request(self._request_repo, request_id))

    def list_all(self) -> list[RequestView]:
        requests = sorted(self._request_repo.list_all(), key=lambda r: r.id)
        return [RequestView.from_request(r) for r in requests]
