"""Application service: Reject Product Creation Request use case."""

from __future__ import annotations

import logging

from catalog.application.show_request import load_request
from catalog.domain.repository.request_repository import RequestRepository

logger = logging.getLogger(__name__)


class RejectRequestHandler:

    def __init__(self, request_repo: RequestRepository) -> None:
        self._request_repo = request_repo

    def handle(self, request_id: int) -> None:
        with self._request_repo.locked(request_id):
            request = load_request(self._request_repo, request_id)
            request.reject()
            self._request_repo.delete(request_id)

        logger.info("Product creation request %s was rejected", request_id)
