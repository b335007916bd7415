from __future__ import annotations

import logging
from typing import Any

import requests

from ..errors import GraphQLError, HttpError, MissingDataError, RequestTimeoutError, TransportError
from ..models import CollectionRecord

logger = logging.getLogger(__name__)

PAGE_SIZE = 1000
DEFAULT_TIMEOUT = 30.0

COLLECTIONS_QUERY = """
query GetCollections($last_id: String) {
  collections(
    first: 1000,
    orderBy: id,
    orderDirection: asc,
    where: {id_gt: $last_id}
  ) {
    id
    symbol
    name
  }
}
""".strip()

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class SubgraphAdapter:
    """Fetches one page of collections from a subgraph GraphQL endpoint."""

    def __init__(self, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> SubgraphAdapter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch_page(self, url: str, cursor: str) -> list[CollectionRecord]:
        body = {"query": COLLECTIONS_QUERY, "variables": {"last_id": cursor}}
        try:
            response = self.session.post(url, json=body, headers=REQUEST_HEADERS, timeout=self.timeout)
        except requests.Timeout as exc:
            raise RequestTimeoutError(self.timeout) from exc
        except requests.RequestException as exc:
            # requests puts the URL, and with it the API key, into its messages.
            raise TransportError(type(exc).__name__) from exc

        if not 200 <= response.status_code < 300:
            raise HttpError(response.status_code)

        payload = response.json()
        return self._collections(payload)

    def _collections(self, payload: Any) -> list[CollectionRecord]:
        if not isinstance(payload, dict):
            raise MissingDataError("response body is not a JSON object", payload)

        errors = payload.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            messages = [_error_message(error) for error in errors]
            for message in messages:
                logger.error("GraphQL error: %s", message)
            raise GraphQLError(messages)

        data = payload.get("data")
        collections = data.get("collections") if isinstance(data, dict) else None
        if not isinstance(collections, list):
            raise MissingDataError("No collections data found.", payload)
        return collections


def _error_message(error: Any) -> str:
    if isinstance(error, dict) and "message" in error:
        return str(error["message"])
    return str(error)
