from __future__ import annotations

import enum
import logging
from collections.abc import Mapping

from .adapters import PAGE_SIZE, PageSource, SubgraphAdapter
from .errors import MissingDataError, PaginationError
from .models import Tag
from .networks import NETWORK_ENDPOINTS, resolve_endpoint
from .transform import transform_page

logger = logging.getLogger(__name__)

INITIAL_CURSOR = "0"


class PaginationState(enum.Enum):
    FETCHING_NEXT_PAGE = "fetching-next-page"
    DONE = "done"


class TagFetcher:
    """Walks every page of collections on a network and turns them into tags.

    Pages are requested one at a time with an ``id_gt`` cursor. A page shorter
    than ``page_size`` ends the walk. A failed page aborts the whole call with
    :class:`PaginationError`; tags gathered from earlier pages are dropped.
    """

    def __init__(
        self,
        source: PageSource | None = None,
        endpoints: Mapping[str, str] = NETWORK_ENDPOINTS,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.source = source or SubgraphAdapter()
        self.endpoints = endpoints
        self.page_size = page_size

    def fetch_tags(self, chain_id: str, api_key: str) -> list[Tag]:
        url = resolve_endpoint(chain_id, api_key, self.endpoints)

        tags: list[Tag] = []
        cursor = INITIAL_CURSOR
        page_number = 0
        state = PaginationState.FETCHING_NEXT_PAGE
        while state is PaginationState.FETCHING_NEXT_PAGE:
            page_number += 1
            logger.debug("Fetching page %d for chain %s after id %r", page_number, chain_id, cursor)
            try:
                records = self.source.fetch_page(url, cursor)
                next_cursor = _last_id(records) if len(records) == self.page_size else None
            except Exception as exc:
                error = PaginationError(chain_id, cursor, page_number, exc)
                logger.error("%s", error)
                raise error from exc

            tags.extend(transform_page(chain_id, records))
            logger.debug("Page %d for chain %s returned %d records", page_number, chain_id, len(records))

            if next_cursor is not None:
                cursor = next_cursor
            else:
                state = PaginationState.DONE

        logger.info("Fetched %d tags for chain %s in %d pages", len(tags), chain_id, page_number)
        return tags

    def return_tags(self, chain_id: str, api_key: str) -> list[Tag]:
        return self.fetch_tags(chain_id, api_key)


def fetch_tags(chain_id: str, api_key: str) -> list[Tag]:
    with SubgraphAdapter() as source:
        return TagFetcher(source).fetch_tags(chain_id, api_key)


def _last_id(records: list) -> str:
    last = records[-1]
    last_id = last.get("id") if isinstance(last, Mapping) else None
    if not isinstance(last_id, str):
        raise MissingDataError("last record of a full page has no id to continue from", last)
    return last_id
