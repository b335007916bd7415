import logging

from .adapters import COLLECTIONS_QUERY, PAGE_SIZE, PageSource, SubgraphAdapter
from .errors import (
    GraphQLError,
    HttpError,
    MissingDataError,
    PaginationError,
    RecordTransformError,
    RequestTimeoutError,
    TagFetchError,
    TransportError,
    UnsupportedNetworkError,
)
from .fetcher import INITIAL_CURSOR, PaginationState, TagFetcher, fetch_tags
from .models import CollectionRecord, Tag, truncate_symbol
from .networks import API_KEY_PLACEHOLDER, NETWORK_ENDPOINTS, resolve_endpoint, supported_chain_ids
from .transform import build_tag, transform_page

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "API_KEY_PLACEHOLDER",
    "COLLECTIONS_QUERY",
    "CollectionRecord",
    "GraphQLError",
    "HttpError",
    "INITIAL_CURSOR",
    "MissingDataError",
    "NETWORK_ENDPOINTS",
    "PAGE_SIZE",
    "PageSource",
    "PaginationError",
    "PaginationState",
    "RecordTransformError",
    "RequestTimeoutError",
    "SubgraphAdapter",
    "Tag",
    "TagFetchError",
    "TagFetcher",
    "TransportError",
    "UnsupportedNetworkError",
    "build_tag",
    "fetch_tags",
    "resolve_endpoint",
    "supported_chain_ids",
    "transform_page",
    "truncate_symbol",
]
