from .base import PageSource
from .subgraph import COLLECTIONS_QUERY, DEFAULT_TIMEOUT, PAGE_SIZE, SubgraphAdapter

__all__ = ["COLLECTIONS_QUERY", "DEFAULT_TIMEOUT", "PAGE_SIZE", "PageSource", "SubgraphAdapter"]
