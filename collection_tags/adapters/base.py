from __future__ import annotations

from typing import Protocol

from ..models import CollectionRecord


class PageSource(Protocol):
    def fetch_page(self, url: str, cursor: str) -> list[CollectionRecord]:
        ...
