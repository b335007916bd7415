from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import RecordTransformError
from .models import Tag, contract_address, truncate_symbol

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("id", "symbol")


def build_tag(chain_id: str, record: Any) -> Tag:
    if not isinstance(record, Mapping):
        raise RecordTransformError(record, "record is not an object")
    for field_name in _REQUIRED_FIELDS:
        value = record.get(field_name)
        if not isinstance(value, str):
            raise RecordTransformError(dict(record), f"{field_name} must be a string, got {type(value).__name__}")

    name = record.get("name")
    if name is None:
        name = ""
    elif not isinstance(name, str):
        raise RecordTransformError(dict(record), f"name must be a string, got {type(name).__name__}")

    symbol = record["symbol"]
    return Tag(
        contract_address=contract_address(chain_id, record["id"]),
        public_name_tag=f"{truncate_symbol(symbol)} token",
        project_name=name,
        website_link="",
        public_note=f"The {name} ({symbol}) collection contract.",
    )


def transform_page(chain_id: str, records: Iterable[Any]) -> list[Tag]:
    """Convert one page of records, dropping (and logging) any that cannot be converted."""
    tags: list[Tag] = []
    for record in records:
        try:
            tags.append(build_tag(chain_id, record))
        except RecordTransformError as exc:
            logger.warning("Skipping record on chain %s: %s (record=%r)", chain_id, exc.reason, exc.record)
    return tags
