from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict


MAX_SYMBOL_LENGTH = 45
TRUNCATED_SYMBOL_PREFIX = 42
TRUNCATION_MARKER = "..."


class CollectionRecord(TypedDict):
    id: str
    symbol: str
    name: str


@dataclass(frozen=True)
class Tag:
    contract_address: str
    public_name_tag: str
    project_name: str
    website_link: str
    public_note: str

    def as_dict(self) -> dict[str, str]:
        return {
            "contractAddress": self.contract_address,
            "publicNameTag": self.public_name_tag,
            "projectName": self.project_name,
            "websiteLink": self.website_link,
            "publicNote": self.public_note,
        }


def truncate_symbol(symbol: str) -> str:
    cleaned = symbol.strip()
    if len(cleaned) <= MAX_SYMBOL_LENGTH:
        return cleaned
    return cleaned[:TRUNCATED_SYMBOL_PREFIX] + TRUNCATION_MARKER


def contract_address(chain_id: str, address: str) -> str:
    return f"eip155:{chain_id}:{address}"
