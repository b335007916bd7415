from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import quote

from .errors import UnsupportedNetworkError

API_KEY_PLACEHOLDER = "[api-key]"

_GATEWAY = "https://gateway.thegraph.com/api/" + API_KEY_PLACEHOLDER + "/subgraphs/id/"

# Collection subgraph deployments, keyed by EVM chain id.
NETWORK_ENDPOINTS: Mapping[str, str] = MappingProxyType(
    {
        "1": _GATEWAY + "8ZcjJ4cbFsqbxHBfTGZCPf8GtAdgt5YmKCQq8hTnBxrx",
        "10": _GATEWAY + "5XqPmWe6gjyrJtFn9cLy237i4cWw2j9HcUJEXsP5qGtH",
        "137": _GATEWAY + "3fG1WcvBXSsLShW4AeMvyAjBSkwV3Y8KJAyfmHeGSu7Q",
        "8453": _GATEWAY + "FxcxGzDmdXuE4rCNaxmHp6rvn3rqVJ98AT9hQxXRqAa4",
        "42161": _GATEWAY + "6ZrwqVpF5iz5wVQLB2xSbVxEb8wZyN1D5D9nW4tyKxFe",
    }
)


def supported_chain_ids(endpoints: Mapping[str, str] = NETWORK_ENDPOINTS) -> tuple[str, ...]:
    return tuple(sorted(endpoints, key=_chain_sort_key))


def resolve_endpoint(
    chain_id: str,
    api_key: str,
    endpoints: Mapping[str, str] = NETWORK_ENDPOINTS,
) -> str:
    """Return the query URL for ``chain_id`` with ``api_key`` percent-encoded into it.

    The id has to be a key of ``endpoints`` and parse as an integer; anything
    else raises :class:`UnsupportedNetworkError` before a request is made.
    """
    template = endpoints.get(chain_id)
    if template is None or not _is_numeric(chain_id):
        raise UnsupportedNetworkError(chain_id, supported_chain_ids(endpoints))
    return template.replace(API_KEY_PLACEHOLDER, quote(api_key, safe=""), 1)


def _is_numeric(value: str) -> bool:
    try:
        int(value)
    except (TypeError, ValueError):
        return False
    return True


def _chain_sort_key(chain_id: str) -> tuple[int, int | str]:
    if _is_numeric(chain_id):
        return (0, int(chain_id))
    return (1, chain_id)
