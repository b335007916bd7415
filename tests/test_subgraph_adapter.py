from __future__ import annotations

import logging
from unittest.mock import Mock

import pytest
import requests

from collection_tags import (
    COLLECTIONS_QUERY,
    GraphQLError,
    HttpError,
    MissingDataError,
    RequestTimeoutError,
    SubgraphAdapter,
    TransportError,
)


def _session(status_code: int = 200, payload: object = None) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    session = Mock()
    session.post.return_value = response
    return session


def test_posts_query_with_cursor() -> None:
    rows = [{"id": "0x01", "symbol": "A", "name": "Alpha"}]
    session = _session(payload={"data": {"collections": rows}})
    adapter = SubgraphAdapter(session=session, timeout=5.0)

    assert adapter.fetch_page("https://example.com/graphql", "0x00") == rows

    session.post.assert_called_once_with(
        "https://example.com/graphql",
        json={"query": COLLECTIONS_QUERY, "variables": {"last_id": "0x00"}},
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        timeout=5.0,
    )


def test_query_asks_for_ascending_pages_of_1000() -> None:
    assert "first: 1000" in COLLECTIONS_QUERY
    assert "orderBy: id" in COLLECTIONS_QUERY
    assert "orderDirection: asc" in COLLECTIONS_QUERY
    assert "id_gt: $last_id" in COLLECTIONS_QUERY


def test_non_success_status_raises_http_error() -> None:
    adapter = SubgraphAdapter(session=_session(status_code=500))

    with pytest.raises(HttpError) as exc_info:
        adapter.fetch_page("https://example.com/graphql", "0")

    assert exc_info.value.status == 500


def test_graphql_errors_are_logged_individually(caplog) -> None:
    payload = {"errors": [{"message": "first problem"}, {"message": "second problem"}]}
    adapter = SubgraphAdapter(session=_session(payload=payload))

    with caplog.at_level(logging.ERROR, logger="collection_tags"):
        with pytest.raises(GraphQLError) as exc_info:
            adapter.fetch_page("https://example.com/graphql", "0")

    assert exc_info.value.messages == ["first problem", "second problem"]
    logged = [r.getMessage() for r in caplog.records if r.name == "collection_tags.adapters.subgraph"]
    assert logged == ["GraphQL error: first problem", "GraphQL error: second problem"]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"data": None},
        {"data": {}},
        {"data": {"collections": None}},
        ["not", "an", "object"],
    ],
)
def test_missing_collections_raises(payload: object) -> None:
    adapter = SubgraphAdapter(session=_session(payload=payload))

    with pytest.raises(MissingDataError):
        adapter.fetch_page("https://example.com/graphql", "0")


def test_empty_collections_is_a_valid_page() -> None:
    adapter = SubgraphAdapter(session=_session(payload={"data": {"collections": []}}))
    assert adapter.fetch_page("https://example.com/graphql", "0") == []


def test_timeout_becomes_request_timeout_error() -> None:
    session = Mock()
    session.post.side_effect = requests.Timeout("too slow")
    adapter = SubgraphAdapter(session=session, timeout=1.5)

    with pytest.raises(RequestTimeoutError) as exc_info:
        adapter.fetch_page("https://example.com/graphql", "0")

    assert exc_info.value.timeout == 1.5
    assert isinstance(exc_info.value.__cause__, requests.Timeout)


def test_connection_error_message_omits_the_url() -> None:
    session = Mock()
    session.post.side_effect = requests.ConnectionError("Max retries exceeded with url: /api/KEY123/x")
    adapter = SubgraphAdapter(session=session)

    with pytest.raises(TransportError) as exc_info:
        adapter.fetch_page("http://127.0.0.1:9/api/KEY123/x", "0")

    assert exc_info.value.kind == "ConnectionError"
    assert "KEY123" not in str(exc_info.value)
