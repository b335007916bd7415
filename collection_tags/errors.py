from __future__ import annotations

from typing import Any


class TagFetchError(Exception):
    pass


class UnsupportedNetworkError(TagFetchError, ValueError):
    def __init__(self, chain_id: str, supported: tuple[str, ...]) -> None:
        self.chain_id = chain_id
        self.supported = supported
        super().__init__(
            f"Unsupported Chain ID: {chain_id}. Supported Chain IDs are: {', '.join(supported)}"
        )


class HttpError(TagFetchError):
    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"HTTP error! status: {status}")


class GraphQLError(TagFetchError):
    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__(f"GraphQL errors occurred ({len(self.messages)}): see logs for details")


class MissingDataError(TagFetchError):
    def __init__(self, detail: str, payload: Any = None) -> None:
        self.payload = payload
        super().__init__(detail)


class RequestTimeoutError(TagFetchError):
    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"page request timed out after {timeout}s")


class TransportError(TagFetchError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"page request failed: {kind}")


class RecordTransformError(TagFetchError):
    def __init__(self, record: Any, reason: str) -> None:
        self.record = record
        self.reason = reason
        super().__init__(f"cannot transform record {record!r}: {reason}")


class PaginationError(TagFetchError):
    """Raised to callers when a page fetch fails; the original error is the ``__cause__``."""

    def __init__(self, chain_id: str, cursor: str, page: int, cause: BaseException) -> None:
        self.chain_id = chain_id
        self.cursor = cursor
        self.page = page
        super().__init__(
            f"Error fetching collection tags for chain {chain_id} (page {page}, cursor {cursor!r}): {_describe(cause)}"
        )


def _describe(cause: BaseException) -> str:
    # Only our own messages are known to be free of the request URL.
    if isinstance(cause, TagFetchError):
        return str(cause)
    return type(cause).__name__
