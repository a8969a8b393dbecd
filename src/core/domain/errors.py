"""Error taxonomy for API walks.

Every failure the Request Executor can produce is a `WalkerError`, so the
orchestrator can skip a single organization or repository without catching
programming errors.
"""

from __future__ import annotations

from typing import Sequence


class WalkerError(Exception):
    """Base class for failures talking to the code host."""


class TransportError(WalkerError):
    """The request could not be issued or the connection failed."""


class APIStatusError(WalkerError):
    """The API answered with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status code {status_code}: {body}")


class ResponseDecodeError(WalkerError):
    """The response body is not JSON or does not match the expected envelope."""


class GraphQLErrors(WalkerError):
    """The API returned a non-empty `errors` list."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("GraphQL errors: " + "; ".join(self.messages))
