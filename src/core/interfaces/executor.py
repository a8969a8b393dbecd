"""Query executor contract.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- Lets the walk pipeline run against the HTTP executor or a test double
  without coupling the Core to httpx.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

DataT = TypeVar("DataT", bound=BaseModel)


@runtime_checkable
class QueryExecutor(Protocol):
    """Minimal contract for running one GraphQL query.

    Design rules:
    - `execute` is synchronous: one request at a time, fully completed before returning.
    - Returns the decoded `data` object (or None) and raises `WalkerError` on any failure.
    """

    def execute(
        self,
        query: str,
        response_model: type[DataT],
        *,
        variables: Mapping[str, Any] | None = None,
    ) -> DataT | None:
        """Run `query` and decode its `data` field into `response_model`."""

        ...
