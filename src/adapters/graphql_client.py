"""Request Executor: one authenticated GraphQL POST per call.

Contract:
- Body is `{"query": ..., "variables": ...}`; names are never interpolated into the query text.
- No retry: the first failure is raised as a `WalkerError` subclass.
- The client is closed (and the body fully read) before returning, on every path.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import APIStatusError, GraphQLErrors, ResponseDecodeError, TransportError
from core.domain.models import GraphQLResponse

logger = logging.getLogger(__name__)

DataT = TypeVar("DataT", bound=BaseModel)


class GraphQLExecutor:
    """Runs GraphQL queries against `<api_base_url>/graphql`."""

    def __init__(self, settings: AppSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def execute(
        self,
        query: str,
        response_model: type[DataT],
        *,
        variables: Mapping[str, Any] | None = None,
    ) -> DataT | None:
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = dict(variables)

        url = self._settings.graphql_url
        logger.debug("POST %s (%s) variables=%s", url, response_model.__name__, payload.get("variables"))

        try:
            with build_client(self._settings) as client:
                response = client.post(url, json=payload)
        except httpx.HTTPError as exc:
            raise TransportError(f"request to {url} failed: {exc}") from exc

        logger.debug("%s answered HTTP %s (%d bytes)", url, response.status_code, len(response.content))

        if response.status_code != 200:
            raise APIStatusError(response.status_code, response.text)

        try:
            envelope = GraphQLResponse[response_model].model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseDecodeError(f"could not decode {response_model.__name__} response: {exc}") from exc

        if envelope.errors:
            raise GraphQLErrors([entry.message for entry in envelope.errors])
        return envelope.data
