"""Tests for adapters.graphql_client — the Request Executor."""

import json

import httpx
import pytest
import respx

from adapters.graphql_client import GraphQLExecutor
from core.config import AppSettings
from core.domain.errors import (
    APIStatusError,
    GraphQLErrors,
    ResponseDecodeError,
    TransportError,
    WalkerError,
)
from core.domain.models import OrganizationsData, RepositoryFileData

from conftest import API_BASE, GRAPHQL_URL, TEST_TOKEN

QUERY = "query Organizations($first: Int!) { organizations(first: $first) { nodes { name } } }"


# ── request shape ────────────────────────────────────────────────────────────


class TestRequest:
    @respx.mock
    def test_posts_query_and_variables(self, settings):
        route = respx.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(200, json={"data": {"organizations": {"nodes": []}}})
        )

        GraphQLExecutor(settings).execute(QUERY, OrganizationsData, variables={"first": 100})

        assert route.called
        body = json.loads(route.calls[0].request.content)
        assert body == {"query": QUERY, "variables": {"first": 100}}

    @respx.mock
    def test_omits_variables_when_none(self, settings):
        route = respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(200, json={"data": None}))

        GraphQLExecutor(settings).execute("{ organizations(first: 1) { nodes { name } } }", OrganizationsData)

        body = json.loads(route.calls[0].request.content)
        assert "variables" not in body

    @respx.mock
    def test_sends_bearer_token_and_json_headers(self, settings):
        route = respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(200, json={"data": None}))

        GraphQLExecutor(settings).execute(QUERY, OrganizationsData, variables={"first": 1})

        request = route.calls[0].request
        assert request.headers["authorization"] == f"Bearer {TEST_TOKEN}"
        assert request.headers["content-type"] == "application/json"
        assert "user-agent" in request.headers

    @respx.mock
    def test_no_authorization_without_token(self):
        route = respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(200, json={"data": None}))

        GraphQLExecutor(AppSettings(api_base_url=API_BASE)).execute(QUERY, OrganizationsData)

        assert "authorization" not in route.calls[0].request.headers

    @respx.mock
    def test_trailing_slash_in_base_url(self):
        route = respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(200, json={"data": None}))

        GraphQLExecutor(AppSettings(api_base_url=API_BASE + "/")).execute(QUERY, OrganizationsData)

        assert route.called


# ── decoding ─────────────────────────────────────────────────────────────────


class TestDecode:
    @respx.mock
    def test_returns_typed_data(self, settings):
        respx.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(
                200,
                json={"data": {"organizations": {"nodes": [{"name": "acme"}, {"name": "globex"}]}}},
            )
        )

        data = GraphQLExecutor(settings).execute(QUERY, OrganizationsData)

        assert isinstance(data, OrganizationsData)
        assert [o.name for o in data.organizations.nodes] == ["acme", "globex"]

    @respx.mock
    def test_null_data_returns_none(self, settings):
        respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(200, json={"data": None}))

        assert GraphQLExecutor(settings).execute(QUERY, OrganizationsData) is None

    @respx.mock
    def test_ignores_unknown_fields(self, settings):
        respx.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(
                200,
                json={"data": {"repository": {"file": {"isDirectory": True, "path": "x"}}}, "extensions": {}},
            )
        )

        data = GraphQLExecutor(settings).execute(QUERY, RepositoryFileData)

        assert data.repository.file.is_directory is True


# ── failures ─────────────────────────────────────────────────────────────────


class TestFailures:
    @respx.mock
    def test_non_200_includes_status_and_body(self, settings):
        respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(401, text="Invalid access token."))

        with pytest.raises(APIStatusError) as excinfo:
            GraphQLExecutor(settings).execute(QUERY, OrganizationsData)

        assert excinfo.value.status_code == 401
        assert excinfo.value.body == "Invalid access token."
        assert "401" in str(excinfo.value)
        assert "Invalid access token." in str(excinfo.value)

    @respx.mock
    def test_malformed_json(self, settings):
        respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ResponseDecodeError):
            GraphQLExecutor(settings).execute(QUERY, OrganizationsData)

    @respx.mock
    def test_wrong_shape_is_decode_error(self, settings):
        respx.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(200, json={"data": {"organizations": {"nodes": "nope"}}})
        )

        with pytest.raises(ResponseDecodeError):
            GraphQLExecutor(settings).execute(QUERY, OrganizationsData)

    @respx.mock
    def test_error_list_reports_every_message(self, settings):
        respx.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "data": {"organizations": {"nodes": [{"name": "acme"}]}},
                    "errors": [
                        {"message": "field not found", "locations": [{"line": 1, "column": 2}]},
                        {"message": "rate limited"},
                    ],
                },
            )
        )

        with pytest.raises(GraphQLErrors) as excinfo:
            GraphQLExecutor(settings).execute(QUERY, OrganizationsData)

        assert excinfo.value.messages == ["field not found", "rate limited"]
        assert "field not found" in str(excinfo.value)
        assert "rate limited" in str(excinfo.value)

    @respx.mock
    def test_empty_error_list_is_success(self, settings):
        respx.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(200, json={"data": {"organizations": {"nodes": []}}, "errors": []})
        )

        data = GraphQLExecutor(settings).execute(QUERY, OrganizationsData)

        assert data.organizations.nodes == []

    @respx.mock
    def test_transport_failure(self, settings):
        respx.post(GRAPHQL_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(TransportError, match="connection refused") as excinfo:
            GraphQLExecutor(settings).execute(QUERY, OrganizationsData)

        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_no_retry_on_failure(self, settings):
        route = respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(502, text="bad gateway"))

        with pytest.raises(WalkerError):
            GraphQLExecutor(settings).execute(QUERY, OrganizationsData)

        assert route.call_count == 1
