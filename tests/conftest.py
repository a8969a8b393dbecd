"""Shared test fixtures for the repo-walker test suite."""

import os

import pytest
from pydantic import BaseModel

from core.config import AppSettings
from core.domain.errors import WalkerError

API_BASE = "https://sg.example.test/.api"
GRAPHQL_URL = API_BASE + "/graphql"
TEST_TOKEN = "sgp_test_token_123"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of settings resolution."""
    for key in list(os.environ):
        if key.upper().startswith("REPO_WALKER_") or key.upper() == "SOURCEGRAPH_TOKEN":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings():
    return AppSettings(api_base_url=API_BASE, access_token=TEST_TOKEN)


class FakeExecutor:
    """In-memory `QueryExecutor` keyed by the `name` variable of each query.

    `organizations` is returned for the organization listing; `repositories`
    maps organization -> list of names or a WalkerError; `files` maps
    repository -> raw `repository` payload (dict/None) or a WalkerError.
    """

    def __init__(self, organizations=None, repositories=None, files=None, organizations_error=None):
        self.organizations = organizations or []
        self.repositories = repositories or {}
        self.files = files or {}
        self.organizations_error = organizations_error
        self.calls = []

    def execute(self, query, response_model: type[BaseModel], *, variables=None):
        variables = dict(variables or {})
        self.calls.append((response_model.__name__, variables))
        name = response_model.__name__
        if name == "OrganizationsData":
            if self.organizations_error:
                raise self.organizations_error
            payload = {"organizations": {"nodes": [{"name": n} for n in self.organizations]}}
        elif name == "OrganizationRepositoriesData":
            value = self.repositories.get(variables["name"], [])
            if isinstance(value, WalkerError):
                raise value
            payload = {"organization": {"repositories": {"nodes": [{"name": n} for n in value]}}}
        elif name == "RepositoryFileData":
            value = self.files.get(variables["name"], {"file": {"isDirectory": False}})
            if isinstance(value, WalkerError):
                raise value
            payload = {"repository": value}
        else:  # pragma: no cover
            raise AssertionError(f"unexpected model {name}")
        return response_model.model_validate(payload)


@pytest.fixture
def make_executor():
    return FakeExecutor
