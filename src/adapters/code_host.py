"""Code host queries (organizations, repositories, root files).

These live in adapters because they are pure I/O: each function builds one
query, hands it to a `QueryExecutor` and unwraps the per-query shape.
Executor errors propagate unchanged.
"""

from __future__ import annotations

from core.config import DEFAULT_PAGE_SIZE, DEFAULT_TARGET_FILE
from core.domain.models import (
    Organization,
    OrganizationRepositoriesData,
    OrganizationsData,
    Repository,
    RepositoryFileData,
)
from core.interfaces.executor import QueryExecutor

ORGANIZATIONS_QUERY = """
query Organizations($first: Int!) {
  organizations(first: $first) {
    nodes {
      name
    }
  }
}
"""

ORGANIZATION_REPOSITORIES_QUERY = """
query OrganizationRepositories($name: String!, $first: Int!) {
  organization(name: $name) {
    repositories(first: $first) {
      nodes {
        name
      }
    }
  }
}
"""

REPOSITORY_FILE_QUERY = """
query RepositoryFile($name: String!, $path: String!) {
  repository(name: $name) {
    file(name: $path) {
      isDirectory
    }
  }
}
"""


def list_organizations(*, executor: QueryExecutor, first: int = DEFAULT_PAGE_SIZE) -> list[Organization]:
    data = executor.execute(ORGANIZATIONS_QUERY, OrganizationsData, variables={"first": first})
    if data is None or data.organizations is None:
        return []
    return list(data.organizations.nodes)


def list_repositories(
    *,
    executor: QueryExecutor,
    organization: str,
    first: int = DEFAULT_PAGE_SIZE,
) -> list[Repository]:
    data = executor.execute(
        ORGANIZATION_REPOSITORIES_QUERY,
        OrganizationRepositoriesData,
        variables={"name": organization, "first": first},
    )
    if data is None or data.organization is None or data.organization.repositories is None:
        return []
    return list(data.organization.repositories.nodes)


def has_root_file(
    *,
    executor: QueryExecutor,
    repository: str,
    file_name: str = DEFAULT_TARGET_FILE,
) -> bool:
    """Report whether `file_name` sits at the root of `repository`.

    Note:
    - A missing `file` (or `repository`) entry reports True, same as a file
      that is present and not a directory. Only `isDirectory: true` reports False.
    """

    data = executor.execute(
        REPOSITORY_FILE_QUERY,
        RepositoryFileData,
        variables={"name": repository, "path": file_name},
    )
    if data is None or data.repository is None or data.repository.file is None:
        return True
    return not data.repository.file.is_directory
