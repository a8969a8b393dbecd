"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Each GraphQL query decodes into its own strict shape instead of one
  struct where unrelated fields silently default.
- The walk report serializes cleanly for export.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Organization(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Organization name on the code host.")


class Repository(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Repository name (e.g. 'github.com/org/repo').")


# Query: organizations(first: $first) { nodes { name } }


class OrganizationConnection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nodes: list[Organization] = Field(default_factory=list)


class OrganizationsData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    organizations: OrganizationConnection | None = None


# Query: organization(name: $name) { repositories(first: $first) { nodes { name } } }


class RepositoryConnection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nodes: list[Repository] = Field(default_factory=list)


class OrganizationNode(BaseModel):
    model_config = ConfigDict(extra="ignore")

    repositories: RepositoryConnection | None = None


class OrganizationRepositoriesData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    organization: OrganizationNode | None = None


# Query: repository(name: $name) { file(name: $path) { isDirectory } }


class FileEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    is_directory: bool = Field(
        default=False,
        alias="isDirectory",
        description="True when the path resolves to a directory rather than a file.",
    )


class RepositoryNode(BaseModel):
    model_config = ConfigDict(extra="ignore")

    file: FileEntry | None = None


class RepositoryFileData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    repository: RepositoryNode | None = None


DataT = TypeVar("DataT", bound=BaseModel)


class GraphQLErrorEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str = Field(default="Unknown error")


class GraphQLResponse(BaseModel, Generic[DataT]):
    """Envelope shared by every query; `DataT` is the per-query shape."""

    model_config = ConfigDict(extra="ignore")

    data: DataT | None = None
    errors: list[GraphQLErrorEntry] = Field(default_factory=list)


class RepositoryFailure(BaseModel):
    name: str
    error: str


class OrganizationScan(BaseModel):
    """Outcome of walking one organization."""

    name: str = Field(..., description="Organization name.")
    matches: list[str] = Field(
        default_factory=list,
        description="Repositories where the target file was reported present.",
    )
    error: str | None = Field(
        default=None,
        description="Why the repository listing failed (organization skipped).",
    )
    failures: list[RepositoryFailure] = Field(
        default_factory=list,
        description="Repositories whose file check failed and were skipped.",
    )


class WalkReport(BaseModel):
    """Aggregate of a full walk; only kept in memory unless exported."""

    target_file: str
    api_base_url: str
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    organizations: list[OrganizationScan] = Field(default_factory=list)

    @property
    def match_count(self) -> int:
        return sum(len(org.matches) for org in self.organizations)
