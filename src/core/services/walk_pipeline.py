"""Walk orchestration: organizations -> repositories -> root file check.

The CLI delegates traversal to these helpers and only reacts to hooks, which
keeps printing out of the core logic and lets tests drive the walk with a
fake executor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from adapters.code_host import has_root_file, list_organizations, list_repositories
from core.config import DEFAULT_PAGE_SIZE, DEFAULT_TARGET_FILE
from core.domain.errors import WalkerError
from core.domain.models import OrganizationScan, RepositoryFailure, WalkReport
from core.interfaces.executor import QueryExecutor


@dataclass
class WalkRequest:
    """Parameters that control a walk."""

    target_file: str = DEFAULT_TARGET_FILE
    page_size: int = DEFAULT_PAGE_SIZE
    api_base_url: str = ""


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers, fired as the walk progresses."""

    organization: Callable[[str], None] | None = None
    match: Callable[[str, str], None] | None = None
    organization_failed: Callable[[str, WalkerError], None] | None = None
    repository_failed: Callable[[str, str, WalkerError], None] | None = None


def walk_organization(
    *,
    executor: QueryExecutor,
    organization: str,
    request: WalkRequest,
    hooks: PipelineHooks,
) -> OrganizationScan:
    """Check every repository of one organization; failures are recorded, not raised."""

    scan = OrganizationScan(name=organization)
    try:
        repositories = list_repositories(executor=executor, organization=organization, first=request.page_size)
    except WalkerError as exc:
        scan.error = str(exc)
        if hooks.organization_failed:
            hooks.organization_failed(organization, exc)
        return scan

    for repo in repositories:
        try:
            found = has_root_file(executor=executor, repository=repo.name, file_name=request.target_file)
        except WalkerError as exc:
            scan.failures.append(RepositoryFailure(name=repo.name, error=str(exc)))
            if hooks.repository_failed:
                hooks.repository_failed(organization, repo.name, exc)
            continue
        if found:
            scan.matches.append(repo.name)
            if hooks.match:
                hooks.match(organization, repo.name)
    return scan


def run_walk(
    *,
    executor: QueryExecutor,
    request: WalkRequest | None = None,
    hooks: PipelineHooks | None = None,
) -> WalkReport:
    """Walk all organizations sequentially.

    Raises:
        WalkerError: when the organization listing itself fails.
    """

    request = request or WalkRequest()
    hooks = hooks or PipelineHooks()

    organizations = list_organizations(executor=executor, first=request.page_size)
    report = WalkReport(target_file=request.target_file, api_base_url=request.api_base_url)

    for org in organizations:
        if hooks.organization:
            hooks.organization(org.name)
        report.organizations.append(
            walk_organization(executor=executor, organization=org.name, request=request, hooks=hooks)
        )
    return report
