"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.code_host import list_organizations
from adapters.graphql_client import GraphQLExecutor
from cli.ui_components import build_doctor_table, print_banner
from core.config import AppSettings
from core.domain.errors import WalkerError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()
_err_console = Console(stderr=True)


def _check_graphql(settings: AppSettings) -> tuple[bool, str]:
    try:
        orgs = list_organizations(executor=GraphQLExecutor(settings), first=1)
    except WalkerError as exc:
        return False, str(exc)
    return True, f"reachable ({len(orgs)} organization(s) on first page of 1)"


@app.command()
def run(
    base_url: str | None = typer.Option(None, "--base-url", help="Override the API base URL."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = AppSettings().with_overrides(api_base_url=base_url)
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    print_banner(_console)
    table = build_doctor_table()

    if settings.access_token:
        table.add_row("Access token", "OK", "Bearer token configured")
    else:
        table.add_row(
            "Access token",
            "MISSING",
            "Set REPO_WALKER_ACCESS_TOKEN or SOURCEGRAPH_TOKEN; requests go out unauthenticated",
        )
    table.add_row("API endpoint", "OK", settings.graphql_url)
    table.add_row("Target file", "OK", settings.target_file)
    table.add_row("Page size", "OK", str(settings.page_size))

    ok_api, detail_api = _check_graphql(settings)
    table.add_row("GraphQL connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Note:[/yellow] `repo-walker walk` exits with code 1 when the organization listing fails."
        )
