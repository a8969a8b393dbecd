"""repo-walker CLI (Typer).

Commands:
- `walk`: list organizations, their repositories, and print the ones holding the target file.
- `doctor run`: configuration and connectivity diagnostics.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.graphql_client import GraphQLExecutor
from adapters.json_exporter import export_report_json
from cli import doctor
from cli.ui_components import print_line, print_match, print_organization
from core.config import AppSettings
from core.domain.errors import WalkerError
from core.services.walk_pipeline import PipelineHooks, WalkRequest, run_walk

app = typer.Typer(
    no_args_is_help=True,
    help="Find repositories that carry a given file at their root, organization by organization.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )
    # httpx/httpcore debug output duplicates ours.
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _build_hooks(target_file: str) -> PipelineHooks:
    def on_organization_failed(org: str, exc: WalkerError) -> None:
        print_line(_console, f"Error fetching repositories for organization {org} : {exc}")

    def on_repository_failed(_org: str, repo: str, exc: WalkerError) -> None:
        print_line(_console, f"Error checking {target_file} for repository {repo} : {exc}")

    return PipelineHooks(
        organization=lambda org: print_organization(_console, org),
        match=lambda _org, repo: print_match(_console, repo),
        organization_failed=on_organization_failed,
        repository_failed=on_repository_failed,
    )


@app.command()
def walk(
    file: str | None = typer.Option(None, "--file", "-f", help="File name to look for at each repository root."),
    page_size: int | None = typer.Option(
        None, "--page-size", min=1, max=1000, help="Organizations/repositories requested per listing."
    ),
    base_url: str | None = typer.Option(None, "--base-url", help="Override the API base URL."),
    export_json: Path | None = typer.Option(None, "--export-json", help="Write the walk report as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request to stderr."),
) -> None:
    """Walk organizations -> repositories and print repositories holding the file."""

    _configure_logging(verbose)

    try:
        settings = AppSettings().with_overrides(target_file=file, page_size=page_size, api_base_url=base_url)
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    request = WalkRequest(
        target_file=settings.target_file,
        page_size=settings.page_size,
        api_base_url=settings.api_base_url,
    )

    try:
        report = run_walk(
            executor=GraphQLExecutor(settings),
            request=request,
            hooks=_build_hooks(settings.target_file),
        )
    except WalkerError as exc:
        print_line(_console, f"Error fetching organizations: {exc}")
        raise typer.Exit(code=1) from exc

    if export_json is not None:
        path = export_report_json(report=report, output_path=export_json)
        _err_console.print(f"[green]Report saved to:[/green] {escape(str(path))}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
