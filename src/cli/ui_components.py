"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Walk output is plain text (one line per organization/match) so it stays
  greppable; tables and panels are reserved for diagnostics.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Print the welcome banner (diagnostics only, never during a walk)."""

    title = Text("repo-walker", style="bold cyan")
    subtitle = Text("Organizations • Repositories • Root files", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_line(console: Console, line: str) -> None:
    """Print a plain line: no markup, no highlighting, no emoji codes, no wrapping."""

    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_organization(console: Console, name: str) -> None:
    print_line(console, f"Organization: {name}")


def print_match(console: Console, repository: str) -> None:
    print_line(console, f"  - Repository: {repository}")


def build_doctor_table() -> Table:
    table = Table(title="repo-walker doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
