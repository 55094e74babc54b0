"""Rich terminal reporter for diff requests and remotes."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from prevdiff.git.models import RemoteDescriptor
from prevdiff.output.labels import revision_label
from prevdiff.resolver.models import ComparisonSide, DiffRequest

_CAPABILITY_STYLE = {
    "fetch": "bold black on bright_cyan",
    "push": "bold white on dark_orange",
}


def _side_text(side: ComparisonSide, *, show_paths: bool) -> Text:
    text = Text(revision_label(side.revision), style="yellow")
    if show_paths:
        text.append(f"  {side.path}", style="magenta")
    return text


def render_request(
    request: DiffRequest,
    *,
    console: Optional[Console] = None,
    show_paths: bool = True,
) -> None:
    """Print the two sides of a diff request."""
    console = console or Console()

    table = Table(title="Compare", title_style="bold", border_style="dim", show_header=False)
    table.add_column("Side", style="cyan", justify="right")
    table.add_column("Revision")
    table.add_row("older", _side_text(request.left, show_paths=show_paths))
    table.add_row("newer", _side_text(request.right, show_paths=show_paths))

    console.print(table)
    console.print(f"[dim]Repository:[/dim] {request.repo_path}")
    if request.line:
        console.print(f"[dim]Line:[/dim]       {request.line}")


def _capability_pill(capability: str) -> Text:
    style = _CAPABILITY_STYLE.get(capability, "bold")
    return Text(f" {capability} ", style=style)


def render_remotes(remotes: List[RemoteDescriptor], *, console: Optional[Console] = None) -> None:
    """Print a table of parsed remotes."""
    console = console or Console()

    if not remotes:
        console.print("[dim]No remotes configured.[/dim]")
        return

    table = Table(title="Remotes", show_lines=True, title_style="bold", border_style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Host", style="green")
    table.add_column("Path", style="magenta")
    table.add_column("Capabilities")
    table.add_column("URL", style="dim")

    for remote in remotes:
        pills = Text(" ").join(_capability_pill(c) for c in remote.capabilities)
        table.add_row(remote.name, remote.host or "-", remote.path or "-", pills, remote.url)

    console.print(table)
