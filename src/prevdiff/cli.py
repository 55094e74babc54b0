"""prevdiff CLI — Typer application with previous, remotes, and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from prevdiff import __version__

app = typer.Typer(
    name="prevdiff",
    help="Find the right previous revision of a file to compare against.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    """Route library logging through Rich on stderr."""
    pkg_logger = logging.getLogger("prevdiff")
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(RichHandler(console=console, show_time=False, show_path=False))
    pkg_logger.setLevel(level.upper())


def _resolve_repo_root(start: Optional[Path] = None) -> Path:
    """Find the git repo root, exit 2 on failure."""
    from prevdiff.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root(start)
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load_config(repo_root: Path, config: Optional[str], verbose: bool, debug: bool):
    from prevdiff.config.loader import ConfigError, load_config

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    level = "debug" if debug else "info" if verbose else cfg.log.level
    _configure_logging(level)
    return cfg


def _check_format(fmt: Optional[str]) -> None:
    if fmt is not None and fmt not in ("terminal", "json"):
        console.print(f"[bold red]Invalid format:[/bold red] {fmt}")
        raise typer.Exit(code=2)


def _relative_to_repo(path: Path, repo_root: Path) -> str:
    try:
        return path.resolve().relative_to(repo_root.resolve()).as_posix()
    except ValueError:
        console.print(f"[bold red]Error:[/bold red] {path} is outside {repo_root}")
        raise typer.Exit(code=2)


# ── previous ──────────────────────────────────────────────────────────────────


@app.command()
def previous(
    path: Path = typer.Argument(..., help="File to compare"),
    rev: Optional[str] = typer.Option(None, "--rev", "-r", help="Revision the file is shown at (default: working tree)"),
    in_diff: bool = typer.Option(False, "--in-diff", help="The file is already shown in a diff against its parent"),
    line: int = typer.Option(0, "--line", "-l", help="Line to keep in view"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .prevdiff.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Resolve which two revisions of PATH to compare."""
    from prevdiff.git.provider import GitProvider
    from prevdiff.output import json_report, terminal
    from prevdiff.resolver import (
        DiffRequest,
        LookupFailure,
        PreviousRevisionResolver,
        ResolveError,
        RevisionQuery,
    )

    _check_format(format)

    start_dir = path.parent if path.parent.is_dir() else Path.cwd()
    repo_root = _resolve_repo_root(start_dir)
    cfg = _load_config(repo_root, config, verbose, debug)
    if format:
        cfg.output.format = format  # type: ignore[assignment]

    provider = GitProvider(binary=cfg.git.binary, timeout=cfg.git.timeout)
    resolver = PreviousRevisionResolver(provider, provider)
    query = RevisionQuery(
        file_path=_relative_to_repo(path, repo_root),
        repo_path=str(repo_root),
        starting_revision=rev,
        in_diff_view=in_diff,
        line_hint=line,
    )

    try:
        comparison = resolver.resolve(query)
    except LookupFailure as exc:
        console.print(f"[bold red]{exc.user_message}[/bold red]")
        raise typer.Exit(code=2) from exc
    except ResolveError as exc:
        console.print(f"[yellow]⚠[/yellow]  {exc.user_message}")
        raise typer.Exit(code=1) from exc

    request = DiffRequest.from_comparison(comparison, line=query.line_hint)
    if cfg.output.format == "json":
        print(json_report.render_request(request))
    else:
        terminal.render_request(request, show_paths=cfg.output.show_paths)


# ── remotes ───────────────────────────────────────────────────────────────────


@app.command()
def remotes(
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .prevdiff.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """List the repository's remotes with host, path, and capabilities."""
    from prevdiff.git.adapter import GitError, get_remotes
    from prevdiff.git.remote_parser import RemoteParser
    from prevdiff.output import json_report, terminal

    _check_format(format)

    repo_root = _resolve_repo_root()
    cfg = _load_config(repo_root, config, verbose, False)
    if format:
        cfg.output.format = format  # type: ignore[assignment]

    try:
        listing = get_remotes(repo_root, binary=cfg.git.binary, timeout=cfg.git.timeout)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    parsed = RemoteParser.parse(listing, str(repo_root))
    if cfg.output.format == "json":
        print(json_report.render_remotes(parsed))
    else:
        terminal.render_remotes(parsed)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing .prevdiff.toml"),
) -> None:
    """Generate a starter .prevdiff.toml in the repo root."""
    from prevdiff.config.defaults import DEFAULT_TOML
    from prevdiff.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"prevdiff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """prevdiff — find the right previous revision of a file to compare against."""
