#!/usr/bin/env python
"""Inventory and validation CLI for the tool metadata registry.

CI runs `report` and fails the job on error-severity issues; the other
commands are for humans inspecting the registry.

Usage:
    # Machine-readable {count, entries, issues} report
    toolmeta report

    # Fail the build on error-severity issues
    toolmeta report --fail-on-error

    # Human-readable issue table (exit code 1 on errors)
    toolmeta validate --check-lengths

    # Resolved metadata for one page
    toolmeta show uppercase --locale de

    # Sitemap XML for a registry file
    toolmeta sitemap --registry path/to/registry.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from toolmeta.lib.config_manager import config
from toolmeta.lib.defaults import CONFIG_CATEGORIES
from toolmeta.lib.logging_config import log_with_context, setup_logging
from toolmeta.services.metadata import build_sitemap, generate_tool_metadata, render_sitemap_xml
from toolmeta.services.registry import (
    RegistryHandle,
    RegistryLoadError,
    get_all_metadata_entries,
    get_registry,
    has_errors,
    load_registry,
    summarize_issues,
    validate_registry,
)

app = typer.Typer(help="Inventory and validate the tool metadata registry")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

RegistryOption = typer.Option(None, "--registry", "-r", help="Registry JSON file (defaults to the bundled registry)")


def _load(registry: Optional[Path]) -> RegistryHandle:
    """Load the requested registry or exit with code 2."""
    try:
        return load_registry(registry) if registry else get_registry()
    except RegistryLoadError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(2)


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


@app.callback()
def main(
    log_level: str = typer.Option(
        config.get("LOG_LEVEL"), "--log-level", help="Log level for stderr JSON logs"
    ),
):
    """Tool metadata registry tooling."""
    setup_logging("toolmeta", level=log_level)


@app.command()
def report(
    registry: Optional[Path] = RegistryOption,
    check_lengths: bool = typer.Option(False, "--check-lengths", help="Also warn on title/description lengths"),
    fail_on_error: bool = typer.Option(False, "--fail-on-error", help="Exit 1 when any error issue exists"),
):
    """Print {count, entries, issues} as JSON to stdout."""
    handle = _load(registry)
    entries = get_all_metadata_entries(handle)
    issues = validate_registry(handle, check_lengths=check_lengths)

    typer.echo(_dump({
        "count": len(entries),
        "entries": [entry.model_dump(mode="json") for entry in entries],
        "issues": [issue.model_dump(mode="json") for issue in issues],
    }))

    summary = summarize_issues(issues)
    log_with_context(
        logger, "info", "Inventory report generated",
        entries=len(entries), errors=summary["error"], warnings=summary["warning"],
    )

    if fail_on_error and has_errors(issues):
        raise typer.Exit(1)


@app.command()
def validate(
    registry: Optional[Path] = RegistryOption,
    check_lengths: bool = typer.Option(False, "--check-lengths", help="Also warn on title/description lengths"),
):
    """Show validation issues as a table; exit 1 on errors."""
    handle = _load(registry)
    issues = validate_registry(handle, check_lengths=check_lengths)
    summary = summarize_issues(issues)

    if not issues:
        console.print(f"[bold green]✓ Registry is clean[/bold green] ({len(handle)} entries)")
        return

    table = Table(title=f"Registry issues ({len(handle)} entries)")
    table.add_column("Severity", style="bold")
    table.add_column("Code", style="cyan")
    table.add_column("Entry", style="magenta")
    table.add_column("Locale")
    table.add_column("Field")
    table.add_column("Message")

    for issue in issues:
        color = "red" if issue.severity == "error" else "yellow"
        table.add_row(
            f"[{color}]{issue.severity.value}[/{color}]",
            issue.code.value,
            issue.tool_id or "-",
            issue.locale or "-",
            issue.field or "-",
            issue.message,
        )

    console.print(table)
    console.print(f"\n[red]{summary['error']} errors[/red], [yellow]{summary['warning']} warnings[/yellow]")

    if has_errors(issues):
        raise typer.Exit(1)


@app.command()
def show(
    tool_id: str = typer.Argument(..., help="Registry id"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale code (default: from pathname)"),
    pathname: Optional[str] = typer.Option(None, "--pathname", "-p", help="Request path (default: entry path)"),
    registry: Optional[Path] = RegistryOption,
):
    """Print resolved page metadata as JSON."""
    handle = _load(registry)
    if tool_id not in handle:
        err_console.print(f"[yellow]Unknown id {tool_id!r}; showing not-found metadata[/yellow]")

    metadata = generate_tool_metadata(tool_id, locale=locale, pathname=pathname, handle=handle)
    typer.echo(_dump(metadata.to_json_dict()))


@app.command()
def sitemap(
    registry: Optional[Path] = RegistryOption,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Absolute origin (default: SITE_BASE_URL)"),
    lastmod: Optional[str] = typer.Option(None, "--lastmod", help="W3C date for every <lastmod>"),
):
    """Print sitemap XML for every entry in every locale."""
    handle = _load(registry)
    entries = build_sitemap(handle, base_url=base_url, last_modified=lastmod)
    typer.echo(render_sitemap_xml(entries), nl=False)


@app.command("config")
def show_config():
    """Show resolved configuration values."""
    table = Table(title="Configuration")
    table.add_column("Category", style="cyan")
    table.add_column("Key", style="bold")
    table.add_column("Value")

    for category, keys in CONFIG_CATEGORIES.items():
        for key in keys:
            table.add_row(category, key, str(config.get(key)))

    console.print(table)


if __name__ == "__main__":
    app()
