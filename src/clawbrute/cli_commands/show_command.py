"""Probe details CLI command."""

from dataclasses import MISSING, fields
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from clawbrute.errors import ClawBruteError

from .shared import app, console, resolve_probe_name


@app.command()
def show(
    name: str | None = typer.Argument(None, help="The probe to describe"),
    probe_file: Path | None = typer.Option(None, "--file", "-f", help="Load probes from a Python file"),
) -> None:
    """Show a probe's ports and params."""
    from clawbrute.probes import load_probe

    try:
        name = resolve_probe_name(name, probe_file)
        probe_class = load_probe(name)
    except ClawBruteError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{name}[/bold]: {probe_class.summary}")
    port = getattr(probe_class, "default_port", 0)
    if port:
        console.print(f"  Port: {port}")
    ssl_port = getattr(probe_class, "ssl_port", None)
    if ssl_port:
        console.print(f"  SSL port: {ssl_port}")

    config_class = probe_class.config_class
    if config_class is None:
        console.print("  Params: none")
        return

    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Param", style="bold cyan")
    table.add_column("Default", style="dim")
    for field in fields(config_class):
        if field.default is MISSING:
            default = "(required)"
        else:
            default = "" if field.default is None else str(field.default)
        table.add_row(field.name, escape(default))
    console.print(table)
