"""Shared CLI app objects, logging setup and probe resolution."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from clawbrute.errors import ConfigurationError

app = typer.Typer(
    name="clawbrute",
    help="Concurrent credential bruteforcing tool",
    no_args_is_help=True,
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def resolve_probe_name(name: str | None, probe_file: Path | None) -> str:
    """Return the probe to use, registering the probes in ``probe_file`` first.

    Without NAME the file must register exactly one probe.
    """
    from clawbrute.probes import load_probe_file

    if probe_file is not None:
        loaded = load_probe_file(probe_file)
        if name is None:
            if len(loaded) > 1:
                raise ConfigurationError(
                    f"{probe_file} registers several probes ({', '.join(loaded)}); pass a NAME"
                )
            return loaded[0]
    if name is None:
        raise ConfigurationError("must specify --file or a NAME")
    return name
