"""Bruteforce run CLI command."""

import logging
from pathlib import Path
from typing import Any

import typer
from rich.markup import escape

from clawbrute.engine import Credentials
from clawbrute.errors import ClawBruteError, ConfigurationError

from .shared import app, configure_logging, console, resolve_probe_name

logger = logging.getLogger(__name__)


def parse_params(values: list[str]) -> dict[str, str]:
    """Parse repeated ``key=value`` options into a dict."""
    params: dict[str, str] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigurationError(f"invalid param {raw!r}; expected KEY=VALUE")
        params[key] = value
    return params


def describe_target(probe: Any) -> str:
    """Return a printable target for a probe instance."""
    from clawbrute.probes import HTTPProbe, NetworkProbe

    if isinstance(probe, HTTPProbe):
        return probe.url_for(probe.config.path)
    if isinstance(probe, NetworkProbe):
        return probe.target
    return "target"


@app.command()
def run(
    name: str | None = typer.Argument(None, help="The probe to run (see 'clawbrute list')"),
    probe_file: Path | None = typer.Option(None, "--file", "-f", help="Load probes from a Python file"),
    usernames: Path | None = typer.Option(None, "--usernames", "-U", help="The usernames wordlist file"),
    passwords: Path | None = typer.Option(None, "--passwords", "-P", help="The passwords wordlist file"),
    concurrency: int | None = typer.Option(None, "--concurrency", "-c", help="Number of workers"),
    first: bool = typer.Option(False, "--first", "-F", help="Stop at the first valid username:password pair"),
    find_every: bool = typer.Option(False, "--all", "-A", help="Find all valid username:password pairs"),
    host: str | None = typer.Option(None, "--host", "-H", help="The host to bruteforce"),
    port: int | None = typer.Option(None, "--port", help="The port to bruteforce"),
    use_ssl: bool = typer.Option(False, "--ssl", help="Connect over TLS"),
    timeout: float | None = typer.Option(None, "--timeout", help="Connection timeout in seconds"),
    param: list[str] = typer.Option([], "--param", "-p", help="Probe param as KEY=VALUE (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Load and run a probe against a target."""
    from clawbrute.config import get_default_concurrency, get_default_timeout, is_verbose
    from clawbrute.engine import find_all, find_first
    from clawbrute.probes import TCPProbeConfig, build_probe_factory, load_probe
    from clawbrute.wordlist import Wordlist

    if first and find_every:
        console.print("[red]Error: --first and --all are mutually exclusive[/red]")
        raise typer.Exit(1)
    if usernames is None:
        console.print("[red]Error: must specify -U,--usernames option[/red]")
        raise typer.Exit(1)
    if passwords is None:
        console.print("[red]Error: must specify -P,--passwords option[/red]")
        raise typer.Exit(1)

    try:
        configure_logging(verbose or is_verbose())

        params: dict[str, Any] = parse_params(param)
        if host is not None:
            params["host"] = host
        if port is not None:
            params["port"] = port
        if use_ssl:
            params["ssl"] = True

        name = resolve_probe_name(name, probe_file)
        probe_class = load_probe(name)
        config_class = probe_class.config_class
        if config_class is not None and issubclass(config_class, TCPProbeConfig):
            if timeout is not None:
                params["timeout"] = timeout
            else:
                params.setdefault("timeout", get_default_timeout())

        probe_factory = build_probe_factory(name, params)
        workers = concurrency if concurrency is not None else get_default_concurrency()
        username_list = Wordlist.open(usernames)
        password_list = Wordlist.open(passwords)

        target = describe_target(probe_factory())
        console.print(f"[cyan]●[/cyan] Bruteforcing [bold]{escape(target)}[/bold] ...")

        if find_every:

            def report(credentials: Credentials) -> None:
                console.print(f"[green]✓[/green] Found credentials {escape(str(credentials))}")

            found = find_all(username_list, password_list, probe_factory, workers, on_hit=report)
            if not found:
                console.print("[yellow]○[/yellow] No valid credentials found")
        else:
            result = find_first(username_list, password_list, probe_factory, workers)
            if result is not None:
                console.print(f"[green]✓[/green] Found credentials {escape(str(result))}")
            else:
                console.print("[yellow]○[/yellow] No valid credentials found")
    except ClawBruteError as exc:
        logger.debug("Run failed", exc_info=True)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)
