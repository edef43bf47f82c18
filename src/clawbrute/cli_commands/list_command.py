"""Probe listing CLI command."""

from rich.table import Table

from .shared import app, console


@app.command("list")
def list_probes() -> None:
    """List the available probes."""
    from clawbrute.probes import available_probes, load_probe

    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Probe", style="bold cyan")
    table.add_column("Port", style="dim")
    table.add_column("Description")

    for name in available_probes():
        probe_class = load_probe(name)
        port = getattr(probe_class, "default_port", 0)
        ssl_port = getattr(probe_class, "ssl_port", None)
        port_text = str(port) if port else ""
        if ssl_port and ssl_port != port:
            port_text += f"/{ssl_port}"
        table.add_row(name, port_text, probe_class.summary)

    console.print(table)
