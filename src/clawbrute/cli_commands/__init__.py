"""CLI command registrations."""

from . import list_command, run_command, show_command, version_command  # noqa: F401
from .shared import app, console

__all__ = ["app", "console"]
