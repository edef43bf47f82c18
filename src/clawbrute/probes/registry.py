"""Lookup table mapping probe names to probe classes."""

from __future__ import annotations

import functools
import importlib.util
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

from clawbrute.engine.pool import ProbeFactory
from clawbrute.engine.probe import Probe
from clawbrute.errors import ConfigurationError, ProbeNotFound

P = TypeVar("P", bound=type[Probe])

_PROBES: dict[str, type[Probe]] = {}


def register(probe_class: P) -> P:
    """Class decorator registering a probe under its ``name``."""
    if not probe_class.name:
        raise ValueError(f"{probe_class.__name__} has no name to register under")
    _PROBES[probe_class.name] = probe_class
    return probe_class


def unregister(name: str) -> None:
    _PROBES.pop(name, None)


def available_probes() -> list[str]:
    """Return sorted probe names."""
    return sorted(_PROBES)


def load_probe(name: str) -> type[Probe]:
    try:
        return _PROBES[name]
    except KeyError:
        available = ", ".join(available_probes()) or "none"
        raise ProbeNotFound(f"Unknown probe: {name}. Available probes: {available}") from None


def build_probe_factory(name: str, params: Mapping[str, Any] | None = None) -> ProbeFactory:
    """Validate the probe's config once and return a per-worker probe factory."""
    probe_class = load_probe(name)
    config_class = probe_class.config_class
    if config_class is None:
        if params:
            raise ConfigurationError(f"probe {name} does not take params")
        return probe_class
    config = config_class.from_params(params or {})
    return functools.partial(probe_class, config)


def load_probe_file(path: str | Path) -> list[str]:
    """Import a Python file whose ``@register`` classes become available probes.

    Returns the names the file registered, sorted.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"probe file not found: {path}")

    module_name = f"clawbrute.probe_files.{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ConfigurationError(f"cannot load probe file: {path}")

    before = dict(_PROBES)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise ConfigurationError(f"failed to load probe file {path}: {exc}") from exc

    loaded = sorted(name for name, cls in _PROBES.items() if before.get(name) is not cls)
    if not loaded:
        raise ConfigurationError(f"probe file {path} registered no probes")
    return loaded
