"""Project configuration loaded from ``[tool.tinyspec]`` in pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"


@dataclass(frozen=True)
class TinySpecConfig:
    """Settings shared by the session driver and the CLI.

    Attributes
    ----------
    test_dir
        Directory searched (recursively) for test files.
    test_pattern
        Glob pattern test files must match.
    force
        Run cases marked as skipped.
    silent
        Suppress per-case reporter output.
    verbosity
        Base logging verbosity; CLI ``-v``/``-q`` flags adjust it.
    addopts
        Extra command-line arguments prepended to every CLI invocation.
    """

    test_dir: str = "specs"
    test_pattern: str = "*.py"
    force: bool = False
    silent: bool = False
    verbosity: int = 0
    addopts: list[str] = field(default_factory=list)


DEFAULT_CONFIG = TinySpecConfig()


def find_project_root(start: Path | None = None) -> Path:
    """Return the closest directory at or above ``start`` holding a pyproject.toml.

    Falls back to ``start`` itself when no such directory exists.
    """
    start = (start or Path.cwd()).resolve()
    for candidate in (start, *start.parents):
        if (candidate / PYPROJECT).is_file():
            return candidate
    return start


def _coerce(name: str, value: Any) -> Any:
    if name in {"force", "silent"}:
        if not isinstance(value, bool):
            msg = f"tool.tinyspec.{name} must be a boolean, got {value!r}"
            raise ValueError(msg)
        return value
    if name == "verbosity":
        if not isinstance(value, int) or isinstance(value, bool):
            msg = f"tool.tinyspec.verbosity must be an integer, got {value!r}"
            raise ValueError(msg)
        return value
    if name == "addopts":
        if isinstance(value, str):
            return value.split()
        return [str(item) for item in value]
    return str(value)


def load_config(path: Path | str | None = None) -> TinySpecConfig:
    """Load configuration from a pyproject.toml file.

    Args:
        path: Explicit pyproject.toml path. Defaults to the one in the
              project root.

    Returns:
        The parsed configuration, or ``DEFAULT_CONFIG`` when the file or the
        ``[tool.tinyspec]`` table is absent.

    Raises:
        ValueError: If a known key holds a value of the wrong type.
    """
    pyproject = Path(path) if path is not None else find_project_root() / PYPROJECT
    if not pyproject.is_file():
        return DEFAULT_CONFIG

    with pyproject.open("rb") as fh:
        data = tomllib.load(fh)

    table = data.get("tool", {}).get("tinyspec", {})
    if not table:
        return DEFAULT_CONFIG

    known = {f.name for f in fields(TinySpecConfig)}
    overrides: dict[str, Any] = {}
    for key, value in table.items():
        name = key.replace("-", "_")
        if name not in known:
            logger.warning("Ignoring unknown tool.tinyspec option %r in %s", key, pyproject)
            continue
        overrides[name] = _coerce(name, value)

    return replace(DEFAULT_CONFIG, **overrides)


__all__ = ["DEFAULT_CONFIG", "TinySpecConfig", "find_project_root", "load_config"]
