"""Session driver: loads test files once and runs every registered case."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console

from tinyspec.config import TinySpecConfig
from tinyspec.context import SESSION_CONTEXT, session_scope
from tinyspec.reports import Reporter
from tinyspec.testing.loader import discover_files, load_module
from tinyspec.testing.registry import CaseRegistry
from tinyspec.types import Outcome, TestResult

logger = logging.getLogger(__name__)


def summarize(results: Iterable[Any]) -> str:
    """One character per result: ``.`` pass, ``S`` skip, ``F`` fail, ``E`` error."""
    return "".join(Outcome.of(result).symbol for result in results)


@dataclass
class Session:
    """Owns the case registry and the "test files loaded" flag.

    Attributes
    ----------
    config
        Where to find test files and default run options.
    registry
        Case classes to run, in registration order.
    loader
        Called with each discovered test file path.
    console
        Rich console receiving reports and the run summary.
    loaded
        Set once test files have been loaded.
    """

    config: TinySpecConfig = field(default_factory=TinySpecConfig)
    registry: CaseRegistry = field(default_factory=CaseRegistry)
    loader: Callable[[Path], Any] = load_module
    console: Console = field(default_factory=Console)
    loaded: bool = False

    def load_cases(self) -> bool:
        """Load test files; returns False if they were already loaded."""
        if self.loaded:
            return False
        with session_scope(self):
            for path in discover_files(self.config.test_dir, self.config.test_pattern):
                logger.debug("Loading %s", path)
                self.loader(path)
        self.loaded = True
        return True

    def run(self, *, force: bool | None = None, silent: bool | None = None) -> list[TestResult]:
        """Run a fresh instance of every registered case.

        Options default to the session config.
        """
        force = self.config.force if force is None else force
        silent = self.config.silent if silent is None else silent

        self.load_cases()
        start = time.perf_counter()
        reporter = Reporter(self.console.file)
        results: list[TestResult] = []
        cases = list(self.registry)
        for case_cls in cases:
            results.extend(case_cls(reporter=reporter).run(force=force, silent=silent))

        elapsed = time.perf_counter() - start
        self._print(f"Ran {len(results)} tests defined in {len(cases)} cases.")
        self._print(f"Test Summary: {summarize(results)}")
        self._print(f"Elapsed Time: {elapsed:.2f} second(s)\n ")
        return results

    def _print(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    summarize = staticmethod(summarize)


_default_session = Session()


def get_session() -> Session:
    """Return the session installed by ``session_scope``, else the process default."""
    return SESSION_CONTEXT.get() or _default_session


def run(*, force: bool | None = None, silent: bool | None = None) -> list[TestResult]:
    """Run the current session."""
    return get_session().run(force=force, silent=silent)


__all__ = ["Session", "get_session", "run", "summarize"]
