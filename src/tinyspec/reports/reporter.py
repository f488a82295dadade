"""Plain-text reporter for case runs."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Any, Protocol

from tinyspec.types import Outcome, TestResult

TEST_PREFIX = "test_"

_TAGS: dict[bool | None, str] = {True: " OK ", False: "FAIL", None: "SKIP"}


class Sink(Protocol):
    """Anything accepting text writes."""

    def write(self, s: str, /) -> Any: ...


class Reporter:
    """Formats run results and writes them to a sink.

    Report kinds are dispatched by name: ``report("header", title)`` calls
    :meth:`format_header`, ``report("case", ...)`` calls :meth:`format_case`
    and so on. Unknown kinds are ignored.

    Parameters
    ----------
    stream:
        Where reports are written. ``None`` writes to whatever ``sys.stdout``
        is at the time of the write.
    """

    def __init__(self, stream: Sink | None = None) -> None:
        self.stream = stream

    @staticmethod
    def format_header(title: str) -> str:
        return f"Test Case: {title}\n"

    @staticmethod
    def format_case(title: str, desc: str, passed: bool | None, error: BaseException | None = None) -> str:
        tag = "ERR!" if error is not None else _TAGS.get(passed, "SKIP")
        suffix = f"\n\t -- {str(error) or type(error).__name__}" if error is not None else ""
        return f"  [{tag}] {title} {desc} {suffix}"

    @staticmethod
    def format_footer(results: Sequence[TestResult]) -> str:
        counts = {outcome: 0 for outcome in Outcome}
        for result in results:
            counts[Outcome.of(result)] += 1
        return (
            f"\n  {len(results)} tests, {counts[Outcome.PASSED]} passed, "
            f"{counts[Outcome.SKIPPED]} skipped, {counts[Outcome.FAILED]} failed, "
            f"{counts[Outcome.ERROR]} errors\n "
        )

    @staticmethod
    def format_desc(identifier: str) -> str:
        """Turn a test method name into a readable description."""
        return identifier.removeprefix(TEST_PREFIX).replace("_", " ")

    def _formatter(self, kind: str) -> Callable[..., str] | None:
        return getattr(type(self), f"format_{kind}", None)

    def _puts(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text if text.endswith("\n") else f"{text}\n")

    def report(self, kind: str, *args: Any) -> str | None:
        """Format a report of the given kind, write it and return the text."""
        formatter = self._formatter(kind)
        if formatter is None:
            return None
        text = formatter(*args)
        self._puts(text)
        return text
