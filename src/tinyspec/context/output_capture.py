"""Sys-level stdout/stderr capture for tests.

Captures Python-level output (print, sys.stdout.write). Does NOT capture
fd-level output (subprocesses, C extensions writing to fd 1/2).
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO


@dataclass
class OutputBuffer:
    """Captured stdout/stderr for a single block."""

    stdout: io.StringIO = field(default_factory=io.StringIO)
    stderr: io.StringIO = field(default_factory=io.StringIO)

    @property
    def text(self) -> str:
        """Everything written to stdout so far."""
        return self.stdout.getvalue()

    def readouterr(self) -> tuple[str, str]:
        """Read and clear captured output."""
        out = self.stdout.getvalue()
        err = self.stderr.getvalue()
        self.stdout.seek(0)
        self.stdout.truncate()
        self.stderr.seek(0)
        self.stderr.truncate()
        return out, err


class _TeeStream(io.TextIOBase):
    """Writes to the capture buffer and passes through to the original stream."""

    def __init__(self, buffer: io.StringIO, original: TextIO) -> None:
        self._buffer = buffer
        self._original = original

    def write(self, s: str) -> int:
        self._buffer.write(s)
        self._original.write(s)
        return len(s)

    def flush(self) -> None:
        self._original.flush()

    @property
    def encoding(self) -> str | None:
        return getattr(self._original, "encoding", "utf-8")


@contextmanager
def capture_output(swallow: bool = True) -> Iterator[OutputBuffer]:
    """Redirect ``sys.stdout`` and ``sys.stderr`` into an :class:`OutputBuffer`.

    The original streams are restored on every exit path.

    Args:
        swallow: If True, output is captured only. If False, output is
                 captured AND passed through to the original streams.
    """
    buf = OutputBuffer()
    original_stdout, original_stderr = sys.stdout, sys.stderr
    if swallow:
        sys.stdout, sys.stderr = buf.stdout, buf.stderr
    else:
        sys.stdout = _TeeStream(buf.stdout, original_stdout)
        sys.stderr = _TeeStream(buf.stderr, original_stderr)
    try:
        yield buf
    finally:
        sys.stdout, sys.stderr = original_stdout, original_stderr


def captured(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> str:
    """Call ``fn`` and return what it wrote to stdout."""
    with capture_output() as buf:
        fn(*args, **kwargs)
    return buf.text
