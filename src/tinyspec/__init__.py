"""tinyspec - a small, self-contained spec-style testing framework."""

from .assertions import Assertable, assert_that, expect, must_raise, refute_that
from .context import capture_output, captured, session_scope
from .doubles import Mock, Stubbable, stub
from .errors import AssertionFailedError, MockError, SkipRequested
from .reports import Reporter
from .testing import (
    Case,
    CaseRegistry,
    Session,
    Spec,
    after,
    after_each,
    before,
    before_each,
    describe,
    get_session,
    it,
    let,
    register,
    run,
    specify,
    subject,
    summarize,
    target,
)
from .version import __version__


__all__ = [
    # Core testing
    "Case",
    "Spec",
    "CaseRegistry",
    "Session",
    "register",
    "get_session",
    "session_scope",
    "run",
    "summarize",
    # Spec DSL
    "it",
    "specify",
    "let",
    "subject",
    "target",
    "describe",
    "before",
    "before_each",
    "after",
    "after_each",
    # Assertions
    "Assertable",
    "expect",
    "assert_that",
    "refute_that",
    "must_raise",
    # Doubles
    "Mock",
    "Stubbable",
    "stub",
    # Output
    "Reporter",
    "capture_output",
    "captured",
    # Errors
    "AssertionFailedError",
    "MockError",
    "SkipRequested",
]
