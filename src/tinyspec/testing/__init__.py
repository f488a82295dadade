"""Test cases, the spec DSL and the session driver."""

from .case import Case
from .dsl import (
    Example,
    Fixture,
    after,
    after_each,
    before,
    before_each,
    describe,
    it,
    let,
    method_identifier,
    specify,
    subject,
    target,
)
from .loader import discover_files, load_module
from .registry import CaseRegistry, register
from .session import Session, get_session, run, summarize
from .spec import Spec


__all__ = [
    "Case",
    "CaseRegistry",
    "Example",
    "Fixture",
    "Session",
    "Spec",
    "after",
    "after_each",
    "before",
    "before_each",
    "describe",
    "discover_files",
    "get_session",
    "it",
    "let",
    "load_module",
    "method_identifier",
    "register",
    "run",
    "specify",
    "subject",
    "summarize",
    "target",
]
