"""Assertion helpers for test validation."""

from .assertable import (
    COMPARISON_OPERATORS,
    Assertable,
    assert_that,
    expect,
    must_raise,
    refute_that,
    responds_to,
)

__all__ = [
    "COMPARISON_OPERATORS",
    "Assertable",
    "assert_that",
    "expect",
    "must_raise",
    "refute_that",
    "responds_to",
]
