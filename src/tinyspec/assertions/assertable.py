"""Per-value assertions and refutations.

Every ``must_*`` method passes when its condition holds and every
``cannot_*`` method is its logical dual. Both return ``True`` on success and
raise :class:`~tinyspec.errors.AssertionFailedError` otherwise.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable
from typing import Any

from tinyspec.errors import AssertionFailedError

COMPARISON_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


def assert_that(condition: Any, message: str = "Refuted. No message given.") -> bool:
    """Pass only when ``condition`` is exactly ``True``."""
    if condition is True:
        return True
    raise AssertionFailedError(message)


def refute_that(condition: Any, message: str = "Asserted. No message given.") -> bool:
    """Pass only when ``condition`` is exactly ``False``."""
    if condition is False:
        return True
    raise AssertionFailedError(message)


def must_raise(
    exc_type: type[BaseException] | tuple[type[BaseException], ...],
    fn: Callable[..., Any],
    *args: Any,
    **kwargs: Any,
) -> BaseException:
    """Call ``fn`` and return the exception it raises.

    Raises:
        AssertionFailedError: If ``fn`` returns normally. Exceptions of other
            types propagate untouched.
    """
    try:
        fn(*args, **kwargs)
    except exc_type as exc:
        return exc
    names = exc_type.__name__ if isinstance(exc_type, type) else ", ".join(t.__name__ for t in exc_type)
    raise AssertionFailedError(f"{fn!r} did not raise {names}.")


def responds_to(value: Any, name: str) -> bool:
    return callable(getattr(value, name, None))


def _matches(value: Any, pattern: str | re.Pattern[str]) -> bool:
    if not isinstance(value, str):
        return False
    return re.search(pattern, value) is not None


class Assertable:
    """Wraps a value with assertion and refutation helpers.

    >>> expect([1, 2]).must_include(2)
    True
    """

    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Assertable({self.value!r})"

    def _operator(self, op: str) -> Callable[[Any, Any], Any]:
        assert_that(op in COMPARISON_OPERATORS, f"{op} is not a comparison operator.")
        return COMPARISON_OPERATORS[op]

    def _container(self) -> None:
        # Membership falls back to iteration when __contains__ is missing.
        if not (hasattr(self.value, "__contains__") or hasattr(self.value, "__iter__")):
            raise AssertionFailedError(f"{self.value!r} does not respond to #__contains__.")

    def must_equal(self, other: Any) -> bool:
        return assert_that(bool(self.value == other), f"{self.value!r} is not equal to {other!r}.")

    def must_be_same_as(self, other: Any) -> bool:
        return assert_that(self.value is other, f"{self.value!r} is not identical to {other!r}.")

    def must_be(self, op: str, other: Any) -> bool:
        compare = self._operator(op)
        return assert_that(bool(compare(self.value, other)), f"{self.value!r} is not {op} {other!r}.")

    def must_respond_to(self, name: str) -> bool:
        return assert_that(responds_to(self.value, name), f"{self.value!r} does not respond to #{name}.")

    def must_include(self, item: Any) -> bool:
        self._container()
        return assert_that(item in self.value, f"{self.value!r} does not include {item!r}.")

    def must_be_empty(self) -> bool:
        self.must_respond_to("__len__")
        return assert_that(len(self.value) == 0, f"{self.value!r} is not empty.")

    def must_match(self, pattern: str | re.Pattern[str]) -> bool:
        return assert_that(_matches(self.value, pattern), f"{self.value!r} does not match {pattern!r}.")

    def must_be_instance_of(self, cls: type) -> bool:
        return assert_that(type(self.value) is cls, f"{self.value!r} is not an instance of {cls!r}.")

    def must_be_kind_of(self, cls: type | tuple[type, ...]) -> bool:
        return assert_that(isinstance(self.value, cls), f"{self.value!r} is not a kind of {cls!r}.")

    def must_raise(self, exc_type: type[BaseException], *args: Any, **kwargs: Any) -> BaseException:
        """Call the wrapped value with the given arguments, expecting ``exc_type``."""
        return must_raise(exc_type, self.value, *args, **kwargs)

    def cannot_equal(self, other: Any) -> bool:
        return refute_that(bool(self.value == other), f"{self.value!r} is equal to {other!r}.")

    def cannot_be_same_as(self, other: Any) -> bool:
        return refute_that(self.value is other, f"{self.value!r} is identical to {other!r}.")

    def cannot_be(self, op: str, other: Any) -> bool:
        compare = self._operator(op)
        return refute_that(bool(compare(self.value, other)), f"{self.value!r} is {op} {other!r}.")

    def cannot_respond_to(self, name: str) -> bool:
        return refute_that(responds_to(self.value, name), f"{self.value!r} responds to #{name}.")

    def cannot_include(self, item: Any) -> bool:
        self._container()
        return refute_that(item in self.value, f"{self.value!r} includes {item!r}.")

    def cannot_be_empty(self) -> bool:
        self.must_respond_to("__len__")
        return refute_that(len(self.value) == 0, f"{self.value!r} is empty.")

    def cannot_match(self, pattern: str | re.Pattern[str]) -> bool:
        return refute_that(_matches(self.value, pattern), f"{self.value!r} matches {pattern!r}.")

    def cannot_be_instance_of(self, cls: type) -> bool:
        return refute_that(type(self.value) is cls, f"{self.value!r} is an instance of {cls!r}.")

    def cannot_be_kind_of(self, cls: type | tuple[type, ...]) -> bool:
        return refute_that(isinstance(self.value, cls), f"{self.value!r} is a kind of {cls!r}.")


def expect(value: Any) -> Assertable:
    """Wrap ``value`` for assertions, e.g. ``expect(total).must_be(">", 0)``."""
    return Assertable(value)
