"""Mock objects answering to declared "ghost" methods only."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from pydantic import BaseModel, Field

from tinyspec.errors import MockError

logger = logging.getLogger(__name__)


class Expectation(BaseModel):
    """What a ghost method returns and which arguments it accepts.

    Attributes:
    ----------
    returns : Any
        Value returned by the ghost; called first if it is a non-class callable.
    args : list[Any]
        Positional matchers. A class matches its instances, a compiled regex
        matches strings it finds a match in, anything else matches by equality.
    validator : Callable | None
        Optional predicate called with the actual arguments.
    """

    returns: Any = True
    args: list[Any] = Field(default_factory=list)
    validator: Callable[..., Any] | None = None


def _matches(expected: Any, actual: Any) -> bool:
    if isinstance(expected, type):
        return isinstance(actual, expected)
    if isinstance(expected, re.Pattern):
        return isinstance(actual, str) and expected.search(actual) is not None
    return bool(expected == actual)


def _arg_list(args: tuple[Any, ...]) -> str:
    return ", ".join(repr(arg) for arg in args)


class Mock:
    """Stand-in object whose methods are declared with :meth:`expect`.

    >>> mock = Mock()
    >>> mock.expect("fetch", 42, str)
    'fetch'
    >>> mock.fetch("key")
    42
    """

    def __init__(self, expectations: Mapping[str, Expectation | Mapping[str, Any]] | None = None) -> None:
        self.expectations: dict[str, Expectation] = {
            str(name): Expectation.model_validate(expectation)
            for name, expectation in (expectations or {}).items()
        }

    def __repr__(self) -> str:
        return f"<Mock ghosts={sorted(self.expectations)}>"

    def expect(
        self,
        name: str,
        return_value: Any = True,
        *args: Any,
        validator: Callable[..., Any] | None = None,
    ) -> str:
        """Declare a ghost method and return its normalized name."""
        name = str(name)
        self.expectations[name] = Expectation(returns=return_value, args=list(args), validator=validator)
        return name

    def responds_to(self, name: str) -> bool:
        return str(name) in self.expectations or callable(getattr(type(self), str(name), None))

    def call(self, name: str, *args: Any) -> Any:
        """Dispatch a call to the ghost method ``name``.

        Raises:
            AttributeError: If no expectation was declared for ``name``.
            MockError: If the arguments do not satisfy the expectation.
        """
        name = str(name)
        expectation = self.expectations.get(name)
        if expectation is None:
            msg = f"Unknown call #{name}: no expectation declared on {self!r}"
            raise AttributeError(msg)

        expected_count = len(expectation.args)
        if len(args) != expected_count:
            msg = f"#{name} expected {expected_count} arguments, but received {len(args)}."
            raise MockError(msg)

        if not all(_matches(expected, actual) for expected, actual in zip(expectation.args, args)):
            raise MockError(f"#{name} received unexpected arguments {_arg_list(args)}.")

        if expectation.validator is not None and not expectation.validator(*args):
            raise MockError(f"#{name} with arguments {_arg_list(args)} failed block validation.")

        logger.debug("Mock ghost #%s called with %r", name, args)
        returns = expectation.returns
        if callable(returns) and not isinstance(returns, type):
            return returns()
        return returns

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached for names that are not real attributes.
        expectations = self.__dict__.get("expectations", {})
        if name in expectations:
            return partial(self.call, name)
        msg = f"{type(self).__name__!r} object has no attribute or ghost method {name!r}"
        raise AttributeError(msg)
