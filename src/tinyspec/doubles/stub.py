"""Temporary, reversible method stubbing on live objects."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

T = TypeVar("T")

ALIAS_PREFIX = "_stubbed_"

_MISSING = object()


def alias_for(name: str) -> str:
    """Name under which the original attribute is kept while stubbed."""
    return f"{ALIAS_PREFIX}{name}"


def _restore(target: Any, attr: str, saved: Any) -> None:
    if saved is not _MISSING:
        setattr(target, attr, saved)
    elif attr in vars(target):
        delattr(target, attr)


@contextmanager
def stub(target: T, name: str, value: Any) -> Iterator[T]:
    """Replace ``target.name`` with a method returning ``value`` for the block.

    The original stays reachable as ``target._stubbed_<name>`` inside the
    block. On exit, normal or not, the target's own ``__dict__`` is put back
    as it was: attributes it defined are restored, attributes it inherited
    are deleted again. ``target`` may be an instance or a class.

    Args:
        target: Object whose attribute is replaced. Must have a ``__dict__``.
        name: Attribute to stub.
        value: Returned by every call; called first if it is callable.

    Raises:
        AttributeError: If ``target`` has no attribute ``name``.
    """
    original = getattr(target, name)
    alias = alias_for(name)
    own = vars(target)
    shadowed = own.get(name, _MISSING)
    previous_alias = own.get(alias, _MISSING)

    def replacement(*args: Any, **kwargs: Any) -> Any:
        return value() if callable(value) else value

    try:
        setattr(target, alias, original)
        setattr(target, name, replacement)
        yield target
    finally:
        _restore(target, name, shadowed)
        _restore(target, alias, previous_alias)


class Stubbable:
    """Mixin giving objects a ``stub`` method."""

    def stub(self, name: str, value: Any, block: Callable[[Any], T] | None = None) -> T | None:
        """Run ``block(self)`` while ``name`` is stubbed and return its result."""
        with stub(self, name, value):
            return block(self) if block is not None else None
