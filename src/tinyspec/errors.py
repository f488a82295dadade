"""Exception types raised by test bodies and test doubles."""


class AssertionFailedError(AssertionError):
    """Raised by assertions and refutations that do not hold.

    Subclasses :class:`AssertionError` so that a failed assertion and a bare
    ``assert`` statement are both recorded as a failing test.
    """


class SkipRequested(Exception):
    """Raised by :meth:`tinyspec.testing.case.Case.skip` to bail out of a test."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(reason or "skip requested")


class MockError(Exception):
    """Raised when a mock ghost method is called in a way it does not expect."""


__all__ = ["AssertionFailedError", "MockError", "SkipRequested"]
