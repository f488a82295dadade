"""Shared types for the tinyspec testing framework."""

from enum import Enum
from typing import Any, TypeAlias

TestResult: TypeAlias = bool | None | Exception


class Outcome(Enum):
    """Classification of a coerced test result."""

    PASSED = "."
    SKIPPED = "S"
    FAILED = "F"
    ERROR = "E"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def of(cls, result: Any) -> "Outcome":
        """Classify a result by identity; anything unexpected is an error."""
        if result is True:
            return cls.PASSED
        if result is None:
            return cls.SKIPPED
        if result is False:
            return cls.FAILED
        return cls.ERROR
