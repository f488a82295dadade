"""Test doubles: mocks with ghost methods and scoped stubs."""

from .mock import Expectation, Mock
from .stub import Stubbable, alias_for, stub

__all__ = ["Expectation", "Mock", "Stubbable", "alias_for", "stub"]
