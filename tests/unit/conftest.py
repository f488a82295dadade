"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from tinyspec import Reporter, Session, Spec, it
from tinyspec.config import TinySpecConfig


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory sink for reporter output."""
    return io.StringIO()


@pytest.fixture
def reporter(stream) -> Reporter:
    return Reporter(stream)


@pytest.fixture
def console() -> Console:
    """Console writing to memory, wide enough to never wrap."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def session(tmp_path, console) -> Session:
    """A session looking for test files in an empty temporary directory."""
    return Session(config=TinySpecConfig(test_dir=str(tmp_path)), console=console)


@pytest.fixture
def example_spec() -> type[Spec]:
    """A skipped spec with one example of every kind of outcome."""

    class ExampleSpec(Spec, name="Example", skip=True):
        @it("always passes")
        def passes(self):
            return 1 < 2

        @it("always fails")
        def fails(self):
            return 1 > 2

        @it("always skips")
        def skips(self):
            self.skip()

        @it("always errors")
        def errors(self):
            return (1).skip()

        empty = it()

        @it("also always fails")
        def also_fails(self):
            self.expect(False).must_be_same_as(True)
            return True

    return ExampleSpec
