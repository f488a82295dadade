"""Reporting module for tinyspec test output."""

from tinyspec.reports.reporter import TEST_PREFIX, Reporter, Sink

__all__ = ["Reporter", "Sink", "TEST_PREFIX"]
