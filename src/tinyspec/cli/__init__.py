"""CLI module for the tinyspec runner."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from rich.console import Console
from rich.markup import escape

from tinyspec.config import TinySpecConfig, load_config
from tinyspec.testing import Session
from tinyspec.types import Outcome


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the tinyspec CLI."""
    config = load_config()
    parser = _build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    # addopts hold `run` options, so they go right after the subcommand.
    if config.addopts and argv[:1] == ["run"]:
        argv = ["run", *config.addopts, *argv[1:]]
    args = parser.parse_args(argv)

    if args.command == "run":
        raise SystemExit(_run_command(args, config))

    if args.command == "list":
        raise SystemExit(_list_command(args, config))

    parser.print_help()
    raise SystemExit(0)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinyspec", description="tinyspec test runner")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Load test files and run every registered case")
    run_parser.add_argument("test_dir", nargs="?", help="Directory (or single file) holding test files")
    run_parser.add_argument("--pattern", help="Glob pattern test files must match")
    run_parser.add_argument("--force", action="store_true", help="Run cases marked as skipped")
    run_parser.add_argument("--silent", action="store_true", help="Only print the run summary")
    run_parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce log output")
    run_parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log output")

    list_parser = subparsers.add_parser("list", help="List registered cases and their tests")
    list_parser.add_argument("test_dir", nargs="?", help="Directory (or single file) holding test files")
    list_parser.add_argument("--pattern", help="Glob pattern test files must match")

    return parser


def _resolve_config(args: argparse.Namespace, config: TinySpecConfig) -> TinySpecConfig:
    overrides: dict[str, object] = {}
    if args.test_dir:
        overrides["test_dir"] = args.test_dir
    if args.pattern:
        overrides["test_pattern"] = args.pattern
    if getattr(args, "force", False):
        overrides["force"] = True
    if getattr(args, "silent", False):
        overrides["silent"] = True
    return replace(config, **overrides)


def _resolve_verbosity(args: argparse.Namespace, config: TinySpecConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _run_command(args: argparse.Namespace, config: TinySpecConfig) -> int:
    _setup_logging(_resolve_verbosity(args, config))
    session = Session(config=_resolve_config(args, config), console=Console())
    results = session.run()
    failed = any(Outcome.of(result) in {Outcome.FAILED, Outcome.ERROR} for result in results)
    return 1 if failed else 0


def _list_command(args: argparse.Namespace, config: TinySpecConfig) -> int:
    console = Console()
    session = Session(config=_resolve_config(args, config), console=console)
    session.load_cases()

    if not len(session.registry):
        console.print("[yellow]No test cases found.[/yellow]")
        return 0

    for case_cls in session.registry:
        case = case_cls()
        marker = " [dim](skipped)[/dim]" if case_cls.skipped else ""
        console.print(f"[bold]{escape(case.name)}[/bold]{marker}")
        for identifier in case.runnable_methods():
            console.print(f"  - {identifier}", markup=False, highlight=False)
    return 0


__all__ = ["main"]
