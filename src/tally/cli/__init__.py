"""CLI module for the tally test runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler

from tally.config import TallyConfig, load_config
from tally.errors import ConfigError
from tally.reports import ConsoleReporter, Reporter, get_reporter_class, resolve_reporters
from tally.testing import Filters, Runner


logger = logging.getLogger("tally")


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the tally CLI."""
    raise SystemExit(run_cli(argv))


def run_cli(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Parse arguments, run the configured test root and return the exit code."""
    console = console or Console()
    err_console = Console(stderr=True)
    try:
        config = load_config()
    except ConfigError as exc:
        err_console.print(f"[red]{exc}[/red]")
        return 1

    parser = _build_parser()
    args_in = list(sys.argv[1:] if argv is None else argv)
    args, unknown = parser.parse_known_args([*config.addopts, *args_in])

    verbosity = _resolve_verbosity(args, config)
    _configure_logging(verbosity, err_console)
    for flag in unknown:
        logger.warning("Ignoring unrecognized argument: %s", flag)

    try:
        reporters = _resolve_reporters(args, config, verbosity=verbosity, console=console)
    except (ValueError, TypeError, ImportError) as exc:
        err_console.print(f"[red]{exc}[/red]")
        return 1

    runner = Runner(
        filters=_resolve_filters(args, config),
        reporters=reporters,
        inter_test_delay=config.inter_test_delay,
    )
    report = asyncio.run(runner.run(config.test_root))
    return report.exit_code


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tally",
        description="Discover and run the test files in the configured test root",
    )
    parser.add_argument("--include", metavar="PATTERN", help="Only run files matching PATTERN")
    parser.add_argument("--exclude", metavar="PATTERN", help="Skip files matching PATTERN")
    parser.add_argument(
        "--include-method",
        metavar="PATTERN",
        help="Only run test_ methods matching PATTERN",
    )
    parser.add_argument(
        "--exclude-method",
        metavar="PATTERN",
        help="Skip methods matching PATTERN",
    )
    parser.add_argument(
        "--reporter",
        dest="reporters",
        action="append",
        help="Reporter name or import path (repeatable)",
    )
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce output")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output")
    return parser


def _resolve_filters(args: argparse.Namespace, config: TallyConfig) -> Filters:
    return Filters(
        include=args.include or config.include,
        exclude=args.exclude or config.exclude,
        include_method=args.include_method or config.include_method,
        exclude_method=args.exclude_method or config.exclude_method,
    )


def _resolve_verbosity(args: argparse.Namespace, config: TallyConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_reporters(
    args: argparse.Namespace,
    config: TallyConfig,
    *,
    verbosity: int,
    console: Console | None = None,
) -> list[Reporter]:
    """CLI reporters override config; the console reporter is always present.

    The console reporter always takes the CLI console and verbosity, on top of
    any ``reporter_options`` it was given.
    """
    names = list(args.reporters or config.reporters)
    if ConsoleReporter not in {get_reporter_class(name) for name in names}:
        names.insert(0, "ConsoleReporter")

    options = {name: dict(kwargs) for name, kwargs in config.reporter_options.items()}
    for name in names:
        if get_reporter_class(name) is ConsoleReporter:
            options.setdefault(name, {}).update(console=console, verbosity=verbosity)
    return resolve_reporters(names, options)


def _configure_logging(verbosity: int, console: Console) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger.handlers.clear()
    logger.addHandler(RichHandler(console=console, show_time=False, show_path=False))
    logger.setLevel(level)
    logger.propagate = False


__all__ = ["main", "run_cli"]
