"""Reporting module for tally run output."""

from tally.reports.base import Reporter
from tally.reports.console import ConsoleReporter
from tally.reports.registry import (
    clear_reporter_registry,
    get_reporter_class,
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)


register_builtin(ConsoleReporter)

__all__ = [
    "ConsoleReporter",
    "Reporter",
    "clear_reporter_registry",
    "get_reporter_class",
    "get_reporter_registry",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
