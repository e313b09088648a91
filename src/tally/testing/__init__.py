"""Test discovery, loading and execution.

Test files are plain Python modules that define a :class:`TestCase`
subclass; its ``test_`` methods are the tests.
"""

from .case import TEST_PREFIX, TestCase, TestEntry, TestUnit
from .discovery import discover
from .loader import LoadedUnit, load_unit
from .report import FileReport, RunReport
from .runner import Invocation, InvocationState, Runner, Scheduler, run
from .selection import (
    DiscoveryOutcome,
    Exclusion,
    ExclusionReason,
    Filters,
    MethodOutcome,
    select_methods,
)


__all__ = [
    "TEST_PREFIX",
    "DiscoveryOutcome",
    "Exclusion",
    "ExclusionReason",
    "FileReport",
    "Filters",
    "Invocation",
    "InvocationState",
    "LoadedUnit",
    "MethodOutcome",
    "RunReport",
    "Runner",
    "Scheduler",
    "TestCase",
    "TestEntry",
    "TestUnit",
    "discover",
    "load_unit",
    "run",
    "select_methods",
]
