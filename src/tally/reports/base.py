"""Reporter protocol for tally run output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tally.assertions.base import TestResult
    from tally.errors import DiscoveryError
    from tally.testing.report import FileReport, RunReport
    from tally.testing.selection import DiscoveryOutcome


REPORTER_HOOKS = (
    "on_fatal_error",
    "on_discovery_complete",
    "on_test_complete",
    "on_file_complete",
    "on_run_complete",
)


class Reporter(Protocol):
    """Interface for run reporters.

    Hooks are async so reporters doing I/O can await it. They are called in
    run order, one at a time, from the same event loop that drives the tests.
    """

    async def on_fatal_error(self, error: DiscoveryError) -> None:
        """Called when the test root cannot be used and the run is aborted."""
        ...

    async def on_discovery_complete(self, outcome: DiscoveryOutcome) -> None:
        """Called once the accepted and excluded files are known."""
        ...

    async def on_test_complete(self, result: TestResult) -> None:
        """Called after each test method reaches a final state."""
        ...

    async def on_file_complete(self, file_report: FileReport) -> None:
        """Called after every selected method of a file has run."""
        ...

    async def on_run_complete(self, report: RunReport) -> None:
        """Called once with the finalized report."""
        ...
