"""Rich console reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from tally.assertions.base import TestResult
    from tally.errors import DiscoveryError
    from tally.testing.report import FileReport, RunReport
    from tally.testing.selection import DiscoveryOutcome


class ConsoleReporter:
    """Prints a report grouped by test file.

    verbosity < 0 prints only the summary line, 0 prints the grouped report,
    1 also prints a line per finished test and the filtered names.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity

    async def on_fatal_error(self, error: DiscoveryError) -> None:
        self.console.print(Text(f"FATAL: {error}", style="bold red"))

    async def on_discovery_complete(self, outcome: DiscoveryOutcome) -> None:
        if self.verbosity < 1:
            return
        self.console.print(
            Text(
                f"Collected {len(outcome.accepted)} file(s), "
                f"{len(outcome.excluded)} excluded by filters",
                style="bold",
            )
        )
        for exclusion in outcome.excluded:
            self.console.print(
                Text(f"  filtered {exclusion.name} ({exclusion.reason.value})", style="dim")
            )

    async def on_test_complete(self, result: TestResult) -> None:
        if self.verbosity < 1:
            return
        status = Text("PASS", style="green") if result.passed else Text("FAIL", style="red")
        self.console.print(Text.assemble(status, f" {result.file_name}::{result.function_name}"))

    async def on_file_complete(self, file_report: FileReport) -> None:
        if self.verbosity < 1:
            return
        for exclusion in file_report.excluded_methods:
            self.console.print(
                Text(
                    f"  filtered {file_report.file_name}::{exclusion.name} "
                    f"({exclusion.reason.value})",
                    style="dim",
                )
            )

    async def on_run_complete(self, report: RunReport) -> None:
        if self.verbosity >= 0:
            if report.files:
                self.console.print(self._build_tree(report))
            self._print_messages("Errors", report.errors, "red")
            self._print_messages("Warnings", report.warnings, "yellow")
        self.console.print(self._summary(report))

    def _build_tree(self, report: RunReport) -> Tree:
        tree = Tree(Text("Test results", style="bold"))
        for file_report in report.files.values():
            branch = tree.add(self._file_label(file_report))
            for failure in file_report.failures:
                branch.add(
                    Text.assemble(
                        ("✗ ", "red"),
                        (failure.function_name, "bold"),
                        f": {failure.message} ",
                        (f"({failure.location})", "dim"),
                    )
                )
        return tree

    def _file_label(self, file_report: FileReport) -> Text:
        name = Text(file_report.file_name, style="bold")
        if file_report.skipped:
            return Text.assemble(name, ("  skipped", "yellow"))
        counts = Text.assemble(
            "  ",
            (f"{file_report.passed} passed", "green"),
            ", ",
            (f"{file_report.failed} failed", "red" if file_report.failed else "dim"),
        )
        return Text.assemble(name, counts)

    def _print_messages(self, title: str, messages: list[str], style: str) -> None:
        if not messages:
            return
        self.console.print(Text(f"{title}:", style=f"bold {style}"))
        for message in messages:
            self.console.print(Text(f"  {message}", style=style))

    def _summary(self, report: RunReport) -> Text:
        style = "bold green" if report.exit_code == 0 else "bold red"
        return Text(
            f"{report.total_processed} total, "
            f"{report.passed_count} passed, "
            f"{report.failed_count} failed, "
            f"{len(report.skipped_files)} file(s) skipped | "
            f"excluded: {len(report.excluded_files)} file(s), "
            f"{report.excluded_method_count} method(s)",
            style=style,
        )


__all__ = ["ConsoleReporter"]
