"""Shared fixtures for unit tests."""

import logging
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from tally.reports.base import Reporter


class RecordingReporter(Reporter):
    """Reporter that remembers every hook call in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    async def on_fatal_error(self, error) -> None:
        self.events.append(("fatal", error))

    async def on_discovery_complete(self, outcome) -> None:
        self.events.append(("discovery", outcome))

    async def on_test_complete(self, result) -> None:
        self.events.append(("test", result))

    async def on_file_complete(self, file_report) -> None:
        self.events.append(("file", file_report))

    async def on_run_complete(self, report) -> None:
        self.events.append(("run", report))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def recording_reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def write_unit(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a test file into ``tmp_path`` and return its path."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_tally_logger():
    """The CLI installs its own handler on the ``tally`` logger; undo it."""
    yield
    tally_logger = logging.getLogger("tally")
    tally_logger.handlers.clear()
    tally_logger.setLevel(logging.NOTSET)
    tally_logger.propagate = True


@pytest.fixture
def two_file_root(tmp_path: Path) -> Path:
    """A root holding a passing a_test.py and a failing b_test.py."""
    root = tmp_path / "suite"
    root.mkdir()
    (root / "a_test.py").write_text(PASSING_UNIT, encoding="utf-8")
    (root / "b_test.py").write_text(FAILING_UNIT, encoding="utf-8")
    return root


PASSING_UNIT = """
from tally import TestCase, expect_equal


class ATest(TestCase):
    def test_one(self):
        return expect_equal(1, 1)
"""

FAILING_UNIT = """
from tally import TestCase, expect_equal


class BTest(TestCase):
    def test_two(self):
        return expect_equal(1, 2)
"""
