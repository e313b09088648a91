"""Tally - headless test discovery and execution harness."""

from .assertions import TestResult, expect, expect_equal, failed, passed
from .context import register_helper_path
from .testing import RunReport, Runner, TestCase, run
from .version import __version__


__all__ = [
    # Writing tests
    "TestCase",
    "TestResult",
    "expect",
    "expect_equal",
    "failed",
    "passed",
    "register_helper_path",
    # Running tests
    "RunReport",
    "Runner",
    "run",
    "__version__",
]
