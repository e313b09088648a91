"""Minimal result helpers for writing test methods."""

from typing import Any

from tally.assertions.base import TestResult
from tally.context import resolve_caller


def _truncate(value: Any, max_len: int = 60) -> str:
    """Truncate a repr string if too long."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def _result(passed: bool, message: str) -> TestResult:
    caller = resolve_caller()
    return TestResult(
        passed=passed,
        message=message,
        function_name=caller.function_name,
        file_name=caller.file_name,
        line_number=caller.line_number,
    )


def passed() -> TestResult:
    """Return a passing result located at the calling test."""
    return _result(True, "")


def failed(message: str) -> TestResult:
    """Return a failing result located at the calling test."""
    return _result(False, message or "Test failed")


def expect(condition: Any, message: str = "Expected condition to be true") -> TestResult:
    """Pass when ``condition`` is truthy."""
    if condition:
        return _result(True, "")
    return _result(False, message)


def expect_equal(actual: Any, expected: Any, message: str | None = None) -> TestResult:
    """Pass when ``actual == expected``."""
    if actual == expected:
        return _result(True, "")
    detail = f"Expected: {_truncate(expected)}, Got: {_truncate(actual)}"
    return _result(False, f"{message}: {detail}" if message else detail)
