"""Result records and the helpers that produce them."""

from .base import TestResult, coerce_result
from .basic import expect, expect_equal, failed, passed

__all__ = [
    "TestResult",
    "coerce_result",
    "expect",
    "expect_equal",
    "failed",
    "passed",
]
