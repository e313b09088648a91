"""Result record shared by test methods, helpers and the scheduler."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError


class TestResult(BaseModel):
    """Outcome of a single test method.

    Attributes:
    ----------
    passed: bool
        Whether the test passed
    message: str
        Diagnostic text. Empty by convention when the test passed and
        expected to be non-empty when it failed.
    function_name: str
        Name of the test method the result belongs to
    file_name: str
        Basename of the file that defines the test method
    line_number: int
        Line that produced the result, 0 when unknown
    """

    __test__: ClassVar[bool] = False

    model_config = ConfigDict(frozen=True, from_attributes=True, strict=True)

    passed: bool
    message: str
    function_name: str
    file_name: str
    line_number: int

    @property
    def location(self) -> str:
        return f"{self.file_name}:{self.line_number}"

    def __bool__(self) -> bool:
        return self.passed


def coerce_result(value: Any) -> TestResult | None:
    """Validate that ``value`` is structurally a :class:`TestResult`.

    Accepts a ``TestResult``, a mapping or any object carrying the five
    fields. Returns None when the shape is wrong.
    """
    if isinstance(value, TestResult):
        return value
    try:
        return TestResult.model_validate(value)
    except ValidationError:
        return None
