from __future__ import annotations

import inspect
import os
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from types import FrameType
from typing import Iterator

from tally.matching import glob_match


_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))

EXECUTION_CONTEXT: ContextVar[ExecutionContext | None] = ContextVar(
    "execution_context", default=None
)

_helper_patterns: list[str] = [_PACKAGE_DIR + os.sep + "*"]


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """The test method currently being executed by the scheduler.

    Attributes
    ----------
    file_name
        Basename of the test file that owns the method.
    function_name
        Name of the ``test_`` method being invoked.
    file_path
        Full path of the test file, when known.
    """

    file_name: str
    function_name: str
    file_path: Path | None = None


@dataclass(frozen=True, slots=True)
class CallerInfo:
    """Source location of the user code that produced a result."""

    file_name: str
    function_name: str
    line_number: int


@contextmanager
def execution_context_scope(ctx: ExecutionContext) -> Iterator[None]:
    token = EXECUTION_CONTEXT.set(ctx)
    try:
        yield
    finally:
        EXECUTION_CONTEXT.reset(token)


def current_context() -> ExecutionContext | None:
    return EXECUTION_CONTEXT.get()


def register_helper_path(pattern: str) -> None:
    """Treat source files matching ``pattern`` as helper code.

    Frames from matching files are skipped by :func:`resolve_caller`, so
    results produced by shared helper modules are attributed to the test that
    called them.
    """
    if pattern not in _helper_patterns:
        _helper_patterns.append(pattern)


def unregister_helper_path(pattern: str) -> None:
    if pattern in _helper_patterns[1:]:
        _helper_patterns.remove(pattern)


def is_helper_frame(frame: FrameType) -> bool:
    filename = frame.f_code.co_filename
    if filename.startswith("<"):
        return True
    filename = os.path.realpath(filename)
    return any(glob_match(filename, pattern) for pattern in _helper_patterns)


def resolve_caller() -> CallerInfo:
    """Locate the user test code that is asking for a result.

    The active :class:`ExecutionContext` names the file and method. The stack
    is walked outward, skipping harness and registered helper frames, and the
    first remaining frame supplies the line number. Without an active context
    that frame also supplies the file and function names.
    """
    ctx = EXECUTION_CONTEXT.get()

    frame = inspect.currentframe()
    frame = frame.f_back if frame is not None else None
    try:
        while frame is not None and is_helper_frame(frame):
            frame = frame.f_back

        if frame is None:
            if ctx is None:
                return CallerInfo(file_name="", function_name="", line_number=0)
            return CallerInfo(
                file_name=ctx.file_name,
                function_name=ctx.function_name,
                line_number=0,
            )

        if ctx is None:
            return CallerInfo(
                file_name=os.path.basename(frame.f_code.co_filename),
                function_name=frame.f_code.co_name,
                line_number=frame.f_lineno,
            )
        return CallerInfo(
            file_name=ctx.file_name,
            function_name=ctx.function_name,
            line_number=frame.f_lineno,
        )
    finally:
        # Break the reference cycle between this frame and its locals.
        del frame
