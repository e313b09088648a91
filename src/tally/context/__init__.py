from .context import (
    EXECUTION_CONTEXT,
    CallerInfo,
    ExecutionContext,
    current_context,
    execution_context_scope,
    is_helper_frame,
    register_helper_path,
    resolve_caller,
    unregister_helper_path,
)

__all__ = [
    "EXECUTION_CONTEXT",
    "CallerInfo",
    "ExecutionContext",
    "current_context",
    "execution_context_scope",
    "is_helper_frame",
    "register_helper_path",
    "resolve_caller",
    "unregister_helper_path",
]
