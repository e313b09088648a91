"""Name-based lookup of reporter classes.

A reporter is any class that defines every hook in
:data:`~tally.reports.base.REPORTER_HOOKS` as a coroutine function. Classes are
checked when they are registered and when they are imported by path, so a
broken reporter fails before the run starts instead of mid-run.
"""

from __future__ import annotations

import importlib
import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from tally.reports.base import REPORTER_HOOKS


if TYPE_CHECKING:
    from tally.reports.base import Reporter


T = TypeVar("T")

_reporter_registry: dict[str, type[Reporter]] = {}
_builtin_registry: dict[str, type[Reporter]] = {}


def _check_reporter(cls: type, label: str) -> None:
    """Raise TypeError unless ``cls`` implements every hook as a coroutine."""
    missing = [
        hook for hook in REPORTER_HOOKS if not inspect.iscoroutinefunction(getattr(cls, hook, None))
    ]
    if missing:
        msg = f"{label} is not a reporter: missing async {', '.join(missing)}"
        raise TypeError(msg)


def reporter(
    cls: type[T] | None = None,
    *,
    name: str | None = None,
) -> type[T] | Any:
    """Register a reporter class so it can be selected with ``--reporter``.

    Usable bare (``@reporter``) or with a custom name
    (``@reporter(name="junit")``).

    Raises:
        TypeError: The class does not implement the reporter hooks.
    """

    def decorator(cls: type[T]) -> type[T]:
        key = name or cls.__name__
        _check_reporter(cls, key)
        _reporter_registry[key] = cls  # type: ignore[assignment]
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator


def register_builtin(cls: type[T]) -> type[T]:
    """Register a reporter that survives :func:`clear_reporter_registry`."""
    _check_reporter(cls, cls.__name__)
    _reporter_registry[cls.__name__] = cls  # type: ignore[assignment]
    _builtin_registry[cls.__name__] = cls  # type: ignore[assignment]
    return cls


def get_reporter_registry() -> dict[str, type[Reporter]]:
    return _reporter_registry


def clear_reporter_registry() -> None:
    """Forget user-registered reporters, keeping built-ins."""
    _reporter_registry.clear()
    _reporter_registry.update(_builtin_registry)


def _import_class(import_path: str) -> type:
    """Import ``package.module:ClassName`` or ``package.module.ClassName``."""
    separator = ":" if ":" in import_path else "."
    module_path, _, class_name = import_path.rpartition(separator)
    if not module_path or not class_name:
        msg = f"Invalid import path: {import_path}"
        raise ValueError(msg)

    cls = getattr(importlib.import_module(module_path), class_name, None)
    if not isinstance(cls, type):
        msg = f"{import_path} is not a class"
        raise TypeError(msg)
    return cls


def get_reporter_class(name: str) -> type[Reporter]:
    """Look ``name`` up in the registry, or import it as a class path.

    Raises:
        ValueError: ``name`` is neither registered nor an import path.
        TypeError: The imported object is not a reporter class.
        ImportError: The module of an import path cannot be imported.
    """
    cls = _reporter_registry.get(name)
    if cls is not None:
        return cls
    if ":" not in name and "." not in name:
        available = ", ".join(sorted(_reporter_registry)) or "none"
        msg = f"Unknown reporter: {name}. Available: {available}"
        raise ValueError(msg)
    imported = _import_class(name)
    _check_reporter(imported, name)
    return imported


def resolve_reporter(name: str, **kwargs: Any) -> Reporter:
    """Instantiate a reporter from a registry name or an import path."""
    return get_reporter_class(name)(**kwargs)


def resolve_reporters(
    names: list[str],
    options: dict[str, dict[str, Any]] | None = None,
) -> list[Reporter]:
    """Instantiate several reporters, passing each its entry from ``options``."""
    options = options or {}
    return [resolve_reporter(name, **options.get(name, {})) for name in names]


__all__ = [
    "clear_reporter_registry",
    "get_reporter_class",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
