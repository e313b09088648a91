"""
Configuration for tally.

Settings are read from the ``[tool.tally]`` table of the nearest
``pyproject.toml``, searching upward from the working directory. Missing
file or table means defaults. The test root is configuration only; it has no
command line flag.

Example:

    [tool.tally]
    test_root = "tests/tally"
    exclude = "*_slow.py"
    exclude_method = "test_network_*"
    inter_test_delay = 0.05
    addopts = ["-v"]
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from tally.errors import ConfigError


logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "pyproject.toml"
DEFAULT_TEST_ROOT = "tests/tally"


@dataclass
class TallyConfig:
    """Resolved settings for one run.

    Attributes:
        test_root: Directory holding the test files
        include: File name whitelist pattern
        exclude: File name blacklist pattern
        include_method: Method name whitelist pattern
        exclude_method: Method name blacklist pattern
        verbosity: Base report verbosity, adjusted by -v/-q
        inter_test_delay: Seconds to pause between test methods
        addopts: Extra arguments prepended to the command line
        reporters: Reporter names or import paths
        reporter_options: Constructor kwargs per reporter name
    """

    test_root: Path = field(default_factory=lambda: Path(DEFAULT_TEST_ROOT))
    include: str | None = None
    exclude: str | None = None
    include_method: str | None = None
    exclude_method: str | None = None
    verbosity: int = 0
    inter_test_delay: float = 0.0
    addopts: list[str] = field(default_factory=list)
    reporters: list[str] = field(default_factory=list)
    reporter_options: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_toml_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> TallyConfig:
        """Build a config from a ``[tool.tally]`` table.

        A relative ``test_root`` is resolved against ``base_dir``.
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown [tool.tally] key: %s", key)

        test_root = Path(_expect(data, "test_root", str, DEFAULT_TEST_ROOT))
        if base_dir is not None and not test_root.is_absolute():
            test_root = base_dir / test_root

        delay = _expect(data, "inter_test_delay", (int, float), 0.0)
        if delay < 0:
            raise ConfigError(f"inter_test_delay must be >= 0, got {delay}")

        return cls(
            test_root=test_root,
            include=_expect(data, "include", str, None),
            exclude=_expect(data, "exclude", str, None),
            include_method=_expect(data, "include_method", str, None),
            exclude_method=_expect(data, "exclude_method", str, None),
            verbosity=_expect(data, "verbosity", int, 0),
            inter_test_delay=float(delay),
            addopts=_expect_str_list(data, "addopts"),
            reporters=_expect_str_list(data, "reporters"),
            reporter_options=_expect(data, "reporter_options", dict, {}),
        )


DEFAULT_CONFIG = TallyConfig()


def _expect(data: dict[str, Any], key: str, kind: type | tuple[type, ...], default: Any) -> Any:
    if key not in data:
        return default
    value = data[key]
    if isinstance(value, bool) and kind is not bool:
        raise ConfigError(f"[tool.tally] {key} has an invalid value: {value!r}")
    if not isinstance(value, kind):
        raise ConfigError(f"[tool.tally] {key} has an invalid value: {value!r}")
    return value


def _expect_str_list(data: dict[str, Any], key: str) -> list[str]:
    value = _expect(data, key, list, [])
    if not all(isinstance(item, str) for item in value):
        raise ConfigError(f"[tool.tally] {key} must be a list of strings")
    return list(value)


def find_config_file(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> TallyConfig:
    """Load ``[tool.tally]`` from the nearest ``pyproject.toml``.

    Raises:
        ConfigError: The file cannot be parsed or a value has the wrong type.
    """
    path = find_config_file(start)
    if path is None:
        logger.debug("No %s found; using defaults", CONFIG_FILE_NAME)
        return TallyConfig(test_root=(start or Path.cwd()) / DEFAULT_TEST_ROOT)

    try:
        with path.open("rb") as fh:
            document = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc

    table = document.get("tool", {}).get("tally", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.tally] in {path} must be a table")

    logger.debug("Loaded configuration from %s", path)
    return TallyConfig.from_toml_dict(table, base_dir=path.parent)


__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_CONFIG",
    "DEFAULT_TEST_ROOT",
    "TallyConfig",
    "find_config_file",
    "load_config",
]
