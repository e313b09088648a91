"""Error types raised by the tally harness."""

from pathlib import Path


class TallyError(Exception):
    """Base class for every harness error."""


class ConfigError(TallyError):
    """Raised when the ``[tool.tally]`` configuration is malformed."""


class DiscoveryError(TallyError):
    """Raised when the test root cannot be enumerated. Aborts the run."""

    def __init__(self, root: Path, message: str) -> None:
        self.root = root
        super().__init__(message)


class DirectoryNotFound(DiscoveryError):
    """Raised when the test root does not exist."""

    def __init__(self, root: Path) -> None:
        super().__init__(root, f"Test directory not found: {root}")


class DirectoryUnreadable(DiscoveryError):
    """Raised when the test root exists but its entries cannot be listed."""

    def __init__(self, root: Path, cause: Exception | None = None) -> None:
        self.cause = cause
        message = f"Test directory could not be read: {root}"
        if cause:
            message += f" ({cause})"
        super().__init__(root, message)


class UnitError(TallyError):
    """Raised when a single test file cannot be turned into a test unit.

    The file is skipped; the rest of the run continues.
    """

    def __init__(self, path: Path, message: str, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        if cause:
            message += f": {type(cause).__name__}: {cause}"
        super().__init__(message)


class LoadError(UnitError):
    """Raised when a test file cannot be read, compiled or executed."""

    def __init__(self, path: Path, cause: Exception | None = None) -> None:
        super().__init__(path, f"Failed to load {path.name}", cause)


class InstantiationError(UnitError):
    """Raised when the test case class of a file cannot be constructed."""

    def __init__(self, path: Path, class_name: str, cause: Exception | None = None) -> None:
        self.class_name = class_name
        super().__init__(path, f"Failed to instantiate {class_name} from {path.name}", cause)


class ContractViolation(UnitError):
    """Raised when a loaded file does not provide a usable test case."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"{path.name} is not a valid test case: {reason}")


__all__ = [
    "ConfigError",
    "ContractViolation",
    "DirectoryNotFound",
    "DirectoryUnreadable",
    "DiscoveryError",
    "InstantiationError",
    "LoadError",
    "TallyError",
    "UnitError",
]
