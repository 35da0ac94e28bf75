"""Exception hierarchy for the boots scaffolder."""

from __future__ import annotations

from pathlib import Path


class BootsError(Exception):
    """Base class for every error raised by boots."""


class InvalidOptionError(BootsError):
    """Raised when an options string contains an unrecognised keyword."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Invalid option: {option}")


class DirectoryExistsError(BootsError):
    """Raised when the project root to generate already exists."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory already exists: {self.path.name}")


class AlreadyExistsError(BootsError):
    """Raised when an add-on target file is already present."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Already exists: {path}")


class TemplateError(BootsError):
    """Raised for missing mandatory templates and unreadable template content."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"Template error: {message}")


class UnknownTargetError(BootsError):
    """Raised by ``boots add`` for a target it does not know."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Unknown target: {target}")


class ManifestError(BootsError):
    """Raised when a crate manifest cannot be read or updated as TOML."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)
