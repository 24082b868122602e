"""Exceptions raised while scaffolding a project.

Every error is fatal: the CLI prints the message and exits with status 1.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class UsageError(ScaffoldError):
    """Raised when no project name was given."""


class ConflictError(ScaffoldError):
    """Raised when the target directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Folder already exists: {path}. Please choose a different project name."
        )


class FilesystemError(ScaffoldError):
    """Raised when creating or copying part of the project tree fails."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class InstallError(ScaffoldError):
    """Raised when the dependency install command cannot run or fails."""

    def __init__(self, message: str, command: str = "", returncode: int | None = None) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(message)
