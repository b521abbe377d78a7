"""Application-level exception types for wiz."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from wiz.core.types import InvocationResult


class WizError(Exception):
    """Base exception for wiz."""


class ConfigurationError(WizError):
    """Raised when the environment needed to locate data is incomplete."""


class ToolNotFoundError(WizError):
    """Raised when the external llm executable cannot be spawned."""


class InputFileError(WizError):
    """Raised when the document to check cannot be read."""


class InvocationFailedError(WizError):
    """Raised when the llm subprocess exits with a non-zero status."""

    def __init__(self, result: InvocationResult) -> None:
        super().__init__(result.stderr)
        self.result = result


class LogStoreNotFoundError(WizError):
    """Raised when a log database is queried before llm has created it."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path: {path} does not exist.")
        self.path = path


class UsageError(WizError):
    """Raised when a command is missing its required argument."""


class LogStoreReadError(WizError):
    """Raised when a log database exists but cannot be queried."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read log database {path}: {reason}")
        self.path = path
