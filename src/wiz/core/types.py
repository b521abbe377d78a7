"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class TaskKind(str, Enum):
    """What a single wiz run asks of the model."""

    COMMAND = "cmd"
    SPELL = "spell"


@dataclass(frozen=True)
class InvocationRequest:
    """One call to the external llm tool.

    For ``TaskKind.COMMAND`` the payload becomes a trailing positional argument,
    for ``TaskKind.SPELL`` it is written to the child's stdin.
    """

    kind: TaskKind
    system_prompt: str
    payload: str
    log_path: Path

    @property
    def pipes_payload(self) -> bool:
        return self.kind is TaskKind.SPELL


@dataclass(frozen=True)
class InvocationResult:
    """Captured outcome of one llm subprocess."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class Replacement:
    """Edit proposed by the model: swap ``old`` for ``new``."""

    old: str
    new: str


@dataclass(frozen=True)
class SpellCheckResult:
    """Replacements and free-text suggestions parsed from one response."""

    replacements: list[Replacement] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.replacements and not self.suggestions


@dataclass(frozen=True)
class HistoryRecord:
    """One row of the llm ``responses`` table."""

    prompt: str
    response: str
    token_details: str
    model: str
    datetime_utc: str
    cost: float = 0.0


@dataclass(frozen=True)
class StoreStatus:
    """Summary of a log database file."""

    path: Path
    conversations: int
    responses: int
    size_bytes: int

    @property
    def size_kb(self) -> float:
        return self.size_bytes / 1024.0
