"""Core invocation and interpretation logic for wiz."""

from .hallucination import CheckedReplacement, check_replacements, is_hallucinated
from .interpreter import parse_command_output, parse_spell_output
from .invoker import LlmInvoker, require_success
from .types import (
    HistoryRecord,
    InvocationRequest,
    InvocationResult,
    Replacement,
    SpellCheckResult,
    StoreStatus,
    TaskKind,
)

__all__ = [
    "CheckedReplacement",
    "HistoryRecord",
    "InvocationRequest",
    "InvocationResult",
    "LlmInvoker",
    "Replacement",
    "SpellCheckResult",
    "StoreStatus",
    "TaskKind",
    "check_replacements",
    "is_hallucinated",
    "parse_command_output",
    "parse_spell_output",
    "require_success",
]
