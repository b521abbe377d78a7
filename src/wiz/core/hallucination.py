"""Detect edits whose original text never appears in the document."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from wiz.core.types import Replacement


@dataclass(frozen=True)
class CheckedReplacement:
    replacement: Replacement
    hallucinated: bool


def is_hallucinated(replacement: Replacement, source: str) -> bool:
    return replacement.old not in source


def check_replacements(replacements: Iterable[Replacement], source: str) -> list[CheckedReplacement]:
    """Annotate each replacement; suspect ones are kept so the user can judge them."""
    return [CheckedReplacement(item, is_hallucinated(item, source)) for item in replacements]
