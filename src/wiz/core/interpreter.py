"""Turn raw llm output into typed results."""

from __future__ import annotations

import re

from wiz.core.prompt import REPLACEMENTS_END, REPLACEMENTS_START, SUGGESTIONS_END, SUGGESTIONS_START
from wiz.core.types import Replacement, SpellCheckResult

REPLACE_LINE_RE = re.compile(r"^replace\b[^']*'((?:[^'\\]|\\.)*)'\s*with\b[^']*'((?:[^'\\]|\\.)*)'")
SUGGESTION_PREFIX = "-"


def parse_command_output(raw: str) -> str:
    """Return the suggested command, or the refusal sentinel, as printed by the model."""

    return raw.strip()


def extract_block(raw: str, start_marker: str, end_marker: str) -> str | None:
    """Return the text between two markers, or None when the pair is incomplete."""

    start = raw.find(start_marker)
    if start < 0:
        return None
    body_start = start + len(start_marker)
    end = raw.find(end_marker, body_start)
    if end < 0:
        return None
    return raw[body_start:end]


def parse_replacement_line(line: str) -> Replacement | None:
    """Parse ``replace 'old' with 'new'``; anything else yields None."""

    match = REPLACE_LINE_RE.match(line.strip())
    if match is None:
        return None
    old, new = (_unescape_quotes(group) for group in match.groups())
    return Replacement(old=old, new=new)


def parse_replacements(raw: str) -> list[Replacement]:
    block = extract_block(raw, REPLACEMENTS_START, REPLACEMENTS_END)
    if block is None:
        return []

    replacements: list[Replacement] = []
    for line in block.splitlines():
        if not line.strip():
            continue
        replacement = parse_replacement_line(line)
        if replacement is None or replacement.old == replacement.new:
            continue
        replacements.append(replacement)
    return replacements


def parse_suggestions(raw: str) -> list[str]:
    block = extract_block(raw, SUGGESTIONS_START, SUGGESTIONS_END)
    if block is None:
        return []

    suggestions: list[str] = []
    for line in block.splitlines():
        stripped = line.strip()
        if stripped.startswith(SUGGESTION_PREFIX):
            suggestions.append(stripped.lstrip(SUGGESTION_PREFIX).strip())
    return suggestions


def parse_spell_output(raw: str) -> SpellCheckResult:
    """Collect replacements and suggestions; prose around the blocks is ignored."""

    return SpellCheckResult(replacements=parse_replacements(raw), suggestions=parse_suggestions(raw))


def _unescape_quotes(text: str) -> str:
    return text.replace("\\'", "'")
