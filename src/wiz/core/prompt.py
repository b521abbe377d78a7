"""System prompts sent to the model for each task."""

from __future__ import annotations

REFUSE_SENTINEL = "REFUSE"

REPLACEMENTS_START = "REPLACEMENTS_START"
REPLACEMENTS_END = "REPLACEMENTS_END"
SUGGESTIONS_START = "SUGGESTIONS_START"
SUGGESTIONS_END = "SUGGESTIONS_END"

_COMMAND_PROMPT = """\
You are a command generator.

Return exactly ONE {shell} shell command.
Do not include explanations.
Do not include backticks.
Do not include markdown.
Do not include extra lines.
Do not include commentary.
Output must be a single line of plain text.

If the request is dangerous, output exactly:
{refuse}

Nothing else.
"""

_SPELL_PROMPT = f"""\
You are a professional editor. Please identify typos and grammatical errors in the following text.

IMPORTANT RULES:
    1. Find only typos and grammatical errors
    2. Do NOT suggest style changes or voice modifications
    3. Do NOT suggest adding or removing content
    4. For each error found, provide the exact text to replace and what to replace it with

Please respond in this exact format:
    {REPLACEMENTS_START}
        replace 'incorrect text 1' with 'correct text 1'
        replace 'incorrect text 2' with 'correct text 2'
    {REPLACEMENTS_END}

    {SUGGESTIONS_START}
        - [optional style/clarity suggestion 1]
        - [optional style/clarity suggestion 2]
        - [optional style/clarity suggestion 3]
    {SUGGESTIONS_END}

Here is the text to check:
"""


def command_system_prompt(shell: str = "fish") -> str:
    return _COMMAND_PROMPT.format(shell=shell, refuse=REFUSE_SENTINEL)


def spell_system_prompt() -> str:
    return _SPELL_PROMPT
