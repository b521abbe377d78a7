"""CLI renderer for wiz."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from wiz.core.hallucination import check_replacements
from wiz.core.types import HistoryRecord, SpellCheckResult, StoreStatus

NO_ISSUES_MESSAGE = "No typos or grammar issues found."
ARROW = "→"


def spell_report_lines(result: SpellCheckResult, source: str) -> list[Text]:
    """Lay out a spell-check result; suspect replacements are labelled, not hidden."""
    if result.is_empty:
        return [Text(NO_ISSUES_MESSAGE)]

    lines: list[Text] = []
    if result.replacements:
        lines.append(Text("\nProposed Replacements:", style="bold"))
        for idx, checked in enumerate(check_replacements(result.replacements, source), start=1):
            old, new = checked.replacement.old, checked.replacement.new
            if checked.hallucinated:
                lines.append(Text.assemble(f"{idx}. ", ("Hallucination:", "bold red"), f" '{old}' {ARROW} '{new}'"))
            else:
                lines.append(Text(f"{idx}. '{old}' {ARROW} '{new}'"))

    if result.suggestions:
        lines.append(Text("\nSuggestions:", style="bold"))
        lines.extend(Text(f"- {suggestion}") for suggestion in result.suggestions)
    return lines


def history_lines(record: HistoryRecord) -> list[Text]:
    return [
        Text(""),
        Text.assemble(("Prompt:", "bold green"), f' "{record.prompt}"'),
        Text.assemble(("Model:", "bold yellow"), f' "{record.model}"'),
        Text.assemble(("Response:", "bold yellow"), f' "{record.response}"'),
        Text.assemble(("Cost:", "bold yellow"), f" ${record.cost:.6f} (USD)"),
    ]


def status_lines(status: StoreStatus) -> list[Text]:
    return [
        Text(f"Found log database at {status.path}"),
        Text(f"Number of conversations logged: {status.conversations}"),
        Text(f"Number of responses logged:     {status.responses}"),
        Text(f"Database file size:             {status.size_kb:.2f}KB"),
    ]


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console: Console = console or Console(highlight=False)
        self.err_console: Console = err_console or Console(stderr=True, highlight=False)
        self._print_lock = threading.Lock()

    def command(self, text: str) -> None:
        """Print the model's command exactly as returned."""
        self._write_raw(self.console, f"{text}\n")

    def spell_report(self, result: SpellCheckResult, source: str) -> None:
        self._print_all(spell_report_lines(result, source))

    def history(self, records: Iterable[HistoryRecord]) -> None:
        for record in records:
            self._print_all(history_lines(record))

    def status(self, status: StoreStatus) -> None:
        self._print_all(status_lines(status))

    def error(self, message: str) -> None:
        """Render an error message."""
        with self._print_lock:
            self.err_console.print(Text.assemble(("Error:", "bold red"), f" {message}"), soft_wrap=True)

    def relay_stderr(self, text: str) -> None:
        """Copy a failed subprocess's stderr through untouched."""
        self._write_raw(self.err_console, text if text.endswith("\n") else f"{text}\n")

    def _write_raw(self, console: Console, text: str) -> None:
        # Bypasses rich layout, which would expand tabs and drop control characters.
        with self._print_lock:
            console.file.write(text)
            console.file.flush()

    def _print_all(self, lines: Iterable[Text]) -> None:
        for line in lines:
            self._print(line)

    def _print(self, message: Text) -> None:
        with self._print_lock:
            self.console.print(message, soft_wrap=True)
