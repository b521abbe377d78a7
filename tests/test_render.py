from __future__ import annotations

import io

from rich.console import Console

from wiz.cli.render import NO_ISSUES_MESSAGE, Renderer, spell_report_lines
from wiz.core.types import HistoryRecord, Replacement, SpellCheckResult


def _renderer() -> tuple[Renderer, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    console = Console(file=out, color_system=None, width=200)
    err_console = Console(file=err, color_system=None, width=200)
    return Renderer(console=console, err_console=err_console), out, err


def test_empty_result_reports_no_issues() -> None:
    lines = spell_report_lines(SpellCheckResult(), "anything")
    assert [line.plain for line in lines] == [NO_ISSUES_MESSAGE]
    assert NO_ISSUES_MESSAGE == "No typos or grammar issues found."


def test_report_marks_hallucinations_and_keeps_order() -> None:
    result = SpellCheckResult(
        replacements=[Replacement("Teh", "The"), Replacement("zeb", "The")],
        suggestions=["Be brief", "Add a title"],
    )

    plain = [line.plain for line in spell_report_lines(result, "Teh quick fox.")]

    assert plain == [
        "\nProposed Replacements:",
        "1. 'Teh' → 'The'",
        "2. Hallucination: 'zeb' → 'The'",
        "\nSuggestions:",
        "- Be brief",
        "- Add a title",
    ]


def test_suggestions_only_report() -> None:
    plain = [line.plain for line in spell_report_lines(SpellCheckResult(suggestions=["Be brief"]), "")]
    assert plain == ["\nSuggestions:", "- Be brief"]


def test_history_rendering_includes_cost() -> None:
    renderer, out, _ = _renderer()
    record = HistoryRecord(
        prompt="list files",
        response="ls -la",
        token_details='{"cost":0.001234}',
        model="test-model",
        datetime_utc="2025-01-01T00:00:00",
        cost=0.001234,
    )

    renderer.history([record])

    text = out.getvalue()
    assert 'Prompt: "list files"' in text
    assert 'Model: "test-model"' in text
    assert 'Response: "ls -la"' in text
    assert "Cost: $0.001234 (USD)" in text


def test_command_is_printed_verbatim() -> None:
    renderer, out, _ = _renderer()
    renderer.command("echo [bold]hi[/bold]")
    assert out.getvalue() == "echo [bold]hi[/bold]\n"


def test_stderr_is_relayed_untouched() -> None:
    renderer, out, err = _renderer()
    renderer.relay_stderr("Error: [quota] exceeded\n")
    assert out.getvalue() == ""
    assert err.getvalue() == "Error: [quota] exceeded\n"


def test_command_keeps_tabs_and_carriage_returns() -> None:
    renderer, out, _ = _renderer()
    renderer.command("cut -d'\t' -f1 data.tsv")
    assert out.getvalue() == "cut -d'\t' -f1 data.tsv\n"


def test_stderr_relay_keeps_control_characters() -> None:
    renderer, out, err = _renderer()
    renderer.relay_stderr("Traceback:\n\tFile 'x'\rprogress 50%\n")
    assert out.getvalue() == ""
    assert err.getvalue() == "Traceback:\n\tFile 'x'\rprogress 50%\n"


def test_stderr_relay_terminates_last_line() -> None:
    renderer, _, err = _renderer()
    renderer.relay_stderr("Error: boom")
    assert err.getvalue() == "Error: boom\n"
