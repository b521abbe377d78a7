from wiz.core.interpreter import (
    extract_block,
    parse_command_output,
    parse_replacement_line,
    parse_spell_output,
)
from wiz.core.types import Replacement


def test_command_output_is_trimmed() -> None:
    assert parse_command_output("  ls -la\n\n") == "ls -la"


def test_refusal_sentinel_passes_through() -> None:
    assert parse_command_output("REFUSE\n") == "REFUSE"


def test_parse_replacement_line() -> None:
    assert parse_replacement_line("replace 'Teh' with 'The'") == Replacement("Teh", "The")


def test_parse_replacement_line_tolerates_indentation_and_trailing_text() -> None:
    line = "    replace 'recieve' with 'receive'   (spelling)"
    assert parse_replacement_line(line) == Replacement("recieve", "receive")


def test_parse_replacement_line_keeps_escaped_quotes() -> None:
    line = r"replace 'dont\'t' with 'don\'t'"
    assert parse_replacement_line(line) == Replacement("dont't", "don't")


def test_parse_replacement_line_rejects_malformed_lines() -> None:
    assert parse_replacement_line("swap 'a' with 'b'") is None
    assert parse_replacement_line("replace 'a' by 'b'") is None
    assert parse_replacement_line("replace 'a' with b") is None
    assert parse_replacement_line("replace a with 'b'") is None


def test_extract_block_requires_both_markers() -> None:
    assert extract_block("A body B", "A", "B") == " body "
    assert extract_block("A body", "A", "B") is None
    assert extract_block("body B", "A", "B") is None


def test_extract_block_ignores_end_marker_before_start() -> None:
    assert extract_block("B ... A body", "A", "B") is None


def test_parse_spell_output_reads_both_blocks() -> None:
    raw = (
        "Here is what I found.\n"
        "REPLACEMENTS_START\n"
        "  replace 'Teh' with 'The'\n"
        "  this line is chatter\n"
        "\n"
        "  replace 'fox' with 'fox'\n"
        "  replace 'jumpd' with 'jumped'\n"
        "REPLACEMENTS_END\n"
        "\n"
        "SUGGESTIONS_START\n"
        "  - Consider a shorter title\n"
        "  not a suggestion\n"
        "  -- Split the second paragraph\n"
        "SUGGESTIONS_END\n"
        "Hope this helps!\n"
    )

    result = parse_spell_output(raw)

    assert result.replacements == [Replacement("Teh", "The"), Replacement("jumpd", "jumped")]
    assert result.suggestions == ["Consider a shorter title", "Split the second paragraph"]
    assert not result.is_empty


def test_identical_replacement_is_dropped() -> None:
    result = parse_spell_output("REPLACEMENTS_START\nreplace 'same' with 'same'\nREPLACEMENTS_END")
    assert result.replacements == []


def test_unterminated_replacements_block_yields_nothing() -> None:
    raw = "REPLACEMENTS_START\nreplace 'Teh' with 'The'\nreplace 'a' with 'b'\n"
    assert parse_spell_output(raw).replacements == []


def test_blocks_are_independent() -> None:
    raw = "SUGGESTIONS_START\n- Tighten the intro\nSUGGESTIONS_END"
    result = parse_spell_output(raw)
    assert result.replacements == []
    assert result.suggestions == ["Tighten the intro"]


def test_no_blocks_is_empty() -> None:
    assert parse_spell_output("Looks good to me!").is_empty
