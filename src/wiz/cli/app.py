"""Typer application for wiz."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError

from wiz.cli.progress import progress
from wiz.cli.render import Renderer
from wiz.config import WizSettings, load_settings
from wiz.core.interpreter import parse_command_output, parse_spell_output
from wiz.core.invoker import LlmInvoker, require_success
from wiz.core.prompt import command_system_prompt, spell_system_prompt
from wiz.core.types import InvocationRequest, TaskKind
from wiz.errors import ConfigurationError, InputFileError, InvocationFailedError, UsageError, WizError
from wiz.log_store import LogStore
from wiz.logging_utils import configure_logging, is_verbose

FREEFORM_COMMAND = "ask"
COMMAND_NAMES = frozenset({"cmd", "spell", "help", FREEFORM_COMMAND})
PASSTHROUGH_CONTEXT = {"ignore_unknown_options": True, "allow_interspersed_args": False}

app = typer.Typer(
    name="wiz",
    help="Ask a model for a shell command or a spelling pass over a file.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None and not ctx.resilient_parsing:
        with _exit_on_error(Renderer()):
            raise UsageError("A prompt is required.")


@app.command("cmd", context_settings=PASSTHROUGH_CONTEXT)
def cmd(
    words: list[str] | None = typer.Argument(None, help="Prompt text, or `list [N]` / `status`"),  # noqa: B008
) -> None:
    """Suggest one shell command, or inspect the command log."""
    words = list(words or [])
    settings, renderer = _bootstrap()
    with _exit_on_error(renderer):
        head = words[0] if words else None
        if head == "list":
            count = _parse_count(words[1:], settings.history_limit)
            renderer.history(LogStore(settings.cmd_db_path()).recent(count))
        elif head == "status":
            renderer.status(LogStore(settings.cmd_db_path()).status())
        else:
            _give_command(settings, renderer, words)


@app.command(FREEFORM_COMMAND, hidden=True, context_settings=PASSTHROUGH_CONTEXT)
def ask(words: list[str] | None = typer.Argument(None)) -> None:  # noqa: B008
    """Suggest one shell command for free text."""
    settings, renderer = _bootstrap()
    with _exit_on_error(renderer):
        _give_command(settings, renderer, list(words or []))


@app.command("spell")
def spell(target: str | None = typer.Argument(None, help="File to check, or `status`")) -> None:
    """Check a file for typos and grammar errors, or inspect the spell log."""
    settings, renderer = _bootstrap()
    with _exit_on_error(renderer):
        if target is None:
            raise UsageError("A file path is required.")
        if target == "status":
            renderer.status(LogStore(settings.spell_db_path()).status())
            return
        _spell_check(settings, renderer, Path(target))


@app.command("help")
def help_(ctx: typer.Context) -> None:
    """Show this help message."""
    parent = ctx.parent or ctx
    typer.echo(parent.get_help())


def main(argv: Sequence[str] | None = None) -> None:
    """Console entry point; bare text is treated as `wiz cmd <text>`."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] not in COMMAND_NAMES and not args[0].startswith("-"):
        args = [FREEFORM_COMMAND, *args]
    app(args=args, prog_name="wiz")


def _bootstrap() -> tuple[WizSettings, Renderer]:
    renderer = Renderer()
    with _exit_on_error(renderer):
        try:
            settings = load_settings()
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc
    configure_logging(settings.log_level)
    return settings, renderer


@contextmanager
def _exit_on_error(renderer: Renderer) -> Iterator[None]:
    try:
        yield
    except InvocationFailedError as exc:
        renderer.relay_stderr(exc.result.stderr)
        raise typer.Exit(1) from exc
    except WizError as exc:
        logger.debug("cli.fatal error={}", type(exc).__name__)
        renderer.error(str(exc))
        raise typer.Exit(1) from exc


def _give_command(settings: WizSettings, renderer: Renderer, words: list[str]) -> None:
    prompt = " ".join(words).strip()
    if not prompt:
        raise UsageError("A prompt is required.")
    request = InvocationRequest(
        kind=TaskKind.COMMAND,
        system_prompt=command_system_prompt(settings.shell),
        payload=prompt,
        log_path=settings.cmd_db_path(),
    )
    renderer.command(parse_command_output(_invoke(settings, request)))


def _spell_check(settings: WizSettings, renderer: Renderer, path: Path) -> None:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"Failed to read file: {path}") from exc

    request = InvocationRequest(
        kind=TaskKind.SPELL,
        system_prompt=spell_system_prompt(),
        payload=content,
        log_path=settings.spell_db_path(),
    )
    result = parse_spell_output(_invoke(settings, request))
    renderer.spell_report(result, content)


def _invoke(settings: WizSettings, request: InvocationRequest) -> str:
    # The progress line is cleared before anything, including a failure, is printed.
    # Verbose logging writes to stderr too, so the line is not drawn alongside it.
    with progress(enabled=settings.progress and not is_verbose(settings.log_level)):
        result = LlmInvoker(settings).run(request)
    return require_success(result).stdout


def _parse_count(tokens: list[str], default: int) -> int:
    if not tokens:
        return default
    try:
        count = int(tokens[0])
    except ValueError:
        return default
    return count if count > 0 else default
