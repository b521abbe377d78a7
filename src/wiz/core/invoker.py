"""Run the external llm tool as a subprocess."""

from __future__ import annotations

import subprocess

from loguru import logger

from wiz.config import WizSettings
from wiz.core.types import InvocationRequest, InvocationResult
from wiz.errors import InvocationFailedError, ToolNotFoundError


class LlmInvoker:
    """Builds llm command lines and captures their output.

    Every call is a single attempt. Logging of prompts and responses is left to
    llm itself through its ``--log -d <db>`` flags.
    """

    def __init__(self, settings: WizSettings) -> None:
        self._settings = settings

    def build_argv(self, request: InvocationRequest) -> list[str]:
        argv = [
            self._settings.llm_bin,
            "-m",
            self._settings.model,
            "--no-stream",
            "--log",
            "-d",
            str(request.log_path),
            "-s",
            request.system_prompt,
        ]
        if not request.pipes_payload:
            argv.append(request.payload)
        return argv

    def run(self, request: InvocationRequest) -> InvocationResult:
        """Spawn llm, wait for it, and return what it printed."""
        argv = self.build_argv(request)
        logger.debug("invoker.spawn kind={} bin={} log={}", request.kind.value, argv[0], request.log_path)
        if request.pipes_payload:
            io_kwargs: dict[str, object] = {"input": request.payload}
        else:
            io_kwargs = {"stdin": subprocess.DEVNULL}
        try:
            # Arguments are passed as a list, never through a shell.
            completed = subprocess.run(  # noqa: S603
                argv,
                **io_kwargs,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise ToolNotFoundError(f"Failed to spawn {argv[0]}: {exc}") from exc

        result = InvocationResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        logger.debug("invoker.exit kind={} returncode={}", request.kind.value, result.returncode)
        return result


def require_success(result: InvocationResult) -> InvocationResult:
    """Raise when llm failed; stdout of a failed run is never interpreted."""
    if not result.succeeded:
        logger.info("invoker.failed returncode={}", result.returncode)
        raise InvocationFailedError(result)
    return result
