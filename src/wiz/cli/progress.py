"""Terminal progress line shown while llm is running."""

from __future__ import annotations

import queue
import random
import sys
import threading
import time
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TextIO

FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
PHRASES = (
    "Winging it...",
    "Markov-chaining my way to it...",
    "Compressing the internet...",
)
FRAME_INTERVAL_SECONDS = 0.08
STOP_GRACE_SECONDS = 0.1
CLEAR_LINE = "\r\x1b[K"
STOP = "stop"


class ProgressIndicator:
    """Spinner drawn by a daemon thread until a stop message arrives."""

    def __init__(
        self,
        stream: TextIO,
        *,
        interval: float = FRAME_INTERVAL_SECONDS,
        phrases: Sequence[str] = PHRASES,
        frames: Sequence[str] = FRAMES,
    ) -> None:
        self._stream = stream
        self._interval = interval
        self._frames = frames
        self._signals: queue.SimpleQueue[str] = queue.SimpleQueue()
        self._thread: threading.Thread | None = None
        self.phrase = random.Random(time.time_ns()).choice(phrases)  # noqa: S311

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="wiz-progress", daemon=True)
        self._thread.start()

    def stop(self, grace: float = STOP_GRACE_SECONDS) -> None:
        """Ask the thread to clear its line and give it ``grace`` seconds to do so."""
        if self._thread is None:
            return
        self._signals.put(STOP)
        self._thread.join(grace)

    def _run(self) -> None:
        index = 0
        main_thread = threading.main_thread()
        while main_thread.is_alive():
            if not self._write(f"\r{self._frames[index]} {self.phrase}"):
                return
            index = (index + 1) % len(self._frames)
            # Waiting on the channel doubles as the frame delay, so a stop is seen at once.
            try:
                message = self._signals.get(timeout=self._interval)
            except queue.Empty:
                continue
            if message == STOP:
                self._write(CLEAR_LINE)
                return

    def _write(self, text: str) -> bool:
        try:
            self._stream.write(text)
            self._stream.flush()
        except (OSError, ValueError):
            # Closed or detached terminal; the animation just ends.
            return False
        return True


_SESSION: ProgressIndicator | None = None
_SESSION_LOCK = threading.Lock()


def start_progress(stream: TextIO | None = None, *, force: bool = False) -> ProgressIndicator | None:
    """Start the process-wide indicator once; later calls are no-ops.

    Nothing is drawn when ``stream`` is not a terminal unless ``force`` is set.
    """
    global _SESSION
    target = stream if stream is not None else sys.stderr
    with _SESSION_LOCK:
        if _SESSION is not None:
            return None
        if not force and not _isatty(target):
            return None
        _SESSION = ProgressIndicator(target)
        _SESSION.start()
        return _SESSION


def stop_progress() -> None:
    """Stop the indicator if one was started. Safe to call at any time."""
    session = _SESSION
    if session is not None:
        session.stop()


@contextmanager
def progress(enabled: bool = True, stream: TextIO | None = None) -> Iterator[None]:
    """Animate for the duration of the block; the line is cleared before it exits."""
    if enabled:
        start_progress(stream)
    try:
        yield
    finally:
        stop_progress()


def _isatty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False
