"""Terminal text presenter and input collector."""
from __future__ import annotations

import os
import shutil
import sys
import textwrap
import time
from typing import Callable, Iterable, Sequence, TextIO

from libris.services.choice_matcher import normalize_input

CONTINUE_PROMPT = "[Press Enter to continue]"
_MAX_WIDTH = 80

InputFn = Callable[[str], str]


def debug_enabled() -> bool:
    """Return True only when LIBRIS_DEBUG is explicitly set to '1'."""
    return os.getenv("LIBRIS_DEBUG") == "1"


def wrap_text(text: str, width: int) -> list[str]:
    """
    Wrap text to a fixed width, breaking on word boundaries.

    Blank lines between paragraphs are kept so narration reads the way it
    was written.

    Args:
        text: The text to wrap
        width: Maximum width per line

    Returns:
        List of wrapped lines; blank strings mark paragraph breaks
    """
    if not text or width <= 0:
        return [text] if text else [""]
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if not paragraph.strip():
            lines.append("")
            continue
        wrapped = textwrap.fill(
            paragraph,
            width=width,
            break_long_words=False,
            break_on_hyphens=False,
        )
        lines.extend(wrapped.split("\n"))
    return lines


def _strip_emphasis(text: str) -> str:
    return text.replace("**", "")


def _terminal_width() -> int:
    return min(shutil.get_terminal_size((_MAX_WIDTH, 24)).columns, _MAX_WIDTH)


class TextPresenter:
    """Reveals text blocks one at a time and waits for Enter between them."""

    def __init__(
        self,
        *,
        mode: str = "typewriter",
        delay_ms: int = 50,
        width: int | None = None,
        sound_cues: bool = False,
        input_fn: InputFn | None = None,
        output: TextIO | None = None,
        sleep_fn: Callable[[float], None] = time.sleep,
    ) -> None:
        self._mode = mode
        self._delay = max(delay_ms, 0) / 1000
        self._width = width
        self._sound_cues = sound_cues
        self._input_fn = input_fn
        self._output = output
        self._sleep = sleep_fn

    def present(self, segments: Sequence[str]) -> None:
        """Reveal each block, waiting for the continue signal after each."""
        for segment in segments:
            self.reveal(segment)
            self.wait_for_continue()

    def reveal(self, text: str) -> None:
        """Write one block, character by character in typewriter mode."""
        out = self._stream()
        width = self._width or _terminal_width()
        body = "\n".join(wrap_text(_strip_emphasis(text), width))
        if self._mode == "typewriter" and self._delay > 0:
            for char in body:
                out.write(char)
                out.flush()
                self._sleep(self._delay)
            out.write("\n")
        else:
            out.write(body + "\n")
        out.flush()

    def wait_for_continue(self) -> None:
        self._read(CONTINUE_PROMPT)
        self._stream().write("\n")

    def cue(self) -> None:
        """Ring the terminal bell for an ominous moment, if enabled."""
        if self._sound_cues:
            self._stream().write("\a")
            self._stream().flush()

    def render_debug(self, lines: Iterable[str]) -> None:
        out = self._stream()
        for line in lines:
            out.write(f"  [debug] {line}\n")

    def _read(self, prompt: str) -> str:
        reader = self._input_fn or input
        return reader(prompt)

    def _stream(self) -> TextIO:
        return self._output or sys.stdout


class InputCollector:
    """Gathers one line of player input per call."""

    def __init__(self, input_fn: InputFn | None = None) -> None:
        self._input_fn = input_fn

    def collect_name(self, prompt: str = "") -> str:
        """Return the trimmed line, keeping its case."""
        return self._read(prompt).strip()

    def collect_choice(self, prompt: str = "> ") -> str:
        """Return the trimmed, lower-cased line."""
        return normalize_input(self._read(prompt))

    def _read(self, prompt: str) -> str:
        reader = self._input_fn or input
        return reader(prompt)
