"""Line-based console prompt used to confirm new configurations."""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from .config_store import ProfileError

CONFIRM_PROMPT = "Would you like to create a new system with the default configuration? [y/n] "


class PromptClosedError(ProfileError):
    """Raised when no answer can be read: the input ended or failed."""


class LinePrompt(Protocol):
    def ask(self, message: str) -> str:
        """Show ``message`` and return one raw line of input."""
        ...


class StreamPrompt:
    """Prompt over a pair of text streams (stdin/stdout by default)."""

    def __init__(self, instream: Optional[TextIO] = None, outstream: Optional[TextIO] = None) -> None:
        self._instream = instream
        self._outstream = outstream

    def ask(self, message: str) -> str:
        instream = self._instream or sys.stdin
        outstream = self._outstream or sys.stdout

        outstream.write(message)
        outstream.flush()

        try:
            line = instream.readline()
        except OSError as exc:
            raise PromptClosedError(f"Could not read an answer: {exc}") from exc
        if not line:
            raise PromptClosedError("Input closed before an answer was given.")
        return line
