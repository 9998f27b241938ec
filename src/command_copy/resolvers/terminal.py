# src/command_copy/resolvers/terminal.py

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from command_copy.errors import CancellationError

from .base import ValueResolver

logger = logging.getLogger(__name__)

# Cursor up one line, then erase it.
CLEAR_PREVIOUS_LINE = "\x1b[1A\x1b[2K"


class TerminalValueResolver(ValueResolver):
    """
    Prompts on the terminal, one line per name.

    Prompts go to stderr so stdout carries only the final command. On a
    terminal each answered prompt is erased again. Ctrl-C at a prompt
    cancels the run.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stderr

    def resolve(self, names: Sequence[str]) -> dict[str, str]:
        values: dict[str, str] = {}
        for name in names:
            values[name] = self._ask(name)
        logger.debug("Resolved %d values from terminal", len(values))
        return values

    def _ask(self, name: str) -> str:
        self._output.write(f"{name}: ")
        self._output.flush()
        try:
            line = self._input.readline()
        except (KeyboardInterrupt, EOFError):
            self._output.write("\n")
            self._output.flush()
            raise CancellationError(f"Prompt for {name!r} interrupted") from None
        if self._output.isatty():
            self._output.write(CLEAR_PREVIOUS_LINE)
            self._output.flush()
        return line.rstrip("\r\n")
