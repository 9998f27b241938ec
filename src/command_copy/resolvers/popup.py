# src/command_copy/resolvers/popup.py

import logging
import shlex
import subprocess
from collections.abc import Sequence

from command_copy.errors import CancellationError, SelectorError

from .base import ValueResolver

logger = logging.getLogger(__name__)


class PopupValueResolver(ValueResolver):
    """
    Prompts with one popup per name, e.g. ``rofi -dmenu -p name``.

    A dismissed popup counts as an empty answer.
    """

    def __init__(self, program: str = "rofi", arguments: str = "-dmenu") -> None:
        self._command = [program, *shlex.split(arguments)]

    def resolve(self, names: Sequence[str]) -> dict[str, str]:
        values: dict[str, str] = {}
        for name in names:
            values[name] = self._ask(name)
        logger.debug("Resolved %d values from popups", len(values))
        return values

    def _ask(self, name: str) -> str:
        command = [*self._command, "-p", name]
        try:
            result = subprocess.run(
                command,
                input="",
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            raise SelectorError(f"Cannot run prompt {command[0]!r}: {e}") from e
        except KeyboardInterrupt:
            raise CancellationError(f"Prompt for {name!r} interrupted") from None

        if result.returncode != 0:
            logger.debug("Prompt for %s dismissed (status %d)", name, result.returncode)
            return ""
        lines = result.stdout.splitlines()
        return lines[0] if lines else ""
