# src/command_copy/selectors/external.py

import logging
import shlex
import subprocess
from collections.abc import Sequence

from command_copy.config import DEFAULT_SELECTOR
from command_copy.errors import CancellationError, SelectorError

from .base import Selector

logger = logging.getLogger(__name__)


class ExternalSelector(Selector):
    """
    Selector backed by an interactive program such as fzf.
    - Candidates go to the program's stdin, one per line
    - The first line of its stdout is the answer
    - stderr and the terminal stay attached for the program's UI
    """

    def __init__(
        self,
        program: str = DEFAULT_SELECTOR,
        arguments: str = "",
        timeout: float | None = None,
    ) -> None:
        self._command = [program, *shlex.split(arguments)]
        self._timeout = timeout

    @property
    def command(self) -> list[str]:
        return list(self._command)

    def select(self, labels: Sequence[str]) -> str:
        logger.debug("Running selector %s with %d labels", self._command, len(labels))
        try:
            result = subprocess.run(
                self._command,
                input="".join(f"{label}\n" for label in labels),
                stdout=subprocess.PIPE,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except OSError as e:
            raise SelectorError(f"Cannot run selector {self._command[0]!r}: {e}") from e
        except KeyboardInterrupt:
            raise CancellationError("Selection interrupted") from None
        except subprocess.TimeoutExpired:
            raise CancellationError(
                f"Selector timed out after {self._timeout} seconds"
            ) from None

        if result.returncode != 0:
            logger.debug("Selector exited with status %d", result.returncode)
            raise CancellationError(
                f"Selector exited with status {result.returncode}"
            )

        lines = result.stdout.splitlines()
        choice = lines[0] if lines else ""
        if not choice:
            raise CancellationError("Nothing selected")

        logger.debug("Selected: %s", choice)
        return choice
