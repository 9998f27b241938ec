# src/command_copy/sinks/clipboard.py

import logging
import shutil
import subprocess

import pyperclip
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from command_copy.errors import ClipboardError

from .base import OutputSink

logger = logging.getLogger(__name__)

XCLIP_SELECTIONS = ("primary", "secondary", "clipboard")


class ClipboardSink(OutputSink):
    """
    Copies text to every clipboard selection the host offers.
    - With xclip on PATH: the X primary, secondary and clipboard selections
    - Otherwise: the system clipboard through pyperclip
    - Transient failures are retried
    """

    def __init__(self, max_attempts: int = 3) -> None:
        self._xclip = shutil.which("xclip")
        self._max_attempts = max_attempts
        logger.debug("Clipboard backend: %s", self._xclip or "pyperclip")

    def write(self, text: str) -> None:
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
                retry=retry_if_exception_type(
                    (OSError, subprocess.CalledProcessError, pyperclip.PyperclipException)
                ),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    self._copy(text)
        except (
            OSError,
            subprocess.CalledProcessError,
            pyperclip.PyperclipException,
        ) as e:
            raise ClipboardError(f"Cannot write to clipboard: {e}") from e

    def _copy(self, text: str) -> None:
        if self._xclip is None:
            pyperclip.copy(text)
            return
        for selection in XCLIP_SELECTIONS:
            # xclip keeps serving the selection in the background; detach its
            # output so a piped stdout is not held open.
            subprocess.run(
                [self._xclip, "-selection", selection],
                input=text,
                text=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
            )
        logger.debug("Copied to selections: %s", ", ".join(XCLIP_SELECTIONS))
