import sys
from typing import TextIO

from .base import OutputSink


class EchoSink(OutputSink):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{text}\n")
        stream.flush()
