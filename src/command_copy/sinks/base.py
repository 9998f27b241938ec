from typing import Protocol


class OutputSink(Protocol):
    def write(self, text: str) -> None: ...
