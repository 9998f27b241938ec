from collections.abc import Sequence
from typing import Protocol


class Selector(Protocol):
    def select(self, labels: Sequence[str]) -> str:
        """Let the user pick one label.

        Raises:
            CancellationError: If the user aborts or picks nothing.
        """
        ...
