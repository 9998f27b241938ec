from collections.abc import Sequence
from typing import Protocol


class ValueResolver(Protocol):
    def resolve(self, names: Sequence[str]) -> dict[str, str]:
        """Ask for a value for every name, in order.

        The returned map holds an entry for every requested name, possibly
        the empty string, in the order the names were given.
        """
        ...
