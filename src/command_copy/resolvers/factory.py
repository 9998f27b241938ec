# src/command_copy/resolvers/factory.py

from command_copy.config import CommandCopyConfig

from .base import ValueResolver
from .popup import PopupValueResolver
from .terminal import TerminalValueResolver

# Choosing this selector switches prompting to popups as well.
POPUP_SELECTOR = "rofi"


def create_value_resolver(config: CommandCopyConfig) -> ValueResolver:
    """Create the value resolver matching the configured selector.

    Example:
        >>> config = CommandCopyConfig(path="notes.md", selector="rofi")
        >>> create_value_resolver(config)  # doctest: +ELLIPSIS
        <...PopupValueResolver object at ...>
    """
    if config.selector == POPUP_SELECTOR:
        return PopupValueResolver(program=POPUP_SELECTOR)
    return TerminalValueResolver()
