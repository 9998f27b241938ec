from .base import ValueResolver
from .factory import POPUP_SELECTOR, create_value_resolver
from .popup import PopupValueResolver
from .terminal import TerminalValueResolver

__all__ = [
    # Factory
    "create_value_resolver",
    "POPUP_SELECTOR",
    # Protocol
    "ValueResolver",
    # Backends
    "PopupValueResolver",
    "TerminalValueResolver",
]
