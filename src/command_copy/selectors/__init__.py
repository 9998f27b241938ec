from .base import Selector
from .external import ExternalSelector

__all__ = [
    "ExternalSelector",
    "Selector",
]
