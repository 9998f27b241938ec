from .base import OutputSink
from .clipboard import XCLIP_SELECTIONS, ClipboardSink
from .echo import EchoSink

__all__ = [
    "ClipboardSink",
    "EchoSink",
    "OutputSink",
    "XCLIP_SELECTIONS",
]
