from .base import DocumentParser, read_document
from .markdown_parser import MarkdownNode, MarkdownParser
from .models import DocumentNode, NodeKind

__all__ = [
    "DocumentNode",
    "DocumentParser",
    "MarkdownNode",
    "MarkdownParser",
    "NodeKind",
    "read_document",
]
