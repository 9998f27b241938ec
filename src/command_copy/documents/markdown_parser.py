# documents/markdown_parser.py

from __future__ import annotations

import logging

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .base import DocumentParser
from .models import NodeKind

logger = logging.getLogger(__name__)

_KINDS = {
    "root": NodeKind.DOCUMENT,
    "blockquote": NodeKind.QUOTE_BLOCK,
    "fence": NodeKind.CODE_BLOCK,
    "code_block": NodeKind.CODE_BLOCK,
    "paragraph": NodeKind.PARAGRAPH,
    "text": NodeKind.TEXT,
    "code_inline": NodeKind.TEXT,
}

# Nodes whose literal is their token content.
_LEAVES = {NodeKind.TEXT, NodeKind.CODE_BLOCK}


class MarkdownNode:
    """
    DocumentNode over a markdown-it syntax tree node.

    markdown-it wraps the inline content of paragraphs and headings in an
    extra "inline" node. It is skipped here, so a paragraph's first child is
    its first text leaf as in the CommonMark reference tree.
    """

    __slots__ = ("_node", "_siblings", "_index")

    def __init__(
        self,
        node: SyntaxTreeNode,
        siblings: list[SyntaxTreeNode] | None = None,
        index: int = 0,
    ) -> None:
        # Siblings travel with the node so stepping right is O(1).
        self._node = node
        self._siblings = siblings if siblings is not None else [node]
        self._index = index

    @property
    def kind(self) -> NodeKind:
        return _KINDS.get(self._node.type, NodeKind.OTHER)

    @property
    def literal(self) -> str | None:
        if self.kind in _LEAVES:
            return self._node.content
        return None

    @property
    def first_child(self) -> MarkdownNode | None:
        children = _children(self._node)
        return MarkdownNode(children[0], children, 0) if children else None

    @property
    def next_sibling(self) -> MarkdownNode | None:
        index = self._index + 1
        if index < len(self._siblings):
            return MarkdownNode(self._siblings[index], self._siblings, index)
        return None

    @property
    def line(self) -> int | None:
        """1-based source line of the node, when markdown-it recorded one."""
        if not self._node.is_root and self._node.map:
            return self._node.map[0] + 1
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MarkdownNode) and other._node is self._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"MarkdownNode({self._node.type!r}, line={self.line})"


def _children(node: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    children = node.children
    if len(children) == 1 and children[0].type == "inline":
        return children[0].children
    return children


class MarkdownParser(DocumentParser):
    """
    CommonMark parser backed by markdown-it-py.
    - Uses the strict "commonmark" preset
    - Fenced and indented code blocks both map to CODE_BLOCK
    - Code literals keep their trailing newline
    """

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark")

    def parse(self, source: str) -> MarkdownNode:
        tokens = self._md.parse(source)
        logger.debug("Parsed document into %d tokens", len(tokens))
        return MarkdownNode(SyntaxTreeNode(tokens))
