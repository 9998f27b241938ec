# documents/models.py

from enum import Enum
from typing import Optional, Protocol


class NodeKind(str, Enum):
    DOCUMENT = "document"
    QUOTE_BLOCK = "quote_block"
    CODE_BLOCK = "code_block"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    OTHER = "other"


class DocumentNode(Protocol):
    """
    Read-only view of one node in a parsed document tree.

    Only text and code leaves carry a literal. Navigation is limited to
    first child and next sibling, which is all a pre-order walk needs.
    """

    @property
    def kind(self) -> NodeKind: ...

    @property
    def literal(self) -> str | None: ...

    @property
    def first_child(self) -> Optional["DocumentNode"]: ...

    @property
    def next_sibling(self) -> Optional["DocumentNode"]: ...
