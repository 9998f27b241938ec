# src/command_copy/snippets/extractor.py

import logging
from collections.abc import Iterator
from time import monotonic

from command_copy.documents.models import DocumentNode, NodeKind
from command_copy.errors import StructureError
from command_copy.observability import names
from command_copy.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


def walk(root: DocumentNode) -> Iterator[DocumentNode]:
    """Yield every node of the tree in depth-first pre-order."""
    stack: list[DocumentNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        # Push the sibling first so the subtree is visited before it.
        # The root's siblings are not part of the tree.
        sibling = node.next_sibling if node is not root else None
        if sibling is not None:
            stack.append(sibling)
        child = node.first_child
        if child is not None:
            stack.append(child)


def extract_snippets(
    root: DocumentNode,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> dict[str, str]:
    """Map each quote-block label to the code block right after it.

    A quote block that is not directly followed by a code block yields no
    entry. When two quote blocks carry the same label the later one wins.

    Raises:
        StructureError: If a quote block has no paragraph/text pair to take
            its label from.
    """
    start = monotonic()
    snippets: dict[str, str] = {}
    collisions = 0

    for node in walk(root):
        if node.kind is not NodeKind.QUOTE_BLOCK:
            continue

        label = _label_of(node)
        code_block = node.next_sibling
        if code_block is None or code_block.kind is not NodeKind.CODE_BLOCK:
            logger.debug("Quote block %r has no code block, skipping", label)
            continue

        if label in snippets:
            collisions += 1
            logger.debug("Label %r seen again, keeping the later snippet", label)
        snippets[label] = code_block.literal or ""

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.EXTRACTION_DURATION, elapsed_ms)
    metrics_hook.increment(names.SNIPPETS_EXTRACTED, len(snippets))
    if collisions:
        metrics_hook.increment(names.SNIPPET_LABEL_COLLISIONS, collisions)
    logger.info("Extracted %d snippets", len(snippets))
    return snippets


def _label_of(quote: DocumentNode) -> str:
    inner = quote.first_child
    leaf = inner.first_child if inner is not None else None
    if leaf is None or leaf.literal is None:
        where = getattr(quote, "line", None)
        suffix = f" (line {where})" if where else ""
        logger.error("Quote block without label text%s", suffix)
        raise StructureError(f"Quote block has no label text{suffix}")
    return leaf.literal
