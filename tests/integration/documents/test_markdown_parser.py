from pathlib import Path
from unittest.mock import PropertyMock, patch

import pytest
from markdown_it.tree import SyntaxTreeNode

from command_copy.documents.base import read_document
from command_copy.documents.markdown_parser import MarkdownNode, MarkdownParser
from command_copy.documents.models import NodeKind
from command_copy.errors import InputError, StructureError
from command_copy.snippets.extractor import extract_snippets, walk

# --- Tree shape ---


def test_root_is_document(parsed_snippets: MarkdownNode) -> None:
    assert parsed_snippets.kind is NodeKind.DOCUMENT
    assert parsed_snippets.literal is None
    assert parsed_snippets.next_sibling is None


def test_quote_contains_paragraph_with_text_leaf(parsed_snippets: MarkdownNode) -> None:
    quote = next(n for n in walk(parsed_snippets) if n.kind is NodeKind.QUOTE_BLOCK)

    paragraph = quote.first_child
    assert paragraph is not None
    assert paragraph.kind is NodeKind.PARAGRAPH
    assert paragraph.first_child is not None
    assert paragraph.first_child.kind is NodeKind.TEXT
    assert paragraph.first_child.literal == "List pods"


def test_code_block_follows_quote(parsed_snippets: MarkdownNode) -> None:
    quote = next(n for n in walk(parsed_snippets) if n.kind is NodeKind.QUOTE_BLOCK)

    code = quote.next_sibling
    assert code is not None
    assert code.kind is NodeKind.CODE_BLOCK
    assert code.literal == "kubectl get pods -n $namespace\n"


def test_nodes_report_source_lines(parsed_snippets: MarkdownNode) -> None:
    quote = next(n for n in walk(parsed_snippets) if n.kind is NodeKind.QUOTE_BLOCK)

    assert quote.line == 3
    assert parsed_snippets.line is None


def test_walk_does_not_search_sibling_lists() -> None:
    """Stepping to the next sibling must not rescan the parent's children."""
    source = "".join(f"> step {i}\n\n```sh\necho {i}\n```\n\n" for i in range(200))
    root = MarkdownParser().parse(source)

    with patch.object(
        SyntaxTreeNode, "next_sibling", new_callable=PropertyMock
    ) as next_sibling:
        snippets = extract_snippets(root)

    next_sibling.assert_not_called()
    assert len(snippets) == 200
    assert snippets["step 199"] == "echo 199\n"


# --- Snippet extraction over real Markdown ---


def test_extracts_expected_labels(parsed_snippets: MarkdownNode) -> None:
    snippets = extract_snippets(parsed_snippets)

    assert list(snippets) == ["List pods", "Tail logs", "Indented block", "Inside a list"]


def test_fenced_code_is_verbatim(parsed_snippets: MarkdownNode) -> None:
    snippets = extract_snippets(parsed_snippets)

    assert snippets["Tail logs"] == "kubectl logs -f ${pod} -n $namespace\n"


def test_multi_line_label_uses_first_text_leaf(parsed_snippets: MarkdownNode) -> None:
    assert "Tail logs" in extract_snippets(parsed_snippets)


def test_indented_code_block_is_a_snippet(parsed_snippets: MarkdownNode) -> None:
    snippets = extract_snippets(parsed_snippets)

    assert snippets["Indented block"] == "echo indented $value\n"


def test_quote_followed_by_prose_is_skipped(parsed_snippets: MarkdownNode) -> None:
    snippets = extract_snippets(parsed_snippets)

    assert "Explained first" not in snippets
    assert "echo not associated\n" not in snippets.values()


def test_duplicate_label_keeps_later_snippet(parsed_snippets: MarkdownNode) -> None:
    assert extract_snippets(parsed_snippets)["List pods"] == "kubectl get pods -A\n"


def test_quote_inside_list_item(parsed_snippets: MarkdownNode) -> None:
    assert extract_snippets(parsed_snippets)["Inside a list"] == "echo from list\n"


def test_emphasized_label_is_a_structure_error(docs_dir: Path) -> None:
    root = MarkdownParser().parse(read_document(docs_dir / "emphasis.md"))

    with pytest.raises(StructureError, match="line 1"):
        extract_snippets(root)


def test_parsing_is_deterministic(docs_dir: Path) -> None:
    parser = MarkdownParser()
    text = read_document(docs_dir / "snippets.md")

    assert extract_snippets(parser.parse(text)) == extract_snippets(parser.parse(text))


# --- Reading files ---


def test_read_document(docs_dir: Path) -> None:
    assert read_document(docs_dir / "snippets.md").startswith("# Kubernetes")


def test_read_missing_document(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="File not found"):
        read_document(tmp_path / "missing.md")


def test_read_directory(tmp_path: Path) -> None:
    with pytest.raises(InputError):
        read_document(tmp_path)


def test_read_non_utf8_document(tmp_path: Path) -> None:
    path = tmp_path / "latin1.md"
    path.write_bytes("> caf\xe9\n".encode("latin-1"))

    with pytest.raises(InputError, match="Cannot read"):
        read_document(path)
