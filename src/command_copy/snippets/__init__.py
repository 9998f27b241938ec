from .extractor import extract_snippets, walk

__all__ = [
    "extract_snippets",
    "walk",
]
