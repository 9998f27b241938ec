# documents/base.py

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from command_copy.errors import InputError

from .models import DocumentNode

logger = logging.getLogger(__name__)


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: str) -> DocumentNode:
        """
        Parse document text and return the root node of its tree.

        Requirements:
        - Deterministic output for same input
        - Code literals are kept verbatim
        - The returned tree is never mutated by consumers
        """
        raise NotImplementedError


def read_document(path: str | Path) -> str:
    """Read a document as UTF-8 text, raising InputError when it cannot be read."""
    file_path = Path(path)
    logger.debug("Reading document: %s", file_path)
    try:
        return file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputError(f"File not found: {file_path}") from None
    except IsADirectoryError:
        raise InputError(f"Not a file: {file_path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {file_path}: {e}") from e
