"""In-memory expression documents for testing.

Contents:
    * :class:`DocumentStore` - Serves documents from a dict instead of disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ...domain.selector import Renderable
from ..documents.loader import parse_expression


def _empty_documents() -> dict[str, str]:
    return {}


@dataclass
class DocumentStore:
    """Maps paths to document text and records every lookup.

    Example:
        >>> store = DocumentStore({"a.json": '{"parts": [{"kind": "id", "value": "x"}]}'})
        >>> store.load_expression(Path("a.json")).stringify()
        '#x'
        >>> store.requested
        ['a.json']
    """

    documents: dict[str, str] = field(default_factory=_empty_documents)
    requested: list[str] = field(default_factory=list)

    def add(self, path: str | Path, text: str) -> None:
        self.documents[str(path)] = text

    def load_expression(self, path: Path, *, strict_combinators: bool = False) -> Renderable:
        """Parse the stored document for ``path``.

        Raises:
            FileNotFoundError: Nothing was stored under ``path``.
        """
        key = str(path)
        self.requested.append(key)
        if key not in self.documents:
            raise FileNotFoundError(f"No such document: {key}")
        return parse_expression(self.documents[key], strict_combinators=strict_combinators)


__all__ = ["DocumentStore"]
