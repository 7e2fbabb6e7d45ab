"""Type-safe domain enums for selector parts, combinators, and output formats."""

from __future__ import annotations

from enum import Enum
from typing import Final


class PartKind(str, Enum):
    """Kinds of simple selectors that make up one compound selector.

    Inherits from str to allow direct string comparison and Click integration.
    Member order is the rendering order mandated by CSS and doubles as the
    rank table consulted by :meth:`rank`.

    Attributes:
        ELEMENT: Type selector (``div``).
        ID: Id selector (``#main``).
        CLASS: Class selector (``.container``).
        ATTRIBUTE: Attribute selector (``[href]``).
        PSEUDO_CLASS: Pseudo-class (``:focus``).
        PSEUDO_ELEMENT: Pseudo-element (``::before``).

    Example:
        >>> PartKind.ELEMENT.rank < PartKind.PSEUDO_ELEMENT.rank
        True
        >>> PartKind.CLASS == "class"
        True
        >>> PartKind.ID.is_unique
        True
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @classmethod
    def parse(cls, raw: str) -> PartKind:
        """Resolve user-facing spellings such as ``pseudo-class`` or ``attr``.

        Raises:
            ValueError: ``raw`` names no part kind.

        Example:
            >>> PartKind.parse("Pseudo-Element")
            <PartKind.PSEUDO_ELEMENT: 'pseudo_element'>
            >>> PartKind.parse("attr")
            <PartKind.ATTRIBUTE: 'attribute'>
        """
        normalized = raw.strip().lower().replace("-", "_")
        normalized = _PART_KIND_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown selector part kind {raw!r} (expected one of: {choices})") from None

    @property
    def rank(self) -> int:
        """Position of this kind in the mandatory element-to-pseudo-element order."""
        return PART_RANKS[self]

    @property
    def is_unique(self) -> bool:
        """Whether a compound selector may hold at most one part of this kind."""
        return self in UNIQUE_PART_KINDS


_PART_KIND_ALIASES: Final[dict[str, str]] = {
    "attr": "attribute",
    "pseudoclass": "pseudo_class",
    "pseudoelement": "pseudo_element",
    "tag": "element",
}

#: Rank of every part kind; a part may never follow one of higher rank.
PART_RANKS: Final[dict[PartKind, int]] = {kind: index for index, kind in enumerate(PartKind)}

#: Part kinds that may occur at most once inside one compound selector.
UNIQUE_PART_KINDS: Final[frozenset[PartKind]] = frozenset(
    {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}
)


class Combinator(str, Enum):
    """The four combinators CSS defines between compound selectors.

    Example:
        >>> Combinator.CHILD.value
        '>'
        >>> Combinator(" ") is Combinator.DESCENDANT
        True
    """

    DESCENDANT = " "
    ADJACENT = "+"
    SIBLING = "~"
    CHILD = ">"


class OutputFormat(str, Enum):
    """Output format options for rendered selectors and configuration display.

    Attributes:
        HUMAN: Plain text output.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "PART_RANKS",
    "UNIQUE_PART_KINDS",
    "Combinator",
    "OutputFormat",
    "PartKind",
]
