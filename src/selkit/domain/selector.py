"""Compound selectors and the expressions that combine them.

Contents:
    * :class:`Renderable` - capability shared by everything that renders to CSS.
    * :class:`SelectorPart` - one immutable simple selector token.
    * :class:`Selector` - chainable accumulator for one compound selector.
    * :class:`CombinedExpression` - two renderables joined by a combinator.

System Role:
    Pure domain logic. Rendering is lazy: nothing is concatenated until
    :meth:`Renderable.stringify` is called, and a combined expression only
    reads its children.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .enums import PartKind
from .errors import DuplicateSelectorPartError, OutOfOrderSelectorPartError

logger = logging.getLogger(__name__)

_TOKEN_FORMATS: dict[PartKind, str] = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTRIBUTE: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}


class Renderable(ABC):
    """Anything that can produce its CSS selector text."""

    @abstractmethod
    def stringify(self) -> str:
        """Return the CSS text of this expression."""

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True, slots=True)
class SelectorPart:
    """A single simple selector such as ``#main`` or ``:hover``.

    Example:
        >>> SelectorPart(PartKind.ATTRIBUTE, 'href$=".png"').render()
        '[href$=".png"]'
    """

    kind: PartKind
    value: str

    def render(self) -> str:
        """Format the value with the prefix or brackets of its kind."""
        return _TOKEN_FORMATS[self.kind].format(self.value)


class Selector(Renderable):
    """Chainable builder for one compound selector like ``div#main.box``.

    Every part method validates the new part against the parts already held,
    appends it, and returns the same instance so calls can be chained. A failed
    call raises and leaves the selector untouched.

    Args:
        first: The part the selector starts with. The facade always supplies one.

    Example:
        >>> sel = Selector(SelectorPart(PartKind.ID, "main"))
        >>> sel.class_("container").class_("editable").stringify()
        '#main.container.editable'
    """

    __slots__ = ("_parts",)

    def __init__(self, first: SelectorPart) -> None:
        self._parts: list[SelectorPart] = [first]

    @property
    def parts(self) -> tuple[SelectorPart, ...]:
        """Parts in insertion order."""
        return tuple(self._parts)

    def element(self, value: str) -> Selector:
        """Append a type selector."""
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        """Append an id selector."""
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        """Append a class selector."""
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append an attribute selector; ``value`` goes between the brackets verbatim."""
        return self.add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        """Append a pseudo-class."""
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        """Append a pseudo-element."""
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind | str, value: str) -> Selector:
        """Validate and append a part of any kind.

        Args:
            kind: Part kind, either the enum member or its string value.
            value: Raw selector text, accepted verbatim.

        Returns:
            This selector, for chaining.

        Raises:
            DuplicateSelectorPartError: A unique kind is already present.
            OutOfOrderSelectorPartError: ``kind`` ranks below the last part.
            ValueError: ``kind`` is not a known part kind.
        """
        part_kind = PartKind(kind)
        self.check(part_kind)
        self._parts.append(SelectorPart(part_kind, value))
        return self

    def check(self, kind: PartKind | str) -> None:
        """Raise if a part of ``kind`` may not be appended next.

        Uniqueness is checked before ordering, so ``#a#b`` reports a duplicate
        rather than an ordering problem.

        Raises:
            DuplicateSelectorPartError: A unique kind is already present.
            OutOfOrderSelectorPartError: ``kind`` ranks below the last part.
            ValueError: ``kind`` is not a known part kind.
        """
        kind = PartKind(kind)
        if kind.is_unique and any(part.kind is kind for part in self._parts):
            logger.debug("Rejected duplicate %s part", kind.value, extra={"parts": self.parts})
            raise DuplicateSelectorPartError()

        last = self._parts[-1].kind
        if kind.rank < last.rank:
            logger.debug("Rejected %s part after %s part", kind.value, last.value, extra={"parts": self.parts})
            raise OutOfOrderSelectorPartError()

    def stringify(self) -> str:
        return "".join(part.render() for part in self._parts)

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"


@dataclass(frozen=True, slots=True)
class CombinedExpression(Renderable):
    """Two renderables joined by a combinator, e.g. ``div + p``.

    The combinator is embedded verbatim between single spaces, so the
    descendant combinator ``" "`` renders as three spaces. Either side may
    itself be a combined expression.

    Example:
        >>> left = Selector(SelectorPart(PartKind.ELEMENT, "ul"))
        >>> right = Selector(SelectorPart(PartKind.ELEMENT, "li"))
        >>> CombinedExpression(left, ">", right).stringify()
        'ul > li'
    """

    left: Renderable
    combinator: str
    right: Renderable

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"


__all__ = [
    "CombinedExpression",
    "Renderable",
    "Selector",
    "SelectorPart",
]
