"""Facade that starts selectors and combines them.

The builder is the public way to create :class:`~selkit.domain.selector.Selector`
and :class:`~selkit.domain.selector.CombinedExpression` instances. Each entry
point seeds a fresh selector with a single part, so no validation can fail at
this level.
"""

from __future__ import annotations

from .enums import Combinator, PartKind
from .errors import InvalidCombinatorError
from .selector import CombinedExpression, Renderable, Selector, SelectorPart


def validate_combinator(token: str) -> Combinator:
    """Return the :class:`Combinator` spelled by ``token``.

    :meth:`CssSelectorBuilder.combine` accepts any string; callers that want
    only real CSS combinators check the token here first.

    Raises:
        InvalidCombinatorError: ``token`` is not `` ``, ``+``, ``~`` or ``>``.

    Example:
        >>> validate_combinator("~")
        <Combinator.SIBLING: '~'>
    """
    try:
        return Combinator(token)
    except ValueError:
        raise InvalidCombinatorError(f"Unknown combinator {token!r} (expected one of ' ', '+', '~', '>')") from None


class CssSelectorBuilder:
    r"""Entry points for building CSS selectors.

    Example:
        >>> builder = CssSelectorBuilder()
        >>> builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'
        >>> builder.combine(
        ...     builder.element("div").id("main"),
        ...     "+",
        ...     builder.element("table").id("data"),
        ... ).stringify()
        'div#main + table#data'
    """

    def start(self, kind: PartKind | str, value: str) -> Selector:
        """Return a new selector holding one part of ``kind``."""
        return Selector(SelectorPart(PartKind(kind), value))

    def element(self, value: str) -> Selector:
        return self.start(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.start(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.start(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.start(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.start(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.start(PartKind.PSEUDO_ELEMENT, value)

    def combine(self, left: Renderable, combinator: str, right: Renderable) -> CombinedExpression:
        """Join two renderables with ``combinator``.

        The combinator is not validated and the arguments are neither copied
        nor modified; the result renders them each time it is stringified.
        """
        return CombinedExpression(left=left, combinator=combinator, right=right)


css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id_ = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine


__all__ = [
    "CssSelectorBuilder",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id_",
    "pseudo_class",
    "pseudo_element",
    "validate_combinator",
]
