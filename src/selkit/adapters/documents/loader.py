"""Load selector expressions from JSON documents.

A document is a tree of two node shapes::

    {"parts": [{"kind": "element", "value": "div"}, {"kind": "id", "value": "main"}]}
    {"left": <node>, "combinator": "+", "right": <node>}

Documents are validated with Pydantic at the boundary and then replayed
through the domain builder, so part ordering and uniqueness rules apply
exactly as they do for chained calls.

Contents:
    * :func:`parse_expression` - Build a renderable from JSON text.
    * :func:`load_expression` - Read a file and build a renderable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from selkit.domain.builder import css_selector_builder, validate_combinator
from selkit.domain.enums import PartKind
from selkit.domain.errors import ExpressionDocumentError
from selkit.domain.selector import Renderable, Selector

logger = logging.getLogger(__name__)


class PartNode(BaseModel):
    """One ``{"kind": ..., "value": ...}`` entry of a selector node.

    Example:
        >>> PartNode.model_validate({"kind": "pseudo-class", "value": "hover"}).kind
        <PartKind.PSEUDO_CLASS: 'pseudo_class'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: PartKind
    value: str

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, v: Any) -> Any:
        """Accept the same spellings as the CLI (``attr``, ``pseudo-class``)."""
        if isinstance(v, str):
            return PartKind.parse(v)
        return v


class SelectorNode(BaseModel):
    """A compound selector given as its ordered parts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    parts: list[PartNode] = Field(min_length=1)


class CombinedNode(BaseModel):
    """Two nodes joined by a combinator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    left: SelectorNode | CombinedNode
    combinator: str
    right: SelectorNode | CombinedNode


CombinedNode.model_rebuild()

_NODE_ADAPTER: TypeAdapter[SelectorNode | CombinedNode] = TypeAdapter(SelectorNode | CombinedNode)


def _build_selector(node: SelectorNode) -> Selector:
    first, *rest = node.parts
    selector = css_selector_builder.start(first.kind, first.value)
    for part in rest:
        selector.add(part.kind, part.value)
    return selector


def _build(node: SelectorNode | CombinedNode, *, strict_combinators: bool) -> Renderable:
    if isinstance(node, SelectorNode):
        return _build_selector(node)
    if strict_combinators:
        validate_combinator(node.combinator)
    return css_selector_builder.combine(
        _build(node.left, strict_combinators=strict_combinators),
        node.combinator,
        _build(node.right, strict_combinators=strict_combinators),
    )


def parse_expression(payload: str | bytes, *, strict_combinators: bool = False) -> Renderable:
    """Build a renderable expression from JSON text.

    Args:
        payload: JSON document describing the expression.
        strict_combinators: Reject combinators other than `` ``, ``+``, ``~``, ``>``.

    Returns:
        The selector or combined expression described by the document.

    Raises:
        ExpressionDocumentError: The payload is not JSON or has the wrong shape.
        SelectorError: A selector node breaks the ordering or uniqueness rules,
            or a combinator is rejected in strict mode.

    Example:
        >>> parse_expression('{"parts": [{"kind": "element", "value": "a"}]}').stringify()
        'a'
    """
    try:
        raw = orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise ExpressionDocumentError(f"Expression document is not valid JSON: {exc}") from exc

    try:
        node = _NODE_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise ExpressionDocumentError(f"Invalid expression document: {exc}") from exc

    return _build(node, strict_combinators=strict_combinators)


def load_expression(path: Path, *, strict_combinators: bool = False) -> Renderable:
    """Read an expression document from ``path`` and build it.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        ExpressionDocumentError: The file content is not a valid document.
        SelectorError: The described selectors break the selector rules.
    """
    logger.debug("Loading expression document", extra={"path": str(path), "strict": strict_combinators})
    return parse_expression(path.read_bytes(), strict_combinators=strict_combinators)


__all__ = [
    "CombinedNode",
    "PartNode",
    "SelectorNode",
    "load_expression",
    "parse_expression",
]
