"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

DUPLICATE_PART_MESSAGE = "Element, id and pseudo-element should not occur more than one time inside the selector"

OUT_OF_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base class for every violation of the compound selector rules.

    Inherits from ValueError because each violation stems from an argument
    the caller passed in.

    Example:
        >>> from selkit.domain.errors import SelectorError
        >>> isinstance(SelectorError("bad part"), ValueError)
        True
    """


class DuplicateSelectorPartError(SelectorError):
    """A second element, id, or pseudo-element was added to one selector.

    Example:
        >>> from selkit.domain.errors import DuplicateSelectorPartError
        >>> err = DuplicateSelectorPartError()
        >>> str(err).startswith("Element, id and pseudo-element")
        True
    """

    def __init__(self, message: str = DUPLICATE_PART_MESSAGE) -> None:
        super().__init__(message)


class OutOfOrderSelectorPartError(SelectorError):
    """A part was added after a part of higher rank.

    Example:
        >>> from selkit.domain.errors import OutOfOrderSelectorPartError
        >>> err = OutOfOrderSelectorPartError()
        >>> "element, id, class" in str(err)
        True
    """

    def __init__(self, message: str = OUT_OF_ORDER_MESSAGE) -> None:
        super().__init__(message)


class InvalidCombinatorError(SelectorError):
    """A combinator outside `` ``, ``+``, ``~``, ``>`` was used in strict mode.

    Example:
        >>> from selkit.domain.errors import InvalidCombinatorError
        >>> str(InvalidCombinatorError("Unknown combinator: '|'"))
        "Unknown combinator: '|'"
    """


class ExpressionDocumentError(ValueError):
    """An expression document is not valid JSON or has the wrong shape.

    Raised by the document adapter before any selector is built, so callers
    can tell malformed input apart from selector rule violations.

    Example:
        >>> from selkit.domain.errors import ExpressionDocumentError
        >>> str(ExpressionDocumentError("expected an object"))
        'expected an object'
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[selkit]`` section holds values that fail validation.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from selkit.domain.errors import ConfigurationError
        >>> err = ConfigurationError("output_format must be 'human' or 'json'")
        >>> str(err)
        "output_format must be 'human' or 'json'"
    """


__all__ = [
    "DUPLICATE_PART_MESSAGE",
    "OUT_OF_ORDER_MESSAGE",
    "ConfigurationError",
    "DuplicateSelectorPartError",
    "ExpressionDocumentError",
    "InvalidCombinatorError",
    "OutOfOrderSelectorPartError",
    "SelectorError",
]
