"""Domain layer - pure selector logic with no I/O or framework dependencies.

Contents:
    * :mod:`.selector` - Selector parts, compound selectors, combined expressions
    * :mod:`.builder` - Facade that starts and combines selectors
    * :mod:`.objects` - Rectangle value type and JSON helpers
    * :mod:`.enums` - Domain enumerations (PartKind, Combinator, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .builder import CssSelectorBuilder, css_selector_builder, validate_combinator
from .enums import Combinator, OutputFormat, PartKind
from .errors import (
    ConfigurationError,
    DuplicateSelectorPartError,
    ExpressionDocumentError,
    InvalidCombinatorError,
    OutOfOrderSelectorPartError,
    SelectorError,
)
from .objects import Rectangle, from_json, to_json
from .selector import CombinedExpression, Renderable, Selector, SelectorPart

__all__ = [
    # Selectors
    "CombinedExpression",
    "CssSelectorBuilder",
    "Renderable",
    "Selector",
    "SelectorPart",
    "css_selector_builder",
    "validate_combinator",
    # Objects
    "Rectangle",
    "from_json",
    "to_json",
    # Enums
    "Combinator",
    "OutputFormat",
    "PartKind",
    # Errors
    "ConfigurationError",
    "DuplicateSelectorPartError",
    "ExpressionDocumentError",
    "InvalidCombinatorError",
    "OutOfOrderSelectorPartError",
    "SelectorError",
]
