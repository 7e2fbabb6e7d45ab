"""Public package surface for building CSS selectors.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: selector builder, selector types, errors, object helpers
- Composition exports: Wired adapter services (configuration, documents)
- Metadata: Package information

Example:
    >>> import selkit
    >>> selkit.id_("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config, load_expression

# Domain exports
from .domain.builder import (
    CssSelectorBuilder,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from .domain.enums import Combinator, PartKind
from .domain.errors import (
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    OutOfOrderSelectorPartError,
    SelectorError,
)
from .domain.objects import Rectangle, from_json, to_json
from .domain.selector import CombinedExpression, Renderable, Selector, SelectorPart

__all__ = [
    # Builder facade
    "CssSelectorBuilder",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "id_",
    "pseudo_class",
    "pseudo_element",
    # Selector types
    "CombinedExpression",
    "Combinator",
    "PartKind",
    "Renderable",
    "Selector",
    "SelectorPart",
    # Errors
    "DuplicateSelectorPartError",
    "InvalidCombinatorError",
    "OutOfOrderSelectorPartError",
    "SelectorError",
    # Object helpers
    "Rectangle",
    "from_json",
    "to_json",
    # Adapters
    "get_config",
    "load_expression",
    "print_info",
]
