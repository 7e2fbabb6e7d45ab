"""Expression document adapter - JSON files describing selector expressions.

Contents:
    * :mod:`.loader` - Pydantic-validated document parsing and loading
"""

from __future__ import annotations

from .loader import load_expression, parse_expression

__all__ = ["load_expression", "parse_expression"]
