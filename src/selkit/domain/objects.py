"""Small object helpers: a rectangle value type and JSON round-tripping."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import orjson

T = TypeVar("T")


@dataclass(slots=True)
class Rectangle:
    """Rectangle with a derived area.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height
        (10, 20)
        >>> r.get_area()
        200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

    @property
    def area(self) -> float:
        return self.get_area()


def to_json(obj: Any) -> str:
    """Return the JSON representation of ``obj``.

    Dataclasses serialise field by field in declaration order.

    Example:
        >>> to_json([1, 2, 3])
        '[1,2,3]'
        >>> to_json(Rectangle(10, 20))
        '{"width":10,"height":20}'
    """
    return orjson.dumps(obj).decode("utf-8")


def from_json(cls: Callable[..., T], payload: str | bytes) -> T:
    """Build an instance of ``cls`` from a JSON object.

    The object's values are passed to ``cls`` positionally in document order,
    so the keys must follow the constructor's parameter order.

    Raises:
        orjson.JSONDecodeError: ``payload`` is not valid JSON.
        TypeError: ``payload`` is not a JSON object or does not fit the constructor.

    Example:
        >>> from_json(Rectangle, '{"width": 3, "height": 4}')
        Rectangle(width=3, height=4)
    """
    data = orjson.loads(payload)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    return cls(*data.values())


__all__ = ["Rectangle", "from_json", "to_json"]
