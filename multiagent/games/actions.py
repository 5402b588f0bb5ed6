"""Enumeration of every candidate value of an action type."""

from __future__ import annotations

import enum
from typing import Any, Iterator


def enumerate_actions(action_type: Any) -> Iterator[Any]:
    """
    Yield every syntactically possible value of ``action_type``.

    Supported domains:

    * ``enum.Enum`` subclasses, in declaration order;
    * ``bool`` (``False`` then ``True``);
    * any other finite iterable (``range``, tuples, lists), in iteration order.

    Legality is not checked here, callers filter with ``GameState.is_legal``.
    """
    if isinstance(action_type, type):
        if issubclass(action_type, enum.Enum):
            return iter(list(action_type))
        if action_type is bool:
            return iter((False, True))
        raise TypeError(f"Cannot enumerate values of type {action_type.__name__}")
    if isinstance(action_type, (str, bytes)):
        raise TypeError("Strings are not action domains")
    try:
        return iter(action_type)
    except TypeError:
        raise TypeError(f"Cannot enumerate action domain {action_type!r}") from None
