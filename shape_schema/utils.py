"""
utils.py – shared, low-level helpers for the shape-schema package.

This module consolidates:
- Runtime categories (the names used in ``invalid_type`` issues)
- Keyed-entry helpers (pairs, list-to-mapping coercion)
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any, Dict, Sequence, Tuple, Union

import pandas as pd

# --------------------------------------------------------------------------- #
# Runtime categories                                                          #
# --------------------------------------------------------------------------- #

# Order matters: bool before number (bool is an int subclass), Mapping and
# DataFrame before the generic fallbacks.
_TYPE_MAP: list[Tuple[str, Union[type, Tuple[type, ...]]]] = [
    ("null", type(None)),
    ("boolean", bool),
    ("number", (int, float)),
    ("string", str),
    ("bytes", (bytes, bytearray)),
    ("dataframe", pd.DataFrame),
    ("map", Mapping),
    ("tuple", tuple),
    ("list", list),
    ("set", Set),
]


def get_type(value: Any) -> str:
    """Return the category name of *value* as reported in issues."""
    for name, types in _TYPE_MAP:
        if isinstance(value, types):
            return name
    if callable(value):
        return "function"
    return "object"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# --------------------------------------------------------------------------- #
# Keyed entries                                                               #
# --------------------------------------------------------------------------- #

def _is_pair(item: Any) -> bool:
    """True iff *item* is a ``(key, value)`` tuple with a hashable key."""
    if not (isinstance(item, tuple) and len(item) == 2):
        return False
    try:
        hash(item[0])
    except TypeError:  # e.g. a tuple holding a list
        return False
    return True


def _kv_from_list(items: Sequence[Any]) -> Dict[Any, Any]:
    """Convert an ordered sequence to a dict.

    Pairs keep their own key; every other element is keyed by its position.
    """
    out: Dict[Any, Any] = {}
    for i, item in enumerate(items):
        if _is_pair(item):
            out[item[0]] = item[1]
        else:
            out[i] = item
    return out
