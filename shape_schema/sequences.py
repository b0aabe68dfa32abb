"""
sequences.py - ordered composite schemata
=========================================

``TupleSchema``
    Fixed-arity, one child schema per position.

``ListSchema``
    One ``element`` schema for every position, optionally overridden per key
    or index through ``keys``.

Both evaluate every child independently and report the issues of all failing
children, in position order.  A size mismatch short-circuits before any
child is evaluated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from . import utils
from .errors import Issue, SchemaError, invalid_type
from .scalars import _length_issues
from .schema import Err, Ok, Result, Schema, check_schema, child_path

__all__ = [
    "TupleSchema",
    "ListSchema",
]


def _gather(outcomes: list[Result]) -> tuple[list[Any], list[SchemaError]]:
    values: list[Any] = []
    errors: list[SchemaError] = []
    for res in outcomes:
        if res.is_ok():
            values.append(res.value)
        else:
            errors.append(res.error)
    return values, errors


# --------------------------------------------------------------------------- #
# Tuple                                                                       #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, eq=False)
class TupleSchema(Schema):
    """``coerce`` also accepts a ``list`` of the right length."""

    schemas: tuple
    coerce: bool = True

    def __post_init__(self):
        if isinstance(self.schemas, (str, bytes)) or not isinstance(self.schemas, Sequence):
            raise TypeError("tuple schemas should be a sequence of schemata")
        for s in self.schemas:
            check_schema(s, "tuple element")
        object.__setattr__(self, "schemas", tuple(self.schemas))

    def parse(self, value: Any, path: list) -> Result:
        if isinstance(value, list) and not self.coerce:
            return Err(invalid_type("tuple", "list", path))
        if not isinstance(value, (tuple, list)):
            return Err(invalid_type("tuple", utils.get_type(value), path))

        arity = len(self.schemas)
        if len(value) != arity:
            return Err(SchemaError([Issue(
                "too_small" if len(value) < arity else "too_big",
                path,
                f"Tuple must contain {arity} element(s)",
                {"equal": arity},
            )]))

        values, errors = _gather([
            schema.parse(item, child_path(path, i))
            for i, (schema, item) in enumerate(zip(self.schemas, value))
        ])
        if errors:
            return Err(SchemaError.merge(errors))
        return Ok(tuple(values))


# --------------------------------------------------------------------------- #
# List                                                                        #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, eq=False)
class ListSchema(Schema):
    """Homogeneous list, with optional per-key overrides.

    ``keys`` is a sequence of ``(key, schema)`` pairs and/or bare schemata
    (keyed by their position).  Items of the input that are ``(key, value)``
    pairs pick their override by key, falling back to the string form of the
    declared keys; they are returned as ``(key, value)`` tuples using the
    declared key.  Other items pick their override by index.

    With ``coerce`` a mapping is accepted and read as its ``(key, value)``
    items.
    """

    element: Any
    keys: Optional[Sequence] = None
    min: Optional[int] = None
    max: Optional[int] = None
    length: Optional[int] = None
    coerce: bool = True
    _overrides: Optional[Dict[Any, Any]] = field(default=None, init=False, repr=False, compare=False)
    _by_string: Dict[str, Any] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        check_schema(self.element, "list element")
        if self.keys is None:
            return
        if isinstance(self.keys, (str, bytes, Mapping)) or not isinstance(self.keys, Sequence):
            raise TypeError("keys should be list")
        object.__setattr__(self, "keys", tuple(self.keys))
        overrides = utils._kv_from_list(self.keys)
        for s in overrides.values():
            check_schema(s, "list key")
        object.__setattr__(self, "_overrides", overrides)
        object.__setattr__(self, "_by_string", {str(k): k for k in overrides})

    def _canonical(self, key: Any) -> Any:
        if isinstance(key, str):
            return self._by_string.get(key, key)
        return key

    def _parse_item(self, item: Any, i: int, path: list) -> Result:
        at = child_path(path, i)
        if self._overrides is None:
            return self.element.parse(item, at)

        if utils._is_pair(item):
            key, value = item
            key = key if key in self._overrides else self._canonical(key)
            schema = self._overrides.get(key, self.element)
            res = schema.parse(value, at)
            if res.is_err():
                return res
            return Ok((key, res.value))

        return self._overrides.get(i, self.element).parse(item, at)

    def parse(self, value: Any, path: list) -> Result:
        if isinstance(value, Mapping):
            if not self.coerce:
                return Err(invalid_type("list", "map", path))
            value = list(value.items())
        elif not isinstance(value, list):
            return Err(invalid_type("list", utils.get_type(value), path))

        issues = _length_issues("List", "element", len(value), path,
                                max=self.max, min=self.min, length=self.length)
        if issues:
            return Err(SchemaError(issues))

        values, errors = _gather([self._parse_item(item, i, path) for i, item in enumerate(value)])
        if errors:
            return Err(SchemaError.merge(errors))
        return Ok(values)
