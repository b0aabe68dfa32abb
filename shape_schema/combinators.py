"""
combinators.py - schemata wrapping other schemata
=================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .errors import Issue, SchemaError
from .schema import Err, Ok, Result, Schema, check_schema

__all__ = [
    "UnionSchema",
    "TransformSchema",
    "DefaultSchema",
]


@dataclass(frozen=True, eq=False)
class UnionSchema(Schema):
    """First alternative that succeeds wins.

    When every alternative fails the result is a single ``invalid_union``
    issue; the per-alternative errors travel in ``data["union_errors"]``.
    """

    schemas: tuple

    def __post_init__(self):
        if isinstance(self.schemas, (str, bytes)) or not isinstance(self.schemas, Sequence):
            raise TypeError("union schemas should be a sequence of schemata")
        if len(self.schemas) < 2:
            raise ValueError("a union needs at least two alternatives")
        for s in self.schemas:
            check_schema(s, "union alternative")
        object.__setattr__(self, "schemas", tuple(self.schemas))

    def parse(self, value: Any, path: list) -> Result:
        errors: list[SchemaError] = []
        for schema in self.schemas:
            res = schema.parse(value, path)
            if res.is_ok():
                return res
            errors.append(res.error)
        return Err(SchemaError([Issue("invalid_union", path, "Invalid input", {"union_errors": errors})]))


@dataclass(frozen=True, eq=False)
class TransformSchema(Schema):
    """Apply ``fn`` to the child's value on success.

    ``fn`` is trusted: whatever it raises propagates to the caller.
    """

    schema: Any
    fn: Callable[[Any], Any]

    def __post_init__(self):
        check_schema(self.schema)
        if not callable(self.fn):
            raise TypeError(f"transform expects a callable, got {type(self.fn).__name__}")

    def parse(self, value: Any, path: list) -> Result:
        res = self.schema.parse(value, path)
        if res.is_err():
            return res
        return Ok(self.fn(res.value))


@dataclass(frozen=True, eq=False)
class DefaultSchema(Schema):
    """Substitute ``value`` for ``None`` without consulting the child."""

    schema: Any
    value: Any

    def __post_init__(self):
        check_schema(self.schema)

    def parse(self, value: Any, path: list) -> Result:
        if value is None:
            return Ok(self.value)
        return self.schema.parse(value, path)
