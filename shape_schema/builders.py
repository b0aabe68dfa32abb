"""
builders.py - construction surface
==================================

One function per schema type, taking the options as keyword arguments, plus
a few modifiers.  Every function returns a fresh immutable schema; modifiers
never alter their argument.

>>> from shape_schema import builders as b
>>> b.map_({"age": b.number(ge=0)}, foreign_keys="strict")   # doctest: +SKIP
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Pattern, Sequence, Union

from .combinators import DefaultSchema, TransformSchema, UnionSchema
from .frame import FrameSchema
from .mapping import MapSchema
from .scalars import (
    AnySchema,
    BooleanSchema,
    LiteralSchema,
    NeverSchema,
    NumberSchema,
    StringSchema,
)
from .schema import Schema
from .sequences import ListSchema, TupleSchema

__all__ = [
    "string", "number", "boolean", "literal", "any_", "never",
    "tuple_", "list_", "keyword", "map_", "union", "transform", "default",
    "frame", "positive", "nonnegative", "negative", "nonpositive",
]

# --------------------------------------------------------------------------- #
# Schemata                                                                    #
# --------------------------------------------------------------------------- #

def string(*, validate: bool = True, max: Optional[int] = None, min: Optional[int] = None,
           length: Optional[int] = None, regex: Union[str, Pattern, None] = None) -> StringSchema:
    """Strings; ``regex`` may be a pattern string or a compiled pattern."""
    return StringSchema(validate=validate, max=max, min=min, length=length, regex=regex)


def number(*, lt=None, le=None, gt=None, ge=None, int: bool = False, step=None) -> NumberSchema:
    """Numbers; ``step`` implies ``int``."""
    return NumberSchema(lt=lt, le=le, gt=gt, ge=ge, int=int, step=step)


def boolean(*, coerce: bool = False) -> BooleanSchema:
    return BooleanSchema(coerce=coerce)


def literal(value: Any, *, strict: bool = False) -> LiteralSchema:
    return LiteralSchema(value, strict=strict)


def any_() -> AnySchema:
    return AnySchema()


def never() -> NeverSchema:
    return NeverSchema()


def tuple_(schemas: Sequence[Schema], *, coerce: bool = True) -> TupleSchema:
    return TupleSchema(schemas, coerce=coerce)


def list_(element: Schema, *, keys: Optional[Sequence] = None, min: Optional[int] = None,
          max: Optional[int] = None, length: Optional[int] = None, coerce: bool = True) -> ListSchema:
    return ListSchema(element, keys=keys, min=min, max=max, length=length, coerce=coerce)


def keyword(keys: Sequence, **opts: Any) -> ListSchema:
    """A list of declared ``(key, value)`` pairs; anything undeclared fails."""
    return list_(never(), keys=keys, **opts)


def map_(keyval: Mapping[Any, Schema], *, foreign_keys: Union[str, Schema] = "strip",
         coerce: bool = True, key_coerce: bool = False, struct: Any = None) -> MapSchema:
    """Mappings.

    ``foreign_keys`` is ``"strip"``, ``"strict"``, ``"passthrough"`` or a
    schema applied to every undeclared entry.
    """
    return MapSchema(keyval, foreign_keys=foreign_keys, coerce=coerce,
                     key_coerce=key_coerce, struct=struct)


def union(*schemas: Schema) -> UnionSchema:
    return UnionSchema(schemas)


def transform(schema: Schema, fn: Callable[[Any], Any]) -> TransformSchema:
    return TransformSchema(schema, fn)


def default(schema: Schema, value: Any) -> DefaultSchema:
    return DefaultSchema(schema, value)


def frame(row: Schema, *, min: Optional[int] = None, max: Optional[int] = None) -> FrameSchema:
    return FrameSchema(row, min=min, max=max)


# --------------------------------------------------------------------------- #
# Modifiers                                                                   #
# --------------------------------------------------------------------------- #

def positive(schema: NumberSchema) -> NumberSchema:
    return schema.positive()


def nonnegative(schema: NumberSchema) -> NumberSchema:
    return schema.nonnegative()


def negative(schema: NumberSchema) -> NumberSchema:
    return schema.negative()


def nonpositive(schema: NumberSchema) -> NumberSchema:
    return schema.nonpositive()
