"""
shape_schema – schema-based validation and coercion for decoded Python data.
"""
from .errors import Issue, SchemaError
from .schema import Err, Ok, Result, Schema
from .scalars import AnySchema, BooleanSchema, LiteralSchema, NeverSchema, NumberSchema, StringSchema
from .sequences import ListSchema, TupleSchema
from .mapping import MapSchema
from .combinators import DefaultSchema, TransformSchema, UnionSchema
from .frame import FrameSchema
from .validator import evaluate, evaluate_or_raise, is_valid
from .builders import (
    any_,
    boolean,
    default,
    frame,
    keyword,
    list_,
    literal,
    map_,
    negative,
    never,
    nonnegative,
    nonpositive,
    number,
    positive,
    string,
    transform,
    tuple_,
    union,
)

__all__ = [
    "Issue",
    "SchemaError",
    "Ok",
    "Err",
    "Result",
    "Schema",
    "AnySchema",
    "BooleanSchema",
    "LiteralSchema",
    "NeverSchema",
    "NumberSchema",
    "StringSchema",
    "ListSchema",
    "TupleSchema",
    "MapSchema",
    "DefaultSchema",
    "TransformSchema",
    "UnionSchema",
    "FrameSchema",
    "evaluate",
    "evaluate_or_raise",
    "is_valid",
    "any_",
    "boolean",
    "default",
    "frame",
    "keyword",
    "list_",
    "literal",
    "map_",
    "negative",
    "never",
    "nonnegative",
    "nonpositive",
    "number",
    "positive",
    "string",
    "transform",
    "tuple_",
    "union",
]
