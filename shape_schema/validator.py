"""
validator.py - top-level entry points
=====================================

Public API
----------
evaluate(schema, value) -> Result
    Parse *value* from the root (empty path).  Failures come back as data.

evaluate_or_raise(schema, value)
    Same, but returns the bare value and raises :class:`SchemaError` on
    failure.  The exception message lists every issue, one per line, as
    ``<message> (in path <path>)``.

is_valid(schema, value) -> bool
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import SchemaError
from .schema import Result, check_schema

__all__ = [
    "SchemaError",
    "evaluate",
    "evaluate_or_raise",
    "is_valid",
]

logger = logging.getLogger(__name__)


def evaluate(schema: Any, value: Any) -> Result:
    check_schema(schema)
    res = schema.parse(value, [])
    if res.is_err():
        logger.debug("%s rejected value with %d issue(s)", type(schema).__name__, len(res.error.issues))
    return res


def evaluate_or_raise(schema: Any, value: Any) -> Any:
    return evaluate(schema, value).unwrap()


def is_valid(schema: Any, value: Any) -> bool:
    return evaluate(schema, value).is_ok()
