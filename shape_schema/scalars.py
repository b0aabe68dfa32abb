"""
scalars.py - leaf schemata
==========================

Leaf schemas first guard the runtime category of the value (a mismatch is a
single ``invalid_type`` issue) and then evaluate every configured constraint,
reporting all violated ones together.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Pattern, Union

from . import utils
from .errors import Issue, SchemaError, invalid_type
from .schema import Err, Ok, Result, Schema

__all__ = [
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "LiteralSchema",
    "AnySchema",
    "NeverSchema",
]


def _collect(value: Any, issues: list[Issue]) -> Result:
    if issues:
        return Err(SchemaError(issues))
    return Ok(value)


def _length_issues(kind_name: str, unit: str, size: int, path: list,
                   max=None, min=None, length=None) -> list[Issue]:
    """Shared max/min/exact length checks for strings, lists and frames."""
    issues: list[Issue] = []
    if max is not None and size > max:
        issues.append(Issue("too_big", path, f"{kind_name} must contain at most {max} {unit}(s)", {"max": max}))
    if min is not None and size < min:
        issues.append(Issue("too_small", path, f"{kind_name} must contain at least {min} {unit}(s)", {"min": min}))
    if length is not None and size != length:
        issues.append(Issue(
            "too_small" if size < length else "too_big",
            path,
            f"{kind_name} must contain exactly {length} {unit}(s)",
            {"equal": length},
        ))
    return issues


# --------------------------------------------------------------------------- #
# String                                                                      #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, eq=False)
class StringSchema(Schema):
    validate: bool = True
    max: Optional[int] = None
    min: Optional[int] = None
    length: Optional[int] = None
    regex: Union[str, Pattern, None] = None

    def __post_init__(self):
        if isinstance(self.regex, str):
            object.__setattr__(self, "regex", re.compile(self.regex))

    def parse(self, value: Any, path: list) -> Result:
        """Check *value*; ``bytes`` are read as UTF-8 and returned unchanged."""
        if isinstance(value, (bytes, bytearray)):
            # undecodable bytes become lone surrogates, caught by ``validate``
            text = bytes(value).decode("utf-8", errors="surrogateescape")
        elif isinstance(value, str):
            text = value
        else:
            return Err(invalid_type("string", utils.get_type(value), path))

        issues = _length_issues("String", "character", len(text), path,
                                max=self.max, min=self.min, length=self.length)
        if self.regex is not None and not self.regex.search(text):
            issues.append(Issue(
                "invalid_string", path, "Invalid string: regex didn't match",
                {"validation": "regex", "regex": self.regex},
            ))
        if self.validate and not _is_utf8(text):
            issues.append(Issue(
                "invalid_string", path, "Invalid string: invalid UTF-8",
                {"validation": "utf8"},
            ))
        return _collect(value, issues)


def _is_utf8(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:  # lone surrogates
        return False
    return True


# --------------------------------------------------------------------------- #
# Number                                                                      #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, eq=False)
class NumberSchema(Schema):
    """Real numbers (``bool`` excluded).

    ``lt``/``gt`` are exclusive, ``le``/``ge`` inclusive.  A ``step`` implies
    ``int`` and is only checked against integers.
    """

    lt: Optional[float] = None
    le: Optional[float] = None
    gt: Optional[float] = None
    ge: Optional[float] = None
    int: bool = False
    step: Optional[int] = None

    def __post_init__(self):
        for name in ("lt", "le", "gt", "ge"):
            bound = getattr(self, name)
            if bound is not None and not utils._is_number(bound):
                raise TypeError(f"{name} must be a number, got {bound!r}")
        if self.step is not None:
            if isinstance(self.step, bool) or not isinstance(self.step, int):
                raise TypeError(f"step must be an integer, got {self.step!r}")
            if self.step == 0:
                raise ValueError("step must be non-zero")

    def positive(self) -> "NumberSchema":
        return self.set(gt=0)

    def nonnegative(self) -> "NumberSchema":
        return self.set(ge=0)

    def negative(self) -> "NumberSchema":
        return self.set(lt=0)

    def nonpositive(self) -> "NumberSchema":
        return self.set(le=0)

    def parse(self, value: Any, path: list) -> Result:
        if not utils._is_number(value):
            return Err(invalid_type("number", utils.get_type(value), path))

        issues: list[Issue] = []
        if self.lt is not None and value >= self.lt:
            issues.append(Issue("too_big", path, f"Number must be smaller than {self.lt}",
                                {"max": self.lt, "exclusive": True}))
        if self.le is not None and value > self.le:
            issues.append(Issue("too_big", path, f"Number must be smaller than or equal to {self.le}",
                                {"max": self.le}))
        if self.gt is not None and value <= self.gt:
            issues.append(Issue("too_small", path, f"Number must be greater than {self.gt}",
                                {"min": self.gt, "exclusive": True}))
        if self.ge is not None and value < self.ge:
            issues.append(Issue("too_small", path, f"Number must be greater than or equal to {self.ge}",
                                {"min": self.ge}))
        if (self.int or self.step is not None) and not isinstance(value, int):
            issues.extend(invalid_type("integer", "float", path).issues)
        if self.step is not None and isinstance(value, int) and value % self.step != 0:
            issues.append(Issue("not_multiple_of", path, f"Number must be multiple of {self.step}",
                                {"step": self.step}))
        return _collect(value, issues)


# --------------------------------------------------------------------------- #
# Boolean / Literal                                                           #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, eq=False)
class BooleanSchema(Schema):
    """``coerce=True`` maps everything except ``None`` and ``False`` to ``True``."""

    coerce: bool = False

    def parse(self, value: Any, path: list) -> Result:
        if self.coerce:
            return Ok(value is not None and value is not False)
        if not isinstance(value, bool):
            return Err(invalid_type("boolean", utils.get_type(value), path))
        return Ok(value)


@dataclass(frozen=True, eq=False)
class LiteralSchema(Schema):
    value: Any
    strict: bool = False

    def _matches(self, value: Any) -> bool:
        if self.strict and type(value) is not type(self.value):
            return False
        try:
            return bool(value == self.value)
        except (TypeError, ValueError):  # element-wise __eq__ (DataFrame, Series, arrays)
            return False

    def parse(self, value: Any, path: list) -> Result:
        if self._matches(value):
            return Ok(value)
        return Err(SchemaError([Issue(
            "invalid_literal", path,
            f"Invalid literal value, expected {self.value!r}",
            {"expected": self.value, "got": value},
        )]))


# --------------------------------------------------------------------------- #
# Any / Never                                                                 #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, eq=False)
class AnySchema(Schema):
    def parse(self, value: Any, path: list) -> Result:
        return Ok(value)


@dataclass(frozen=True, eq=False)
class NeverSchema(Schema):
    def parse(self, value: Any, path: list) -> Result:
        return Err(invalid_type("never", utils.get_type(value), path))
