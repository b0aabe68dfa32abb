"""
schema.py - the contract every schema implements
=================================================

A schema is an immutable description of how to validate and coerce a value.
Every schema exposes one operation::

    schema.parse(value, path) -> Result

where *path* is the list of keys/indices leading from the root value to
*value*.  Composite schemas call ``parse`` on their children with the path
extended by exactly one element and merge what comes back.

Custom schemas do not need to inherit from :class:`Schema`: any object whose
class defines a callable ``parse`` is accepted wherever a schema is expected.
"""

from __future__ import annotations

import abc
import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .errors import SchemaError

__all__ = [
    "Schema",
    "Ok",
    "Err",
    "Result",
    "child_path",
    "check_schema",
]

T = TypeVar("T")

# --------------------------------------------------------------------------- #
# Result                                                                      #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful evaluation carrying the parsed value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed evaluation carrying every issue found."""

    error: SchemaError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Ok, Err]


# --------------------------------------------------------------------------- #
# Contract                                                                    #
# --------------------------------------------------------------------------- #

class Schema(abc.ABC):
    """Base class for the built-in schemata.

    Subclasses are frozen dataclasses; :meth:`set` performs a functional
    update and never touches the original.
    """

    @abc.abstractmethod
    def parse(self, value: Any, path: list) -> Result:
        """Validate *value* found at *path*."""

    @classmethod
    def __subclasshook__(cls, C):
        if cls is Schema:
            if any(callable(B.__dict__.get("parse")) for B in C.__mro__):
                return True
        return NotImplemented

    def set(self, **changes: Any) -> "Schema":
        """Return a copy of this schema with *changes* applied."""
        names = {f.name for f in dataclasses.fields(self) if f.init}
        unknown = sorted(set(changes) - names)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no option(s) {unknown}")
        return dataclasses.replace(self, **changes)

    def transform(self, fn: Callable[[Any], Any]) -> "Schema":
        from .combinators import TransformSchema
        return TransformSchema(self, fn)

    def default(self, value: Any) -> "Schema":
        from .combinators import DefaultSchema
        return DefaultSchema(self, value)


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def child_path(path: list, key: Any) -> list:
    """Return a new path one level below *path*."""
    return [*path, key]


def check_schema(obj: Any, what: str = "schema") -> Any:
    """Raise ``TypeError`` unless *obj* satisfies the schema contract."""
    if not isinstance(obj, Schema):
        raise TypeError(f"{what} must implement parse(value, path), got {type(obj).__name__}")
    return obj
