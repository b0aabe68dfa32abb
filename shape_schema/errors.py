"""
errors.py - issue and error model shared by every schema
=========================================================

Public API
----------
Issue
    One validation failure: ``kind``, ``path``, ``message`` and a structured
    ``data`` payload.

SchemaError
    A non-empty, ordered collection of issues.  It is the error value carried
    by :class:`shape_schema.schema.Err` *and* the exception raised by
    :func:`shape_schema.validator.evaluate_or_raise`.

invalid_type(expected, got, path)
    Shorthand for the most common single-issue error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

__all__ = [
    "Issue",
    "SchemaError",
    "invalid_type",
    "single",
]

# --------------------------------------------------------------------------- #
# Issue                                                                       #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class Issue:
    """A single, path-annotated validation failure."""

    kind: str
    path: list
    message: str
    data: dict[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        return f"{self.message} (in path {self.path!r})"


# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised (or returned inside ``Err``) when a value violates a schema."""

    def __init__(self, issues: Iterable[Issue]):
        issues = list(issues)
        if not issues:
            raise ValueError("SchemaError needs at least one issue")
        self.issues: list[Issue] = issues
        super().__init__("\n".join(i.render() for i in issues))

    def __add__(self, other: "SchemaError") -> "SchemaError":
        if not isinstance(other, SchemaError):
            return NotImplemented
        return SchemaError(self.issues + other.issues)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaError):
            return NotImplemented
        return self.issues == other.issues

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self):
        return (type(self), (self.issues,))

    def __repr__(self) -> str:
        return f"SchemaError({self.issues!r})"

    @classmethod
    def merge(cls, errors: Sequence["SchemaError"]) -> "SchemaError":
        """Concatenate the issues of *errors*, preserving their order."""
        return cls(issue for err in errors for issue in err.issues)


# --------------------------------------------------------------------------- #
# Factories                                                                   #
# --------------------------------------------------------------------------- #

def single(kind: str, path: list, message: str, **data: Any) -> SchemaError:
    """Build a one-issue error."""
    return SchemaError([Issue(kind, path, message, data)])


def invalid_type(expected: str, got: str, path: list) -> SchemaError:
    return single(
        "invalid_type",
        path,
        f"Expected {expected}, got {got}",
        expected=expected,
        got=got,
    )
