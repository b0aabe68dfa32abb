"""
mapping.py - keyed composite schema
===================================

``MapSchema`` validates a mapping against a ``keyval`` dict of child
schemata.  Evaluation runs in four steps:

1. every declared key is looked up (absent keys read as ``None``) and parsed
   at ``path + [key]``;
2. when ``foreign_keys`` is itself a schema, every undeclared entry is parsed
   with it;
3. if any of the above failed, the issues of *all* failures are returned;
4. otherwise the ``foreign_keys`` policy decides what happens to the
   undeclared entries (``strip``, ``strict``, ``passthrough``) and the result
   is optionally poured into a ``struct`` target.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Union

from . import utils
from .errors import Issue, SchemaError, invalid_type
from .schema import Err, Ok, Result, Schema, check_schema, child_path

__all__ = [
    "MapSchema",
    "FOREIGN_KEY_POLICIES",
]

FOREIGN_KEY_POLICIES = ("strip", "strict", "passthrough")


# --------------------------------------------------------------------------- #
# Struct targets                                                              #
# --------------------------------------------------------------------------- #

def _check_struct(target: Any) -> None:
    if target is None or dataclasses.is_dataclass(target) or callable(target):
        return
    raise TypeError(f"struct must be a dataclass, a dataclass instance or a factory, got {target!r}")


def _populate(target: Any, parsed: Dict[Any, Any]) -> Any:
    """Build the struct target from *parsed*.

    A dataclass type starts from its own defaults (``None`` where it has
    none); a dataclass instance is copied with the parsed fields replaced;
    any other callable receives the parsed dict.
    """
    if not dataclasses.is_dataclass(target):
        return target(parsed)

    fields = [f for f in dataclasses.fields(target) if f.init]
    present = {f.name: parsed[f.name] for f in fields if f.name in parsed}
    if not isinstance(target, type):
        return dataclasses.replace(target, **present)

    for f in fields:
        if (f.name not in present
                and f.default is dataclasses.MISSING
                and f.default_factory is dataclasses.MISSING):
            present[f.name] = None
    return target(**present)


# --------------------------------------------------------------------------- #
# Map                                                                         #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True, eq=False)
class MapSchema(Schema):
    keyval: Dict[Any, Any]
    foreign_keys: Union[str, Schema] = "strip"
    coerce: bool = True
    key_coerce: bool = False
    struct: Any = None
    _string_keys: Dict[Any, str] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.keyval, Mapping):
            raise TypeError(f"keyval must be a mapping, got {type(self.keyval).__name__}")
        for key, schema in self.keyval.items():
            check_schema(schema, f"schema for key {key!r}")
        if not isinstance(self.foreign_keys, Schema) and self.foreign_keys not in FOREIGN_KEY_POLICIES:
            raise ValueError(
                f"foreign_keys must be one of {FOREIGN_KEY_POLICIES} or a schema, got {self.foreign_keys!r}"
            )
        _check_struct(self.struct)
        object.__setattr__(self, "keyval", dict(self.keyval))
        object.__setattr__(self, "_string_keys", {k: str(k) for k in self.keyval})

    def shape(self) -> Dict[Any, Any]:
        """The declared ``key -> schema`` mapping."""
        return dict(self.keyval)

    def check_all(self, schema: Schema) -> "MapSchema":
        """Parse every undeclared entry with *schema*."""
        return self.set(foreign_keys=schema)

    def _take(self, remaining: Dict[Any, Any], key: Any) -> Any:
        """Pop *key* (and its string form with ``key_coerce``) from *remaining*.

        The raw key wins over its string form; a missing entry reads as None.
        """
        found = None
        if key in remaining:
            found = remaining[key]
        elif self.key_coerce and self._string_keys[key] in remaining:
            found = remaining[self._string_keys[key]]

        remaining.pop(key, None)
        if self.key_coerce:
            remaining.pop(self._string_keys[key], None)
        return found

    def parse(self, value: Any, path: list) -> Result:
        if isinstance(value, list):
            if not self.coerce:
                return Err(invalid_type("map", "list", path))
            value = utils._kv_from_list(value)
        elif not isinstance(value, Mapping):
            return Err(invalid_type("map", utils.get_type(value), path))

        remaining = dict(value)
        parsed: Dict[Any, Any] = {}
        errors: list[SchemaError] = []

        # (1) declared keys -------------------------------------------------
        for key, schema in self.keyval.items():
            res = schema.parse(self._take(remaining, key), child_path(path, key))
            if res.is_ok():
                parsed[key] = res.value
            else:
                errors.append(res.error)

        # (2) foreign keys through a fallback schema -----------------------
        if isinstance(self.foreign_keys, Schema):
            for key, item in remaining.items():
                res = self.foreign_keys.parse(item, child_path(path, key))
                if res.is_ok():
                    parsed[key] = res.value
                else:
                    errors.append(res.error)
            remaining = {}

        # (3) aggregate -----------------------------------------------------
        if errors:
            return Err(SchemaError.merge(errors))

        # (4) foreign-key policy -------------------------------------------
        if self.foreign_keys == "passthrough":
            parsed.update(remaining)
        elif self.foreign_keys == "strict" and remaining:
            keys = list(remaining)
            return Err(SchemaError([Issue(
                "unrecognized_keys",
                path,
                "Unrecognized key(s) in map: " + ", ".join(repr(k) for k in keys),
                {"keys": keys},
            )]))

        if self.struct is not None:
            return Ok(_populate(self.struct, parsed))
        return Ok(parsed)
