"""
frame.py - row-wise validation of a pandas DataFrame
====================================================

``FrameSchema`` reads every row of a DataFrame as a ``{column: value}`` dict
(missing values become ``None``) and parses it with the ``row`` schema at
``path + [index_label]``.  Row-count bounds are checked first; a violation
short-circuits like ``ListSchema``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd

from . import utils
from .errors import SchemaError, invalid_type
from .scalars import _length_issues
from .schema import Err, Ok, Result, Schema, check_schema, child_path

__all__ = ["FrameSchema", "frame_records"]


def _missing(value: Any) -> bool:
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def frame_records(frame: pd.DataFrame) -> list[tuple[Any, dict]]:
    """Return ``(index_label, row_dict)`` for every row, NaN/NaT as ``None``."""
    records = frame.astype(object).to_dict(orient="records")
    return [
        (label, {k: None if _missing(v) else v for k, v in record.items()})
        for label, record in zip(frame.index.tolist(), records)
    ]


@dataclass(frozen=True, eq=False)
class FrameSchema(Schema):
    row: Any
    min: Optional[int] = None
    max: Optional[int] = None

    def __post_init__(self):
        check_schema(self.row, "frame row")

    def parse(self, value: Any, path: list) -> Result:
        if not isinstance(value, pd.DataFrame):
            return Err(invalid_type("dataframe", utils.get_type(value), path))

        issues = _length_issues("DataFrame", "row", len(value), path, max=self.max, min=self.min)
        if issues:
            return Err(SchemaError(issues))

        rows: list[Any] = []
        errors: list[SchemaError] = []
        for label, record in frame_records(value):
            res = self.row.parse(record, child_path(path, label))
            if res.is_ok():
                rows.append(res.value)
            else:
                errors.append(res.error)
        if errors:
            return Err(SchemaError.merge(errors))
        return Ok(rows)
