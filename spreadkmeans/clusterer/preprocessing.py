# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Input preprocessing.

Converts raw tabular input (nested sequences, NumPy arrays or Spark
DataFrames with plain numeric columns) into the canonical tables the
engine works on.
"""

from typing import Any, NamedTuple

import numpy as np
from pyspark.sql import DataFrame
from pyspark.sql.types import NumericType

from .errors import ValidationError

FIT_STAGE = "fit"
_NUMERIC_KINDS = "iuf"


class LabeledPoints(NamedTuple):
    """Coordinates with a categorical cluster label per row."""

    points: np.ndarray
    clusters: np.ndarray


def _expected_columns(stage: str) -> int:
    return 2 if stage == FIT_STAGE else 3


def _rows_from_dataframe(df: DataFrame, ncols: int) -> list:
    fields = df.schema.fields
    if len(fields) != ncols:
        raise ValidationError(f"Input data must have {ncols} columns.")
    for field in fields[:2]:
        if not isinstance(field.dataType, NumericType):
            raise ValidationError("Input data must be numeric")
    rows = df.collect()
    if not rows:
        raise ValidationError("Input data cannot be empty.")
    # Decimal columns come back as decimal.Decimal, nulls as None
    try:
        return [[float(r[0]), float(r[1])] + list(r[2:]) for r in rows]
    except (TypeError, ValueError) as exc:
        raise ValidationError("Input data must be numeric") from exc


def _numeric_column(table: np.ndarray, j: int) -> np.ndarray:
    column = np.array(table[:, j].tolist())
    if column.dtype.kind not in _NUMERIC_KINDS:
        raise ValidationError("Input data must be numeric")
    return column.astype(float)


def input_preprocessing(raw: Any, stage: str):
    """
    Validate raw input and convert it to a canonical table.

    Parameters
    ----------
    raw : array-like or pyspark.sql.DataFrame
        Rows of observations.
    stage : str
        ``"fit"`` expects exactly two numeric columns. Any other stage
        (``"predict"``, ``"plot"``) expects a third column holding the
        cluster label of each row.

    Returns
    -------
    np.ndarray or LabeledPoints
        An ``(N, 2)`` float array for ``"fit"``, otherwise the coordinates
        together with the cluster labels.

    Raises
    ------
    ValidationError
        If the input is empty, has the wrong number of columns, or holds
        non-numeric coordinates.
    """
    ncols = _expected_columns(stage)

    if isinstance(raw, DataFrame):
        raw = _rows_from_dataframe(raw, ncols)

    try:
        table = np.asarray(raw, dtype=object)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Failed to convert data to a table.") from exc

    if table.size == 0:
        raise ValidationError("Input data cannot be empty.")
    if table.ndim != 2 or table.shape[1] != ncols:
        raise ValidationError(f"Input data must have {ncols} columns.")

    points = np.column_stack([_numeric_column(table, 0), _numeric_column(table, 1)])
    if stage == FIT_STAGE:
        return points

    clusters = np.array(table[:, 2].tolist())
    if clusters.dtype.kind == "f" and np.all(np.mod(clusters, 1) == 0):
        clusters = clusters.astype(int)
    return LabeledPoints(points, clusters)
