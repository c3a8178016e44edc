# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

import numpy as np

from .errors import DimensionMismatchError


def should_stop(previous: np.ndarray, current: np.ndarray, eps: float = 0.0) -> bool:
    """
    Check whether centroids moved no more than ``eps`` in any coordinate.

    With ``eps=0`` the two centroid tables must be exactly equal.
    """
    previous = np.asarray(previous, dtype=float)
    current = np.asarray(current, dtype=float)
    if previous.shape != current.shape:
        raise DimensionMismatchError(
            f"Centroid tables differ in shape: {previous.shape} vs {current.shape}."
        )
    return not np.any(np.abs(previous - current) > eps)
