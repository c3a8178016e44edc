# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Euclidean distance between points and centroids.
"""

import numpy as np

from .errors import DimensionMismatchError


def euclidean_distance(p1, p2) -> float:
    """
    Euclidean distance between two coordinate vectors.

    Raises
    ------
    DimensionMismatchError
        If the vectors do not have the same number of coordinates.
    """
    a = np.asarray(p1, dtype=float).ravel()
    b = np.asarray(p2, dtype=float).ravel()
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"Cannot compute distance between vectors of length {a.size} and {b.size}."
        )
    return float(np.sqrt(np.sum((a - b) ** 2)))


def distance_matrix(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Distances from every point to every centroid.

    Parameters
    ----------
    points : np.ndarray
        Array of shape (n, d).
    centroids : np.ndarray
        Array of shape (k, d).

    Returns
    -------
    np.ndarray
        Array of shape (n, k) where entry (i, j) is the distance from
        point i to centroid j.
    """
    points = np.asarray(points, dtype=float)
    centroids = np.asarray(centroids, dtype=float)
    if points.shape[1] != centroids.shape[1]:
        raise DimensionMismatchError(
            f"Points have {points.shape[1]} coordinates but centroids have {centroids.shape[1]}."
        )
    diff = points[:, np.newaxis, :] - centroids[np.newaxis, :, :]
    return np.sqrt(np.sum(diff ** 2, axis=2))
