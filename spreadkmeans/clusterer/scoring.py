# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Within-cluster dispersion.

The score is the sum of plain (non-squared) Euclidean distances from each
point to the centroid of its cluster.
"""

import numpy as np

from .distance import distance_matrix
from .errors import ComputationAnomalyError


def cluster_dispersion(members: np.ndarray, centroid: np.ndarray) -> float:
    """Total distance from the members of one cluster to its centroid."""
    centroid = np.asarray(centroid, dtype=float).reshape(1, -1)
    members = np.asarray(members, dtype=float).reshape(-1, centroid.shape[1])
    if members.shape[0] == 0:
        return 0.0
    return float(np.sum(distance_matrix(members, centroid)))


def within_cluster_score(points: np.ndarray, labels: np.ndarray, centroids: np.ndarray) -> float:
    """
    Sum of per-cluster dispersions.

    Parameters
    ----------
    points : np.ndarray
        Array of shape (n, 2).
    labels : np.ndarray
        1-based cluster label of each point.
    centroids : np.ndarray
        Array of shape (k, 2); row j is the centroid of cluster j + 1.

    Raises
    ------
    ComputationAnomalyError
        If the total is negative or not a number.
    """
    points = np.asarray(points, dtype=float)
    labels = np.asarray(labels)
    total = 0.0
    for j, centroid in enumerate(np.asarray(centroids, dtype=float)):
        members = points[np.flatnonzero(labels == j + 1)]
        total += cluster_dispersion(members, centroid)

    if not total >= 0:
        raise ComputationAnomalyError(
            f"Total within-cluster dispersion is invalid: {total}"
        )
    return total
