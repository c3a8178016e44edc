# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Lloyd's algorithm for two-dimensional k-means.

This module holds the local, single-process engine. ``fit`` seeds the
centroids, alternates assignment and centroid updates until the centroids
stop moving, and scores the result. ``predict`` labels new points against
a frozen centroid table.

Cluster labels are 1-based: row ``j`` of a centroid table is cluster
``j + 1``.

Example:
    >>> from spreadkmeans.clusterer import fit, predict
    >>> data = [[0.0, 0.0], [0.0, 1.0], [10.0, 0.0], [10.0, 1.0]]
    >>> result = fit(data, 2, method="greedy-spread", seed=7)
    >>> print(f"Centroids: {result.centroids}")
    >>> print(f"Dispersion: {result.within_cluster_score}")
    >>>
    >>> # Label new points against the fitted centroids
    >>> labeled = predict([[1.0, 1.0], [9.0, 0.0]], result.centroids)
"""

import logging
import numbers
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .convergence import should_stop
from .distance import distance_matrix
from .errors import InvalidParameterError
from .initialization import SeedLike, as_generator, init_centroids
from .preprocessing import FIT_STAGE, input_preprocessing
from .scoring import within_cluster_score

logger = logging.getLogger(__name__)


class KMeansResult(NamedTuple):
    """
    Outcome of a k-means fit.

    Attributes
    ----------
    data : np.ndarray
        Array of shape (n, 3): the two coordinates and the cluster label.
    within_cluster_score : float
        Sum of distances from every point to its cluster centroid.
    centroids : np.ndarray
        Array of shape (k, 2).
    labels : np.ndarray
        1-based cluster label of every input row.
    iterations : int
        Number of assign/update rounds performed.
    converged : bool
        False only when ``max_iter`` stopped the loop first.
    init_indices : np.ndarray
        0-based rows used as the initial centroids.
    """

    data: np.ndarray
    within_cluster_score: float
    centroids: np.ndarray
    labels: np.ndarray
    iterations: int
    converged: bool
    init_indices: np.ndarray


def assign_labels(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Label each point with its nearest centroid; ties go to the lowest index."""
    return distance_matrix(points, centroids).argmin(axis=1) + 1


def update_centroids(points: np.ndarray, labels: np.ndarray, previous: np.ndarray) -> np.ndarray:
    """
    Recompute each centroid as the mean of its members.

    A cluster with no members keeps its previous centroid.
    """
    centroids = np.array(previous, dtype=float, copy=True)
    for j in range(centroids.shape[0]):
        members = np.flatnonzero(labels == j + 1)
        if members.size:
            centroids[j] = points[members].mean(axis=0)
    return centroids


def run_lloyd(
    points: np.ndarray,
    initial_centroids: np.ndarray,
    tol: float = 0.0,
    max_iter: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray, int, bool]:
    """
    Alternate assignment and centroid updates from the given centroids.

    Returns
    -------
    centroids : np.ndarray
        Final centroid table.
    labels : np.ndarray
        1-based labels from the last assignment.
    iterations : int
        Rounds performed.
    converged : bool
        False when ``max_iter`` ended the loop first.
    """
    centroids = np.array(initial_centroids, dtype=float, copy=True)
    k = centroids.shape[0]
    iterations = 0
    converged = False
    while True:
        labels = assign_labels(points, centroids)
        new_centroids = update_centroids(points, labels, centroids)
        iterations += 1
        stop = should_stop(centroids, new_centroids, tol)
        centroids = new_centroids
        logger.debug("Iteration %d: cluster sizes %s", iterations, np.bincount(labels, minlength=k + 1)[1:].tolist())
        if stop:
            converged = True
            break
        if max_iter is not None and iterations >= max_iter:
            break

    if converged:
        logger.info("k-means converged in %d iterations.", iterations)
    else:
        logger.warning("k-means did not converge within %d iterations.", iterations)
    return centroids, labels, iterations, converged


def _validate_params(n: int, k, tol: float, max_iter: Optional[int]) -> int:
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidParameterError(f"Number of clusters must be an integer, got {k!r}.")
    if k < 1 or k > n:
        raise InvalidParameterError(
            f"Invalid number of clusters k={k}: must be between 1 and the number of rows ({n})."
        )
    if not tol >= 0:
        raise InvalidParameterError(f"Convergence tolerance must be non-negative, got {tol!r}.")
    if max_iter is not None and max_iter < 1:
        raise InvalidParameterError(f"max_iter must be at least 1, got {max_iter!r}.")
    return int(k)


def fit(
    data,
    k: int,
    method: str = "random",
    tol: float = 0.0,
    max_iter: Optional[int] = None,
    seed: SeedLike = None,
) -> KMeansResult:
    """
    Cluster two-dimensional data into ``k`` groups.

    Parameters
    ----------
    data : array-like or pyspark.sql.DataFrame
        Exactly two numeric columns and at least one row.
    k : int
        Number of clusters, ``1 <= k <= n``.
    method : str, default="random"
        Initialization method: ``"random"`` or ``"greedy-spread"``.
    tol : float, default=0.0
        Largest per-coordinate centroid movement still counted as
        converged. 0 requires the centroids to stop moving exactly.
    max_iter : int, optional
        Cap on the number of iterations. Unbounded when not given.
    seed : int or np.random.Generator, optional
        Random source for the initialization.

    Returns
    -------
    KMeansResult

    Raises
    ------
    ValidationError
        If ``data`` is not a non-empty two-column numeric table.
    InvalidParameterError
        If ``k``, ``tol`` or ``max_iter`` is out of range.
    """
    points = input_preprocessing(data, FIT_STAGE)
    n = points.shape[0]
    k = _validate_params(n, k, tol, max_iter)
    rng = as_generator(seed)

    init_indices = init_centroids(method, n, k, points, rng)
    centroids, labels, iterations, converged = run_lloyd(
        points, points[init_indices], tol=tol, max_iter=max_iter
    )

    score = within_cluster_score(points, labels, centroids)
    return KMeansResult(
        data=np.column_stack([points, labels]),
        within_cluster_score=score,
        centroids=centroids,
        labels=labels,
        iterations=iterations,
        converged=converged,
        init_indices=init_indices,
    )


def predict(data, centroids) -> np.ndarray:
    """
    Label new points against a fitted centroid table.

    Parameters
    ----------
    data : array-like or pyspark.sql.DataFrame
        Exactly two numeric columns.
    centroids : array-like
        Centroid table returned by ``fit`` (or a persisted copy of it).

    Returns
    -------
    np.ndarray
        Array of shape (n, 3): the two coordinates and the cluster label.
    """
    points = input_preprocessing(data, FIT_STAGE)
    centers = input_preprocessing(centroids, FIT_STAGE)
    labels = assign_labels(points, centers)
    return np.column_stack([points, labels])
