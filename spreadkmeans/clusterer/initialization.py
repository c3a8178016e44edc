# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Centroid seeding strategies.

Two strategies pick the K starting centroids as row indices into the data:

- ``random``: K distinct rows drawn uniformly without replacement.
- ``greedy-spread``: a k-means++ style seeding. The first row is uniform;
  each further row is drawn with weight proportional to its distance to
  the nearest chosen centroid, min-max normalised within the group of
  points sharing that nearest centroid.

Note that the normalisation is per partition, not the global D(x)^2
weighting of textbook k-means++.
"""

import logging
import warnings
from typing import Optional, Tuple, Union

import numpy as np

from .distance import distance_matrix
from .errors import InvalidParameterError, ValidationError

logger = logging.getLogger(__name__)

RANDOM = "random"
GREEDY_SPREAD = "greedy-spread"

_RANDOM_ALIASES = ("random", "rand")
_GREEDY_SPREAD_ALIASES = ("greedy-spread", "greedy_spread", "kmpp", "km++", "kp", "k-means++")

SeedLike = Union[None, int, np.random.Generator]


def as_generator(seed: SeedLike = None) -> np.random.Generator:
    """Return ``seed`` if it is already a Generator, else build one from it."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def resolve_method(method: Optional[str]) -> str:
    """
    Map an initialization method name (or alias) to its canonical name.

    Unknown names fall back to ``random`` with a warning.
    """
    m = RANDOM if method is None else str(method).lower()
    if m in _RANDOM_ALIASES:
        return RANDOM
    if m in _GREEDY_SPREAD_ALIASES:
        return GREEDY_SPREAD
    warnings.warn("Invalid initialization method. Using default: random.", UserWarning, stacklevel=3)
    return RANDOM


def _check_k(n: int, k: int) -> None:
    if n <= 0:
        raise ValidationError("Invalid input: empty data.")
    if k < 1 or k > n:
        raise InvalidParameterError(
            f"Invalid number of clusters k={k}: must be between 1 and the number of rows ({n})."
        )


def spread_weights(data: np.ndarray, centroid_indices) -> Tuple[np.ndarray, np.ndarray]:
    """
    Selection weights for the next greedy-spread draw.

    Parameters
    ----------
    data : np.ndarray
        Array of shape (n, 2).
    centroid_indices : sequence of int
        Rows already chosen as centroids.

    Returns
    -------
    weights : np.ndarray
        Shape (n,). Each point's distance to its nearest chosen centroid,
        rescaled to [0, 1] within its partition. A partition whose
        distances are all equal gets weight 0 throughout.
    partitions : np.ndarray
        Shape (n,). Position in ``centroid_indices`` of each point's
        nearest centroid (lowest position on ties).
    """
    data = np.asarray(data, dtype=float)
    centers = data[np.asarray(centroid_indices, dtype=int)]
    dists = distance_matrix(data, centers)
    nearest = dists.min(axis=1)
    partitions = dists.argmin(axis=1)

    weights = np.zeros(data.shape[0])
    for p in np.unique(partitions):
        idx = np.flatnonzero(partitions == p)
        lo = nearest[idx].min()
        hi = nearest[idx].max()
        if hi > lo:
            weights[idx] = (nearest[idx] - lo) / (hi - lo)
    return weights, partitions


def greedy_spread(data: np.ndarray, k: int, rng: SeedLike = None) -> np.ndarray:
    """
    Choose ``k`` distinct seed rows with the greedy-spread heuristic.

    Weights are recomputed after every draw since they depend on the
    current set of chosen centroids.
    """
    data = np.asarray(data, dtype=float)
    n = data.shape[0]
    _check_k(n, k)
    rng = as_generator(rng)

    chosen = [int(rng.integers(n))]
    while len(chosen) < k:
        weights, _ = spread_weights(data, chosen)
        total = weights.sum()
        if total > 0:
            nxt = rng.choice(n, p=weights / total)
        else:
            # no point carries positive weight
            remaining = np.setdiff1d(np.arange(n), chosen)
            logger.warning(
                "All greedy-spread weights are zero after %d centroids; drawing uniformly from the remaining %d points.",
                len(chosen),
                remaining.size,
            )
            nxt = rng.choice(remaining)
        chosen.append(int(nxt))
    return np.asarray(chosen, dtype=int)


def init_centroids(method: Optional[str], n: int, k: int, data: np.ndarray, rng: SeedLike = None) -> np.ndarray:
    """
    Select ``k`` distinct starting centroid rows.

    Parameters
    ----------
    method : str
        ``"random"`` (aliases ``"rand"``) or ``"greedy-spread"`` (aliases
        ``"kmpp"``, ``"km++"``, ``"kp"``, ``"k-means++"``). Anything else
        warns and uses ``"random"``.
    n : int
        Number of rows in ``data``.
    k : int
        Number of centroids.
    data : np.ndarray
        Array of shape (n, 2).
    rng : int, np.random.Generator or None
        Source of randomness.

    Returns
    -------
    np.ndarray
        0-based row indices of length ``k``.
    """
    _check_k(n, k)
    rng = as_generator(rng)
    if resolve_method(method) == GREEDY_SPREAD:
        return greedy_spread(data, k, rng)
    return rng.choice(n, size=k, replace=False).astype(int)
