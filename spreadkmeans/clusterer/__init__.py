# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Two-Dimensional K-Means Clustering
==================================

This module provides k-means clustering of 2-D points with random or
greedy-spread (k-means++ style) seeding, as plain functions on arrays and
as a PySpark ML estimator.

Functions:
    fit: Cluster a two-column table into k groups
    predict: Label new points against fitted centroids
    kmplot: Scatter plot of labeled points

Classes:
    SpreadKMeans: Estimator for k-means clustering of DataFrames
    SpreadKMeansModel: Fitted clustering model
    TrainingSummary: Training summary of a fitted model

Example:
    >>> from spreadkmeans.clusterer import fit, predict
    >>>
    >>> data = [[0.0, 0.0], [0.0, 1.0], [10.0, 0.0], [10.0, 1.0]]
    >>> result = fit(data, 2, method="greedy-spread", seed=42)
    >>>
    >>> # Label new points with the fitted centroids
    >>> labeled = predict([[0.5, 0.5], [9.5, 0.5]], result.centroids)
"""

from .engine import KMeansResult, fit, predict
from .errors import (
    ClusteringError,
    ComputationAnomalyError,
    DimensionMismatchError,
    InvalidParameterError,
    ValidationError,
)
from .kmeans import SpreadKMeans, SpreadKMeansModel, TrainingSummary
from .plotting import kmplot

__all__ = [
    "fit",
    "predict",
    "kmplot",
    "KMeansResult",
    "SpreadKMeans",
    "SpreadKMeansModel",
    "TrainingSummary",
    "ClusteringError",
    "ComputationAnomalyError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "ValidationError",
]
