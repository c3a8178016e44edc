# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Error types raised by the clustering engine.

Every failure is fail-fast: the operation aborts and the error reaches the
caller, who can branch on the error class.
"""


class ClusteringError(Exception):
    """Base class for all clustering errors."""


class ValidationError(ClusteringError, ValueError):
    """Raw input could not be coerced into a canonical numeric table."""


class InvalidParameterError(ClusteringError, ValueError):
    """A parameter is outside its allowed range (e.g. k not in [1, N])."""


class DimensionMismatchError(ClusteringError, ValueError):
    """Two vectors or matrices that must agree in shape do not."""


class ComputationAnomalyError(ClusteringError, ArithmeticError):
    """A computed quantity is impossible, e.g. a negative dispersion."""
