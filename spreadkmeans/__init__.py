# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
SpreadKMeans
============

Two-dimensional k-means clustering with greedy-spread seeding.
"""

__version__ = "0.1.0"
__all__ = ["clusterer"]
