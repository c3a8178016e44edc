# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Scatter plot of clustered points.
"""

import matplotlib.pyplot as plt
import numpy as np

from .preprocessing import input_preprocessing


def kmplot(data, ax=None):
    """
    Plot labeled points coloured by cluster.

    Parameters
    ----------
    data : array-like or pyspark.sql.DataFrame
        Three columns: ``x1``, ``x2`` and the cluster label, e.g. the
        ``data`` field of a ``KMeansResult`` or the output of ``predict``.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created if omitted.

    Returns
    -------
    matplotlib.axes.Axes
    """
    labeled = input_preprocessing(data, "plot")
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 5))

    for cluster in np.unique(labeled.clusters):
        members = labeled.points[labeled.clusters == cluster]
        ax.scatter(members[:, 0], members[:, 1], label=str(cluster), s=20)

    ax.set_xlabel("x1")
    ax.set_ylabel("x2")
    ax.legend(title="cluster")
    ax.grid(True)
    return ax
