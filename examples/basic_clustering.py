#!/usr/bin/env python
# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Basic clustering example using the local fit/predict functions.
"""

import logging

import matplotlib.pyplot as plt

from spreadkmeans.clusterer import fit, kmplot, predict


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Create sample data - two well-separated clusters
    data = [
        [0.0, 0.0],
        [1.0, 1.0],
        [0.5, 0.5],
        [9.0, 8.0],
        [8.0, 9.0],
        [8.5, 8.5],
    ]

    print("Training model...")
    result = fit(data, 2, method="greedy-spread", seed=42)

    print(f"\nConverged: {result.converged} after {result.iterations} iterations")
    print("\nCluster centers:")
    for i, center in enumerate(result.centroids, start=1):
        print(f"  Cluster {i}: {center}")

    print("\nLabeled data (x1, x2, cluster):")
    print(result.data)
    print(f"\nWithin-cluster dispersion: {result.within_cluster_score:.4f}")

    # Predict clusters for new points
    new_points = [[0.2, 0.3], [7.5, 9.0]]
    labeled = predict(new_points, result.centroids)
    for x1, x2, cluster in labeled:
        print(f"New point ({x1}, {x2}) assigned to cluster: {int(cluster)}")

    ax = kmplot(result.data)
    ax.set_title("Greedy-spread k-means (k=2)")
    output_path = "/tmp/basic_clustering.png"
    plt.savefig(output_path, dpi=100, bbox_inches="tight")
    print(f"\nVisualization saved to: {output_path}")


if __name__ == "__main__":
    main()
