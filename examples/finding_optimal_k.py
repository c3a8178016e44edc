#!/usr/bin/env python
# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Finding the number of clusters with the Elbow method on within-cluster dispersion.
"""

import matplotlib.pyplot as plt

from spreadkmeans.clusterer import fit


def main():
    # Create data with 3 natural clusters
    data = [
        # Cluster 1: around (0, 0)
        [0.0, 0.0],
        [0.5, 0.5],
        [0.5, -0.5],
        [-0.5, 0.5],
        # Cluster 2: around (5, 5)
        [5.0, 5.0],
        [5.5, 5.0],
        [5.0, 5.5],
        [5.5, 5.5],
        # Cluster 3: around (10, 0)
        [10.0, 0.0],
        [10.5, 0.0],
        [10.0, 0.5],
        [10.5, 0.5],
    ]

    print("Testing k from 1 to 7...\n")

    results = []

    for k in range(1, 8):
        # best of several seeds, k-means only finds a local optimum
        runs = [fit(data, k, method="greedy-spread", seed=seed) for seed in range(5)]
        best = min(runs, key=lambda r: r.within_cluster_score)
        results.append({"k": k, "dispersion": best.within_cluster_score})

        print(f"k={k}:")
        print(f"  Within-cluster dispersion: {best.within_cluster_score:.4f}")
        print(f"  Iterations: {best.iterations}")
        print()

    k_values = [r["k"] for r in results]
    dispersion_values = [r["dispersion"] for r in results]

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(k_values, dispersion_values, "bo-")
    ax.set_xlabel("Number of Clusters (k)")
    ax.set_ylabel("Within-cluster dispersion")
    ax.set_title("Elbow Method")
    ax.grid(True)

    plt.tight_layout()
    output_path = "/tmp/optimal_k_analysis.png"
    plt.savefig(output_path, dpi=100, bbox_inches="tight")
    print(f"Visualization saved to: {output_path}")

    print("\nLook for an 'elbow' in the dispersion plot.")
    print("For this data, k=3 should be optimal (matches the 3 natural clusters)")


if __name__ == "__main__":
    main()
