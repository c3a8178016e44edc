#!/usr/bin/env python
# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Setup configuration for the spread-kmeans package.
"""

from setuptools import setup, find_packages
import os

# Read version from package
with open(os.path.join("spreadkmeans", "__init__.py")) as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
long_description = """
# SpreadKMeans

K-Means clustering of two-dimensional data with greedy-spread seeding.

## Features

- **Lloyd's Algorithm**: Euclidean assignment, mean updates, exact or tolerance-based convergence
- **Seeding Strategies**: Uniform random or greedy-spread (k-means++ style) initialization
- **Quality Score**: Within-cluster dispersion (sum of distances to centroids)
- **Spark ML Integration**: Estimator/Model pattern with Pipeline support and model persistence
- **Plotting**: Scatter plots of clustered points with matplotlib

## Installation

```bash
pip install spread-kmeans
```

## Quick Start

```python
from spreadkmeans.clusterer import fit, predict, kmplot

data = [[0.0, 0.0], [0.0, 1.0], [10.0, 0.0], [10.0, 1.0]]

# Train model
result = fit(data, 2, method="greedy-spread", seed=42)
print(f"Centroids: {result.centroids}")
print(f"Within-cluster dispersion: {result.within_cluster_score}")

# Make predictions
labeled = predict([[1.0, 1.0], [9.0, 0.0]], result.centroids)

# Plot
kmplot(result.data)
```
"""

setup(
    name="spread-kmeans",
    version=version,
    description="Two-dimensional k-means clustering with greedy-spread seeding",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="MassiveDataScience",
    license="Apache License 2.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.8",
    install_requires=[
        "pyspark>=3.4.0",
        "numpy>=1.20.0",
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="pyspark clustering kmeans kmeans++ machine-learning",
)
