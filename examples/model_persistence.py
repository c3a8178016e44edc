#!/usr/bin/env python
# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
Persisting a fitted centroid table.

The centroid table is the only state a later ``predict`` needs. Part one
keeps it as JSON next to the local engine; part two lets Spark ML store it
as a model param and checks that training labels survive a reload.
"""

import json
import os
import shutil
import tempfile

from pyspark.sql import SparkSession
from pyspark.ml.linalg import Vectors

from spreadkmeans.clusterer import SpreadKMeans, SpreadKMeansModel, fit, predict

POINTS = [
    [0.0, 0.0],
    [1.0, 1.0],
    [0.5, 0.2],
    [9.0, 8.0],
    [8.0, 9.0],
    [8.7, 8.4],
]


def persist_local(workdir):
    result = fit(POINTS, 2, method="greedy-spread", seed=42)
    path = os.path.join(workdir, "centroids.json")
    with open(path, "w") as f:
        json.dump({"k": 2, "centroids": result.centroids.tolist()}, f)
    print(f"Local fit: dispersion {result.within_cluster_score:.4f}, table written to {path}")

    with open(path) as f:
        table = json.load(f)["centroids"]

    relabeled = predict(POINTS, table)[:, 2].astype(int)
    same = relabeled.tolist() == result.labels.tolist()
    print(f"  labels after reload {relabeled.tolist()} (match fit: {same})")

    for x1, x2, cluster in predict([[0.3, 0.9], [7.5, 9.5]], table):
        print(f"  ({x1}, {x2}) -> cluster {int(cluster)}")


def persist_spark(spark, workdir):
    data = spark.createDataFrame([(Vectors.dense(p),) for p in POINTS], ["features"])
    model = SpreadKMeans(k=2, initMode="greedy-spread", seed=42).fit(data)

    summary = model.summary
    print(
        f"\nSpark fit: converged={summary.converged} after {summary.iterations} iterations, "
        f"seeded from rows {summary.initIndices}"
    )

    path = os.path.join(workdir, "spark_model")
    model.write().overwrite().save(path)
    loaded = SpreadKMeansModel.load(path)

    # summaries only exist for models trained in this session
    print(f"  reloaded from {path}, has summary: {loaded.hasSummary()}")

    labels = [row.prediction for row in loaded.transform(data).collect()]
    print(f"  1-based labels after reload {labels} (match fit: {labels == summary.trainingLabels})")


def main():
    workdir = tempfile.mkdtemp()
    spark = (
        SparkSession.builder.appName("CentroidPersistence")
        .config("spark.ui.enabled", "false")
        .getOrCreate()
    )
    spark.sparkContext.setLogLevel("WARN")
    try:
        persist_local(workdir)
        persist_spark(spark, workdir)
    finally:
        shutil.rmtree(workdir)
        spark.stop()


if __name__ == "__main__":
    main()
