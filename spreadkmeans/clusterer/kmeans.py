# Copyright (c) 2025 massivedatascience
# Licensed under the Apache License, Version 2.0

"""
PySpark ML wrapper for SpreadKMeans clustering.

This module exposes the local k-means engine through the Spark ML
Estimator/Model pattern so it can be used on DataFrames and inside
Pipelines. Training collects the feature column to the driver; the fitted
centroid table is a model param and is saved with the model.
"""

from typing import List, Optional

import numpy as np

from pyspark import keyword_only
from pyspark.ml.base import Estimator, Model
from pyspark.ml.param import Param, Params, TypeConverters
from pyspark.ml.param.shared import (
    HasFeaturesCol,
    HasPredictionCol,
    HasMaxIter,
    HasSeed,
    HasTol,
)
from pyspark.ml.util import DefaultParamsReadable, DefaultParamsWritable
from pyspark.sql import DataFrame
from pyspark.sql import functions as F
from pyspark.sql.types import DoubleType, IntegerType

from . import engine
from .distance import distance_matrix
from .errors import ValidationError
from .preprocessing import FIT_STAGE, input_preprocessing
from .scoring import within_cluster_score

_SEED_MODULUS = 1 << 63


def _vector_values(value) -> List[float]:
    if hasattr(value, "toArray"):
        value = value.toArray()
    try:
        return [float(x) for x in value]
    except (TypeError, ValueError) as exc:
        raise ValidationError("Input data must be numeric") from exc


def _collect_points(dataset: DataFrame, features_col: str) -> np.ndarray:
    rows = dataset.select(features_col).collect()
    return input_preprocessing([_vector_values(row[0]) for row in rows], FIT_STAGE)


class SpreadKMeansParams(
    HasFeaturesCol,
    HasPredictionCol,
    HasMaxIter,
    HasSeed,
    HasTol,
):
    """
    Params for SpreadKMeans and SpreadKMeansModel.

    Parameters
    ----------
    k : int, default=2
        Number of clusters to create (1 <= k <= number of rows).

    initMode : str, default="random"
        Initialization algorithm.
        Options: "random", "greedy-spread"

    distanceCol : str, optional
        Column name for output distance to the nearest cluster center.

    featuresCol : str, default="features"
        Features column name. Each value is a 2-element vector.

    predictionCol : str, default="prediction"
        Prediction column name. Predictions are cluster labels 1..k.

    maxIter : int, optional
        Maximum number of iterations. Unbounded when not set.

    seed : int, optional
        Random seed.

    tol : float, default=0.0
        Convergence tolerance for center movement. 0 requires the centers
        to stop moving exactly.
    """

    k = Param(
        Params._dummy(),
        "k",
        "Number of clusters to create (1 <= k <= number of rows).",
        typeConverter=TypeConverters.toInt,
    )

    initMode = Param(
        Params._dummy(),
        "initMode",
        "Initialization mode: random, greedy-spread",
        typeConverter=TypeConverters.toString,
    )

    distanceCol = Param(
        Params._dummy(),
        "distanceCol",
        "Column name for distance to the nearest cluster center",
        typeConverter=TypeConverters.toString,
    )

    def __init__(self, *args):
        super(SpreadKMeansParams, self).__init__(*args)
        self._setDefault(
            k=2,
            initMode="random",
            featuresCol="features",
            predictionCol="prediction",
            tol=0.0,
        )

    def getK(self) -> int:
        """Gets the value of k or its default value."""
        return self.getOrDefault(self.k)

    def getInitMode(self) -> str:
        """Gets the value of initMode or its default value."""
        return self.getOrDefault(self.initMode)

    def getDistanceCol(self) -> Optional[str]:
        """Gets the value of distanceCol, or None when it is not set."""
        if not self.isDefined(self.distanceCol):
            return None
        return self.getOrDefault(self.distanceCol)

    def _max_iter_or_none(self) -> Optional[int]:
        if not self.isDefined(self.maxIter):
            return None
        return self.getOrDefault(self.maxIter)


class SpreadKMeans(Estimator, SpreadKMeansParams, DefaultParamsReadable, DefaultParamsWritable):
    """
    K-Means clustering of two-dimensional points with greedy-spread seeding.

    This estimator runs Lloyd's algorithm on the driver: points are assigned
    to their nearest center by Euclidean distance, centers move to the mean
    of their members, and the loop stops once no center coordinate moves by
    more than ``tol``.

    Parameters
    ----------
    k : int, default=2
        Number of clusters to create.

    initMode : str, default="random"
        Seeding strategy. Options:
        - "random": k distinct points drawn uniformly
        - "greedy-spread": k-means++ style seeding that favours points far
          from the centers chosen so far

    maxIter : int, optional
        Maximum number of iterations. When reached before convergence the
        model is still returned and ``summary.converged`` is False.

    tol : float, default=0.0
        Convergence tolerance (maximum center movement).

    seed : int, optional
        Random seed for reproducibility.

    Examples
    --------
    >>> from spreadkmeans.clusterer import SpreadKMeans
    >>> from pyspark.ml.linalg import Vectors
    >>>
    >>> data = spark.createDataFrame([
    ...     (Vectors.dense([0.0, 0.0]),),
    ...     (Vectors.dense([0.0, 1.0]),),
    ...     (Vectors.dense([10.0, 0.0]),),
    ...     (Vectors.dense([10.0, 1.0]),)
    ... ], ["features"])
    >>>
    >>> kmeans = SpreadKMeans(k=2, initMode="greedy-spread", seed=42)
    >>> model = kmeans.fit(data)
    >>>
    >>> predictions = model.transform(data)
    >>> predictions.select("features", "prediction").show()

    See Also
    --------
    SpreadKMeansModel : The fitted model
    """

    @keyword_only
    def __init__(
        self,
        *,
        k: int = 2,
        initMode: str = "random",
        distanceCol: Optional[str] = None,
        featuresCol: str = "features",
        predictionCol: str = "prediction",
        maxIter: Optional[int] = None,
        seed: Optional[int] = None,
        tol: float = 0.0,
    ):
        """
        Initialize SpreadKMeans estimator.
        """
        super(SpreadKMeans, self).__init__()
        kwargs = self._input_kwargs
        self.setParams(**kwargs)

    @keyword_only
    def setParams(
        self,
        *,
        k: int = 2,
        initMode: str = "random",
        distanceCol: Optional[str] = None,
        featuresCol: str = "features",
        predictionCol: str = "prediction",
        maxIter: Optional[int] = None,
        seed: Optional[int] = None,
        tol: float = 0.0,
    ):
        """
        Set parameters for SpreadKMeans.
        """
        kwargs = self._input_kwargs
        return self._set(**kwargs)

    def setK(self, value: int):
        """Sets the value of k."""
        return self._set(k=value)

    def setInitMode(self, value: str):
        """Sets the value of initMode."""
        return self._set(initMode=value)

    def setDistanceCol(self, value: str):
        """Sets the value of distanceCol."""
        return self._set(distanceCol=value)

    def setMaxIter(self, value: int):
        """Sets the value of maxIter."""
        return self._set(maxIter=value)

    def setSeed(self, value: int):
        """Sets the value of seed."""
        return self._set(seed=value)

    def setTol(self, value: float):
        """Sets the value of tol."""
        return self._set(tol=value)

    def setFeaturesCol(self, value: str):
        """Sets the value of featuresCol."""
        return self._set(featuresCol=value)

    def setPredictionCol(self, value: str):
        """Sets the value of predictionCol."""
        return self._set(predictionCol=value)

    def _fit(self, dataset: DataFrame) -> "SpreadKMeansModel":
        points = _collect_points(dataset, self.getFeaturesCol())
        seed = self.getSeed()
        if seed is not None:
            seed %= _SEED_MODULUS

        result = engine.fit(
            points,
            self.getK(),
            method=self.getInitMode(),
            tol=self.getTol(),
            max_iter=self._max_iter_or_none(),
            seed=seed,
        )

        model = SpreadKMeansModel()
        model._set(centroids=result.centroids.tolist())
        self._copyValues(model)
        model._summary = TrainingSummary(result)
        return model


class SpreadKMeansModel(Model, SpreadKMeansParams, DefaultParamsReadable, DefaultParamsWritable):
    """
    Model fitted by SpreadKMeans.

    The model labels points with the 1-based index of their nearest center
    and can report the within-cluster dispersion of a dataset.

    Attributes
    ----------
    clusterCenters : np.ndarray
        Array of cluster centers (k x 2 matrix).

    numClusters : int
        Number of clusters.

    numFeatures : int
        Number of features (always 2).

    Examples
    --------
    >>> centers = model.clusterCenters()
    >>> predictions = model.transform(test_data)
    >>>
    >>> # Predict single point
    >>> cluster = model.predict(Vectors.dense([2.0, 3.0]))
    >>>
    >>> # Save and load
    >>> model.write().overwrite().save("path/to/model")
    >>> loaded_model = SpreadKMeansModel.load("path/to/model")
    """

    centroids = Param(
        Params._dummy(),
        "centroids",
        "Fitted cluster centers, one [x1, x2] row per cluster",
        typeConverter=TypeConverters.toListListFloat,
    )

    def __init__(self):
        super(SpreadKMeansModel, self).__init__()
        self._summary = None

    def setFeaturesCol(self, value: str):
        """Sets the value of featuresCol."""
        return self._set(featuresCol=value)

    def setPredictionCol(self, value: str):
        """Sets the value of predictionCol."""
        return self._set(predictionCol=value)

    def setDistanceCol(self, value: str):
        """Sets the value of distanceCol."""
        return self._set(distanceCol=value)

    def clusterCenters(self) -> np.ndarray:
        """
        Get the cluster centers as a NumPy array.

        Returns
        -------
        np.ndarray
            Array of shape (k, 2); row j is the center of cluster j + 1.
        """
        return np.array(self.getOrDefault(self.centroids), dtype=float)

    @property
    def numClusters(self) -> int:
        """Number of clusters."""
        return self.clusterCenters().shape[0]

    @property
    def numFeatures(self) -> int:
        """Number of features (dimension)."""
        return self.clusterCenters().shape[1]

    def predict(self, value) -> int:
        """
        Predict the cluster for a single data point.

        Parameters
        ----------
        value : Vector or sequence of float
            Two-element feature vector.

        Returns
        -------
        int
            The predicted cluster label (1 to k).
        """
        point = np.array([_vector_values(value)])
        return int(engine.assign_labels(point, self.clusterCenters())[0])

    def computeCost(self, dataset: DataFrame) -> float:
        """
        Compute the within-cluster dispersion of a dataset.

        This is the sum of (non-squared) Euclidean distances from each
        point to its nearest cluster center.
        """
        points = _collect_points(dataset, self.getFeaturesCol())
        centers = self.clusterCenters()
        labels = engine.assign_labels(points, centers)
        return within_cluster_score(points, labels, centers)

    def _transform(self, dataset: DataFrame) -> DataFrame:
        centers = self.clusterCenters()

        def label_of(value):
            point = np.array([_vector_values(value)])
            return int(engine.assign_labels(point, centers)[0])

        features = F.col(self.getFeaturesCol())
        result = dataset.withColumn(self.getPredictionCol(), F.udf(label_of, IntegerType())(features))

        distance_col = self.getDistanceCol()
        if distance_col:

            def distance_of(value):
                point = np.array([_vector_values(value)])
                return float(distance_matrix(point, centers).min())

            result = result.withColumn(distance_col, F.udf(distance_of, DoubleType())(features))
        return result

    def hasSummary(self) -> bool:
        """
        Check if training summary is available.

        Returns
        -------
        bool
            True if the model was trained in the current session.
        """
        return self._summary is not None

    @property
    def summary(self) -> "TrainingSummary":
        """
        Get the training summary.

        Raises
        ------
        RuntimeError
            If the model was loaded rather than trained.
        """
        if self._summary is None:
            raise RuntimeError(
                "No training summary available for this %s" % self.__class__.__name__
            )
        return self._summary


class TrainingSummary(object):
    """
    Training summary with details about the clustering run.

    Examples
    --------
    >>> if model.hasSummary():
    ...     summary = model.summary
    ...     print(f"Converged: {summary.converged} in {summary.iterations} iterations")
    ...     print(f"Within-cluster dispersion: {summary.withinClusterScore:.4f}")
    """

    def __init__(self, result: engine.KMeansResult):
        self._result = result

    @property
    def k(self) -> int:
        """Requested number of clusters."""
        return self._result.centroids.shape[0]

    @property
    def effectiveK(self) -> int:
        """Actual number of non-empty clusters."""
        return int(np.unique(self._result.labels).size)

    @property
    def numPoints(self) -> int:
        """Number of training points."""
        return int(self._result.labels.size)

    @property
    def iterations(self) -> int:
        """Number of iterations performed."""
        return self._result.iterations

    @property
    def converged(self) -> bool:
        """Whether the algorithm converged before hitting maxIter."""
        return self._result.converged

    @property
    def withinClusterScore(self) -> float:
        """Within-cluster dispersion of the training data."""
        return self._result.within_cluster_score

    @property
    def initIndices(self) -> List[int]:
        """Row positions of the points used as initial centers."""
        return self._result.init_indices.tolist()

    @property
    def trainingLabels(self) -> List[int]:
        """Cluster label of every training point, in input order."""
        return self._result.labels.tolist()
