"""Nearest shrunken centroid backend.

Training data is handed over in the centroid classifier's gene-expression
layout: features as rows, samples as columns, one synthetic identifier per
feature. Console output of the fit is suppressed for the duration of the
call only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd
from sklearn.base import ClassifierMixin
from sklearn.dummy import DummyClassifier
from sklearn.neighbors import NearestCentroid

from unitrain.data import NormalizedTrainingData
from unitrain.model.base import BackendAdapter
from unitrain.model.registry import BackendRegistry
from unitrain.util.console import suppress_console_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CentroidData:
    """Features-by-samples matrix with per-feature identifiers.

    Attributes
    ----------
    x : np.ndarray
        Array of shape ``(n_features, n_samples)``.
    y : np.ndarray
        Class label per sample (column of ``x``).
    feature_ids : list[str]
        Synthetic identifier per feature (row of ``x``).
    """

    x: np.ndarray
    y: np.ndarray
    feature_ids: list[str]


def to_centroid_layout(data: NormalizedTrainingData) -> CentroidData:
    """Transpose the training data and attach ``g1..gp`` feature identifiers.

    Rows with a missing label are left out.
    """
    labelled = data.labels.notna().to_numpy()
    feature_ids = [f"g{i + 1}" for i in range(data.n_features)]
    return CentroidData(
        x=data.features.to_numpy(dtype=float)[labelled].T,
        y=data.labels.to_numpy()[labelled],
        feature_ids=feature_ids,
    )


def train_centroids(data: CentroidData, threshold: float, **options: Any) -> ClassifierMixin:
    """Fit shrunken class centroids on data in centroid layout.

    The estimator is fit on a plain array, one column per row of ``data.x``
    in order, so it carries no feature names; the identifiers stay on
    ``data``. With a single observed class there are no centroids to shrink
    and a constant classifier predicting that class is returned instead.
    """
    samples = data.x.T
    classes = pd.unique(data.y)
    if len(classes) == 1:
        logger.warning("Only class %r left after pruning; fitting a constant classifier", classes[0])
        model = DummyClassifier(strategy="constant", constant=classes[0])
    else:
        model = NearestCentroid(shrink_threshold=threshold, **options)
    model.fit(samples, data.y)
    return model


@BackendRegistry.register("pam")
class PAMBackend(BackendAdapter):
    """Nearest shrunken centroid classifier (sklearn NearestCentroid)."""

    tuning_keys = ("threshold",)
    allowed_options = ("metric", "priors")
    drops_small_classes = True

    def fit(
        self,
        data: NormalizedTrainingData,
        tune_value: dict[str, Any],
        options: Mapping[str, Any],
        obs_levels: Sequence[Any],
    ) -> tuple[Any, dict[str, Any]]:
        params = self.option_builder().extras(options).build()
        threshold = float(tune_value["threshold"])
        centroid_data = to_centroid_layout(data)

        logger.info(
            "Fitting shrunken centroids with threshold %s on %d samples x %d features",
            threshold,
            centroid_data.x.shape[1],
            centroid_data.x.shape[0],
        )
        with suppress_console_output():
            model = train_centroids(centroid_data, threshold, **params)
        return model, tune_value
