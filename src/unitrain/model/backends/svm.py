"""Linear support vector machine backend."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from sklearn.svm import SVC

from unitrain.data import NormalizedTrainingData
from unitrain.model.base import BackendAdapter
from unitrain.model.registry import BackendRegistry

logger = logging.getLogger(__name__)

# kernel cache in MB
CACHE_SIZE = 500


@BackendRegistry.register("svm")
class SVMBackend(BackendAdapter):
    """Linear-kernel C-classification support vector machine (sklearn SVC)."""

    tuning_keys = ("cost",)

    def fit(
        self,
        data: NormalizedTrainingData,
        tune_value: dict[str, Any],
        options: Mapping[str, Any],
        obs_levels: Sequence[Any],
    ) -> tuple[Any, dict[str, Any]]:
        params = (
            self.option_builder()
            .extras(options)
            .fixed(C=float(tune_value["cost"]), kernel="linear", cache_size=CACHE_SIZE)
            .build()
        )
        logger.info("Fitting linear SVM with C=%s on %d rows", params["C"], data.n_rows)
        model = SVC(**params)
        model.fit(data.features, data.labels)
        return model, tune_value
