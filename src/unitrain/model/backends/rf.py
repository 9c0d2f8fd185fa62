"""Random forest backend."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Sequence

from sklearn.ensemble import RandomForestClassifier
from sklearn.inspection import permutation_importance

from unitrain.data import NormalizedTrainingData
from unitrain.model.base import BackendAdapter
from unitrain.model.registry import BackendRegistry

logger = logging.getLogger(__name__)

TREE_MULTIPLE = 50
IMPORTANCE_REPEATS = 5


def round_multiple(value: float, target: int) -> int:
    """Round ``value`` to the nearest multiple of ``target``."""
    return int(round(value / target)) * target


def default_tree_count(n_features: int) -> int:
    """Forest size: sqrt of the feature count rounded to a multiple of 50, at least 50."""
    return max(TREE_MULTIPLE, round_multiple(math.sqrt(n_features), TREE_MULTIPLE))


@BackendRegistry.register("rf")
class RandomForestBackend(BackendAdapter):
    """Random forest classifier with permutation importance (sklearn)."""

    tuning_keys = ("mtry",)
    allowed_options = ("max_leaf_nodes", "warm_start", "bootstrap")

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
            .fixed(
                max_features=int(tune_value["mtry"]),
                n_estimators=default_tree_count(data.n_features),
            )
            .build()
        )
        logger.info(
            "Fitting random forest with %d trees, mtry=%d on %d rows",
            params["n_estimators"],
            params["max_features"],
            data.n_rows,
        )
        model = RandomForestClassifier(**params)
        model.fit(data.features, data.labels)

        # importance is always computed, as a permutation score per feature
        model.permutation_importances_ = permutation_importance(
            model, data.features, data.labels, n_repeats=IMPORTANCE_REPEATS
        )
        return model, tune_value
