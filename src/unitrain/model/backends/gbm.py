"""Gradient boosted trees backend (XGBoost).

Uses the native ``xgboost.train`` API so multiclass labels can be coded
against the full ``obs_levels`` universe even when some levels are absent
from a training sample.

The extra options follow the XGBoost scikit-learn wrapper vocabulary:

==========================  =====================================================
option                      effect
==========================  =====================================================
``n_trees``                 boosting rounds, overrides the tuning value
``interaction_depth``       ``max_depth``, overrides the tuning value
``shrinkage``               ``eta``, overrides the tuning value
``min_child_weight``        minimum leaf weight; inferred for small data
``subsample``               row subsampling per round
``monotone_constraints``    per-feature ``-1``/``0``/``1`` sequence
``sample_weight``           per-row weights
``feature_names``           names stored in the booster (default: ``x_names``)
==========================  =====================================================
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd
import xgboost as xgb

from unitrain.data import NormalizedTrainingData
from unitrain.model.base import BackendAdapter
from unitrain.model.registry import BackendRegistry

logger = logging.getLogger(__name__)

TUNING_OVERRIDES = ("n_trees", "interaction_depth", "shrinkage")
SMALL_DATA_LIMIT = 50
TINY_DATA_LIMIT = 30


def encode_target(labels: pd.Series, obs_levels: Sequence[Any]) -> tuple[np.ndarray, dict[str, Any]]:
    """Encode labels for XGBoost and pick the matching objective.

    With two declared levels the target is ``1.0`` for rows equal to the
    first level and ``0.0`` otherwise (``binary:logistic``). With more levels
    the category codes against ``obs_levels`` are passed through with a
    multinomial ``multi:softprob`` objective. Missing labels stay ``NaN``.

    Returns
    -------
    tuple[np.ndarray, dict[str, Any]]
        Target vector and the objective parameters.
    """
    missing = labels.isna().to_numpy()
    if len(obs_levels) == 2:
        target = (labels == obs_levels[0]).to_numpy().astype(float)
        params: dict[str, Any] = {"objective": "binary:logistic"}
    else:
        codes = pd.Categorical(labels, categories=list(obs_levels)).codes
        target = codes.astype(float)
        params = {"objective": "multi:softprob", "num_class": len(obs_levels)}
    target[missing] = np.nan
    return target, params


def infer_min_child_weight(n_rows: int, n_features: int) -> int | None:
    """Minimum leaf weight for small data sets, ``None`` when not needed."""
    if n_features < SMALL_DATA_LIMIT or n_rows < SMALL_DATA_LIMIT:
        return 2 if n_rows < TINY_DATA_LIMIT else 5
    return None


def _format_constraints(constraints: Any) -> Any:
    if isinstance(constraints, str):
        return constraints
    return "(" + ",".join(str(int(c)) for c in constraints) + ")"


@BackendRegistry.register("gbm")
class GBMBackend(BackendAdapter):
    """Gradient boosted trees with bernoulli or multinomial loss (XGBoost)."""

    tuning_keys = ("interaction_depth", "n_trees", "shrinkage")
    allowed_options = (
        "sample_weight",
        "monotone_constraints",
        "min_child_weight",
        "subsample",
        "feature_names",
    ) + TUNING_OVERRIDES

    def fit(
        self,
        data: NormalizedTrainingData,
        tune_value: dict[str, Any],
        options: Mapping[str, Any],
        obs_levels: Sequence[Any],
    ) -> tuple[Any, dict[str, Any]]:
        builder = self.option_builder().extras(options)
        tune_value = builder.reconcile_tuning(tune_value, TUNING_OVERRIDES)

        min_child_weight = infer_min_child_weight(data.n_rows, data.n_features)
        if min_child_weight is not None and not builder.has("min_child_weight"):
            logger.debug("Inferred min_child_weight=%d for %d rows", min_child_weight, data.n_rows)
            builder.defaults(min_child_weight=min_child_weight)

        target, objective = encode_target(data.labels, obs_levels)
        params = builder.fixed(
            max_depth=int(tune_value["interaction_depth"]),
            eta=float(tune_value["shrinkage"]),
            verbosity=0,
            **objective,
        ).build()

        sample_weight = params.pop("sample_weight", None)
        feature_names = [str(name) for name in params.pop("feature_names", data.x_names)]
        if "monotone_constraints" in params:
            params["monotone_constraints"] = _format_constraints(params["monotone_constraints"])

        n_trees = int(tune_value["n_trees"])
        logger.info(
            "Fitting gradient boosted trees (%s) with %d rounds, depth %d, eta %s",
            params["objective"],
            n_trees,
            params["max_depth"],
            params["eta"],
        )
        dtrain = xgb.DMatrix(
            data.features.to_numpy(dtype=float),
            label=target,
            weight=None if sample_weight is None else np.asarray(sample_weight, dtype=float),
            feature_names=feature_names,
        )
        booster = xgb.train(params, dtrain, num_boost_round=n_trees)
        return booster, tune_value
