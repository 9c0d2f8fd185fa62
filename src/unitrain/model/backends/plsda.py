"""Partial least squares discriminant analysis backend.

PLS-DA is a PLS regression of the one-hot encoded class indicator matrix on
the features; the fitted ``PLSRegression`` is the fit handle.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Mapping, Sequence

import pandas as pd
from sklearn.cross_decomposition import PLSRegression

from unitrain.data import NormalizedTrainingData
from unitrain.model.base import BackendAdapter
from unitrain.model.registry import BackendRegistry

logger = logging.getLogger(__name__)

MIN_COMPONENTS = 2


def fit_plsda(features: pd.DataFrame, labels: pd.Series, n_components: int) -> PLSRegression:
    """Fit PLS regression on the class indicator matrix.

    One indicator column is produced per category of ``labels`` (observed or
    not), in category order, and recorded on the estimator as ``classes_``.
    """
    indicators = pd.get_dummies(labels, dtype=float)
    model = PLSRegression(n_components=n_components, scale=True)
    model.fit(features, indicators)
    model.classes_ = list(indicators.columns)
    return model


@BackendRegistry.register("plsda")
class PLSDABackend(BackendAdapter):
    """Partial least squares discriminant analysis (sklearn PLSRegression)."""

    tuning_keys = ("ncomp",)

    def fit(
        self,
        data: NormalizedTrainingData,
        tune_value: dict[str, Any],
        options: Mapping[str, Any],
        obs_levels: Sequence[Any],
    ) -> tuple[Any, dict[str, Any]]:
        # no pass-through options; the builder only reports what is dropped
        self.option_builder().extras(options)

        ncomp = int(tune_value["ncomp"])
        if ncomp == 1:
            warnings.warn(
                f"PLSDA model contained only 1 component. PLSDA requires at least "
                f"{MIN_COMPONENTS} components; model fit with {MIN_COMPONENTS} components",
                UserWarning,
                stacklevel=2,
            )
            ncomp = MIN_COMPONENTS
            tune_value["ncomp"] = MIN_COMPONENTS

        logger.info("Fitting PLS-DA with %d components on %d rows", ncomp, data.n_rows)
        return fit_plsda(data.features, data.labels, ncomp), tune_value
