"""Elastic-net regularized generalized linear model backend.

The penalized logistic model is built from scikit-learn parts: an optional
column exclusion and standardization step followed by ``LogisticRegression``
with an elastic-net penalty set through ``l1_ratio``, where ``alpha`` is
the L1/L2 mixing ratio.

The response family is inferred from the number of label levels unless the
caller names one explicitly.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from unitrain.data import NormalizedTrainingData
from unitrain.errors import BackendFitError, UnresolvableFamilyError
from unitrain.model.base import BackendAdapter
from unitrain.model.registry import BackendRegistry

logger = logging.getLogger(__name__)

FAMILIES = ("binomial", "multinomial")


def infer_family(labels: pd.Series) -> str:
    """Choose the response family from the number of label levels.

    Parameters
    ----------
    labels : pd.Series
        Categorical label vector.

    Returns
    -------
    str
        ``"binomial"`` for two levels, ``"multinomial"`` for more.

    Raises
    ------
    UnresolvableFamilyError
        If the labels carry no categorical levels or fewer than two of them.
    """
    if not isinstance(labels.dtype, pd.CategoricalDtype):
        raise UnresolvableFamilyError(
            f"levels of classes couldn't be determined for glmnet (label dtype {labels.dtype})"
        )
    n_levels = len(labels.cat.categories)
    if n_levels < 2:
        raise UnresolvableFamilyError(f"glmnet needs at least two class levels, got {n_levels}")
    return "multinomial" if n_levels > 2 else "binomial"


def fit_elastic_net(
    features: pd.DataFrame,
    labels: pd.Series,
    alpha: float,
    family: str,
    *,
    sample_weight: Any = None,
    standardize: bool = True,
    exclude: Sequence[Any] | None = None,
    **params: Any,
) -> Pipeline:
    """Fit an elastic-net penalized logistic model.

    Parameters
    ----------
    features : pd.DataFrame
        Numeric feature frame.
    labels : pd.Series
        Class labels.
    alpha : float
        Elastic-net mixing parameter, ``1`` is lasso and ``0`` is ridge.
    family : str
        ``"binomial"`` or ``"multinomial"``.
    sample_weight : array-like, optional
        Per-row observation weights.
    standardize : bool, default=True
        Scale features to unit variance before fitting.
    exclude : Sequence, optional
        Feature names excluded from the model. The pipeline still expects
        the full feature frame at prediction time.
    **params
        Passed to ``LogisticRegression`` (``C``, ``max_iter``, ``tol``,
        ``fit_intercept``, ``class_weight``).

    Raises
    ------
    BackendFitError
        If ``family`` is unknown, ``binomial`` is requested for more than
        two observed classes, or ``multinomial`` for fewer than three.
    """
    if family not in FAMILIES:
        raise BackendFitError(f"Unsupported glmnet family '{family}'. Valid: {list(FAMILIES)}")
    n_observed = labels.dropna().nunique()
    if family == "binomial" and n_observed > 2:
        raise BackendFitError(f"binomial family needs at most two classes, found {n_observed}; use multinomial")
    if family == "multinomial" and n_observed < 3:
        raise BackendFitError(
            f"multinomial family needs at least three observed classes, found {n_observed}; use binomial"
        )

    steps: list[tuple[str, Any]] = []
    if exclude:
        steps.append(("exclude", ColumnTransformer([("drop", "drop", list(exclude))], remainder="passthrough")))
    if standardize:
        steps.append(("scale", StandardScaler()))
    steps.append(("glm", LogisticRegression(solver="saga", l1_ratio=float(alpha), **params)))
    model = Pipeline(steps)
    model.fit(features, labels, glm__sample_weight=sample_weight)
    model.family_ = family
    return model


@BackendRegistry.register("glmnet")
class GLMNetBackend(BackendAdapter):
    """Elastic-net logistic regression with family inference (sklearn)."""

    tuning_keys = ("alpha",)
    allowed_options = (
        "family",
        "sample_weight",
        "standardize",
        "fit_intercept",
        "exclude",
        "max_iter",
        "tol",
        "C",
        "class_weight",
    )

    def fit(
        self,
        data: NormalizedTrainingData,
        tune_value: dict[str, Any],
        options: Mapping[str, Any],
        obs_levels: Sequence[Any],
    ) -> tuple[Any, dict[str, Any]]:
        builder = self.option_builder().extras(options)
        if not builder.has("family"):
            builder.defaults(family=infer_family(data.labels))
        params = builder.build()

        family = params.pop("family")
        alpha = float(tune_value["alpha"])
        logger.info("Fitting %s elastic-net GLM with alpha=%s on %d rows", family, alpha, data.n_rows)
        model = fit_elastic_net(data.features, data.labels, alpha, family, **params)
        return model, tune_value
