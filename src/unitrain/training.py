"""Training entry point.

:func:`train` is the single operation of the package: normalize the request,
prune singleton classes where the backend needs it, dispatch to the backend
registered for ``method`` and wrap the fit handle in a
:class:`~unitrain.model.result.FittedModelRecord`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import unitrain.model.backends  # noqa: F401  (registers backends)
from unitrain.data import LABEL_COLUMN, TrainingRequest, drop_small_classes, normalize_request
from unitrain.model.registry import BackendRegistry
from unitrain.model.result import FittedModelRecord, wrap_result

logger = logging.getLogger(__name__)


def train(
    data: Any,
    method: str,
    tune_value: Mapping[str, Any],
    obs_levels: Sequence[Any],
    options: Mapping[str, Any] | None = None,
    *,
    label_column: str = LABEL_COLUMN,
) -> FittedModelRecord:
    """Fit one classification backend and return a uniform record.

    Parameters
    ----------
    data : pandas.DataFrame or table-like
        Numeric feature columns plus the label column ``label_column``.
    method : str
        One of ``plsda``, ``gbm``, ``rf``, ``svm``, ``pam``, ``glmnet``.
    tune_value : Mapping[str, Any]
        Method-specific tuning values (``ncomp``; ``interaction_depth``,
        ``n_trees``, ``shrinkage``; ``mtry``; ``cost``; ``threshold``;
        ``alpha``).
    obs_levels : Sequence
        Ordered universe of class labels; never derived from ``data``.
    options : Mapping[str, Any], optional
        Backend-specific extra options. Keys the backend does not recognize
        are dropped.
    label_column : str, default=".classes"
        Name of the label column.

    Returns
    -------
    FittedModelRecord
        Fit handle, feature names, effective tuning values and ``obs_levels``.

    Raises
    ------
    UnsupportedMethodError
        If ``method`` is not registered.
    MissingTuningValueError
        If a required tuning value is absent.
    InvalidRequestError
        If ``obs_levels`` is empty or the label column is missing.
    TypeConversionError
        If a feature column is not numeric.
    UnresolvableFamilyError
        If the glmnet family cannot be inferred.

    Examples
    --------
    >>> record = train(frame, "glmnet", {"alpha": 0.5}, obs_levels=["A", "B"])
    >>> record.tune_value
    {'alpha': 0.5}
    """
    adapter = BackendRegistry.create(method)
    tune = adapter.check_tuning(tune_value)
    request = TrainingRequest(
        data=data,
        method=method,
        tune_value=tune,
        obs_levels=obs_levels,
        options=options or {},
        label_column=label_column,
    )

    normalized = normalize_request(request)
    if adapter.drops_small_classes:
        normalized = drop_small_classes(normalized)

    logger.info(
        "Training %s on %d rows x %d features",
        method,
        normalized.n_rows,
        normalized.n_features,
        extra={"method": method},
    )
    fit, effective_tune = adapter.fit(normalized, dict(request.tune_value), request.options, request.obs_levels)
    return wrap_result(fit, normalized.x_names, effective_tune, request.obs_levels)
