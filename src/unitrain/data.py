"""Training request normalization.

Turns the caller's labeled table into the numeric feature frame and
re-leveled label vector every backend adapter consumes, and implements the
singleton-class guard used by the shrunken-centroid backend.

Contents
--------
Classes
    TrainingRequest : Immutable input of one training call.
    NormalizedTrainingData : Numeric features, categorical labels and feature names.
Functions
    normalize_request : Coerce features and re-level labels.
    drop_small_classes : Remove rows of classes with fewer than two members.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import pandas as pd

from unitrain.errors import InvalidRequestError, TypeConversionError

logger = logging.getLogger(__name__)

LABEL_COLUMN = ".classes"
MIN_CLASS_SIZE = 2


@dataclass(frozen=True)
class TrainingRequest:
    """Immutable input of a single training invocation.

    Parameters:
        data: Feature table including the label column.
        method: Backend identifier (``plsda``, ``gbm``, ``rf``, ``svm``, ``pam``, ``glmnet``).
        tune_value: Method-specific tuning values.
        obs_levels: Ordered universe of class labels, fixed by the caller.
        options: Backend-specific pass-through options.
        label_column: Name of the label column in ``data``.
    """

    data: Any
    method: str
    tune_value: Mapping[str, Any]
    obs_levels: Sequence[Any]
    options: Mapping[str, Any] = field(default_factory=dict)
    label_column: str = LABEL_COLUMN

    def __post_init__(self) -> None:
        if self.obs_levels is None or len(self.obs_levels) == 0:
            raise InvalidRequestError("obs_levels must contain at least one class label")
        if len(set(self.obs_levels)) != len(self.obs_levels):
            raise InvalidRequestError(f"obs_levels contains duplicates: {list(self.obs_levels)}")
        object.__setattr__(self, "obs_levels", tuple(self.obs_levels))
        object.__setattr__(self, "tune_value", dict(self.tune_value))
        object.__setattr__(self, "options", dict(self.options or {}))


@dataclass(frozen=True)
class NormalizedTrainingData:
    """Numeric features and re-leveled labels ready for a backend.

    ``labels`` is categorical with categories equal to the request's
    ``obs_levels``; values outside that set are missing (``NaN``).
    ``raw_labels`` keeps the label column as supplied, before re-leveling.
    """

    features: pd.DataFrame
    labels: pd.Series
    x_names: tuple
    raw_labels: pd.Series | None = None

    @property
    def n_rows(self) -> int:
        return self.features.shape[0]

    @property
    def n_features(self) -> int:
        return self.features.shape[1]


def _coerce_numeric(column: pd.Series) -> pd.Series:
    try:
        converted = pd.to_numeric(column, errors="raise")
    except (ValueError, TypeError) as exc:
        raise TypeConversionError(column.name, str(exc)) from exc
    return converted.astype(float)


def normalize_request(request: TrainingRequest) -> NormalizedTrainingData:
    """Coerce the feature table to numeric and re-level the labels.

    Parameters
    ----------
    request : TrainingRequest
        Request whose ``data`` holds the features and the label column.

    Returns
    -------
    NormalizedTrainingData
        Float feature frame (label column removed), categorical labels and
        the feature names in table order.

    Raises
    ------
    InvalidRequestError
        If the label column is absent.
    TypeConversionError
        If a feature column cannot be made numeric.
    """
    data = request.data if isinstance(request.data, pd.DataFrame) else pd.DataFrame(request.data)

    if request.label_column not in data.columns:
        raise InvalidRequestError(f"Label column '{request.label_column}' not found in training data")

    x_names = tuple(col for col in data.columns if col != request.label_column)
    features = pd.DataFrame(
        {name: _coerce_numeric(data[name]) for name in x_names},
        index=data.index,
        columns=list(x_names),
    )

    raw_labels = data[request.label_column]
    levels = list(request.obs_levels)
    known = raw_labels.where(raw_labels.isin(levels))
    labels = pd.Series(
        pd.Categorical(known, categories=levels),
        index=data.index,
        name=request.label_column,
    )
    n_unknown = int(known.isna().sum() - raw_labels.isna().sum())
    if n_unknown > 0:
        logger.warning("%d label(s) outside obs_levels %s marked as missing", n_unknown, levels)

    return NormalizedTrainingData(features=features, labels=labels, x_names=x_names, raw_labels=raw_labels)


def drop_small_classes(data: NormalizedTrainingData, min_size: int = MIN_CLASS_SIZE) -> NormalizedTrainingData:
    """Remove the rows of every class observed fewer than ``min_size`` times.

    Counts are taken on the labels as supplied, so a value outside
    ``obs_levels`` is a class of its own here. Classes absent from the
    sample are untouched and the label categories are kept as they are;
    only rows are pruned.
    """
    raw = data.raw_labels if data.raw_labels is not None else data.labels
    counts = raw.value_counts(dropna=True)
    small = [level for level, count in counts.items() if 0 < count < min_size]
    if not small:
        return data

    logger.info("Dropping classes with fewer than %d observations: %s", min_size, small)
    keep = ~raw.isin(small)
    return NormalizedTrainingData(
        features=data.features.loc[keep],
        labels=data.labels.loc[keep],
        x_names=data.x_names,
        raw_labels=None if data.raw_labels is None else data.raw_labels.loc[keep],
    )
