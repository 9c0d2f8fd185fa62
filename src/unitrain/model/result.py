"""Uniform result envelope returned by every backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


@dataclass(frozen=True)
class FittedModelRecord:
    """Fitted model plus the metadata a prediction routine needs.

    Parameters:
        fit: Backend-native fitted object, opaque to this package.
        x_names: Feature names in the column order the fit expects.
            Some fits (``pam``) carry no feature names of their own and take
            a plain array in this order.
        tune_value: Tuning values actually used, after any correction.
        obs_levels: Declared class universe, as supplied by the caller.
    """

    fit: Any
    x_names: tuple
    tune_value: dict = field(default_factory=dict)
    obs_levels: tuple = ()

    @property
    def n_features(self) -> int:
        return len(self.x_names)


def wrap_result(
    fit: Any,
    x_names: Sequence[Any],
    tune_value: Mapping[str, Any],
    obs_levels: Sequence[Any],
) -> FittedModelRecord:
    """Attach feature names, effective tuning values and class levels to a fit handle."""
    return FittedModelRecord(
        fit=fit,
        x_names=tuple(x_names),
        tune_value=dict(tune_value),
        obs_levels=tuple(obs_levels),
    )
