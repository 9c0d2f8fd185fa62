"""Structured configuration for command-line training runs.

Configuration files are YAML documents merged onto the dataclass schema
below with OmegaConf, so missing mandatory fields fail early and unknown
fields are rejected.

Example YAML::

    method: glmnet
    tune:
      alpha: 0.5
    obs_levels: [A, B]
    options:
      max_iter: 500
    data:
      path: data/train.csv
      label_column: .classes
    output: models/glmnet.joblib
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from omegaconf import MISSING, DictConfig, OmegaConf

from unitrain.data import LABEL_COLUMN

METHODS = ("plsda", "gbm", "rf", "svm", "pam", "glmnet")


class ConfigValidationError(ValueError):
    """Raised when a training configuration is inconsistent."""


@dataclass
class DataConfig:
    """Location and layout of the training table.

    Parameters:
        path: CSV file with feature columns and the label column.
        label_column: Name of the label column.
    """

    path: str = MISSING
    label_column: str = LABEL_COLUMN


@dataclass
class LoggingConfig:
    """Logging settings applied by the CLI.

    Parameters:
        level: Root log level name.
        file: Optional file to append log records to.
        structured: Emit JSON log records.
    """

    level: str = "INFO"
    file: Optional[str] = None
    structured: bool = False


@dataclass
class TrainingConfig:
    """Complete description of one training run.

    Parameters:
        method: Backend identifier.
        tune: Tuning values for the method.
        obs_levels: Ordered class universe.
        options: Backend extra options.
        data: Training table settings.
        logging: Logging settings.
        output: Optional path the fitted record is written to with joblib.
    """

    method: str = MISSING
    tune: Dict[str, Any] = field(default_factory=dict)
    obs_levels: List[Any] = MISSING
    options: Dict[str, Any] = field(default_factory=dict)
    data: DataConfig = field(default_factory=DataConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: Optional[str] = None


def load_training_config(path: str | None = None, overrides: Sequence[str] | None = None) -> DictConfig:
    """Load a training configuration.

    Parameters:
        path: YAML file merged onto the structured defaults.
        overrides: Dotlist overrides such as ``["method=svm", "tune.cost=0.1"]``.

    Returns:
        Merged, validated configuration.

    Raises:
        ConfigValidationError: If the result fails :func:`validate_training_config`.
    """
    config = OmegaConf.structured(TrainingConfig)
    if path is not None:
        config = OmegaConf.merge(config, OmegaConf.load(path))
    if overrides:
        config = OmegaConf.merge(config, OmegaConf.from_dotlist(list(overrides)))
    validate_training_config(config)
    return config


def validate_training_config(config: DictConfig) -> None:
    """Check the method name and the class universe.

    Raises:
        ConfigValidationError: For an unknown method or empty ``obs_levels``.
    """
    if OmegaConf.is_missing(config, "method"):
        raise ConfigValidationError("method must be set")
    if config.method not in METHODS:
        raise ConfigValidationError(f"Unknown method: {config.method}. Valid: {list(METHODS)}")
    if OmegaConf.is_missing(config, "obs_levels") or len(config.obs_levels) == 0:
        raise ConfigValidationError("obs_levels must list at least one class label")
