"""
Uniform Training Adapter
========================

Fit any of six classification backends (PLS-DA, gradient boosted trees,
random forest, linear SVM, nearest shrunken centroids, elastic-net GLM)
through one call and get back a record with the same shape for all of them.

.. module:: unitrain

"""

from __future__ import annotations

__version__ = "0.1.0"

from unitrain.errors import (
    BackendFitError,
    InvalidRequestError,
    MissingTuningValueError,
    TrainingError,
    TypeConversionError,
    UnresolvableFamilyError,
    UnsupportedMethodError,
)
from unitrain.model.result import FittedModelRecord
from unitrain.training import train

__all__ = [
    "train",
    "FittedModelRecord",
    "TrainingError",
    "InvalidRequestError",
    "TypeConversionError",
    "MissingTuningValueError",
    "UnsupportedMethodError",
    "UnresolvableFamilyError",
    "BackendFitError",
]
