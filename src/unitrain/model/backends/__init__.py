"""Backend adapters, one module per classification method.

Importing this package registers every backend with
:class:`~unitrain.model.registry.BackendRegistry`.
"""

from __future__ import annotations

from unitrain.model.backends.gbm import GBMBackend
from unitrain.model.backends.glmnet import GLMNetBackend
from unitrain.model.backends.pam import PAMBackend
from unitrain.model.backends.plsda import PLSDABackend
from unitrain.model.backends.rf import RandomForestBackend
from unitrain.model.backends.svm import SVMBackend

__all__ = [
    "GBMBackend",
    "GLMNetBackend",
    "PAMBackend",
    "PLSDABackend",
    "RandomForestBackend",
    "SVMBackend",
]
