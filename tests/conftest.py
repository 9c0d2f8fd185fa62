"""
Shared pytest fixtures for unitrain tests.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd
import pytest

from unitrain.data import LABEL_COLUMN


def make_frame(labels: Sequence[str], n_features: int = 10, seed: int = 0) -> pd.DataFrame:
    """Build a feature table whose class means differ, plus the label column."""
    rng = np.random.default_rng(seed)
    labels = list(labels)
    levels = sorted(set(labels))
    offsets = {level: float(i) for i, level in enumerate(levels)}
    data = {}
    for j in range(n_features):
        data[f"f{j + 1}"] = rng.normal(size=len(labels)) + np.array([offsets[y] for y in labels])
    frame = pd.DataFrame(data)
    frame[LABEL_COLUMN] = labels
    return frame


@pytest.fixture
def two_class_frame() -> pd.DataFrame:
    """40 rows, 10 features, balanced classes A and B."""
    return make_frame(["A", "B"] * 20)


@pytest.fixture
def three_class_frame() -> pd.DataFrame:
    """45 rows, 10 features, balanced classes A, B and C."""
    return make_frame(["A", "B", "C"] * 15)


@pytest.fixture
def singleton_frame() -> pd.DataFrame:
    """40 rows, 10 features; class B has a single row."""
    return make_frame(["A"] * 20 + ["B"] + ["A"] * 19)


# Minimal valid tuning values for every method.
TUNE_VALUES = {
    "plsda": {"ncomp": 2},
    "gbm": {"interaction_depth": 2, "n_trees": 5, "shrinkage": 0.1},
    "rf": {"mtry": 3},
    "svm": {"cost": 1.0},
    "pam": {"threshold": 0.5},
    "glmnet": {"alpha": 0.5},
}


@pytest.fixture
def tune_values() -> dict:
    return {method: dict(values) for method, values in TUNE_VALUES.items()}


@pytest.fixture
def frame_factory():
    """Factory fixture wrapping :func:`make_frame`."""
    return make_frame


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Restore root logger handlers and level changed by configure_logging."""
    import logging

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
