"""Tests for OmegaConf training configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from omegaconf import OmegaConf

from unitrain.config import ConfigValidationError, TrainingConfig, load_training_config


def _write(path: Path, text: str) -> str:
    path.write_text(text)
    return str(path)


def test_structured_defaults():
    cfg = OmegaConf.structured(TrainingConfig)
    assert cfg.data.label_column == ".classes"
    assert cfg.logging.level == "INFO"
    assert cfg.output is None
    assert OmegaConf.is_missing(cfg, "method")


def test_load_yaml(tmp_path: Path):
    path = _write(
        tmp_path / "cfg.yaml",
        "method: glmnet\n"
        "tune:\n  alpha: 0.5\n"
        "obs_levels: [A, B]\n"
        "options:\n  max_iter: 300\n"
        "data:\n  path: train.csv\n",
    )
    cfg = load_training_config(path)
    assert cfg.method == "glmnet"
    assert cfg.tune.alpha == 0.5
    assert list(cfg.obs_levels) == ["A", "B"]
    assert cfg.options.max_iter == 300
    assert cfg.data.path == "train.csv"


def test_dotlist_overrides(tmp_path: Path):
    path = _write(tmp_path / "cfg.yaml", "method: svm\ntune:\n  cost: 1.0\nobs_levels: [A, B]\n")
    cfg = load_training_config(path, ["tune.cost=0.25", "method=glmnet"])
    assert cfg.tune.cost == 0.25
    assert cfg.method == "glmnet"


def test_unknown_method(tmp_path: Path):
    path = _write(tmp_path / "cfg.yaml", "method: knn\nobs_levels: [A, B]\n")
    with pytest.raises(ConfigValidationError, match="knn"):
        load_training_config(path)


def test_missing_method(tmp_path: Path):
    path = _write(tmp_path / "cfg.yaml", "obs_levels: [A, B]\n")
    with pytest.raises(ConfigValidationError, match="method"):
        load_training_config(path)


@pytest.mark.parametrize("levels", ["", "obs_levels: []\n"])
def test_obs_levels_required(tmp_path: Path, levels: str):
    path = _write(tmp_path / "cfg.yaml", "method: svm\n" + levels)
    with pytest.raises(ConfigValidationError, match="obs_levels"):
        load_training_config(path)
