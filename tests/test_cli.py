"""Tests for the unitrain command line."""

from __future__ import annotations

from pathlib import Path

import joblib
import pytest
from typer.testing import CliRunner

from unitrain.cli import app
from unitrain.model.result import FittedModelRecord


@pytest.fixture
def config_file(tmp_path: Path, two_class_frame) -> Path:
    csv_path = tmp_path / "train.csv"
    two_class_frame.to_csv(csv_path, index=False)
    cfg = tmp_path / "svm.yaml"
    cfg.write_text(
        "method: svm\n"
        "tune:\n  cost: 0.5\n"
        "obs_levels: [A, B]\n"
        f"data:\n  path: {csv_path}\n"
    )
    return cfg


def test_train_writes_record(config_file: Path, tmp_path: Path):
    out = tmp_path / "models" / "svm.joblib"
    runner = CliRunner()
    result = runner.invoke(app, ["train", "--config", str(config_file), "--output", str(out)])
    if result.exit_code != 0:
        pytest.fail(f"CLI invocation failed with exit code {result.exit_code}: {result.output}")
    assert "tune_value: {'cost': 0.5}" in result.output
    record = joblib.load(out)
    assert isinstance(record, FittedModelRecord)
    assert record.obs_levels == ("A", "B")
    assert len(record.x_names) == 10


def test_method_and_set_overrides(config_file: Path):
    runner = CliRunner()
    result = runner.invoke(
        app, ["train", "-c", str(config_file), "-m", "glmnet", "--set", "tune.alpha=0.3", "-l", "WARNING"]
    )
    assert result.exit_code == 0, result.output
    assert "method: glmnet" in result.output
    assert "'alpha': 0.3" in result.output


def test_invalid_config_exit_code(tmp_path: Path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("method: knn\nobs_levels: [A]\n")
    result = CliRunner().invoke(app, ["train", "-c", str(cfg)])
    assert result.exit_code == 2


def test_training_error_exit_code(config_file: Path):
    result = CliRunner().invoke(app, ["train", "-c", str(config_file), "-m", "rf"])
    assert result.exit_code == 1


def test_methods_lists_backends():
    result = CliRunner().invoke(app, ["methods"])
    assert result.exit_code == 0
    for method in ("plsda", "gbm", "rf", "svm", "pam", "glmnet"):
        assert f"  {method}:" in result.output
    assert "interaction_depth, n_trees, shrinkage" in result.output
