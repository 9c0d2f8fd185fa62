"""CLI commands for training and backend discovery.

``unitrain train`` reads a YAML training config, loads the CSV table with
pandas, fits the requested backend and optionally writes the fitted record
with joblib. ``unitrain methods`` lists the registered backends.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import joblib
import pandas as pd
import typer

from unitrain.cli import app
from unitrain.config import ConfigValidationError, load_training_config
from unitrain.errors import TrainingError
from unitrain.logging import configure_logging

logger = logging.getLogger("unitrain.cli.train")


@app.command("train")
def train_command(
    config: str = typer.Option(..., "--config", "-c", help="YAML config path"),
    method: Optional[str] = typer.Option(None, "--method", "-m", help="Method (overrides config)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the fitted record here (joblib)"),
    override: Optional[List[str]] = typer.Option(
        None, "--set", help="Dotlist override, e.g. --set tune.cost=0.5 (repeatable)"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Logging level"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Append logs to this file"),
    structured: bool = typer.Option(False, "--structured", help="Emit JSON log records"),
) -> None:
    """Train one backend from a config YAML.

    Examples:

        unitrain train --config configs/glmnet.yaml

        unitrain train -c configs/rf.yaml --set tune.mtry=4 -o models/rf.joblib
    """
    overrides = list(override or [])
    if method:
        overrides.append(f"method={method}")
    try:
        cfg = load_training_config(config, overrides)
    except ConfigValidationError as exc:
        typer.echo(f"Invalid config: {exc}", err=True)
        raise typer.Exit(code=2)

    configure_logging(
        level=log_level or cfg.logging.level,
        file=log_file or cfg.logging.file,
        structured=structured or cfg.logging.structured,
    )

    from omegaconf import OmegaConf

    from unitrain.training import train

    logger.info(f"Loading training data from {cfg.data.path}")
    frame = pd.read_csv(cfg.data.path)

    try:
        record = train(
            frame,
            cfg.method,
            OmegaConf.to_container(cfg.tune, resolve=True),
            list(cfg.obs_levels),
            OmegaConf.to_container(cfg.options, resolve=True),
            label_column=cfg.data.label_column,
        )
    except TrainingError as exc:
        logger.error(f"Training failed: {exc}")
        raise typer.Exit(code=1)

    typer.echo(f"method: {cfg.method}")
    typer.echo(f"features: {len(record.x_names)}")
    typer.echo(f"tune_value: {record.tune_value}")
    typer.echo(f"obs_levels: {list(record.obs_levels)}")

    save_path = output or cfg.output
    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(record, save_path)
        logger.info(f"Fitted record saved to {save_path}")
        typer.echo(f"saved: {save_path}")


@app.command("methods")
def list_methods() -> None:
    """List the registered training methods.

    Example:
        unitrain methods
    """
    import unitrain.model.backends  # noqa: F401
    from unitrain.model.registry import BackendRegistry

    typer.echo("Available methods:")
    for name in BackendRegistry.list_methods():
        adapter = BackendRegistry.create(name)
        typer.echo(f"  {name}: {adapter.describe()}")
        typer.echo(f"    tuning: {', '.join(adapter.tuning_keys)}")
        typer.echo(f"    options: {', '.join(adapter.allowed_options) or '-'}")
