"""Utility helpers for tracking cleaning runs in MLflow."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Dict, Mapping, Optional

import mlflow
import pandas as pd

from src.config.settings import MLFLOW_DIR
from src.data.backfill import find_blank_industries


def configure_mlflow(tracking_uri: Optional[str] = None) -> None:
    """Configure the MLflow tracking URI, defaulting to the local mlruns directory."""
    uri = tracking_uri or MLFLOW_DIR.as_uri()
    mlflow.set_tracking_uri(uri)
    MLFLOW_DIR.mkdir(parents=True, exist_ok=True)


def log_cleaning_run(
    cleaned: pd.DataFrame,
    metrics: Mapping[str, int],
    params: Dict[str, object],
    output_path: Path,
    experiment_name: str = "layoffs_cleaning",
    tracking_uri: Optional[str] = None,
) -> str:
    """Log one pipeline run and return its MLflow run id."""
    configure_mlflow(tracking_uri)
    mlflow.set_experiment(experiment_name)
    with mlflow.start_run(run_name="layoffs_cleaning") as run:
        mlflow.log_params({name: str(value) for name, value in params.items()})
        for metric_name, metric_value in metrics.items():
            mlflow.log_metric(metric_name, metric_value)

        if output_path.exists():
            mlflow.log_artifact(str(output_path))

        blank = find_blank_industries(cleaned)
        with tempfile.TemporaryDirectory() as tmpdir:
            blank_path = Path(tmpdir) / "blank_industries.csv"
            blank.to_csv(blank_path, index_label="row_id")
            mlflow.log_artifact(str(blank_path))
    return run.info.run_id
