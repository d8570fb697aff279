"""High-level cleaning pipeline orchestration."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pandas as pd

from src.config.settings import CLEANED_DATA_PATH, RAW_DATA_PATH
from src.data.cleaning import clean_dataset
from src.data.dates import DATE_COL
from src.data.ingestion import load_raw_dataset
from src.data.validation import validate_cleaned_dataset
from src.utils.logging_utils import get_logger
from src.utils.mlflow_utils import log_cleaning_run

logger = get_logger(__name__)


def write_cleaned_dataset(df: pd.DataFrame, output_path: Path) -> Path:
    """Write the cleaned frame as CSV with ISO dates."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False, date_format="%Y-%m-%d")
    logger.info("write: rows=%d path=%s", len(df), output_path)
    return output_path


def run_cleaning_pipeline(
    input_path: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    experiment_name: str = "layoffs_cleaning",
    track: bool = True,
    date_errors: str = "raise",
    strict_backfill: bool = False,
) -> Tuple[pd.DataFrame, Dict[str, int]]:
    """Entry point to clean the raw layoffs file and return the cleaned frame with metrics."""
    source = Path(input_path) if input_path is not None else RAW_DATA_PATH
    target = Path(output_path) if output_path is not None else CLEANED_DATA_PATH

    raw = load_raw_dataset(source)
    cleaned, metrics = clean_dataset(raw, date_errors=date_errors, strict_backfill=strict_backfill)
    validate_cleaned_dataset(cleaned, source=raw)
    write_cleaned_dataset(cleaned, target)

    if track:
        log_cleaning_run(
            cleaned,
            metrics,
            params={
                "input_path": source,
                "date_errors": date_errors,
                "strict_backfill": strict_backfill,
                "date_column": DATE_COL,
            },
            output_path=target,
            experiment_name=experiment_name,
        )
    return cleaned, metrics
