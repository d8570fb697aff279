"""Project-wide settings and constants."""

from __future__ import annotations

import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = BASE_DIR / "data"
RAW_DATA_PATH = Path(os.getenv("LAYOFFS_RAW_PATH", DATA_DIR / "raw" / "layoffs.csv"))
PROCESSED_DATA_DIR = DATA_DIR / "processed"
CLEANED_DATA_PATH = PROCESSED_DATA_DIR / "layoffs_cleaned.csv"
MLFLOW_DIR = BASE_DIR / "mlruns"
LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
