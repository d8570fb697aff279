"""Data ingestion utilities for the company layoffs dataset."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from src.config.settings import RAW_DATA_PATH
from src.data.errors import InvalidValueError, MissingColumnsError
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

SOURCE_COLUMNS: List[str] = [
    "company",
    "location",
    "industry",
    "total_laid_off",
    "percentage_laid_off",
    "date",
    "stage",
    "country",
    "funds_raised_millions",
]
INTEGER_COLUMNS: List[str] = ["total_laid_off", "funds_raised_millions"]
NULL_TOKEN = "NULL"


def coerce_integer_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Cast the count columns to nullable integers.

    Blank and missing cells become ``<NA>``; anything else that is not a
    whole number raises :class:`InvalidValueError` for the first such row.
    """
    coerced = df.copy()
    for column in INTEGER_COLUMNS:
        values = coerced[column].where(coerced[column].astype(str).str.strip() != "")
        numbers = pd.to_numeric(values, errors="coerce")
        invalid = values.notna() & (numbers.isna() | (numbers % 1 != 0))
        if invalid.any():
            row_id = invalid[invalid].index[0]
            raise InvalidValueError(row_id, column, values[row_id])
        coerced[column] = numbers.astype("Int64")
    return coerced


def load_raw_dataset(path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Load the raw layoffs CSV file into a DataFrame.

    Every column is read as text; ``NULL`` becomes a missing value while
    empty cells stay as empty strings, so blank and null remain distinct.
    """
    source = Path(path) if path is not None else RAW_DATA_PATH
    dataset = pd.read_csv(
        source,
        dtype=str,
        keep_default_na=False,
        na_values=[NULL_TOKEN],
    )
    missing = [column for column in SOURCE_COLUMNS if column not in dataset.columns]
    if missing:
        raise MissingColumnsError(source, missing)
    dataset = coerce_integer_columns(dataset[SOURCE_COLUMNS])
    logger.info("ingest: rows=%d path=%s", len(dataset), source)
    return dataset
