"""Exact-duplicate detection and removal for layoff records."""

from __future__ import annotations

from typing import List

import pandas as pd

from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

KEY_COLUMNS: List[str] = [
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
ROW_NUMBER_COL = "row_num"


def assign_row_numbers(df: pd.DataFrame) -> pd.DataFrame:
    """Number the rows of each duplicate-key group 1, 2, ... in ingest order.

    Missing values in the key compare equal to each other.
    """
    ordered = df.sort_index(kind="stable")
    numbered = ordered.copy()
    numbered[ROW_NUMBER_COL] = (
        ordered.groupby(KEY_COLUMNS, dropna=False, sort=False).cumcount() + 1
    ).astype("int64")
    return numbered


def find_duplicates(df: pd.DataFrame) -> pd.DataFrame:
    """Return the rows that would be dropped as duplicates."""
    numbered = df if ROW_NUMBER_COL in df.columns else assign_row_numbers(df)
    return numbered[numbered[ROW_NUMBER_COL] > 1]


def remove_duplicates(df: pd.DataFrame) -> pd.DataFrame:
    """Keep the first row of every duplicate-key group."""
    numbered = assign_row_numbers(df)
    deduplicated = numbered[numbered[ROW_NUMBER_COL] == 1].copy()
    logger.info(
        "dedup: kept=%d from=%d dropped=%d",
        len(deduplicated),
        len(numbered),
        len(numbered) - len(deduplicated),
    )
    return deduplicated
