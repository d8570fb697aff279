"""Data cleaning of the layoffs dataset, stage by stage."""

from __future__ import annotations

from typing import Dict, Tuple

import pandas as pd

from src.data.backfill import apply_known_industries, backfill_industry, is_blank
from src.data.dates import DATE_COL, parse_dates
from src.data.deduplication import ROW_NUMBER_COL, remove_duplicates
from src.data.standardization import standardize_country, standardize_industry, trim_company
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

ROW_ID = "row_id"
HELPER_COLUMNS = [ROW_NUMBER_COL]


def _changed(before: pd.DataFrame, after: pd.DataFrame, column: str) -> int:
    mask = before[column].notna() & (before[column] != after[column])
    return int(mask.sum())


def stage_dataset(df: pd.DataFrame) -> pd.DataFrame:
    """Copy the raw frame into a working frame indexed by ingest order."""
    staged = df.copy(deep=True).reset_index(drop=True)
    staged.index.name = ROW_ID
    return staged


def drop_helper_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Remove the columns that only exist to drive the cleaning stages."""
    return df.drop(columns=[column for column in HELPER_COLUMNS if column in df.columns])


def clean_dataset(
    df: pd.DataFrame,
    date_errors: str = "raise",
    strict_backfill: bool = False,
) -> Tuple[pd.DataFrame, Dict[str, int]]:
    """Run every cleaning stage in order and return the frame with row counts."""
    stats: Dict[str, int] = {}

    staged = stage_dataset(df)
    stats["raw_row_count"] = len(staged)

    deduplicated = remove_duplicates(staged)
    stats["duplicates_removed"] = len(staged) - len(deduplicated)
    stats["after_dedup_row_count"] = len(deduplicated)

    trimmed = trim_company(deduplicated)
    stats["companies_trimmed"] = _changed(deduplicated, trimmed, "company")
    industries = standardize_industry(trimmed)
    stats["industries_canonicalised"] = _changed(trimmed, industries, "industry")
    countries = standardize_country(industries)
    stats["countries_fixed"] = _changed(industries, countries, "country")

    dated = parse_dates(countries, errors=date_errors)
    stats["dates_parsed"] = int(dated[DATE_COL].notna().sum())
    stats["dates_null"] = int(dated[DATE_COL].isna().sum())

    blank_before = int(is_blank(dated["industry"]).sum())
    known = apply_known_industries(dated)
    blank_after_known = int(is_blank(known["industry"]).sum())
    backfilled = backfill_industry(known, strict=strict_backfill)
    blank_remaining = int(is_blank(backfilled["industry"]).sum())
    stats["industries_known_filled"] = blank_before - blank_after_known
    stats["industries_backfilled"] = blank_after_known - blank_remaining
    stats["blank_industries_remaining"] = blank_remaining

    cleaned = drop_helper_columns(backfilled)
    stats["final_row_count"] = len(cleaned)
    logger.info("clean: %s", " ".join(f"{name}={value}" for name, value in stats.items()))
    return cleaned, stats
