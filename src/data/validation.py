"""Final sanity checks on the cleaned dataset."""

from __future__ import annotations

from typing import List, Optional

import pandas as pd

from src.data.backfill import is_blank
from src.data.cleaning import stage_dataset
from src.data.dates import DATE_COL
from src.data.deduplication import KEY_COLUMNS, ROW_NUMBER_COL
from src.data.errors import ValidationError
from src.data.standardization import CRYPTO_INDUSTRY, CRYPTO_PREFIX, standardize_country
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)


def count_unfixed_countries(df: pd.DataFrame, source: pd.DataFrame) -> int:
    """Rows whose country differs from the country rule applied to the raw value.

    Only one trailing period is removed, so ``"United States.."`` legitimately
    ends up as ``"United States."``; the cleaned value alone cannot tell that
    apart from an unfixed one.
    """
    staged = stage_dataset(source)
    expected = standardize_country(staged.loc[df.index, ["country"]])["country"]
    actual = df["country"]
    both_missing = actual.isna() & expected.isna()
    return int(((actual != expected) & ~both_missing).sum())


def collect_problems(df: pd.DataFrame, source: Optional[pd.DataFrame] = None) -> List[str]:
    """Describe every invariant the cleaned frame violates.

    The country rule is checked only when the raw ``source`` frame is given.
    """
    problems: List[str] = []

    if ROW_NUMBER_COL in df.columns:
        problems.append(f"helper column {ROW_NUMBER_COL!r} is still present")

    company = df["company"].dropna()
    padded = int((company != company.str.strip()).sum())
    if padded:
        problems.append(f"{padded} company names have surrounding whitespace")

    industry = df["industry"].dropna()
    crypto = industry[industry.str.startswith(CRYPTO_PREFIX)]
    if (crypto != CRYPTO_INDUSTRY).any():
        problems.append("crypto industries are not canonical")

    if source is not None:
        unfixed = count_unfixed_countries(df, source)
        if unfixed:
            problems.append(f"{unfixed} United States countries keep the trailing period")

    if not pd.api.types.is_datetime64_any_dtype(df[DATE_COL]):
        problems.append(f"column {DATE_COL!r} is not a date column")

    blank = is_blank(df["industry"])
    fillable = df.loc[~blank, "company"].dropna().unique()
    unfilled = df[blank & df["company"].isin(fillable)]
    if not unfilled.empty:
        problems.append(f"{len(unfilled)} blank industries could have been backfilled")

    return problems


def count_normalised_duplicates(df: pd.DataFrame) -> int:
    """Rows that became identical to an earlier row after standardisation.

    Deduplication runs on the raw text, so values such as ``" Acme"`` and
    ``"Acme"`` only collide once the company has been trimmed.
    """
    return int(df.duplicated(subset=KEY_COLUMNS, keep="first").sum())


def validate_cleaned_dataset(df: pd.DataFrame, source: Optional[pd.DataFrame] = None) -> None:
    problems = collect_problems(df, source)
    collisions = count_normalised_duplicates(df)
    if collisions:
        logger.warning("validate: %d rows duplicate an earlier row after standardisation", collisions)
    if problems:
        raise ValidationError(problems)
    logger.info("validate: rows=%d ok", len(df))
