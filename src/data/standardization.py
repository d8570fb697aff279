"""Per-record text standardisation of company, industry and country."""

from __future__ import annotations

import pandas as pd

from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

CRYPTO_PREFIX = "Crypto"
CRYPTO_INDUSTRY = "Crypto"
US_PREFIX = "United States"


def _text_mask(series: pd.Series, prefix: str) -> pd.Series:
    # Case-sensitive prefix match; missing values never match.
    return series.str.startswith(prefix, na=False).astype(bool)


def trim_company(df: pd.DataFrame) -> pd.DataFrame:
    """Strip leading and trailing whitespace from company names."""
    trimmed = df.copy()
    stripped = trimmed["company"].str.strip()
    changed = trimmed["company"].notna() & (stripped != trimmed["company"])
    trimmed["company"] = stripped
    logger.info("standardize.company: trimmed=%d", int(changed.sum()))
    return trimmed


def standardize_industry(df: pd.DataFrame) -> pd.DataFrame:
    """Collapse every industry starting with ``Crypto`` into ``Crypto``."""
    standardized = df.copy()
    mask = _text_mask(standardized["industry"], CRYPTO_PREFIX)
    changed = int((mask & (standardized["industry"] != CRYPTO_INDUSTRY)).sum())
    standardized.loc[mask, "industry"] = CRYPTO_INDUSTRY
    logger.info("standardize.industry: canonicalised=%d", changed)
    return standardized


def standardize_country(df: pd.DataFrame) -> pd.DataFrame:
    """Drop one trailing period from ``United States`` country values."""
    standardized = df.copy()
    mask = _text_mask(standardized["country"], US_PREFIX)
    mask &= standardized["country"].str.endswith(".", na=False).astype(bool)
    standardized.loc[mask, "country"] = standardized.loc[mask, "country"].str[:-1]
    logger.info("standardize.country: fixed=%d", int(mask.sum()))
    return standardized


def standardize_text(df: pd.DataFrame) -> pd.DataFrame:
    return standardize_country(standardize_industry(trim_company(df)))
