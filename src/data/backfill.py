"""Filling blank industries from what is known about the same company."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

import pandas as pd

from src.data.errors import AmbiguousBackfillError
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Authoritative industries for companies whose records all lack one.
KNOWN_INDUSTRIES: Dict[str, str] = {
    "Airbnb": "Travel",
}


def is_blank(series: pd.Series) -> pd.Series:
    """True where a value is missing or empty/whitespace-only text."""
    return (series.isna() | (series.astype(str).str.strip() == "")).astype(bool)


def find_blank_industries(df: pd.DataFrame) -> pd.DataFrame:
    return df[is_blank(df["industry"])]


def apply_known_industries(
    df: pd.DataFrame, known: Optional[Mapping[str, str]] = None
) -> pd.DataFrame:
    """Set blank industries of known companies (exact name match)."""
    known = KNOWN_INDUSTRIES if known is None else known
    filled = df.copy()
    mask = is_blank(filled["industry"]) & filled["company"].isin(list(known))
    filled.loc[mask, "industry"] = filled.loc[mask, "company"].map(known)
    logger.info("backfill.known: filled=%d", int(mask.sum()))
    return filled


def industry_lookup(df: pd.DataFrame, strict: bool = False) -> Dict[str, str]:
    """Map each company to its first non-blank industry in ingest order.

    Companies that have blank rows and more than one distinct industry are
    reported: a warning by default, :class:`AmbiguousBackfillError` when
    ``strict`` is set. The first industry seen wins either way.
    """
    ordered = df.sort_index(kind="stable")
    blank = is_blank(ordered["industry"])
    known = ordered[~blank & ordered["company"].notna()]
    lookup = known.groupby("company", sort=False)["industry"].first()

    needs_fill = set(ordered.loc[blank, "company"].dropna())
    candidates = known[known["company"].isin(needs_fill)]
    distinct = candidates.groupby("company", sort=False)["industry"].unique()
    for company, values in distinct.items():
        industries = list(values)
        if len(industries) < 2:
            continue
        if strict:
            raise AmbiguousBackfillError(company, industries)
        logger.warning(
            "backfill: company=%r has conflicting industries %s; using %r",
            company,
            industries,
            industries[0],
        )
    return lookup.to_dict()


def backfill_industry(df: pd.DataFrame, strict: bool = False) -> pd.DataFrame:
    """Copy a company's known industry onto its rows with a blank industry."""
    filled = df.copy()
    lookup = industry_lookup(filled, strict=strict)
    blank = is_blank(filled["industry"])
    replacement = filled["company"].map(lookup)
    mask = blank & replacement.notna()
    filled.loc[mask, "industry"] = replacement[mask]
    remaining: List[str] = sorted(set(filled.loc[blank & ~mask, "company"].dropna()))
    logger.info("backfill.company: filled=%d still_blank=%d", int(mask.sum()), int((blank & ~mask).sum()))
    if remaining:
        logger.info("backfill.company: no industry known for %s", ", ".join(remaining))
    return filled
