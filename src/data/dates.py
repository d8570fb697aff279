"""Conversion of the textual ``date`` column into real dates."""

from __future__ import annotations

import pandas as pd

from src.data.errors import ParseError
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)

DATE_COL = "date"
DATE_FORMAT = "%m/%d/%Y"
DATE_ERROR_POLICIES = ("raise", "coerce")


def find_malformed_dates(df: pd.DataFrame) -> pd.Series:
    """Return the non-blank ``date`` values that do not match ``DATE_FORMAT``."""
    raw = df[DATE_COL]
    present = raw.notna() & (raw.astype(str).str.strip() != "")
    parsed = pd.to_datetime(raw.where(present), format=DATE_FORMAT, errors="coerce")
    return raw[present & parsed.isna()]


def parse_dates(df: pd.DataFrame, errors: str = "raise") -> pd.DataFrame:
    """Parse ``date`` from month/day/year text, e.g. ``3/14/2023``.

    Missing and blank values become ``NaT``. With ``errors="raise"`` the first
    malformed value (in ingest order) aborts with :class:`ParseError`; with
    ``errors="coerce"`` malformed values are logged and set to ``NaT``.
    """
    if errors not in DATE_ERROR_POLICIES:
        raise ValueError(f"errors must be one of {DATE_ERROR_POLICIES}, got {errors!r}")

    parsed_frame = df.copy()
    if pd.api.types.is_datetime64_any_dtype(parsed_frame[DATE_COL]):
        return parsed_frame

    malformed = find_malformed_dates(parsed_frame).sort_index(kind="stable")
    if not malformed.empty:
        if errors == "raise":
            row_id = malformed.index[0]
            company = parsed_frame.at[row_id, "company"] if "company" in parsed_frame.columns else None
            raise ParseError(row_id, malformed.iloc[0], company=company, date_format=DATE_FORMAT)
        for row_id, value in malformed.items():
            logger.warning("dates: row=%s value=%r does not match %s; set to null", row_id, value, DATE_FORMAT)

    raw = parsed_frame[DATE_COL]
    present = raw.notna() & (raw.astype(str).str.strip() != "")
    parsed_frame[DATE_COL] = pd.to_datetime(raw.where(present), format=DATE_FORMAT, errors="coerce")
    logger.info(
        "dates: parsed=%d null=%d malformed=%d",
        int(parsed_frame[DATE_COL].notna().sum()),
        int(parsed_frame[DATE_COL].isna().sum()),
        len(malformed),
    )
    return parsed_frame
