import pandas as pd
import pytest

from src.data.cleaning import stage_dataset
from src.data.dates import find_malformed_dates, parse_dates
from src.data.errors import ParseError
from tests.conftest import make_frame


def _dated(*dates):
    rows = [(f"C{i}", "NYC", "Retail", 1, None, d, "Seed", "USA", 1) for i, d in enumerate(dates)]
    return stage_dataset(make_frame(rows))


def test_month_day_year_is_parsed():
    out = parse_dates(_dated("3/14/2023", "12/01/2022"))
    assert out["date"].tolist() == [pd.Timestamp("2023-03-14"), pd.Timestamp("2022-12-01")]
    assert pd.api.types.is_datetime64_any_dtype(out["date"])


def test_missing_and_blank_dates_become_null():
    out = parse_dates(_dated(None, "", "3/14/2023"))
    assert out["date"].isna().tolist() == [True, True, False]


def test_malformed_date_aborts_with_row_identity():
    frame = _dated("3/14/2023", "14/3/2023", "2023-03-14")
    with pytest.raises(ParseError) as excinfo:
        parse_dates(frame)
    assert excinfo.value.row_id == 1
    assert excinfo.value.value == "14/3/2023"
    assert excinfo.value.company == "C1"
    assert frame["date"].tolist()[1] == "14/3/2023"


def test_coerce_policy_nulls_malformed_dates():
    frame = _dated("3/14/2023", "14/3/2023")
    assert find_malformed_dates(frame).index.tolist() == [1]
    out = parse_dates(frame, errors="coerce")
    assert out["date"].iloc[0] == pd.Timestamp("2023-03-14")
    assert pd.isna(out["date"].iloc[1])


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError):
        parse_dates(_dated("3/14/2023"), errors="ignore")
