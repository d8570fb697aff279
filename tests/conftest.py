from typing import List, Sequence

import pandas as pd
import pytest

from src.data.ingestion import SOURCE_COLUMNS


def make_frame(rows: Sequence[Sequence[object]]) -> pd.DataFrame:
    frame = pd.DataFrame([list(row) for row in rows], columns=SOURCE_COLUMNS, dtype=object)
    for column in ("total_laid_off", "funds_raised_millions"):
        frame[column] = frame[column].astype("Int64")
    return frame


@pytest.fixture
def raw_rows() -> List[tuple]:
    return [
        ("A", "X", "Crypto Inc", 10, "0.1", "1/2/2023", "Seed", "United States.", 5),
        ("A", "X", "Crypto Inc", 10, "0.1", "1/2/2023", "Seed", "United States.", 5),
        (" Airbnb", "SF Bay Area", None, 1900, "0.25", "5/5/2020", "Private Equity", "United States", 5400),
        ("Airbnb", "SF Bay Area", "", 30, None, "3/3/2023", "Post-IPO", "United States", 6400),
        ("Juul", "SF Bay Area", "", 400, "0.3", "11/10/2022", "Unknown", "United States", 1500),
        ("Juul", "SF Bay Area", "Consumer", 900, "0.3", "5/1/2020", "Unknown", "United States", 1500),
        ("Bally's Interactive", "Providence", None, None, "0.15", "1/18/2023", "Post-IPO", "United States", 946),
        ("Tesla", "Austin", "Transportation", None, None, None, "Post-IPO", "United States.", None),
    ]


@pytest.fixture
def raw_frame(raw_rows) -> pd.DataFrame:
    return make_frame(raw_rows)
