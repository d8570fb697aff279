from src.data.cleaning import stage_dataset
from src.data.deduplication import (
    KEY_COLUMNS,
    ROW_NUMBER_COL,
    assign_row_numbers,
    find_duplicates,
    remove_duplicates,
)
from tests.conftest import make_frame


def test_exact_duplicates_collapse_to_one_row():
    row = ("A", "X", "Crypto Inc", 10, "0.1", "1/2/2023", "Seed", "USA.", 5)
    out = remove_duplicates(stage_dataset(make_frame([row, row, row])))
    assert len(out) == 1
    assert out.index.tolist() == [0]
    assert out[ROW_NUMBER_COL].tolist() == [1]


def test_row_numbers_follow_ingest_order():
    rows = [
        ("A", "X", "Retail", 1, None, "1/1/2023", "Seed", "USA", 1),
        ("B", "Y", "Retail", 2, None, "1/1/2023", "Seed", "USA", 2),
        ("A", "X", "Retail", 1, None, "1/1/2023", "Seed", "USA", 1),
    ]
    numbered = assign_row_numbers(stage_dataset(make_frame(rows)))
    assert numbered[ROW_NUMBER_COL].tolist() == [1, 1, 2]
    assert find_duplicates(numbered).index.tolist() == [2]


def test_missing_values_compare_equal():
    rows = [
        ("A", "X", None, None, None, None, "Seed", "USA", None),
        ("A", "X", None, None, None, None, "Seed", "USA", None),
    ]
    out = remove_duplicates(stage_dataset(make_frame(rows)))
    assert len(out) == 1


def test_blank_and_missing_are_different_keys():
    rows = [
        ("A", "X", None, 1, None, "1/1/2023", "Seed", "USA", 1),
        ("A", "X", "", 1, None, "1/1/2023", "Seed", "USA", 1),
    ]
    out = remove_duplicates(stage_dataset(make_frame(rows)))
    assert len(out) == 2


def test_dedup_is_idempotent(raw_frame):
    once = remove_duplicates(stage_dataset(raw_frame))
    twice = remove_duplicates(once)
    assert once.equals(twice)
    assert not once.duplicated(subset=KEY_COLUMNS).any()


def test_dedup_does_not_touch_kept_rows(raw_frame):
    staged = stage_dataset(raw_frame)
    out = remove_duplicates(staged)
    assert out.drop(columns=[ROW_NUMBER_COL]).equals(staged.drop(index=[1]))
