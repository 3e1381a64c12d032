"""Tests for header detection, labels and default selection."""

import pytest

from logics.models import Orientation
from logics.structure import (
    all_indices,
    column_labels,
    column_letter,
    default_selection,
    detect_header_row,
    row_labels,
    split_header,
    table_width,
)


@pytest.mark.parametrize("first_row,expected", [
    (["Revenue", "Users", "Region"], True),
    ([10, 20, 30], False),
    (["A", 5, 10], False),
    (["Revenue", 2020], True),
    (["1", "2", "x"], False),
    ([None, "Name", None], True),
    ([None, None], False),
])
def test_detect_header_row(first_row, expected):
    assert detect_header_row([first_row, [1, 2, 3]]) is expected


def test_detect_header_row_empty_table():
    assert detect_header_row([]) is False


def test_split_header_and_width():
    rows = [["a", "b"], [1, 2, 3], [4]]
    assert split_header(rows, True) == (["a", "b"], [[1, 2, 3], [4]])
    assert split_header(rows, False) == (None, rows)
    assert table_width(rows) == 3
    assert table_width([]) == 0


def test_column_letter():
    assert column_letter(0) == "A"
    assert column_letter(25) == "Z"
    assert column_letter(26) == "27"


def test_column_labels_fall_back_for_missing_header_cells():
    rows = [["Alpha", None, " Gamma "], [1, 2, 3, 4]]
    assert column_labels(rows, True) == ["Alpha", "Column B", "Gamma", "Column D"]
    assert column_labels(rows, False) == ["Column A", "Column B", "Column C", "Column D"]


def test_row_labels(row_table):
    assert row_labels(row_table, True) == ["Revenue", "Users", "Notes", "Cost"]
    rows = [["x", 1, 2], [None, 3, 4]]
    assert row_labels(rows, False) == ["x", "Row 2"]


def test_default_selection_by_column(sales_table):
    assert default_selection(sales_table, True, Orientation.BY_COLUMN) == {1, 2}


def test_default_selection_accepts_string_orientation(sales_table):
    assert default_selection(sales_table, True, "columns") == {1, 2}


def test_default_selection_threshold_is_strictly_above_30_percent():
    three_of_ten = [["n"]] + [[1]] * 3 + [["x"]] * 7
    four_of_ten = [["n"]] + [[1]] * 4 + [["x"]] * 6
    assert default_selection(three_of_ten, True, Orientation.BY_COLUMN) == set()
    assert default_selection(four_of_ten, True, Orientation.BY_COLUMN) == {0}


def test_default_selection_samples_only_first_20_rows():
    rows = [["label"]] + [["text"]] * 20 + [[5]] * 30
    assert default_selection(rows, True, Orientation.BY_COLUMN) == set()


def test_default_selection_without_data_rows():
    assert default_selection([["a", "b"]], True, Orientation.BY_COLUMN) == set()


def test_default_selection_by_row(row_table):
    assert default_selection(row_table, True, Orientation.BY_ROW) == {0, 1, 3}


def test_default_selection_by_row_skips_label_only_rows():
    rows = [["only label"], ["r", 1, 2]]
    assert default_selection(rows, False, Orientation.BY_ROW) == {1}


def test_all_indices(row_table):
    assert all_indices(row_table, True, Orientation.BY_COLUMN) == {0, 1, 2, 3, 4}
    assert all_indices(row_table, True, Orientation.BY_ROW) == {0, 1, 2, 3}


def test_default_selection_by_row_counts_blank_cells_in_the_denominator():
    rows = [
        ["Metric", "Q1", "Q2", "Q3", "Q4", "Q5", "Q6"],
        ["Sparse", 1, None, None, None, None, None],
        ["Full", 1, 2, 3, 4, 5, 6],
    ]
    assert default_selection(rows, True, Orientation.BY_ROW) == {1}
