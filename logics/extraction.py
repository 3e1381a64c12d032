import math

from logics.cell import to_float
from logics.errors import InsufficientDataError, InsufficientSelectionError
from logics.models import Orientation, Series
from logics.structure import column_labels, row_label, split_header, table_width


MIN_SELECTION = 2       # series the user must pick before analysis runs
MIN_VALID_VALUES = 2    # finite values a series needs to stay in the matrix


def check_selection(selection):
    """Raise InsufficientSelectionError when fewer than MIN_SELECTION items are selected."""
    if len(selection) < MIN_SELECTION:
        raise InsufficientSelectionError(len(selection), MIN_SELECTION)


def extract_series(rows, has_header, orientation, selection):
    """
    Build one Series per selected column (or row), in ascending index order.

    Every value keeps its position: blank or non-numeric cells become NaN
    instead of being dropped, so position i means the same source row (or
    column) in every returned Series.

    by-column: walks every data row, reading the cell at the column index.
    by-row: the row's first cell names the series; the remaining cells are
        padded with NaN up to the table width so all rows line up.

    Args:
        rows: raw table (list of rows of cells).
        has_header: whether row 0 holds labels.
        orientation: Orientation or its string value.
        selection: iterable of column indices or data-row indices.

    Returns:
        list of Series with at least MIN_VALID_VALUES finite values each.

    Raises:
        InsufficientDataError: fewer than 2 series survive the filter.
    """
    _, data_rows = split_header(rows, has_header)
    candidates = []

    if Orientation(orientation) is Orientation.BY_COLUMN:
        labels = column_labels(rows, has_header)
        for col_idx in sorted(selection):
            if not 0 <= col_idx < len(labels):
                print(f"[EXTRACT] Column index {col_idx} is outside the table, skipped.")
                continue
            values = [
                to_float(row[col_idx]) if col_idx < len(row) else math.nan
                for row in data_rows
            ]
            candidates.append(Series(labels[col_idx], values))
    else:
        value_count = max(table_width(rows) - 1, 0)
        for row_idx in sorted(selection):
            if not 0 <= row_idx < len(data_rows):
                print(f"[EXTRACT] Row index {row_idx} is outside the table, skipped.")
                continue
            row = data_rows[row_idx]
            values = [to_float(cell) for cell in row[1:]]
            values.extend([math.nan] * (value_count - len(values)))
            candidates.append(Series(row_label(row, row_idx), values))

    kept = [s for s in candidates if s.valid_count >= MIN_VALID_VALUES]
    dropped = [s.name for s in candidates if s.valid_count < MIN_VALID_VALUES]
    if dropped:
        print(f"[EXTRACT] Dropped (fewer than {MIN_VALID_VALUES} numbers): {dropped}")

    if len(kept) < 2:
        raise InsufficientDataError(dropped, [s.name for s in kept])

    print(f"[EXTRACT] {len(kept)} series of length {len(kept[0])}")
    return kept
