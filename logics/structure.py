import math

from logics.cell import is_finite_number, is_missing, to_float
from logics.models import Orientation


SAMPLE_ROWS = 20        # data rows sampled per column when guessing numeric columns
NUMERIC_RATIO = 0.3     # share of finite numbers a column/row needs to be pre-selected


def detect_header_row(rows):
    """
    Guess whether row 0 holds labels rather than data.

    Only the first row is inspected. Blank cells are ignored; text that does not
    parse as a number counts as a label, numbers and numeric text count as data.
    The row is a header when it has at least one label and labels are not
    outnumbered by numbers.

    Examples:
        ["Revenue", "Users", "Region"] -> True
        [10, 20, 30]                   -> False
        ["A", 5, 10]                   -> False
    """
    if not rows:
        return False

    string_count = 0
    number_count = 0
    for cell in rows[0]:
        if is_missing(cell):
            continue
        if isinstance(cell, str):
            if math.isnan(to_float(cell)):
                string_count += 1
            else:
                number_count += 1
        elif not math.isnan(to_float(cell)):
            number_count += 1

    has_header = string_count > 0 and string_count >= number_count
    print(f"[HEADER] labels={string_count}, numbers={number_count} -> header={has_header}")
    return has_header


def table_width(rows):
    """Length of the longest row."""
    return max((len(row) for row in rows), default=0)


def split_header(rows, has_header):
    """Return (header_row, data_rows); header_row is None when there is no header."""
    if has_header and rows:
        return rows[0], rows[1:]
    return None, rows


def column_letter(idx):
    """
    Spreadsheet-style letter for a 0-based column index.

    Only A..Z are produced; columns past Z fall back to their 1-based number.
    """
    if 0 <= idx < 26:
        return chr(ord('A') + idx)
    return str(idx + 1)


def column_labels(rows, has_header):
    """Display label for every column index of the table."""
    header, _ = split_header(rows, has_header)
    labels = []
    for idx in range(table_width(rows)):
        cell = header[idx] if header is not None and idx < len(header) else None
        if is_missing(cell):
            labels.append(f"Column {column_letter(idx)}")
        else:
            labels.append(str(cell).strip())
    return labels


def row_label(row, row_idx):
    """A data row's first cell as text, or "Row <n>" (1-based) when it is blank."""
    cell = row[0] if row else None
    if is_missing(cell):
        return f"Row {row_idx + 1}"
    return str(cell).strip()


def row_labels(rows, has_header):
    """Display label for every data row."""
    _, data_rows = split_header(rows, has_header)
    return [row_label(row, idx) for idx, row in enumerate(data_rows)]


def all_indices(rows, has_header, orientation):
    """Every selectable index for the orientation ("select all")."""
    if Orientation(orientation) is Orientation.BY_COLUMN:
        return set(range(table_width(rows)))
    _, data_rows = split_header(rows, has_header)
    return set(range(len(data_rows)))


def default_selection(rows, has_header, orientation):
    """
    Pre-select the columns (or rows) that look numeric.

    by-column: the first SAMPLE_ROWS data rows are sampled; a column is picked
        when more than NUMERIC_RATIO of the sampled cells are finite numbers.
    by-row: the first cell of each data row is its label; the row is picked when
        more than NUMERIC_RATIO of the remaining cells are finite numbers.

    Returns:
        set of column indices (by-column) or data-row indices (by-row).
    """
    _, data_rows = split_header(rows, has_header)
    selected = set()

    if Orientation(orientation) is Orientation.BY_COLUMN:
        sample = data_rows[:SAMPLE_ROWS]
        for col_idx in range(table_width(rows)):
            numeric_count = sum(
                1 for row in sample
                if col_idx < len(row) and is_finite_number(row[col_idx])
            )
            if sample and numeric_count > len(sample) * NUMERIC_RATIO:
                selected.add(col_idx)
    else:
        for row_idx, row in enumerate(data_rows):
            numeric_count = sum(1 for cell in row[1:] if is_finite_number(cell))
            if len(row) > 1 and numeric_count > (len(row) - 1) * NUMERIC_RATIO:
                selected.add(row_idx)

    print(f"[SELECT] Default {Orientation(orientation).value} selection: {sorted(selected)}")
    return selected
