import csv
import os

import pandas as pd

from logics.color_scale import DIAGONAL_COLOR, correlation_color, text_color
from logics.errors import EmptyTableError, UnsupportedFileError


CSV_ENCODINGS = ['utf-8', 'utf-8-sig', 'latin-1', 'cp1252', 'iso-8859-1']
EXCEL_EXTENSIONS = ('.xlsx', '.xls')
TEXT_SEPARATORS = {'.csv': ',', '.tsv': '\t', '.txt': '\t'}
MATRIX_SHEET = 'Correlation Matrix'


def load_table(path, progress_callback=None):
    """
    Read the first sheet of an Excel workbook (or a delimited text file) as a raw table.

    No header handling happens here: every line of the file becomes a row, and
    deciding whether row 0 holds labels is left to logics.structure.

    Args:
        path: .xlsx / .xls / .csv / .tsv / .txt file path.
        progress_callback: Optional callable(current, total, label) for progress updates.

    Returns:
        list of rows; each row is a list of cells (None, str or number) padded
        with None to the sheet width. Blank lines at the end are dropped.

    Raises:
        UnsupportedFileError: unknown file extension.
        EmptyTableError: the file holds no rows.
        ValueError: the file could not be decoded.
    """
    filename = os.path.basename(path)
    ext = os.path.splitext(path)[1].lower()

    if progress_callback:
        progress_callback(1, 2, filename)

    if ext in EXCEL_EXTENSIONS:
        df = pd.read_excel(path, header=None, sheet_name=0)
    elif ext in TEXT_SEPARATORS:
        df = _read_text_table(path, TEXT_SEPARATORS[ext], filename)
    else:
        raise UnsupportedFileError(f"Unsupported file type: {filename} (use .xlsx, .xls or .csv)")

    if progress_callback:
        progress_callback(2, 2, filename)

    rows = _frame_to_rows(df)
    if not rows:
        raise EmptyTableError(f"{filename} is empty.")

    print(f"[LOAD] {filename}: {len(rows)} rows, up to {max(len(r) for r in rows)} columns")
    return rows


def _read_text_table(path, sep, filename):
    # Try multiple encodings to handle international characters
    for enc in CSV_ENCODINGS:
        try:
            width = _widest_line(path, sep, enc)
            if width == 0:
                raise EmptyTableError(f"{filename} is empty.")
            # Explicit names keep lines longer than the first one (title lines above a table).
            df = pd.read_csv(path, header=None, names=range(width), sep=sep, encoding=enc)
            print(f"[DEBUG] {filename} loaded with encoding: {enc} ({width} columns)")
            return df
        except (UnicodeDecodeError, LookupError):
            continue
        except pd.errors.EmptyDataError:
            raise EmptyTableError(f"{filename} is empty.")
    raise ValueError(f"Could not load {filename} with any supported encoding")


def _widest_line(path, sep, encoding):
    """Field count of the longest line in a delimited text file."""
    with open(path, newline='', encoding=encoding) as f:
        return max((len(fields) for fields in csv.reader(f, delimiter=sep)), default=0)


def _frame_to_rows(df):
    """DataFrame -> list of lists with NaN as None; every row keeps the sheet width."""
    cleaned = df.astype(object).where(pd.notna(df), None)
    rows = cleaned.values.tolist()
    # Blank lines at the end of a sheet are not data.
    while rows and all(cell is None for cell in rows[-1]):
        rows.pop()
    return rows


def export_matrix(matrix, path):
    """
    Export a correlation matrix to Excel or CSV.

    Excel output is a heatmap: each coefficient cell is filled by
    logics.color_scale, printed with two decimals, and the diagonal is muted.
    CSV output holds the plain values.

    Args:
        matrix: CorrelationMatrix to write.
        path: Output .xlsx or .csv file path.
    """
    df = matrix.to_dataframe()
    ext = os.path.splitext(path)[1].lower()

    if ext == '.csv':
        df.to_csv(path, index_label='Variable', encoding='utf-8-sig')
        print(f"[EXPORT] CSV written: {path}")
        return
    if ext != '.xlsx':
        raise UnsupportedFileError(f"Unsupported export type: {ext or path} (use .xlsx or .csv)")

    with pd.ExcelWriter(path, engine='xlsxwriter') as writer:
        df.to_excel(writer, sheet_name=MATRIX_SHEET)
        workbook = writer.book
        worksheet = writer.sheets[MATRIX_SHEET]

        formats = {}

        def cell_format(bg, fg):
            key = (bg, fg)
            if key not in formats:
                formats[key] = workbook.add_format({
                    'num_format': '0.00',
                    'bg_color': bg,
                    'font_color': fg,
                    'align': 'center',
                })
            return formats[key]

        for i, row in enumerate(matrix.grid):
            for j, value in enumerate(row):
                if i == j:
                    fmt = cell_format(DIAGONAL_COLOR, '#000000')
                else:
                    fmt = cell_format(correlation_color(value), text_color(value))
                worksheet.write_number(i + 1, j + 1, value, fmt)

        label_width = max([len(str(v)) for v in matrix.variables] + [8])
        worksheet.set_column(0, 0, min(label_width + 2, 50))
        worksheet.set_column(1, matrix.size, 12)
        worksheet.freeze_panes(1, 1)

    print(f"[EXPORT] Heatmap sheet '{MATRIX_SHEET}' written ({matrix.size}x{matrix.size}): {path}")
