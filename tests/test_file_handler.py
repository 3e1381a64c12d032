"""Tests for loading raw tables and exporting the matrix."""

import openpyxl
import pandas as pd
import pytest

from logics.cell import to_float
from logics.errors import EmptyTableError, UnsupportedFileError
from logics.file_handler import export_matrix, load_table
from logics.models import CorrelationMatrix, Orientation
from logics.structure import default_selection


@pytest.fixture
def matrix():
    return CorrelationMatrix(
        ["Sales", "Visitors", "Cost"],
        [[1.0, 0.9, -0.2], [0.9, 1.0, 0.0], [-0.2, 0.0, 1.0]],
    )


def test_load_csv_keeps_every_line_as_a_row(tmp_path):
    path = tmp_path / "report.csv"
    path.write_text("Month,Sales,Visitors\nJan,100,10\nFeb,200,20\n", encoding="utf-8")

    rows = load_table(str(path))

    assert rows[0] == ["Month", "Sales", "Visitors"]
    assert rows[1][0] == "Jan"
    assert [to_float(c) for c in rows[2][1:]] == [200.0, 20.0]
    assert len(rows) == 3


def test_load_csv_missing_cells_become_none_and_rows_keep_width(tmp_path):
    path = tmp_path / "gaps.csv"
    path.write_text("a,b,c\n1,,3\n4,5,\n,,\n", encoding="utf-8")

    rows = load_table(str(path))

    assert rows[1][1] is None
    assert len(rows[2]) == 3
    assert rows[2][2] is None
    assert len(rows) == 3


def test_load_csv_with_title_line_above_wider_table(tmp_path):
    path = tmp_path / "titled.csv"
    path.write_text(
        "Quarterly report\nMonth,Sales,Visitors\nJan,100,10\nFeb,200,20\n", encoding="utf-8",
    )

    rows = load_table(str(path))

    assert rows[0] == ["Quarterly report", None, None]
    assert rows[1] == ["Month", "Sales", "Visitors"]
    assert [to_float(c) for c in rows[3][1:]] == [200.0, 20.0]


def test_sparse_row_in_wide_sheet_is_not_preselected(tmp_path):
    path = tmp_path / "wide.xlsx"
    pd.DataFrame([
        ["Metric", "Q1", "Q2", "Q3", "Q4", "Q5", "Q6"],
        ["Sparse", 1, None, None, None, None, None],
        ["Full", 1, 2, 3, 4, 5, 6],
    ]).to_excel(path, header=False, index=False)

    rows = load_table(str(path))

    assert len(rows[1]) == 7
    assert default_selection(rows, True, Orientation.BY_ROW) == {1}


def test_load_csv_latin1(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes("Région,Ventes\nNord,1\nSud,2\n".encode("latin-1"))

    rows = load_table(str(path))

    assert rows[0] == ["Région", "Ventes"]


def test_load_excel_first_sheet(tmp_path):
    path = tmp_path / "report.xlsx"
    pd.DataFrame([["Month", "Sales"], ["Jan", 100], ["Feb", 200]]).to_excel(
        path, header=False, index=False,
    )

    rows = load_table(str(path))

    assert rows[0] == ["Month", "Sales"]
    assert to_float(rows[2][1]) == 200.0


def test_load_empty_csv(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(EmptyTableError):
        load_table(str(path))


def test_load_unsupported_extension(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(UnsupportedFileError):
        load_table(str(path))


def test_progress_callback(tmp_path):
    path = tmp_path / "report.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    calls = []
    load_table(str(path), progress_callback=lambda c, t, label: calls.append((c, t, label)))
    assert calls == [(1, 2, "report.csv"), (2, 2, "report.csv")]


def test_export_csv(tmp_path, matrix):
    path = tmp_path / "matrix.csv"
    export_matrix(matrix, str(path))

    df = pd.read_csv(path, index_col=0, encoding="utf-8-sig")
    assert list(df.columns) == ["Sales", "Visitors", "Cost"]
    assert list(df.index) == ["Sales", "Visitors", "Cost"]
    assert df.loc["Sales", "Cost"] == pytest.approx(-0.2)


def test_export_excel_heatmap(tmp_path, matrix):
    path = tmp_path / "matrix.xlsx"
    export_matrix(matrix, str(path))

    df = pd.read_excel(path, index_col=0)
    assert df.loc["Visitors", "Sales"] == pytest.approx(0.9)

    sheet = openpyxl.load_workbook(path)["Correlation Matrix"]
    white_cell = sheet.cell(row=3, column=4)  # Visitors x Cost, r = 0
    assert white_cell.number_format == "0.00"
    assert white_cell.fill.fgColor.rgb.upper().endswith("FFFFFF")
    diagonal = sheet.cell(row=2, column=2)
    assert diagonal.fill.fgColor.rgb.upper().endswith("F8FAFC")


def test_export_unsupported_extension(tmp_path, matrix):
    with pytest.raises(UnsupportedFileError):
        export_matrix(matrix, str(tmp_path / "matrix.pdf"))
