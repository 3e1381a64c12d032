import pytest


@pytest.fixture
def sales_table():
    """Month / Sales / Visitors report with a header row."""
    return [
        ["Month", "Sales", "Visitors"],
        ["Jan", 100, 10],
        ["Feb", 200, 20],
        ["Mar", 300, 40],
    ]


@pytest.fixture
def row_table():
    """Each row is a metric; the first cell names it."""
    return [
        ["Metric", "Q1", "Q2", "Q3", "Q4"],
        ["Revenue", 10, 20, 30, 40],
        ["Users", "1", "2", "3", "5"],
        ["Notes", "ok", "n/a", "late", None],
        ["Cost", 4, 3, 2, 1],
    ]
