from logics.correlation import build_matrix
from logics.errors import EmptyTableError
from logics.extraction import check_selection, extract_series


def run_analysis(rows, config, progress_callback=None):
    """
    Recompute the correlation matrix from scratch for one configuration.

    Args:
        rows: raw table (list of rows of cells); never modified.
        config: AnalysisConfig(has_header, orientation, selection).
        progress_callback: Optional callable(current, total, label) for build progress.

    Returns:
        CorrelationMatrix

    Raises:
        EmptyTableError: the table has no rows.
        InsufficientSelectionError: fewer than 2 items selected.
        InsufficientDataError: fewer than 2 selected items hold enough numbers.
    """
    if not rows:
        raise EmptyTableError("The table has no data.")

    check_selection(config.selection)
    series = extract_series(rows, config.has_header, config.orientation, config.selection)
    return build_matrix(series, progress_callback=progress_callback)
