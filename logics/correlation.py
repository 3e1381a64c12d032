import math
import os
from functools import partial
from multiprocessing import Pool

import numpy as np

from logics.models import CorrelationMatrix


# Below this many pairs the matrix is built in-process.
PARALLEL_MIN_PAIRS = 20000


def pearson(a, b):
    """
    Pearson correlation between two position-aligned value sequences.

    Positions where either side is absent (the shorter sequence ran out) or not
    a finite number are skipped entirely.

    Returns:
        r in [-1, 1]; 0.0 when either side has no variance over the valid pairs;
        None when fewer than 2 valid pairs exist.
    """
    length = max(len(a), len(b))
    x = np.full(length, np.nan)
    y = np.full(length, np.nan)
    x[:len(a)] = np.asarray(a, dtype=float)
    y[:len(b)] = np.asarray(b, dtype=float)

    valid = np.isfinite(x) & np.isfinite(y)
    k = int(valid.sum())
    if k < 2:
        return None

    x = x[valid]
    y = y[valid]
    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float(np.dot(x, y))
    sum_x2 = float(np.dot(x, x))
    sum_y2 = float(np.dot(y, y))

    var_x = k * sum_x2 - sum_x * sum_x
    var_y = k * sum_y2 - sum_y * sum_y
    # Round-off can push a zero variance slightly negative.
    if var_x <= 0 or var_y <= 0:
        return 0.0

    denominator = math.sqrt(var_x * var_y)
    if denominator == 0 or not math.isfinite(denominator):
        return 0.0

    r = (k * sum_xy - sum_x * sum_y) / denominator
    # Round-off can also push |r| slightly past 1.
    return min(1.0, max(-1.0, r))


def _upper_row(i, values):
    """Coefficients grid[i][j] for j > i (undefined pairs as 0.0)."""
    row = []
    for j in range(i + 1, len(values)):
        r = pearson(values[i], values[j])
        row.append(0.0 if r is None else r)
    return row


def _compute_row_chunk(chunk_range, values):
    """Process a range of upper-triangle rows (for multiprocessing)."""
    start, end = chunk_range
    return [(i, _upper_row(i, values)) for i in range(start, end)]


def build_matrix(series, progress_callback=None, parallel=None):
    """
    Build the symmetric correlation matrix for a list of Series.

    Only the upper triangle is computed; each value is mirrored to the lower
    triangle. The diagonal is fixed at 1.0.

    Args:
        series: list of Series, in display order.
        progress_callback: Optional callable(done_rows, total_rows, series_name).
        parallel: True/False to force process-pool use; None decides by pair count.

    Returns:
        CorrelationMatrix
    """
    n = len(series)
    variables = [s.name for s in series]
    values = [s.values for s in series]
    grid = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]

    pair_count = n * (n - 1) // 2
    num_workers = os.cpu_count() or 1
    if parallel is None:
        parallel = pair_count >= PARALLEL_MIN_PAIRS and num_workers > 1

    upper_rows = {}
    if parallel and n > 1:
        chunk_size = max(1, n // num_workers)
        chunks = [(i, min(i + chunk_size, n)) for i in range(0, n, chunk_size)]
        print(f"[Parallel] Computing {pair_count} pairs in {len(chunks)} chunks across {num_workers} workers...")

        worker_func = partial(_compute_row_chunk, values=values)
        with Pool(processes=num_workers) as pool:
            for chunk_rows in pool.imap(worker_func, chunks):
                for i, row in chunk_rows:
                    upper_rows[i] = row
                if progress_callback:
                    progress_callback(len(upper_rows), n, variables[chunk_rows[-1][0]])
    else:
        for i in range(n):
            upper_rows[i] = _upper_row(i, values)
            if progress_callback:
                progress_callback(i + 1, n, variables[i])

    for i, row in upper_rows.items():
        for offset, r in enumerate(row):
            j = i + 1 + offset
            grid[i][j] = r
            grid[j][i] = r

    print(f"[MATRIX] {n}x{n} matrix built ({pair_count} pairs).")
    return CorrelationMatrix(variables, grid)
