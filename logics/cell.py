import math
import re

import numpy as np


# Leading numeric prefix: sign, digits with at most one decimal point, optional exponent.
_NUMERIC_PREFIX = re.compile(r'^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))')


def coerce_cell(cell):
    """
    Convert one raw table cell into a float-like number or NaN.

    Never raises. Numbers come back unchanged (NaN/inf included, callers check
    finiteness), strings are parsed on their leading numeric prefix
    ("12.5kg" -> 12.5, "abc" -> NaN), everything else is NaN.
    """
    if cell is None or isinstance(cell, bool):
        return math.nan
    if isinstance(cell, (int, float, np.integer, np.floating)):
        return cell
    if isinstance(cell, str):
        m = _NUMERIC_PREFIX.match(cell)
        if not m:
            return math.nan
        return float(m.group(1).replace('Infinity', 'inf'))
    return math.nan


def to_float(cell):
    """coerce_cell() narrowed to a plain float; ints too large for a float become NaN."""
    try:
        return float(coerce_cell(cell))
    except OverflowError:
        return math.nan


def is_finite_number(cell):
    """True when the cell coerces to a real, non-infinite number."""
    return math.isfinite(to_float(cell))


def is_missing(cell):
    """Blank cell: None, a NaN float left over from pandas, or whitespace-only text."""
    if cell is None:
        return True
    if isinstance(cell, (float, np.floating)):
        return math.isnan(cell)
    if isinstance(cell, str):
        return not cell.strip()
    return False
