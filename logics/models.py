from collections import namedtuple
from enum import Enum
import math

import pandas as pd


class Orientation(Enum):
    """Whether a series is read down a column or across a row."""
    BY_COLUMN = 'columns'
    BY_ROW = 'rows'


# Immutable snapshot of the user's choices, passed to logics.analysis.run_analysis.
AnalysisConfig = namedtuple('AnalysisConfig', ['has_header', 'orientation', 'selection'])


class Series:
    """One named, position-aligned sequence of numbers (NaN = not a number)."""

    def __init__(self, name, values):
        self.name = name
        self.values = list(values)

    @property
    def valid_count(self):
        return sum(1 for v in self.values if math.isfinite(v))

    def __len__(self):
        return len(self.values)

    def __repr__(self):
        return f"Series({self.name!r}, {self.values!r})"


class CorrelationMatrix:
    """
    Symmetric pairwise Pearson matrix.

    variables: ordered series names (axis labels for both rows and columns).
    grid: n x n list of coefficients, grid[i][j] == grid[j][i], diagonal 1.0.
    """

    def __init__(self, variables, grid):
        self.variables = list(variables)
        self.grid = [list(row) for row in grid]

    @property
    def size(self):
        return len(self.variables)

    def coefficient(self, name_a, name_b):
        """Look up r by series name (first match when names repeat)."""
        i = self.variables.index(name_a)
        j = self.variables.index(name_b)
        return self.grid[i][j]

    def to_dataframe(self):
        """Square DataFrame with the variable names on both axes."""
        return pd.DataFrame(self.grid, index=self.variables, columns=self.variables)

    def __repr__(self):
        return f"CorrelationMatrix(variables={self.variables!r})"
