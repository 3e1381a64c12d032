from logics.extraction import MIN_SELECTION
from logics.models import AnalysisConfig, Orientation
from logics.structure import (
    all_indices,
    column_labels,
    default_selection,
    detect_header_row,
    row_labels,
    split_header,
)


class DataModel:
    """Shared state container for the application."""

    def __init__(self):
        self.rows = []                              # Raw table (list of rows of cells), read-only once loaded
        self.file_path = None                       # Source file of the table
        self.has_header = False                     # Row 0 holds labels (inferred, user-overridable)
        self.orientation = Orientation.BY_COLUMN    # Series read down columns or across rows
        self.selected = set()                       # Column indices or data-row indices to analyse
        self.matrix = None                          # Last CorrelationMatrix, replaced on every run

    # ── Table ───────────────────────────────────────────────

    def set_table(self, rows, file_path=None):
        """Adopt a freshly loaded table and re-derive header and default selection."""
        self.rows = rows
        self.file_path = file_path
        self.matrix = None
        self.orientation = Orientation.BY_COLUMN
        self.has_header = detect_header_row(rows)
        self._reset_selection()

    def reset(self):
        self.__init__()

    @property
    def data_rows(self):
        return split_header(self.rows, self.has_header)[1]

    # ── Configuration ───────────────────────────────────────

    def set_header(self, has_header):
        self.has_header = bool(has_header)
        self._reset_selection()

    def set_orientation(self, orientation):
        self.orientation = Orientation(orientation)
        self._reset_selection()

    def item_labels(self):
        """Labels of the selectable items for the current orientation, by index."""
        if self.orientation is Orientation.BY_COLUMN:
            return column_labels(self.rows, self.has_header)
        return row_labels(self.rows, self.has_header)

    def toggle(self, idx):
        if idx in self.selected:
            self.selected.discard(idx)
        else:
            self.selected.add(idx)

    def select_all(self):
        self.selected = all_indices(self.rows, self.has_header, self.orientation)

    def select_none(self):
        self.selected = set()

    def can_analyze(self):
        return len(self.selected) >= MIN_SELECTION

    def snapshot(self):
        """Immutable copy of the current choices for logics.analysis.run_analysis."""
        return AnalysisConfig(self.has_header, self.orientation, frozenset(self.selected))

    # ── Helpers ──────────────────────────────────────────────

    def _reset_selection(self):
        # Header/orientation changes discard the previous selection.
        self.selected = default_selection(self.rows, self.has_header, self.orientation)
        self.matrix = None
