class EmptyTableError(ValueError):
    """Raised when the loaded table has no rows to analyse."""
    pass


class UnsupportedFileError(ValueError):
    """Raised for file extensions the loader/exporter does not handle."""
    pass


class InsufficientSelectionError(ValueError):
    """Raised when fewer than two columns/rows are selected for analysis."""

    def __init__(self, selected_count, required=2):
        self.selected_count = selected_count
        self.required = required
        super().__init__(
            f"Select at least {required} items to analyse (currently {selected_count})."
        )


class InsufficientDataError(ValueError):
    """
    Raised when fewer than two series keep enough numeric values after extraction.

    Attributes:
        dropped: names of the selected series that lacked usable numeric data.
        kept: names of the series that survived the filter.
    """

    def __init__(self, dropped, kept):
        self.dropped = list(dropped)
        self.kept = list(kept)
        msg = "Not enough numeric data in the selected items. At least 2 of them need 2 or more numbers."
        if self.dropped:
            msg += f"\nWithout usable numbers: {', '.join(self.dropped)}"
        super().__init__(msg)
