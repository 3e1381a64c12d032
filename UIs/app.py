import tkinter as tk
from tkinter import messagebox, filedialog
from datetime import date

from logics.analysis import run_analysis
from logics.data_model import DataModel
from logics.errors import InsufficientDataError, InsufficientSelectionError
from logics.file_handler import export_matrix, load_table

from UIs.data_config import DataConfig
from UIs.data_input_wizard import DataInputWizard
from UIs.matrix_view import MatrixView
from UIs.progress_dialog import ProgressDialog


class CorrelationAnalyzerApp:
    """Main application controller that manages navigation between views."""

    def __init__(self, root):
        self.root = root
        self.root.title("Correlation Matrix Analyzer")
        self.root.geometry("1050x950")

        self.model = DataModel()

        self.show_data_input_wizard()

    # ── Navigation ──────────────────────────────────────────

    def show_data_input_wizard(self):
        self._clear_window()
        DataInputWizard(self.root, self.model, on_next=self._on_file_selected)

    def show_data_config(self):
        self._clear_window()
        DataConfig(self.root, self.model, on_analyze=self._on_analyze, on_reset=self._on_reset)

    def show_matrix_view(self):
        self._clear_window()
        MatrixView(self.root, self.model, on_export=self._on_export, on_back=self.show_data_config)

    # ── Logic callbacks ─────────────────────────────────────

    def _on_file_selected(self, path):
        """Load the chosen file in a background thread with a progress dialog."""
        def on_success(rows):
            self.model.set_table(rows, file_path=path)
            self.show_data_config()

        def on_error(error):
            messagebox.showerror("File read error", f"Could not read the file (Excel .xlsx/.xls or CSV).\n\n{error}")

        ProgressDialog(self.root, "Loading file...", "Reading file...", "File", indeterminate=True).run(
            lambda progress_cb: load_table(path, progress_callback=progress_cb),
            on_success=on_success,
            on_error=on_error,
        )

    def _on_analyze(self, config):
        rows = self.model.rows

        def on_success(matrix):
            self.model.matrix = matrix
            self.show_matrix_view()

        def on_error(error):
            if isinstance(error, InsufficientSelectionError):
                messagebox.showwarning("Not enough items", str(error))
            elif isinstance(error, InsufficientDataError):
                messagebox.showwarning("Not enough numeric data", str(error))
            else:
                messagebox.showerror("Analysis error", str(error))

        ProgressDialog(self.root, "Analysing...", "Computing correlation matrix...", "Variable").run(
            lambda progress_cb: run_analysis(rows, config, progress_callback=progress_cb),
            on_success=on_success,
            on_error=on_error,
        )

    def _on_export(self, extension):
        if self.model.matrix is None:
            messagebox.showerror("Error", "Nothing to export yet. Run the analysis first.")
            return

        filetypes = [("Excel", "*.xlsx")] if extension == '.xlsx' else [("CSV", "*.csv")]
        path = filedialog.asksaveasfilename(
            defaultextension=extension,
            filetypes=filetypes,
            initialfile=f"correlation_matrix_{date.today().isoformat()}{extension}",
        )
        if path:
            try:
                export_matrix(self.model.matrix, path)
                messagebox.showinfo("Success", f"Exported: {path}")
            except Exception as e:
                messagebox.showerror("Export error", str(e))

    def _on_reset(self):
        self.model.reset()
        self.show_data_input_wizard()

    # ── Helpers ──────────────────────────────────────────────

    def _clear_window(self):
        for widget in self.root.winfo_children():
            widget.destroy()
