import tkinter as tk
from tkinter import ttk, filedialog


class DataInputWizard:
    """First screen – pick the spreadsheet or CSV file to analyse."""

    def __init__(self, root, model, on_next):
        self.root = root
        self.model = model
        self.on_next = on_next
        self._path = None

        self._build_ui()

    def _build_ui(self):
        frame = ttk.Frame(self.root)
        frame.pack(pady=20, padx=20, fill='both', expand=True)

        tk.Label(
            frame,
            text="Explore how your metrics move together",
            font=("Arial", 14, "bold"),
        ).pack(pady=(10, 4))
        tk.Label(
            frame,
            text="Choose an Excel or CSV report; the correlation matrix is computed between its numeric columns or rows.",
            fg="gray",
            wraplength=600,
        ).pack(pady=(0, 20))

        ttk.Button(frame, text="Browse file...", command=self._browse).pack(pady=5)
        self._label = tk.Label(frame, text="No file selected", fg="gray")
        self._label.pack(pady=5)

        self._next_button = ttk.Button(
            frame, text="Continue (Next >>)", command=self._next, state='disabled',
        )
        self._next_button.pack(pady=30)

        tk.Label(frame, text="Supported: .xlsx, .xls, .csv", fg="gray").pack()

    def _browse(self):
        path = filedialog.askopenfilename(
            filetypes=[("Excel/CSV files", "*.xlsx *.xls *.csv"), ("All files", "*.*")],
        )
        if path:
            self._path = path
            self._label.config(text=path, fg="green")
            self._next_button.config(state='normal')

    def _next(self):
        if self._path:
            self.on_next(self._path)
