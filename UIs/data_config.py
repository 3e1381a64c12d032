import tkinter as tk
from tkinter import ttk, messagebox

from logics.models import Orientation
from logics.structure import column_letter, table_width


PREVIEW_ROWS = 8
PREVIEW_COLS = 12


class DataConfig:
    """Second screen – header row, data orientation and which columns/rows to analyse."""

    def __init__(self, root, model, *, on_analyze, on_reset):
        self.root = root
        self.model = model
        self.on_analyze = on_analyze
        self.on_reset = on_reset

        self._build_ui()
        self._refresh()

    # ── Main layout ──────────────────────────────────────────

    def _build_ui(self):
        top = ttk.Frame(self.root)
        top.pack(fill='x', padx=20, pady=(15, 5))
        tk.Label(top, text="Configure data structure", font=("Arial", 12, "bold")).pack(side='left')
        ttk.Button(top, text="Upload another file", command=self.on_reset).pack(side='right')

        # Settings row
        settings = ttk.Frame(self.root)
        settings.pack(fill='x', padx=20, pady=5)

        self._header_var = tk.BooleanVar(value=self.model.has_header)
        ttk.Checkbutton(
            settings,
            text="First row is a header",
            variable=self._header_var,
            command=self._on_header_changed,
        ).pack(side='left')

        tk.Label(settings, text="Data orientation:").pack(side='left', padx=(30, 5))
        self._orientation_var = tk.StringVar(value=self.model.orientation.value)
        ttk.Radiobutton(
            settings, text="One variable per column", value=Orientation.BY_COLUMN.value,
            variable=self._orientation_var, command=self._on_orientation_changed,
        ).pack(side='left')
        ttk.Radiobutton(
            settings, text="One variable per row", value=Orientation.BY_ROW.value,
            variable=self._orientation_var, command=self._on_orientation_changed,
        ).pack(side='left', padx=5)

        body = ttk.Frame(self.root)
        body.pack(fill='both', expand=True, padx=20, pady=5)

        # Item list (columns or rows)
        list_frame = ttk.LabelFrame(body, text="Variables", padding=5)
        list_frame.pack(side='left', fill='y')

        quick = ttk.Frame(list_frame)
        quick.pack(fill='x', pady=(0, 4))
        ttk.Button(quick, text="Select all", command=self._select_all).pack(side='left')
        ttk.Button(quick, text="Select none", command=self._select_none).pack(side='left', padx=4)

        lb_frame = ttk.Frame(list_frame)
        lb_frame.pack(fill='both', expand=True)
        self._listbox = tk.Listbox(lb_frame, selectmode='multiple', exportselection=False, width=32, height=20)
        scrollbar = ttk.Scrollbar(lb_frame, command=self._listbox.yview)
        self._listbox.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side='right', fill='y')
        self._listbox.pack(fill='both', expand=True)
        self._listbox.bind('<<ListboxSelect>>', self._on_list_select)

        # Preview table
        preview_frame = ttk.LabelFrame(body, text="Preview", padding=5)
        preview_frame.pack(side='left', fill='both', expand=True, padx=(10, 0))
        self._tree = ttk.Treeview(preview_frame, show="headings", height=PREVIEW_ROWS)
        xscroll = ttk.Scrollbar(preview_frame, orient='horizontal', command=self._tree.xview)
        self._tree.configure(xscrollcommand=xscroll.set)
        self._tree.pack(fill='both', expand=True)
        xscroll.pack(fill='x')
        self._preview_note = tk.Label(preview_frame, text="", fg="gray")
        self._preview_note.pack(anchor='w', pady=(4, 0))

        # Info & action
        bottom = ttk.Frame(self.root)
        bottom.pack(fill='x', padx=20, pady=15)
        self._info_label = tk.Label(bottom, text="", fg="#1d4ed8")
        self._info_label.pack(side='left')
        self._analyze_button = ttk.Button(bottom, text="Start analysis >>", command=self._analyze)
        self._analyze_button.pack(side='right')

    # ── Event handlers ───────────────────────────────────────

    def _on_header_changed(self):
        self.model.set_header(self._header_var.get())
        self._refresh()

    def _on_orientation_changed(self):
        self.model.set_orientation(self._orientation_var.get())
        self._refresh()

    def _on_list_select(self, _event=None):
        self.model.selected = set(self._listbox.curselection())
        self._refresh_info()

    def _select_all(self):
        self.model.select_all()
        self._refresh_list()
        self._refresh_info()

    def _select_none(self):
        self.model.select_none()
        self._refresh_list()
        self._refresh_info()

    def _analyze(self):
        if not self.model.can_analyze():
            messagebox.showwarning("Warning", "Please select at least 2 items to analyse.")
            return
        self.on_analyze(self.model.snapshot())

    # ── Rendering ────────────────────────────────────────────

    def _refresh(self):
        self._refresh_list()
        self._refresh_preview()
        self._refresh_info()

    def _refresh_list(self):
        by_column = self.model.orientation is Orientation.BY_COLUMN
        self._listbox.delete(0, tk.END)
        for idx, label in enumerate(self.model.item_labels()):
            prefix = column_letter(idx) if by_column else str(idx + 1)
            self._listbox.insert(tk.END, f"{prefix}  {label}")
        for idx in sorted(self.model.selected):
            self._listbox.selection_set(idx)

    def _refresh_preview(self):
        labels = self.model.item_labels() if self.model.orientation is Orientation.BY_COLUMN else None
        width = min(table_width(self.model.rows), PREVIEW_COLS)
        columns = ["#"] + [f"c{i}" for i in range(width)]

        self._tree.delete(*self._tree.get_children())
        self._tree.configure(columns=columns)
        self._tree.heading("#", text="#")
        self._tree.column("#", width=40, anchor='center', stretch=False)
        for i in range(width):
            title = column_letter(i)
            if labels is not None:
                title += f" · {labels[i]}"
            self._tree.heading(f"c{i}", text=title)
            self._tree.column(f"c{i}", width=100, stretch=False)

        data_rows = self.model.data_rows
        for row_idx, row in enumerate(data_rows[:PREVIEW_ROWS]):
            cells = [str(row[i]) if i < len(row) and row[i] is not None else "" for i in range(width)]
            self._tree.insert("", "end", values=[row_idx + 1] + cells)

        note = f"{len(data_rows)} data rows"
        if len(data_rows) > PREVIEW_ROWS:
            note += f", showing the first {PREVIEW_ROWS}"
        if table_width(self.model.rows) > PREVIEW_COLS:
            note += f"; {table_width(self.model.rows) - PREVIEW_COLS} more columns not shown"
        self._preview_note.config(text=note)

    def _refresh_info(self):
        kind = "columns" if self.model.orientation is Orientation.BY_COLUMN else "rows"
        count = len(self.model.selected)
        if self.model.can_analyze():
            self._info_label.config(text=f"{count} {kind} selected – correlation will be computed between them.")
            self._analyze_button.config(state='normal')
        else:
            self._info_label.config(text=f"{count} {kind} selected – select at least 2.")
            self._analyze_button.config(state='disabled')
