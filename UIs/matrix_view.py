import tkinter as tk
from tkinter import ttk

from logics.color_scale import DIAGONAL_COLOR, correlation_color, text_color


LABEL_MARGIN = 140
MIN_CELL, MAX_CELL, DEFAULT_CELL = 40, 150, 80


class MatrixView:
    """Third screen – correlation heatmap with zoom, hover details and export."""

    def __init__(self, root, model, *, on_export, on_back):
        self.root = root
        self.model = model
        self.on_export = on_export
        self.on_back = on_back

        self._build_ui()
        self._draw()

    # ── Main layout ──────────────────────────────────────────

    def _build_ui(self):
        top = ttk.Frame(self.root)
        top.pack(fill='x', padx=20, pady=(15, 5))
        name = self.model.file_path.replace('\\', '/').split('/')[-1] if self.model.file_path else ""
        tk.Label(top, text=f"Analysis report: {name}", font=("Arial", 12, "bold")).pack(side='left')

        ttk.Button(top, text="Export Excel", command=lambda: self.on_export('.xlsx')).pack(side='right')
        ttk.Button(top, text="Export CSV", command=lambda: self.on_export('.csv')).pack(side='right', padx=5)
        ttk.Button(top, text="<< Back to selection", command=self.on_back).pack(side='right', padx=5)

        controls = ttk.Frame(self.root)
        controls.pack(fill='x', padx=20)
        tk.Label(controls, text="Zoom:").pack(side='left')
        self._cell_size = tk.IntVar(value=DEFAULT_CELL)
        ttk.Scale(
            controls, from_=MIN_CELL, to=MAX_CELL, variable=self._cell_size,
            command=lambda _v: self._draw(), length=200,
        ).pack(side='left', padx=5)
        self._hover_label = tk.Label(controls, text="Hover a cell for details", fg="gray")
        self._hover_label.pack(side='left', padx=20)

        frame = ttk.Frame(self.root)
        frame.pack(fill='both', expand=True, padx=20, pady=10)
        self._canvas = tk.Canvas(frame, bg="white", highlightthickness=0)
        xscroll = ttk.Scrollbar(frame, orient='horizontal', command=self._canvas.xview)
        yscroll = ttk.Scrollbar(frame, orient='vertical', command=self._canvas.yview)
        self._canvas.configure(xscrollcommand=xscroll.set, yscrollcommand=yscroll.set)
        yscroll.pack(side='right', fill='y')
        xscroll.pack(side='bottom', fill='x')
        self._canvas.pack(fill='both', expand=True)
        self._canvas.bind('<Motion>', self._on_motion)

        guide = tk.Label(
            self.root,
            justify='left',
            fg="#1e40af",
            text=(
                "How to read: close to +1.0 = strong positive correlation (both grow together); "
                "close to -1.0 = strong negative correlation (one grows, the other falls); "
                "close to 0 = no clear linear relationship."
            ),
            wraplength=900,
        )
        guide.pack(fill='x', padx=20, pady=(0, 15))

    # ── Drawing ──────────────────────────────────────────────

    def _draw(self):
        matrix = self.model.matrix
        size = int(self._cell_size.get())
        canvas = self._canvas
        canvas.delete('all')

        for idx, name in enumerate(matrix.variables):
            y = LABEL_MARGIN + idx * size + size / 2
            x = LABEL_MARGIN + idx * size + size / 2
            canvas.create_text(LABEL_MARGIN - 6, y, text=_shorten(name), anchor='e', font=("Arial", 9))
            canvas.create_text(x, LABEL_MARGIN - 6, text=_shorten(name), anchor='w', angle=90, font=("Arial", 9))

        for i, row in enumerate(matrix.grid):
            for j, value in enumerate(row):
                x0 = LABEL_MARGIN + j * size
                y0 = LABEL_MARGIN + i * size
                fill = DIAGONAL_COLOR if i == j else correlation_color(value)
                canvas.create_rectangle(x0, y0, x0 + size, y0 + size, fill=fill, outline="#e2e8f0")
                if size > 35:
                    color = "#94a3b8" if i == j else text_color(value)
                    canvas.create_text(
                        x0 + size / 2, y0 + size / 2, text=f"{value:.2f}", fill=color, font=("Arial", 9),
                    )

        total = LABEL_MARGIN + matrix.size * size
        canvas.configure(scrollregion=(0, 0, total + 10, total + 10))

    def _on_motion(self, event):
        matrix = self.model.matrix
        size = int(self._cell_size.get())
        x = self._canvas.canvasx(event.x) - LABEL_MARGIN
        y = self._canvas.canvasy(event.y) - LABEL_MARGIN
        if x < 0 or y < 0:
            self._hover_label.config(text="Hover a cell for details")
            return
        i, j = int(y // size), int(x // size)
        if i >= matrix.size or j >= matrix.size:
            return
        self._hover_label.config(
            text=f"{matrix.variables[i]} ↔ {matrix.variables[j]}   r = {matrix.grid[i][j]:.4f}",
            fg="black",
        )


def _shorten(name, limit=20):
    return name if len(name) <= limit else name[:limit - 1] + "…"
