import tkinter as tk
from tkinter import ttk
import threading
import time
import traceback


class ProgressDialog:
    """
    Modal dialog that runs a task in a background thread.

    Two modes:
        determinate: the bar follows progress_cb(current, total, label), used
            while the matrix is built row by row.
        indeterminate: the bar just animates and only the label changes, used
            while a workbook is decoded (pandas gives no progress for that).

    An elapsed-time line is refreshed every half second until the task ends.

    Usage:
        ProgressDialog(root, "Loading...", "Reading file...", "File", indeterminate=True).run(
            lambda progress_cb: load_table(path, progress_callback=progress_cb),
            on_success=..., on_error=...,
        )
    """

    def __init__(self, root, title, body_label, status_prefix="", indeterminate=False):
        self._root = root
        self._status_prefix = status_prefix
        self._indeterminate = indeterminate
        self._started = time.monotonic()

        self._dialog = tk.Toplevel(root)
        self._dialog.title(title)
        self._dialog.geometry("420x170")
        self._dialog.resizable(False, False)
        self._dialog.transient(root)
        self._dialog.grab_set()
        # Not closable while the task runs.
        self._dialog.protocol("WM_DELETE_WINDOW", lambda: None)

        tk.Label(self._dialog, text=body_label, font=("Arial", 12, "bold")).pack(pady=10)

        self._status_label = tk.Label(self._dialog, text=f"{status_prefix}: ", fg="blue")
        self._status_label.pack(pady=2)

        self._progress_label = tk.Label(self._dialog, text="", fg="gray")
        self._progress_label.pack(pady=2)

        mode = 'indeterminate' if indeterminate else 'determinate'
        self._progress_bar = ttk.Progressbar(self._dialog, mode=mode, length=320)
        self._progress_bar.pack(pady=8, padx=20)
        if indeterminate:
            self._progress_bar.start(15)

        self._elapsed_label = tk.Label(self._dialog, text="0.0 s", fg="gray")
        self._elapsed_label.pack()
        self._tick()

    def run(self, fn, on_success, on_error):
        """
        Execute fn in a background thread, then call on_success or on_error on the main thread.

        Args:
            fn: callable(progress_cb) → result.
                progress_cb: callable(current: int, total: int, label: str).
            on_success: callable(result) invoked on the main thread when fn completes.
            on_error: callable(exception) invoked on the main thread if fn raises.
        """
        def background():
            try:
                def progress_cb(current, total, label):
                    self._root.after(0, lambda: self._update_ui(current, total, label))

                result = fn(progress_cb)
                self._root.after(0, lambda: self._finish(on_success, result, None, on_error))
            except Exception as e:
                err = e
                print(f"\n[ERROR] {err}")
                traceback.print_exc()
                self._root.after(0, lambda: self._finish(on_success, None, err, on_error))

        threading.Thread(target=background, daemon=True).start()

    def _tick(self):
        if self._dialog.winfo_exists():
            self._elapsed_label.config(text=f"{time.monotonic() - self._started:.1f} s")
            self._dialog.after(500, self._tick)

    def _update_ui(self, current, total, label):
        if not self._dialog.winfo_exists():
            return
        self._status_label.config(text=f"{self._status_prefix}: {label}")
        if self._indeterminate:
            self._progress_label.config(text=f"Step {current} of {total}")
        else:
            self._progress_label.config(text=f"Progress: {current}/{total}")
            self._progress_bar['value'] = (current / total) * 100 if total else 0

    def _finish(self, on_success, result, error, on_error):
        if self._dialog.winfo_exists():
            if self._indeterminate:
                self._progress_bar.stop()
            self._dialog.destroy()
        if error is not None:
            on_error(error)
        else:
            on_success(result)
