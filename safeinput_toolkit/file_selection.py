"""Ways of choosing the file to inspect.

The file scanner only depends on the ``FileSelector`` protocol, so the native
dialog can be swapped for a fixed answer in tests and scripted runs.
"""

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileSelector(Protocol):
    def select_file(self) -> Path | None:
        """Return the chosen file, or None if the user cancelled."""
        ...


class TkFileSelector:
    """Native open-file dialog via tkinter."""

    def __init__(self, initial_dir: Path | None = None, title: str = "Select a file to scan"):
        self.initial_dir = initial_dir
        self.title = title

    def select_file(self) -> Path | None:
        import tkinter as tk
        from tkinter import filedialog

        root = tk.Tk()
        root.withdraw()
        try:
            options = {"title": self.title, "filetypes": [("Text files", "*.txt"), ("All files", "*.*")]}
            if self.initial_dir is not None and self.initial_dir.is_dir():
                options["initialdir"] = str(self.initial_dir)
            chosen = filedialog.askopenfilename(**options)
        finally:
            root.destroy()

        if not chosen:
            logger.info("File selection cancelled", extra={"event": "file.selection_cancelled"})
            return None
        return Path(chosen)


class StaticFileSelector:
    """Always answers with the same path; ``None`` behaves like a cancelled dialog."""

    def __init__(self, path: Path | None = None):
        self.path = path

    def select_file(self) -> Path | None:
        return self.path
