# filedock/worker/dialog.py
from __future__ import annotations
import os, threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

DEFAULT_TITLE = "Select folder"
DIALOG_THREAD_NAME = "filedock-dialog"

# the QApplication and every dialog live on this one thread
DIALOG_EXECUTOR = ThreadPoolExecutor(max_workers=1, thread_name_prefix=DIALOG_THREAD_NAME)


def _ask_directory(title: str) -> str:
    # Lazy import keeps the host importable on machines without a display
    from PyQt5.QtWidgets import QApplication, QFileDialog

    app = QApplication.instance() or QApplication([])
    selected = QFileDialog.getExistingDirectory(None, title, "", QFileDialog.ShowDirsOnly)
    app.processEvents()
    return selected or ""


def _on_dialog_thread() -> bool:
    return threading.current_thread().name.startswith(DIALOG_THREAD_NAME)


def select_folder(title: Optional[str] = None) -> Optional[str]:
    """Block until the user picks a folder; None means the dialog was cancelled."""
    title = title or DEFAULT_TITLE
    if _on_dialog_thread():
        selected = _ask_directory(title)
    else:
        selected = DIALOG_EXECUTOR.submit(_ask_directory, title).result()
    if not selected:
        return None
    return os.path.abspath(selected)
