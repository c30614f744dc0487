from __future__ import annotations
import difflib
from concurrent.futures import Executor
from typing import Dict, Callable, Any, List

from ..worker import commands, dialog

# COMMAND REGISTRY
COMMAND_REGISTRY: Dict[str, Callable[..., Dict[str, Any]]] = {
    # Filesystem
    "list_files": commands.list_files,
    "move_files_from_directory": commands.move_files_from_directory,

    # Visibility
    "hide_files_in_directory": commands.hide_files_in_directory,
    "show_files_in_directory": commands.show_files_in_directory,

    # Dialogs
    "select_folder": commands.select_folder,

    "greet": commands.greet,
}

# ---- Aliases for dot-style names ----
ALIASES: Dict[str, str] = {
    "fs.list": "list_files",
    "fs.move_all": "move_files_from_directory",
    "fs.hide": "hide_files_in_directory",
    "fs.show": "show_files_in_directory",
    "dialog.select_folder": "select_folder",
}

# Commands pinned to a dedicated executor; everything else uses the loop default
COMMAND_EXECUTORS: Dict[str, Executor] = {
    "select_folder": dialog.DIALOG_EXECUTOR,
}


def get_command(name: str) -> tuple[Callable[..., Dict[str, Any]], str] | tuple[None, None]:
    """
    Returns (command_callable, canonical_name) or (None, None) if not found.
    Matching is case-insensitive over canonical names and aliases.
    """
    name_lc = (name or "").lower()
    canonical = ALIASES.get(name_lc, name_lc)
    func = COMMAND_REGISTRY.get(canonical)
    if func is None:
        return None, None
    return func, canonical


def suggest(name: str) -> List[str]:
    # Suggestions only: hide/show names are close enough that auto-matching would be unsafe
    known = list(COMMAND_REGISTRY) + list(ALIASES)
    return difflib.get_close_matches((name or "").lower(), known, n=3, cutoff=0.6)
