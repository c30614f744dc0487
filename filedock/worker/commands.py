# filedock/worker/commands.py
"""Wrappers that turn worker operations into the observation dicts the registry dispatches."""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from filedock.server.policy import policy

from . import dialog, fs, visibility
from .errors import FileOpError


def _failed(e: FileOpError) -> Dict[str, Any]:
    obs: Dict[str, Any] = {"ok": False, "error": str(e)}
    if e.completed:
        obs["completed"] = e.completed
    return obs


def list_files(path: str) -> Dict[str, Any]:
    try:
        return {"ok": True, "result": fs.list_files(path)}
    except FileOpError as e:
        return _failed(e)


def move_files_from_directory(source_path: str, destination_path: str) -> Dict[str, Any]:
    try:
        return {"ok": True, "result": fs.move_files_from_directory(source_path, destination_path)}
    except FileOpError as e:
        return _failed(e)


def hide_files_in_directory(directory: str, files: List[str]) -> Dict[str, Any]:
    backend = visibility.select_backend(policy.visibility_backend())
    try:
        toggled = visibility.hide_files_in_directory(directory, files, backend=backend)
    except FileOpError as e:
        return _failed(e)
    return {"ok": True, "result": None, "toggled": toggled, "backend": backend.name}


def show_files_in_directory(directory: str, files: List[str]) -> Dict[str, Any]:
    backend = visibility.select_backend(policy.visibility_backend())
    try:
        toggled = visibility.show_files_in_directory(directory, files, backend=backend)
    except FileOpError as e:
        return _failed(e)
    return {"ok": True, "result": None, "toggled": toggled, "backend": backend.name}


def select_folder(title: Optional[str] = None) -> Dict[str, Any]:
    return {"ok": True, "result": dialog.select_folder(title)}


def greet(name: str) -> Dict[str, Any]:
    return {"ok": True, "result": f"Hello, {name}! You've been greeted from filedock!"}
