# filedock/worker/fs.py
from __future__ import annotations
import os
from pathlib import Path
from typing import List

from loguru import logger

from .batch import run_batch
from .errors import IoError, NotFound, Unavailable


def require_directory(path: str, label: str = "Directory") -> Path:
    """Resolve a caller path, failing with NotFound unless it is an existing directory."""
    if not path:
        raise NotFound(f"{label} does not exist")
    p = Path(path)
    if not p.exists():
        raise NotFound(f"{label} does not exist")
    if not p.is_dir():
        raise NotFound(f"Not a directory: {p}")
    return p


def file_name(name: str) -> str:
    """Check that `name` is a bare file name and return it unchanged."""
    if not name or name in (".", ".."):
        raise Unavailable(f"Failed to get file name from {name!r}")
    seps = [os.sep] + ([os.altsep] if os.altsep else [])
    if any(s in name for s in seps):
        raise Unavailable(f"Failed to get file name from {name!r}")
    return name


def display_name(name: str) -> str:
    # os.scandir hands back undecodable bytes as lone surrogates
    try:
        name.encode("utf-8")
        return name
    except UnicodeEncodeError:
        return os.fsencode(name).decode("utf-8", errors="replace")


def _scan_files(directory: Path, what: str) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return [entry for entry in it if entry.is_file()]
    except OSError as e:
        raise IoError(f"Failed to read {what}: {e}") from e


def list_files(path: str) -> List[str]:
    directory = require_directory(path)
    return [display_name(entry.name) for entry in _scan_files(directory, "directory")]


def move_files_from_directory(source_path: str, destination_path: str) -> List[str]:
    """
    Move every immediate file of `source_path` into `destination_path`.

    Both directories are checked before anything moves. A name already present
    in the destination is overwritten. The first failed rename stops the call;
    files moved before it stay moved and are attached to the raised error.
    """
    source = require_directory(source_path, "Source directory")
    dest = require_directory(destination_path, "Destination directory")

    def _move(entry: os.DirEntry) -> bool:
        target = dest / entry.name
        try:
            os.replace(entry.path, target)
        except OSError as e:
            raise IoError(f"Failed to move file {display_name(entry.path)}: {e}") from e
        logger.debug(f"moved {display_name(entry.path)} -> {display_name(str(target))}")
        return True

    entries = _scan_files(source, "source directory")
    result = run_batch(((display_name(e.name), e) for e in entries), _move)
    result.raise_for_error()
    return result.succeeded
