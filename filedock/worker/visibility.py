# filedock/worker/visibility.py
"""
Hide and show files inside one directory.

Windows keeps visibility in the HIDDEN/SYSTEM attribute bits, so the file name
never changes. POSIX systems hide anything whose name starts with a dot, so
hiding and showing are renames. Both are VisibilityBackend implementations and
callers pick one with select_backend().
"""
from __future__ import annotations
import os, sys
from pathlib import Path
from typing import Dict, List, Optional, Type

from loguru import logger

from .batch import run_batch
from .errors import AlreadyExists, IoError, Unavailable
from .fs import file_name, require_directory

FILE_ATTRIBUTE_HIDDEN = 0x2
FILE_ATTRIBUTE_SYSTEM = 0x4
FILE_ATTRIBUTE_NORMAL = 0x80
HIDDEN_MARKER = "."


def _get_file_attributes(path: Path) -> int:
    return os.stat(path).st_file_attributes


def _set_file_attributes(path: Path, attrs: int) -> None:
    import ctypes
    if not ctypes.windll.kernel32.SetFileAttributesW(str(path), attrs):
        raise ctypes.WinError()


class VisibilityBackend:
    name = "base"

    def set_visibility(self, directory: Path, name: str, hidden: bool) -> bool:
        """Returns True if the file was toggled, False if it was skipped."""
        raise NotImplementedError


class AttributeFlagBackend(VisibilityBackend):
    name = "attribute"
    mask = FILE_ATTRIBUTE_HIDDEN | FILE_ATTRIBUTE_SYSTEM

    def set_visibility(self, directory: Path, name: str, hidden: bool) -> bool:
        path = directory / file_name(name)
        if not path.exists():
            return False
        try:
            attrs = _get_file_attributes(path)
        except OSError as e:
            raise IoError(f"Failed to get file metadata for {path}: {e}") from e

        new_attrs = (attrs | self.mask) if hidden else (attrs & ~self.mask)
        try:
            # 0 is not a valid attribute set; NORMAL means "no flags"
            _set_file_attributes(path, new_attrs or FILE_ATTRIBUTE_NORMAL)
        except OSError as e:
            verb = "set" if hidden else "remove"
            raise IoError(f"Failed to {verb} system+hidden attributes for {path}: {e}") from e
        logger.debug(f"{'hid' if hidden else 'showed'} {path} (attrs {attrs:#x} -> {new_attrs:#x})")
        return True


class DotPrefixBackend(VisibilityBackend):
    name = "dotfile"

    def set_visibility(self, directory: Path, name: str, hidden: bool) -> bool:
        name = file_name(name)
        if hidden:
            source, target = name, HIDDEN_MARKER + name
        else:
            # one marker only, so a hidden ".x" (stored as "..x") comes back as ".x"
            visible = name[1:] if name.startswith(HIDDEN_MARKER) else name
            if not visible:
                raise Unavailable(f"Failed to get file name from {name!r}")
            source, target = HIDDEN_MARKER + visible, visible

        src = directory / source
        if not os.path.lexists(src):
            return False
        dst = directory / target
        if os.path.lexists(dst):
            kind = "Hidden" if hidden else "Visible"
            raise AlreadyExists(f"{kind} file {target} already exists")
        try:
            os.rename(src, dst)
        except OSError as e:
            raise IoError(f"Failed to rename file {source} to {target}: {e}") from e
        logger.debug(f"renamed {src} -> {dst}")
        return True


BACKENDS: Dict[str, Type[VisibilityBackend]] = {
    AttributeFlagBackend.name: AttributeFlagBackend,
    DotPrefixBackend.name: DotPrefixBackend,
}


def select_backend(name: str = "auto") -> VisibilityBackend:
    name = (name or "auto").lower()
    if name == "auto":
        name = "attribute" if sys.platform == "win32" else "dotfile"
    cls = BACKENDS.get(name)
    if cls is None:
        raise ValueError(f"unknown visibility backend: {name} (expected one of auto, {', '.join(BACKENDS)})")
    if cls is AttributeFlagBackend and sys.platform != "win32":
        raise ValueError("attribute visibility backend needs Windows file attributes")
    return cls()


def _toggle(directory: str, files: List[str], hidden: bool,
            backend: Optional[VisibilityBackend]) -> List[str]:
    dir_path = require_directory(directory)
    backend = backend or select_backend()
    result = run_batch(((f, f) for f in files),
                       lambda f: backend.set_visibility(dir_path, f, hidden))
    result.raise_for_error()
    return result.succeeded


def hide_files_in_directory(directory: str, files: List[str],
                            backend: Optional[VisibilityBackend] = None) -> List[str]:
    return _toggle(directory, files, True, backend)


def show_files_in_directory(directory: str, files: List[str],
                            backend: Optional[VisibilityBackend] = None) -> List[str]:
    return _toggle(directory, files, False, backend)
