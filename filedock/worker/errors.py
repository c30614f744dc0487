# filedock/worker/errors.py
from __future__ import annotations
from typing import List


class FileOpError(Exception):
    """Base for every failure a worker operation reports to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # names finished before a batch stopped; filled in by BatchResult
        self.completed: List[str] = []

    def __str__(self) -> str:
        return self.message


class NotFound(FileOpError):
    pass


class IoError(FileOpError):
    pass


class AlreadyExists(FileOpError):
    pass


class Unavailable(FileOpError):
    pass
