# filedock/worker/batch.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from .errors import FileOpError

T = TypeVar("T")


@dataclass
class BatchResult:
    """
    Outcome of one sequential multi-file call.

    Items run in order and the first FileOpError stops the batch. Nothing
    already done is rolled back, so `succeeded` is exactly the prefix that
    reached the filesystem.
    """
    succeeded: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed_at: Optional[str] = None
    error: Optional[FileOpError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is None:
            return
        self.error.completed = list(self.succeeded)
        raise self.error


def run_batch(items: Iterable[Tuple[str, T]], step: Callable[[T], bool]) -> BatchResult:
    """
    Apply `step` to each (label, item) pair until one fails.

    `step` returns False for an item it skipped and True for one it processed.
    """
    result = BatchResult()
    for label, item in items:
        try:
            done = step(item)
        except FileOpError as e:
            result.failed_at = label
            result.error = e
            break
        if done:
            result.succeeded.append(label)
        else:
            result.skipped.append(label)
    return result
