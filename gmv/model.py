"""Core data types shared across the rename workflow."""

from __future__ import annotations

from dataclasses import dataclass

TEMP_PREFIX = ".gmv_temp_"


class GmvError(Exception):
    """Raised when a rename session cannot proceed."""


@dataclass(frozen=True)
class RenameOp:
    """A single rename of ``source`` to ``target``."""

    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"