"""Checks run on the input list and on the edited list."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from gmv.model import TEMP_PREFIX, GmvError, RenameOp


def _parent_dir(path: str) -> str:
    return os.path.normpath(os.path.dirname(path))


def _exists(path: str) -> bool:
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def validate_files(files: Iterable[str]) -> None:
    """Reject duplicate or missing paths."""
    seen: set[str] = set()
    for path in files:
        if path in seen:
            raise GmvError(f"duplicate file specified: {path}")
        seen.add(path)
        try:
            os.stat(path)
        except FileNotFoundError:
            raise GmvError(f"file does not exist: {path}") from None
        except OSError:
            pass


def validate_edits(original: Sequence[str], edited: Sequence[str]) -> None:
    """Reject edits that change the line count, the directory or repeat a target."""
    if len(original) != len(edited):
        raise GmvError(
            f"line count mismatch: expected {len(original)} lines, got {len(edited)} lines"
        )

    targets: set[str] = set()
    for orig, edit in zip(original, edited):
        if _parent_dir(orig) != _parent_dir(edit):
            raise GmvError(f"cannot move files to different directories: {orig} -> {edit}")
        if edit in targets:
            raise GmvError(f"duplicate target filename: {edit}")
        targets.add(edit)


def check_overwrites(plan: Iterable[RenameOp], original_files: Iterable[str]) -> list[str]:
    """List existing targets outside the rename set that the plan would replace."""
    originals = set(original_files)
    return [
        op.target
        for op in plan
        if not os.path.basename(op.target).startswith(TEMP_PREFIX)
        and _exists(op.target)
        and op.target not in originals
    ]