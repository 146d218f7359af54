"""Apply a rename plan and record it."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable
from datetime import datetime

from gmv.model import GmvError, RenameOp


def execute_renames(plan: Iterable[RenameOp], dry_run: bool = False) -> None:
    """Rename each entry in order, or only print it when ``dry_run`` is set."""
    for op in plan:
        if dry_run:
            print(op)
            continue
        try:
            os.replace(op.source, op.target)
        except OSError as exc:
            raise GmvError(f"failed to rename {op.source} to {op.target}: {exc}") from exc


def write_log(plan: Iterable[RenameOp]) -> str:
    """Write the plan to a timestamped log in the temp directory and return its path."""
    try:
        cwd = os.getcwd()
    except OSError:
        cwd = "unknown"

    now = datetime.now()
    log_path = os.path.join(tempfile.gettempdir(), f"gmv-log-{now:%Y%m%d-%H%M%S}")

    try:
        handle = open(log_path, "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise GmvError(f"failed to create log file: {exc}") from exc

    with handle:
        try:
            handle.write(f"# gmv operation log - {now:%Y-%m-%d %H:%M:%S}\n")
            handle.write(f"# Working directory: {cwd}\n\n")
        except OSError as exc:
            raise GmvError(f"failed to write log header: {exc}") from exc
        try:
            handle.writelines(f"{op}\n" for op in plan)
        except OSError as exc:
            raise GmvError(f"failed to write log entry: {exc}") from exc

    return log_path