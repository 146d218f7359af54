"""The scratch file holding the list of paths the user edits."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable

from gmv.model import GmvError


def create_temp_file(files: Iterable[str]) -> str:
    """Write one path per line to a new temporary file and return its path."""
    try:
        fd, path = tempfile.mkstemp(prefix="gmv-")
    except OSError as exc:
        raise GmvError(f"failed to create temp file: {exc}") from exc

    with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
        try:
            handle.writelines(f"{name}\n" for name in files)
        except OSError as exc:
            raise GmvError(f"failed to write file path: {exc}") from exc
    return path


def parse_edited(path: str | os.PathLike[str]) -> list[str]:
    """Read the edited file, returning its non-blank lines stripped."""
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        raise GmvError(f"failed to read edited file: {exc}") from exc
    return [line.strip() for line in content.split("\n") if line.strip()]