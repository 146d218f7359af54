"""Open a file in the user's text editor."""

from __future__ import annotations

import os
import shutil
import subprocess

from gmv.model import GmvError


def _find_editor() -> str:
    editor = os.environ.get("EDITOR", "")
    if editor:
        return editor
    for candidate in ("vi", "nano"):
        if shutil.which(candidate):
            return candidate
    raise GmvError("no editor found: $EDITOR not set and neither vi nor nano are available")


def launch_editor(path: str | os.PathLike[str]) -> None:
    """Run the editor on ``path`` and wait for it to exit."""
    editor = _find_editor()
    try:
        subprocess.run([editor, os.fspath(path)], check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise GmvError(f"editor exited with error: {exc}") from exc