"""Command-line entry point: edit a list of paths and rename accordingly."""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Sequence

from gmv.editfile import create_temp_file, parse_edited
from gmv.editor import launch_editor
from gmv.execute import execute_renames, write_log
from gmv.model import GmvError
from gmv.plan import build_rename_plan
from gmv.validate import check_overwrites, validate_edits, validate_files

_HELP = textwrap.dedent(
    """\
    gmv - Batch rename files using $EDITOR

    USAGE:
      gmv [OPTIONS] <files>...

    OPTIONS:
      --dry-run    Print changes without applying them
      --force, -f  Skip confirmation prompt for overwrites
      --help, -h   Show this help message

    EXAMPLES:
      gmv test-file.go        # Rename test-file.go in the editor
      gmv *                   # Rename all files in the editor
      gmv *.{pdf,epub}        # Rename all pdf and epub files
      gmv */                  # Rename all directories
      gmv test-dir/*.txt      # Rename all text files in test-dir
      gmv */*                 # Rename all files in all directories
      gmv --dry-run *         # Preview changes without applying
      gmv --force *           # Skip overwrite confirmation
      gmv --help              # Print help

    DESCRIPTION:
      gmv opens your $EDITOR with a list of files to rename. Edit the filenames,
      save and exit. The files will be renamed accordingly. File swaps are
      automatically handled using temporary files.

      A log of all rename operations is saved in your system's temp directory.
    """
)


def print_help() -> None:
    """Print the usage text."""
    print(_HELP, end="")


def parse_args(argv: Sequence[str] | None = None) -> tuple[list[str], bool, bool]:
    """Return ``(files, dry_run, force)``; print help and exit on ``--help``."""
    args = sys.argv[1:] if argv is None else list(argv)
    files: list[str] = []
    dry_run = False
    force = False

    for arg in args:
        if arg in ("--help", "-h"):
            print_help()
            raise SystemExit(0)
        if arg == "--dry-run":
            dry_run = True
        elif arg in ("--force", "-f"):
            force = True
        else:
            files.append(arg)

    if not files:
        raise GmvError("no files specified")
    return files, dry_run, force


def prompt_user(message: str) -> bool:
    """Ask a yes/no question on stdin; anything but y/yes means no."""
    print(f"{message} (y/N): ", end="", flush=True)
    line = sys.stdin.readline()
    if not line.endswith("\n"):
        return False
    return line.strip().lower() in ("y", "yes")


def _run(argv: Sequence[str] | None) -> int:
    files, dry_run, force = parse_args(argv)
    validate_files(files)

    edit_path = create_temp_file(files)
    launch_editor(edit_path)
    edited = parse_edited(edit_path)
    validate_edits(files, edited)

    plan = build_rename_plan(files, edited)
    if not plan:
        print("No files were renamed.")
        return 0

    overwrites = check_overwrites(plan, files)
    if overwrites:
        print("WARNING: The following files will be overwritten:", file=sys.stderr)
        for path in overwrites:
            print(f"  - {path}", file=sys.stderr)
        if dry_run:
            print(file=sys.stderr)
        elif not force and not prompt_user("Continue with overwrites?"):
            print("Operation cancelled.")
            return 0

    execute_renames(plan, dry_run)

    if not dry_run:
        try:
            log_path = write_log(plan)
        except GmvError as exc:
            print(f"Warning: failed to write log: {exc}", file=sys.stderr)
        else:
            print("Successfully renamed files.")
            print(f"A log file is saved at {log_path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the rename session and return the process exit status."""
    try:
        return _run(argv)
    except GmvError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())