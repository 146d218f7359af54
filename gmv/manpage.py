"""Generate the roff manual page for the command."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from datetime import datetime

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_OPTIONS = (
    ("--dry-run", (
        "Show the planned renames without touching any file.",
        "Overwrite warnings are still reported.",
    )),
    ("--force, -f", (
        "Do not ask for confirmation before overwriting files.",
        "This can destroy data, so use it with care.",
    )),
    ("--help, -h", ("Print a usage summary and exit.",)),
)

_EXAMPLES = (
    ("gmv test-file.go", "Rename a single file."),
    ("gmv *", "Rename every entry of the current directory."),
    ("gmv *.{pdf,epub}", "Rename the PDF and EPUB files."),
    ("gmv */", "Rename the directories of the current directory."),
    ("gmv test-dir/*.txt", "Rename the text files inside test-dir."),
    ("gmv */*", "Rename the entries of every subdirectory."),
    ("gmv --dry-run *", "Show what would be renamed, changing nothing."),
    ("gmv --force *", "Rename without asking about overwrites."),
)

_RULES = (
    "The number of lines must equal the number of files given",
    "A file must stay in its own directory",
    "Two files may not get the same new name (swaps excepted)",
    "Removing a line or leaving one blank is an error",
)

_SEE_ALSO = ("mv", "rename", "vidir")


def _esc(text: str) -> str:
    return text.replace("-", r"\-")


def _section(title: str, lines: Iterable[str]) -> list[str]:
    return [f".SH {title}", *lines]


def _tagged(term: str, body: Iterable[str], font: str = ".B") -> list[str]:
    return [".TP", f"{font} {term}", *body]


def _bold(word: str) -> str:
    return f".B {word}"


def _sections() -> list[list[str]]:
    options = [line for flag, body in _OPTIONS for line in _tagged(_esc(flag), body)]
    examples = [line for cmd, text in _EXAMPLES for line in _tagged(_esc(cmd), [text])]
    rules = [line for rule in _RULES for line in (r".IP \(bu 2", rule)]
    see_also = [
        f".BR {name} (1)" + ("," if i < len(_SEE_ALSO) - 1 else "")
        for i, name in enumerate(_SEE_ALSO)
    ]
    return [
        _section("NAME", [r"gmv \- batch rename files using $EDITOR"]),
        _section("SYNOPSIS", [_bold("gmv"), r"[\fIOPTIONS\fR]", ".I files..."]),
        _section("DESCRIPTION", [
            _bold("gmv"),
            "renames many files at once with the help of a text editor.",
            "The names of the given files are written to a scratch file that is",
            "opened in $EDITOR; once it is saved and the editor closed, every file",
            "is renamed to the name on its line.",
            ".PP",
            "Swaps and longer rename cycles go through temporary names, so no file is lost.",
            "Every run that renames something leaves a log in the temporary directory.",
            ".PP",
            "Renames that would replace a file outside the list are reported first,",
            "and the command waits for confirmation unless",
            _bold(_esc("--force")),
            "is given.",
        ]),
        _section("OPTIONS", options),
        _section("EXAMPLES", examples),
        _section("ENVIRONMENT", _tagged("EDITOR", [
            "The editor in which the file names are edited.",
            "When it is unset,",
            _bold("vi"),
            "or else",
            _bold("nano"),
            "is used, whichever is installed.",
        ])),
        _section("FILES", _tagged("/tmp/gmv-log-YYYYMMDD-HHMMSS", [
            "Record of the renames made by one run, headed by the time of the run",
            "and the directory it was started in.",
        ], font=".I")),
        _section("EXIT STATUS", [
            *_tagged("0", ["Success"]),
            *_tagged("1", ["Failure: bad arguments, missing files, rejected edits and the like"]),
        ]),
        _section("NOTES", [
            ".PP",
            _bold("gmv"),
            "checks the edited list before renaming anything:",
            *rules,
            ".PP",
            r"A swap such as file1 \(-> file2 together with file2 \(-> file1 is carried out",
            "through a temporary name by",
            _bold("gmv"),
            "itself.",
            ".PP",
            _bold("Overwrite Protection"),
            ".PP",
            "Before a rename replaces an existing file that is not in the list,",
            _bold("gmv"),
            "lists every such file and asks whether to go on. Swaps and cycles",
            "among the listed files are not reported. Pass",
            _bold(_esc("--force")),
            "to go on without being asked.",
        ]),
        _section("SEE ALSO", see_also),
    ]


def generate_man_page() -> str:
    """Return the manual page text, dated with the current month."""
    now = datetime.now()
    month = f"{_MONTHS[now.month - 1]} {now.year}"
    lines = [f'.TH GMV 1 "{month}" "gmv 1.0" "User Commands"']
    for section in _sections():
        lines.extend(section)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the manual page to stdout."""
    sys.stdout.write(generate_man_page())
    return 0


if __name__ == "__main__":
    sys.exit(main())