# gmv

Batch rename files and directories with your text editor.

`gmv` writes the paths you give it into a temporary file, one per line, and
opens that file in `$EDITOR`. Edit the names, save and quit. `gmv` then
renames each file to whatever you wrote on its line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
gmv [OPTIONS] <files>...
```

Options:

- `--dry-run` prints each planned rename as `old -> new` without applying it.
- `--force`, `-f` skips the confirmation prompt when existing files would be
  overwritten.
- `--help`, `-h` prints the help text and exits.

Any other argument is taken as a path to rename. At least one path is
required.

Examples:

```
gmv test-file.go        # rename a single file
gmv *                   # rename everything in the current directory
gmv *.{pdf,epub}        # rename all pdf and epub files
gmv */                  # rename all directories
gmv test-dir/*.txt      # rename all text files in test-dir
gmv */*                 # rename all files in all subdirectories
gmv --dry-run *         # preview without applying
gmv --force *           # skip the overwrite confirmation
```

## Checks

Before the editor opens, every path given must exist, and no path may be
given twice.

After the editor closes, blank lines are dropped and surrounding whitespace
is stripped from each line. The edited list is then checked:

- The number of non-empty lines must match the number of files given.
- A file may be renamed but not moved to a different directory.
- Two lines may not name the same target.

Lines left unchanged are skipped. If nothing changed, `gmv` prints
`No files were renamed.` and stops.

## Swaps and cycles

Swaps and longer cycles, such as `a -> b`, `b -> c`, `c -> a`, are carried
out by first moving one file of the cycle to a temporary name
(`.gmv_temp_<number>` in the same directory), renaming the rest of the cycle,
and then moving the temporary file to its final name.

## Overwrites

If a new name belongs to an existing file that is not itself in the rename
list, `gmv` prints a warning listing those files and asks
`Continue with overwrites? (y/N)`. Only `y` or `yes` goes on; anything else
cancels with `Operation cancelled.`. With `--force` the question is not
asked. With `--dry-run` the warning is shown and nothing is changed.

## Editor

`gmv` runs `$EDITOR` with the path of the temporary file. If `$EDITOR` is not
set it uses `vi`, or `nano` if `vi` is not installed, and fails if neither is
found. A non-zero exit from the editor is an error.

## Log

After renames have been applied, `gmv` writes a log to the system's temporary
directory, in a file named `gmv-log-YYYYMMDD-HHMMSS`. It starts with the time
and the working directory, followed by one `old -> new` line per rename
performed, including the steps through temporary names. No log is written
on a dry run.

## Manual page

`gmv-man` writes the manual page in roff format to standard output:

```
gmv-man > gmv.1
```

## Using it from Python

The steps of a session are available as functions:

- `gmv.validate.validate_files(files)` and
  `gmv.validate.validate_edits(original, edited)` raise `gmv.model.GmvError`
  when a check fails.
- `gmv.plan.build_rename_plan(original, edited)` returns a list of
  `gmv.model.RenameOp` (with `source` and `target`), with cycles routed
  through temporary names; `gmv.plan.detect_cycles(plan)` returns the cycles
  it finds.
- `gmv.validate.check_overwrites(plan, original_files)` returns the existing
  targets outside the rename list.
- `gmv.execute.execute_renames(plan, dry_run)` applies or prints the plan, and
  `gmv.execute.write_log(plan)` writes the log and returns its path.
- `gmv.editfile.create_temp_file(files)`, `gmv.editfile.parse_edited(path)` and
  `gmv.editor.launch_editor(path)` handle the file the user edits.

## Exit status

`0` on success, when nothing was renamed, or when the operation was
cancelled. `1` on any error, such as missing arguments, files that do not
exist, an editor failure, or edits that fail the checks; the message is
printed to standard error as `Error: ...`.