import sys

import pytest

from gmv.editor import launch_editor
from gmv.model import GmvError


def test_editor_edits_file(tmp_path, monkeypatch):
    target = tmp_path / "list.txt"
    target.write_text('import sys\nopen(sys.argv[0], "w").write("renamed\\n")\n')
    monkeypatch.setenv("EDITOR", sys.executable)
    launch_editor(str(target))
    assert target.read_text() == "renamed\n"


def test_editor_failure_raises(tmp_path, monkeypatch):
    target = tmp_path / "list.txt"
    target.write_text("raise SystemExit(3)\n")
    monkeypatch.setenv("EDITOR", sys.executable)
    with pytest.raises(GmvError, match="editor exited with error"):
        launch_editor(target)


def test_missing_editor_program_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("EDITOR", str(tmp_path / "no-such-editor"))
    with pytest.raises(GmvError, match="editor exited with error"):
        launch_editor(tmp_path / "list.txt")


def test_no_editor_available(tmp_path, monkeypatch):
    empty = tmp_path / "bin"
    empty.mkdir()
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.setenv("PATH", str(empty))
    with pytest.raises(GmvError, match="no editor found"):
        launch_editor(tmp_path / "list.txt")