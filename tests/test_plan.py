import os

import pytest

from gmv.model import TEMP_PREFIX, RenameOp
from gmv.plan import build_rename_plan, detect_cycles


def _apply(plan, names):
    """Simulate the plan on a mapping of path -> content."""
    state = dict(names)
    for op in plan:
        state[op.target] = state.pop(op.source)
    return state


def test_simple_renames_plan_length(tmp_path):
    original = [str(tmp_path / f"file{i}.txt") for i in (1, 2, 3)]
    edited = [str(tmp_path / f"renamed{i}.txt") for i in (1, 2, 3)]
    plan = build_rename_plan(original, edited)
    assert len(plan) == 3
    assert plan == [RenameOp(o, e) for o, e in zip(original, edited)]


def test_no_changes_gives_empty_plan(tmp_path):
    original = [str(tmp_path / "file1.txt"), str(tmp_path / "file2.txt")]
    assert build_rename_plan(original, list(original)) == []


def test_unchanged_entries_are_skipped(tmp_path):
    original = [str(tmp_path / "a"), str(tmp_path / "b")]
    edited = [str(tmp_path / "a"), str(tmp_path / "c")]
    assert build_rename_plan(original, edited) == [RenameOp(original[1], edited[1])]


def test_simple_swap_uses_temp(tmp_path):
    a, b = str(tmp_path / "fileA.txt"), str(tmp_path / "fileB.txt")
    plan = build_rename_plan([a, b], [b, a])
    assert len(plan) >= 2
    temp = plan[0].target
    assert plan[0].source == a
    assert os.path.basename(temp).startswith(TEMP_PREFIX)
    assert os.path.dirname(temp) == str(tmp_path)
    assert plan[-1] == RenameOp(temp, b)
    assert _apply(plan, {a: "A", b: "B"}) == {a: "B", b: "A"}


def test_multiple_swaps(tmp_path):
    f = [str(tmp_path / f"file{i}.txt") for i in (1, 2, 3, 4)]
    plan = build_rename_plan(f, [f[1], f[0], f[3], f[2]])
    result = _apply(plan, {p: p for p in f})
    assert result == {f[0]: f[1], f[1]: f[0], f[2]: f[3], f[3]: f[2]}
    temps = {op.target for op in plan if os.path.basename(op.target).startswith(TEMP_PREFIX)}
    assert len(temps) == 2


def test_cyclic_swap(tmp_path):
    a, b, c = (str(tmp_path / n) for n in ("a.txt", "b.txt", "c.txt"))
    plan = build_rename_plan([a, b, c], [b, c, a])
    assert len(plan) == 4
    assert _apply(plan, {a: "A", b: "B", c: "C"}) == {b: "A", c: "B", a: "C"}


def test_cycle_with_feeding_chain(tmp_path):
    x, a, b = (str(tmp_path / n) for n in ("x", "a", "b"))
    plan = build_rename_plan([a, b, x], [b, a, str(tmp_path / "y")])
    assert plan[-1] == RenameOp(x, str(tmp_path / "y"))


def test_large_number_of_files(tmp_path):
    original = [str(tmp_path / f"file{i}.txt") for i in range(1000)]
    edited = [str(tmp_path / f"renamed{i}.txt") for i in range(1000)]
    assert len(build_rename_plan(original, edited)) == 1000


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        build_rename_plan(["a", "b"], ["c"])


def test_detect_two_cycle():
    plan = [RenameOp("a", "b"), RenameOp("b", "a")]
    assert detect_cycles(plan) == [["a", "b"]]


def test_detect_three_cycle():
    plan = [RenameOp("a", "b"), RenameOp("b", "c"), RenameOp("c", "a")]
    assert detect_cycles(plan) == [["a", "b", "c"]]


def test_detect_no_cycle_in_chain():
    plan = [RenameOp("a", "b"), RenameOp("b", "c")]
    assert detect_cycles(plan) == []


def test_detect_cycle_reached_through_chain():
    plan = [RenameOp("x", "a"), RenameOp("a", "b"), RenameOp("b", "a")]
    assert detect_cycles(plan) == [["a", "b"]]


def test_detect_self_loop_and_separate_cycles():
    plan = [
        RenameOp("s", "s"),
        RenameOp("a", "b"),
        RenameOp("b", "a"),
        RenameOp("c", "d"),
        RenameOp("d", "c"),
    ]
    assert detect_cycles(plan) == [["s"], ["a", "b"], ["c", "d"]]