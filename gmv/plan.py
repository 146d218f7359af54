"""Turn an edited file list into an ordered, cycle-safe rename plan."""

from __future__ import annotations

import os
import time
from collections.abc import Sequence

from gmv.model import TEMP_PREFIX, RenameOp


def _temp_name(directory: str, taken: set[str]) -> str:
    stamp = time.time_ns()
    while True:
        name = os.path.join(directory, f"{TEMP_PREFIX}{stamp}")
        if name not in taken and not os.path.lexists(name):
            taken.add(name)
            return name
        stamp += 1


def build_rename_plan(original: Sequence[str], edited: Sequence[str]) -> list[RenameOp]:
    """Build the list of renames, routing cycles through temporary names."""
    initial = [
        RenameOp(src, dst) for src, dst in zip(original, edited, strict=True) if src != dst
    ]
    targets = {op.source: op.target for op in initial}

    cycles = detect_cycles(initial)
    if not cycles:
        return initial

    plan: list[RenameOp] = []
    in_cycle: set[str] = set()
    taken: set[str] = set()

    for cycle in cycles:
        if not cycle:
            continue
        first = cycle[0]
        temp = _temp_name(os.path.dirname(first), taken)
        in_cycle.update(cycle)

        plan.append(RenameOp(first, temp))
        # Walk backwards so each target is freed before it is reused.
        plan.extend(RenameOp(src, targets[src]) for src in reversed(cycle[1:]))
        plan.append(RenameOp(temp, targets[first]))

    plan.extend(op for op in initial if op.source not in in_cycle)
    return plan


def detect_cycles(plan: Sequence[RenameOp]) -> list[list[str]]:
    """Return every rename cycle reachable from the plan, in discovery order."""
    graph = {op.source: op.target for op in plan}
    visited: set[str] = set()
    on_stack: set[str] = set()
    cycles: list[list[str]] = []

    for op in plan:
        if op.source in visited:
            continue
        path: list[str] = []
        node = op.source
        while True:
            visited.add(node)
            on_stack.add(node)
            path.append(node)
            if node not in graph:
                break
            nxt = graph[node]
            if nxt in on_stack:
                if nxt in path:
                    cycles.append(path[path.index(nxt):])
                # A found cycle leaves its nodes marked, as the search stops here.
                path = []
                break
            if nxt in visited:
                break
            node = nxt
        on_stack.difference_update(path)

    return cycles