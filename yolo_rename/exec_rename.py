"""
Apply rename plans to disk.

Moves never overwrite: an occupied destination is a MoveFailed unless the
occupant is itself waiting to be moved by the same plan, in which case every
source is staged under a temporary name first.
"""

import os
from typing import List, Tuple

from .errors import MoveFailed
from .plan_rename import RenamePlan

STAGING_SUFFIX = '.renaming'


def same_path(a: str, b: str) -> bool:
    return os.path.abspath(a) == os.path.abspath(b)


def move_file(src: str, dst: str) -> None:
    """os.rename that refuses to replace an existing file."""
    if os.path.exists(dst):
        raise MoveFailed(src, dst, "destination already exists")
    try:
        os.rename(src, dst)
    except OSError as e:
        raise MoveFailed(src, dst, str(e)) from e


def staging_path(src: str) -> str:
    folder, fname = os.path.split(src)
    return os.path.join(folder, f".{fname}{STAGING_SUFFIX}")


def _needs_staging(moves: RenamePlan) -> bool:
    sources = {os.path.abspath(src) for src, _ in moves}
    return any(os.path.abspath(dst) in sources for _, dst in moves)


def check_targets(plan: RenamePlan) -> None:
    """Raise MoveFailed if a destination is held by a file the plan does not move away."""
    moves = [(src, dst) for src, dst in plan if not same_path(src, dst)]
    sources = {os.path.abspath(src) for src, _ in moves}
    for src, dst in moves:
        if os.path.exists(dst) and os.path.abspath(dst) not in sources:
            raise MoveFailed(src, dst, "destination already exists")


def execute_plan(plan: RenamePlan, kind: str = 'File', dry_run: bool = False) -> int:
    """
    Move every (source, destination) pair of `plan` in order.

    Each move is printed as `<kind>: <old> -> <new>`. Destinations held by
    files outside the plan fail before anything moves; any later failure
    raises MoveFailed and moves already done stay done. Returns the number of
    files moved.
    """
    moves = [(src, dst) for src, dst in plan if not same_path(src, dst)]

    if dry_run:
        for src, dst in moves:
            print(f"[DRY RUN] {kind}: {os.path.basename(src)} -> {os.path.basename(dst)}")
        return len(moves)

    check_targets(moves)

    # (current location, destination, original name)
    pending: List[Tuple[str, str, str]] = [(src, dst, os.path.basename(src)) for src, dst in moves]
    if _needs_staging(moves):
        staged = []
        for src, dst, old_name in pending:
            tmp = staging_path(src)
            move_file(src, tmp)
            staged.append((tmp, dst, old_name))
        pending = staged

    for src, dst, old_name in pending:
        move_file(src, dst)
        print(f"{kind}: {old_name} -> {os.path.basename(dst)}")

    return len(pending)
