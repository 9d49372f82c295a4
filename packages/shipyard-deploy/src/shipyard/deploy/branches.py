"""Branch gating for conditional deployments.

CI runs for every branch, but only some branches should deploy. When the
current branch is not allowed the caller exits quietly with status 0.
"""

from pathlib import Path
from typing import Sequence

from invoke import Context


def branch_in_branches(branch: str, branches: Sequence[str]) -> bool:
    """Return True if branch is one of branches (exact match)."""
    for item in branches:
        if item == branch:
            return True
    return False


def current_branch(c: Context, path: Path | None = None) -> str | None:
    cmd = "git rev-parse --abbrev-ref HEAD"
    if path:
        cmd = f"git -C {path} rev-parse --abbrev-ref HEAD"
    result = c.run(cmd, hide=True, warn=True)
    if result is None or not result.ok:
        return None
    branch = result.stdout.strip()
    # Detached HEAD
    if not branch or branch == "HEAD":
        return None
    return branch
