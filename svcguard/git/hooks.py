"""Installs the svcguard pre-commit hook into a repository."""

from __future__ import annotations

import shlex
import stat
import sys
from pathlib import Path

from .staged import GitCommandError

HOOK_TEMPLATE = """#!/bin/sh
# Installed by svcguard: checks newly added services/libs before committing.
exec {python} -m svcguard.cli check
"""


def render_hook(python: str | None = None) -> str:
    """Return the hook script, pinned to ``python`` (the running interpreter by default)."""
    return HOOK_TEMPLATE.format(python=shlex.quote(python or sys.executable))


def install_hook(repo_path: str | Path, *, force: bool = False) -> Path:
    """Write an executable pre-commit hook and return its path.

    The hook calls the interpreter svcguard is installed into, so it does not
    depend on ``python`` being on the committer's PATH.
    """
    repo = Path(repo_path)
    git_dir = repo / ".git"
    if not git_dir.is_dir():
        raise GitCommandError(f"{repo} is not a Git repository")

    hooks_dir = git_dir / "hooks"
    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path = hooks_dir / "pre-commit"
    if hook_path.exists() and not force:
        raise FileExistsError(
            f"{hook_path} already exists. Re-run with --force to replace it."
        )

    hook_path.write_text(render_hook(), encoding="utf-8")
    mode = hook_path.stat().st_mode
    hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook_path
