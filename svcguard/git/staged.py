"""Staged file inspection utilities."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, List

from ..logging import get_logger

logger = get_logger("git")

_ADDED_FILES_ARGS = ("git", "diff", "--cached", "--name-only", "--diff-filter=A")


class GitCommandError(RuntimeError):
    """Raised when a git invocation fails or git is unavailable."""


class StagedFileLister:
    """Lists files newly added in the pending commit."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def list_added_files(self, repo_path: str | Path) -> List[str]:
        """Return paths with an ``A`` status in the index, in git's order.

        Raises GitCommandError when git exits non-zero, for example outside a
        repository.
        """
        output = self._run(_ADDED_FILES_ARGS, cwd=Path(repo_path))
        return [
            line.strip().replace("\\", "/")
            for line in output.splitlines()
            if line.strip()
        ]

    def added_files_or_empty(self, repo_path: str | Path) -> List[str]:
        """Like list_added_files but treats a git failure as "nothing added"."""
        try:
            return self.list_added_files(repo_path)
        except GitCommandError as exc:
            logger.error("Error getting staged files: %s", exc)
            return []

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        command = list(args)
        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd),
                check=True,
                text=True,
                capture_output=True,
            )
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise GitCommandError(f"{' '.join(command)} failed: {detail}") from exc
        except OSError as exc:
            raise GitCommandError(f"{' '.join(command)} failed: {exc}") from exc
        return completed.stdout
