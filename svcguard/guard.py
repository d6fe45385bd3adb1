"""Pre-commit pipeline wiring staged files, detection and checks."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .checks import Check, default_checks
from .config import GuardConfig, load_config
from .detector import find_new_packages
from .git.staged import StagedFileLister
from .logging import get_logger
from .models import CheckResult, GuardResult


class Guard:
    """Runs every consistency check against the packages added by a commit."""

    def __init__(
        self,
        lister: Optional[StagedFileLister] = None,
        checks_factory: Optional[Callable[[GuardConfig], Sequence[Check]]] = None,
    ) -> None:
        self.lister = lister or StagedFileLister()
        self.checks_factory = checks_factory or default_checks
        self.logger = get_logger("guard")

    def run(self, repo_path: str | Path, config: Optional[GuardConfig] = None) -> GuardResult:
        """Inspect the pending commit in ``repo_path``.

        Errors from the checks (unparseable workflow, missing or invalid root
        manifest) propagate to the caller. The CLI reports them as a one-line
        failure with exit status 1 instead of a traceback.
        """
        config = config or load_config(Path(repo_path))
        staged = self.lister.added_files_or_empty(config.root)
        self.logger.debug("Staged additions: %s", ", ".join(staged) or "(none)")

        packages = find_new_packages(staged, config.package_pattern)
        if not packages:
            self.logger.debug("No new packages detected; nothing to check")
            return GuardResult()
        self.logger.debug(
            "Detected packages: %s", ", ".join(package.path for package in packages)
        )

        results: List[CheckResult] = []
        for check in self.checks_factory(config):
            warnings = check.run(packages)
            self.logger.debug("Check %s produced %d warning(s)", check.name, len(warnings))
            results.append(CheckResult(name=check.name, warnings=warnings))
        return GuardResult(packages=packages, checks=results)


__all__ = ["Guard"]
