"""CI workflow trigger path check."""

from __future__ import annotations

from typing import Any, List, Sequence

import yaml

from ..colors import cyan, yellow
from ..logging import get_logger
from ..models import PackageRef
from ..tree import as_str_list, lookup
from .base import Check

logger = get_logger("checks.workflow")

# PyYAML follows YAML 1.1 and loads a bare ``on:`` key as boolean True.
_ON_KEY = ("on", True)


def trigger_paths(workflow: Any) -> List[str]:
    """Return pull_request trigger paths, falling back to push, else empty."""
    for event in ("pull_request", "push"):
        paths = lookup(workflow, _ON_KEY, event, "paths")
        if paths is not None:
            return as_str_list(paths)
    return []


class WorkflowPathCheck(Check):
    """Ensures each new package directory triggers the CI workflow."""

    name = "workflow"

    def run(self, packages: Sequence[PackageRef]) -> List[str]:
        workflow_file = self.config.workflow_file
        workflow_path = self.config.workflow_path
        if not workflow_path.exists():
            logger.debug("Workflow file %s not found", workflow_path)
            return [f"Workflow file not found at {cyan(workflow_file)}. Skipping check."]

        workflow = yaml.safe_load(workflow_path.read_text(encoding="utf-8"))
        paths = trigger_paths(workflow)
        logger.debug("Workflow trigger paths: %s", ", ".join(paths) or "(none)")

        warnings: List[str] = []
        for package in packages:
            expected = f"{package.path}/**"
            if expected in paths:
                continue
            warnings.append(
                f"The new service {cyan(package.name)} is not added to the CI workflow "
                f"paths in {cyan(workflow_file)}.\n"
                f"  > Please add {yellow(repr(expected))} to the 'paths' list."
            )
        return warnings
