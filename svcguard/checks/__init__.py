"""Consistency checks run against newly added packages."""

from typing import List

from ..config import GuardConfig
from .base import Check
from .scripts import RootScriptCheck
from .workflow import WorkflowPathCheck


def default_checks(config: GuardConfig) -> List[Check]:
    """Return the checks in reporting order: workflow first, then scripts."""
    return [WorkflowPathCheck(config), RootScriptCheck(config)]


__all__ = ["Check", "RootScriptCheck", "WorkflowPathCheck", "default_checks"]
