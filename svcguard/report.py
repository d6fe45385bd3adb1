"""Commit report rendering and exit-code gate."""

from __future__ import annotations

from typing import Callable, List

from .colors import cyan, red, yellow
from .models import GuardResult

_RULE = "=" * 61
_HEADER = " ATTENTION ".center(61, "=")


class Reporter:
    """Prints the outcome of a run and decides whether the commit proceeds."""

    def __init__(self, emit: Callable[[str], None] | None = None) -> None:
        self._emit = emit or print

    def render(self, result: GuardResult) -> List[str]:
        """Return the report lines for ``result`` (empty when nothing was added)."""
        if not result.packages:
            return []

        lines = ["", cyan(f"Checking {len(result.packages)} new JS service(s)/lib(s)...")]
        warnings = result.warnings
        if not warnings:
            lines.append("✅ All checks passed.")
            return lines

        lines.append("")
        lines.append(yellow(_HEADER))
        lines.append(yellow("Your commit contains new services/libs with configuration issues:"))
        lines.append("")
        for warning in warnings:
            lines.append(f"- {warning}")
            lines.append("")
        lines.append(yellow(_RULE))
        lines.append("")
        lines.append(f"{red('Commit ABORTED.')} Please fix the issues above and try again.")
        return lines

    def report(self, result: GuardResult) -> int:
        """Emit the report and return the process exit status."""
        for line in self.render(result):
            self._emit(line)
        return result.exit_code


__all__ = ["Reporter"]
