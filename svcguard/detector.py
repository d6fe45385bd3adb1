"""Detects newly added packages among staged files."""

from __future__ import annotations

import re
from typing import Iterable, List, Set

from .models import PackageRef


def find_new_packages(staged_files: Iterable[str], pattern: re.Pattern[str]) -> List[PackageRef]:
    """Return a PackageRef for every staged manifest matching ``pattern``."""
    packages: List[PackageRef] = []
    seen: Set[str] = set()
    for path in staged_files:
        if path in seen or not pattern.search(path):
            continue
        seen.add(path)
        packages.append(PackageRef.from_manifest(path))
    return packages


__all__ = ["find_new_packages"]
