"""Root package.json script registry check."""

from __future__ import annotations

import json
from typing import Dict, List, Sequence

from ..colors import cyan, yellow
from ..logging import get_logger
from ..models import PackageRef
from ..tree import as_dict
from .base import Check

logger = get_logger("checks.scripts")


class RootScriptCheck(Check):
    """Ensures the root manifest has a script for every required prefix."""

    name = "scripts"

    def run(self, packages: Sequence[PackageRef]) -> List[str]:
        scripts = self._load_scripts()
        manifest_name = self.config.root_manifest
        warnings: List[str] = []
        for package in packages:
            for prefix in self.config.required_script_prefixes:
                expected = f"{prefix}{package.name}"
                # An empty command is as good as no entry.
                if scripts.get(expected):
                    continue
                warnings.append(
                    f"The root {cyan(manifest_name)} is missing the script: {yellow(expected)}."
                )
        return warnings

    def _load_scripts(self) -> Dict[str, object]:
        manifest_path = self.config.root_manifest_path
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        scripts = as_dict(as_dict(manifest).get("scripts"))
        logger.debug("Loaded %d root scripts from %s", len(scripts), manifest_path)
        return scripts
