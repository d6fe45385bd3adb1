"""Core data models shared across svcguard components."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PackageRef:
    """A package directory introduced by the pending commit."""

    name: str
    path: str

    @classmethod
    def from_manifest(cls, manifest_path: str) -> "PackageRef":
        """Build a reference from the path of the package's package.json."""
        directory = manifest_path.rsplit("/", 1)[0] if "/" in manifest_path else ""
        name = directory.rsplit("/", 1)[-1]
        return cls(name=name, path=directory)


@dataclass
class CheckResult:
    """Warnings produced by a single consistency check."""

    name: str
    warnings: List[str] = field(default_factory=list)


@dataclass
class GuardResult:
    """Outcome of one pre-commit run."""

    packages: List[PackageRef] = field(default_factory=list)
    checks: List[CheckResult] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        return [warning for check in self.checks for warning in check.warnings]

    @property
    def passed(self) -> bool:
        return not self.warnings

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
