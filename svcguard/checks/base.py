"""Base class for commit consistency checks."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..config import GuardConfig
from ..models import PackageRef


class Check(ABC):
    """Contract for checks that validate newly added packages."""

    name: str = "check"

    def __init__(self, config: GuardConfig) -> None:
        self.config = config

    @abstractmethod
    def run(self, packages: Sequence[PackageRef]) -> List[str]:
        """Return one warning per inconsistency found, in a stable order."""
