"""Base exporter class."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

from ..model.plan import UpgradePlan


class Exporter(ABC):
    """Base class for plan exporters."""

    extension = ""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @abstractmethod
    def export(self, plan: UpgradePlan, name: str) -> Path:
        """Write a plan to a file and return its path."""
        pass

    def filepath(self, name: str) -> Path:
        return self.output_dir / f"{name}.{self.extension}"

    def clean_plan(self, plan: UpgradePlan) -> Dict[str, Any]:
        """Plan document with the request inputs alongside the steps."""
        data = {
            "platform": plan.platform,
            "current_rancher": plan.current_rancher,
            "current_kubernetes": plan.current_kubernetes,
        }
        data.update(plan.to_response())
        return data
