"""JSON exporter."""

import json
from pathlib import Path

from ..model.plan import UpgradePlan
from ..utils.logger import get_logger
from .base import Exporter

logger = get_logger(__name__)


class JsonExporter(Exporter):
    """Export plans as JSON files."""

    extension = "json"

    def export(self, plan: UpgradePlan, name: str) -> Path:
        """Export a plan to a JSON file."""
        filepath = self.filepath(name)

        with open(filepath, "w") as f:
            json.dump(self.clean_plan(plan), f, indent=2)

        logger.info(f"Exported {len(plan.upgrade_path)} step(s) to {filepath}")
        return filepath
