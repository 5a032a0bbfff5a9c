"""YAML exporter."""

import yaml
from pathlib import Path

from ..model.plan import UpgradePlan
from ..utils.logger import get_logger
from .base import Exporter

logger = get_logger(__name__)


class YamlExporter(Exporter):
    """Export plans as YAML files."""

    extension = "yaml"

    def export(self, plan: UpgradePlan, name: str) -> Path:
        """Export a plan to a YAML file."""
        filepath = self.filepath(name)

        with open(filepath, "w") as f:
            yaml.dump(self.clean_plan(plan), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Exported {len(plan.upgrade_path)} step(s) to {filepath}")
        return filepath
