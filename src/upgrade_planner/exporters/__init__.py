"""Plan exporters."""

from pathlib import Path

from ..model.export import PlanFormat
from .base import Exporter
from .json_exporter import JsonExporter
from .yaml_exporter import YamlExporter

EXPORTERS = {
    PlanFormat.JSON: JsonExporter,
    PlanFormat.YAML: YamlExporter,
}


def get_exporter(output_format: PlanFormat, output_dir: Path) -> Exporter:
    """Exporter for a format; text plans are saved as YAML."""
    exporter_cls = EXPORTERS.get(output_format, YamlExporter)
    return exporter_cls(output_dir)


__all__ = ["Exporter", "YamlExporter", "JsonExporter", "get_exporter"]
