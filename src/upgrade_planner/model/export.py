"""Export-related models."""

from enum import Enum


class PlanFormat(str, Enum):
    """Supported plan output formats."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
