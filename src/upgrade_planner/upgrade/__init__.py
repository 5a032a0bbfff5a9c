"""Rancher and Kubernetes upgrade path planning."""

from .checkpoints import select_checkpoints
from .expander import RangeExpander, expand_range
from .planner import UpgradePlanner
from .stepper import RuntimeStepper

__all__ = ["UpgradePlanner", "RangeExpander", "RuntimeStepper", "expand_range", "select_checkpoints"]
