"""Data models for the upgrade planner."""

from .export import PlanFormat
from .matrix import CompatibilityMatrix, ManagerRelease, Platform, PlatformSupport
from .plan import StepType, UpgradePlan, UpgradeStep
from .policy import CheckpointPolicy, PlannerConfig, SkipPolicy, SkipStrategy

__all__ = [
    "PlanFormat",
    "CompatibilityMatrix",
    "ManagerRelease",
    "Platform",
    "PlatformSupport",
    "StepType",
    "UpgradePlan",
    "UpgradeStep",
    "CheckpointPolicy",
    "PlannerConfig",
    "SkipPolicy",
    "SkipStrategy",
]
