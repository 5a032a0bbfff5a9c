"""Planner policy configuration."""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from ..utils.versions import clean_version, normalize_platform


class SkipStrategy(str, Enum):
    """How the stepper picks among the candidates inside the skip window."""

    FURTHEST = "furthest"
    FIRST = "first"


class SkipPolicy(BaseModel):
    """Maximum minor versions a single Kubernetes upgrade may advance."""

    max_minor_skip: int = Field(default=1, ge=1)
    strategy: SkipStrategy = SkipStrategy.FIRST


class CheckpointPolicy(BaseModel):
    """Rancher releases that every upgrade must pass through."""

    suffixes: List[str] = Field(default_factory=lambda: [".9"])
    milestones: List[str] = Field(default_factory=lambda: ["2.7.5", "2.8.8", "2.9.2"])

    def is_checkpoint(self, version: str) -> bool:
        """Check whether a Rancher version is a checkpoint."""
        if any(version.endswith(suffix) for suffix in self.suffixes):
            return True
        return clean_version(version) in {clean_version(m) for m in self.milestones}


def _default_platform_skips() -> Dict[str, SkipPolicy]:
    # RKE1, RKE2 and K3s tooling can move two minor versions per upgrade
    return {
        "rke1": SkipPolicy(max_minor_skip=2, strategy=SkipStrategy.FURTHEST),
        "rke2": SkipPolicy(max_minor_skip=2, strategy=SkipStrategy.FURTHEST),
        "k3s": SkipPolicy(max_minor_skip=2, strategy=SkipStrategy.FURTHEST),
    }


class PlannerConfig(BaseModel):
    """Policy data consumed by the planner."""

    checkpoints: CheckpointPolicy = Field(default_factory=CheckpointPolicy)
    default_skip: SkipPolicy = Field(default_factory=SkipPolicy)
    platform_skips: Dict[str, SkipPolicy] = Field(default_factory=_default_platform_skips)

    @field_validator("platform_skips")
    @classmethod
    def _normalize_platforms(cls, value: Dict[str, SkipPolicy]) -> Dict[str, SkipPolicy]:
        return {normalize_platform(name): policy for name, policy in value.items()}

    def skip_policy_for(self, platform: str) -> SkipPolicy:
        """Skip policy of a platform, falling back to the default."""
        return self.platform_skips.get(normalize_platform(platform), self.default_skip)
