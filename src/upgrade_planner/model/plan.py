"""Upgrade plan models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StepType(str, Enum):
    """Kind of upgrade operation."""

    RANCHER = "Rancher"
    KUBERNETES = "Kubernetes"


class UpgradeStep(BaseModel):
    """A single upgrade operation, applied in plan order."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    type: StepType
    platform: Optional[str] = None
    from_version: str = Field(alias="from")
    to_version: str = Field(alias="to")

    @classmethod
    def rancher(cls, from_version: str, to_version: str) -> "UpgradeStep":
        return cls(type=StepType.RANCHER, from_version=from_version, to_version=to_version)

    @classmethod
    def kubernetes(cls, platform: str, from_version: str, to_version: str) -> "UpgradeStep":
        return cls(
            type=StepType.KUBERNETES,
            platform=platform,
            from_version=from_version,
            to_version=to_version,
        )

    @property
    def is_rancher(self) -> bool:
        return self.type == StepType.RANCHER

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the wire field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UpgradePlan(BaseModel):
    """Ordered Rancher and Kubernetes upgrade steps for one request."""

    platform: str
    current_rancher: str
    current_kubernetes: str
    upgrade_path: List[UpgradeStep] = Field(default_factory=list)

    @property
    def rancher_steps(self) -> List[UpgradeStep]:
        return [step for step in self.upgrade_path if step.is_rancher]

    @property
    def kubernetes_steps(self) -> List[UpgradeStep]:
        return [step for step in self.upgrade_path if not step.is_rancher]

    @property
    def final_rancher(self) -> str:
        """Rancher version once every step has been applied."""
        steps = self.rancher_steps
        return steps[-1].to_version if steps else self.current_rancher

    @property
    def final_kubernetes(self) -> str:
        """Kubernetes version once every step has been applied."""
        steps = self.kubernetes_steps
        return steps[-1].to_version if steps else self.current_kubernetes

    @property
    def is_empty(self) -> bool:
        return not self.upgrade_path

    def to_response(self) -> Dict[str, Any]:
        """Body returned to API callers."""
        return {"upgrade_path": [step.to_dict() for step in self.upgrade_path]}
