"""Compatibility matrix models."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.logger import get_logger
from ..utils.versions import normalize_platform, same_version, sort_versions

logger = get_logger(__name__)


class Platform(str, Enum):
    """Known Kubernetes distributions and managed offerings."""

    RKE1 = "rke1"
    RKE2 = "rke2"
    K3S = "k3s"
    EKS = "eks"
    AKS = "aks"
    GKE = "gke"


class PlatformSupport(BaseModel):
    """Kubernetes version range supported on one platform."""

    platform: str
    min_version: str
    max_version: str
    notes: Optional[str] = None

    @property
    def platform_key(self) -> str:
        """Case-folded platform identifier."""
        return normalize_platform(self.platform)


class ManagerRelease(BaseModel):
    """Platforms supported by a single Rancher Manager release."""

    supported_platforms: List[PlatformSupport] = Field(default_factory=list)

    def by_platform(self) -> Dict[str, PlatformSupport]:
        """Map platform identifiers to their support entry, last entry wins."""
        entries: Dict[str, PlatformSupport] = {}
        for support in self.supported_platforms:
            entries[support.platform_key] = support
        return entries

    def duplicate_platforms(self) -> List[str]:
        """Platform identifiers listed more than once."""
        seen = set()
        duplicates = []
        for support in self.supported_platforms:
            key = support.platform_key
            if key in seen and key not in duplicates:
                duplicates.append(key)
            seen.add(key)
        return duplicates


class CompatibilityMatrix(BaseModel):
    """Rancher Manager versions and the Kubernetes ranges they support.

    Built once from the matrix file and never modified afterwards.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    releases: Dict[str, ManagerRelease] = Field(default_factory=dict, alias="rancher_manager")

    @model_validator(mode="after")
    def _warn_duplicate_platforms(self) -> "CompatibilityMatrix":
        for version, release in self.releases.items():
            for platform in release.duplicate_platforms():
                logger.warning(
                    f"Rancher {version} lists platform '{platform}' more than once, "
                    "using the last entry"
                )
        return self

    def _find_release(self, version: str) -> Optional[ManagerRelease]:
        if version in self.releases:
            return self.releases[version]

        for key, release in self.releases.items():
            if same_version(key, version):
                return release
        return None

    def platforms_for(self, version: str) -> List[PlatformSupport]:
        """Support entries of a Rancher version, empty when the version is unknown."""
        release = self._find_release(version)
        if release is None:
            return []
        return list(release.by_platform().values())

    def support_for(self, version: str, platform: str) -> Optional[PlatformSupport]:
        """Support entry of a Rancher version for one platform."""
        release = self._find_release(version)
        if release is None:
            return None
        return release.by_platform().get(normalize_platform(platform))

    def versions(self) -> List[str]:
        """Known Rancher versions sorted by semantic version."""
        return sort_versions(self.releases.keys())
