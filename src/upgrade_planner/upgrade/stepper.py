"""Kubernetes upgrade sequencing under a minor version skip limit."""

from typing import List, Optional, Sequence

import semver

from ..model.plan import UpgradeStep
from ..model.policy import SkipPolicy, SkipStrategy
from ..utils.logger import get_logger
from ..utils.versions import format_runtime_version, try_parse_version

logger = get_logger(__name__)


class RuntimeStepper:
    """Walks a Kubernetes version forward through a candidate list."""

    def __init__(self, policy: SkipPolicy):
        self.policy = policy

    def next_version(
        self, current: semver.Version, candidates: Sequence[semver.Version]
    ) -> Optional[semver.Version]:
        """Pick the next version to upgrade to, or None when nothing is reachable.

        Candidates must be sorted ascending. Scanning stops at the first
        candidate whose minor version is beyond the skip limit.
        """
        max_allowed_minor = current.minor + self.policy.max_minor_skip

        candidate = None
        for version in candidates:
            if version <= current:
                continue
            if version.minor > max_allowed_minor:
                break

            candidate = version
            if self.policy.strategy == SkipStrategy.FIRST:
                break

        return candidate

    def steps(
        self, current: str, candidates: Sequence[semver.Version], platform: str
    ) -> List[UpgradeStep]:
        """Kubernetes upgrade steps from the current version to the highest reachable one."""
        current_version = try_parse_version(current)
        if current_version is None:
            logger.warning(f"Cannot parse Kubernetes version '{current}', skipping runtime upgrades")
            return []

        versions = list(candidates)
        if current_version not in versions:
            versions.append(current_version)
            versions.sort()

        upgrades = []
        while True:
            next_version = self.next_version(current_version, versions)
            if next_version is None:
                break

            step = UpgradeStep.kubernetes(
                platform=platform,
                from_version=format_runtime_version(current_version),
                to_version=format_runtime_version(next_version),
            )
            logger.debug(f"{platform}: {step.from_version} -> {step.to_version}")
            upgrades.append(step)
            current_version = next_version

        return upgrades
