"""Kubernetes version windows between two Rancher releases."""

from typing import Dict, List, Optional

import semver

from ..model.matrix import CompatibilityMatrix, PlatformSupport
from ..utils.logger import get_logger
from ..utils.versions import try_parse_version, version_key

logger = get_logger(__name__)


def expand_range(support: PlatformSupport) -> List[semver.Version]:
    """Every minor version boundary of a support range.

    The exact min and max versions are kept as given, with one synthesized
    ``major.minor.0`` version for each minor release strictly between them.
    Unparsable or inverted ranges produce nothing.
    """
    min_version = try_parse_version(support.min_version)
    max_version = try_parse_version(support.max_version)
    if min_version is None or max_version is None:
        logger.warning(
            f"Skipping {support.platform} range {support.min_version} - {support.max_version}: "
            "unparsable version"
        )
        return []

    if min_version > max_version:
        logger.warning(
            f"Skipping {support.platform} range {support.min_version} - {support.max_version}: "
            "min version is greater than max version"
        )
        return []

    versions = [min_version]
    if max_version != min_version:
        versions.append(max_version)

    current = min_version
    while True:
        current = semver.Version(current.major, current.minor + 1, 0)
        if current > max_version:
            break
        versions.append(current)

    return versions


class RangeExpander:
    """Computes the Kubernetes versions reachable between two Rancher releases."""

    def __init__(self, matrix: CompatibilityMatrix):
        self.matrix = matrix

    def expand(self, from_version: str, to_version: str, platform: str) -> List[semver.Version]:
        """Sorted, deduplicated Kubernetes versions spanned by both support ranges."""
        by_key: Dict[str, semver.Version] = {}

        for rancher_version in (from_version, to_version):
            support: Optional[PlatformSupport] = self.matrix.support_for(rancher_version, platform)
            if support is None:
                logger.debug(f"Rancher {rancher_version} has no support entry for {platform}")
                continue

            for version in expand_range(support):
                by_key[version_key(version)] = version

        return sorted(by_key.values())
