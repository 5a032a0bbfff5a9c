"""Checkpoint Rancher releases that an upgrade must visit."""

from typing import Iterable, List

from ..model.policy import CheckpointPolicy
from ..utils.versions import parse_version


def select_checkpoints(versions: Iterable[str], policy: CheckpointPolicy) -> List[str]:
    """Checkpoint versions sorted ascending, in normalized form."""
    checkpoints = [parse_version(v) for v in versions if policy.is_checkpoint(v)]
    checkpoints.sort()
    return [str(v) for v in checkpoints]
