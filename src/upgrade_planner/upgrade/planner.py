"""Rancher and Kubernetes upgrade path planning."""

from typing import Iterable, Optional

from ..model.matrix import CompatibilityMatrix
from ..model.plan import UpgradePlan, UpgradeStep
from ..model.policy import PlannerConfig
from ..utils.logger import get_logger
from ..utils.versions import normalize_platform, parse_version
from .checkpoints import select_checkpoints
from .expander import RangeExpander
from .stepper import RuntimeStepper

logger = get_logger(__name__)


class UpgradePlanner:
    """Builds the ordered upgrade steps for a Rancher installation.

    The planner walks every checkpoint Rancher release newer than the current
    one. Each transition is followed by the Kubernetes upgrades that the
    platform's skip policy allows inside the two releases' support ranges.
    """

    def __init__(self, matrix: CompatibilityMatrix, config: Optional[PlannerConfig] = None):
        self.matrix = matrix
        self.config = config or PlannerConfig()
        self.expander = RangeExpander(matrix)

    def plan_upgrade(
        self,
        current_rancher: str,
        current_k8s: str,
        platform: str,
        known_versions: Optional[Iterable[str]] = None,
    ) -> UpgradePlan:
        """Plan the upgrade from the current versions to the latest checkpoint.

        Raises InvalidVersionError when the current Rancher version or a
        checkpoint version cannot be parsed.
        """
        platform_key = normalize_platform(platform)
        current_version = parse_version(current_rancher)

        if known_versions is None:
            known_versions = self.matrix.versions()
        checkpoints = select_checkpoints(known_versions, self.config.checkpoints)

        stepper = RuntimeStepper(self.config.skip_policy_for(platform_key))
        plan = UpgradePlan(
            platform=platform_key, current_rancher=current_rancher, current_kubernetes=current_k8s
        )

        for checkpoint in checkpoints:
            next_version = parse_version(checkpoint)
            if next_version <= current_version:
                continue

            plan.upgrade_path.append(UpgradeStep.rancher(current_rancher, checkpoint))

            candidates = self.expander.expand(current_rancher, checkpoint, platform_key)
            k8s_steps = stepper.steps(current_k8s, candidates, platform_key)
            plan.upgrade_path.extend(k8s_steps)
            if k8s_steps:
                current_k8s = k8s_steps[-1].to_version

            current_rancher = checkpoint
            current_version = next_version

        logger.info(
            f"Planned {len(plan.rancher_steps)} Rancher and {len(plan.kubernetes_steps)} "
            f"Kubernetes steps for {platform_key} from Rancher {plan.current_rancher}"
        )
        return plan
