"""Plan service used by callers of the planning engine."""

import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..errors import UpgradePlannerError
from ..model.matrix import CompatibilityMatrix
from ..model.plan import UpgradePlan
from ..model.policy import PlannerConfig
from ..upgrade import UpgradePlanner, select_checkpoints
from ..utils.logger import get_logger
from .loader import load_config, load_matrix
from .observer import PlanObserver

logger = get_logger(__name__)


class PlanService:
    """Serves upgrade plans from a compatibility matrix loaded once."""

    def __init__(
        self,
        matrix: CompatibilityMatrix,
        config: Optional[PlannerConfig] = None,
        observer: Optional[PlanObserver] = None,
    ):
        self.matrix = matrix
        self.config = config or PlannerConfig()
        self.observer = observer or PlanObserver()
        self.planner = UpgradePlanner(matrix, self.config)
        self._known_versions = matrix.versions()

    @classmethod
    def from_files(
        cls,
        matrix_path: Optional[Union[str, Path]] = None,
        config_path: Optional[Union[str, Path]] = None,
        observer: Optional[PlanObserver] = None,
    ) -> "PlanService":
        """Build a service from the matrix and config files."""
        return cls(load_matrix(matrix_path), load_config(config_path), observer)

    @property
    def known_versions(self) -> List[str]:
        return list(self._known_versions)

    def checkpoints(self) -> List[str]:
        """Checkpoint Rancher versions of the loaded matrix."""
        return select_checkpoints(self._known_versions, self.config.checkpoints)

    def plan(self, platform: str, rancher: str, kubernetes: str) -> UpgradePlan:
        """Plan an upgrade, notifying the observer around the request."""
        self.observer.request_started(platform, rancher, kubernetes)
        started = time.perf_counter()
        error = None

        try:
            return self.planner.plan_upgrade(rancher, kubernetes, platform, self._known_versions)
        except UpgradePlannerError as e:
            error = e
            logger.error(f"Failed to plan upgrade for {platform} {rancher}/{kubernetes}: {e}")
            raise
        finally:
            self.observer.request_finished(time.perf_counter() - started, error)

    def plan_response(self, platform: str, rancher: str, kubernetes: str) -> Dict[str, Any]:
        """Plan an upgrade and return the JSON response body."""
        try:
            plan = self.plan(platform, rancher, kubernetes)
        except UpgradePlannerError as e:
            return {"error": str(e)}
        return plan.to_response()
