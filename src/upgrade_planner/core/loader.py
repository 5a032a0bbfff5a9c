"""Compatibility matrix and planner configuration loading."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigError, InvalidVersionError, MatrixLoadError
from ..model.matrix import CompatibilityMatrix
from ..model.policy import PlannerConfig
from ..utils.logger import get_logger
from ..utils.versions import parse_version

logger = get_logger(__name__)

MATRIX_ENV_VAR = "UPGRADE_PLANNER_MATRIX"
CONFIG_ENV_VAR = "UPGRADE_PLANNER_CONFIG"
DEFAULT_MATRIX_PATH = Path(__file__).resolve().parent.parent / "data" / "upgrade-paths.json"


def _read_document(path: Path) -> Any:
    """Read a JSON or YAML document; JSON is parsed as YAML."""
    with open(path) as f:
        return yaml.safe_load(f)


def resolve_matrix_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Matrix location from the argument, the environment or the bundled file."""
    if path:
        return Path(path)
    env_path = os.environ.get(MATRIX_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_MATRIX_PATH


def parse_matrix(data: Dict[str, Any]) -> CompatibilityMatrix:
    """Validate raw matrix data."""
    if not isinstance(data, dict):
        raise MatrixLoadError("matrix document must be a mapping")

    try:
        matrix = CompatibilityMatrix.model_validate(data)
    except ValidationError as e:
        raise MatrixLoadError(f"invalid matrix data: {e}") from e

    for version in matrix.releases:
        try:
            parse_version(version)
        except InvalidVersionError as e:
            raise MatrixLoadError(f"invalid Rancher version in matrix: {e}") from e

    return matrix


def load_matrix(path: Optional[Union[str, Path]] = None) -> CompatibilityMatrix:
    """Load the compatibility matrix, failing fast on any problem."""
    matrix_path = resolve_matrix_path(path)
    logger.info(f"Loading upgrade paths from {matrix_path}")

    try:
        data = _read_document(matrix_path)
    except OSError as e:
        raise MatrixLoadError(f"failed to load upgrade paths: {e}") from e
    except yaml.YAMLError as e:
        raise MatrixLoadError(f"failed to parse upgrade paths: {e}") from e

    matrix = parse_matrix(data)
    logger.info(f"Loaded {len(matrix.releases)} Rancher versions")
    return matrix


def load_config(path: Optional[Union[str, Path]] = None) -> PlannerConfig:
    """Load the planner policy; defaults apply when no file is configured."""
    if not path:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return PlannerConfig()

    config_path = Path(path)
    logger.info(f"Loading planner config from {config_path}")

    try:
        data = _read_document(config_path)
    except OSError as e:
        raise ConfigError(f"failed to load planner config: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse planner config: {e}") from e

    try:
        return PlannerConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigError(f"invalid planner config: {e}") from e
