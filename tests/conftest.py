"""Test configuration and fixtures."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from upgrade_planner.model.matrix import CompatibilityMatrix
from upgrade_planner.model.policy import PlannerConfig


def _support(platform: str, min_version: str, max_version: str) -> Dict[str, Any]:
    return {"platform": platform, "min_version": min_version, "max_version": max_version}


@pytest.fixture
def scenario_matrix_data() -> Dict[str, Any]:
    """Two Rancher releases with overlapping RKE2 and EKS ranges."""
    return {
        "rancher_manager": {
            "2.8.0": {
                "supported_platforms": [
                    _support("rke2", "1.24.0", "1.27.0"),
                    _support("eks", "1.24.0", "1.27.0"),
                ]
            },
            "2.9.2": {
                "supported_platforms": [
                    _support("rke2", "1.26.0", "1.29.0"),
                    _support("eks", "1.26.0", "1.29.0"),
                ]
            },
        }
    }


@pytest.fixture
def scenario_matrix(scenario_matrix_data) -> CompatibilityMatrix:
    """Compatibility matrix built from the scenario data."""
    return CompatibilityMatrix.model_validate(scenario_matrix_data)


@pytest.fixture
def sample_matrix_data() -> Dict[str, Any]:
    """Several releases, including checkpoints and patch-level max versions."""
    return {
        "rancher_manager": {
            "2.7.0": {
                "supported_platforms": [
                    _support("rke2", "v1.21.0", "v1.24.8"),
                    _support("eks", "v1.21.0", "v1.24.0"),
                ]
            },
            "2.7.5": {
                "supported_platforms": [
                    _support("rke2", "v1.23.0", "v1.26.4"),
                    _support("eks", "v1.23.0", "v1.26.0"),
                ]
            },
            "2.7.9": {
                "supported_platforms": [
                    _support("rke2", "v1.23.0", "v1.27.6"),
                    _support("eks", "v1.23.0", "v1.27.0"),
                ]
            },
            "2.8.0": {
                "supported_platforms": [
                    _support("rke2", "v1.25.0", "v1.27.8"),
                    _support("eks", "v1.25.0", "v1.27.0"),
                ]
            },
            "2.8.8": {
                "supported_platforms": [
                    _support("rke2", "v1.25.0", "v1.28.15"),
                    _support("eks", "v1.25.0", "v1.28.0"),
                ]
            },
        }
    }


@pytest.fixture
def sample_matrix(sample_matrix_data) -> CompatibilityMatrix:
    """Compatibility matrix built from the sample data."""
    return CompatibilityMatrix.model_validate(sample_matrix_data)


@pytest.fixture
def default_config() -> PlannerConfig:
    """Planner config with the built-in policy."""
    return PlannerConfig()


@pytest.fixture
def matrix_file(tmp_path, sample_matrix_data) -> Path:
    """Sample matrix written to a JSON file."""
    path = tmp_path / "upgrade-paths.json"
    path.write_text(json.dumps(sample_matrix_data))
    return path
