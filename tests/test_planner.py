"""Test upgrade path planning."""

import pytest

from upgrade_planner.errors import InvalidVersionError
from upgrade_planner.model.policy import CheckpointPolicy, PlannerConfig, SkipPolicy
from upgrade_planner.upgrade.planner import UpgradePlanner
from upgrade_planner.utils.versions import parse_version


def _path(plan):
    return [(step.type, step.from_version, step.to_version) for step in plan.upgrade_path]


class TestScenario:
    def test_skip_platform_scenario(self, scenario_matrix):
        """Test RKE2 moves two minor versions per Kubernetes upgrade."""
        planner = UpgradePlanner(scenario_matrix)
        plan = planner.plan_upgrade("2.8.0", "1.24.0", "rke2", ["2.8.0", "2.9.2"])

        assert _path(plan) == [
            ("Rancher", "2.8.0", "2.9.2"),
            ("Kubernetes", "v1.24.0", "v1.26.0"),
            ("Kubernetes", "v1.26.0", "v1.28.0"),
            ("Kubernetes", "v1.28.0", "v1.29.0"),
        ]

    def test_no_skip_platform_scenario(self, scenario_matrix):
        """Test EKS moves one minor version per Kubernetes upgrade."""
        planner = UpgradePlanner(scenario_matrix)
        plan = planner.plan_upgrade("2.8.0", "1.24.0", "eks", ["2.8.0", "2.9.2"])

        assert _path(plan) == [
            ("Rancher", "2.8.0", "2.9.2"),
            ("Kubernetes", "v1.24.0", "v1.25.0"),
            ("Kubernetes", "v1.25.0", "v1.26.0"),
            ("Kubernetes", "v1.26.0", "v1.27.0"),
            ("Kubernetes", "v1.27.0", "v1.28.0"),
            ("Kubernetes", "v1.28.0", "v1.29.0"),
        ]

    def test_platform_absent_from_matrix(self, scenario_matrix):
        """Test an unsupported platform only gets the Rancher upgrade."""
        planner = UpgradePlanner(scenario_matrix)
        plan = planner.plan_upgrade("2.8.0", "1.24.0", "gke", ["2.8.0", "2.9.2"])

        assert _path(plan) == [("Rancher", "2.8.0", "2.9.2")]

    def test_known_versions_default_to_matrix(self, scenario_matrix):
        """Test the matrix versions are used when none are supplied."""
        plan = UpgradePlanner(scenario_matrix).plan_upgrade("2.8.0", "1.24.0", "rke2")
        assert plan.final_rancher == "2.9.2"
        assert plan.final_kubernetes == "v1.29.0"


class TestUpgradePlanner:
    def setup_method(self):
        """Set up test fixtures."""
        self.versions = ["2.7.0", "2.7.5", "2.7.9", "2.8.0", "2.8.8"]

    def test_plan_through_checkpoints(self, sample_matrix):
        """Test the plan visits every checkpoint and upgrades Kubernetes in between."""
        plan = UpgradePlanner(sample_matrix).plan_upgrade("2.7.0", "v1.24.8", "rke2", self.versions)

        assert _path(plan) == [
            ("Rancher", "2.7.0", "2.7.5"),
            ("Kubernetes", "v1.24.8", "v1.26.4"),
            ("Rancher", "2.7.5", "2.7.9"),
            ("Kubernetes", "v1.26.4", "v1.27.6"),
            ("Rancher", "2.7.9", "2.8.8"),
            ("Kubernetes", "v1.27.6", "v1.28.15"),
        ]

    def test_no_skip_plan_through_checkpoints(self, sample_matrix):
        """Test a no-skip platform across several Rancher upgrades."""
        plan = UpgradePlanner(sample_matrix).plan_upgrade("2.7.0", "1.22.0", "eks", self.versions)

        assert len(plan.rancher_steps) == 3
        assert [step.to_version for step in plan.kubernetes_steps] == [
            "v1.23.0",
            "v1.24.0",
            "v1.25.0",
            "v1.26.0",
            "v1.27.0",
            "v1.28.0",
        ]

    def test_rancher_steps_cover_checkpoints(self, sample_matrix):
        """Test Rancher steps are increasing and cover the newer checkpoints."""
        plan = UpgradePlanner(sample_matrix).plan_upgrade("2.7.5", "1.26.0", "rke2", self.versions)

        targets = [step.to_version for step in plan.rancher_steps]
        assert targets == ["2.7.9", "2.8.8"]
        parsed = [parse_version(t) for t in targets]
        assert parsed == sorted(parsed)
        assert plan.rancher_steps[0].from_version == "2.7.5"
        assert plan.rancher_steps[1].from_version == "2.7.9"

    def test_runtime_steps_respect_skip_limit(self, sample_matrix, default_config):
        """Test every Kubernetes step moves forward within the platform limit."""
        for platform in ("rke2", "eks"):
            limit = default_config.skip_policy_for(platform).max_minor_skip
            plan = UpgradePlanner(sample_matrix).plan_upgrade(
                "2.7.0", "1.21.0", platform, self.versions
            )
            assert plan.kubernetes_steps
            for step in plan.kubernetes_steps:
                from_version = parse_version(step.from_version)
                to_version = parse_version(step.to_version)
                assert to_version > from_version
                assert to_version.minor - from_version.minor <= limit

    def test_replanning_final_versions_is_empty(self, sample_matrix):
        """Test planning again from the final versions adds nothing."""
        planner = UpgradePlanner(sample_matrix)
        plan = planner.plan_upgrade("2.7.0", "v1.24.8", "rke2", self.versions)
        replan = planner.plan_upgrade(
            plan.final_rancher, plan.final_kubernetes, "rke2", self.versions
        )

        assert replan.is_empty

    @pytest.mark.parametrize("current", ["2.8.8", "2.9.0", "v2.8.8"])
    def test_at_or_past_latest_checkpoint(self, sample_matrix, current):
        """Test no Rancher upgrades when already at the latest checkpoint."""
        plan = UpgradePlanner(sample_matrix).plan_upgrade(current, "1.28.0", "rke2", self.versions)
        assert plan.rancher_steps == []
        assert plan.is_empty

    def test_platform_is_case_folded(self, sample_matrix):
        """Test the platform argument is normalized on the plan and its steps."""
        plan = UpgradePlanner(sample_matrix).plan_upgrade("2.7.0", "1.24.8", "RKE2", self.versions)
        assert plan.platform == "rke2"
        assert {step.platform for step in plan.kubernetes_steps} == {"rke2"}

    def test_invalid_rancher_version(self, sample_matrix):
        """Test an unparsable current Rancher version aborts the plan."""
        with pytest.raises(InvalidVersionError, match="invalid version 'latest'"):
            UpgradePlanner(sample_matrix).plan_upgrade("latest", "1.24.0", "rke2", self.versions)

    def test_invalid_checkpoint_version(self, sample_matrix):
        """Test an unparsable checkpoint version aborts the plan."""
        with pytest.raises(InvalidVersionError):
            UpgradePlanner(sample_matrix).plan_upgrade(
                "2.7.0", "1.24.0", "rke2", self.versions + ["2.8.x.9"]
            )

    def test_invalid_kubernetes_version(self, sample_matrix):
        """Test an unparsable Kubernetes version only drops the runtime steps."""
        plan = UpgradePlanner(sample_matrix).plan_upgrade("2.7.0", "unknown", "rke2", self.versions)

        assert [step.to_version for step in plan.rancher_steps] == ["2.7.5", "2.7.9", "2.8.8"]
        assert plan.kubernetes_steps == []
        assert plan.final_kubernetes == "unknown"

    def test_custom_checkpoint_policy(self, sample_matrix):
        """Test an explicit checkpoint list replaces the built-in rules."""
        config = PlannerConfig(checkpoints=CheckpointPolicy(suffixes=[], milestones=["2.8.0"]))
        plan = UpgradePlanner(sample_matrix, config).plan_upgrade(
            "2.7.0", "1.24.0", "rke2", self.versions
        )

        assert _path(plan)[0] == ("Rancher", "2.7.0", "2.8.0")
        assert len(plan.rancher_steps) == 1

    def test_custom_skip_policy(self, scenario_matrix):
        """Test a configured skip limit applies to its platform."""
        config = PlannerConfig(platform_skips={"eks": SkipPolicy(max_minor_skip=2)})
        plan = UpgradePlanner(scenario_matrix, config).plan_upgrade(
            "2.8.0", "1.24.0", "eks", ["2.8.0", "2.9.2"]
        )

        # first-qualifying strategy still moves one minor at a time when every minor is listed
        assert [step.to_version for step in plan.kubernetes_steps][0] == "v1.25.0"
        assert plan.final_kubernetes == "v1.29.0"
