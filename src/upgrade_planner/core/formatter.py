"""Upgrade plan rendering."""

import json
from typing import List

import yaml

from ..model.export import PlanFormat
from ..model.plan import UpgradePlan

NO_PLAN_MESSAGE = "No upgrade path found for the provided input."


def format_plan(plan: UpgradePlan, output_format: PlanFormat) -> str:
    """Render a plan as text, JSON or YAML."""
    if output_format == PlanFormat.JSON:
        return json.dumps(plan.to_response(), indent=2)
    elif output_format == PlanFormat.YAML:
        return yaml.dump(plan.to_response(), default_flow_style=False, sort_keys=False)
    else:
        return format_text_plan(plan)


def format_text_plan(plan: UpgradePlan) -> str:
    """Format a plan as human-readable text, one section per Rancher upgrade."""
    lines: List[str] = []
    lines.append("Upgrade Plan")
    lines.append(
        f"Platform: {plan.platform}, Rancher {plan.current_rancher}, "
        f"Kubernetes {plan.current_kubernetes}"
    )

    if plan.is_empty:
        lines.append(NO_PLAN_MESSAGE)
        return "\n".join(lines)

    for step in plan.upgrade_path:
        if step.is_rancher:
            lines.append("-" * 40)
            lines.append(f"Rancher from {step.from_version} -> {step.to_version}")
        else:
            lines.append(f"{step.platform} from {step.from_version} -> {step.to_version}")

    return "\n".join(lines)
