"""Core services around the planning engine."""

from .formatter import format_plan
from .loader import load_config, load_matrix
from .observer import PlanObserver, PrometheusObserver
from .service import PlanService

__all__ = [
    "format_plan",
    "load_config",
    "load_matrix",
    "PlanObserver",
    "PrometheusObserver",
    "PlanService",
]
