"""Rancher Manager and Kubernetes upgrade path planner."""

__version__ = "0.1.0"
