"""Exceptions raised by the upgrade planner."""


class UpgradePlannerError(Exception):
    """Base class for planner errors."""


class InvalidVersionError(UpgradePlannerError, ValueError):
    """A version string could not be parsed as a semantic version."""

    def __init__(self, version: str, reason: str = ""):
        self.version = version
        message = f"invalid version '{version}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MatrixLoadError(UpgradePlannerError):
    """The compatibility matrix could not be loaded."""


class ConfigError(UpgradePlannerError):
    """The planner configuration could not be loaded."""
