"""Central error types used across the package."""

from __future__ import annotations


class ScenarioError(RuntimeError):
    """Base error for scenario modification failures."""


class TimeRangeError(ScenarioError, ValueError):
    """Raised when a service period time falls outside its allowed window."""


class InvalidGeometryError(ScenarioError, ValueError):
    """Raised when line geometry input cannot be interpreted."""


class InvalidTripPatternError(ScenarioError, ValueError):
    """Raised when a trip pattern cannot be finalized from its current state."""


__all__ = [
    "ScenarioError",
    "TimeRangeError",
    "InvalidGeometryError",
    "InvalidTripPatternError",
]
