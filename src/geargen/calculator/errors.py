"""
Typed errors for gear geometry calculations.

All errors are caller-input errors detected before any sampling begins.
They subclass ValueError so callers that only care about "bad input" can
catch that.
"""

from typing import Any, Optional


class GearGeometryError(ValueError):
    """Base class for invalid gear parameters."""

    code: str = "GEAR_GEOMETRY_ERROR"

    def __init__(self, message: str, value: Optional[Any] = None):
        super().__init__(message)
        self.value = value


class InvalidModule(GearGeometryError):
    """Module is not a positive finite number."""
    code = "INVALID_MODULE"


class InvalidToothCount(GearGeometryError):
    """Tooth count is not an integer or is below the minimum."""
    code = "INVALID_TOOTH_COUNT"


class InvalidPressureAngle(GearGeometryError):
    """Pressure angle is outside the open interval (0°, 90°)."""
    code = "INVALID_PRESSURE_ANGLE"


class DegenerateProfile(GearGeometryError):
    """Derived radii would produce an invalid or self-intersecting boundary."""
    code = "DEGENERATE_PROFILE"


class InvalidPlanetaryConfiguration(GearGeometryError):
    """Sun/planet/ring tooth counts or planet count cannot form a train."""
    code = "INVALID_PLANETARY_CONFIGURATION"
