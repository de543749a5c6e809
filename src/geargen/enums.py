"""Type-safe enums for the gear calculator."""

from enum import Enum


class GearKind(Enum):
    """Gear family"""
    SPUR = "spur"
    HELICAL = "helical"
    BEVEL = "bevel"
    WORM = "worm"
    RACK = "rack"
    INTERNAL = "internal"
    PLANETARY = "planetary"


class Quality(Enum):
    """Sampling tier for tooth boundaries.

    The number of involute samples per flank is looked up in
    ``calculator.constants.QUALITY_STEPS``.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PointKind(Enum):
    """Which boundary segment a profile point belongs to"""
    # Single tooth (external and internal)
    ROOT_START = "root-start"
    ROOT_BOTTOM = "root-bottom"
    FLANK_BOTTOM = "flank-bottom"
    TIP = "tip"
    FLANK_TOP = "flank-top"
    ROOT_TOP = "root-top-connection"
    ROOT_END = "root-end"

    # Full internal ring
    FLANK_LEFT = "flank-left"
    FLANK_RIGHT = "flank-right"
    ROOT = "root"

    # Rack trapezoid
    CORNER = "corner"
