"""
Engineering constants for gear geometry calculations.

This module centralizes the numerical constants used by the calculator and
validation modules. Each constant is documented with its source (ISO
standard or engineering practice).

MODIFICATION GUIDELINES:
- Never change ISO constants without updating the standard reference
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_MM, _DEG)

Constants are grouped by category:
- ISO 53: Basic rack tooth proportions
- ISO 54: Standard modules
- Sampling: Quality tiers for profile tracing
- Validation limits
- Parameter groups
"""

from typing import Dict, Tuple

# =============================================================================
# ISO 53 - Basic Rack Tooth Proportions
# =============================================================================

# Addendum and dedendum as multiples of module
ADDENDUM_COEFF_DEFAULT: float = 1.0
DEDENDUM_COEFF_DEFAULT: float = 1.25   # 1.0 + 0.25 bottom clearance

# Standard pressure angles (20° is the ISO 53 reference profile)
STANDARD_PRESSURE_ANGLES_DEG: Tuple[float, ...] = (14.5, 20.0, 25.0)
REFERENCE_PRESSURE_ANGLE_DEG: float = 20.0

# Internal gear rim: material outside the root circle, as multiple of module
RIM_THICKNESS_FACTOR: float = 2.0

# =============================================================================
# ISO 54 / DIN 780 - Standard Modules
# =============================================================================

STANDARD_MODULES_MM: Tuple[float, ...] = (
    0.3, 0.4, 0.5, 0.6, 0.7, 0.75, 0.8, 0.9, 1.0,
    1.125, 1.25, 1.375, 1.5, 1.75, 2.0, 2.25, 2.5, 2.75,
    3.0, 3.5, 4.0, 4.5, 5.0, 5.5, 6.0, 7.0, 8.0, 9.0, 10.0,
    11.0, 12.0, 14.0, 16.0, 18.0, 20.0, 22.0, 25.0
)

# =============================================================================
# Sampling
# =============================================================================

# Involute samples per flank for each quality tier
QUALITY_STEPS: Dict[str, int] = {
    "low": 3,
    "medium": 8,
    "high": 16,
}

# Tip arc never uses fewer than this many segments
MIN_TIP_STEPS: int = 2

# =============================================================================
# Validation Limits
# =============================================================================

# Below this the base/root relationship degenerates
MIN_TEETH: int = 4

# Planetary trains need at least three planets to be self-centering
MIN_PLANET_COUNT: int = 3

# Helical gears beyond this are impractical (axial thrust)
HELIX_ANGLE_MAX_DEG: float = 45.0

# Worm lead angle practical range (same limits as DIN 3975 §4.2)
LEAD_ANGLE_MIN_DEG: float = 1.0
LEAD_ANGLE_MAX_DEG: float = 45.0

# =============================================================================
# Parameter Groups
# =============================================================================

# Form fields that are reset together (defaults live on the io.models records)
PARAMETER_GROUPS: Dict[str, Tuple[str, ...]] = {
    "basic": ("module", "teeth", "pressure_angle"),
    "body": ("face_width", "hub_diameter", "bore_diameter"),
    "appearance": ("quality",),
}
