"""
Gear Calculator - Core Calculations

Pure mathematical functions for involute gear dimensions.
Nothing here keeps state between calls; every function is a deterministic
function of its arguments.

Reference standards:
- ISO 53 (basic rack tooth profile)
- ISO 54 (standard modules)
- ISO 21771 (involute gear geometry)
"""

from math import pi, tan, acos, cos, radians, degrees, isfinite
from typing import Any, Dict

from ..enums import GearKind, Quality
from ..io import GearProfile
from .constants import (
    ADDENDUM_COEFF_DEFAULT,
    DEDENDUM_COEFF_DEFAULT,
    MIN_TEETH,
    STANDARD_MODULES_MM,
)
from .errors import (
    DegenerateProfile,
    InvalidModule,
    InvalidPressureAngle,
    InvalidToothCount,
)

# ISO 54 / DIN 780 standard modules (mm)
STANDARD_MODULES = list(STANDARD_MODULES_MM)


def nearest_standard_module(module: float) -> float:
    """Find nearest ISO standard module"""
    return min(STANDARD_MODULES, key=lambda m: abs(m - module))


def is_standard_module(module: float, tolerance: float = 0.001) -> bool:
    """Check if module is a standard value"""
    nearest = nearest_standard_module(module)
    return abs(module - nearest) < tolerance


# ============================================================================
# Angle math
# ============================================================================

def deg_to_rad(deg: float) -> float:
    return radians(deg)


def rad_to_deg(rad: float) -> float:
    return degrees(rad)


def involute(alpha: float) -> float:
    """
    Involute function.

    inv(α) = tan(α) − α

    Maps a pressure angle to the angle the involute has unwound from the
    base circle.
    """
    return tan(alpha) - alpha


def pressure_angle_at_radius(r: float, base_radius: float) -> float:
    """
    Pressure angle of the involute at radius r.

    α(r) = acos(rb / r)

    Returns 0.0 at or inside the base circle, where the involute does not
    exist. The acos argument is clamped to [-1, 1].
    """
    if r <= base_radius:
        return 0.0
    ratio = max(-1.0, min(1.0, base_radius / r))
    return acos(ratio)


def involute_at_radius(r: float, base_radius: float) -> float:
    """Involute unwind angle at radius r (0.0 inside the base circle)."""
    if r <= base_radius:
        return 0.0
    return involute(pressure_angle_at_radius(r, base_radius))


def tooth_half_angle(
    r: float,
    num_teeth: int,
    base_radius: float,
    involute_alpha: float,
    internal: bool = False,
) -> float:
    """
    Angular half-width of a tooth at radius r.

    External: θ(r) = π/(2z) + inv(α) − inv(r)   (thins outward)
    Internal: θ(r) = π/(2z) − (inv(α) − inv(r)) (thickens outward)

    The radius is clamped to the base circle before the involute is taken,
    so the flank continues radially below it.
    """
    half_thick = pi / (2 * num_teeth)
    inv_r = involute_at_radius(max(r, base_radius), base_radius)
    if internal:
        return half_thick - (involute_alpha - inv_r)
    return half_thick + involute_alpha - inv_r


# ============================================================================
# Input checks
# ============================================================================

def check_module(module: Any) -> float:
    """Return module as float, or raise InvalidModule."""
    if isinstance(module, bool) or not isinstance(module, (int, float)):
        raise InvalidModule(f"Module must be a number, got {module!r}", value=module)
    if not isfinite(module) or module <= 0:
        raise InvalidModule(f"Module must be positive and finite, got {module}", value=module)
    return float(module)


def check_teeth(teeth: Any, minimum: int = MIN_TEETH) -> int:
    """
    Return teeth as int, or raise InvalidToothCount.

    Integral floats (20.0) are accepted; booleans are not.
    """
    if isinstance(teeth, bool):
        raise InvalidToothCount(f"Tooth count must be an integer, got {teeth!r}", value=teeth)
    if isinstance(teeth, float):
        if not teeth.is_integer():
            raise InvalidToothCount(f"Tooth count must be an integer, got {teeth}", value=teeth)
        teeth = int(teeth)
    if not isinstance(teeth, int):
        raise InvalidToothCount(f"Tooth count must be an integer, got {teeth!r}", value=teeth)
    if teeth < minimum:
        raise InvalidToothCount(
            f"Tooth count {teeth} is below the minimum of {minimum}",
            value=teeth
        )
    return teeth


def check_pressure_angle(pressure_angle_deg: Any) -> float:
    """Return pressure angle as float degrees, or raise InvalidPressureAngle."""
    if isinstance(pressure_angle_deg, bool) or not isinstance(pressure_angle_deg, (int, float)):
        raise InvalidPressureAngle(
            f"Pressure angle must be a number, got {pressure_angle_deg!r}",
            value=pressure_angle_deg
        )
    if not isfinite(pressure_angle_deg) or not 0 < pressure_angle_deg < 90:
        raise InvalidPressureAngle(
            f"Pressure angle must be between 0° and 90° (exclusive), got {pressure_angle_deg}°",
            value=pressure_angle_deg
        )
    return float(pressure_angle_deg)


# ============================================================================
# Tooth dimensions
# ============================================================================

def calculate_tooth_dimensions(
    module: float,
    teeth: int,
    pressure_angle_deg: float = 20.0,
    addendum_coeff: float = ADDENDUM_COEFF_DEFAULT,
    dedendum_coeff: float = DEDENDUM_COEFF_DEFAULT,
    internal: bool = False,
) -> Dict[str, Any]:
    """
    Calculate the standard dimensions of an involute gear.

    Formulas:
    - Pitch diameter: d = m × z
    - Base diameter: db = d × cos(α)
    - Tip diameter: da = d + 2m×ha   (internal: d − 2m×ha)
    - Root diameter: df = d − 2m×hf  (internal: d + 2m×hf)
    - Circular pitch: p = π × m

    Args:
        module: Module (mm)
        teeth: Number of teeth
        pressure_angle_deg: Pressure angle (degrees)
        addendum_coeff: Addendum as a multiple of module
        dedendum_coeff: Dedendum as a multiple of module
        internal: Internal (ring) gear; root and tip swap sides of the pitch circle

    Returns:
        Dict with keys matching the GearProfile dimension fields

    Raises:
        InvalidModule, InvalidToothCount, InvalidPressureAngle: Bad inputs
        DegenerateProfile: Radii cannot form a valid tooth
    """
    module = check_module(module)
    teeth = check_teeth(teeth)
    pressure_angle_deg = check_pressure_angle(pressure_angle_deg)

    alpha = radians(pressure_angle_deg)
    addendum = module * addendum_coeff
    dedendum = module * dedendum_coeff

    pitch_diameter = module * teeth
    base_diameter = pitch_diameter * cos(alpha)
    if internal:
        outer_diameter = pitch_diameter - 2 * addendum
        root_diameter = pitch_diameter + 2 * dedendum
    else:
        outer_diameter = pitch_diameter + 2 * addendum
        root_diameter = pitch_diameter - 2 * dedendum

    pitch_radius = pitch_diameter / 2
    base_radius = base_diameter / 2
    outer_radius = outer_diameter / 2
    root_radius = root_diameter / 2

    if root_radius <= 0 or outer_radius <= 0:
        raise DegenerateProfile(
            f"Root radius {root_radius:.3f} mm / tip radius {outer_radius:.3f} mm "
            f"must be positive (module={module}, teeth={teeth})",
            value=min(root_radius, outer_radius)
        )

    inv_alpha = involute(alpha)
    if internal:
        space_half = tooth_half_angle(root_radius, teeth, base_radius, inv_alpha, internal=True)
        if space_half >= pi / teeth:
            raise DegenerateProfile(
                f"Internal teeth close the tooth spaces at the root "
                f"(teeth={teeth}, pressure angle={pressure_angle_deg}°)",
                value=teeth
            )
    else:
        tip_half = tooth_half_angle(outer_radius, teeth, base_radius, inv_alpha)
        if tip_half <= 0:
            raise DegenerateProfile(
                f"Tooth is pointed below the tip circle "
                f"(teeth={teeth}, pressure angle={pressure_angle_deg}°)",
                value=tip_half
            )
        root_half = tooth_half_angle(max(base_radius, root_radius), teeth, base_radius, inv_alpha)
        if root_half >= pi / teeth:
            raise DegenerateProfile(
                f"Adjacent teeth overlap at the root "
                f"(teeth={teeth}, pressure angle={pressure_angle_deg}°)",
                value=teeth
            )

    circular_pitch = pi * module
    tip_ratio = max(-1.0, min(1.0, base_radius / outer_radius))

    return {
        'module_mm': module,
        'num_teeth': teeth,
        'pressure_angle_deg': pressure_angle_deg,
        'pressure_angle_rad': alpha,
        'pitch_diameter_mm': pitch_diameter,
        'base_diameter_mm': base_diameter,
        'outer_diameter_mm': outer_diameter,
        'root_diameter_mm': root_diameter,
        'pitch_radius_mm': pitch_radius,
        'base_radius_mm': base_radius,
        'outer_radius_mm': outer_radius,
        'root_radius_mm': root_radius,
        'addendum_mm': addendum,
        'dedendum_mm': dedendum,
        'whole_depth_mm': addendum + dedendum,
        'circular_pitch_mm': circular_pitch,
        'tooth_thickness_mm': circular_pitch / 2,
        'clearance_mm': dedendum - addendum,
        'involute_alpha': inv_alpha,
        'tip_pressure_angle_rad': acos(tip_ratio),
        'is_internal': internal,
    }


def calculate_gear_profile(
    module: float,
    teeth: int,
    pressure_angle_deg: float = 20.0,
    addendum_coeff: float = ADDENDUM_COEFF_DEFAULT,
    dedendum_coeff: float = DEDENDUM_COEFF_DEFAULT,
    internal: bool = False,
    quality: Quality = Quality.MEDIUM,
) -> GearProfile:
    """
    Calculate gear dimensions as a typed GearProfile (no display points).

    See calculate_tooth_dimensions for the formulas.
    """
    dims = calculate_tooth_dimensions(
        module, teeth, pressure_angle_deg,
        addendum_coeff=addendum_coeff,
        dedendum_coeff=dedendum_coeff,
        internal=internal,
    )
    kind = GearKind.INTERNAL if internal else GearKind.SPUR
    return GearProfile(kind=kind, quality=Quality(quality), **dims)
