"""
Gear Calculator - Rack

A rack is the limiting case of an involute gear as the base radius tends to
infinity: the involute flanks become straight lines inclined at the
pressure angle, so the tooth is an exact symmetric trapezoid.
"""

from math import pi, tan, radians

from ..enums import PointKind, Quality
from ..io import ProfilePoint, RackProfile
from .constants import ADDENDUM_COEFF_DEFAULT, DEDENDUM_COEFF_DEFAULT
from .core import check_module, check_pressure_angle, check_teeth
from .errors import DegenerateProfile


def calculate_rack(
    module: float,
    pressure_angle_deg: float = 20.0,
    face_width: float = 0.0,
    teeth: int = 1,
    quality: Quality = Quality.MEDIUM,
) -> RackProfile:
    """
    Calculate a straight-sided rack tooth.

    Corners, with p = π·m, ha = m, hf = 1.25·m, centred on x = 0:
    - bottom-left:  (−p/4 − hf·tan α, −hf)
    - top-left:     (−p/4 + ha·tan α,  ha)
    - top-right and bottom-right mirror those about x = 0

    Args:
        module: Module (mm)
        pressure_angle_deg: Flank inclination (degrees)
        face_width: Rack thickness, carried through for extrusion (mm)
        teeth: Number of teeth repeated along the rack body
        quality: Carried through; a rack has no curves to sample

    Returns:
        RackProfile with the corner trapezoid and the tiled body outline

    Raises:
        DegenerateProfile: Flanks cross at the top or overlap at the bottom
    """
    module = check_module(module)
    pressure_angle_deg = check_pressure_angle(pressure_angle_deg)
    teeth = check_teeth(teeth, minimum=1)

    alpha = radians(pressure_angle_deg)
    pitch = pi * module
    addendum = ADDENDUM_COEFF_DEFAULT * module
    dedendum = DEDENDUM_COEFF_DEFAULT * module

    top_width = pitch / 2 - 2 * addendum * tan(alpha)
    bottom_width = pitch / 2 + 2 * dedendum * tan(alpha)
    if top_width <= 0:
        raise DegenerateProfile(
            f"Rack tooth is pointed at pressure angle {pressure_angle_deg}°",
            value=top_width
        )
    if bottom_width >= pitch:
        raise DegenerateProfile(
            f"Adjacent rack teeth overlap at the root at pressure angle {pressure_angle_deg}°",
            value=bottom_width
        )

    bottom_x = pitch / 4 + dedendum * tan(alpha)
    top_x = pitch / 4 - addendum * tan(alpha)
    corners = (
        ProfilePoint(x=-bottom_x, y=-dedendum, kind=PointKind.CORNER),
        ProfilePoint(x=-top_x, y=addendum, kind=PointKind.CORNER),
        ProfilePoint(x=top_x, y=addendum, kind=PointKind.CORNER),
        ProfilePoint(x=bottom_x, y=-dedendum, kind=PointKind.CORNER),
    )

    outline = []
    for n in range(teeth):
        offset = n * pitch
        for corner in corners:
            outline.append(ProfilePoint(x=corner.x + offset, y=corner.y, kind=PointKind.CORNER))

    return RackProfile(
        module_mm=module,
        pressure_angle_deg=pressure_angle_deg,
        num_teeth=teeth,
        face_width_mm=face_width,
        quality=Quality(quality),
        circular_pitch_mm=pitch,
        addendum_mm=addendum,
        dedendum_mm=dedendum,
        top_width_mm=top_width,
        bottom_width_mm=bottom_width,
        length_mm=teeth * pitch,
        corners=corners,
        display_points=tuple(outline),
    )
