"""
Gear Calculator - Tooth Boundary Sampling

Traces the 2D boundary of involute teeth as ordered point sequences:

- sample_external_tooth: one external tooth, counter-clockwise
- sample_internal_tooth: one internal tooth, same skeleton
- sample_internal_ring: every internal tooth stitched into one clockwise
  loop, usable directly as a hole in a ring blank

The sampler trusts its input: radii are checked by
calculate_tooth_dimensions before a GearProfile exists.
"""

from math import pi, cos, sin
from typing import List, Sequence, Tuple, Union

from ..enums import GearKind, PointKind, Quality
from ..io import GearProfile, ProfilePoint
from .constants import MIN_TIP_STEPS, QUALITY_STEPS, RIM_THICKNESS_FACTOR
from .core import calculate_gear_profile, tooth_half_angle


def quality_steps(quality: Union[Quality, str]) -> int:
    """
    Involute samples per flank for a quality tier.

    Raises:
        ValueError: Unknown quality name
    """
    return QUALITY_STEPS[Quality(quality).value]


def _point(r: float, angle: float, kind: PointKind) -> ProfilePoint:
    return ProfilePoint(x=r * cos(angle), y=r * sin(angle), kind=kind)


def _sample_tooth(profile: GearProfile, steps: int, internal: bool) -> Tuple[ProfilePoint, ...]:
    z = profile.num_teeth
    rb = profile.base_radius_mm
    rf = profile.root_radius_mm
    ra = profile.outer_radius_mm
    inv_alpha = profile.involute_alpha

    def theta(r):
        return tooth_half_angle(r, z, rb, inv_alpha, internal=internal)

    half_pitch = pi / z
    start_r = max(rb, rf)
    end_r = ra
    tip_steps = max(MIN_TIP_STEPS, steps // 2)
    radii = [start_r + (end_r - start_r) * i / steps for i in range(steps + 1)]
    tip_theta = theta(ra)

    points: List[ProfilePoint] = [
        _point(rf, -half_pitch, PointKind.ROOT_START),
        _point(rf, -theta(start_r), PointKind.ROOT_BOTTOM),
    ]
    for r in radii:
        points.append(_point(r, -theta(r), PointKind.FLANK_BOTTOM))
    for i in range(1, tip_steps + 1):
        angle = -tip_theta + (i / tip_steps) * 2 * tip_theta
        points.append(_point(ra, angle, PointKind.TIP))
    for r in reversed(radii[:-1]):
        points.append(_point(r, theta(r), PointKind.FLANK_TOP))
    # Mirror of the root-bottom connector. When the root lies outside the
    # base circle it coincides with the last flank point.
    points.append(_point(rf, theta(start_r), PointKind.ROOT_TOP))
    points.append(_point(rf, half_pitch, PointKind.ROOT_END))
    return tuple(points)


def sample_external_tooth(
    profile: GearProfile,
    quality: Union[Quality, str, None] = None,
) -> Tuple[ProfilePoint, ...]:
    """
    Trace one external tooth centred on the +x axis.

    Sequence: root-start, root-bottom connector, bottom flank (steps+1),
    tip arc (max(2, steps//2)), top flank (steps), root-top connector,
    root-end. The result is mirror symmetric about the x-axis and always
    holds 2·steps + tip_steps + 5 points.

    Args:
        profile: Dimensions from calculate_gear_profile
        quality: Sampling tier (defaults to profile.quality)
    """
    steps = quality_steps(profile.quality if quality is None else quality)
    return _sample_tooth(profile, steps, internal=False)


def sample_internal_tooth(
    profile: GearProfile,
    quality: Union[Quality, str, None] = None,
) -> Tuple[ProfilePoint, ...]:
    """Trace one internal tooth with the external skeleton.

    The half-width grows with radius, so the tooth is widest at the root
    (rim side) and narrowest at the bore-facing tip.
    """
    steps = quality_steps(profile.quality if quality is None else quality)
    return _sample_tooth(profile, steps, internal=True)


def sample_internal_ring(
    profile: GearProfile,
    quality: Union[Quality, str, None] = None,
) -> Tuple[ProfilePoint, ...]:
    """
    Trace every tooth of an internal gear as one closed clockwise loop.

    Teeth are visited from index z down to 1 (centre angle k·2π/z) so the
    polar angle never increases along the loop. Per tooth:

    - left flank, root to tip: steps+1 points
    - tip arc: steps points, excluding the left flank's tip point
    - right flank, tip to root: steps points, excluding the tip point
    - root arc: steps points strictly between this tooth and the next

    No vertex is repeated, so the loop holds exactly z·(4·steps + 1) points
    and closes implicitly from the last point back to the first.
    """
    steps = quality_steps(profile.quality if quality is None else quality)
    z = profile.num_teeth
    rb = profile.base_radius_mm
    rf = profile.root_radius_mm
    ra = profile.outer_radius_mm
    inv_alpha = profile.involute_alpha

    def theta(r):
        return tooth_half_angle(r, z, rb, inv_alpha, internal=True)

    pitch_angle = 2 * pi / z
    radii = [rf + (ra - rf) * i / steps for i in range(steps + 1)]
    thetas = [theta(r) for r in radii]
    root_theta = thetas[0]
    tip_theta = thetas[-1]

    points: List[ProfilePoint] = []
    for k in range(z, 0, -1):
        c = k * pitch_angle
        for r, t in zip(radii, thetas):
            points.append(_point(r, c + t, PointKind.FLANK_LEFT))
        for i in range(1, steps + 1):
            angle = c + tip_theta - (i / steps) * 2 * tip_theta
            points.append(_point(ra, angle, PointKind.TIP))
        for i in range(steps - 1, -1, -1):
            points.append(_point(radii[i], c - thetas[i], PointKind.FLANK_RIGHT))
        arc_start = c - root_theta
        arc_end = c - pitch_angle + root_theta
        for j in range(1, steps + 1):
            angle = arc_start + (arc_end - arc_start) * j / (steps + 1)
            points.append(_point(rf, angle, PointKind.ROOT))
    return tuple(points)


def signed_area(points: Sequence[ProfilePoint]) -> float:
    """Shoelace area of a closed polygon (negative when clockwise)."""
    area = 0.0
    n = len(points)
    for i in range(n):
        p, q = points[i], points[(i + 1) % n]
        area += p.x * q.y - q.x * p.y
    return area / 2


def build_external_profile(
    module: float,
    teeth: int,
    pressure_angle_deg: float = 20.0,
    quality: Union[Quality, str] = Quality.MEDIUM,
    kind: GearKind = GearKind.SPUR,
    **extras,
) -> GearProfile:
    """Dimensions plus one sampled external tooth.

    ``extras`` are family fields (helix_angle_deg, hub_diameter_mm, ...)
    copied onto the result untouched.
    """
    profile = calculate_gear_profile(module, teeth, pressure_angle_deg, quality=quality)
    points = sample_external_tooth(profile)
    return profile.model_copy(update={'kind': kind, 'display_points': points, **extras})


def build_internal_profile(
    module: float,
    teeth: int,
    pressure_angle_deg: float = 20.0,
    quality: Union[Quality, str] = Quality.MEDIUM,
    **extras,
) -> GearProfile:
    """Dimensions plus the full clockwise ring and the rim radius.

    The rim sits RIM_THICKNESS_FACTOR modules outside the root circle.
    """
    profile = calculate_gear_profile(
        module, teeth, pressure_angle_deg, internal=True, quality=quality
    )
    points = sample_internal_ring(profile)
    rim = profile.root_radius_mm + RIM_THICKNESS_FACTOR * profile.module_mm
    return profile.model_copy(update={
        'kind': GearKind.INTERNAL,
        'display_points': points,
        'rim_radius_mm': rim,
        **extras,
    })
