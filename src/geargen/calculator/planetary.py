"""
Gear Calculator - Planetary Trains

Composes a simple planetary train: one sun, N equally spaced planets and
an internal ring, all cut with the same module and pressure angle.

Tooth count relation:
    Ring = Sun + 2 × Planet

Equal planet spacing only meshes when (Sun + Ring) is divisible by N.
"""

from math import pi, cos, sin, degrees
from typing import Optional

from ..enums import GearKind, Quality
from ..io import PlanetaryAssembly, PlanetPlacement
from .constants import ADDENDUM_COEFF_DEFAULT, MIN_PLANET_COUNT
from .core import check_module, check_pressure_angle, check_teeth
from .errors import InvalidPlanetaryConfiguration
from .profile import build_external_profile, build_internal_profile


def calculate_ring_teeth(sun_teeth: int, planet_teeth: int) -> int:
    """Ring teeth from sun and planet teeth: Ring = Sun + 2 × Planet"""
    return sun_teeth + 2 * planet_teeth


def calculate_planet_teeth(sun_teeth: int, ring_teeth: int) -> Optional[int]:
    """
    Planet teeth from sun and ring teeth: Planet = (Ring − Sun) / 2

    Returns:
        Number of planet teeth, or None if (Ring − Sun) is odd
    """
    if (ring_teeth - sun_teeth) % 2 != 0:
        return None
    return (ring_teeth - sun_teeth) // 2


def calculate_centre_distance(module: float, sun_teeth: int, planet_teeth: int) -> float:
    """Sun-to-planet centre distance: a = m × (Zs + Zp) / 2"""
    return module * (sun_teeth + planet_teeth) / 2


def planets_can_mesh(sun_teeth: int, ring_teeth: int, planet_count: int) -> bool:
    """Whether N equally spaced planets can engage sun and ring together."""
    return (sun_teeth + ring_teeth) % planet_count == 0


def planets_overlap(module: float, sun_teeth: int, planet_teeth: int, planet_count: int) -> bool:
    """
    Whether the tip circles of adjacent planets intersect.

    Adjacent planet centres are 2·a·sin(π/N) apart; they clash when that
    is less than the planet tip diameter.
    """
    centre_distance = calculate_centre_distance(module, sun_teeth, planet_teeth)
    spacing = 2 * centre_distance * sin(pi / planet_count)
    planet_tip_diameter = module * planet_teeth + 2 * ADDENDUM_COEFF_DEFAULT * module
    return spacing < planet_tip_diameter


def _check_planet_count(planet_count) -> int:
    if isinstance(planet_count, bool) or not isinstance(planet_count, (int, float)):
        raise InvalidPlanetaryConfiguration(
            f"Planet count must be an integer, got {planet_count!r}",
            value=planet_count
        )
    if isinstance(planet_count, float):
        if not planet_count.is_integer():
            raise InvalidPlanetaryConfiguration(
                f"Planet count must be an integer, got {planet_count}",
                value=planet_count
            )
        planet_count = int(planet_count)
    if planet_count < MIN_PLANET_COUNT:
        raise InvalidPlanetaryConfiguration(
            f"Planet count {planet_count} is below the minimum of {MIN_PLANET_COUNT}",
            value=planet_count
        )
    return planet_count


def compose_planetary(
    module: float,
    sun_teeth: int,
    planet_teeth: int,
    planet_count: int = 3,
    pressure_angle_deg: float = 20.0,
    face_width: float = 0.0,
    quality: Quality = Quality.MEDIUM,
    strict: bool = False,
) -> PlanetaryAssembly:
    """
    Compose sun, planet and ring profiles with planet placements.

    Planet i sits at angle 2πi/N on the centre-distance circle. Its phase
    −angle·Zs/Zp turns it so its teeth line up with the sun in a preview;
    it is a display heuristic, not a kinematic solve.

    Args:
        module: Module shared by all three gears (mm)
        sun_teeth: Sun tooth count
        planet_teeth: Planet tooth count
        planet_count: Number of equally spaced planets (>= 3)
        pressure_angle_deg: Pressure angle (degrees)
        face_width: Carried through for extrusion (mm)
        quality: Sampling tier for all three boundaries
        strict: Reject uneven planet spacing and overlapping planets instead
            of only flagging them

    Returns:
        PlanetaryAssembly (meshing_ok is False when spacing is uneven)

    Raises:
        InvalidPlanetaryConfiguration: Tooth or planet counts cannot form a train
    """
    module = check_module(module)
    sun_teeth = check_teeth(sun_teeth)
    planet_teeth = check_teeth(planet_teeth)
    pressure_angle_deg = check_pressure_angle(pressure_angle_deg)
    planet_count = _check_planet_count(planet_count)

    ring_teeth = calculate_ring_teeth(sun_teeth, planet_teeth)
    if ring_teeth < planet_teeth + 2:
        raise InvalidPlanetaryConfiguration(
            f"Ring teeth ({ring_teeth}) must be at least planet teeth + 2 ({planet_teeth + 2})",
            value=ring_teeth
        )

    centre_distance = calculate_centre_distance(module, sun_teeth, planet_teeth)
    if centre_distance <= 0:
        raise InvalidPlanetaryConfiguration(
            f"Centre distance must be positive, got {centre_distance} mm",
            value=centre_distance
        )

    meshing_ok = planets_can_mesh(sun_teeth, ring_teeth, planet_count)
    if strict and not meshing_ok:
        raise InvalidPlanetaryConfiguration(
            f"{planet_count} equally spaced planets cannot mesh: "
            f"sun + ring ({sun_teeth + ring_teeth}) is not divisible by {planet_count}",
            value=planet_count
        )
    if strict and planets_overlap(module, sun_teeth, planet_teeth, planet_count):
        raise InvalidPlanetaryConfiguration(
            f"{planet_count} planets of {planet_teeth} teeth overlap on a "
            f"{centre_distance:.2f} mm centre distance",
            value=planet_count
        )

    sun = build_external_profile(module, sun_teeth, pressure_angle_deg, quality,
                                 face_width_mm=face_width)
    planet = build_external_profile(module, planet_teeth, pressure_angle_deg, quality,
                                    face_width_mm=face_width)
    ring = build_internal_profile(module, ring_teeth, pressure_angle_deg, quality,
                                  face_width_mm=face_width)

    placements = []
    for i in range(planet_count):
        angle = 2 * pi * i / planet_count
        placements.append(PlanetPlacement(
            index=i,
            angle_rad=angle,
            angle_deg=degrees(angle),
            x_mm=centre_distance * cos(angle),
            y_mm=centre_distance * sin(angle),
            phase_rad=-angle * sun_teeth / planet_teeth,
        ))

    return PlanetaryAssembly(
        kind=GearKind.PLANETARY,
        sun=sun,
        planet=planet,
        ring=ring,
        planet_count=planet_count,
        ring_teeth=ring_teeth,
        centre_distance_mm=centre_distance,
        placements=tuple(placements),
        meshing_ok=meshing_ok,
        face_width_mm=face_width,
    )
