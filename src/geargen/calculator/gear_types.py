"""
Gear Calculator - Gear Family Adapters

One function per gear family with the shape ``generate_<kind>(params)``.
Each calls the shared dimension/sampling code and attaches family extras
(helix angle, pitch angle, lead angle, ...) without changing the 2D math.

``generate`` dispatches over the parameter union. It is the only place
that reports progress: an optional hook receives start/done/error events
at the call boundary, and the module logger mirrors them at debug level.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from ..enums import GearKind
from ..io import (
    BevelParams,
    GearProfile,
    GearResult,
    HelicalParams,
    InternalParams,
    PlanetaryAssembly,
    PlanetaryParams,
    RackParams,
    RackProfile,
    SpurParams,
    WormParams,
    parse_params,
)
from .errors import (
    GearGeometryError,
    InvalidModule,
    InvalidPlanetaryConfiguration,
    InvalidPressureAngle,
    InvalidToothCount,
)
from .planetary import compose_planetary
from .profile import build_external_profile, build_internal_profile
from .rack import calculate_rack

logger = logging.getLogger(__name__)

# hook(event, payload); events: generate.start, generate.done, generate.error
GenerateHook = Callable[[str, Dict[str, Any]], None]

# Record fields whose errors are reported as typed gear errors
_FIELD_ERRORS = {
    'module': InvalidModule,
    'teeth': InvalidToothCount,
    'sun_teeth': InvalidToothCount,
    'planet_teeth': InvalidToothCount,
    'pressure_angle': InvalidPressureAngle,
    'planet_count': InvalidPlanetaryConfiguration,
}


def typed_error(error: ValidationError) -> Optional[GearGeometryError]:
    """
    Translate a record ValidationError on a gear quantity into a typed error.

    Returns None when no failing field has a typed counterpart (unknown
    kind, negative face width, bad quality, ...).
    """
    for detail in error.errors():
        loc = detail.get('loc') or ()
        field = loc[-1] if loc else None
        cls = _FIELD_ERRORS.get(field)
        if cls is not None:
            value = detail.get('input')
            return cls(f"Invalid {field}: {value!r} ({detail.get('msg')})", value=value)
    return None


def _build(cls, **fields):
    """Construct a parameter record, raising typed errors for gear quantities."""
    try:
        return cls.model_validate(fields)
    except ValidationError as e:
        mapped = typed_error(e)
        if mapped is None:
            raise
        raise mapped from e


def parse_gear_params(data: Dict[str, Any]):
    """
    Like io.parse_params, but bad tooth counts, modules, pressure angles and
    planet counts raise the matching GearGeometryError subclass.

    Raises:
        GearGeometryError: A gear quantity is rejected by the record
        pydantic.ValidationError: Any other record error
    """
    try:
        return parse_params(data)
    except ValidationError as e:
        mapped = typed_error(e)
        if mapped is None:
            raise
        raise mapped from e


def _body_extras(params) -> Dict[str, Any]:
    return {
        'face_width_mm': params.face_width,
        'hub_diameter_mm': params.hub_diameter,
        'bore_diameter_mm': params.bore_diameter,
    }


def generate_spur(params: SpurParams) -> GearProfile:
    return build_external_profile(
        params.module, params.teeth, params.pressure_angle, params.quality,
        kind=GearKind.SPUR, **_body_extras(params)
    )


def generate_helical(params: HelicalParams) -> GearProfile:
    """Spur profile plus helix angle (the twist is applied at extrusion)."""
    return build_external_profile(
        params.module, params.teeth, params.pressure_angle, params.quality,
        kind=GearKind.HELICAL, helix_angle_deg=params.helix_angle, **_body_extras(params)
    )


def generate_bevel(params: BevelParams) -> GearProfile:
    """Spur profile plus pitch angle (the taper is applied at extrusion)."""
    return build_external_profile(
        params.module, params.teeth, params.pressure_angle, params.quality,
        kind=GearKind.BEVEL, pitch_angle_deg=params.pitch_angle, **_body_extras(params)
    )


def generate_worm(params: WormParams) -> GearProfile:
    """Spur profile where the tooth count doubles as the number of starts."""
    return build_external_profile(
        params.module, params.teeth, params.pressure_angle, params.quality,
        kind=GearKind.WORM, starts=params.teeth, lead_angle_deg=params.lead_angle,
        **_body_extras(params)
    )


def generate_rack(params: RackParams) -> RackProfile:
    return calculate_rack(
        params.module, params.pressure_angle,
        face_width=params.face_width, teeth=params.teeth, quality=params.quality
    )


def generate_internal(params: InternalParams) -> GearProfile:
    """Internal gear: full clockwise ring of teeth inside a rim."""
    return build_internal_profile(
        params.module, params.teeth, params.pressure_angle, params.quality,
        face_width_mm=params.face_width
    )


def generate_planetary(params: PlanetaryParams) -> PlanetaryAssembly:
    return compose_planetary(
        params.module,
        params.sun_teeth,
        params.planet_teeth,
        planet_count=params.planet_count,
        pressure_angle_deg=params.pressure_angle,
        face_width=params.face_width,
        quality=params.quality,
        strict=params.strict,
    )


def point_count(result: GearResult) -> int:
    """Total display points in a result (all three gears for a planetary)."""
    if isinstance(result, PlanetaryAssembly):
        return (len(result.sun.display_points)
                + len(result.planet.display_points)
                + len(result.ring.display_points))
    return len(result.display_points)


def generate(params, hook: Optional[GenerateHook] = None) -> GearResult:
    """
    Generate the geometry for any gear parameter record.

    Args:
        params: One of SpurParams, HelicalParams, BevelParams, WormParams,
            RackParams, InternalParams, PlanetaryParams
        hook: Optional callback ``hook(event, payload)``

    Returns:
        GearProfile, RackProfile or PlanetaryAssembly

    Raises:
        GearGeometryError: Invalid parameters (re-raised after the hook)
        TypeError: params is not a known parameter record
    """
    kind = getattr(params, 'kind', None)
    logger.debug(f"Generating {kind} gear: {params!r}")
    if hook is not None:
        hook("generate.start", {"kind": kind})

    started = time.perf_counter()
    try:
        if isinstance(params, SpurParams):
            result = generate_spur(params)
        elif isinstance(params, HelicalParams):
            result = generate_helical(params)
        elif isinstance(params, BevelParams):
            result = generate_bevel(params)
        elif isinstance(params, WormParams):
            result = generate_worm(params)
        elif isinstance(params, RackParams):
            result = generate_rack(params)
        elif isinstance(params, InternalParams):
            result = generate_internal(params)
        elif isinstance(params, PlanetaryParams):
            result = generate_planetary(params)
        else:
            raise TypeError(f"Unknown gear parameters: {type(params).__name__}")
    except Exception as e:
        logger.debug(f"Generating {kind} gear failed: {type(e).__name__}: {e}")
        if hook is not None:
            hook("generate.error", {"kind": kind, "error": type(e).__name__, "message": str(e)})
        raise

    elapsed = time.perf_counter() - started
    points = point_count(result)
    logger.debug(f"Generated {kind} gear: {points} points in {elapsed * 1000:.2f} ms")
    if hook is not None:
        hook("generate.done", {"kind": kind, "points": points, "elapsed_s": elapsed})
    return result


def generate_from_dict(data: Dict[str, Any], hook: Optional[GenerateHook] = None) -> GearResult:
    """Parse a raw dict (``kind`` selects the family) and generate it."""
    return generate(parse_gear_params(data), hook=hook)


# ============================================================================
# Keyword conveniences
# ============================================================================

def calculate_spur_gear(module: float, teeth: int, pressure_angle: float = 20.0,
                        face_width: float = 10.0, hub_diameter: float = 10.0,
                        bore_diameter: float = 5.0, quality: str = "medium") -> GearProfile:
    return generate(_build(
        SpurParams,
        module=module, teeth=teeth, pressure_angle=pressure_angle, face_width=face_width,
        hub_diameter=hub_diameter, bore_diameter=bore_diameter, quality=quality
    ))


def calculate_helical_gear(module: float, teeth: int, pressure_angle: float = 20.0,
                           helix_angle: float = 15.0, face_width: float = 10.0,
                           hub_diameter: float = 10.0, bore_diameter: float = 5.0,
                           quality: str = "medium") -> GearProfile:
    return generate(_build(
        HelicalParams,
        module=module, teeth=teeth, pressure_angle=pressure_angle, helix_angle=helix_angle,
        face_width=face_width, hub_diameter=hub_diameter, bore_diameter=bore_diameter,
        quality=quality
    ))


def calculate_bevel_gear(module: float, teeth: int, pressure_angle: float = 20.0,
                         pitch_angle: float = 45.0, face_width: float = 10.0,
                         hub_diameter: float = 10.0, bore_diameter: float = 5.0,
                         quality: str = "medium") -> GearProfile:
    return generate(_build(
        BevelParams,
        module=module, teeth=teeth, pressure_angle=pressure_angle, pitch_angle=pitch_angle,
        face_width=face_width, hub_diameter=hub_diameter, bore_diameter=bore_diameter,
        quality=quality
    ))


def calculate_worm_gear(module: float, starts: int, pressure_angle: float = 20.0,
                        lead_angle: float = 5.0, face_width: float = 10.0,
                        hub_diameter: float = 10.0, bore_diameter: float = 5.0,
                        quality: str = "medium") -> GearProfile:
    return generate(_build(
        WormParams,
        module=module, teeth=starts, pressure_angle=pressure_angle, lead_angle=lead_angle,
        face_width=face_width, hub_diameter=hub_diameter, bore_diameter=bore_diameter,
        quality=quality
    ))


def calculate_rack_gear(module: float, teeth: int = 20, pressure_angle: float = 20.0,
                        face_width: float = 10.0, quality: str = "medium") -> RackProfile:
    return generate(_build(
        RackParams,
        module=module, teeth=teeth, pressure_angle=pressure_angle,
        face_width=face_width, quality=quality
    ))


def calculate_internal_gear(module: float, teeth: int, pressure_angle: float = 20.0,
                            face_width: float = 10.0, quality: str = "medium") -> GearProfile:
    return generate(_build(
        InternalParams,
        module=module, teeth=teeth, pressure_angle=pressure_angle,
        face_width=face_width, quality=quality
    ))


def calculate_planetary_gear(module: float, sun_teeth: int, planet_teeth: int,
                             planet_count: int = 3, pressure_angle: float = 20.0,
                             face_width: float = 10.0, quality: str = "medium",
                             strict: bool = False) -> PlanetaryAssembly:
    return generate(_build(
        PlanetaryParams,
        module=module, sun_teeth=sun_teeth, planet_teeth=planet_teeth,
        planet_count=planet_count, pressure_angle=pressure_angle,
        face_width=face_width, quality=quality, strict=strict
    ))
