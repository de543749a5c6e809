"""
Typed models for gear parameters and computed geometry.

Parameter records are what a caller (form, CLI, JSON bridge) supplies;
profile models are the immutable snapshots the calculator returns.

Uses Pydantic for validation and enum coercion. Numeric range checks on
module, tooth count and pressure angle are NOT done here: the calculator
raises typed errors for those (see calculator.errors).
"""

import re
from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from ..enums import GearKind, PointKind, Quality

# Initial values of the design form
DEFAULT_MODULE_MM = 2.0
DEFAULT_TEETH = 20
DEFAULT_PRESSURE_ANGLE_DEG = 20.0
DEFAULT_FACE_WIDTH_MM = 10.0
DEFAULT_HUB_DIAMETER_MM = 10.0
DEFAULT_BORE_DIAMETER_MM = 5.0
DEFAULT_HELIX_ANGLE_DEG = 15.0
DEFAULT_PITCH_ANGLE_DEG = 45.0
DEFAULT_LEAD_ANGLE_DEG = 5.0
DEFAULT_PLANET_TEETH = 10
DEFAULT_PLANET_COUNT = 3


# ============================================================================
# Geometry snapshots
# ============================================================================

class ProfilePoint(BaseModel):
    """A 2D boundary vertex, tagged with the segment it belongs to."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    kind: PointKind


class GearProfile(BaseModel):
    """Dimensions and boundary of one involute gear (external or internal).

    Radii follow the usual naming: ``outer`` is the tip circle and ``root``
    the bottom of the tooth spaces. For an internal gear the tip circle is
    the small bore-facing one, so ``root > pitch > outer``.
    """
    model_config = ConfigDict(frozen=True, extra='ignore')

    kind: GearKind = GearKind.SPUR
    module_mm: float
    num_teeth: int
    pressure_angle_deg: float
    pressure_angle_rad: float

    pitch_diameter_mm: float
    base_diameter_mm: float
    outer_diameter_mm: float
    root_diameter_mm: float

    pitch_radius_mm: float
    base_radius_mm: float
    outer_radius_mm: float
    root_radius_mm: float

    addendum_mm: float
    dedendum_mm: float
    whole_depth_mm: float
    circular_pitch_mm: float
    tooth_thickness_mm: float
    clearance_mm: float

    involute_alpha: float             # inv(α) at the pitch circle
    tip_pressure_angle_rad: float     # pressure angle on the tip circle

    is_internal: bool = False
    quality: Quality = Quality.MEDIUM
    display_points: Tuple[ProfilePoint, ...] = ()

    # Family extras: attached by the adapters, never read by profile math
    helix_angle_deg: Optional[float] = None
    pitch_angle_deg: Optional[float] = None
    lead_angle_deg: Optional[float] = None
    starts: Optional[int] = None
    face_width_mm: Optional[float] = None
    hub_diameter_mm: Optional[float] = None
    bore_diameter_mm: Optional[float] = None
    rim_radius_mm: Optional[float] = None


class RackProfile(BaseModel):
    """Straight-sided rack tooth (involute with infinite base radius)."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    kind: GearKind = GearKind.RACK
    module_mm: float
    pressure_angle_deg: float
    num_teeth: int = 1
    face_width_mm: float = 0.0
    quality: Quality = Quality.MEDIUM

    circular_pitch_mm: float
    addendum_mm: float
    dedendum_mm: float
    top_width_mm: float
    bottom_width_mm: float
    length_mm: float

    # bottom-left, top-left, top-right, bottom-right
    corners: Tuple[ProfilePoint, ProfilePoint, ProfilePoint, ProfilePoint]
    display_points: Tuple[ProfilePoint, ...] = ()


class PlanetPlacement(BaseModel):
    """Where one planet sits, and how it is turned for display."""
    model_config = ConfigDict(frozen=True)

    index: int
    angle_rad: float
    angle_deg: float
    x_mm: float
    y_mm: float
    phase_rad: float  # display heuristic, not a kinematic solve


class PlanetaryAssembly(BaseModel):
    """Sun, planets and ring of a simple planetary train."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    kind: GearKind = GearKind.PLANETARY
    sun: GearProfile
    planet: GearProfile
    ring: GearProfile
    planet_count: int
    ring_teeth: int
    centre_distance_mm: float
    placements: Tuple[PlanetPlacement, ...]
    meshing_ok: bool
    face_width_mm: float = 0.0


GearResult = Union[GearProfile, RackProfile, PlanetaryAssembly]


# ============================================================================
# Parameter records (one per gear family, tagged by ``kind``)
# ============================================================================

class _BaseParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

    module: float = DEFAULT_MODULE_MM
    pressure_angle: float = DEFAULT_PRESSURE_ANGLE_DEG
    face_width: float = Field(DEFAULT_FACE_WIDTH_MM, ge=0)
    quality: Quality = Quality.MEDIUM

    @field_validator('quality', mode='before')
    @classmethod
    def normalize_quality(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v


class _ToothedParams(_BaseParams):
    teeth: int = DEFAULT_TEETH


class _HubbedParams(_ToothedParams):
    hub_diameter: float = Field(DEFAULT_HUB_DIAMETER_MM, ge=0)
    bore_diameter: float = Field(DEFAULT_BORE_DIAMETER_MM, ge=0)


class SpurParams(_HubbedParams):
    """Spur gear: common parameters only."""
    kind: Literal["spur"] = "spur"


class HelicalParams(_HubbedParams):
    """Helical gear: twist is applied downstream from helix_angle."""
    kind: Literal["helical"] = "helical"
    helix_angle: float = DEFAULT_HELIX_ANGLE_DEG


class BevelParams(_HubbedParams):
    """Bevel gear: taper is applied downstream from pitch_angle."""
    kind: Literal["bevel"] = "bevel"
    pitch_angle: float = DEFAULT_PITCH_ANGLE_DEG


class WormParams(_HubbedParams):
    """Worm: ``teeth`` is read as the number of thread starts.

    ``helix_angle`` is accepted as an alias for lead_angle.
    """
    kind: Literal["worm"] = "worm"
    lead_angle: float = Field(
        DEFAULT_LEAD_ANGLE_DEG,
        validation_alias=AliasChoices("lead_angle", "helix_angle"),
    )


class RackParams(_BaseParams):
    """Rack: ``teeth`` is the number of teeth along the rack body."""
    kind: Literal["rack"] = "rack"
    teeth: int = Field(DEFAULT_TEETH, ge=1)


class InternalParams(_ToothedParams):
    """Internal (ring) gear. No hub or bore."""
    kind: Literal["internal"] = "internal"


class PlanetaryParams(_BaseParams):
    """Planetary train. ``teeth`` is accepted as an alias for sun_teeth."""
    kind: Literal["planetary"] = "planetary"
    sun_teeth: int = Field(DEFAULT_TEETH, validation_alias=AliasChoices("sun_teeth", "teeth"))
    planet_teeth: int = DEFAULT_PLANET_TEETH
    planet_count: int = DEFAULT_PLANET_COUNT
    strict: bool = False


GearParams = Annotated[
    Union[
        SpurParams,
        HelicalParams,
        BevelParams,
        WormParams,
        RackParams,
        InternalParams,
        PlanetaryParams,
    ],
    Field(discriminator="kind"),
]

_PARAMS_ADAPTER = TypeAdapter(GearParams)

PARAMS_BY_KIND = {
    GearKind.SPUR: SpurParams,
    GearKind.HELICAL: HelicalParams,
    GearKind.BEVEL: BevelParams,
    GearKind.WORM: WormParams,
    GearKind.RACK: RackParams,
    GearKind.INTERNAL: InternalParams,
    GearKind.PLANETARY: PlanetaryParams,
}


# Form ids that do not map onto a field name by case conversion alone
_KEY_ALIASES = {
    "type": "kind",
    "gear_type": "kind",
}


def normalize_parameter_name(name: str) -> str:
    """Map a form id ("face-width", "faceWidth") to its field name ("face_width")."""
    snake = re.sub(r"(?<!^)(?=[A-Z])", "_", name).replace("-", "_").lower()
    return _KEY_ALIASES.get(snake, snake)


def normalize_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    return {normalize_parameter_name(k): v for k, v in data.items()}


def parse_params(data: Dict[str, Any]):
    """Parse a raw dict into the parameter record selected by ``kind``.

    Keys may use form spelling ("face-width", "faceWidth"). A missing
    ``kind`` defaults to "spur".

    Raises:
        pydantic.ValidationError: If the dict does not match any record
    """
    data = normalize_keys(data)
    if 'kind' not in data:
        data = {**data, 'kind': GearKind.SPUR.value}
    elif isinstance(data['kind'], str):
        data = {**data, 'kind': data['kind'].lower()}
    return _PARAMS_ADAPTER.validate_python(data)


def params_to_dict(params) -> dict:
    """Dump a parameter record to JSON-compatible types."""
    return params.model_dump(mode='json')
