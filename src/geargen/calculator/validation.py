"""
Gear Calculator - Validation Rules

Advisory engineering validation based on:
- ISO 53 / ISO 54 standards
- Common engineering practice
- Manufacturing constraints

Invalid inputs never reach this module: the calculator raises typed errors
for those. The rules here grade a geometrically valid result as INFO,
WARNING or ERROR so a caller can explain it to the user.

This module accepts both result models and their dict form
(``model_dump(mode='json')``), so saved JSON can be re-validated.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import sin, radians
from typing import Any, Dict, List, Optional, Union

from ..io import GearProfile, PlanetaryAssembly, RackProfile
from .constants import (
    HELIX_ANGLE_MAX_DEG,
    LEAD_ANGLE_MAX_DEG,
    LEAD_ANGLE_MIN_DEG,
    STANDARD_PRESSURE_ANGLES_DEG,
)
from .core import is_standard_module, nearest_standard_module
from .planetary import planets_can_mesh, planets_overlap

# Type alias for design input - a result model or its dict form
DesignInput = Union[Dict[str, Any], GearProfile, RackProfile, PlanetaryAssembly]


def _get(obj: DesignInput, *keys: str, default: Optional[Any] = None) -> Any:
    """
    Get nested value from dict or model using a sequence of keys.

    Works with both:
    - Dicts: _get(design, 'sun', 'num_teeth')
    - Models: _get(design, 'sun', 'num_teeth')

    Returns:
        Value at path, or default if not found
    """
    current = obj
    for key in keys:
        if current is None:
            return default
        if isinstance(current, dict):
            current = current.get(key, default)
        else:
            current = getattr(current, key, default)
    return current


def _kind(design: DesignInput) -> str:
    kind = _get(design, 'kind', default='spur')
    return getattr(kind, 'value', kind)


def calculate_minimum_teeth(pressure_angle_deg: float) -> int:
    """
    Calculate minimum teeth without undercut for given pressure angle.

    Formula: z_min = 2 / sin²(α)

    Args:
        pressure_angle_deg: Pressure angle in degrees

    Returns:
        Minimum number of teeth (rounded up)
    """
    alpha_rad = radians(pressure_angle_deg)
    sin_alpha = sin(alpha_rad)
    z_min = 2.0 / (sin_alpha ** 2)
    return int(z_min) + 1


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def _result(messages: List[ValidationMessage]) -> ValidationResult:
    has_errors = any(m.severity == Severity.ERROR for m in messages)
    return ValidationResult(valid=not has_errors, messages=messages)


# ============================================================================
# Entry points
# ============================================================================

def validate_design(design: DesignInput) -> ValidationResult:
    """
    Validate any generated gear against engineering rules.

    Dispatches on ``kind``: racks and planetary trains have their own rule
    sets, every other family is validated as a GearProfile.
    """
    kind = _kind(design)
    if kind == 'rack':
        return validate_rack(design)
    if kind == 'planetary':
        return validate_planetary(design)
    return validate_profile(design)


def validate_profile(design: DesignInput) -> ValidationResult:
    """Validate a spur, helical, bevel, worm or internal gear profile."""
    messages: List[ValidationMessage] = []
    messages.extend(_validate_module(design))
    messages.extend(_validate_pressure_angle(design))
    messages.extend(_validate_teeth_count(design))
    messages.extend(_validate_root_circle(design))
    messages.extend(_validate_bore(design))
    messages.extend(_validate_helix_angle(design))
    messages.extend(_validate_pitch_angle(design))
    messages.extend(_validate_lead_angle(design))
    return _result(messages)


def validate_rack(design: DesignInput) -> ValidationResult:
    """Validate a rack. Only module and pressure angle apply."""
    messages: List[ValidationMessage] = []
    messages.extend(_validate_module(design))
    messages.extend(_validate_pressure_angle(design))
    return _result(messages)


def validate_planetary(design: DesignInput) -> ValidationResult:
    """Validate a planetary train: shared module/angle, each gear, planet spacing."""
    messages: List[ValidationMessage] = []
    sun = _get(design, 'sun')
    planet = _get(design, 'planet')
    messages.extend(_validate_module(sun))
    messages.extend(_validate_pressure_angle(sun))
    messages.extend(_validate_teeth_count(sun, label="Sun"))
    messages.extend(_validate_teeth_count(planet, label="Planet"))
    messages.extend(_validate_planet_spacing(design))
    return _result(messages)


# ============================================================================
# Rules
# ============================================================================

def _validate_module(design: DesignInput) -> List[ValidationMessage]:
    """Check module is standard or flag non-standard"""
    messages = []
    module = _get(design, 'module_mm', default=0)

    if module <= 0:
        return messages  # Skip if no module

    if not is_standard_module(module):
        nearest = nearest_standard_module(module)
        deviation = abs(module - nearest) / nearest * 100

        # Below 0.1% the user has already rounded to standard
        if deviation >= 10:
            messages.append(ValidationMessage(
                severity=Severity.WARNING,
                code="MODULE_NON_STANDARD",
                message=f"Module {module:.3f}mm is non-standard (ISO 54)",
                suggestion=f"Nearest standard module: {nearest}mm. Off-the-shelf mating gears use standard modules."
            ))
        elif deviation >= 0.1:
            messages.append(ValidationMessage(
                severity=Severity.INFO,
                code="MODULE_NEAR_STANDARD",
                message=f"Module {module:.3f}mm is close to standard {nearest}mm",
                suggestion=f"Could round to {nearest}mm with minor diameter changes"
            ))

    return messages


def _validate_pressure_angle(design: DesignInput) -> List[ValidationMessage]:
    """Check pressure angle is standard"""
    messages = []
    alpha = _get(design, 'pressure_angle_deg', default=20.0)

    if alpha not in STANDARD_PRESSURE_ANGLES_DEG:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="PRESSURE_ANGLE_NON_STANDARD",
            message=f"Pressure angle {alpha}° is non-standard",
            suggestion="Standard values are 14.5°, 20° (most common), or 25°"
        ))

    return messages


def _validate_teeth_count(design: DesignInput, label: str = "Gear") -> List[ValidationMessage]:
    """Check external tooth count against the undercut limit"""
    messages = []
    num_teeth = _get(design, 'num_teeth', default=0)
    pressure_angle = _get(design, 'pressure_angle_deg', default=20.0)

    if num_teeth <= 0 or _get(design, 'is_internal', default=False):
        return messages

    z_min = calculate_minimum_teeth(pressure_angle)
    if num_teeth < z_min:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="TEETH_UNDERCUT_RISK",
            message=f"{label} has {num_teeth} teeth, minimum is {z_min} for {pressure_angle}° pressure angle",
            suggestion="Generating cutters will undercut the tooth root; use more teeth or a larger pressure angle"
        ))

    return messages


def _validate_root_circle(design: DesignInput) -> List[ValidationMessage]:
    """Flag roots inside the base circle (flank continues radially)"""
    messages = []
    root = _get(design, 'root_radius_mm', default=0)
    base = _get(design, 'base_radius_mm', default=0)

    if _get(design, 'is_internal', default=False):
        return messages

    if 0 < root < base:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="ROOT_INSIDE_BASE",
            message=f"Root circle (r={root:.2f}mm) lies inside base circle (r={base:.2f}mm)",
            suggestion="Below the base circle the flank is drawn as a radial line"
        ))

    return messages


def _validate_bore(design: DesignInput) -> List[ValidationMessage]:
    """Check bore fits inside the root and the hub"""
    messages = []
    bore = _get(design, 'bore_diameter_mm')
    hub = _get(design, 'hub_diameter_mm')
    root_dia = _get(design, 'root_diameter_mm', default=0)

    if bore is None or bore <= 0:
        return messages

    if bore >= root_dia:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="BORE_TOO_LARGE",
            message=f"Bore ({bore:.1f}mm) is not smaller than root diameter ({root_dia:.2f}mm)",
            suggestion="Reduce bore diameter or increase module/teeth"
        ))

    if hub is not None and 0 < hub < bore:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="HUB_SMALLER_THAN_BORE",
            message=f"Hub ({hub:.1f}mm) is smaller than bore ({bore:.1f}mm)",
            suggestion="The hub will be cut away entirely; increase hub diameter"
        ))

    return messages


def _validate_helix_angle(design: DesignInput) -> List[ValidationMessage]:
    messages = []
    helix = _get(design, 'helix_angle_deg')

    if helix is None:
        return messages

    if helix < 0 or helix > HELIX_ANGLE_MAX_DEG:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="HELIX_ANGLE_OUT_OF_RANGE",
            message=f"Helix angle {helix}° is outside 0-{HELIX_ANGLE_MAX_DEG:g}°",
            suggestion="Typical helix angles are 15-30°; large angles produce high axial thrust"
        ))

    return messages


def _validate_pitch_angle(design: DesignInput) -> List[ValidationMessage]:
    messages = []
    pitch_angle = _get(design, 'pitch_angle_deg')

    if pitch_angle is None:
        return messages

    if not 0 < pitch_angle < 90:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PITCH_ANGLE_INVALID",
            message=f"Bevel pitch angle {pitch_angle}° must be between 0° and 90°",
            suggestion="A 45° pitch angle gives a 1:1 mitre pair"
        ))

    return messages


def _validate_lead_angle(design: DesignInput) -> List[ValidationMessage]:
    """Check worm lead angle is within practical range"""
    messages = []
    lead_angle = _get(design, 'lead_angle_deg')

    if lead_angle is None:
        return messages

    if lead_angle < LEAD_ANGLE_MIN_DEG:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="LEAD_ANGLE_VERY_LOW",
            message=f"Lead angle {lead_angle}° is below {LEAD_ANGLE_MIN_DEG:g}°",
            suggestion="Very low efficiency; increase starts or reduce worm diameter"
        ))
    elif lead_angle > LEAD_ANGLE_MAX_DEG:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="LEAD_ANGLE_VERY_HIGH",
            message=f"Lead angle {lead_angle}° is above {LEAD_ANGLE_MAX_DEG:g}°",
            suggestion="Unusual geometry; check the thread can be cut"
        ))

    return messages


def _validate_planet_spacing(design: DesignInput) -> List[ValidationMessage]:
    """Check equally spaced planets can mesh and do not collide"""
    messages = []
    module = _get(design, 'sun', 'module_mm', default=0)
    sun_teeth = _get(design, 'sun', 'num_teeth', default=0)
    planet_teeth = _get(design, 'planet', 'num_teeth', default=0)
    ring_teeth = _get(design, 'ring_teeth', default=0)
    planet_count = _get(design, 'planet_count', default=0)

    if planet_count <= 0 or sun_teeth <= 0 or planet_teeth <= 0:
        return messages

    if not planets_can_mesh(sun_teeth, ring_teeth, planet_count):
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="PLANET_SPACING_UNEVEN",
            message=f"Sun + ring teeth ({sun_teeth + ring_teeth}) is not divisible by {planet_count} planets",
            suggestion="Equally spaced planets will not mesh; change sun teeth or planet count"
        ))

    if planets_overlap(module, sun_teeth, planet_teeth, planet_count):
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PLANETS_OVERLAP",
            message=f"{planet_count} planets of {planet_teeth} teeth collide with each other",
            suggestion="Use fewer planets, smaller planets or a larger sun"
        ))

    return messages
