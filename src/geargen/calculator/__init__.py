"""
Gear Calculator - Involute gear dimensions and 2D tooth profiles.

Every function here is stateless: the same inputs always give an identical
result. Results are frozen Pydantic models from geargen.io.

Example:
    >>> from geargen.calculator import calculate_spur_gear, validate_design
    >>>
    >>> gear = calculate_spur_gear(module=2.0, teeth=20)
    >>> gear.outer_diameter_mm
    44.0
    >>> validate_design(gear).valid
    True
"""

from .core import (
    # Constants
    STANDARD_MODULES,

    # Utility functions
    nearest_standard_module,
    is_standard_module,

    # Angle math
    deg_to_rad,
    rad_to_deg,
    involute,
    involute_at_radius,
    pressure_angle_at_radius,
    tooth_half_angle,

    # Dimensions
    calculate_tooth_dimensions,
    calculate_gear_profile,
)

from .profile import (
    # Boundary sampling
    quality_steps,
    sample_external_tooth,
    sample_internal_tooth,
    sample_internal_ring,
    signed_area,
    build_external_profile,
    build_internal_profile,
)

from .rack import calculate_rack

from .planetary import (
    # Planetary trains
    calculate_ring_teeth,
    calculate_planet_teeth,
    calculate_centre_distance,
    planets_can_mesh,
    planets_overlap,
    compose_planetary,
)

from .gear_types import (
    # Family adapters (take a parameter record)
    generate,
    generate_from_dict,
    parse_gear_params,
    typed_error,
    generate_spur,
    generate_helical,
    generate_bevel,
    generate_worm,
    generate_rack,
    generate_internal,
    generate_planetary,

    # Keyword conveniences
    calculate_spur_gear,
    calculate_helical_gear,
    calculate_bevel_gear,
    calculate_worm_gear,
    calculate_rack_gear,
    calculate_internal_gear,
    calculate_planetary_gear,
)

from .errors import (
    GearGeometryError,
    InvalidModule,
    InvalidToothCount,
    InvalidPressureAngle,
    DegenerateProfile,
    InvalidPlanetaryConfiguration,
)

from .validation import (
    # Validation
    validate_design,
    validate_profile,
    validate_rack,
    validate_planetary,
    calculate_minimum_teeth,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    # Output formatters
    to_json,
    to_markdown,
    to_summary,
    export_filename,
)

from .session import DesignSession

from ..enums import (
    # Type-safe enums
    GearKind,
    Quality,
    PointKind,
)

# Convenience imports
from ..io import GearProfile, RackProfile, PlanetaryAssembly, ProfilePoint


__all__ = [
    # Constants
    "STANDARD_MODULES",

    # Enums (type-safe)
    "GearKind",
    "Quality",
    "PointKind",

    # Models
    "GearProfile",
    "RackProfile",
    "PlanetaryAssembly",
    "ProfilePoint",

    # Utility functions
    "nearest_standard_module",
    "is_standard_module",

    # Angle math
    "deg_to_rad",
    "rad_to_deg",
    "involute",
    "involute_at_radius",
    "pressure_angle_at_radius",
    "tooth_half_angle",

    # Dimensions and sampling
    "calculate_tooth_dimensions",
    "calculate_gear_profile",
    "quality_steps",
    "sample_external_tooth",
    "sample_internal_tooth",
    "sample_internal_ring",
    "signed_area",
    "build_external_profile",
    "build_internal_profile",
    "calculate_rack",

    # Planetary
    "calculate_ring_teeth",
    "calculate_planet_teeth",
    "calculate_centre_distance",
    "planets_can_mesh",
    "planets_overlap",
    "compose_planetary",

    # Family adapters
    "generate",
    "generate_from_dict",
    "parse_gear_params",
    "typed_error",
    "generate_spur",
    "generate_helical",
    "generate_bevel",
    "generate_worm",
    "generate_rack",
    "generate_internal",
    "generate_planetary",
    "calculate_spur_gear",
    "calculate_helical_gear",
    "calculate_bevel_gear",
    "calculate_worm_gear",
    "calculate_rack_gear",
    "calculate_internal_gear",
    "calculate_planetary_gear",

    # Errors
    "GearGeometryError",
    "InvalidModule",
    "InvalidToothCount",
    "InvalidPressureAngle",
    "DegenerateProfile",
    "InvalidPlanetaryConfiguration",

    # Validation
    "validate_design",
    "validate_profile",
    "validate_rack",
    "validate_planetary",
    "calculate_minimum_teeth",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
    "export_filename",

    # Session
    "DesignSession",
]
