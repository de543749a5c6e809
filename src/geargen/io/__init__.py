"""
Geargen IO - parameter records, result models and JSON schema.

Example:
    >>> from geargen.io import parse_params
    >>> from geargen.calculator import generate
    >>>
    >>> params = parse_params({"kind": "helical", "module": 1.5, "teeth": 24})
    >>> profile = generate(params)
    >>> profile.helix_angle_deg
    15.0
"""

from .models import (
    # Geometry snapshots
    ProfilePoint,
    GearProfile,
    RackProfile,
    PlanetPlacement,
    PlanetaryAssembly,
    GearResult,

    # Parameter records
    SpurParams,
    HelicalParams,
    BevelParams,
    WormParams,
    RackParams,
    InternalParams,
    PlanetaryParams,
    GearParams,
    PARAMS_BY_KIND,
    parse_params,
    params_to_dict,
    normalize_parameter_name,
    normalize_keys,
)

from .schema import (
    SCHEMA_VERSION,
    get_params_schema,
    get_profile_schema,
    validate_json_schema,
)

__all__ = [
    # Geometry
    "ProfilePoint",
    "GearProfile",
    "RackProfile",
    "PlanetPlacement",
    "PlanetaryAssembly",
    "GearResult",

    # Parameters
    "SpurParams",
    "HelicalParams",
    "BevelParams",
    "WormParams",
    "RackParams",
    "InternalParams",
    "PlanetaryParams",
    "GearParams",
    "PARAMS_BY_KIND",
    "parse_params",
    "params_to_dict",
    "normalize_parameter_name",
    "normalize_keys",

    # Schema
    "SCHEMA_VERSION",
    "get_params_schema",
    "get_profile_schema",
    "validate_json_schema",
]
