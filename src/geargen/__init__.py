"""
Geargen - Parametric involute gear geometry.

Gear dimensions and 2D tooth boundaries for spur, helical, bevel, worm,
rack, internal and planetary gears.

Example:
    >>> from geargen.calculator import calculate_spur_gear, to_summary
    >>>
    >>> gear = calculate_spur_gear(module=2.0, teeth=20)
    >>> gear.pitch_diameter_mm
    40.0
    >>> print(to_summary(gear))

Note: All imports are lazy-loaded for fast startup.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"GearKind", "Quality", "PointKind"}

_CALCULATOR = {
    "STANDARD_MODULES",
    "nearest_standard_module",
    "is_standard_module",
    "calculate_gear_profile",
    "calculate_rack",
    "compose_planetary",
    "generate",
    "generate_from_dict",
    "parse_gear_params",
    "calculate_spur_gear",
    "calculate_helical_gear",
    "calculate_bevel_gear",
    "calculate_worm_gear",
    "calculate_rack_gear",
    "calculate_internal_gear",
    "calculate_planetary_gear",
    "validate_design",
    "Severity",
    "ValidationResult",
    "GearGeometryError",
    "DesignSession",
}

_IO = {
    "parse_params",
    "GearProfile",
    "RackProfile",
    "PlanetaryAssembly",
    "ProfilePoint",
    "SpurParams",
    "HelicalParams",
    "BevelParams",
    "WormParams",
    "RackParams",
    "InternalParams",
    "PlanetaryParams",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'geargen' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "GearKind",
    "Quality",
    "PointKind",

    # Calculator (lazy loaded from calculator)
    "STANDARD_MODULES",
    "nearest_standard_module",
    "is_standard_module",
    "calculate_gear_profile",
    "calculate_rack",
    "compose_planetary",
    "generate",
    "generate_from_dict",
    "parse_gear_params",
    "calculate_spur_gear",
    "calculate_helical_gear",
    "calculate_bevel_gear",
    "calculate_worm_gear",
    "calculate_rack_gear",
    "calculate_internal_gear",
    "calculate_planetary_gear",
    "validate_design",
    "Severity",
    "ValidationResult",
    "GearGeometryError",
    "DesignSession",

    # IO (lazy loaded from io)
    "parse_params",

    # Models (lazy loaded from io)
    "GearProfile",
    "RackProfile",
    "PlanetaryAssembly",
    "ProfilePoint",
    "SpurParams",
    "HelicalParams",
    "BevelParams",
    "WormParams",
    "RackParams",
    "InternalParams",
    "PlanetaryParams",
]
