"""
JSON schema export and validation for gear parameter records.

This defines the contract between a form/UI caller (JSON in) and the
calculator. The schemas are generated from the Pydantic models; this module
adds a lightweight runtime check for raw dicts that reports every problem
at once instead of stopping at the first.
"""

from typing import Any, Dict

from pydantic import TypeAdapter, ValidationError

from ..enums import GearKind
from .models import GearParams, GearProfile, PlanetaryAssembly, RackProfile, parse_params

SCHEMA_VERSION = "1.0"


def get_params_schema() -> Dict[str, Any]:
    """JSON schema of the tagged parameter union (discriminated by ``kind``)."""
    schema = TypeAdapter(GearParams).json_schema()
    schema["schema_version"] = SCHEMA_VERSION
    return schema


def get_profile_schema(kind: GearKind = GearKind.SPUR) -> Dict[str, Any]:
    """JSON schema of the result produced for a gear kind."""
    kind = GearKind(kind)
    if kind == GearKind.RACK:
        model = RackProfile
    elif kind == GearKind.PLANETARY:
        model = PlanetaryAssembly
    else:
        model = GearProfile
    schema = model.model_json_schema()
    schema["schema_version"] = SCHEMA_VERSION
    return schema


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Validate a raw parameter dict against the parameter schema.

    Args:
        data: Parsed JSON data

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }

    Example:
        >>> result = validate_json_schema({"kind": "spur", "module": 2})
        >>> result["valid"]
        True
    """
    errors = []
    warnings = []

    if not isinstance(data, dict):
        return {
            "valid": False,
            "errors": [f"Expected a JSON object, got {type(data).__name__}"],
            "warnings": [],
            "schema_version": "unknown",
        }

    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field (assuming current format)")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    if "kind" not in data:
        warnings.append("Missing 'kind' field (assuming 'spur')")
    else:
        valid_kinds = [k.value for k in GearKind]
        kind = data["kind"]
        if not isinstance(kind, str) or kind.lower() not in valid_kinds:
            errors.append(
                f"Invalid kind '{kind}'. Must be one of: {', '.join(valid_kinds)}"
            )

    if not errors:
        params = {k: v for k, v in data.items() if k != "schema_version"}
        try:
            parse_params(params)
        except ValidationError as e:
            for err in e.errors():
                location = ".".join(str(part) for part in err["loc"])
                errors.append(f"{location}: {err['msg']}")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version
    }
