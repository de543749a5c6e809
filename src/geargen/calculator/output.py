"""Output formatters for gear designs.

Converts GearProfile / RackProfile / PlanetaryAssembly models to JSON,
Markdown and a plain-text summary, and builds export file names.

Uses Pydantic's model_dump(mode='json') for serialization, so enums become
their string values.
"""

import json
from typing import Optional, TYPE_CHECKING

from ..enums import GearKind
from ..io import GearResult
from ..io.schema import SCHEMA_VERSION

if TYPE_CHECKING:
    from .validation import ValidationResult


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types."""
    return model.model_dump(mode='json')


def _message_dicts(messages) -> list:
    return [
        {
            'severity': msg.severity.value,
            'code': msg.code,
            'message': msg.message,
            'suggestion': msg.suggestion
        }
        for msg in messages
    ]


def to_json(
    result: GearResult,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2,
    include_points: bool = True
) -> str:
    """Convert a generated gear to JSON string.

    Args:
        result: Output of generate() or one of the calculate_*_gear functions
        validation: Optional validation results to include in output
        indent: JSON indentation level (default: 2)
        include_points: Keep display points (the bulk of the payload)

    Returns:
        JSON string with schema version, dimensions and optional extras
    """
    design_dict = _model_to_dict(result)

    if not include_points:
        design_dict.pop('display_points', None)
        for part in ('sun', 'planet', 'ring'):
            if part in design_dict:
                design_dict[part].pop('display_points', None)

    if 'schema_version' not in design_dict:
        design_dict['schema_version'] = SCHEMA_VERSION

    if validation:
        design_dict['validation'] = {
            'valid': validation.valid,
            'errors': _message_dicts(validation.errors),
            'warnings': _message_dicts(validation.warnings),
            'infos': _message_dicts(validation.infos),
        }

    return json.dumps(design_dict, indent=indent)


def _profile_rows(gear: dict) -> str:
    md = "| Dimension | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Teeth | {gear['num_teeth']} |\n"
    md += f"| Tip Diameter | {gear['outer_diameter_mm']:.3f} mm |\n"
    md += f"| Pitch Diameter | {gear['pitch_diameter_mm']:.3f} mm |\n"
    md += f"| Base Diameter | {gear['base_diameter_mm']:.3f} mm |\n"
    md += f"| Root Diameter | {gear['root_diameter_mm']:.3f} mm |\n"
    md += f"| Addendum | {gear['addendum_mm']:.3f} mm |\n"
    md += f"| Dedendum | {gear['dedendum_mm']:.3f} mm |\n"
    md += f"| Whole Depth | {gear['whole_depth_mm']:.3f} mm |\n"
    md += f"| Circular Pitch | {gear['circular_pitch_mm']:.3f} mm |\n"
    md += f"| Tooth Thickness | {gear['tooth_thickness_mm']:.3f} mm |\n"
    md += f"| Clearance | {gear['clearance_mm']:.3f} mm |\n"
    if gear.get('rim_radius_mm') is not None:
        md += f"| Rim Diameter | {2 * gear['rim_radius_mm']:.3f} mm |\n"
    return md


def to_markdown(
    result: GearResult,
    validation: Optional["ValidationResult"] = None
) -> str:
    """Convert a generated gear to a markdown specification.

    Args:
        result: Output of generate()
        validation: Optional validation results to include

    Returns:
        Markdown specification string
    """
    design_dict = _model_to_dict(result)
    kind = design_dict['kind']

    md = f"# {kind.title()} Gear Design Specification\n\n"

    if kind == GearKind.PLANETARY.value:
        sun = design_dict['sun']
        md += "## Overview\n\n"
        md += "| Parameter | Value |\n"
        md += "|-----------|-------|\n"
        md += f"| Module | {sun['module_mm']:.3f} mm |\n"
        md += f"| Pressure Angle | {sun['pressure_angle_deg']:.1f}° |\n"
        md += f"| Sun Teeth | {sun['num_teeth']} |\n"
        md += f"| Planet Teeth | {design_dict['planet']['num_teeth']} |\n"
        md += f"| Ring Teeth | {design_dict['ring_teeth']} |\n"
        md += f"| Planets | {design_dict['planet_count']} |\n"
        md += f"| Centre Distance | {design_dict['centre_distance_mm']:.3f} mm |\n"
        md += f"| Equal Spacing Meshes | {'Yes' if design_dict['meshing_ok'] else 'No'} |\n\n"
        for part in ('sun', 'planet', 'ring'):
            md += f"## {part.title()}\n\n"
            md += _profile_rows(design_dict[part])
            md += "\n"

        md += "## Planet Placement\n\n"
        md += "| Planet | Angle | X | Y | Phase |\n"
        md += "|--------|-------|---|---|-------|\n"
        for p in design_dict['placements']:
            md += (f"| {p['index']} | {p['angle_deg']:.1f}° | {p['x_mm']:.3f} mm | "
                   f"{p['y_mm']:.3f} mm | {p['phase_rad']:.4f} rad |\n")
        md += "\n"

    elif kind == GearKind.RACK.value:
        md += "## Rack Tooth\n\n"
        md += "| Dimension | Value |\n"
        md += "|-----------|-------|\n"
        md += f"| Module | {design_dict['module_mm']:.3f} mm |\n"
        md += f"| Pressure Angle | {design_dict['pressure_angle_deg']:.1f}° |\n"
        md += f"| Circular Pitch | {design_dict['circular_pitch_mm']:.3f} mm |\n"
        md += f"| Addendum | {design_dict['addendum_mm']:.3f} mm |\n"
        md += f"| Dedendum | {design_dict['dedendum_mm']:.3f} mm |\n"
        md += f"| Top Width | {design_dict['top_width_mm']:.3f} mm |\n"
        md += f"| Bottom Width | {design_dict['bottom_width_mm']:.3f} mm |\n"
        md += f"| Teeth | {design_dict['num_teeth']} |\n"
        md += f"| Length | {design_dict['length_mm']:.3f} mm |\n\n"

    else:
        md += "## Overview\n\n"
        md += "| Parameter | Value |\n"
        md += "|-----------|-------|\n"
        md += f"| Module | {design_dict['module_mm']:.3f} mm |\n"
        md += f"| Pressure Angle | {design_dict['pressure_angle_deg']:.1f}° |\n"
        md += f"| Internal | {'Yes' if design_dict['is_internal'] else 'No'} |\n"
        if design_dict.get('helix_angle_deg') is not None:
            md += f"| Helix Angle | {design_dict['helix_angle_deg']:.1f}° |\n"
        if design_dict.get('pitch_angle_deg') is not None:
            md += f"| Pitch Angle | {design_dict['pitch_angle_deg']:.1f}° |\n"
        if design_dict.get('starts') is not None:
            md += f"| Starts | {design_dict['starts']} |\n"
        if design_dict.get('lead_angle_deg') is not None:
            md += f"| Lead Angle | {design_dict['lead_angle_deg']:.1f}° |\n"
        md += "\n"

        md += "## Dimensions\n\n"
        md += _profile_rows(design_dict)
        md += "\n"

        if design_dict.get('bore_diameter_mm') or design_dict.get('hub_diameter_mm'):
            md += "## Body\n\n"
            md += f"- Face Width: {design_dict.get('face_width_mm') or 0:.1f} mm\n"
            md += f"- Hub Diameter: {design_dict.get('hub_diameter_mm') or 0:.1f} mm\n"
            md += f"- Bore Diameter: {design_dict.get('bore_diameter_mm') or 0:.1f} mm\n\n"

    if validation:
        md += "## Validation\n\n"

        if validation.valid:
            md += "**Status:** ✅ Design is valid\n\n"
        else:
            md += "**Status:** ❌ Design has errors\n\n"

        if validation.errors:
            md += "### Errors\n\n"
            for msg in validation.errors:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.warnings:
            md += "### Warnings\n\n"
            for msg in validation.warnings:
                md += f"- **{msg.code}**: {msg.message}\n"
                if msg.suggestion:
                    md += f"  - *Suggestion*: {msg.suggestion}\n"
            md += "\n"

        if validation.infos:
            md += "### Information\n\n"
            for msg in validation.infos:
                md += f"- {msg.message}\n"
            md += "\n"

    md += "## Notes\n\n"
    md += "- All dimensions in millimeters unless otherwise noted\n"
    md += "- Standard ISO 53 tooth proportions (addendum 1.0 m, dedendum 1.25 m)\n"
    if kind == GearKind.PLANETARY.value:
        md += "- Planet phase is a display alignment, not a kinematic solution\n"
    md += "\n"

    md += "---\n"
    md += "*Generated by Geargen*\n"

    return md


def to_summary(result: GearResult) -> str:
    """Convert a generated gear to a formatted text summary."""
    design_dict = _model_to_dict(result)
    kind = design_dict['kind']

    if kind == GearKind.PLANETARY.value:
        sun = design_dict['sun']
        planet = design_dict['planet']
        ring = design_dict['ring']
        lines = [
            "═══ Planetary Gear Design ═══",
            f"Module: {sun['module_mm']:.3f} mm",
            f"Pressure angle: {sun['pressure_angle_deg']:.1f}°",
            "",
            f"Sun:    {sun['num_teeth']} teeth, pitch Ø {sun['pitch_diameter_mm']:.2f} mm",
            f"Planet: {planet['num_teeth']} teeth, pitch Ø {planet['pitch_diameter_mm']:.2f} mm",
            f"Ring:   {ring['num_teeth']} teeth, pitch Ø {ring['pitch_diameter_mm']:.2f} mm",
            "",
            f"Planets: {design_dict['planet_count']}",
            f"Centre distance: {design_dict['centre_distance_mm']:.2f} mm",
            f"Equal spacing meshes: {'Yes' if design_dict['meshing_ok'] else 'No'}",
        ]
        return "\n".join(lines)

    if kind == GearKind.RACK.value:
        lines = [
            "═══ Rack Design ═══",
            f"Module: {design_dict['module_mm']:.3f} mm",
            f"Pressure angle: {design_dict['pressure_angle_deg']:.1f}°",
            "",
            f"  Circular pitch: {design_dict['circular_pitch_mm']:.2f} mm",
            f"  Top width:      {design_dict['top_width_mm']:.2f} mm",
            f"  Bottom width:   {design_dict['bottom_width_mm']:.2f} mm",
            f"  Teeth:          {design_dict['num_teeth']}",
            f"  Length:         {design_dict['length_mm']:.2f} mm",
        ]
        return "\n".join(lines)

    lines = [
        f"═══ {kind.title()} Gear Design ═══",
        f"Module: {design_dict['module_mm']:.3f} mm",
        f"Pressure angle: {design_dict['pressure_angle_deg']:.1f}°",
        "",
        f"  Tip diameter:   {design_dict['outer_diameter_mm']:.2f} mm",
        f"  Pitch diameter: {design_dict['pitch_diameter_mm']:.2f} mm",
        f"  Base diameter:  {design_dict['base_diameter_mm']:.2f} mm",
        f"  Root diameter:  {design_dict['root_diameter_mm']:.2f} mm",
        f"  Teeth:          {design_dict['num_teeth']}",
    ]
    if design_dict.get('rim_radius_mm') is not None:
        lines.append(f"  Rim diameter:   {2 * design_dict['rim_radius_mm']:.2f} mm")
    if design_dict.get('helix_angle_deg') is not None:
        lines.append(f"  Helix angle:    {design_dict['helix_angle_deg']:.1f}°")
    if design_dict.get('pitch_angle_deg') is not None:
        lines.append(f"  Pitch angle:    {design_dict['pitch_angle_deg']:.1f}°")
    if design_dict.get('lead_angle_deg') is not None:
        lines.append(f"  Lead angle:     {design_dict['lead_angle_deg']:.1f}° ({design_dict['starts']} starts)")
    lines.append(f"  Points:         {len(design_dict['display_points'])}")

    return "\n".join(lines)


def export_filename(params) -> str:
    """Download name for the extruded model of a parameter record.

    Examples:
        spurgear_m2_Z20_b10.stl
        helicalgear_m2_Z20_b10_beta15.stl
        planetary_Zs20_Zp10_N3_m2_b10.stl
    """
    kind = params.kind
    m = f"{params.module:g}"
    b = f"{params.face_width:g}"

    if kind == GearKind.PLANETARY.value:
        filename = (f"{kind}_Zs{params.sun_teeth}_Zp{params.planet_teeth}"
                    f"_N{params.planet_count}_m{m}_b{b}")
    else:
        filename = f"{kind}gear_m{m}_Z{params.teeth}_b{b}"
        if kind == GearKind.HELICAL.value:
            filename += f"_beta{params.helix_angle:g}"

    return filename + ".stl"
