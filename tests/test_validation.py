"""
Tests for advisory design validation.

Validation never raises: every finding is graded INFO, WARNING or ERROR.
"""

import json
import pytest

from geargen.calculator import (
    calculate_spur_gear,
    calculate_helical_gear,
    calculate_bevel_gear,
    calculate_worm_gear,
    calculate_internal_gear,
    calculate_planetary_gear,
    calculate_rack_gear,
    to_json,
)
from geargen.calculator.validation import (
    validate_design,
    calculate_minimum_teeth,
    Severity,
)


def _codes(result):
    """Extract code strings from a ValidationResult."""
    return [m.code for m in result.messages]


def _severities(result):
    """Extract {code: severity}."""
    return {m.code: m.severity for m in result.messages}


class TestMinimumTeeth:

    @pytest.mark.parametrize("angle,expected", [(14.5, 32), (20.0, 18), (25.0, 12)])
    def test_values(self, angle, expected):
        assert calculate_minimum_teeth(angle) == expected


class TestProfileRules:

    def test_reference_gear_valid(self, spur_2_20):
        result = validate_design(spur_2_20)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_root_inside_base(self, spur_2_20):
        result = validate_design(spur_2_20)
        assert _severities(result)["ROOT_INSIDE_BASE"] == Severity.INFO

    def test_undercut(self):
        result = validate_design(calculate_spur_gear(2.0, 10))
        assert _severities(result)["TEETH_UNDERCUT_RISK"] == Severity.WARNING
        assert result.valid

    def test_internal_skips_undercut(self):
        result = validate_design(calculate_internal_gear(2.0, 12))
        assert "TEETH_UNDERCUT_RISK" not in _codes(result)
        assert "ROOT_INSIDE_BASE" not in _codes(result)

    def test_module_near_standard(self):
        result = validate_design(calculate_spur_gear(2.1, 20))
        assert _severities(result)["MODULE_NEAR_STANDARD"] == Severity.INFO

    def test_module_non_standard(self):
        result = validate_design(calculate_spur_gear(0.35, 20, bore_diameter=2.0))
        assert _severities(result)["MODULE_NON_STANDARD"] == Severity.WARNING

    def test_pressure_angle_non_standard(self):
        result = validate_design(calculate_spur_gear(2.0, 20, pressure_angle=22.0))
        assert "PRESSURE_ANGLE_NON_STANDARD" in _codes(result)

    def test_bore_too_large(self):
        result = validate_design(calculate_spur_gear(2.0, 20, bore_diameter=40.0))
        assert not result.valid
        assert _severities(result)["BORE_TOO_LARGE"] == Severity.ERROR
        assert _severities(result)["HUB_SMALLER_THAN_BORE"] == Severity.WARNING

    def test_no_bore(self):
        result = validate_design(calculate_spur_gear(2.0, 20, bore_diameter=0.0))
        assert "BORE_TOO_LARGE" not in _codes(result)

    def test_helix_out_of_range(self):
        result = validate_design(calculate_helical_gear(2.0, 20, helix_angle=50.0))
        assert "HELIX_ANGLE_OUT_OF_RANGE" in _codes(result)

    def test_pitch_angle_invalid(self):
        result = validate_design(calculate_bevel_gear(2.0, 20, pitch_angle=95.0))
        assert not result.valid
        assert "PITCH_ANGLE_INVALID" in _codes(result)

    @pytest.mark.parametrize("lead,code", [(0.5, "LEAD_ANGLE_VERY_LOW"), (50.0, "LEAD_ANGLE_VERY_HIGH")])
    def test_lead_angle(self, lead, code):
        result = validate_design(calculate_worm_gear(2.0, 4, lead_angle=lead))
        assert code in _codes(result)

    def test_every_message_has_suggestion(self):
        result = validate_design(calculate_spur_gear(2.1, 10, bore_diameter=40.0))
        assert result.messages
        assert all(m.suggestion for m in result.messages)


class TestRackRules:

    def test_reference_rack_clean(self):
        assert validate_design(calculate_rack_gear(2.0)).messages == []

    def test_non_standard_angle(self):
        result = validate_design(calculate_rack_gear(2.0, pressure_angle=22.0))
        assert _codes(result) == ["PRESSURE_ANGLE_NON_STANDARD"]


class TestPlanetaryRules:

    def test_reference_train(self, planetary_2_20_10_3):
        result = validate_design(planetary_2_20_10_3)
        assert result.valid
        assert "PLANET_SPACING_UNEVEN" not in _codes(result)

    def test_small_planet_undercut_labelled(self, planetary_2_20_10_3):
        result = validate_design(planetary_2_20_10_3)
        undercut = [m for m in result.messages if m.code == "TEETH_UNDERCUT_RISK"]
        assert len(undercut) == 1
        assert undercut[0].message.startswith("Planet")

    def test_uneven_spacing(self):
        result = validate_design(calculate_planetary_gear(2.0, 20, 10, planet_count=4))
        assert _severities(result)["PLANET_SPACING_UNEVEN"] == Severity.WARNING
        assert result.valid

    def test_overlap(self):
        result = validate_design(calculate_planetary_gear(1.0, 10, 20, planet_count=4))
        assert not result.valid
        assert _severities(result)["PLANETS_OVERLAP"] == Severity.ERROR


class TestDictInput:

    def test_saved_json_revalidates(self):
        """A design loaded back from JSON validates like the model."""
        gear = calculate_spur_gear(2.0, 10)
        data = json.loads(to_json(gear, include_points=False))
        assert _codes(validate_design(data)) == _codes(validate_design(gear))

    def test_planetary_dict(self, planetary_2_20_10_3):
        data = json.loads(to_json(planetary_2_20_10_3, include_points=False))
        assert _codes(validate_design(data)) == _codes(validate_design(planetary_2_20_10_3))
