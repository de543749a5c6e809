"""
Tests for the gear family adapters and generate() dispatch.
"""

import logging
import pytest
from pydantic import ValidationError

from geargen.calculator import (
    generate,
    generate_from_dict,
    parse_gear_params,
    calculate_spur_gear,
    calculate_helical_gear,
    calculate_bevel_gear,
    calculate_worm_gear,
    calculate_rack_gear,
    calculate_internal_gear,
    calculate_planetary_gear,
)
from geargen.calculator.errors import (
    InvalidModule,
    InvalidPlanetaryConfiguration,
    InvalidPressureAngle,
    InvalidToothCount,
)
from geargen.enums import GearKind
from geargen.io import (
    GearProfile,
    PlanetaryAssembly,
    RackProfile,
    SpurParams,
    HelicalParams,
    WormParams,
)


class TestFamilies:

    def test_spur(self, spur_2_20):
        assert isinstance(spur_2_20, GearProfile)
        assert spur_2_20.kind == GearKind.SPUR
        assert spur_2_20.pitch_diameter_mm == pytest.approx(40.0)
        assert spur_2_20.outer_diameter_mm == pytest.approx(44.0)
        assert spur_2_20.root_diameter_mm == pytest.approx(35.0)
        assert spur_2_20.base_diameter_mm == pytest.approx(37.588, abs=1e-3)

    def test_spur_body_fields(self, spur_2_20):
        assert spur_2_20.face_width_mm == 10.0
        assert spur_2_20.hub_diameter_mm == 10.0
        assert spur_2_20.bore_diameter_mm == 5.0

    def test_helical_keeps_spur_profile(self, spur_2_20):
        """The helix only affects extrusion; the 2D tooth is unchanged."""
        helical = calculate_helical_gear(2.0, 20, helix_angle=20.0)
        assert helical.kind == GearKind.HELICAL
        assert helical.helix_angle_deg == 20.0
        assert helical.display_points == spur_2_20.display_points

    def test_bevel(self):
        bevel = calculate_bevel_gear(2.0, 20)
        assert bevel.kind == GearKind.BEVEL
        assert bevel.pitch_angle_deg == 45.0

    def test_worm_starts(self):
        worm = calculate_worm_gear(2.0, starts=4, lead_angle=8.0)
        assert worm.kind == GearKind.WORM
        assert worm.starts == 4
        assert worm.num_teeth == 4
        assert worm.lead_angle_deg == 8.0

    def test_worm_minimum_starts(self):
        with pytest.raises(InvalidToothCount):
            calculate_worm_gear(2.0, starts=1)

    def test_rack(self):
        rack = calculate_rack_gear(1.5, teeth=5)
        assert isinstance(rack, RackProfile)
        assert rack.num_teeth == 5
        assert len(rack.display_points) == 20

    def test_internal(self, internal_2_40):
        assert internal_2_40.kind == GearKind.INTERNAL
        assert internal_2_40.outer_diameter_mm == pytest.approx(76.0)
        assert internal_2_40.root_diameter_mm == pytest.approx(85.0)
        assert internal_2_40.face_width_mm == 10.0

    def test_planetary(self, planetary_2_20_10_3):
        assert isinstance(planetary_2_20_10_3, PlanetaryAssembly)
        assert planetary_2_20_10_3.ring_teeth == 40

    def test_planetary_convenience_strict(self):
        from geargen.calculator.errors import InvalidPlanetaryConfiguration
        with pytest.raises(InvalidPlanetaryConfiguration):
            calculate_planetary_gear(2.0, 20, 10, planet_count=4, strict=True)


class TestGenerate:

    def test_idempotent(self):
        params = HelicalParams(module=1.5, teeth=32, helix_angle=20.0)
        assert generate(params) == generate(params)

    def test_from_dict(self):
        gear = generate_from_dict({"kind": "internal", "teeth": 40})
        assert gear.is_internal is True
        assert gear.rim_radius_mm == pytest.approx(46.5)

    def test_from_dict_defaults_to_spur(self):
        gear = generate_from_dict({"teeth": 24})
        assert gear.kind == GearKind.SPUR
        assert gear.num_teeth == 24

    def test_unknown_params_type(self):
        with pytest.raises(TypeError):
            generate({"kind": "spur"})

    def test_invalid_module_propagates(self):
        with pytest.raises(InvalidModule):
            generate(SpurParams(module=0))

    def test_worm_helix_alias(self):
        gear = generate_from_dict({"kind": "worm", "teeth": 4, "helix_angle": 7.5})
        assert gear.lead_angle_deg == 7.5
        assert isinstance(generate(WormParams(teeth=4)), GearProfile)


class TestRecordErrors:
    """Wrongly typed gear quantities surface as typed gear errors."""

    def test_fractional_teeth(self):
        with pytest.raises(InvalidToothCount):
            calculate_spur_gear(2.0, 20.5)

    def test_fractional_internal_teeth(self):
        with pytest.raises(InvalidToothCount):
            calculate_internal_gear(2.0, 40.5)

    def test_fractional_planet_count(self):
        with pytest.raises(InvalidPlanetaryConfiguration):
            calculate_planetary_gear(2.0, 20, 10, planet_count=2.5)

    def test_text_pressure_angle(self):
        with pytest.raises(InvalidPressureAngle):
            calculate_helical_gear(2.0, 20, pressure_angle="steep")

    def test_from_dict_text_module(self):
        with pytest.raises(InvalidModule) as excinfo:
            generate_from_dict({"module": "x"})
        assert excinfo.value.value == "x"

    def test_from_dict_sun_teeth_alias(self):
        with pytest.raises(InvalidToothCount):
            generate_from_dict({"kind": "planetary", "teeth": 20.5})

    def test_other_fields_stay_validation_errors(self):
        with pytest.raises(ValidationError):
            generate_from_dict({"face_width": -1})

    def test_parse_gear_params(self):
        params = parse_gear_params({"kind": "rack", "module": 1.5})
        assert params.module == 1.5
        with pytest.raises(InvalidToothCount):
            parse_gear_params({"kind": "rack", "teeth": 0})


class TestHook:

    def test_start_and_done(self):
        events = []
        generate(SpurParams(), hook=lambda event, payload: events.append((event, payload)))
        assert [e for e, _ in events] == ["generate.start", "generate.done"]
        done = events[1][1]
        assert done["kind"] == "spur"
        assert done["points"] == 25
        assert done["elapsed_s"] >= 0

    def test_planetary_point_total(self):
        events = []
        generate_from_dict({"kind": "planetary"}, hook=lambda e, p: events.append((e, p)))
        done = events[-1][1]
        assert done["points"] == 25 + 25 + 40 * 33

    def test_error_event(self):
        events = []
        with pytest.raises(InvalidToothCount):
            generate(SpurParams(teeth=3), hook=lambda e, p: events.append((e, p)))
        assert [e for e, _ in events] == ["generate.start", "generate.error"]
        assert events[1][1]["error"] == "InvalidToothCount"


class TestLogging:

    def test_debug_log(self, caplog):
        caplog.set_level(logging.DEBUG, logger="geargen.calculator.gear_types")
        generate(SpurParams())
        assert "Generated spur gear" in caplog.text
