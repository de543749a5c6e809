"""
Tests for planetary train composition.
"""

import math
import pytest

from geargen.calculator.planetary import (
    calculate_ring_teeth,
    calculate_planet_teeth,
    calculate_centre_distance,
    planets_can_mesh,
    planets_overlap,
    compose_planetary,
)
from geargen.calculator.errors import InvalidPlanetaryConfiguration, InvalidToothCount
from geargen.calculator.profile import signed_area
from geargen.enums import GearKind


class TestToothRelations:

    def test_ring_teeth(self):
        assert calculate_ring_teeth(20, 10) == 40

    def test_planet_teeth(self):
        assert calculate_planet_teeth(20, 40) == 10
        assert calculate_planet_teeth(20, 41) is None

    def test_centre_distance(self):
        assert calculate_centre_distance(2.0, 20, 10) == pytest.approx(30.0)

    def test_can_mesh(self):
        assert planets_can_mesh(20, 40, 3)
        assert not planets_can_mesh(20, 40, 4)

    def test_overlap(self):
        assert not planets_overlap(2.0, 20, 10, 3)
        assert planets_overlap(1.0, 10, 20, 4)


class TestComposePlanetary:

    def test_reference_train(self, planetary_2_20_10_3):
        train = planetary_2_20_10_3
        assert train.kind == GearKind.PLANETARY
        assert train.ring_teeth == 40
        assert train.centre_distance_mm == pytest.approx(30.0)
        assert train.planet_count == 3
        assert train.meshing_ok is True

    def test_parts(self, planetary_2_20_10_3):
        train = planetary_2_20_10_3
        assert train.sun.num_teeth == 20
        assert train.planet.num_teeth == 10
        assert train.ring.num_teeth == 40
        assert train.ring.is_internal is True
        assert train.ring.kind == GearKind.INTERNAL
        assert signed_area(train.ring.display_points) < 0

    def test_shared_module(self, planetary_2_20_10_3):
        train = planetary_2_20_10_3
        assert train.sun.module_mm == train.planet.module_mm == train.ring.module_mm == 2.0

    def test_placements(self, planetary_2_20_10_3):
        placements = planetary_2_20_10_3.placements
        assert [p.index for p in placements] == [0, 1, 2]
        assert placements[0].x_mm == pytest.approx(30.0)
        assert placements[0].y_mm == pytest.approx(0.0, abs=1e-12)
        assert placements[1].angle_deg == pytest.approx(120.0)
        assert placements[1].x_mm == pytest.approx(-15.0)
        assert placements[1].y_mm == pytest.approx(30.0 * math.sin(2 * math.pi / 3))
        for p in placements:
            assert math.hypot(p.x_mm, p.y_mm) == pytest.approx(30.0)

    def test_phase(self, planetary_2_20_10_3):
        for p in planetary_2_20_10_3.placements:
            assert p.phase_rad == pytest.approx(-p.angle_rad * 20 / 10)

    def test_uneven_spacing_flagged(self):
        train = compose_planetary(2.0, 20, 10, planet_count=4)
        assert train.meshing_ok is False
        assert len(train.placements) == 4

    def test_uneven_spacing_strict(self):
        with pytest.raises(InvalidPlanetaryConfiguration):
            compose_planetary(2.0, 20, 10, planet_count=4, strict=True)

    def test_overlap_not_raised_by_default(self):
        train = compose_planetary(1.0, 10, 20, planet_count=4)
        assert train.meshing_ok is True

    def test_overlap_strict(self):
        with pytest.raises(InvalidPlanetaryConfiguration):
            compose_planetary(1.0, 10, 20, planet_count=4, strict=True)

    @pytest.mark.parametrize("count", [0, 2, 2.5, True])
    def test_planet_count(self, count):
        with pytest.raises(InvalidPlanetaryConfiguration):
            compose_planetary(2.0, 20, 10, planet_count=count)

    def test_small_sun(self):
        with pytest.raises(InvalidToothCount):
            compose_planetary(2.0, 3, 10)

    def test_face_width_on_every_gear(self):
        train = compose_planetary(2.0, 20, 10, face_width=8.0)
        assert train.face_width_mm == 8.0
        assert train.sun.face_width_mm == 8.0
        assert train.planet.face_width_mm == 8.0
        assert train.ring.face_width_mm == 8.0
