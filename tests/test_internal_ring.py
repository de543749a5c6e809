"""
Tests for the full internal ring boundary.
"""

import math
import pytest

from geargen.calculator.core import calculate_gear_profile
from geargen.calculator.profile import (
    sample_internal_ring,
    signed_area,
    build_internal_profile,
)
from geargen.enums import GearKind, PointKind

from conftest import polar, rotate


class TestInternalRing:

    def setup_method(self):
        self.z = 40
        self.steps = 8
        self.profile = calculate_gear_profile(2.0, self.z, 20.0, internal=True)
        self.points = sample_internal_ring(self.profile)

    def test_point_count(self):
        """z·(4·steps + 1) points, no duplicates."""
        assert len(self.points) == self.z * (4 * self.steps + 1)

    def test_low_quality_count(self):
        points = sample_internal_ring(self.profile, "low")
        assert len(points) == self.z * (4 * 3 + 1)

    def test_clockwise(self):
        assert signed_area(self.points) < 0

    def test_no_repeated_vertices(self):
        n = len(self.points)
        for i in range(n):
            a, b = self.points[i], self.points[(i + 1) % n]
            assert math.hypot(a.x - b.x, a.y - b.y) > 1e-9

    def test_rotational_repetition(self):
        """Each tooth block is the previous one turned by −2π/z."""
        block = 4 * self.steps + 1
        step = -2 * math.pi / self.z
        for i in range(block * 3):
            x, y = rotate(self.points[i], step)
            nxt = self.points[i + block]
            assert x == pytest.approx(nxt.x, abs=1e-9)
            assert y == pytest.approx(nxt.y, abs=1e-9)

    def test_radii_between_tip_and_root(self):
        ra = self.profile.outer_radius_mm
        rf = self.profile.root_radius_mm
        for p in self.points:
            r, _ = polar(p)
            assert ra - 1e-9 <= r <= rf + 1e-9

    def test_segment_kinds_per_tooth(self):
        block = self.points[:4 * self.steps + 1]
        kinds = [p.kind for p in block]
        assert kinds.count(PointKind.FLANK_LEFT) == self.steps + 1
        assert kinds.count(PointKind.TIP) == self.steps
        assert kinds.count(PointKind.FLANK_RIGHT) == self.steps
        assert kinds.count(PointKind.ROOT) == self.steps

    def test_starts_on_root_circle(self):
        r, _ = polar(self.points[0])
        assert r == pytest.approx(self.profile.root_radius_mm)


class TestBuildInternalProfile:

    def test_rim_and_kind(self, internal_2_40):
        assert internal_2_40.kind == GearKind.INTERNAL
        assert internal_2_40.is_internal is True
        assert internal_2_40.rim_radius_mm == pytest.approx(42.5 + 4.0)

    def test_rim_outside_root(self):
        profile = build_internal_profile(1.5, 60)
        assert profile.rim_radius_mm > profile.root_radius_mm

    def test_display_points_are_ring(self, internal_2_40):
        assert len(internal_2_40.display_points) == 40 * 33
        assert signed_area(internal_2_40.display_points) < 0


class TestSignedArea:

    def test_unit_square(self):
        from geargen.io import ProfilePoint
        square = [
            ProfilePoint(x=0, y=0, kind=PointKind.CORNER),
            ProfilePoint(x=1, y=0, kind=PointKind.CORNER),
            ProfilePoint(x=1, y=1, kind=PointKind.CORNER),
            ProfilePoint(x=0, y=1, kind=PointKind.CORNER),
        ]
        assert signed_area(square) == pytest.approx(1.0)
        assert signed_area(list(reversed(square))) == pytest.approx(-1.0)
