"""
Tests for single-tooth boundary sampling (external and internal).
"""

import math
import pytest

from geargen.calculator.core import calculate_gear_profile
from geargen.calculator.profile import (
    quality_steps,
    sample_external_tooth,
    sample_internal_tooth,
    build_external_profile,
)
from geargen.enums import GearKind, PointKind, Quality

from conftest import polar


def _expected_count(steps):
    return 2 * steps + max(2, steps // 2) + 5


class TestQualitySteps:

    def test_tiers(self):
        assert quality_steps("low") == 3
        assert quality_steps(Quality.MEDIUM) == 8
        assert quality_steps("high") == 16

    def test_unknown_quality(self):
        with pytest.raises(ValueError):
            quality_steps("ultra")


class TestExternalTooth:

    def setup_method(self):
        self.profile = calculate_gear_profile(2.0, 20, 20.0)
        self.points = sample_external_tooth(self.profile)

    @pytest.mark.parametrize("quality,steps", [("low", 3), ("medium", 8), ("high", 16)])
    def test_point_count(self, quality, steps):
        points = sample_external_tooth(self.profile, quality)
        assert len(points) == _expected_count(steps)

    def test_segment_order(self):
        kinds = [p.kind for p in self.points]
        assert kinds[0] == PointKind.ROOT_START
        assert kinds[1] == PointKind.ROOT_BOTTOM
        assert kinds[-2] == PointKind.ROOT_TOP
        assert kinds[-1] == PointKind.ROOT_END
        assert kinds.count(PointKind.FLANK_BOTTOM) == 9
        assert kinds.count(PointKind.TIP) == 4
        assert kinds.count(PointKind.FLANK_TOP) == 8

    def test_mirror_symmetry(self):
        """Point i mirrors point n−1−i about the x-axis."""
        n = len(self.points)
        for i in range(n):
            a, b = self.points[i], self.points[n - 1 - i]
            assert a.x == pytest.approx(b.x, abs=1e-9)
            assert a.y == pytest.approx(-b.y, abs=1e-9)

    def test_root_ends_at_half_pitch(self):
        half_pitch = math.pi / 20
        r0, a0 = polar(self.points[0])
        r1, a1 = polar(self.points[-1])
        assert r0 == pytest.approx(self.profile.root_radius_mm)
        assert r1 == pytest.approx(self.profile.root_radius_mm)
        assert a0 == pytest.approx(-half_pitch)
        assert a1 == pytest.approx(half_pitch)

    def test_radii_within_root_and_tip(self):
        rf = self.profile.root_radius_mm
        ra = self.profile.outer_radius_mm
        for p in self.points:
            r, _ = polar(p)
            assert rf - 1e-9 <= r <= ra + 1e-9

    def test_tip_points_on_tip_circle(self):
        for p in self.points:
            if p.kind == PointKind.TIP:
                r, _ = polar(p)
                assert r == pytest.approx(self.profile.outer_radius_mm)

    def test_flank_starts_at_base_circle(self):
        """Root is inside the base circle here, so the flank begins at rb."""
        assert self.profile.root_radius_mm < self.profile.base_radius_mm
        first_flank = next(p for p in self.points if p.kind == PointKind.FLANK_BOTTOM)
        r, _ = polar(first_flank)
        assert r == pytest.approx(self.profile.base_radius_mm)

    def test_flank_starts_at_root_outside_base(self):
        """With many teeth the root is outside rb and the flank starts there."""
        profile = calculate_gear_profile(1.0, 60, 20.0)
        assert profile.root_radius_mm > profile.base_radius_mm
        points = sample_external_tooth(profile)
        r, _ = polar(points[2])
        assert r == pytest.approx(profile.root_radius_mm)
        # Connector coincides with the last flank point
        assert points[-2].x == pytest.approx(points[-3].x)
        assert points[-2].y == pytest.approx(points[-3].y)

    def test_default_quality_from_profile(self):
        profile = calculate_gear_profile(2.0, 20, 20.0, quality="low")
        assert len(sample_external_tooth(profile)) == _expected_count(3)

    def test_deterministic(self):
        assert sample_external_tooth(self.profile) == sample_external_tooth(self.profile)


class TestInternalTooth:

    def setup_method(self):
        self.profile = calculate_gear_profile(2.0, 40, 20.0, internal=True)
        self.points = sample_internal_tooth(self.profile)

    def test_same_skeleton(self):
        assert len(self.points) == _expected_count(8)
        assert self.points[0].kind == PointKind.ROOT_START
        assert self.points[-1].kind == PointKind.ROOT_END

    def test_mirror_symmetry(self):
        n = len(self.points)
        for i in range(n):
            a, b = self.points[i], self.points[n - 1 - i]
            assert a.x == pytest.approx(b.x, abs=1e-9)
            assert a.y == pytest.approx(-b.y, abs=1e-9)

    def test_widest_at_root(self):
        """Internal tooth is wider at the rim side than at the tip."""
        _, root_angle = polar(self.points[2])
        tip_angle = max(abs(polar(p)[1]) for p in self.points if p.kind == PointKind.TIP)
        assert abs(root_angle) > tip_angle


class TestBuildExternalProfile:

    def test_kind_and_extras(self):
        profile = build_external_profile(
            2.0, 20, kind=GearKind.HELICAL, helix_angle_deg=20.0, face_width_mm=8.0
        )
        assert profile.kind == GearKind.HELICAL
        assert profile.helix_angle_deg == 20.0
        assert profile.face_width_mm == 8.0
        assert len(profile.display_points) == _expected_count(8)
