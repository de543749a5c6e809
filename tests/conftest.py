"""
Pytest configuration and shared fixtures for geargen tests.
"""

import math
import pytest


# ─── Module-scoped generated geometry ────────────────────────────────────


@pytest.fixture(scope="module")
def spur_2_20():
    """Module-scoped spur gear, module 2, 20 teeth, 20° (medium quality)."""
    from geargen.calculator import calculate_spur_gear
    return calculate_spur_gear(module=2.0, teeth=20)


@pytest.fixture(scope="module")
def internal_2_40():
    """Module-scoped internal gear, module 2, 40 teeth, 20° (medium quality)."""
    from geargen.calculator import calculate_internal_gear
    return calculate_internal_gear(module=2.0, teeth=40)


@pytest.fixture(scope="module")
def rack_2():
    """Module-scoped rack, module 2, 20°, 3 teeth."""
    from geargen.calculator import calculate_rack_gear
    return calculate_rack_gear(module=2.0, teeth=3)


@pytest.fixture(scope="module")
def planetary_2_20_10_3():
    """Module-scoped planetary train: module 2, sun 20, planet 10, 3 planets."""
    from geargen.calculator import calculate_planetary_gear
    return calculate_planetary_gear(module=2.0, sun_teeth=20, planet_teeth=10, planet_count=3)


# ─── Helper functions (no pytest dependency) ──────────────────────────────


def polar(point):
    """Return (radius, angle) of a ProfilePoint."""
    return math.hypot(point.x, point.y), math.atan2(point.y, point.x)


def rotate(point, angle):
    """Return (x, y) of a ProfilePoint rotated about the origin."""
    c, s = math.cos(angle), math.sin(angle)
    return point.x * c - point.y * s, point.x * s + point.y * c


# ─── Function-scoped fixtures (for tests that mutate or need fresh copies) ─


@pytest.fixture
def spur_form():
    """Raw form payload as a web UI would send it."""
    return {
        "type": "spur",
        "module": 2,
        "teeth": 20,
        "pressureAngle": 20,
        "faceWidth": 10,
        "hubDiameter": 10,
        "boreDiameter": 5,
        "quality": "medium",
    }


@pytest.fixture
def planetary_form():
    """Raw planetary payload using the shared ``teeth`` field for the sun."""
    return {
        "type": "planetary",
        "module": 2,
        "teeth": 20,
        "planetTeeth": 10,
        "planetCount": 3,
        "faceWidth": 8,
    }
