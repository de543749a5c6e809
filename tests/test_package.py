"""
Tests for the lazy top-level package namespace.
"""

import pytest

import geargen


class TestLazyImports:

    def test_version(self):
        assert geargen.__version__

    def test_every_name_resolves(self):
        for name in geargen.__all__:
            assert getattr(geargen, name) is not None

    def test_calculator_name(self):
        gear = geargen.calculate_spur_gear(2.0, 20)
        assert isinstance(gear, geargen.GearProfile)
        assert gear.kind == geargen.GearKind.SPUR

    def test_unknown_name(self):
        with pytest.raises(AttributeError):
            geargen.does_not_exist
