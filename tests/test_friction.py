"""
Tests for the Darcy friction factor
"""

import pytest

from ductsizer.domain.friction import (
    LAMINAR_REYNOLDS_LIMIT,
    calculate_friction_factor,
    swamee_jain_friction_factor,
)


class TestFrictionFactor:

    def test_laminar(self):
        """f = 64/Re below the laminar limit"""
        assert calculate_friction_factor(1000, 0.0003, 1.0) == pytest.approx(0.064)

    def test_laminar_ignores_roughness(self):
        smooth = calculate_friction_factor(1500, 0.0001, 1.0)
        rough = calculate_friction_factor(1500, 0.01, 1.0)
        assert smooth == rough

    def test_threshold_is_turbulent(self):
        """Re exactly 2300 takes the turbulent branch"""
        f = calculate_friction_factor(LAMINAR_REYNOLDS_LIMIT, 0.0003, 1.0)
        assert f == pytest.approx(swamee_jain_friction_factor(LAMINAR_REYNOLDS_LIMIT, 0.0003))
        assert f != pytest.approx(64 / LAMINAR_REYNOLDS_LIMIT)

    def test_no_flow_returns_zero(self):
        assert calculate_friction_factor(0, 0.0003, 1.0) == 0.0
        assert calculate_friction_factor(-5, 0.0003, 1.0) == 0.0

    def test_galvanized_trunk(self):
        """Re ~135,500 in a 16 in galvanized duct"""
        f = calculate_friction_factor(135_500, 0.0003, 16 / 12)
        assert 0.017 < f < 0.021

    def test_rougher_wall_increases_friction(self):
        smooth = calculate_friction_factor(100_000, 0.0001, 1.0)
        rough = calculate_friction_factor(100_000, 0.003, 1.0)
        assert rough > smooth

    def test_higher_reynolds_decreases_friction(self):
        assert calculate_friction_factor(500_000, 0.0003, 1.0) < calculate_friction_factor(10_000, 0.0003, 1.0)
