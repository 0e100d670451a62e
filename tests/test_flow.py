"""
Tests for velocity, velocity pressure, Reynolds number and unit helpers
"""

import pytest

from ductsizer.domain.flow import (
    calculate_reynolds_number,
    calculate_velocity,
    calculate_velocity_pressure,
    estimate_fan_bhp,
)
from ductsizer.domain.units import PA_PER_IN_WC, in_wc_to_pa, pa_to_in_wc


class TestVelocity:

    def test_cfm_over_area(self):
        assert calculate_velocity(2000, 2.0) == pytest.approx(1000.0)

    def test_zero_area_gives_zero_velocity(self):
        assert calculate_velocity(2000, 0.0) == 0.0

    def test_zero_cfm(self):
        assert calculate_velocity(0, 2.0) == 0.0


class TestVelocityPressure:

    def test_standard_air_1000_fpm(self):
        """Standard air at 1000 fpm is about 0.062 in. WC, i.e. (V/4005)^2"""
        pv = calculate_velocity_pressure(1000, 0.075)
        assert pv == pytest.approx((1000 / 4005) ** 2, rel=5e-3)

    def test_scales_with_velocity_squared(self):
        low = calculate_velocity_pressure(1000, 0.075)
        high = calculate_velocity_pressure(2000, 0.075)
        assert high == pytest.approx(4 * low)

    def test_scales_with_density(self):
        assert calculate_velocity_pressure(1000, 0.06) < calculate_velocity_pressure(1000, 0.075)


class TestReynoldsNumber:

    def test_main_trunk_reynolds(self, standard_air):
        """1000 fpm through a 16 in hydraulic diameter"""
        re = calculate_reynolds_number(1000, 16, standard_air)
        assert re == pytest.approx(135_500, rel=1e-3)

    def test_zero_velocity(self, standard_air):
        assert calculate_reynolds_number(0, 16, standard_air) == 0.0


class TestPressureConversion:

    def test_one_inch_water_column(self):
        assert in_wc_to_pa(1.0) == pytest.approx(PA_PER_IN_WC)

    def test_pa_to_in_wc(self):
        assert pa_to_in_wc(249.089) == pytest.approx(1.0)

    @pytest.mark.parametrize("value", [0.0, 0.05, 0.75, 2.5, -1.2])
    def test_conversion_inverts(self, value):
        assert pa_to_in_wc(in_wc_to_pa(value)) == pytest.approx(value)


class TestFanBhp:

    def test_fan_brake_horsepower(self):
        """2000 CFM at 1.0 in. WC and 65% efficiency"""
        assert estimate_fan_bhp(2000, 1.0) == pytest.approx(2000 / (6356 * 0.65))

    def test_custom_efficiency(self):
        assert estimate_fan_bhp(6356, 1.0, fan_efficiency=1.0) == pytest.approx(1.0)

    def test_non_positive_efficiency(self):
        assert estimate_fan_bhp(2000, 1.0, fan_efficiency=0) == 0.0
