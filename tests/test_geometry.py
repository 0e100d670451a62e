"""
Tests for duct geometry resolution
"""

import math

import pytest

from ductsizer.domain.geometry import (
    MIN_EFFECTIVE_DIMENSION_IN,
    calculate_area,
    calculate_hydraulic_diameter,
    equivalent_round_diameter,
    get_effective_dimensions,
    resolve_section_geometry,
)
from ductsizer.models.enums import DuctShape


class TestRectangularGeometry:
    """Rectangular and oval sections"""

    def test_hydraulic_diameter_24x12(self):
        """2WH/(W+H) for 24x12 is 16 in"""
        assert calculate_hydraulic_diameter(24, 12) == pytest.approx(16.0)

    def test_square_hydraulic_diameter_equals_side(self):
        assert calculate_hydraulic_diameter(12, 12) == pytest.approx(12.0)

    def test_area_in_square_feet(self):
        assert calculate_area(24, 12) == pytest.approx(2.0)

    def test_liner_subtracted_on_both_sides(self):
        width, height = get_effective_dimensions(24, 12, 1.0)
        assert width == pytest.approx(22.0)
        assert height == pytest.approx(10.0)

    def test_liner_never_collapses_dimension(self):
        """A liner thicker than half the duct clamps at one inch"""
        width, height = get_effective_dimensions(2, 2, 1.0)
        assert width == MIN_EFFECTIVE_DIMENSION_IN
        assert height == MIN_EFFECTIVE_DIMENSION_IN

    def test_oval_uses_rectangular_formulas(self):
        oval = resolve_section_geometry(DuctShape.oval, 24, 12, 0)
        rect = resolve_section_geometry(DuctShape.rectangular, 24, 12, 0)
        assert oval == rect

    def test_rectangular_reports_no_diameter(self):
        geometry = resolve_section_geometry(DuctShape.rectangular, 24, 12, 10)
        assert geometry.effective_diameter is None
        assert geometry.effective_width == 24
        assert geometry.effective_height == 12


class TestRoundGeometry:
    """Round sections ignore width and height"""

    def test_hydraulic_diameter_is_effective_diameter(self):
        geometry = resolve_section_geometry(DuctShape.round, 99, 99, 14)
        assert geometry.hydraulic_diameter_in == pytest.approx(14.0)
        assert geometry.effective_width is None
        assert geometry.effective_height is None

    def test_round_area(self):
        geometry = resolve_section_geometry(DuctShape.round, 0, 0, 12)
        assert geometry.area_ft2 == pytest.approx(math.pi * 36 / 144)

    def test_lined_round_duct(self):
        geometry = resolve_section_geometry(DuctShape.round, 0, 0, 12, 1.0)
        assert geometry.effective_diameter == pytest.approx(10.0)

    def test_zero_diameter_clamps_to_one_inch(self):
        geometry = resolve_section_geometry(DuctShape.round, 0, 0, 0)
        assert geometry.effective_diameter == MIN_EFFECTIVE_DIMENSION_IN
        assert geometry.area_ft2 > 0


class TestLinerMonotonicity:
    """Thicker liner never increases flow area or hydraulic diameter"""

    @pytest.mark.parametrize("shape", [DuctShape.rectangular, DuctShape.round])
    def test_area_and_diameter_non_increasing(self, shape):
        previous = None
        for thickness in (0.0, 0.5, 0.75, 1.0, 2.0, 10.0):
            geometry = resolve_section_geometry(shape, 20, 10, 16, thickness)
            if previous is not None:
                assert geometry.area_ft2 <= previous.area_ft2
                assert geometry.hydraulic_diameter_in <= previous.hydraulic_diameter_in
            previous = geometry


class TestEquivalentRoundDiameter:

    def test_square_duct(self):
        """A 12x12 duct is roughly equivalent to a 13 in round"""
        assert equivalent_round_diameter(12, 12) == pytest.approx(13.1, abs=0.1)

    def test_symmetric_in_width_and_height(self):
        assert equivalent_round_diameter(24, 12) == pytest.approx(equivalent_round_diameter(12, 24))
