"""
Duct geometry: liner-corrected dimensions, hydraulic diameter, flow area
All linear dimensions in inches, areas in ft²
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ductsizer.domain.units import SQ_IN_PER_SQ_FT
from ductsizer.models.enums import DuctShape

# Effective dimensions never drop below one inch
MIN_EFFECTIVE_DIMENSION_IN = 1.0


@dataclass(frozen=True)
class SectionGeometry:
    """Resolved internal geometry of one duct section"""
    effective_width: Optional[float]
    effective_height: Optional[float]
    effective_diameter: Optional[float]
    hydraulic_diameter_in: float
    area_ft2: float


def get_effective_dimensions(width: float, height: float, liner_thickness_in: float) -> Tuple[float, float]:
    """
    Internal width and height after subtracting liner on all sides.
    
    Returns:
        (effective_width, effective_height), each floored at 1 inch
    """
    effective_width = max(width - 2 * liner_thickness_in, MIN_EFFECTIVE_DIMENSION_IN)
    effective_height = max(height - 2 * liner_thickness_in, MIN_EFFECTIVE_DIMENSION_IN)
    return effective_width, effective_height


def get_effective_diameter(diameter: float, liner_thickness_in: float) -> float:
    """Internal diameter of a lined round duct, floored at 1 inch"""
    return max(diameter - 2 * liner_thickness_in, MIN_EFFECTIVE_DIMENSION_IN)


def calculate_hydraulic_diameter(width: float, height: float) -> float:
    """Dh = 4A/P = 2WH/(W+H)"""
    return (2 * width * height) / (width + height)


def calculate_area(width: float, height: float, is_round: bool = False) -> float:
    """
    Cross-sectional area in ft².
    
    For round ducts `width` is the diameter and `height` is ignored.
    """
    if is_round:
        return math.pi * (width / 2) ** 2 / SQ_IN_PER_SQ_FT
    return (width * height) / SQ_IN_PER_SQ_FT


def equivalent_round_diameter(width: float, height: float) -> float:
    """Equal-friction round diameter of a rectangular duct: 1.3(ab)^0.625 / (a+b)^0.25"""
    return 1.3 * (width * height) ** 0.625 / (width + height) ** 0.25


def resolve_section_geometry(
    shape: DuctShape,
    width_in: float,
    height_in: float,
    diameter_in: float,
    liner_thickness_in: float = 0.0,
) -> SectionGeometry:
    """Resolve effective dimensions, hydraulic diameter and area for a section shape"""
    if shape == DuctShape.round:
        effective_diameter = get_effective_diameter(diameter_in, liner_thickness_in)
        return SectionGeometry(
            effective_width=None,
            effective_height=None,
            effective_diameter=effective_diameter,
            hydraulic_diameter_in=effective_diameter,
            area_ft2=calculate_area(effective_diameter, effective_diameter, is_round=True),
        )

    # Rectangular and oval share the rectangular formulas
    effective_width, effective_height = get_effective_dimensions(width_in, height_in, liner_thickness_in)
    return SectionGeometry(
        effective_width=effective_width,
        effective_height=effective_height,
        effective_diameter=None,
        hydraulic_diameter_in=calculate_hydraulic_diameter(effective_width, effective_height),
        area_ft2=calculate_area(effective_width, effective_height),
    )
