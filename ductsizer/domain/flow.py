"""
Flow properties: velocity, velocity pressure, Reynolds number
"""

from ductsizer.domain.units import (
    GRAVITY_FT_S2,
    LBF_FT2_PER_IN_WC,
    fpm_to_fps,
    inches_to_feet,
)
from ductsizer.models.schemas import AirProperties


def calculate_velocity(cfm: float, area_ft2: float) -> float:
    """Air velocity in fpm; zero when the area is degenerate"""
    if area_ft2 <= 0:
        return 0.0
    return cfm / area_ft2


def calculate_reynolds_number(
    velocity_fpm: float,
    hydraulic_diameter_in: float,
    air: AirProperties,
) -> float:
    """Re = ρVD/μ with V in ft/s and D in ft"""
    velocity_fps = fpm_to_fps(velocity_fpm)
    diameter_ft = inches_to_feet(hydraulic_diameter_in)
    return (air.density_lb_ft3 * velocity_fps * diameter_ft) / air.viscosity_lb_ft_s


def calculate_velocity_pressure(velocity_fpm: float, density_lb_ft3: float) -> float:
    """
    Velocity pressure in in. WC.
    
    Pv = ρV²/(2g) gives lbf/ft², divided by 5.2 to get in. WC.
    """
    velocity_fps = fpm_to_fps(velocity_fpm)
    pv_lbf_ft2 = (density_lb_ft3 * velocity_fps ** 2) / (2 * GRAVITY_FT_S2)
    return pv_lbf_ft2 / LBF_FT2_PER_IN_WC


def estimate_fan_bhp(cfm: float, total_pressure_in_wc: float, fan_efficiency: float = 0.65) -> float:
    """BHP = (CFM × TP) / (6356 × η)"""
    if fan_efficiency <= 0:
        return 0.0
    return (cfm * total_pressure_in_wc) / (6356 * fan_efficiency)
