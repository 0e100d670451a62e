"""
Air properties at altitude and temperature
Density from a barometric lapse-rate correction and the ideal gas law,
viscosity from Sutherland's formula
"""

from ductsizer.models.schemas import AirProperties

# Standard air: 0.075 lb/ft³ at sea level, 70°F
STANDARD_DENSITY_LB_FT3 = 0.075
STANDARD_TEMPERATURE_R = 530.0
AIR_SPECIFIC_HEAT_BTU_LB_F = 0.24

# Sutherland constants for air
SUTHERLAND_MU0_PA_S = 1.716e-5
SUTHERLAND_T0_K = 273.15
SUTHERLAND_S_K = 110.4
PA_S_TO_LB_FT_S = 0.672


def calculate_air_density(altitude_ft: float, temperature_f: float) -> float:
    """
    Air density in lb/ft³.
    
    Pressure ratio P/P0 ≈ (1 - 6.8753e-6 × h)^5.2559, then scaled by
    absolute temperature relative to 70°F.
    """
    temperature_r = temperature_f + 459.67
    # Clamped above the model's valid altitude range
    pressure_ratio = max(1 - 0.0000068753 * altitude_ft, 0.0) ** 5.2559
    return STANDARD_DENSITY_LB_FT3 * pressure_ratio * (STANDARD_TEMPERATURE_R / temperature_r)


def calculate_air_viscosity(temperature_f: float) -> float:
    """Dynamic viscosity of air in lb/(ft·s)"""
    temperature_k = (temperature_f + 459.67) * 5 / 9
    mu_pa_s = (
        SUTHERLAND_MU0_PA_S
        * (temperature_k / SUTHERLAND_T0_K) ** 1.5
        * ((SUTHERLAND_T0_K + SUTHERLAND_S_K) / (temperature_k + SUTHERLAND_S_K))
    )
    return mu_pa_s * PA_S_TO_LB_FT_S


def get_air_properties(altitude_ft: float, temperature_f: float) -> AirProperties:
    """Complete air properties for a system evaluation"""
    return AirProperties(
        density_lb_ft3=calculate_air_density(altitude_ft, temperature_f),
        viscosity_lb_ft_s=calculate_air_viscosity(temperature_f),
        specific_heat_btu_lb_f=AIR_SPECIFIC_HEAT_BTU_LB_F,
    )
