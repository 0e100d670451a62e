"""
Unit conversions for low-pressure air distribution
"""

GRAVITY_FT_S2 = 32.174
LBF_FT2_PER_IN_WC = 5.2  # 1 in. WC ≈ 5.2 lbf/ft²
PA_PER_IN_WC = 249.089
SQ_IN_PER_SQ_FT = 144.0
IN_PER_FT = 12.0
SECONDS_PER_MINUTE = 60.0


def in_wc_to_pa(in_wc: float) -> float:
    """Convert pressure from inches of water column to pascals"""
    return in_wc * PA_PER_IN_WC


def pa_to_in_wc(pa: float) -> float:
    """Convert pressure from pascals to inches of water column"""
    return pa / PA_PER_IN_WC


def fpm_to_fps(velocity_fpm: float) -> float:
    return velocity_fpm / SECONDS_PER_MINUTE


def inches_to_feet(inches: float) -> float:
    return inches / IN_PER_FT
