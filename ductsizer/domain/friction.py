"""
Darcy friction factor
Laminar below Re 2300, Swamee-Jain (explicit Colebrook-White) above
"""

import math

LAMINAR_REYNOLDS_LIMIT = 2300


def swamee_jain_friction_factor(reynolds_number: float, relative_roughness: float) -> float:
    """f = 0.25 / [log10(ε/D / 3.7 + 5.74 / Re^0.9)]²"""
    term1 = relative_roughness / 3.7
    term2 = 5.74 / reynolds_number ** 0.9
    return 0.25 / math.log10(term1 + term2) ** 2


def calculate_friction_factor(
    reynolds_number: float,
    roughness_ft: float,
    hydraulic_diameter_ft: float,
) -> float:
    """
    Darcy friction factor for duct flow.
    
    The 2300 laminar/turbulent boundary is a hard cutoff with no
    transition blending. Zero or negative Re (no flow) returns 0.
    
    Args:
        reynolds_number: Reynolds number
        roughness_ft: Absolute wall roughness (ft)
        hydraulic_diameter_ft: Hydraulic diameter (ft)
        
    Returns:
        Dimensionless Darcy friction factor
    """
    if reynolds_number <= 0:
        return 0.0

    if reynolds_number < LAMINAR_REYNOLDS_LIMIT:
        return 64 / reynolds_number

    relative_roughness = roughness_ft / hydraulic_diameter_ft
    return swamee_jain_friction_factor(reynolds_number, relative_roughness)
