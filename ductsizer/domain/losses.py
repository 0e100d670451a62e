"""
Pressure-loss evaluators: straight duct (Darcy-Weisbach) and fittings
"""

import logging
from typing import Callable, Iterable, Optional

from ductsizer.domain.units import inches_to_feet
from ductsizer.models.enums import DuctFittingMethod
from ductsizer.models.reference import DuctFittingData
from ductsizer.models.schemas import DuctFitting

logger = logging.getLogger(__name__)

FittingLookup = Callable[[str], Optional[DuctFittingData]]


def calculate_straight_duct_loss(
    length_ft: float,
    hydraulic_diameter_in: float,
    friction_factor: float,
    velocity_pressure_in_wc: float,
) -> float:
    """ΔP = f × (L/D) × Pv, in in. WC"""
    diameter_ft = inches_to_feet(hydraulic_diameter_in)
    if diameter_ft <= 0:
        return 0.0
    return friction_factor * (length_ft / diameter_ft) * velocity_pressure_in_wc


def calculate_fitting_loss(c_coefficient: float, velocity_pressure_in_wc: float) -> float:
    """ΔP = C × Pv"""
    return c_coefficient * velocity_pressure_in_wc


def evaluate_fitting_loss(
    fitting: DuctFitting,
    fitting_data: DuctFittingData,
    velocity_pressure_in_wc: float,
) -> float:
    """Loss for one fitting entry (all of its quantity), in in. WC"""
    if fitting_data.method == DuctFittingMethod.fixed_dp:
        # Rated drop from the manufacturer (terminals, equipment)
        dp = _first_defined(fitting.fixed_dp_override, fitting_data.default_dp)
        return dp * fitting.quantity

    if fitting_data.method == DuctFittingMethod.c_coefficient:
        c = _first_defined(fitting.c_coefficient_override, fitting_data.c_coefficient)
        return calculate_fitting_loss(c, velocity_pressure_in_wc) * fitting.quantity

    raise ValueError(f"Unhandled fitting method: {fitting_data.method}")


def calculate_fittings_loss(
    fittings: Iterable[DuctFitting],
    velocity_pressure_in_wc: float,
    lookup: FittingLookup,
) -> float:
    """
    Sum fitting losses for a section.
    
    Fittings whose type is not in the library are skipped and
    contribute nothing.
    """
    total = 0.0
    for fitting in fittings:
        fitting_data = lookup(fitting.fitting_type)
        if fitting_data is None:
            logger.debug(f"Skipping unknown fitting type '{fitting.fitting_type}'")
            continue
        total += evaluate_fitting_loss(fitting, fitting_data, velocity_pressure_in_wc)
    return total


def _first_defined(override: Optional[float], default: Optional[float]) -> float:
    if override is not None:
        return override
    if default is not None:
        return default
    return 0.0
