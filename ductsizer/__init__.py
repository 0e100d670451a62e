"""
ductsizer - duct network pressure-drop calculator for HVAC air distribution
"""

from ductsizer.domain.flow import estimate_fan_bhp
from ductsizer.domain.geometry import equivalent_round_diameter
from ductsizer.domain.units import in_wc_to_pa, pa_to_in_wc
from ductsizer.models import (
    AirProperties,
    DuctCalculationResult,
    DuctFitting,
    DuctSection,
    DuctSectionCalculation,
    DuctSystem,
)
from ductsizer.services.air_properties import get_air_properties
from ductsizer.services.duct_pressure_calculator import (
    DuctPressureCalculator,
    evaluate_section,
    evaluate_system,
)
from ductsizer.services.reference_data import (
    DEFAULT_REFERENCE_DATA,
    DuctReferenceData,
    build_reference_data,
)

__version__ = "1.0.0"
