"""
Pydantic schemas for duct system inputs and calculation results
Field names are snake_case; camelCase aliases match the front-end payloads
"""

from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from ductsizer.config import get_settings
from ductsizer.models.enums import (
    DuctFittingCategory,
    DuctLiner,
    DuctMaterial,
    DuctSectionType,
    DuctShape,
    FilterCondition,
)


def _new_id() -> str:
    return str(uuid4())


class CamelModel(BaseModel):
    """Base model accepting both snake_case names and camelCase aliases"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class AirProperties(CamelModel):
    """Air properties at the system's altitude and temperature"""
    density_lb_ft3: float = Field(..., description="Air density (lb/ft³)")
    viscosity_lb_ft_s: float = Field(..., description="Dynamic viscosity (lb/(ft·s))")
    specific_heat_btu_lb_f: float = Field(0.24, description="Specific heat (Btu/(lb·°F))")

    class Config:
        frozen = True


class DuctFitting(CamelModel):
    """A fitting instance on a duct section, referencing a fitting-library id"""
    id: str = Field(default_factory=_new_id)
    fitting_type: str = Field(..., description="Fitting library id")
    fitting_category: Optional[DuctFittingCategory] = None
    quantity: int = Field(1, ge=0)

    # Overrides take precedence over library defaults
    c_coefficient_override: Optional[float] = Field(None, ge=0)
    fixed_dp_override: Optional[float] = Field(None, ge=0, description="in. WC")

    elbow_radius_ratio: Optional[float] = None
    has_turning_vanes: Optional[bool] = None
    damper_position_percent: Optional[float] = Field(None, ge=0, le=100)
    notes: Optional[str] = None


class DuctSection(CamelModel):
    """One segment of the series flow path"""
    id: str = Field(default_factory=_new_id)
    name: str = ""
    section_type: DuctSectionType = DuctSectionType.straight
    cfm: float = Field(1000.0, ge=0)

    # Shape & dimensions (inches); diameter is used only for round sections
    shape: DuctShape = DuctShape.rectangular
    width_in: float = Field(12.0, ge=0)
    height_in: float = Field(12.0, ge=0)
    diameter_in: float = Field(12.0, ge=0)

    length_ft: float = Field(10.0, ge=0)
    material: DuctMaterial = DuctMaterial.galvanized
    liner: DuctLiner = DuctLiner.none

    # Equipment sections
    equipment_type: Optional[str] = None
    fixed_pressure_drop: Optional[float] = Field(None, ge=0, description="in. WC")
    filter_merv: Optional[int] = None
    filter_condition: Optional[FilterCondition] = None
    coil_rows: Optional[int] = None

    sort_order: int = 0
    fittings: List[DuctFitting] = Field(default_factory=list)


class DuctSystem(CamelModel):
    """An air-handling system and its design parameters"""
    id: str = Field(default_factory=_new_id)
    name: str = "New Duct System"
    # Kept as a plain string: unrecognized types fall back to supply limits
    system_type: str = "supply"
    total_cfm: float = Field(default_factory=lambda: get_settings().default_system_cfm, ge=0)
    altitude_ft: float = Field(default_factory=lambda: get_settings().default_altitude_ft)
    temperature_f: float = Field(default_factory=lambda: get_settings().default_temperature_f, gt=-459.67)
    safety_factor: float = Field(
        default_factory=lambda: get_settings().default_safety_factor,
        ge=0.0,
        le=1.0,
        description="Fractional margin applied to the calculated loss",
    )
    max_velocity_fpm: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class DuctSectionCalculation(CamelModel):
    """Per-section calculation result"""
    section_id: str
    section_name: str
    section_type: DuctSectionType
    cfm: float

    shape: DuctShape
    nominal_width: Optional[float] = None
    nominal_height: Optional[float] = None
    nominal_diameter: Optional[float] = None
    effective_width: Optional[float] = None
    effective_height: Optional[float] = None
    effective_diameter: Optional[float] = None
    hydraulic_diameter_in: float
    area_ft2: float

    velocity_fpm: float
    velocity_pressure_in_wc: float
    reynolds_number: float
    friction_factor: float

    straight_duct_loss_in_wc: float
    fittings_loss_in_wc: float
    total_section_loss_in_wc: float

    warnings: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class DuctCalculationResult(CamelModel):
    """System-level calculation result"""
    altitude_ft: float
    temperature_f: float
    air_properties: AirProperties

    sections: List[DuctSectionCalculation]

    total_straight_duct_loss: float
    total_fittings_loss: float
    subtotal_loss: float
    safety_factor_percent: float
    safety_factor_in_wc: float
    total_system_loss: float

    max_velocity_fpm: float
    total_cfm: float
    estimated_fan_bhp: float = 0.0

    warnings: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
