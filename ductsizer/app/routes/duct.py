from fastapi import APIRouter, Query
from pydantic import Field
from typing import List, Literal, Optional
import logging

from ductsizer.config import get_settings
from ductsizer.data.duct_materials import (
    STANDARD_RECT_HEIGHTS,
    STANDARD_RECT_WIDTHS,
    STANDARD_ROUND_DIAMETERS,
)
from ductsizer.domain.units import in_wc_to_pa, pa_to_in_wc
from ductsizer.models.enums import DuctFittingCategory
from ductsizer.models.reference import DuctFittingData, DuctMaterialData, VelocityLimits
from ductsizer.models.schemas import (
    CamelModel,
    DuctCalculationResult,
    DuctSection,
    DuctSectionCalculation,
    DuctSystem,
)
from ductsizer.services.air_properties import get_air_properties
from ductsizer.services.duct_pressure_calculator import duct_pressure_calculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/duct", tags=["duct"])


class CalculateSystemRequest(CamelModel):
    system: DuctSystem
    sections: List[DuctSection] = Field(default_factory=list)


class CalculateSectionRequest(CamelModel):
    section: DuctSection
    system_type: str = "supply"
    altitude_ft: float = Field(default_factory=lambda: get_settings().default_altitude_ft)
    temperature_f: float = Field(default_factory=lambda: get_settings().default_temperature_f, gt=-459.67)


class ConvertPressureRequest(CamelModel):
    value: float
    from_unit: Literal["in_wc", "pa"]


class ConvertPressureResponse(CamelModel):
    value: float
    unit: Literal["in_wc", "pa"]


@router.post("/calculate", response_model=DuctCalculationResult)
def calculate_system(request: CalculateSystemRequest) -> DuctCalculationResult:
    """Calculate total static pressure for a duct system"""
    logger.info(f"Calculating duct system '{request.system.name}' with {len(request.sections)} sections")
    return duct_pressure_calculator.evaluate_system(request.system, request.sections)


@router.post("/section", response_model=DuctSectionCalculation)
def calculate_section(request: CalculateSectionRequest) -> DuctSectionCalculation:
    """Calculate losses for a single section at the given air conditions"""
    air_props = get_air_properties(request.altitude_ft, request.temperature_f)
    return duct_pressure_calculator.evaluate_section(request.section, air_props, request.system_type)


@router.get("/fittings", response_model=List[DuctFittingData])
def list_fittings(category: Optional[DuctFittingCategory] = Query(None)) -> List[DuctFittingData]:
    """Fitting library, optionally filtered by category"""
    fittings = duct_pressure_calculator.reference.fittings.values()
    if category is not None:
        fittings = [f for f in fittings if f.category == category]
    return list(fittings)


@router.get("/materials", response_model=List[DuctMaterialData])
def list_materials() -> List[DuctMaterialData]:
    return list(duct_pressure_calculator.reference.materials.values())


@router.get("/velocity-limits/{system_type}", response_model=VelocityLimits)
def get_velocity_limits(system_type: str) -> VelocityLimits:
    """Velocity limits for a system type (unknown types get supply limits)"""
    return duct_pressure_calculator.reference.velocity_limits_for(system_type)


@router.post("/convert", response_model=ConvertPressureResponse)
def convert_pressure(request: ConvertPressureRequest) -> ConvertPressureResponse:
    if request.from_unit == "in_wc":
        return ConvertPressureResponse(value=in_wc_to_pa(request.value), unit="pa")
    return ConvertPressureResponse(value=pa_to_in_wc(request.value), unit="in_wc")


@router.get("/sizes")
def list_standard_sizes():
    """Standard sheet-metal duct sizes in inches"""
    return {
        "rectWidths": STANDARD_RECT_WIDTHS,
        "rectHeights": STANDARD_RECT_HEIGHTS,
        "roundDiameters": STANDARD_ROUND_DIAMETERS,
    }
