from ductsizer.models.enums import (
    DuctFittingCategory,
    DuctFittingMethod,
    DuctLiner,
    DuctMaterial,
    DuctSectionType,
    DuctShape,
    DuctSystemType,
    FilterCondition,
)
from ductsizer.models.reference import (
    DuctFittingData,
    DuctLinerData,
    DuctMaterialData,
    FlexDuctCorrection,
    VelocityLimits,
)
from ductsizer.models.schemas import (
    AirProperties,
    DuctCalculationResult,
    DuctFitting,
    DuctSection,
    DuctSectionCalculation,
    DuctSystem,
)
