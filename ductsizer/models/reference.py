"""
Reference-data records for materials, liners, fittings and velocity limits
"""

from typing import Optional

from ductsizer.models.enums import DuctFittingCategory, DuctFittingMethod
from ductsizer.models.schemas import CamelModel


class DuctMaterialData(CamelModel):
    id: str
    display_name: str
    roughness_ft: float
    description: Optional[str] = None
    max_velocity_fpm: Optional[float] = None
    notes: Optional[str] = None

    class Config:
        frozen = True


class DuctLinerData(CamelModel):
    id: str
    display_name: str
    thickness_in: float
    roughness_ft: Optional[float] = None  # None: use material roughness

    class Config:
        frozen = True


class DuctFittingData(CamelModel):
    """A fitting-library entry and its loss method"""
    id: str
    display_name: str
    category: DuctFittingCategory
    method: DuctFittingMethod
    c_coefficient: Optional[float] = None
    default_dp: Optional[float] = None  # in. WC
    description: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        frozen = True


class VelocityLimits(CamelModel):
    recommended: float
    max: float
    noise: str

    class Config:
        frozen = True


class FlexDuctCorrection(CamelModel):
    """Friction multipliers for flexible duct by installation quality"""
    fully_extended: float = 1.0
    typical: float = 1.5
    compressed: float = 2.5
    max_recommended_length_ft: float = 5.0

    class Config:
        frozen = True
