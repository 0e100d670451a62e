"""
Reference data collaborator for the duct calculator
Bundles material roughness, liners, fittings and velocity limits so
callers can inject their own tables
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from ductsizer.data.duct_fittings import ALL_DUCT_FITTINGS
from ductsizer.data.duct_materials import (
    DUCT_LINERS,
    DUCT_MATERIALS,
    FLEX_DUCT_CORRECTION,
    VELOCITY_LIMITS,
)
from ductsizer.models.enums import DuctSystemType
from ductsizer.models.reference import (
    DuctFittingData,
    DuctLinerData,
    DuctMaterialData,
    FlexDuctCorrection,
    VelocityLimits,
)
from ductsizer.services.error_types import ReferenceDataError

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_TYPE = DuctSystemType.supply.value


def _key(value) -> str:
    # Enum members and raw strings resolve to the same table key
    return getattr(value, 'value', value)


@dataclass(frozen=True)
class DuctReferenceData:
    """Lookup tables consumed by the section and system calculations"""
    materials: Mapping[str, DuctMaterialData]
    liners: Mapping[str, DuctLinerData]
    fittings: Mapping[str, DuctFittingData]
    velocity_limits: Mapping[str, VelocityLimits]
    flex_correction: FlexDuctCorrection = field(default_factory=FlexDuctCorrection)
    flex_material: str = 'flex'

    def material(self, material) -> DuctMaterialData:
        try:
            return self.materials[_key(material)]
        except KeyError:
            raise ReferenceDataError(
                f"No roughness data for material '{_key(material)}'",
                {'available': sorted(self.materials)},
            ) from None

    def liner(self, liner) -> DuctLinerData:
        try:
            return self.liners[_key(liner)]
        except KeyError:
            raise ReferenceDataError(
                f"No liner data for '{_key(liner)}'",
                {'available': sorted(self.liners)},
            ) from None

    def liner_thickness_in(self, liner) -> float:
        return self.liner(liner).thickness_in

    def roughness_for(self, material, liner) -> float:
        """
        Wall roughness (ft) for a material and liner.
        
        A lined duct takes the liner surface roughness; unlined ducts
        use the material roughness.
        """
        liner_data = self.liner(liner)
        if liner_data.roughness_ft is not None:
            return liner_data.roughness_ft
        return self.material(material).roughness_ft

    def flex_roughness(self) -> float:
        """Flex roughness with the typical installation correction applied"""
        return self.material(self.flex_material).roughness_ft * self.flex_correction.typical

    def fitting(self, fitting_id: str) -> Optional[DuctFittingData]:
        return self.fittings.get(fitting_id)

    def velocity_limits_for(self, system_type) -> VelocityLimits:
        """Velocity limits for a system type, falling back to supply limits"""
        limits = self.velocity_limits.get(_key(system_type))
        if limits is None:
            logger.warning(f"Unknown system type '{_key(system_type)}', using {DEFAULT_SYSTEM_TYPE} velocity limits")
            try:
                return self.velocity_limits[DEFAULT_SYSTEM_TYPE]
            except KeyError:
                raise ReferenceDataError(
                    f"Velocity limit table has no '{DEFAULT_SYSTEM_TYPE}' fallback entry"
                ) from None
        return limits


def build_reference_data(
    materials: Optional[Mapping[str, DuctMaterialData]] = None,
    liners: Optional[Mapping[str, DuctLinerData]] = None,
    fittings: Optional[Mapping[str, DuctFittingData]] = None,
    velocity_limits: Optional[Mapping[str, VelocityLimits]] = None,
    flex_correction: Optional[FlexDuctCorrection] = None,
) -> DuctReferenceData:
    """Build reference data, filling any omitted table from the packaged defaults"""
    fitting_table: Dict[str, DuctFittingData] = (
        dict(fittings) if fittings is not None
        else {fitting.id: fitting for fitting in ALL_DUCT_FITTINGS}
    )
    return DuctReferenceData(
        materials=dict(materials if materials is not None else DUCT_MATERIALS),
        liners=dict(liners if liners is not None else DUCT_LINERS),
        fittings=fitting_table,
        velocity_limits=dict(velocity_limits if velocity_limits is not None else VELOCITY_LIMITS),
        flex_correction=flex_correction or FLEX_DUCT_CORRECTION,
    )


DEFAULT_REFERENCE_DATA = build_reference_data()
