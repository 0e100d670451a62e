"""
Duct Pressure-Drop Calculator
Evaluates a series duct path section by section (Darcy-Weisbach with
Swamee-Jain friction factors, SMACNA fitting coefficients) and sums the
losses into a total static-pressure requirement with a safety margin.
"""

import logging
import math
from typing import Callable, Iterable, List, Optional

from ductsizer.config import get_settings
from ductsizer.domain.flow import (
    calculate_reynolds_number,
    calculate_velocity,
    calculate_velocity_pressure,
    estimate_fan_bhp,
)
from ductsizer.domain.friction import calculate_friction_factor
from ductsizer.domain.geometry import resolve_section_geometry
from ductsizer.domain.losses import calculate_fittings_loss, calculate_straight_duct_loss
from ductsizer.domain.units import inches_to_feet
from ductsizer.models.enums import DuctMaterial, DuctSectionType, DuctShape
from ductsizer.models.schemas import (
    AirProperties,
    DuctCalculationResult,
    DuctSection,
    DuctSectionCalculation,
    DuctSystem,
)
from ductsizer.services.air_properties import get_air_properties
from ductsizer.services.reference_data import DEFAULT_REFERENCE_DATA, DuctReferenceData

logger = logging.getLogger(__name__)

AirPropertiesProvider = Callable[[float, float], AirProperties]


def _round_half_up(value: float) -> int:
    # Halves round up, so 2500.5 fpm reads as 2501
    return math.floor(value + 0.5)


class DuctPressureCalculator:
    """
    Static-pressure calculator for a single series duct path.

    Holds only immutable reference data and settings, so one instance
    can be shared across threads and requests. Fan efficiency defaults
    to the configured value.
    """

    def __init__(
        self,
        reference: Optional[DuctReferenceData] = None,
        air_properties_provider: Optional[AirPropertiesProvider] = None,
        fan_efficiency: Optional[float] = None,
    ):
        self.reference = reference or DEFAULT_REFERENCE_DATA
        self.air_properties_provider = air_properties_provider or get_air_properties
        self.fan_efficiency = fan_efficiency if fan_efficiency is not None else get_settings().fan_efficiency

    def evaluate_section(
        self,
        section: DuctSection,
        air_props: AirProperties,
        system_type: str,
    ) -> DuctSectionCalculation:
        """
        Calculate velocity, friction and fitting losses for one section.

        Args:
            section: Duct section to evaluate
            air_props: Air properties for the system
            system_type: System type used to pick velocity limits

        Returns:
            Per-section calculation result
        """
        # Equipment with a rated drop bypasses the flow calculation entirely
        if section.section_type == DuctSectionType.equipment and section.fixed_pressure_drop is not None:
            return self._equipment_result(section)

        warnings: List[str] = []

        geometry = resolve_section_geometry(
            section.shape,
            section.width_in,
            section.height_in,
            section.diameter_in,
            self.reference.liner_thickness_in(section.liner),
        )
        velocity_fpm = calculate_velocity(section.cfm, geometry.area_ft2)

        if velocity_fpm <= 0:
            warnings.append(f"Section {self._label(section)} has zero airflow")

        limits = self.reference.velocity_limits_for(system_type)
        if velocity_fpm > limits.max:
            warnings.append(f"Velocity {_round_half_up(velocity_fpm)} fpm exceeds maximum {limits.max:g} fpm")
        elif velocity_fpm > limits.recommended:
            warnings.append(
                f"Velocity {_round_half_up(velocity_fpm)} fpm exceeds recommended {limits.recommended:g} fpm - {limits.noise}"
            )

        velocity_pressure_in_wc = calculate_velocity_pressure(velocity_fpm, air_props.density_lb_ft3)
        reynolds_number = calculate_reynolds_number(velocity_fpm, geometry.hydraulic_diameter_in, air_props)

        roughness_ft = self.reference.roughness_for(section.material, section.liner)
        if section.material == DuctMaterial.flex or section.section_type == DuctSectionType.flex:
            roughness_ft = self.reference.flex_roughness()
            max_flex_length = self.reference.flex_correction.max_recommended_length_ft
            if section.length_ft > max_flex_length:
                warnings.append(
                    f"Flex duct length {section.length_ft:g} ft exceeds recommended {max_flex_length:g} ft"
                )

        friction_factor = calculate_friction_factor(
            reynolds_number,
            roughness_ft,
            inches_to_feet(geometry.hydraulic_diameter_in),
        )

        straight_duct_loss_in_wc = calculate_straight_duct_loss(
            section.length_ft,
            geometry.hydraulic_diameter_in,
            friction_factor,
            velocity_pressure_in_wc,
        )
        fittings_loss_in_wc = calculate_fittings_loss(
            section.fittings,
            velocity_pressure_in_wc,
            self.reference.fitting,
        )

        logger.debug(
            f"Section {self._label(section)}: {velocity_fpm:.0f} fpm, Re={reynolds_number:.0f}, "
            f"f={friction_factor:.4f}, straight={straight_duct_loss_in_wc:.4f} in. WC, "
            f"fittings={fittings_loss_in_wc:.4f} in. WC"
        )

        is_round = section.shape == DuctShape.round
        return DuctSectionCalculation(
            section_id=section.id,
            section_name=section.name,
            section_type=section.section_type,
            cfm=section.cfm,
            shape=section.shape,
            nominal_width=section.width_in,
            nominal_height=section.height_in,
            nominal_diameter=section.diameter_in,
            effective_width=None if is_round else geometry.effective_width,
            effective_height=None if is_round else geometry.effective_height,
            effective_diameter=geometry.effective_diameter if is_round else None,
            hydraulic_diameter_in=geometry.hydraulic_diameter_in,
            area_ft2=geometry.area_ft2,
            velocity_fpm=velocity_fpm,
            velocity_pressure_in_wc=velocity_pressure_in_wc,
            reynolds_number=reynolds_number,
            friction_factor=friction_factor,
            straight_duct_loss_in_wc=straight_duct_loss_in_wc,
            fittings_loss_in_wc=fittings_loss_in_wc,
            total_section_loss_in_wc=straight_duct_loss_in_wc + fittings_loss_in_wc,
            warnings=warnings,
        )

    def evaluate_system(
        self,
        system: DuctSystem,
        sections: Iterable[DuctSection],
    ) -> DuctCalculationResult:
        """
        Calculate the total static pressure of a duct system.

        Sections are evaluated in ascending sort order as one series path;
        ties keep their input order.

        Args:
            system: System design parameters
            sections: Sections of the flow path, in any order

        Returns:
            System-level result with per-section detail and warnings
        """
        air_props = self.air_properties_provider(system.altitude_ft, system.temperature_f)

        sorted_sections = sorted(sections, key=lambda s: s.sort_order)
        section_results = [
            self.evaluate_section(section, air_props, system.system_type)
            for section in sorted_sections
        ]

        warnings: List[str] = []
        for result in section_results:
            warnings.extend(result.warnings)

        total_straight_duct_loss = sum(s.straight_duct_loss_in_wc for s in section_results)
        total_fittings_loss = sum(s.fittings_loss_in_wc for s in section_results)
        subtotal_loss = total_straight_duct_loss + total_fittings_loss

        safety_factor_percent = system.safety_factor * 100
        safety_factor_in_wc = subtotal_loss * system.safety_factor
        total_system_loss = subtotal_loss + safety_factor_in_wc

        max_velocity_fpm = max([s.velocity_fpm for s in section_results] + [0.0])

        if system.max_velocity_fpm and max_velocity_fpm > system.max_velocity_fpm:
            warnings.append(
                f"Max velocity {_round_half_up(max_velocity_fpm)} fpm exceeds constraint {system.max_velocity_fpm:g} fpm"
            )

        fan_bhp = estimate_fan_bhp(system.total_cfm, total_system_loss, self.fan_efficiency)

        logger.info(
            f"Duct system '{system.name}': {len(section_results)} sections, "
            f"total {total_system_loss:.3f} in. WC (incl. {safety_factor_percent:.0f}% safety), "
            f"max {max_velocity_fpm:.0f} fpm, {len(warnings)} warnings"
        )

        return DuctCalculationResult(
            altitude_ft=system.altitude_ft,
            temperature_f=system.temperature_f,
            air_properties=air_props,
            sections=section_results,
            total_straight_duct_loss=total_straight_duct_loss,
            total_fittings_loss=total_fittings_loss,
            subtotal_loss=subtotal_loss,
            safety_factor_percent=safety_factor_percent,
            safety_factor_in_wc=safety_factor_in_wc,
            total_system_loss=total_system_loss,
            max_velocity_fpm=max_velocity_fpm,
            total_cfm=system.total_cfm,
            estimated_fan_bhp=fan_bhp,
            warnings=warnings,
        )

    @staticmethod
    def _equipment_result(section: DuctSection) -> DuctSectionCalculation:
        """Short-circuit result for equipment with a rated pressure drop"""
        return DuctSectionCalculation(
            section_id=section.id,
            section_name=section.name,
            section_type=section.section_type,
            cfm=section.cfm,
            shape=section.shape,
            nominal_width=section.width_in,
            nominal_height=section.height_in,
            nominal_diameter=section.diameter_in,
            hydraulic_diameter_in=0.0,
            area_ft2=0.0,
            velocity_fpm=0.0,
            velocity_pressure_in_wc=0.0,
            reynolds_number=0.0,
            friction_factor=0.0,
            straight_duct_loss_in_wc=section.fixed_pressure_drop,
            fittings_loss_in_wc=0.0,
            total_section_loss_in_wc=section.fixed_pressure_drop,
            warnings=[],
        )

    @staticmethod
    def _label(section: DuctSection) -> str:
        return section.name or section.id


# Singleton instance
duct_pressure_calculator = DuctPressureCalculator()


def evaluate_section(
    section: DuctSection,
    air_props: AirProperties,
    system_type: str,
    reference: Optional[DuctReferenceData] = None,
) -> DuctSectionCalculation:
    """Evaluate one section, optionally against injected reference data"""
    calculator = DuctPressureCalculator(reference) if reference is not None else duct_pressure_calculator
    return calculator.evaluate_section(section, air_props, system_type)


def evaluate_system(
    system: DuctSystem,
    sections: Iterable[DuctSection],
    reference: Optional[DuctReferenceData] = None,
    air_properties_provider: Optional[AirPropertiesProvider] = None,
    fan_efficiency: Optional[float] = None,
) -> DuctCalculationResult:
    """Evaluate a system, optionally against injected collaborators"""
    if reference is None and air_properties_provider is None and fan_efficiency is None:
        calculator = duct_pressure_calculator
    else:
        calculator = DuctPressureCalculator(reference, air_properties_provider, fan_efficiency)
    return calculator.evaluate_system(system, sections)
