#!/usr/bin/env python3
"""
Evaluate a duct system described in a JSON file and print the pressure summary
"""

import argparse
import logging
import sys

from ductsizer.config import setup_logging
from ductsizer.models.schemas import DuctCalculationResult
from ductsizer.services.duct_pressure_calculator import duct_pressure_calculator
from ductsizer.services.error_types import DuctCalculationError, log_error_with_context
from ductsizer.services.system_loader import load_system_file

logger = logging.getLogger(__name__)


def print_summary(name: str, result: DuctCalculationResult):
    """Print a section table and the system totals"""
    print(f"\n=== DUCT SYSTEM: {name} ===")
    print(f"Air density: {result.air_properties.density_lb_ft3:.4f} lb/ft³ "
          f"({result.altitude_ft:g} ft, {result.temperature_f:g}°F)")
    print("\n--- Sections ---")
    print(f"{'Section':<24}{'CFM':>8}{'FPM':>8}{'Dh in':>8}{'f':>9}{'Duct':>9}{'Fittings':>10}{'Total':>9}")
    
    for section in result.sections:
        label = (section.section_name or section.section_id)[:23]
        print(f"{label:<24}{section.cfm:>8.0f}{section.velocity_fpm:>8.0f}"
              f"{section.hydraulic_diameter_in:>8.1f}{section.friction_factor:>9.4f}"
              f"{section.straight_duct_loss_in_wc:>9.3f}{section.fittings_loss_in_wc:>10.3f}"
              f"{section.total_section_loss_in_wc:>9.3f}")
    
    print("\n--- Totals (in. WC) ---")
    print(f"Straight duct:  {result.total_straight_duct_loss:.3f}")
    print(f"Fittings:       {result.total_fittings_loss:.3f}")
    print(f"Subtotal:       {result.subtotal_loss:.3f}")
    print(f"Safety ({result.safety_factor_percent:.0f}%):  {result.safety_factor_in_wc:.3f}")
    print(f"Total:          {result.total_system_loss:.3f}")
    print(f"Max velocity:   {result.max_velocity_fpm:.0f} fpm")
    print(f"Est. fan BHP:   {result.estimated_fan_bhp:.2f} at {result.total_cfm:.0f} CFM")
    
    if result.warnings:
        print("\n--- Warnings ---")
        for warning in result.warnings:
            print(f"  - {warning}")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Duct system static pressure calculator')
    parser.add_argument('input', help='JSON file with "system" and "sections"')
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the full result as JSON instead of a summary'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log per-section calculation detail'
    )
    args = parser.parse_args(argv)
    
    # Keep stdout clean for --json output
    setup_logging(sys.stderr)
    if args.verbose:
        logging.getLogger('ductsizer').setLevel(logging.DEBUG)
    
    try:
        system, sections = load_system_file(args.input)
    except FileNotFoundError:
        logger.error(f"Input file not found: {args.input}")
        return 1
    except DuctCalculationError as e:
        log_error_with_context(e, {'input': args.input})
        return 1
    
    result = duct_pressure_calculator.evaluate_system(system, sections)
    
    if args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        print_summary(system.name, result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
