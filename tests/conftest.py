"""
Pytest configuration and fixtures
"""
import pytest

from ductsizer.models import AirProperties, DuctSection, DuctSystem
from ductsizer.models.enums import DuctMaterial, DuctShape
from ductsizer.services.duct_pressure_calculator import DuctPressureCalculator


@pytest.fixture
def standard_air():
    """Standard air at sea level, 70°F"""
    return AirProperties(density_lb_ft3=0.075, viscosity_lb_ft_s=1.23e-5)


@pytest.fixture
def calculator():
    """Calculator using the packaged reference tables"""
    return DuctPressureCalculator()


@pytest.fixture
def main_trunk():
    """24x12 galvanized trunk, 50 ft at 2000 CFM (1000 fpm)"""
    return DuctSection(
        id="trunk",
        name="Main Trunk",
        shape=DuctShape.rectangular,
        width_in=24.0,
        height_in=12.0,
        length_ft=50.0,
        cfm=2000.0,
        material=DuctMaterial.galvanized,
    )


@pytest.fixture
def supply_system():
    """Sea-level supply system with a 15% safety factor"""
    return DuctSystem(
        id="ahu-1",
        name="AHU-1 Supply",
        system_type="supply",
        total_cfm=2000.0,
        altitude_ft=0.0,
        temperature_f=70.0,
        safety_factor=0.15,
    )
