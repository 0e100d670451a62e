"""
Duct material roughness, liner properties and velocity design limits
Based on ASHRAE Fundamentals and SMACNA
"""

from ductsizer.models.reference import (
    DuctLinerData,
    DuctMaterialData,
    FlexDuctCorrection,
    VelocityLimits,
)

DUCT_MATERIALS = {
    'galvanized': DuctMaterialData(
        id='galvanized',
        display_name='Galvanized Steel',
        roughness_ft=0.0003,  # 0.09 mm
        description='Standard galvanized sheet metal duct',
        max_velocity_fpm=2500,
        notes='Most common duct material for commercial HVAC',
    ),
    'aluminum': DuctMaterialData(
        id='aluminum',
        display_name='Aluminum',
        roughness_ft=0.0001,  # 0.03 mm
        description='Smooth aluminum duct',
        max_velocity_fpm=2500,
        notes='Lower friction than galvanized, corrosion resistant',
    ),
    'stainless': DuctMaterialData(
        id='stainless',
        display_name='Stainless Steel',
        roughness_ft=0.00015,  # 0.045 mm
        description='Stainless steel duct',
        max_velocity_fpm=2500,
        notes='Used in corrosive or sanitary environments',
    ),
    'fiberglass': DuctMaterialData(
        id='fiberglass',
        display_name='Fiberglass Duct Board',
        roughness_ft=0.003,  # 0.9 mm
        description='Fiberglass duct board (internal surface)',
        max_velocity_fpm=2000,
        notes='Higher friction, provides acoustic and thermal insulation',
    ),
    'flex': DuctMaterialData(
        id='flex',
        display_name='Flexible Duct',
        roughness_ft=0.003,  # fully extended
        description='Flexible insulated duct',
        max_velocity_fpm=1500,
        notes='Use sparingly, max 5 ft recommended. Higher friction when compressed.',
    ),
}

# Liner reduces internal dimensions and replaces the wall roughness
DUCT_LINERS = {
    'none': DuctLinerData(id='none', display_name='No Liner', thickness_in=0.0, roughness_ft=None),
    '0.75': DuctLinerData(id='0.75', display_name='3/4" Liner', thickness_in=0.75, roughness_ft=0.003),
    '1.0': DuctLinerData(id='1.0', display_name='1" Liner', thickness_in=1.0, roughness_ft=0.003),
}

VELOCITY_LIMITS = {
    'supply': VelocityLimits(
        recommended=2000,
        max=2500,
        noise='Above 2000 fpm may cause noise issues',
    ),
    'return': VelocityLimits(
        recommended=1500,
        max=2000,
        noise='Above 1500 fpm may cause noise issues',
    ),
    'exhaust': VelocityLimits(
        recommended=2000,
        max=3000,
        noise='Higher velocities acceptable in non-occupied areas',
    ),
    'outside_air': VelocityLimits(
        recommended=1500,
        max=2000,
        noise='Lower velocities for intake louvers',
    ),
}

# Flex duct has higher friction when not fully extended
FLEX_DUCT_CORRECTION = FlexDuctCorrection(
    fully_extended=1.0,
    typical=1.5,
    compressed=2.5,
    max_recommended_length_ft=5.0,
)

# Standard sheet metal sizes (inches)
STANDARD_RECT_WIDTHS = [
    4, 6, 8, 10, 12, 14, 16, 18, 20, 22, 24, 26, 28, 30,
    32, 34, 36, 38, 40, 42, 44, 46, 48, 52, 56, 60, 64, 68, 72, 80, 84, 96,
]

STANDARD_RECT_HEIGHTS = [
    4, 6, 8, 10, 12, 14, 16, 18, 20, 22, 24, 26, 28, 30,
    32, 34, 36, 38, 40, 42, 44, 46, 48,
]

STANDARD_ROUND_DIAMETERS = [
    4, 5, 6, 7, 8, 9, 10, 12, 14, 16, 18, 20, 22, 24,
    26, 28, 30, 32, 34, 36, 38, 40, 42, 44, 46, 48,
    50, 52, 54, 56, 58, 60,
]
