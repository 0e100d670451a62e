"""
Enums for duct system models to ensure type safety and consistency
"""

from enum import Enum


class DuctSystemType(str, Enum):
    """Air-handling system types, used to select velocity limits"""
    supply = 'supply'
    return_air = 'return'
    exhaust = 'exhaust'
    outside_air = 'outside_air'


class DuctShape(str, Enum):
    """Duct cross-section shapes"""
    rectangular = 'rectangular'
    round = 'round'
    oval = 'oval'


class DuctMaterial(str, Enum):
    """Duct wall materials with distinct surface roughness"""
    galvanized = 'galvanized'
    aluminum = 'aluminum'
    stainless = 'stainless'
    fiberglass = 'fiberglass'
    flex = 'flex'


class DuctLiner(str, Enum):
    """Internal acoustic liner options (thickness in inches)"""
    none = 'none'
    three_quarter_inch = '0.75'
    one_inch = '1.0'


class DuctSectionType(str, Enum):
    """How a section is evaluated"""
    straight = 'straight'
    flex = 'flex'
    equipment = 'equipment'


class FilterCondition(str, Enum):
    clean = 'clean'
    dirty = 'dirty'


class DuctFittingCategory(str, Enum):
    """Fitting library categories"""
    elbow = 'elbow'
    transition = 'transition'
    tee = 'tee'
    wye = 'wye'
    damper = 'damper'
    terminal = 'terminal'
    equipment = 'equipment'


class DuctFittingMethod(str, Enum):
    """Loss method for a fitting type"""
    c_coefficient = 'c_coefficient'
    fixed_dp = 'fixed_dp'
