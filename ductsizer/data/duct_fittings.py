"""
Duct fitting library
SMACNA loss coefficients (C) and typical fixed pressure drops (in. WC)
"""

from typing import List, Optional

from ductsizer.models.enums import DuctFittingCategory, DuctFittingMethod
from ductsizer.models.reference import DuctFittingData


def _c_fitting(id: str, name: str, category: DuctFittingCategory, c: float,
               description: str, notes: str) -> DuctFittingData:
    return DuctFittingData(
        id=id,
        display_name=name,
        category=category,
        method=DuctFittingMethod.c_coefficient,
        c_coefficient=c,
        description=description,
        notes=notes,
    )


def _dp_fitting(id: str, name: str, category: DuctFittingCategory, dp: float,
                description: str, notes: str) -> DuctFittingData:
    return DuctFittingData(
        id=id,
        display_name=name,
        category=category,
        method=DuctFittingMethod.fixed_dp,
        default_dp=dp,
        description=description,
        notes=notes,
    )


ELBOW = DuctFittingCategory.elbow
TRANSITION = DuctFittingCategory.transition
TEE = DuctFittingCategory.tee
WYE = DuctFittingCategory.wye
DAMPER = DuctFittingCategory.damper
TERMINAL = DuctFittingCategory.terminal
EQUIPMENT = DuctFittingCategory.equipment


DUCT_ELBOWS = [
    # Rectangular radius elbows
    _c_fitting('elbow_rect_radius_0.5', '90° Rectangular Elbow (R/W = 0.5)', ELBOW, 0.57,
               'Rectangular elbow with inner radius, tight radius', 'R/W = 0.5, no vanes'),
    _c_fitting('elbow_rect_radius_1.0', '90° Rectangular Elbow (R/W = 1.0)', ELBOW, 0.22,
               'Rectangular elbow with inner radius, standard', 'R/W = 1.0, no vanes - most common'),
    _c_fitting('elbow_rect_radius_1.5', '90° Rectangular Elbow (R/W = 1.5)', ELBOW, 0.13,
               'Rectangular elbow with large radius', 'R/W = 1.5, no vanes - lower loss'),
    _c_fitting('elbow_rect_radius_2.0', '90° Rectangular Elbow (R/W = 2.0)', ELBOW, 0.09,
               'Rectangular elbow with very large radius', 'R/W = 2.0, no vanes - lowest loss'),

    # Mitered elbows
    _c_fitting('elbow_rect_mitered_no_vanes', '90° Mitered Elbow (No Vanes)', ELBOW, 1.3,
               'Square mitered elbow without turning vanes', 'High loss - use with vanes when possible'),
    _c_fitting('elbow_rect_mitered_single_vanes', '90° Mitered Elbow (Single Vanes)', ELBOW, 0.33,
               'Square mitered elbow with single-thickness turning vanes',
               'Standard turning vanes, 1.5" spacing typical'),
    _c_fitting('elbow_rect_mitered_double_vanes', '90° Mitered Elbow (Airfoil Vanes)', ELBOW, 0.20,
               'Square mitered elbow with double-thickness airfoil vanes', 'Lowest loss mitered option'),

    # 45° elbows
    _c_fitting('elbow_rect_45_radius', '45° Rectangular Elbow (Radius)', ELBOW, 0.08,
               '45-degree rectangular elbow with radius', 'Lower loss than 90° elbows'),
    _c_fitting('elbow_rect_45_mitered', '45° Rectangular Elbow (Mitered)', ELBOW, 0.15,
               '45-degree mitered rectangular elbow', 'Single miter, no vanes needed'),

    # Round elbows
    _c_fitting('elbow_round_smooth_90', '90° Round Elbow (Smooth)', ELBOW, 0.22,
               'Smooth radius round elbow', '5-piece or stamped elbow, R/D = 1.5'),
    _c_fitting('elbow_round_3piece_90', '90° Round Elbow (3-Piece)', ELBOW, 0.42,
               '3-piece gored round elbow', 'Higher loss than smooth'),
    _c_fitting('elbow_round_5piece_90', '90° Round Elbow (5-Piece)', ELBOW, 0.32,
               '5-piece gored round elbow', 'Common construction'),
    _c_fitting('elbow_round_45', '45° Round Elbow', ELBOW, 0.10,
               '45-degree round elbow', 'Lower loss than 90°'),

    _c_fitting('elbow_flex_90', '90° Flex Duct Elbow', ELBOW, 0.75,
               'Flexible duct bent 90 degrees', 'High loss - avoid tight bends in flex'),
]

DUCT_TRANSITIONS = [
    _c_fitting('trans_rect_converging_30', 'Rectangular Transition (Converging, 30°)', TRANSITION, 0.02,
               'Converging rectangular transition, 30° included angle', 'Low loss due to gradual change'),
    _c_fitting('trans_rect_converging_45', 'Rectangular Transition (Converging, 45°)', TRANSITION, 0.04,
               'Converging rectangular transition, 45° included angle', 'Standard converging transition'),
    _c_fitting('trans_rect_diverging_15', 'Rectangular Transition (Diverging, 15°)', TRANSITION, 0.10,
               'Diverging rectangular transition, 15° included angle', 'Low loss diverging - optimal angle'),
    _c_fitting('trans_rect_diverging_30', 'Rectangular Transition (Diverging, 30°)', TRANSITION, 0.25,
               'Diverging rectangular transition, 30° included angle', 'Higher loss due to flow separation'),
    _c_fitting('trans_rect_diverging_45', 'Rectangular Transition (Diverging, 45°)', TRANSITION, 0.40,
               'Diverging rectangular transition, 45° included angle', 'High loss - avoid if possible'),
    _c_fitting('trans_round_converging', 'Round Transition (Converging)', TRANSITION, 0.03,
               'Converging round transition/reducer', 'Low loss for round duct'),
    _c_fitting('trans_round_diverging', 'Round Transition (Diverging)', TRANSITION, 0.15,
               'Diverging round transition/increaser', 'Higher loss than converging'),
    _c_fitting('trans_offset_15', 'Offset (15°)', TRANSITION, 0.05,
               '15-degree offset transition', 'Two transitions at 15°'),
    _c_fitting('trans_offset_30', 'Offset (30°)', TRANSITION, 0.15,
               '30-degree offset transition', 'Standard offset'),
    _c_fitting('trans_round_to_rect', 'Round to Rectangular Transition', TRANSITION, 0.12,
               'Transition from round to rectangular duct', 'Common at equipment connections'),
]

DUCT_TEES = [
    # Supply (diverging)
    _c_fitting('tee_supply_straight', 'Supply Tee - Straight Through', TEE, 0.35,
               'Supply tee, main flow straight through', 'C value for straight-through flow'),
    _c_fitting('tee_supply_branch', 'Supply Tee - Branch', TEE, 1.0,
               'Supply tee, flow into branch', 'C value for branch flow'),
    _c_fitting('tee_supply_45_branch', 'Supply Tee - 45° Branch', TEE, 0.70,
               'Supply tee with 45-degree branch takeoff', 'Lower loss than 90° branch'),
    # Return (converging)
    _c_fitting('tee_return_straight', 'Return Tee - Straight Through', TEE, 0.08,
               'Return tee, straight-through flow', 'C value for straight-through flow'),
    _c_fitting('tee_return_branch', 'Return Tee - Branch', TEE, 0.50,
               'Return tee, flow from branch', 'C value for branch flow entering'),
    _c_fitting('tee_bullhead', 'Bullhead Tee', TEE, 1.8,
               'Bullhead tee - flow splits both ways', 'High loss - avoid if possible'),
]

DUCT_WYES = [
    _c_fitting('wye_45_symmetric', '45° Wye (Symmetric)', WYE, 0.30,
               'Symmetric 45-degree wye fitting', 'Lower loss than tees for supply'),
    _c_fitting('wye_45_conical', '45° Conical Wye', WYE, 0.25,
               '45-degree wye with conical branch', 'Reduced loss from conical shape'),
    _c_fitting('wye_30_branch', '30° Wye', WYE, 0.20,
               '30-degree wye fitting', 'Low loss branch angle'),
]

DUCT_DAMPERS = [
    _c_fitting('damper_volume_open', 'Volume Damper (Fully Open)', DAMPER, 0.04,
               'Parallel blade volume damper, fully open', 'Minimal loss when open'),
    _c_fitting('damper_volume_50', 'Volume Damper (50% Open)', DAMPER, 2.5,
               'Parallel blade volume damper, 50% open', 'Significant pressure drop at 50%'),
    _c_fitting('damper_fire', 'Fire Damper (Curtain Type)', DAMPER, 0.15,
               'Curtain-type fire damper', 'UL 555 listed, sleeve mounted'),
    _c_fitting('damper_fire_louver', 'Fire Damper (Multi-Blade)', DAMPER, 0.35,
               'Multi-blade fire damper', 'Higher loss than curtain type'),
    _c_fitting('damper_smoke', 'Smoke Damper', DAMPER, 0.20,
               'UL 555S smoke damper', 'Leakage Class I or II'),
    _c_fitting('damper_combination', 'Combination Fire/Smoke Damper', DAMPER, 0.40,
               'Combination fire and smoke damper', 'UL 555 and 555S listed'),
    _c_fitting('damper_backdraft', 'Backdraft Damper', DAMPER, 0.50,
               'Gravity backdraft damper', 'For exhaust applications'),
]

DUCT_TERMINALS = [
    _dp_fitting('terminal_diffuser_ceiling', 'Ceiling Diffuser (Square)', TERMINAL, 0.10,
                'Square ceiling diffuser, 4-way throw',
                'Typical pressure drop 0.05-0.15 in. WC - check cut sheet'),
    _dp_fitting('terminal_diffuser_round', 'Round Ceiling Diffuser', TERMINAL, 0.08,
                'Round cone ceiling diffuser', 'Lower pressure drop than square'),
    _dp_fitting('terminal_diffuser_linear', 'Linear Slot Diffuser', TERMINAL, 0.12,
                'Linear slot diffuser, single slot', 'Per slot - multiply for multi-slot'),
    _dp_fitting('terminal_grille_return', 'Return Air Grille', TERMINAL, 0.05,
                'Return air grille, fixed louver', 'Typical return grille'),
    _dp_fitting('terminal_register', 'Supply Register', TERMINAL, 0.08,
                'Adjustable supply register', 'With adjustable blades'),
    _dp_fitting('terminal_louver_intake', 'Outside Air Louver', TERMINAL, 0.15,
                'Drainable outside air intake louver', 'Check mfr data - varies with rain resistance'),
    _dp_fitting('terminal_louver_exhaust', 'Exhaust Louver', TERMINAL, 0.10,
                'Exhaust air louver', 'Drainable or non-drainable'),
]

DUCT_EQUIPMENT = [
    # Coils
    _dp_fitting('equip_coil_2row', 'Cooling Coil (2-Row)', EQUIPMENT, 0.25,
                '2-row cooling coil, 10 fpi', 'Air side only - check coil schedule'),
    _dp_fitting('equip_coil_4row', 'Cooling Coil (4-Row)', EQUIPMENT, 0.45,
                '4-row cooling coil, 10 fpi', 'Air side only - check coil schedule'),
    _dp_fitting('equip_coil_6row', 'Cooling Coil (6-Row)', EQUIPMENT, 0.70,
                '6-row cooling coil, 10 fpi', 'Air side only - check coil schedule'),
    _dp_fitting('equip_coil_heating', 'Heating Coil (1-Row)', EQUIPMENT, 0.15,
                '1-row hot water heating coil', 'Lower pressure drop than cooling'),

    # Filters
    _dp_fitting('equip_filter_merv8_clean', 'Filter MERV 8 (Clean)', EQUIPMENT, 0.15,
                'MERV 8 pleated filter, clean', 'Initial pressure drop'),
    _dp_fitting('equip_filter_merv8_dirty', 'Filter MERV 8 (Dirty)', EQUIPMENT, 0.50,
                'MERV 8 pleated filter, final/dirty', 'Design for dirty condition'),
    _dp_fitting('equip_filter_merv13_clean', 'Filter MERV 13 (Clean)', EQUIPMENT, 0.30,
                'MERV 13 pleated filter, clean', 'Initial pressure drop'),
    _dp_fitting('equip_filter_merv13_dirty', 'Filter MERV 13 (Dirty)', EQUIPMENT, 0.80,
                'MERV 13 pleated filter, final/dirty', 'Design for dirty condition'),
    _dp_fitting('equip_filter_merv16_clean', 'Filter MERV 16 (Clean)', EQUIPMENT, 0.45,
                'MERV 16 bag or box filter, clean', 'Hospital grade filtration'),
    _dp_fitting('equip_filter_merv16_dirty', 'Filter MERV 16 (Dirty)', EQUIPMENT, 1.00,
                'MERV 16 bag or box filter, final/dirty', 'Design for dirty condition'),

    # Other equipment
    _dp_fitting('equip_vav_box', 'VAV Box', EQUIPMENT, 0.50,
                'VAV terminal box', 'Varies by manufacturer and size'),
    _dp_fitting('equip_silencer', 'Sound Attenuator (Silencer)', EQUIPMENT, 0.35,
                'Rectangular sound attenuator', '3-5 ft length typical'),
    _dp_fitting('equip_mixing_box', 'Mixing Box', EQUIPMENT, 0.25,
                'Outside air/return air mixing box', 'With dampers and mixing section'),
    _dp_fitting('equip_electric_heater', 'Electric Duct Heater', EQUIPMENT, 0.08,
                'In-duct electric resistance heater', 'Low pressure drop'),
    _dp_fitting('equip_humidifier', 'Steam Humidifier Manifold', EQUIPMENT, 0.10,
                'In-duct steam humidifier manifold', 'Minimal pressure drop'),
]

ALL_DUCT_FITTINGS: List[DuctFittingData] = (
    DUCT_ELBOWS
    + DUCT_TRANSITIONS
    + DUCT_TEES
    + DUCT_WYES
    + DUCT_DAMPERS
    + DUCT_TERMINALS
    + DUCT_EQUIPMENT
)

_FITTINGS_BY_ID = {fitting.id: fitting for fitting in ALL_DUCT_FITTINGS}


def get_duct_fitting(fitting_id: str) -> Optional[DuctFittingData]:
    """Look up a fitting by library id; None when the id is unknown"""
    return _FITTINGS_BY_ID.get(fitting_id)


def get_duct_fittings_by_category(category: DuctFittingCategory) -> List[DuctFittingData]:
    return [fitting for fitting in ALL_DUCT_FITTINGS if fitting.category == category]
