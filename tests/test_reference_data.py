"""
Tests for reference tables and the reference-data collaborator
"""

import pytest

from ductsizer.data.duct_fittings import (
    ALL_DUCT_FITTINGS,
    get_duct_fitting,
    get_duct_fittings_by_category,
)
from ductsizer.data.duct_materials import DUCT_MATERIALS, VELOCITY_LIMITS
from ductsizer.models.enums import (
    DuctFittingCategory,
    DuctFittingMethod,
    DuctLiner,
    DuctMaterial,
    DuctSystemType,
)
from ductsizer.models.reference import DuctMaterialData, VelocityLimits
from ductsizer.services.error_types import ReferenceDataError
from ductsizer.services.reference_data import DEFAULT_REFERENCE_DATA, build_reference_data


class TestFittingLibrary:

    def test_ids_are_unique(self):
        ids = [fitting.id for fitting in ALL_DUCT_FITTINGS]
        assert len(ids) == len(set(ids))

    def test_every_fitting_has_a_value_for_its_method(self):
        for fitting in ALL_DUCT_FITTINGS:
            if fitting.method == DuctFittingMethod.c_coefficient:
                assert fitting.c_coefficient is not None, fitting.id
            else:
                assert fitting.default_dp is not None, fitting.id

    def test_lookup(self):
        elbow = get_duct_fitting('elbow_rect_radius_1.0')
        assert elbow.c_coefficient == 0.22
        assert elbow.category == DuctFittingCategory.elbow

    def test_unknown_lookup_returns_none(self):
        assert get_duct_fitting('nope') is None

    def test_by_category(self):
        terminals = get_duct_fittings_by_category(DuctFittingCategory.terminal)
        assert terminals
        assert all(f.method == DuctFittingMethod.fixed_dp for f in terminals)


class TestRoughness:

    def test_every_material_has_roughness(self):
        for material in DuctMaterial:
            assert DEFAULT_REFERENCE_DATA.roughness_for(material, DuctLiner.none) > 0

    def test_galvanized(self):
        assert DEFAULT_REFERENCE_DATA.roughness_for(DuctMaterial.galvanized, DuctLiner.none) == 0.0003

    def test_liner_replaces_material_roughness(self):
        assert DEFAULT_REFERENCE_DATA.roughness_for(DuctMaterial.galvanized, DuctLiner.one_inch) == 0.003

    def test_liner_thickness(self):
        assert DEFAULT_REFERENCE_DATA.liner_thickness_in(DuctLiner.three_quarter_inch) == 0.75
        assert DEFAULT_REFERENCE_DATA.liner_thickness_in(DuctLiner.none) == 0.0

    def test_flex_roughness_uses_typical_correction(self):
        assert DEFAULT_REFERENCE_DATA.flex_roughness() == pytest.approx(0.0045)


class TestVelocityLimits:

    def test_known_system_type(self):
        limits = DEFAULT_REFERENCE_DATA.velocity_limits_for('return')
        assert limits.recommended == 1500
        assert limits.max == 2000

    def test_every_system_type_has_limits(self):
        for system_type in DuctSystemType:
            assert system_type.value in VELOCITY_LIMITS

    def test_unknown_type_falls_back_to_supply(self):
        assert DEFAULT_REFERENCE_DATA.velocity_limits_for('kitchen_hood') == VELOCITY_LIMITS['supply']

    def test_missing_supply_fallback_raises(self):
        reference = build_reference_data(velocity_limits={
            'return': VelocityLimits(recommended=1, max=2, noise=''),
        })
        with pytest.raises(ReferenceDataError):
            reference.velocity_limits_for('kitchen_hood')


class TestInjectedTables:

    def test_omitted_tables_use_defaults(self):
        reference = build_reference_data(materials={
            'galvanized': DuctMaterialData(id='galvanized', display_name='Rough', roughness_ft=0.01),
        })
        assert reference.roughness_for('galvanized', 'none') == 0.01
        assert reference.fitting('equip_silencer') is not None

    def test_missing_material_raises(self):
        reference = build_reference_data(materials={})
        with pytest.raises(ReferenceDataError) as exc_info:
            reference.roughness_for(DuctMaterial.aluminum, DuctLiner.none)
        assert 'aluminum' in exc_info.value.message

    def test_defaults_match_packaged_tables(self):
        assert dict(DEFAULT_REFERENCE_DATA.materials) == DUCT_MATERIALS
