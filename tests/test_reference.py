from __future__ import annotations

import pytest
from pydantic import ValidationError

from ag360.config import ZoneFallback, get_settings
from ag360.errors import UnknownCropError
from ag360.models.enums import CropCategory, PriceUnit, Province, SoilZone, SprayTiming, YieldUnit
from ag360.reference.catalog import ReferenceCatalog, get_catalog
from ag360.schemas.farm import FarmProfile
from ag360.services.reference_service import (
	get_zone_data,
	normalize_province,
	parse_soil_zone,
	profile_province,
	profile_soil_zone,
	resolve_zone_data,
)


def test_catalog_indexes_every_crop_once(catalog: ReferenceCatalog) -> None:
	names = [crop.name for crop in catalog.crops]

	assert len(names) == 19
	assert len(set(names)) == len(names)
	assert catalog.find_crop("  canola ") is catalog.get_crop("Canola")
	assert catalog.find_crop("Corn") is None


def test_get_crop_raises_for_unknown_name(catalog: ReferenceCatalog) -> None:
	with pytest.raises(UnknownCropError):
		catalog.get_crop("Corn")


def test_reference_records_are_immutable(catalog: ReferenceCatalog) -> None:
	canola = catalog.get_crop("Canola")

	with pytest.raises(ValidationError):
		canola.name = "Rapeseed"  # type: ignore[misc]
	with pytest.raises(TypeError):
		catalog.zones_by_province[Province.SK] = ()  # type: ignore[index]



def test_zone_table_cannot_be_rewritten(catalog: ReferenceCatalog) -> None:
	canola = catalog.get_crop("Canola")
	black = canola.zones[SoilZone.Black]

	with pytest.raises(TypeError):
		canola.zones[SoilZone.Black] = canola.zones[SoilZone.Brown]  # type: ignore[index]

	assert get_catalog().get_crop("Canola").zones[SoilZone.Black] is black
	assert black.target_yield.amount == 46


def test_price_unit_follows_zone_rows(catalog: ReferenceCatalog) -> None:
	assert catalog.get_crop("Yellow Mustard").price_unit == PriceUnit.cad_per_lb
	assert catalog.get_crop("Dry Beans").price_unit == PriceUnit.cad_per_lb
	assert catalog.get_crop("Canola").price_unit == PriceUnit.cad_per_bu


def test_zone_economics_carry_typed_units(catalog: ReferenceCatalog) -> None:
	mustard = get_zone_data(catalog.get_crop("Yellow Mustard"), SoilZone.Brown)
	wheat = get_zone_data(catalog.get_crop("HRS Wheat"), SoilZone.Brown)

	assert mustard is not None and wheat is not None
	assert mustard.guide_price.unit == PriceUnit.cad_per_lb
	assert mustard.guide_price.is_per_pound
	assert mustard.guide_price.format() == "$0.38/lb"
	assert wheat.guide_price.format() == "$7.76"
	assert wheat.gross_revenue_per_acre.format() == "$310/ac"
	assert wheat.target_yield.format() == "40 bu/ac"
	assert wheat.breakeven_yield.format(per_acre=False) == "57 bu"
	assert wheat.fertility() == {"N": 50, "P": 20, "K": 5}


def test_dry_beans_yield_in_pounds(catalog: ReferenceCatalog) -> None:
	beans = get_zone_data(catalog.get_crop("Dry Beans"), SoilZone.Irrigated)

	assert beans is not None
	assert beans.target_yield.unit == YieldUnit.lb


def test_resolve_zone_data_exact_match(catalog: ReferenceCatalog) -> None:
	lookup = resolve_zone_data(catalog.get_crop("Canola"), SoilZone.Black)

	assert lookup.resolved_zone == SoilZone.Black
	assert lookup.fallback_applied is False
	assert lookup.data is not None
	assert lookup.data.target_yield.amount == 46


def test_resolve_zone_data_falls_back_to_first_zone(catalog: ReferenceCatalog) -> None:
	durum = catalog.get_crop("Durum Wheat")
	lookup = resolve_zone_data(durum, SoilZone.Black, ZoneFallback.first_available)

	assert lookup.requested_zone == SoilZone.Black
	assert lookup.resolved_zone == SoilZone.Brown
	assert lookup.fallback_applied is True
	assert lookup.data == durum.zones[SoilZone.Brown]


def test_strict_policy_reports_unsupported_zone(catalog: ReferenceCatalog) -> None:
	lookup = resolve_zone_data(catalog.get_crop("Durum Wheat"), SoilZone.Black, ZoneFallback.strict)

	assert lookup.data is None
	assert lookup.resolved_zone is None
	assert lookup.fallback_applied is False


def test_policy_defaults_to_settings(catalog: ReferenceCatalog, monkeypatch: pytest.MonkeyPatch) -> None:
	durum = catalog.get_crop("Durum Wheat")
	assert get_zone_data(durum, SoilZone.Black) is not None

	monkeypatch.setenv("ZONE_FALLBACK", "strict")
	get_settings.cache_clear()
	assert get_zone_data(durum, SoilZone.Black) is None


def test_crops_for_province_filters_by_category(catalog: ReferenceCatalog) -> None:
	mb_pulses = catalog.crops_for_province(Province.MB, CropCategory.pulse)
	names = {crop.name for crop in mb_pulses}

	assert "Soybeans" in names
	assert "Red Lentils" not in names
	assert all(crop.category == CropCategory.pulse for crop in mb_pulses)
	assert "Dry Beans" not in {crop.name for crop in catalog.crops_for_province(Province.SK)}


def test_province_tables(catalog: ReferenceCatalog) -> None:
	assert catalog.zones_for_province(Province.SK) == (SoilZone.Brown, SoilZone.DarkBrown, SoilZone.Black)
	assert SoilZone.Irrigated in catalog.zones_for_province(Province.AB)
	assert catalog.province_sources(Province.AB).crop.startswith("AB Cropping Alternatives")
	assert catalog.outlook_for("canola") is not None


def test_timings_label(catalog: ReferenceCatalog) -> None:
	canola = catalog.get_crop("Canola")

	assert SprayTiming.in_crop_twice in canola.spray_timings
	assert canola.timings_label == "Pre-harv, Pre-seed, Soil, In-crop ×2, Desiccation"


@pytest.mark.parametrize(
	("text", "expected"),
	[("Saskatchewan", Province.SK), (" alberta ", Province.AB), ("mb", Province.MB), ("Ontario", None), ("", None)],
)
def test_normalize_province(text: str, expected: Province | None) -> None:
	assert normalize_province(text) == expected


@pytest.mark.parametrize(
	("text", "expected"),
	[
		("Dark Brown", SoilZone.DarkBrown),
		("DarkBrown", SoilZone.DarkBrown),
		("dark-brown", SoilZone.DarkBrown),
		("Grey-Wooded", SoilZone.GreyWooded),
		("black", SoilZone.Black),
		("Red", None),
		(None, None),
	],
)
def test_parse_soil_zone(text: str | None, expected: SoilZone | None) -> None:
	assert parse_soil_zone(text) == expected


def test_profile_resolution_uses_defaults() -> None:
	assert profile_province(FarmProfile(province="Alberta")) == Province.AB
	assert profile_province(FarmProfile(province="Ontario")) == Province.SK
	assert profile_soil_zone(FarmProfile(soil_zone="Dark Brown")) == SoilZone.DarkBrown
	assert profile_soil_zone(FarmProfile()) == SoilZone.Black


def test_advisory_tables(catalog: ReferenceCatalog) -> None:
	assert [herbicide_pass.number for herbicide_pass in catalog.herbicide_passes] == [1, 2, 3, 4, 5]
	assert len(catalog.spray_rates) == 13
	assert len(catalog.insect_symptoms) == len(catalog.disease_symptoms) == 8
	assert all(entry.products for entry in catalog.spray_rates)
