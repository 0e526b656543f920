from __future__ import annotations

from ag360.models.enums import CalendarActivity
from ag360.reference.catalog import ReferenceCatalog
from ag360.services.spray_calendar_service import SEASON_MONTHS, season_calendar, spray_calendar


def test_season_months() -> None:
	assert SEASON_MONTHS == ("Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct")


def test_canola_full_program(catalog: ReferenceCatalog) -> None:
	row = spray_calendar(catalog.get_crop("Canola"))

	assert list(row.months) == list(SEASON_MONTHS)
	assert row.months["Apr"] == [CalendarActivity.burnoff]
	assert row.months["May"] == [CalendarActivity.pre_emergence]
	assert row.months["Jun"] == [CalendarActivity.in_crop_herbicide]
	assert row.months["Jul"] == [CalendarActivity.in_crop_herbicide, CalendarActivity.fungicide]
	assert row.months["Aug"] == [CalendarActivity.fungicide]
	assert row.months["Sep"] == [CalendarActivity.pre_harvest]
	assert row.months["Oct"] == [CalendarActivity.pre_harvest]


def test_minimal_program_still_gets_fungicide(catalog: ReferenceCatalog) -> None:
	row = spray_calendar(catalog.get_crop("Flax"))

	assert row.timings_label == "Pre-seed, In-crop"
	assert row.months["May"] == []
	assert row.months["Aug"] == [CalendarActivity.fungicide]
	assert row.months["Sep"] == []


def test_desiccation_only_crop_gets_late_window(catalog: ReferenceCatalog) -> None:
	row = spray_calendar(catalog.get_crop("Red Lentils"))

	assert row.months["Apr"] == [CalendarActivity.burnoff]
	assert row.months["Oct"] == [CalendarActivity.pre_harvest]


def test_season_calendar_covers_every_crop(catalog: ReferenceCatalog) -> None:
	rows = season_calendar(catalog.crops)

	assert [row.crop for row in rows] == [crop.name for crop in catalog.crops]
