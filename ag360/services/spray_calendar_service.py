"""Seasonal spray calendar: each crop's timing descriptors laid over Apr–Oct."""

from __future__ import annotations

from collections.abc import Iterable

from ag360.models import CalendarActivity, CropReferenceEntry, SprayTiming
from ag360.schemas.windows import SprayCalendarRow

SEASON_MONTHS: tuple[str, ...] = ("Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct")

_IN_CROP = {SprayTiming.in_crop, SprayTiming.in_crop_twice}
_BURNOFF = {SprayTiming.pre_seed, SprayTiming.pre_harvest}
_LATE = {SprayTiming.pre_harvest, SprayTiming.desiccation}


def spray_calendar(crop: CropReferenceEntry) -> SprayCalendarRow:
	timings = set(crop.spray_timings)
	months: dict[str, list[CalendarActivity]] = {month: [] for month in SEASON_MONTHS}

	if timings & _BURNOFF:
		months["Apr"].append(CalendarActivity.burnoff)
	if SprayTiming.soil in timings:
		months["May"].append(CalendarActivity.pre_emergence)
	if timings & _IN_CROP:
		months["Jun"].append(CalendarActivity.in_crop_herbicide)
		months["Jul"].append(CalendarActivity.in_crop_herbicide)
	# Every crop gets a fungicide window.
	months["Jul"].append(CalendarActivity.fungicide)
	months["Aug"].append(CalendarActivity.fungicide)
	if timings & _LATE:
		months["Sep"].append(CalendarActivity.pre_harvest)
		months["Oct"].append(CalendarActivity.pre_harvest)

	return SprayCalendarRow(crop=crop.name, timings_label=crop.timings_label, months=months)


def season_calendar(crops: Iterable[CropReferenceEntry]) -> list[SprayCalendarRow]:
	return [spray_calendar(crop) for crop in crops]
