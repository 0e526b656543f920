"""Crop-stage spray and scouting windows derived from seeding dates.

Day offsets are counted in the farm's agricultural day, set by
``AgronomicCalendar``, never in the caller's local time.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from ag360.config import Settings, get_settings
from ag360.models.enums import StageWindowKind
from ag360.schemas.windows import CropStageWindow, SeedingRecord, StageReminder


class AgronomicCalendar:
	"""Calendar context pinned to one IANA timezone."""

	def __init__(self, timezone: ZoneInfo | str):
		self.timezone = timezone if isinstance(timezone, ZoneInfo) else ZoneInfo(timezone)

	@classmethod
	def from_settings(cls, settings: Settings | None = None) -> AgronomicCalendar:
		settings = settings or get_settings()
		return cls(settings.farm_timezone)

	def local_date(self, value: date | datetime | str) -> date:
		"""Calendar date of ``value`` on the farm.

		Plain dates and ``YYYY-MM-DD`` strings are taken as-is. Naive datetimes
		are read as UTC.
		"""
		if isinstance(value, str):
			text = value.strip()
			value = date.fromisoformat(text) if len(text) == 10 else datetime.fromisoformat(text)
		if isinstance(value, datetime):
			if value.tzinfo is None:
				value = value.replace(tzinfo=UTC)
			return value.astimezone(self.timezone).date()
		return value

	def today(self, now: datetime | None = None) -> date:
		return self.local_date(now or datetime.now(UTC))

	def days_since(self, seeding_date: date | datetime | str, now: datetime | None = None) -> int:
		return (self.today(now) - self.local_date(seeding_date)).days


# Ordered by last day of each window, inclusive.
STAGE_WINDOWS: tuple[tuple[int, CropStageWindow], ...] = (
	(
		7,
		CropStageWindow(
			kind=StageWindowKind.just_seeded,
			label="Pre-Seed / Just Seeded",
			color_class="amber",
			urgent=False,
			advice=(
				"Pre-seed burnoff window. Apply glyphosate 1-3 days before seeding. "
				"Add Group 14 partner for resistance management."
			),
			status_summary="Pre-seed / just seeded",
		),
	),
	(
		21,
		CropStageWindow(
			kind=StageWindowKind.early_scout,
			label="Early Scout Window",
			color_class="blue",
			urgent=True,
			advice=(
				"Scout for cutworms and flea beetles. Check for uneven emergence. "
				"Pre-emergence soil herbicide window closing soon."
			),
			status_summary="Early scout window — check emergence, cutworms, flea beetles",
		),
	),
	(
		42,
		CropStageWindow(
			kind=StageWindowKind.in_crop_spray,
			label="In-Crop Spray Window",
			color_class="green",
			urgent=True,
			advice=(
				"In-crop herbicide window is open. Scout weed pressure before spraying. "
				"Apply at 1-4 leaf stage for best results."
			),
			status_summary="In-crop herbicide window open — scout weeds before spraying",
		),
	),
	(
		70,
		CropStageWindow(
			kind=StageWindowKind.fungicide,
			label="Fungicide Window",
			color_class="purple",
			urgent=True,
			advice=(
				"Fungicide timing window. Cereals: apply at flag leaf to heading. "
				"Canola: apply at 20-50% bloom for sclerotinia. "
				"Timing is critical — do not miss this window."
			),
			status_summary="Fungicide timing window — critical do not miss",
		),
	),
	(
		100,
		CropStageWindow(
			kind=StageWindowKind.pre_harvest,
			label="Pre-Harvest Window",
			color_class="orange",
			urgent=True,
			advice=(
				"Pre-harvest approaching. Check crop maturity. Canola: 60%+ seed colour change. "
				"Wheat: <30% grain moisture. Confirm PHI and buyer requirements before applying."
			),
			status_summary="Pre-harvest window — check maturity thresholds",
		),
	),
	(
		120,
		CropStageWindow(
			kind=StageWindowKind.harvest_approaching,
			label="Harvest Approaching",
			color_class="red",
			urgent=True,
			advice=(
				"Crop approaching harvest maturity. Prepare equipment, arrange trucking, "
				"confirm bin space and elevator delivery windows."
			),
			status_summary="Harvest approaching — prepare equipment and logistics",
		),
	),
)


def stage_window(days_since_seeding: int) -> CropStageWindow | None:
	if days_since_seeding < 0:
		return None
	for last_day, window in STAGE_WINDOWS:
		if days_since_seeding <= last_day:
			return window
	return None


def window_for_record(
	record: SeedingRecord,
	calendar: AgronomicCalendar,
	now: datetime | None = None,
) -> CropStageWindow | None:
	return stage_window(calendar.days_since(record.seeding_date, now))


def sort_seeding_log(records: Iterable[SeedingRecord]) -> list[SeedingRecord]:
	"""Most recently seeded first; ties keep their input order."""
	return sorted(records, key=lambda record: record.seeding_date, reverse=True)


def active_reminders(
	records: Iterable[SeedingRecord],
	calendar: AgronomicCalendar,
	now: datetime | None = None,
) -> list[StageReminder]:
	"""Urgent windows only, in the order the seeding log was given."""
	today = calendar.today(now)
	reminders: list[StageReminder] = []
	for record in records:
		days = (today - record.seeding_date).days
		window = stage_window(days)
		if window is not None and window.urgent:
			reminders.append(StageReminder(record=record, days_since_seeding=days, window=window))
	return reminders
