"""Pydantic schemas for seeding records and the windows derived from them."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ag360.models.enums import CalendarActivity, StageWindowKind
from ag360.schemas.economics import coerce_amount


class SeedingRecord(BaseModel):
	"""A crop put in the ground. Created once by the operator, never edited."""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

	id: str | None = None
	crop: str
	seeding_date: date
	acres: float = 0.0
	field_name: str = ""

	@field_validator("acres", mode="before")
	@classmethod
	def _coerce_acres(cls, value: object) -> float:
		return coerce_amount(value)


class CropStageWindow(BaseModel):
	model_config = ConfigDict(frozen=True)

	kind: StageWindowKind
	label: str
	color_class: str
	urgent: bool
	advice: str
	status_summary: str


class StageReminder(BaseModel):
	record: SeedingRecord
	days_since_seeding: int
	window: CropStageWindow


class SprayCalendarRow(BaseModel):
	"""One crop across the April–October grid, keyed by month label in season order."""

	crop: str
	timings_label: str
	months: dict[str, list[CalendarActivity]] = Field(default_factory=dict)
