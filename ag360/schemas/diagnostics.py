"""Pydantic schemas for the guided pest and disease diagnostic."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ag360.errors import DiagnosticStateError
from ag360.models.enums import DamageType, DiagnosticStage, Province
from ag360.models.reference import SprayRateEntry


class DiagnosticSession(BaseModel):
	"""Selections made so far, crop → damage type → symptom → pest.

	Sessions are immutable. Each ``select_*`` returns a new session and clears
	every selection downstream of the one being made.
	"""

	model_config = ConfigDict(frozen=True)

	province: Province | None = None
	crop: str | None = None
	damage_type: DamageType | None = None
	symptom: str | None = None
	pest: str | None = None

	@property
	def stage(self) -> DiagnosticStage:
		if self.crop is None:
			return DiagnosticStage.crop
		if self.damage_type is None:
			return DiagnosticStage.damage_type
		if self.symptom is None:
			return DiagnosticStage.symptom
		if self.pest is None:
			return DiagnosticStage.pest
		return DiagnosticStage.complete

	def select_crop(self, crop: str) -> DiagnosticSession:
		return DiagnosticSession(province=self.province, crop=crop)

	def select_damage_type(self, damage_type: DamageType | str) -> DiagnosticSession:
		if self.crop is None:
			raise DiagnosticStateError("select a crop before the damage type")
		try:
			selected = DamageType(damage_type)
		except ValueError as exc:
			raise DiagnosticStateError(f"unknown damage type {damage_type!r}") from exc
		return DiagnosticSession(province=self.province, crop=self.crop, damage_type=selected)

	def select_symptom(self, symptom: str) -> DiagnosticSession:
		if self.damage_type is None:
			raise DiagnosticStateError("select a damage type before the symptom")
		return self.model_copy(update={"symptom": symptom, "pest": None})

	def select_pest(self, pest: str) -> DiagnosticSession:
		if self.symptom is None:
			raise DiagnosticStateError("select a symptom before the pest")
		return self.model_copy(update={"pest": pest})

	def reset(self) -> DiagnosticSession:
		return DiagnosticSession()


class DiagnosticResult(BaseModel):
	stage: DiagnosticStage
	options: list[str] = Field(default_factory=list)
	candidates: list[str] = Field(default_factory=list)
	recommendations: list[SprayRateEntry] = Field(default_factory=list)
	no_match: bool = False
	message: str | None = None
