"""Pydantic schema for the farm profile supplied by the profile store."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ag360.schemas.economics import CostLineItem, coerce_amount


class FarmProfile(BaseModel):
	"""Operator-owned profile. Province and soil zone stay as entered; the
	reference service resolves them against the tables."""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	farm_name: str = ""
	province: str = ""
	soil_zone: str = ""
	total_acres: float = 0.0
	storage_capacity: float = 0.0
	primary_elevator: str = ""
	risk_profile: str = "Balanced"
	inventory: list[CostLineItem] = Field(default_factory=list)

	@field_validator("total_acres", "storage_capacity", mode="before")
	@classmethod
	def _coerce_numbers(cls, value: Any) -> float:
		return coerce_amount(value)

	@field_validator("inventory", mode="before")
	@classmethod
	def _drop_null_rows(cls, value: Any) -> Any:
		if value is None:
			return []
		if isinstance(value, list):
			return [row for row in value if row is not None]
		return value
