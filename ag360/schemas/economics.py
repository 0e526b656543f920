"""Pydantic schemas for cost inputs and derived crop economics."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from ag360.logging_config import engine_logger
from ag360.models.enums import CropCategory, InventoryMode, Profitability, SoilZone
from ag360.models.reference import Money, YieldQuantity

_logger = engine_logger("economics")

FIXED_COST_FIELDS: tuple[str, ...] = (
	"land_rent",
	"equipment_depreciation",
	"insurance",
	"property_tax",
	"overhead",
)

VARIABLE_COST_FIELDS: tuple[str, ...] = (
	"seed",
	"fertilizer",
	"herbicide",
	"fungicide",
	"insecticide",
	"fuel",
	"drying",
	"trucking",
	"elevation",
	"crop_insurance",
)


def coerce_amount(value: Any) -> float:
	"""Turn farmer-entered numbers into a finite, non-negative float (0 otherwise)."""
	if value is None or isinstance(value, bool):
		return 0.0
	if isinstance(value, str):
		value = value.strip().replace(",", "").replace("$", "")
		if not value:
			return 0.0
	try:
		number = float(value)
	except (TypeError, ValueError, OverflowError):
		return 0.0
	if not math.isfinite(number) or number < 0:
		return 0.0
	return number


def _coerce_logged(value: Any, field_name: str | None) -> float:
	number = coerce_amount(value)
	if number == 0.0 and value not in (None, "", 0, 0.0):
		_logger.debug("cost_field_coerced", field=field_name, raw=repr(value))
	return number


class CostLineItem(BaseModel):
	"""One crop row of the farm profile inventory.

	Field values are $/ac for every cost category. Nothing derived is stored
	here; see ``economics_service.compute_crop_economics``.
	"""

	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		validate_assignment=True,
	)

	crop: str = ""
	mode: InventoryMode = InventoryMode.forecast
	bushels: float = 0.0
	acres: float = 0.0
	aph: float = 0.0
	target_price: float = 0.0

	# ── Fixed ($/ac) ────────────────────────────────────────────────────────
	land_rent: float = 0.0
	equipment_depreciation: float = 0.0
	insurance: float = 0.0
	property_tax: float = 0.0
	overhead: float = 0.0

	# ── Variable ($/ac) ─────────────────────────────────────────────────────
	seed: float = 0.0
	fertilizer: float = 0.0
	herbicide: float = 0.0
	fungicide: float = 0.0
	insecticide: float = 0.0
	fuel: float = 0.0
	drying: float = 0.0
	trucking: float = 0.0
	elevation: float = 0.0
	crop_insurance: float = 0.0

	@field_validator("mode", mode="before")
	@classmethod
	def _coerce_mode(cls, value: Any) -> Any:
		if isinstance(value, str) and value.strip().lower() in {"on_hand", "forecast"}:
			return value.strip().lower()
		return InventoryMode.forecast

	@field_validator(
		"bushels",
		"acres",
		"aph",
		"target_price",
		*FIXED_COST_FIELDS,
		*VARIABLE_COST_FIELDS,
		mode="before",
	)
	@classmethod
	def _coerce_numbers(cls, value: Any, info: ValidationInfo) -> float:
		return _coerce_logged(value, info.field_name)


class InputCosts(BaseModel):
	"""Regional per-acre input cost table used to rank crop profitability."""

	model_config = ConfigDict(frozen=True)

	# ── Variable ($/ac) ─────────────────────────────────────────────────────
	seed: float = 0.0
	fertilizer: float = 0.0
	crop_protection: float = 0.0
	crop_insurance: float = 0.0
	trucking: float = 0.0
	fuel: float = 0.0
	machinery_repairs: float = 0.0
	building_repairs: float = 0.0
	custom_work: float = 0.0
	labour: float = 0.0
	utilities: float = 0.0
	operating_interest: float = 0.0

	# ── Fixed ($/ac) ────────────────────────────────────────────────────────
	land_rent_taxes: float = 0.0
	licenses_insurance: float = 0.0
	depreciation: float = 0.0
	capital_interest: float = 0.0

	@field_validator("*", mode="before")
	@classmethod
	def _coerce_numbers(cls, value: Any, info: ValidationInfo) -> float:
		return _coerce_logged(value, info.field_name)


INPUT_COST_VARIABLE_KEYS: tuple[str, ...] = (
	"seed",
	"fertilizer",
	"crop_protection",
	"crop_insurance",
	"trucking",
	"fuel",
	"machinery_repairs",
	"building_repairs",
	"custom_work",
	"labour",
	"utilities",
	"operating_interest",
)

INPUT_COST_FIXED_KEYS: tuple[str, ...] = (
	"land_rent_taxes",
	"licenses_insurance",
	"depreciation",
	"capital_interest",
)

INPUT_COST_LABELS: dict[str, str] = {
	"seed": "Seed",
	"fertilizer": "Fertilizer",
	"crop_protection": "Crop Protection",
	"crop_insurance": "Crop Insurance",
	"trucking": "Trucking",
	"fuel": "Fuel",
	"machinery_repairs": "Machinery Repairs",
	"building_repairs": "Building Repairs",
	"custom_work": "Custom Work",
	"labour": "Labour",
	"utilities": "Utilities",
	"operating_interest": "Operating Interest",
	"land_rent_taxes": "Land Rent / Taxes",
	"licenses_insurance": "Licenses & Insurance",
	"depreciation": "Depreciation",
	"capital_interest": "Capital Interest",
}


class InputCostTotals(BaseModel):
	variable: float
	fixed: float
	total: float


class CropEconomics(BaseModel):
	crop: str
	mode: InventoryMode
	bushels: float
	acres: float
	fixed_per_acre: float
	variable_per_acre: float
	total_cost_per_acre: float
	total_cost: float
	gross_revenue: float
	breakeven_price: float
	net_profit: float


class FarmEconomicsSummary(BaseModel):
	crops: list[CropEconomics] = Field(default_factory=list)
	total_gross_revenue: float = 0.0
	total_cost: float = 0.0
	total_net_profit: float = 0.0


class CropProfitability(BaseModel):
	name: str
	category: CropCategory
	zone: SoilZone
	fallback_applied: bool = False
	target_yield: YieldQuantity
	guide_price: Money
	gross_revenue_per_acre: float
	breakeven_price: float
	margin: float
	profitability: Profitability


class CropEconomicsBoard(BaseModel):
	zone: SoilZone
	total_cost_per_acre: float
	rows: list[CropProfitability] = Field(default_factory=list)

	@property
	def profitable_count(self) -> int:
		return sum(1 for row in self.rows if row.profitability == Profitability.profitable)

	@property
	def at_risk_count(self) -> int:
		return len(self.rows) - self.profitable_count

	def top(self, n: int = 3) -> list[CropProfitability]:
		return self.rows[:n]
