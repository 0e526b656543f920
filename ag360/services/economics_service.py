"""Per-crop and per-farm cost, revenue and breakeven arithmetic.

Every function here is pure: derived figures are recomputed from the current
inputs on each call and nothing is cached. Zero divisors and non-finite
intermediates come back as 0 rather than NaN or Infinity.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from ag360.config import ZoneFallback
from ag360.models.enums import InventoryMode, Profitability, SoilZone
from ag360.models.reference import CropReferenceEntry, Money
from ag360.reference import DEFAULT_INPUT_COSTS
from ag360.schemas.economics import (
	FIXED_COST_FIELDS,
	INPUT_COST_FIXED_KEYS,
	INPUT_COST_VARIABLE_KEYS,
	VARIABLE_COST_FIELDS,
	CostLineItem,
	CropEconomics,
	CropEconomicsBoard,
	CropProfitability,
	FarmEconomicsSummary,
	InputCosts,
	InputCostTotals,
)
from ag360.schemas.farm import FarmProfile
from ag360.services.reference_service import resolve_zone_data


def finite_or_zero(value: Any) -> float:
	try:
		number = float(value)
	except (TypeError, ValueError, OverflowError):
		return 0.0
	return number if math.isfinite(number) else 0.0


def safe_divide(numerator: float, denominator: float) -> float:
	if denominator == 0:
		return 0.0
	return finite_or_zero(numerator / denominator)


def format_currency(value: Any, signed: bool = False) -> str:
	"""Whole-dollar en-CA display, e.g. ``$12,345``.

	The sign is dropped unless ``signed`` is set; callers label losses with
	their own wording.
	"""
	number = finite_or_zero(value)
	text = f"${abs(number):,.0f}"
	if signed and round(number) < 0:
		return f"-{text}"
	return text


def compute_crop_economics(item: CostLineItem) -> CropEconomics:
	on_hand = item.mode == InventoryMode.on_hand
	bushels = item.bushels if on_hand else item.acres * item.aph
	acres = 0.0 if on_hand else item.acres

	fixed_per_acre = sum(getattr(item, name) for name in FIXED_COST_FIELDS)
	variable_per_acre = sum(getattr(item, name) for name in VARIABLE_COST_FIELDS)
	total_cost_per_acre = fixed_per_acre + variable_per_acre
	total_cost = total_cost_per_acre * acres
	gross_revenue = bushels * item.target_price
	breakeven_price = safe_divide(total_cost_per_acre, item.aph) if acres > 0 else 0.0

	return CropEconomics(
		crop=item.crop,
		mode=item.mode,
		bushels=finite_or_zero(bushels),
		acres=acres,
		fixed_per_acre=finite_or_zero(fixed_per_acre),
		variable_per_acre=finite_or_zero(variable_per_acre),
		total_cost_per_acre=finite_or_zero(total_cost_per_acre),
		total_cost=finite_or_zero(total_cost),
		gross_revenue=finite_or_zero(gross_revenue),
		breakeven_price=breakeven_price,
		net_profit=finite_or_zero(gross_revenue - total_cost),
	)


def compute_farm_economics(profile: FarmProfile) -> FarmEconomicsSummary:
	crops = [compute_crop_economics(item) for item in profile.inventory]
	total_gross = sum(crop.gross_revenue for crop in crops)
	total_cost = sum(crop.total_cost for crop in crops)
	return FarmEconomicsSummary(
		crops=crops,
		total_gross_revenue=total_gross,
		total_cost=total_cost,
		total_net_profit=total_gross - total_cost,
	)


def classify_profitability(guide_price: Money, breakeven_price: float, net_margin: float) -> Profitability:
	"""Per-pound crops are judged on margin; everything else on price vs breakeven."""
	if guide_price.is_per_pound:
		profitable = finite_or_zero(net_margin) >= 0
	else:
		profitable = guide_price.amount > finite_or_zero(breakeven_price)
	return Profitability.profitable if profitable else Profitability.at_risk


def input_cost_totals(costs: InputCosts = DEFAULT_INPUT_COSTS) -> InputCostTotals:
	variable = sum(getattr(costs, key) for key in INPUT_COST_VARIABLE_KEYS)
	fixed = sum(getattr(costs, key) for key in INPUT_COST_FIXED_KEYS)
	return InputCostTotals(variable=variable, fixed=fixed, total=variable + fixed)


def rank_crop_economics(
	crops: Iterable[CropReferenceEntry],
	zone: SoilZone,
	costs: InputCosts = DEFAULT_INPUT_COSTS,
	policy: ZoneFallback | None = None,
) -> CropEconomicsBoard:
	"""Rank crops by gross revenue per acre against a shared input-cost table.

	Crops with no usable zone data (strict policy) are left off the board.
	"""
	total_cost = input_cost_totals(costs).total
	rows: list[CropProfitability] = []
	for crop in crops:
		lookup = resolve_zone_data(crop, zone, policy)
		if lookup.data is None:
			continue
		data = lookup.data
		revenue = data.gross_revenue_per_acre.amount
		breakeven = safe_divide(total_cost, data.target_yield.amount)
		margin = revenue - total_cost
		rows.append(
			CropProfitability(
				name=crop.name,
				category=crop.category,
				zone=lookup.resolved_zone or zone,
				fallback_applied=lookup.fallback_applied,
				target_yield=data.target_yield,
				guide_price=data.guide_price,
				gross_revenue_per_acre=revenue,
				breakeven_price=breakeven,
				margin=margin,
				profitability=classify_profitability(data.guide_price, breakeven, margin),
			)
		)

	rows.sort(key=lambda row: row.gross_revenue_per_acre, reverse=True)
	return CropEconomicsBoard(zone=zone, total_cost_per_acre=total_cost, rows=rows)
