"""Plain-text context blocks handed to the external advisory chat.

The chat service prepends these to its prompt; nothing here knows how the
text is sent.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ag360.models.enums import PriceUnit
from ag360.reference.catalog import ReferenceCatalog, get_catalog
from ag360.schemas.farm import FarmProfile
from ag360.schemas.windows import SeedingRecord
from ag360.services.economics_service import compute_crop_economics, format_currency
from ag360.services.window_service import AgronomicCalendar, sort_seeding_log, stage_window

SEEDING_HEADER = "ACTIVE SEEDED CROPS — WHAT IS IN THE GROUND RIGHT NOW:"
SEEDING_FOOTER = (
	"Reference these crops and their current spray/scout windows in your advice. "
	"Be proactive — if a window is open, tell the farmer what to do now."
)
ECONOMICS_HEADER = "FARM ECONOMICS — PER-CROP BREAKEVEN AND MARGIN:"

PLANNING_STAGE = "Planning stage"
SEASON_COMPLETE = "Season complete"


def status_for_day(days_since_seeding: int) -> str:
	if days_since_seeding < 0:
		return PLANNING_STAGE
	window = stage_window(days_since_seeding)
	if window is None:
		return SEASON_COMPLETE
	return window.status_summary


def _seeding_line(record: SeedingRecord, days: int) -> str:
	parts = [f"  - {record.crop}"]
	if record.field_name:
		parts[0] += f" ({record.field_name})"
	if record.acres:
		parts.append(f"{record.acres:g} ac")
	parts.append(f"Seeded {record.seeding_date:%b} {record.seeding_date.day}")
	parts.append(f"Day {days}")
	parts.append(f"STATUS: {status_for_day(days)}")
	return " · ".join(parts)


def build_seeding_context(
	records: Iterable[SeedingRecord],
	calendar: AgronomicCalendar,
	now: datetime | None = None,
) -> str:
	ordered = sort_seeding_log(records)
	if not ordered:
		return ""
	today = calendar.today(now)
	lines = "\n".join(_seeding_line(record, (today - record.seeding_date).days) for record in ordered)
	return f"---\n{SEEDING_HEADER}\n{lines}\n\n{SEEDING_FOOTER}\n---"


def _sale_unit(crop: str, catalog: ReferenceCatalog) -> str:
	"""Unit the crop is sold in: ``lb`` for per-pound reference prices, else ``bu``."""
	entry = catalog.find_crop(crop)
	if entry is not None and entry.price_unit == PriceUnit.cad_per_lb:
		return "lb"
	return "bu"


def build_economics_context(profile: FarmProfile) -> str:
	catalog = get_catalog()
	lines: list[str] = []
	for item in profile.inventory:
		if not item.crop:
			continue
		calc = compute_crop_economics(item)
		unit = _sale_unit(item.crop, catalog)
		breakeven = f"${calc.breakeven_price:.2f}/{unit}" if calc.breakeven_price else "n/a"
		lines.append(
			f"  - {item.crop} ({item.mode.value}) · {calc.bushels:,.0f} {unit} · "
			f"Breakeven {breakeven} · Gross {format_currency(calc.gross_revenue)} · "
			f"Cost {format_currency(calc.total_cost)} · Net {format_currency(calc.net_profit, signed=True)}"
		)
	if not lines:
		return ""
	return f"---\n{ECONOMICS_HEADER}\n" + "\n".join(lines) + "\n---"


def build_farm_context(
	profile: FarmProfile | None,
	records: Iterable[SeedingRecord],
	calendar: AgronomicCalendar,
	now: datetime | None = None,
) -> str:
	blocks = [
		build_seeding_context(records, calendar, now),
		build_economics_context(profile) if profile is not None else "",
	]
	return "\n\n".join(block for block in blocks if block)
