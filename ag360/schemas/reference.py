"""Pydantic schemas for resolved reference lookups."""

from __future__ import annotations

from pydantic import BaseModel

from ag360.models.enums import SoilZone
from ag360.models.reference import ZoneEconomics


class ZoneLookup(BaseModel):
	"""Outcome of a crop × soil-zone lookup.

	``data`` is ``None`` only under the strict fallback policy, or for a crop
	with no zone rows at all.
	"""

	crop: str
	requested_zone: SoilZone
	resolved_zone: SoilZone | None = None
	data: ZoneEconomics | None = None
	fallback_applied: bool = False
