"""Shared pytest fixtures — reference catalog and a calendar pinned to one instant."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest

from ag360.config import get_settings
from ag360.reference.catalog import ReferenceCatalog, get_catalog
from ag360.schemas.economics import CostLineItem
from ag360.services.window_service import AgronomicCalendar

# Already 2026-06-15 in UTC, still 2026-06-14 22:30 on the Regina clock.
PINNED_NOW = datetime(2026, 6, 15, 4, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
	get_settings.cache_clear()
	yield
	get_settings.cache_clear()


@pytest.fixture
def catalog() -> ReferenceCatalog:
	return get_catalog()


@pytest.fixture
def calendar() -> AgronomicCalendar:
	return AgronomicCalendar("America/Regina")


@pytest.fixture
def now() -> datetime:
	return PINNED_NOW


@pytest.fixture
def canola_forecast() -> CostLineItem:
	return CostLineItem(
		crop="Canola",
		mode="forecast",
		acres=100,
		aph=40,
		seed=35,
		fertilizer=89,
		herbicide=55,
		target_price=13.00,
		land_rent=80,
		equipment_depreciation=55,
	)
