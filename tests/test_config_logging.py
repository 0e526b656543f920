from __future__ import annotations

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from ag360 import logging_config
from ag360.config import LogFormat, Settings, ZoneFallback, get_settings
from ag360.logging_config import engine_logger
from ag360.models.enums import SoilZone
from ag360.reference.catalog import ReferenceCatalog
from ag360.schemas.economics import CostLineItem
from ag360.services.reference_service import resolve_zone_data


def test_settings_defaults() -> None:
	settings = Settings(_env_file=None)

	assert settings.farm_timezone == "America/Regina"
	assert settings.zone_fallback == ZoneFallback.first_available
	assert settings.log_format == LogFormat.json
	assert settings.advisor_name == "Lily"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
	monkeypatch.setenv("LOG_FORMAT", "console")
	monkeypatch.setenv("DEFAULT_SOIL_ZONE", "Dark Brown")

	settings = get_settings()
	assert settings.log_format == LogFormat.console
	assert settings.default_soil_zone == "Dark Brown"
	assert get_settings() is settings


def test_configure_structured_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
	calls: list[dict[str, object]] = []
	monkeypatch.setattr(logging_config, "_configured", False)
	monkeypatch.setattr(structlog, "configure", lambda **kwargs: calls.append(kwargs))
	monkeypatch.setenv("ZONE_FALLBACK", "strict")
	monkeypatch.setattr(logging.getLogger("ag360"), "level", logging.NOTSET)

	try:
		logging_config.configure_structured_logging(level="debug")
		logging_config.configure_structured_logging()
		context = structlog.contextvars.get_contextvars()
	finally:
		structlog.contextvars.clear_contextvars()

	assert len(calls) == 1
	assert isinstance(calls[0]["processors"][-1], structlog.processors.JSONRenderer)
	assert context == {"farm_timezone": "America/Regina", "zone_fallback": "strict"}
	assert logging.getLogger("ag360").level == logging.DEBUG


def test_engine_logger_tags_component() -> None:
	with capture_logs() as logs:
		engine_logger("windows").info("window_checked", days=8)

	assert logs == [{"event": "window_checked", "days": 8, "component": "windows", "log_level": "info"}]


def test_zone_fallback_is_logged(catalog: ReferenceCatalog) -> None:
	with capture_logs() as logs:
		resolve_zone_data(catalog.get_crop("Durum Wheat"), SoilZone.Black, ZoneFallback.first_available)
		resolve_zone_data(catalog.get_crop("Durum Wheat"), SoilZone.Black, ZoneFallback.strict)

	events = [entry["event"] for entry in logs]
	assert events == ["zone_fallback_applied", "zone_unsupported"]
	assert logs[0]["resolved_zone"] == "Brown"


def test_coerced_cost_field_is_logged() -> None:
	with capture_logs() as logs:
		item = CostLineItem(crop="Flax", seed="lots")

	assert item.seed == 0
	assert {
		"event": "cost_field_coerced",
		"field": "seed",
		"raw": "'lots'",
		"component": "economics",
		"log_level": "debug",
	} in logs
