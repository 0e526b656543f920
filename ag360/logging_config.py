"""Structured logging for the engine and the processes that embed it.

Engine modules log through ``engine_logger(area)`` so every event carries a
``component`` field. ``configure_structured_logging`` is for the host
process: it installs the renderer and binds the engine settings that shape
results (farm timezone, zone fallback policy) onto every event.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from ag360.config import LogFormat, Settings, get_settings

ENGINE_NAMESPACE = "ag360"

_configured = False


def engine_logger(area: str) -> Any:
	"""Lazy structlog logger for one engine area, e.g. ``engine_logger("economics")``."""
	return structlog.get_logger(f"{ENGINE_NAMESPACE}.{area}").bind(component=area)


def _engine_context(settings: Settings) -> dict[str, str]:
	return {
		"farm_timezone": settings.farm_timezone,
		"zone_fallback": settings.zone_fallback.value,
	}


def configure_structured_logging(level: str | None = None, settings: Settings | None = None) -> None:
	"""Configure stdlib + structlog once per process.

	``level`` overrides ``Settings.log_level`` for the root and ``ag360``
	loggers. Engine context is bound into the current contextvars.
	"""
	global _configured
	if _configured:
		return

	settings = settings or get_settings()
	level_name = (level or settings.log_level).upper()
	log_level = getattr(logging, level_name, logging.INFO)

	if settings.log_format == LogFormat.json:
		renderer: Any = structlog.processors.JSONRenderer()
		logging.basicConfig(level=log_level, format="%(message)s")
	else:
		renderer = structlog.dev.ConsoleRenderer()
		logging.basicConfig(level=log_level)
	logging.getLogger(ENGINE_NAMESPACE).setLevel(log_level)

	structlog.configure(
		processors=[
			structlog.contextvars.merge_contextvars,
			structlog.processors.add_log_level,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			structlog.processors.format_exc_info,
			renderer,
		],
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	structlog.contextvars.bind_contextvars(**_engine_context(settings))
	_configured = True
