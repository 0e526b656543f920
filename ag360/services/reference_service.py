"""Reference lookups: province and soil-zone parsing, crop × zone resolution."""

from __future__ import annotations

from ag360.config import Settings, ZoneFallback, get_settings
from ag360.logging_config import engine_logger
from ag360.models.enums import Province, SoilZone
from ag360.models.reference import CropReferenceEntry, ZoneEconomics
from ag360.reference.provinces import PROVINCE_NAMES, ZONE_LABELS
from ag360.schemas.farm import FarmProfile
from ag360.schemas.reference import ZoneLookup

_logger = engine_logger("reference")


def _zone_key(text: str) -> str:
	return "".join(ch for ch in text.casefold() if ch.isalnum())


_ZONE_INDEX: dict[str, SoilZone] = {
	**{_zone_key(zone.value): zone for zone in SoilZone},
	**{_zone_key(label): zone for zone, label in ZONE_LABELS.items()},
}


def normalize_province(value: str | None) -> Province | None:
	"""Map a province code or full name (any case) to ``Province``."""
	if not value:
		return None
	return PROVINCE_NAMES.get(value.strip().casefold())


def parse_soil_zone(value: str | None) -> SoilZone | None:
	"""Accept ``DarkBrown``, ``Dark Brown``, ``dark-brown`` and the like."""
	if not value:
		return None
	return _ZONE_INDEX.get(_zone_key(value))


def resolve_zone_data(
	crop: CropReferenceEntry,
	zone: SoilZone,
	policy: ZoneFallback | None = None,
) -> ZoneLookup:
	"""Find a crop's economics for ``zone``.

	With the ``first_available`` policy a missing zone resolves to the crop's
	first defined zone and the lookup is flagged with ``fallback_applied``.
	With ``strict`` a missing zone resolves to no data.
	"""
	if policy is None:
		policy = get_settings().zone_fallback

	data = crop.zones.get(zone)
	if data is not None:
		return ZoneLookup(crop=crop.name, requested_zone=zone, resolved_zone=zone, data=data)

	if policy == ZoneFallback.strict or not crop.zones:
		_logger.info("zone_unsupported", crop=crop.name, zone=zone.value, policy=policy.value)
		return ZoneLookup(crop=crop.name, requested_zone=zone)

	resolved = crop.defined_zones[0]
	_logger.info(
		"zone_fallback_applied",
		crop=crop.name,
		requested_zone=zone.value,
		resolved_zone=resolved.value,
	)
	return ZoneLookup(
		crop=crop.name,
		requested_zone=zone,
		resolved_zone=resolved,
		data=crop.zones[resolved],
		fallback_applied=True,
	)


def get_zone_data(
	crop: CropReferenceEntry,
	zone: SoilZone,
	policy: ZoneFallback | None = None,
) -> ZoneEconomics | None:
	return resolve_zone_data(crop, zone, policy).data


def profile_province(profile: FarmProfile, settings: Settings | None = None) -> Province:
	settings = settings or get_settings()
	return (
		normalize_province(profile.province)
		or normalize_province(settings.default_province)
		or Province.SK
	)


def profile_soil_zone(profile: FarmProfile, settings: Settings | None = None) -> SoilZone:
	settings = settings or get_settings()
	return (
		parse_soil_zone(profile.soil_zone)
		or parse_soil_zone(settings.default_soil_zone)
		or SoilZone.Black
	)
