"""Province routing: available soil zones, zone labels and cited sources."""

from __future__ import annotations

from ag360.models.enums import Province, SoilZone
from ag360.models.reference import ProvinceSources

PROVINCE_SOURCES: dict[Province, ProvinceSources] = {
    Province.AB: ProvinceSources(
        crop="AB Cropping Alternatives 2025 (AgriProfit$)",
        protection="AB Crop Protection Guide 2025 (Alberta Grains)",
        nutrition="AB Nutrient Management Planning Guide",
    ),
    Province.SK: ProvinceSources(
        crop="SK Crop Planning Guide 2026 (SK Min. of Agriculture)",
        protection="SK Guide to Crop Protection 2025",
        nutrition="SK Crop Planning Guide 2026",
    ),
    Province.MB: ProvinceSources(
        crop="SK Crop Planning Guide 2026 (shared prairie data)",
        protection="MB Guide to Crop Protection 2025",
        nutrition="SK Crop Planning Guide 2026 (shared prairie data)",
    ),
}

ZONES_BY_PROVINCE: dict[Province, tuple[SoilZone, ...]] = {
    Province.AB: (
        SoilZone.Brown,
        SoilZone.DarkBrown,
        SoilZone.Black,
        SoilZone.GreyWooded,
        SoilZone.Peace,
        SoilZone.Irrigated,
    ),
    Province.SK: (SoilZone.Brown, SoilZone.DarkBrown, SoilZone.Black),
    Province.MB: (SoilZone.Brown, SoilZone.DarkBrown, SoilZone.Black, SoilZone.GreyWooded),
}

ZONE_LABELS: dict[SoilZone, str] = {
    SoilZone.Brown: "Brown",
    SoilZone.DarkBrown: "Dark Brown",
    SoilZone.Black: "Black",
    SoilZone.GreyWooded: "Grey-Wooded",
    SoilZone.Peace: "Peace",
    SoilZone.Irrigated: "Irrigated",
}

PROVINCE_NAMES: dict[str, Province] = {
    "saskatchewan": Province.SK,
    "alberta": Province.AB,
    "manitoba": Province.MB,
    "sk": Province.SK,
    "ab": Province.AB,
    "mb": Province.MB,
}
