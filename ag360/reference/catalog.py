"""Read-only, process-wide index over the static reference tables."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType

from ag360.errors import UnknownCropError
from ag360.models.enums import CropCategory, DamageType, Province, SoilZone
from ag360.models.reference import (
    CommodityOutlook,
    CropReferenceEntry,
    HerbicidePass,
    ProvinceSources,
    SprayRateEntry,
    SymptomEntry,
)
from ag360.reference.crops import CROPS
from ag360.reference.outlook import COMMODITY_OUTLOOK
from ag360.reference.protection import HERBICIDE_PASSES
from ag360.reference.provinces import PROVINCE_SOURCES, ZONES_BY_PROVINCE
from ag360.reference.spray_rates import SPRAY_RATES
from ag360.reference.symptoms import DISEASE_SYMPTOMS, INSECT_SYMPTOMS


def _name_key(name: str) -> str:
    return name.strip().casefold()


class ReferenceCatalog:
    """Crops, spray rates and advisory tables with name indexes.

    Built once; every collection is a tuple or a read-only mapping.
    """

    def __init__(
        self,
        crops: Iterable[CropReferenceEntry],
        spray_rates: Iterable[SprayRateEntry],
        insect_symptoms: Iterable[SymptomEntry],
        disease_symptoms: Iterable[SymptomEntry],
        herbicide_passes: Iterable[HerbicidePass],
        outlook: Iterable[CommodityOutlook],
        province_sources: Mapping[Province, ProvinceSources],
        zones_by_province: Mapping[Province, tuple[SoilZone, ...]],
    ) -> None:
        self.crops: tuple[CropReferenceEntry, ...] = tuple(crops)
        self.spray_rates: tuple[SprayRateEntry, ...] = tuple(spray_rates)
        self.insect_symptoms: tuple[SymptomEntry, ...] = tuple(insect_symptoms)
        self.disease_symptoms: tuple[SymptomEntry, ...] = tuple(disease_symptoms)
        self.herbicide_passes: tuple[HerbicidePass, ...] = tuple(herbicide_passes)
        self.outlook: tuple[CommodityOutlook, ...] = tuple(outlook)
        self._province_sources: Mapping[Province, ProvinceSources] = MappingProxyType(dict(province_sources))
        self.zones_by_province: Mapping[Province, tuple[SoilZone, ...]] = MappingProxyType(
            dict(zones_by_province)
        )

        crop_index: dict[str, CropReferenceEntry] = {}
        for crop in self.crops:
            key = _name_key(crop.name)
            if key in crop_index:
                raise ValueError(f"duplicate crop reference entry: {crop.name!r}")
            crop_index[key] = crop
        self._crop_index: Mapping[str, CropReferenceEntry] = MappingProxyType(crop_index)
        self._outlook_index: Mapping[str, CommodityOutlook] = MappingProxyType(
            {_name_key(item.crop): item for item in self.outlook}
        )

    def find_crop(self, name: str) -> CropReferenceEntry | None:
        return self._crop_index.get(_name_key(name))

    def get_crop(self, name: str) -> CropReferenceEntry:
        crop = self.find_crop(name)
        if crop is None:
            raise UnknownCropError(f"No reference entry for crop {name!r}")
        return crop

    def crops_for_province(
        self,
        province: Province,
        category: CropCategory | None = None,
    ) -> list[CropReferenceEntry]:
        return [
            crop
            for crop in self.crops
            if crop.grows_in(province) and (category is None or crop.category == category)
        ]

    def zones_for_province(self, province: Province) -> tuple[SoilZone, ...]:
        return self.zones_by_province.get(province, (SoilZone.Black,))

    def province_sources(self, province: Province) -> ProvinceSources:
        return self._province_sources.get(province, self._province_sources[Province.SK])

    def outlook_for(self, crop_name: str) -> CommodityOutlook | None:
        return self._outlook_index.get(_name_key(crop_name))

    def symptoms_for(self, damage_type: DamageType) -> tuple[SymptomEntry, ...]:
        if damage_type == DamageType.insect:
            return self.insect_symptoms
        return self.disease_symptoms


@lru_cache
def get_catalog() -> ReferenceCatalog:
    """Singleton catalog over the bundled tables (built on first call)."""
    return ReferenceCatalog(
        crops=CROPS,
        spray_rates=SPRAY_RATES,
        insect_symptoms=INSECT_SYMPTOMS,
        disease_symptoms=DISEASE_SYMPTOMS,
        herbicide_passes=HERBICIDE_PASSES,
        outlook=COMMODITY_OUTLOOK,
        province_sources=PROVINCE_SOURCES,
        zones_by_province=ZONES_BY_PROVINCE,
    )
