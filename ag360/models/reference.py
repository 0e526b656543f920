"""Immutable agronomic reference records.

Every record is a frozen pydantic model built once when ``ag360.reference``
is imported and never mutated afterwards, so concurrent readers need no
locking. Money and yield values carry explicit units:

    Money(amount=0.30, unit=PriceUnit.cad_per_lb)   -> "$0.30/lb"
    YieldQuantity(amount=40, unit=YieldUnit.bu)     -> "40 bu/ac"
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ag360.models.enums import (
    CropCategory,
    OutlookDirection,
    PriceUnit,
    Province,
    SoilZone,
    SprayTiming,
    YieldUnit,
)

_FROZEN = ConfigDict(frozen=True)


class Money(BaseModel):
    model_config = _FROZEN

    amount: float
    unit: PriceUnit = PriceUnit.cad_per_bu

    @property
    def is_per_pound(self) -> bool:
        return self.unit == PriceUnit.cad_per_lb

    def format(self) -> str:
        if self.unit == PriceUnit.cad_per_lb:
            return f"${self.amount:.2f}/lb"
        if self.unit == PriceUnit.cad_per_acre:
            return f"${self.amount:,.0f}/ac"
        return f"${self.amount:.2f}"


class YieldQuantity(BaseModel):
    model_config = _FROZEN

    amount: float
    unit: YieldUnit = YieldUnit.bu

    def format(self, per_acre: bool = True) -> str:
        suffix = "/ac" if per_acre else ""
        return f"{self.amount:g} {self.unit.value}{suffix}"


class ZoneEconomics(BaseModel):
    """Per-zone yield, price, fertility and breakeven guide values for one crop."""

    model_config = _FROZEN

    target_yield: YieldQuantity
    guide_price: Money
    gross_revenue_per_acre: Money
    nitrogen_lb_per_acre: float = Field(ge=0)
    phosphorus_lb_per_acre: float = Field(ge=0)
    sulfur_lb_per_acre: float = Field(ge=0)
    potassium_lb_per_acre: float = Field(ge=0)
    breakeven_yield: YieldQuantity
    breakeven_price: Money

    def fertility(self) -> dict[str, float]:
        """Non-zero N/P/S/K rates in lb/ac, in label order."""
        rates = {
            "N": self.nitrogen_lb_per_acre,
            "P": self.phosphorus_lb_per_acre,
            "S": self.sulfur_lb_per_acre,
            "K": self.potassium_lb_per_acre,
        }
        return {key: value for key, value in rates.items() if value > 0}


class CropReferenceEntry(BaseModel):
    model_config = _FROZEN

    name: str
    category: CropCategory
    provinces: tuple[Province, ...]
    zones: Mapping[SoilZone, ZoneEconomics]
    rotation_notes: str
    spray_timings: tuple[SprayTiming, ...]
    insects: tuple[str, ...]
    diseases: tuple[str, ...]
    disease_notes: str
    weed_notes: str
    source: str

    @field_validator("zones", mode="after")
    @classmethod
    def _read_only_zones(cls, value: Mapping[SoilZone, ZoneEconomics]) -> Mapping[SoilZone, ZoneEconomics]:
        return MappingProxyType(dict(value))

    @property
    def price_unit(self) -> PriceUnit:
        """Guide-price unit, shared by every zone row of the crop."""
        for data in self.zones.values():
            return data.guide_price.unit
        return PriceUnit.cad_per_bu

    @property
    def timings_label(self) -> str:
        return ", ".join(timing.value for timing in self.spray_timings)

    @property
    def defined_zones(self) -> tuple[SoilZone, ...]:
        return tuple(self.zones.keys())

    def grows_in(self, province: Province) -> bool:
        return province in self.provinces


class SprayProduct(BaseModel):
    model_config = _FROZEN

    name: str
    rate: str
    group: str
    notes: str


class SprayRateEntry(BaseModel):
    model_config = _FROZEN

    pest: str
    crop: str
    products: tuple[SprayProduct, ...]
    source: str


class SymptomEntry(BaseModel):
    """A visible symptom and the pests/diseases known to cause it."""

    model_config = _FROZEN

    label: str
    candidates: tuple[str, ...]


class HerbicidePass(BaseModel):
    model_config = _FROZEN

    number: int = Field(ge=1)
    label: str
    timing: str
    products: str
    target_weeds: str
    crops: str
    notes: str


class CommodityOutlook(BaseModel):
    model_config = _FROZEN

    crop: str
    range_10yr: str
    forecast_5yr: str
    rating: str
    direction: OutlookDirection


class ProvinceSources(BaseModel):
    """Extension publications cited for crop, protection and nutrition data."""

    model_config = _FROZEN

    crop: str
    protection: str
    nutrition: str
