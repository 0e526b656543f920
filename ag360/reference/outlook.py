"""Ten-year price ranges and five-year outlook for the major prairie crops."""

from __future__ import annotations

from ag360.models.enums import OutlookDirection
from ag360.models.reference import CommodityOutlook

_UP = OutlookDirection.up
_FLAT = OutlookDirection.flat
_RISING = OutlookDirection.rising


def _outlook(crop: str, range_10yr: str, forecast_5yr: str, rating: str, direction: OutlookDirection) -> CommodityOutlook:
    return CommodityOutlook(
        crop=crop,
        range_10yr=range_10yr,
        forecast_5yr=forecast_5yr,
        rating=rating,
        direction=direction,
    )


COMMODITY_OUTLOOK: tuple[CommodityOutlook, ...] = (
    _outlook("HRS Wheat", "$5.50-$14.50/bu", "$7.00-$9.50 — global demand steady", "Stable", _FLAT),
    _outlook("Canola", "$8.50-$22.00/bu", "$13.00-$17.00 — crush capacity expanding", "Strong", _UP),
    _outlook("Durum Wheat", "$6.00-$16.00/bu", "$8.00-$11.00 — niche demand steady", "Mod-Strong", _RISING),
    _outlook("Field Peas", "$6.00-$16.00/bu", "$8.50-$12.00 — plant protein demand growing", "Strong", _UP),
    _outlook("Red Lentils", "$0.15-$0.55/lb", "$0.25-$0.40 — India import policies volatile", "Moderate", _RISING),
    _outlook("Feed Barley", "$3.50-$9.00/bu", "$5.00-$6.50 — feedlot demand steady", "Stable", _FLAT),
    _outlook("Malt Barley", "$4.00-$9.50/bu", "$5.50-$7.50 — craft brewing steady", "Mod-Strong", _RISING),
    _outlook("Flax", "$9.00-$24.00/bu", "$13.00-$18.00 — health food demand growing", "Moderate", _RISING),
    _outlook("Milling Oats", "$2.50-$8.00/bu", "$4.00-$5.50 — food use growing", "Moderate", _RISING),
    _outlook("Yellow Mustard", "$0.20-$0.65/lb", "$0.35-$0.50 — condiment demand steady", "Stable", _FLAT),
)
