"""Default prairie input costs ($/ac) from the SK Crop Planning Guide 2026."""

from __future__ import annotations

from ag360.schemas.economics import InputCosts

DEFAULT_INPUT_COSTS = InputCosts(
    seed=35,
    fertilizer=89,
    crop_protection=55,
    crop_insurance=20,
    trucking=30,
    fuel=38,
    machinery_repairs=30,
    building_repairs=4,
    custom_work=6,
    labour=22,
    utilities=21,
    operating_interest=12,
    land_rent_taxes=80,
    licenses_insurance=15,
    depreciation=55,
    capital_interest=12,
)
