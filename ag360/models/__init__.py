"""Reference model registry.

Application code can import every enum and record type from one place::

    from ag360.models import CropReferenceEntry, SoilZone, Money, ...
"""

# ── Enums ───────────────────────────────────────────────────────────────────
from ag360.models.enums import (
    CalendarActivity,
    CropCategory,
    DamageType,
    DiagnosticStage,
    InventoryMode,
    OutlookDirection,
    PriceUnit,
    Profitability,
    Province,
    SoilZone,
    SprayTiming,
    StageWindowKind,
    YieldUnit,
)

# ── Reference records ───────────────────────────────────────────────────────
from ag360.models.reference import (
    CommodityOutlook,
    CropReferenceEntry,
    HerbicidePass,
    Money,
    ProvinceSources,
    SprayProduct,
    SprayRateEntry,
    SymptomEntry,
    YieldQuantity,
    ZoneEconomics,
)

__all__ = [
    "CalendarActivity",
    "CommodityOutlook",
    "CropCategory",
    "CropReferenceEntry",
    "DamageType",
    "DiagnosticStage",
    "HerbicidePass",
    "InventoryMode",
    "Money",
    "OutlookDirection",
    "PriceUnit",
    "Profitability",
    "Province",
    "ProvinceSources",
    "SoilZone",
    "SprayProduct",
    "SprayRateEntry",
    "SprayTiming",
    "StageWindowKind",
    "SymptomEntry",
    "YieldQuantity",
    "YieldUnit",
    "ZoneEconomics",
]
