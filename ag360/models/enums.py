"""Enumerations shared by reference data, inputs and derived outputs.

All are StrEnums so values serialize as the plain strings the profile store
and the UI already use.
"""

from enum import StrEnum

# ── Reference taxonomy ──────────────────────────────────────────────────────


class CropCategory(StrEnum):
    """Broad crop family used for dashboard filtering."""

    cereal = "Cereal"
    oilseed = "Oilseed"
    pulse = "Pulse"


class Province(StrEnum):
    """Prairie provinces with reference coverage."""

    AB = "AB"
    SK = "SK"
    MB = "MB"


class SoilZone(StrEnum):
    """Provincial agro-climatic soil zones selecting reference rows."""

    Brown = "Brown"
    DarkBrown = "DarkBrown"
    Black = "Black"
    GreyWooded = "GreyWooded"
    Peace = "Peace"
    Irrigated = "Irrigated"


class SprayTiming(StrEnum):
    """Spray-timing descriptors carried by each crop entry."""

    pre_harvest = "Pre-harv"
    pre_seed = "Pre-seed"
    soil = "Soil"
    in_crop = "In-crop"
    in_crop_twice = "In-crop ×2"
    desiccation = "Desiccation"


# ── Units ───────────────────────────────────────────────────────────────────


class PriceUnit(StrEnum):
    """Currency and denominator attached to every reference money value."""

    cad_per_bu = "CAD/bu"
    cad_per_lb = "CAD/lb"
    cad_per_acre = "CAD/ac"


class YieldUnit(StrEnum):
    bu = "bu"
    lb = "lb"


# ── Economics ───────────────────────────────────────────────────────────────


class InventoryMode(StrEnum):
    """Whether a cost line item describes grain in the bin or a planned crop."""

    on_hand = "on_hand"
    forecast = "forecast"


class Profitability(StrEnum):
    profitable = "Profitable"
    at_risk = "At Risk"


class OutlookDirection(StrEnum):
    up = "↑"
    flat = "↔"
    rising = "↗"


# ── Diagnostics ─────────────────────────────────────────────────────────────


class DamageType(StrEnum):
    insect = "insect"
    disease = "disease"


class DiagnosticStage(StrEnum):
    """The selection a diagnostic session is waiting on."""

    crop = "crop"
    damage_type = "damage_type"
    symptom = "symptom"
    pest = "pest"
    complete = "complete"


# ── Crop-stage windows ──────────────────────────────────────────────────────


class StageWindowKind(StrEnum):
    just_seeded = "just_seeded"
    early_scout = "early_scout"
    in_crop_spray = "in_crop_spray"
    fungicide = "fungicide"
    pre_harvest = "pre_harvest"
    harvest_approaching = "harvest_approaching"


class CalendarActivity(StrEnum):
    """Spray-calendar bar categories (April–October season grid)."""

    burnoff = "Pre-Seed Burnoff"
    pre_emergence = "Pre-Emergence (Soil)"
    in_crop_herbicide = "In-Crop Herbicide"
    fungicide = "Fungicide"
    pre_harvest = "Pre-Harvest / Desiccation"
