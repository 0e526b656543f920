"""Registered spray products and label rates, keyed by pest or disease.

Rates are per acre as printed in the SK/AB Guide to Crop Protection 2025.
The label is the legal authority; these rows are a lookup aid only.
"""

from __future__ import annotations

from ag360.models.reference import SprayProduct, SprayRateEntry

_MATADOR = "Matador/Silencer 120EC"
_DECIS = "Decis 100 EC"
_PYRETHROID = "3A (Pyrethroid)"


def _product(name: str, rate: str, group: str, notes: str) -> SprayProduct:
    return SprayProduct(name=name, rate=rate, group=group, notes=notes)


SPRAY_RATES: tuple[SprayRateEntry, ...] = (
    SprayRateEntry(
        pest="Cutworms",
        crop="All crops",
        products=(
            _product(_MATADOR, "34 mL/ac", _PYRETHROID, "Apply evening when cutworms are active. 25-30% plant damage = threshold."),
            _product(_DECIS, "20-30 mL/ac", _PYRETHROID, "Ground or aerial. Check for cutworm presence before applying."),
            _product("Lorsban 4E (chlorpyrifos)", "580-1160 mL/ac", "1B (OP)", "Soil drench for below-ground species. Check provincial registration."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Cutworm Charts",
    ),
    SprayRateEntry(
        pest="Grasshoppers",
        crop="All crops",
        products=(
            _product(_MATADOR, "34 mL/ac", _PYRETHROID, "8-12 hoppers/m² at field edge = threshold. Treat borders first."),
            _product("Malathion 85E", "405-544 mL/ac", "1B (OP)", "Ground or aerial. Short residual — monitor for re-entry."),
            _product("Carbamalt (carbaryl)", "Per label", "1A (Carbamate)", "Bait formulation available for rangeland use."),
        ),
        source="SK/AB Guide to Crop Protection 2025",
    ),
    SprayRateEntry(
        pest="Wheat Midge",
        crop="Wheat, Durum",
        products=(
            _product(_MATADOR, "34 mL/ac", _PYRETHROID, "Apply warm evening at heading. 1 midge per 4-5 heads = threshold."),
            _product(_DECIS, "20-30 mL/ac", _PYRETHROID, "Ground or aerial at heading. Midge tolerant varieties reduce need."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Cereal Insect Charts",
    ),
    SprayRateEntry(
        pest="Flea Beetles",
        crop="Canola, Mustard",
        products=(
            _product(_DECIS, "20-30 mL/ac", _PYRETHROID, "Apply when >25% defoliation at cotyledon to 2-leaf stage."),
            _product(_MATADOR, "34 mL/ac", _PYRETHROID, "Ground only. Do not graze treated areas."),
            _product("Malathion 85E", "405-544 mL/ac", "1B (OP)", "Ground or aerial application."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Canola Insect Charts",
    ),
    SprayRateEntry(
        pest="Bertha Armyworm",
        crop="Canola",
        products=(
            _product("Coragen MaX", "34-51 mL/ac", "28 (Diamide)", "0 day PHI. Best choice for resistance management."),
            _product(_DECIS, "20-30 mL/ac", _PYRETHROID, "~20 larvae/m² threshold."),
            _product(_MATADOR, "34 mL/ac", _PYRETHROID, "Ground only."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Canola Insect Charts",
    ),
    SprayRateEntry(
        pest="Cabbage Seedpod Weevil",
        crop="Canola",
        products=(
            _product(_MATADOR, "34 mL/ac", _PYRETHROID, "3-4 weevils per 10 sweeps at early flower = threshold. Spray field edges first."),
            _product(_DECIS, "20-30 mL/ac", _PYRETHROID, "Ground or aerial at early flower."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Canola Insect Charts",
    ),
    SprayRateEntry(
        pest="Diamondback Moth",
        crop="Canola, Mustard",
        products=(
            _product("Coragen MaX", "34-51 mL/ac", "28 (Diamide)", "100-150 larvae/m² pre-flower threshold."),
            _product(_MATADOR, "34 mL/ac", _PYRETHROID, "DBM resistance to pyrethroids is common — check local efficacy data."),
        ),
        source="SK/AB Guide to Crop Protection 2025",
    ),
    SprayRateEntry(
        pest="FHB (Fusarium Head Blight)",
        crop="Wheat, Barley, Durum",
        products=(
            _product("Prosaro PRO", "324 mL/ac", "3+7", "Apply at early anthesis (Zadoks 60-65). Best FHB product available."),
            _product("Proline 480SC", "162 mL/ac", "3 (Triazole)", "At anthesis. Apply within 2 days of flowering."),
            _product("Caramba", "405 mL/ac", "3 (Triazole)", "At anthesis."),
            _product("Miravis Ace", "405 mL/ac", "3+7", "At anthesis. Broad spectrum disease control."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Foliar Fungicide Tables 3-4",
    ),
    SprayRateEntry(
        pest="Sclerotinia Stem Rot",
        crop="Canola",
        products=(
            _product("Proline 480SC", "162 mL/ac", "3 (Triazole)", "20-50% bloom. Apply based on sclerotinia risk checklist."),
            _product("Lance WDG", "112 g/ac", "7 (SDHI)", "20-50% bloom."),
            _product("Cotegra", "202-304 mL/ac", "7+3", "20-50% bloom. Dual mode of action."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Foliar Fungicide Table 7",
    ),
    SprayRateEntry(
        pest="Ascochyta / Mycosphaerella",
        crop="Peas, Lentils, Chickpeas",
        products=(
            _product("Priaxor", "121-162 mL/ac", "7+11", "Apply at early flower or before expected rain event."),
            _product("Headline EC", "162 mL/ac", "11 (Strobilurin)", "Preventative at early flower."),
            _product("Bravo/Echo (chlorothalonil)", "0.5-1.0 L/ac", "M5", "Low resistance risk. Good tank mix partner."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Foliar Fungicide Table 6",
    ),
    SprayRateEntry(
        pest="Leaf Diseases (Cereals)",
        crop="Wheat, Barley, Oats",
        products=(
            _product("Tilt 250E / Propiconazole", "202 mL/ac", "3 (Triazole)", "Flag leaf to heading. Low cost option."),
            _product("Stratego PRO", "243 mL/ac", "3+11", "Flag leaf timing."),
            _product("Nexicor", "304 mL/ac", "3+7+11", "Broad spectrum. Flag to heading."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Foliar Fungicide Tables 3-4",
    ),
    SprayRateEntry(
        pest="Pre-Seed Burnoff",
        crop="All crops",
        products=(
            _product("Glyphosate 360", "0.5-1.0 L/ac (acid equiv.)", "9", "1-3 days before seeding. 20-40 L/ac water volume."),
            _product("Aim EC (carfentrazone)", "15-47 mL/ac", "14 (PPO)", "Tank mix with glyphosate for resistance management. Add surfactant."),
            _product("Heat LQ (saflufenacil)", "14.4 mL/ac", "14 (PPO)", "Tank mix with glyphosate. Excellent kochia control."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Herbicide Section",
    ),
    SprayRateEntry(
        pest="Desiccation / Pre-Harvest",
        crop="Wheat, Barley, Canola, Peas, Lentils",
        products=(
            _product("Glyphosate 360", "0.67-1.0 L/ac", "9", "Wheat: <30% grain moisture. Canola: 60%+ seed color change. Always check PHI."),
            _product("Reglone / Diquat", "0.34-0.45 L/ac", "22 (Contact)", "Canola, pulses. Contact desiccant — good spray coverage critical."),
            _product("Aim EC", "30-47 mL/ac", "14", "Harvest aid for cereals, pulses. Add surfactant."),
        ),
        source="SK/AB Guide to Crop Protection 2025, Herbicide Section",
    ),
)
