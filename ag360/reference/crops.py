"""Per-crop, per-soil-zone agronomic reference table.

Values come from the AB Cropping Alternatives 2025 (AgriProfit$) and the SK
Crop Planning Guide 2026. Manitoba rows reuse the shared prairie data.
Fertility rates are lb/ac of actual nutrient.
"""

from __future__ import annotations

from ag360.models.enums import (
    CropCategory,
    PriceUnit,
    Province,
    SoilZone,
    SprayTiming,
    YieldUnit,
)
from ag360.models.reference import CropReferenceEntry, Money, YieldQuantity, ZoneEconomics

_BU = YieldUnit.bu
_LB = YieldUnit.lb
_PER_BU = PriceUnit.cad_per_bu
_PER_LB = PriceUnit.cad_per_lb

_ALL_PROVINCES = (Province.SK, Province.MB, Province.AB)


def _zone(
    target_yield: float,
    price: float,
    revenue: float,
    n: float,
    p: float,
    s: float,
    k: float,
    be_yield: float,
    be_price: float,
    *,
    price_unit: PriceUnit = _PER_BU,
    yield_unit: YieldUnit = _BU,
) -> ZoneEconomics:
    return ZoneEconomics(
        target_yield=YieldQuantity(amount=target_yield, unit=yield_unit),
        guide_price=Money(amount=price, unit=price_unit),
        gross_revenue_per_acre=Money(amount=revenue, unit=PriceUnit.cad_per_acre),
        nitrogen_lb_per_acre=n,
        phosphorus_lb_per_acre=p,
        sulfur_lb_per_acre=s,
        potassium_lb_per_acre=k,
        breakeven_yield=YieldQuantity(amount=be_yield, unit=yield_unit),
        breakeven_price=Money(amount=be_price, unit=price_unit),
    )


def _per_lb(*args: float, yield_unit: YieldUnit = _BU) -> ZoneEconomics:
    return _zone(*args, price_unit=_PER_LB, yield_unit=yield_unit)


_T = SprayTiming

CROPS: tuple[CropReferenceEntry, ...] = (
    CropReferenceEntry(
        name="HRS Wheat",
        category=CropCategory.cereal,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.Brown: _zone(40, 7.76, 310, 50, 20, 0, 5, 57, 11.03),
            SoilZone.DarkBrown: _zone(44, 7.76, 341, 60, 25, 0, 5, 56, 9.79),
            SoilZone.Black: _zone(65, 7.62, 495, 80, 30, 0, 10, 82, 9.51),
            SoilZone.GreyWooded: _zone(58, 7.62, 442, 80, 25, 0, 10, 75, 9.80),
            SoilZone.Peace: _zone(56, 7.62, 427, 70, 25, 0, 5, 68, 9.22),
            SoilZone.Irrigated: _zone(96, 7.76, 745, 100, 40, 0, 5, 129, 10.42),
        },
        rotation_notes="Break cereals to decompose residue. Avoid back-to-back wheat.",
        spray_timings=(_T.pre_harvest, _T.pre_seed, _T.soil, _T.in_crop),
        insects=("Wheat midge", "Cutworms", "Aphids", "Grasshoppers", "Armyworms", "Sawfly", "Wireworms"),
        diseases=("FHB", "Leaf spot", "Stripe rust", "Leaf rust", "Stem rust"),
        disease_notes="Fungicide at FHB timing (early anthesis). Additional leaf disease spray if high pressure.",
        weed_notes="Many herbicide options. Layering pre-seed burnoff + in-crop recommended.",
        source="AB Cropping Alt 2025; SK CPG 2026",
    ),
    CropReferenceEntry(
        name="CPS Wheat",
        category=CropCategory.cereal,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.Brown: _zone(42, 7.35, 309, 50, 20, 0, 5, 60, 10.38),
            SoilZone.Black: _zone(72, 7.35, 529, 80, 30, 0, 10, 86, 8.70),
            SoilZone.GreyWooded: _zone(70, 7.35, 515, 80, 25, 0, 10, 78, 8.14),
            SoilZone.Peace: _zone(65, 7.35, 478, 70, 25, 0, 5, 71, 8.03),
        },
        rotation_notes="Break cereals. Diverse rotations preferred.",
        spray_timings=(_T.pre_seed, _T.in_crop),
        insects=("Wheat midge", "Cutworms", "Aphids", "Grasshoppers"),
        diseases=("FHB", "Leaf diseases"),
        disease_notes="Single fungicide included at heading.",
        weed_notes="Many herbicide options available.",
        source="AB Cropping Alt 2025",
    ),
    CropReferenceEntry(
        name="Durum Wheat",
        category=CropCategory.cereal,
        provinces=(Province.SK, Province.AB),
        zones={
            SoilZone.Brown: _zone(42, 8.71, 366, 50, 20, 0, 5, 52, 10.62),
            SoilZone.DarkBrown: _zone(41, 8.71, 357, 60, 25, 0, 5, 51, 10.72),
        },
        rotation_notes="Midge tolerant varieties recommended. Avoid back-to-back durum.",
        spray_timings=(_T.pre_harvest, _T.pre_seed, _T.in_crop),
        insects=("Wheat midge", "Cutworms", "Aphids", "Grasshoppers", "Sawfly"),
        diseases=("FHB", "Leaf diseases"),
        disease_notes="Single fungicide. Midge tolerant blends available.",
        weed_notes="Fewer soil-applied options than CWRS.",
        source="AB Cropping Alt 2025; SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Feed Barley",
        category=CropCategory.cereal,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.Brown: _zone(52, 5.56, 289, 60, 25, 0, 5, 72, 7.67),
            SoilZone.DarkBrown: _zone(63, 5.56, 350, 70, 25, 0, 5, 73, 6.41),
            SoilZone.Black: _zone(85, 5.56, 473, 80, 30, 0, 10, 101, 6.57),
            SoilZone.GreyWooded: _zone(78, 5.56, 434, 80, 30, 0, 10, 95, 6.72),
            SoilZone.Peace: _zone(76, 5.56, 423, 70, 25, 0, 5, 87, 6.33),
        },
        rotation_notes="Competitive crop — suppresses weeds naturally.",
        spray_timings=(_T.pre_harvest, _T.pre_seed, _T.in_crop),
        insects=("Cutworms", "Aphids", "Thrips", "Grasshoppers", "Armyworm", "Wireworms"),
        diseases=("FHB", "Net blotch", "Spot blotch"),
        disease_notes="Fungicide based on field history and disease pressure.",
        weed_notes="Competitive crop — can reduce herbicide applications.",
        source="AB Cropping Alt 2025; SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Malt Barley",
        category=CropCategory.cereal,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.Brown: _zone(53, 5.90, 313, 50, 30, 10, 10, 75, 8.29),
            SoilZone.DarkBrown: _zone(63, 5.90, 372, 60, 30, 10, 15, 77, 7.20),
            SoilZone.Black: _zone(83, 5.90, 490, 70, 30, 10, 20, 107, 7.58),
        },
        rotation_notes="Diverse rotations. Competitive crop.",
        spray_timings=(_T.pre_harvest, _T.pre_seed, _T.soil, _T.in_crop),
        insects=("Cutworms", "Aphids", "Thrips", "Grasshoppers", "Armyworm"),
        diseases=("FHB", "Leaf diseases"),
        disease_notes="Single fungicide included. Secure malt contract before seeding.",
        weed_notes="Soil-applied for Group 1 resistant wild oats.",
        source="AB Cropping Alt 2025",
    ),
    CropReferenceEntry(
        name="Milling Oats",
        category=CropCategory.cereal,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.Brown: _zone(58, 4.65, 270, 50, 20, 0, 0, 85, 6.80),
            SoilZone.DarkBrown: _zone(75, 4.65, 349, 55, 20, 0, 0, 83, 5.13),
            SoilZone.Black: _zone(98, 4.65, 456, 70, 30, 0, 0, 123, 5.80),
            SoilZone.GreyWooded: _zone(94, 4.65, 437, 75, 25, 0, 0, 114, 5.64),
            SoilZone.Peace: _zone(99, 4.65, 460, 65, 20, 0, 0, 105, 4.91),
        },
        rotation_notes="Very competitive — suppresses weeds. Good break crop.",
        spray_timings=(_T.pre_harvest, _T.pre_seed, _T.in_crop),
        insects=("Cutworms", "Aphids", "Grasshoppers", "Armyworm"),
        diseases=("Crown rust", "Leaf diseases"),
        disease_notes="Some milling buyers prohibit pre-harvest glyphosate — check contract.",
        weed_notes="Wild oats CANNOT be controlled in tame oats. Plan rotation accordingly.",
        source="AB Cropping Alt 2025",
    ),
    CropReferenceEntry(
        name="Canola",
        category=CropCategory.oilseed,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.Brown: _zone(30, 13.04, 391, 65, 25, 10, 10, 39, 16.69),
            SoilZone.DarkBrown: _zone(35, 13.04, 456, 75, 30, 15, 10, 40, 14.81),
            SoilZone.Black: _zone(46, 13.04, 600, 100, 40, 20, 15, 53, 14.78),
            SoilZone.GreyWooded: _zone(44, 13.04, 574, 100, 40, 20, 25, 52, 15.36),
            SoilZone.Peace: _zone(40, 13.04, 522, 85, 30, 15, 20, 47, 15.04),
            SoilZone.Irrigated: _zone(58, 13.04, 756, 110, 50, 20, 5, 81, 18.00),
        },
        rotation_notes="3-4 year rotation minimum. Critical for clubroot and blackleg management.",
        spray_timings=(_T.pre_harvest, _T.pre_seed, _T.soil, _T.in_crop_twice, _T.desiccation),
        insects=(
            "Flea beetles",
            "Cutworms",
            "Lygus bugs",
            "Seedpod weevil",
            "Diamondback moth",
            "Bertha armyworm",
            "Grasshoppers",
        ),
        diseases=("Sclerotinia", "Blackleg", "Alternaria", "Clubroot"),
        disease_notes="Fungicide for sclerotinia at 20-50% bloom based on disease risk checklist.",
        weed_notes="HT system dependent. Soil-active products for cleavers control.",
        source="AB Cropping Alt 2025; SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Field Peas",
        category=CropCategory.pulse,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.Brown: _zone(45, 8.98, 404, 5, 20, 0, 10, 50, 9.80),
            SoilZone.DarkBrown: _zone(48, 8.98, 431, 5, 20, 0, 10, 50, 9.24),
            SoilZone.Black: _zone(56, 8.98, 503, 5, 30, 0, 15, 71, 11.32),
            SoilZone.GreyWooded: _zone(50, 8.98, 449, 5, 25, 0, 15, 65, 11.56),
            SoilZone.Peace: _zone(50, 8.98, 449, 5, 20, 0, 15, 58, 10.28),
        },
        rotation_notes="Extended rotations critical for aphanomyces root rot management.",
        spray_timings=(_T.pre_harvest, _T.pre_seed, _T.soil, _T.in_crop, _T.desiccation),
        insects=("Wireworms", "Cutworms", "Lygus bugs", "Pea aphid", "Grasshoppers", "Pea leaf weevil"),
        diseases=("Mycosphaerella", "Ascochyta", "Aphanomyces root rot", "White mould"),
        disease_notes="Single fungicide for mycosphaerella. Apply based on disease risk at flowering.",
        weed_notes="Control weeds 10-14 days after emergence. Limited in-crop options.",
        source="AB Cropping Alt 2025; SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Red Lentils",
        category=CropCategory.pulse,
        provinces=(Province.SK, Province.AB),
        zones={
            SoilZone.Brown: _per_lb(28, 0.30, 336, 5, 20, 0, 10, 33, 0.37),
            SoilZone.DarkBrown: _per_lb(30, 0.30, 360, 5, 20, 0, 10, 33, 0.34),
        },
        rotation_notes="Avoid lentil-on-lentil. Minimum 3-year rotation.",
        spray_timings=(_T.pre_seed, _T.in_crop, _T.desiccation),
        insects=("Cutworms", "Lygus bugs", "Pea aphid", "Grasshoppers"),
        diseases=("Ascochyta", "Stemphylium", "Botrytis grey mould", "Sclerotinia"),
        disease_notes="Fungicide based on ascochyta risk. Two applications may be needed in high pressure years.",
        weed_notes="Very limited herbicide options. Clean fields critical. Pre-seed burnoff essential.",
        source="SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Small Red Lentils",
        category=CropCategory.pulse,
        provinces=(Province.SK, Province.AB),
        zones={
            SoilZone.Brown: _per_lb(25, 0.28, 308, 5, 20, 0, 10, 31, 0.35),
            SoilZone.DarkBrown: _per_lb(28, 0.28, 338, 5, 20, 0, 10, 32, 0.32),
        },
        rotation_notes="Minimum 3-year rotation. Avoid lentil-on-lentil.",
        spray_timings=(_T.pre_seed, _T.in_crop, _T.desiccation),
        insects=("Cutworms", "Lygus bugs", "Pea aphid", "Grasshoppers"),
        diseases=("Ascochyta", "Stemphylium", "Botrytis grey mould", "Sclerotinia"),
        disease_notes="Fungicide based on ascochyta risk. Two applications may be needed in high pressure years.",
        weed_notes="Very limited herbicide options. Clean fields critical. Pre-seed burnoff essential.",
        source="SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Large Green Lentils",
        category=CropCategory.pulse,
        provinces=(Province.SK, Province.AB),
        zones={
            SoilZone.Brown: _per_lb(26, 0.32, 358, 5, 20, 0, 10, 30, 0.36),
            SoilZone.DarkBrown: _per_lb(30, 0.32, 413, 5, 20, 0, 10, 32, 0.33),
            SoilZone.Black: _per_lb(32, 0.32, 440, 5, 25, 0, 10, 36, 0.33),
        },
        rotation_notes="Minimum 3-year rotation. Susceptible to same diseases as red lentils.",
        spray_timings=(_T.pre_seed, _T.in_crop, _T.desiccation),
        insects=("Cutworms", "Lygus bugs", "Pea aphid", "Grasshoppers"),
        diseases=("Ascochyta", "Stemphylium", "Botrytis grey mould", "Sclerotinia"),
        disease_notes="Similar disease package to red lentils. Fungicide timing critical at early flower.",
        weed_notes="Very limited herbicide options. Pre-seed burnoff and clean seedbed essential.",
        source="SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Yellow Peas",
        category=CropCategory.pulse,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.Brown: _zone(42, 8.50, 357, 5, 20, 0, 10, 48, 9.60),
            SoilZone.DarkBrown: _zone(46, 8.50, 391, 5, 20, 0, 10, 48, 8.90),
            SoilZone.Black: _zone(54, 8.50, 459, 5, 30, 0, 15, 68, 10.90),
            SoilZone.Peace: _zone(48, 8.50, 408, 5, 20, 0, 15, 56, 9.90),
        },
        rotation_notes="Extended rotations for aphanomyces. Same rotation considerations as field peas.",
        spray_timings=(_T.pre_harvest, _T.pre_seed, _T.soil, _T.in_crop, _T.desiccation),
        insects=("Wireworms", "Cutworms", "Lygus bugs", "Pea aphid", "Grasshoppers", "Pea leaf weevil"),
        diseases=("Mycosphaerella", "Ascochyta", "Aphanomyces root rot", "White mould"),
        disease_notes="Same disease management as field peas. Fungicide at early flower for mycosphaerella.",
        weed_notes="Control weeds 10-14 days after emergence. Limited in-crop options.",
        source="SK CPG 2026; AB Cropping Alt 2025",
    ),
    CropReferenceEntry(
        name="Chickpeas",
        category=CropCategory.pulse,
        provinces=(Province.SK, Province.AB),
        zones={
            SoilZone.Brown: _per_lb(28, 0.38, 570, 5, 20, 0, 10, 30, 0.40),
            SoilZone.DarkBrown: _per_lb(30, 0.38, 611, 5, 20, 0, 10, 31, 0.38),
        },
        rotation_notes="4+ year rotation. Sensitive to wet conditions and heavy soils.",
        spray_timings=(_T.pre_seed, _T.in_crop),
        insects=("Cutworms", "Lygus bugs", "Grasshoppers"),
        diseases=("Ascochyta", "Botrytis grey mould", "Sclerotinia"),
        disease_notes="Fungicide critical for ascochyta. Multiple applications often needed in wet years.",
        weed_notes="Very limited herbicide options. Weed-free seedbed essential.",
        source="SK CPG 2026; AB Cropping Alt 2025",
    ),
    CropReferenceEntry(
        name="Flax",
        category=CropCategory.oilseed,
        provinces=_ALL_PROVINCES,
        zones={
            SoilZone.DarkBrown: _zone(22, 15.50, 341, 50, 20, 10, 5, 26, 18.00),
            SoilZone.Black: _zone(28, 15.50, 434, 60, 25, 10, 5, 31, 16.46),
        },
        rotation_notes="Avoid flax-on-flax. 4+ year rotation for aster yellows management.",
        spray_timings=(_T.pre_seed, _T.in_crop),
        insects=("Cutworms", "Grasshoppers", "Aphids", "Flea beetles"),
        diseases=("Pasmo", "Aster yellows", "Powdery mildew"),
        disease_notes="No consistent fungicide recommendation. Monitor for pasmo.",
        weed_notes="Very limited herbicide options. Few Group 1 options registered.",
        source="SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Yellow Mustard",
        category=CropCategory.oilseed,
        provinces=(Province.SK, Province.AB),
        zones={
            SoilZone.Brown: _per_lb(22, 0.38, 380, 50, 20, 10, 5, 26, 0.44),
            SoilZone.DarkBrown: _per_lb(25, 0.38, 432, 55, 20, 10, 5, 28, 0.41),
        },
        rotation_notes="Avoid brassica-on-brassica. Minimum 3-year break.",
        spray_timings=(_T.pre_seed, _T.in_crop),
        insects=("Flea beetles", "Cutworms", "Diamondback moth", "Lygus bugs"),
        diseases=("Sclerotinia", "Alternaria", "White rust"),
        disease_notes="Fungicide for sclerotinia at flowering if risk conditions met.",
        weed_notes="Fewer herbicide options than canola. Pre-seed burnoff critical.",
        source="SK CPG 2026; AB Cropping Alt 2025",
    ),
    CropReferenceEntry(
        name="Faba Beans",
        category=CropCategory.pulse,
        provinces=(Province.SK,),
        zones={
            SoilZone.Black: _zone(55, 9.50, 523, 5, 30, 0, 20, 65, 11.09),
        },
        rotation_notes="Excellent nitrogen fixer. 4+ year rotation.",
        spray_timings=(_T.pre_seed, _T.in_crop),
        insects=("Cutworms", "Pea aphid", "Lygus bugs"),
        diseases=("Ascochyta", "Botrytis", "Sclerotinia"),
        disease_notes="Fungicide at flowering for botrytis/sclerotinia based on risk.",
        weed_notes="Limited herbicide options. Competitive at canopy closure.",
        source="SK CPG 2026",
    ),
    CropReferenceEntry(
        name="Soybeans",
        category=CropCategory.pulse,
        provinces=(Province.MB,),
        zones={
            SoilZone.Black: _zone(35, 13.00, 455, 5, 30, 0, 20, 42, 15.29),
        },
        rotation_notes="Inoculant critical. 3+ year rotation.",
        spray_timings=(_T.pre_seed, _T.in_crop),
        insects=("Soybean aphid", "Cutworms", "Grasshoppers"),
        diseases=("Sclerotinia", "Phytophthora root rot", "White mould"),
        disease_notes="Fungicide based on sclerotinia pressure at R1-R3 growth stage.",
        weed_notes="Roundup Ready system standard. Pre-emerge options available.",
        source="SK CPG 2026 (shared prairie data)",
    ),
    CropReferenceEntry(
        name="Sunflower",
        category=CropCategory.oilseed,
        provinces=(Province.MB,),
        zones={
            SoilZone.Black: _per_lb(1400, 0.22, 308, 80, 35, 0, 20, 1600, 0.26, yield_unit=_LB),
        },
        rotation_notes="4+ year rotation. Avoid fields with volunteer sunflower issues.",
        spray_timings=(_T.pre_seed, _T.in_crop),
        insects=("Sunflower beetle", "Cutworms", "Lygus bugs", "Sunflower moth"),
        diseases=("Sclerotinia", "Downy mildew", "Verticillium"),
        disease_notes="Fungicide for sclerotinia at R3-R5. Downy mildew seed treatment critical.",
        weed_notes="Limited in-crop options. Pre-emerge soil-applied products key.",
        source="SK CPG 2026 (shared prairie data)",
    ),
    CropReferenceEntry(
        name="Dry Beans",
        category=CropCategory.pulse,
        provinces=(Province.AB,),
        zones={
            SoilZone.Irrigated: _per_lb(2200, 0.40, 880, 5, 30, 0, 15, 2500, 0.46, yield_unit=_LB),
        },
        rotation_notes="3-4 year rotation. Irrigation management critical.",
        spray_timings=(_T.pre_seed, _T.in_crop),
        insects=("Mexican bean beetle", "Cutworms", "Lygus bugs"),
        diseases=("White mould", "Anthracnose", "Common bacterial blight"),
        disease_notes="Fungicide for white mould at flowering. Multiple passes may be needed.",
        weed_notes="Limited options. Inter-row cultivation used in some systems.",
        source="AB Cropping Alt 2025",
    ),
)
