"""Field symptom → candidate pest/disease tables for the scouting diagnostic.

Candidate names are matched loosely against each crop's pest lists and the
spray-rate table (see ``ag360.services.diagnostic_service.names_match``), so
they follow the spray-rate naming rather than any one crop's spelling.
"""

from __future__ import annotations

from ag360.models.reference import SymptomEntry


def _symptom(label: str, *candidates: str) -> SymptomEntry:
    return SymptomEntry(label=label, candidates=candidates)


INSECT_SYMPTOMS: tuple[SymptomEntry, ...] = (
    _symptom("Holes / Defoliation", "Flea Beetles", "Bertha Armyworm", "Grasshoppers", "Diamondback Moth", "Cutworms"),
    _symptom("Wilting / Lodging", "Cutworms", "Wireworms"),
    _symptom("Stunted Growth", "Wireworms", "Cutworms", "Aphids", "Pea aphid"),
    _symptom("Pod / Head Damage", "Cabbage Seedpod Weevil", "Lygus bugs", "Wheat Midge", "Bertha Armyworm"),
    _symptom("Stem Damage", "Cutworms", "Sawfly"),
    _symptom("Leaf Curling / Sticky Residue", "Aphids", "Pea aphid"),
    _symptom("Root Damage", "Wireworms", "Cutworms"),
    _symptom("General Feeding Damage", "Grasshoppers", "Armyworms"),
)

DISEASE_SYMPTOMS: tuple[SymptomEntry, ...] = (
    _symptom("Yellowing / Chlorosis", "Leaf Diseases (Cereals)", "Ascochyta / Mycosphaerella"),
    _symptom(
        "Lesions / Spots on Leaves",
        "FHB (Fusarium Head Blight)",
        "Leaf Diseases (Cereals)",
        "Ascochyta / Mycosphaerella",
    ),
    _symptom("White / Grey Mould on Stem", "Sclerotinia Stem Rot"),
    _symptom("Blackened / Rotted Stem Base", "Sclerotinia Stem Rot", "Ascochyta / Mycosphaerella"),
    _symptom("Head / Spike Discolouration", "FHB (Fusarium Head Blight)"),
    _symptom("Root Rot / Damping Off", "Ascochyta / Mycosphaerella"),
    _symptom("Premature Ripening", "Sclerotinia Stem Rot", "FHB (Fusarium Head Blight)"),
    _symptom("Powdery Coating on Leaves", "Leaf Diseases (Cereals)"),
)
