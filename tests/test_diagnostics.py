from __future__ import annotations

import pytest

from ag360.errors import DiagnosticStateError
from ag360.models.enums import DamageType, DiagnosticStage, Province
from ag360.reference.catalog import ReferenceCatalog
from ag360.schemas.diagnostics import DiagnosticSession
from ag360.services.diagnostic_service import (
	advance,
	candidate_pests,
	names_match,
	resolve,
	spray_recommendations,
)


@pytest.mark.parametrize(
	("a", "b", "expected"),
	[
		("Flea beetles", "Flea Beetles", True),
		("Sclerotinia", "Sclerotinia Stem Rot", True),
		(" FHB (Fusarium Head Blight) ", "fhb", True),
		("Aphid", "Pea aphid", True),
		("Cutworms", "Wireworms", False),
		("", "Cutworms", False),
		("   ", "   ", False),
	],
)
def test_names_match(a: str, b: str, expected: bool) -> None:
	assert names_match(a, b) is expected
	assert names_match(b, a) is expected


def test_canola_holes_candidates(catalog: ReferenceCatalog) -> None:
	canola = catalog.get_crop("Canola")
	holes = next(entry for entry in catalog.insect_symptoms if entry.label == "Holes / Defoliation")

	pests = candidate_pests("Canola", DamageType.insect, "Holes / Defoliation", catalog)

	assert "Flea beetles" in pests
	assert set(pests) <= set(canola.insects)
	assert all(any(names_match(pest, name) for name in holes.candidates) for pest in pests)
	assert pests == ["Flea beetles", "Cutworms", "Diamondback moth", "Bertha armyworm", "Grasshoppers"]


def test_no_symptom_returns_full_list(catalog: ReferenceCatalog) -> None:
	pests = candidate_pests("Canola", DamageType.disease, None, catalog)

	assert pests == list(catalog.get_crop("Canola").diseases)


def test_spray_recommendations_fuzzy_match(catalog: ReferenceCatalog) -> None:
	weevil = spray_recommendations("Seedpod weevil", catalog)

	assert [entry.pest for entry in weevil] == ["Cabbage Seedpod Weevil"]
	assert spray_recommendations("Lygus bugs", catalog) == []


def test_session_walkthrough_to_products(catalog: ReferenceCatalog) -> None:
	session = DiagnosticSession(province=Province.SK)
	result = resolve(session, catalog)
	assert result.stage == DiagnosticStage.crop
	assert "Canola" in result.options
	assert "Soybeans" not in result.options

	session = advance(session, "Canola", catalog)
	assert resolve(session, catalog).options == ["insect", "disease"]

	session = advance(session, "disease", catalog)
	result = resolve(session, catalog)
	assert result.stage == DiagnosticStage.symptom
	assert "White / Grey Mould on Stem" in result.options

	session = advance(session, "White / Grey Mould on Stem", catalog)
	result = resolve(session, catalog)
	assert result.stage == DiagnosticStage.pest
	assert result.options == ["Sclerotinia"]

	session = advance(session, "Sclerotinia", catalog)
	result = resolve(session, catalog)
	assert result.stage == DiagnosticStage.complete
	assert result.no_match is False
	assert [entry.pest for entry in result.recommendations] == ["Sclerotinia Stem Rot"]
	assert result.recommendations[0].products


def test_no_matching_pest_is_explicit(catalog: ReferenceCatalog) -> None:
	session = (
		DiagnosticSession()
		.select_crop("Canola")
		.select_damage_type(DamageType.insect)
		.select_symptom("Leaf Curling / Sticky Residue")
	)
	result = resolve(session, catalog)

	assert result.no_match is True
	assert result.options == []
	assert result.message == "No matching pests found for this symptom on Canola. Ask Lily for guidance."


def test_no_product_data_is_explicit(catalog: ReferenceCatalog, monkeypatch: pytest.MonkeyPatch) -> None:
	monkeypatch.setenv("ADVISOR_NAME", "the agronomist")
	session = (
		DiagnosticSession()
		.select_crop("Canola")
		.select_damage_type("insect")
		.select_symptom("Pod / Head Damage")
		.select_pest("Lygus bugs")
	)
	result = resolve(session, catalog)

	assert result.stage == DiagnosticStage.complete
	assert result.no_match is True
	assert result.message == "No specific product data found for Lygus bugs. Ask the agronomist for guidance on this pest."


def test_upstream_selection_resets_downstream() -> None:
	session = (
		DiagnosticSession(province=Province.AB)
		.select_crop("Canola")
		.select_damage_type("insect")
		.select_symptom("Holes / Defoliation")
		.select_pest("Flea beetles")
	)

	changed_crop = session.select_crop("Field Peas")
	assert changed_crop.province == Province.AB
	assert changed_crop.damage_type is None
	assert changed_crop.symptom is None
	assert changed_crop.pest is None

	changed_type = session.select_damage_type("disease")
	assert changed_type.crop == "Canola"
	assert changed_type.symptom is None and changed_type.pest is None

	changed_symptom = session.select_symptom("Stem Damage")
	assert changed_symptom.pest is None

	assert session.reset() == DiagnosticSession()
	assert session.pest == "Flea beetles"


def test_out_of_order_selection_raises() -> None:
	with pytest.raises(DiagnosticStateError):
		DiagnosticSession().select_damage_type("insect")
	with pytest.raises(DiagnosticStateError):
		DiagnosticSession().select_crop("Canola").select_symptom("Stem Damage")
	with pytest.raises(DiagnosticStateError):
		DiagnosticSession().select_crop("Canola").select_damage_type("weeds")


def test_advance_rejects_options_not_on_offer(catalog: ReferenceCatalog) -> None:
	session = DiagnosticSession(province=Province.SK)

	with pytest.raises(DiagnosticStateError):
		advance(session, "Soybeans", catalog)

	session = advance(advance(session, "Canola", catalog), "insect", catalog)
	with pytest.raises(DiagnosticStateError):
		advance(session, "Powdery Coating on Leaves", catalog)


def test_unknown_crop_is_a_no_match_result(catalog: ReferenceCatalog) -> None:
	session = DiagnosticSession().select_crop("Corn")
	assert resolve(session, catalog).no_match is True

	session = session.select_damage_type(DamageType.insect)
	result = resolve(session, catalog)

	assert result.no_match is True
	assert result.options == []
	assert result.message == "No reference data found for Corn. Ask Lily for guidance."
	assert candidate_pests("Corn", DamageType.insect, "Holes / Defoliation", catalog) == []

	with pytest.raises(DiagnosticStateError):
		advance(session, "Holes / Defoliation", catalog)
