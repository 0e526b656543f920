"""Guided pest and disease diagnostic over the reference catalog."""

from __future__ import annotations

from ag360.config import get_settings
from ag360.errors import DiagnosticStateError
from ag360.logging_config import engine_logger
from ag360.models.enums import DamageType, DiagnosticStage
from ag360.models.reference import SprayRateEntry, SymptomEntry
from ag360.reference.catalog import ReferenceCatalog, get_catalog
from ag360.schemas.diagnostics import DiagnosticResult, DiagnosticSession

_logger = engine_logger("diagnostics")

DAMAGE_TYPE_OPTIONS: tuple[str, ...] = tuple(item.value for item in DamageType)


def _normalize(name: str) -> str:
	return name.strip().casefold()


def names_match(a: str, b: str) -> bool:
	"""Loose pest-name match: either name contains the other, ignoring case.

	"Flea beetles" matches "Flea Beetles" and "Sclerotinia" matches
	"Sclerotinia Stem Rot". Blank names match nothing.
	"""
	left, right = _normalize(a), _normalize(b)
	if not left or not right:
		return False
	return left in right or right in left


def candidate_pests(
	crop: str,
	damage_type: DamageType,
	symptom: str | None = None,
	catalog: ReferenceCatalog | None = None,
) -> list[str]:
	"""The crop's pests or diseases consistent with ``symptom``, in crop order.

	Without a symptom every pest of that damage type is a candidate. A crop
	with no reference entry has no candidates.
	"""
	catalog = catalog or get_catalog()
	entry = catalog.find_crop(crop)
	if entry is None:
		return []
	known = entry.insects if damage_type == DamageType.insect else entry.diseases
	if symptom is None:
		return list(known)

	symptom_entry = _find_symptom(catalog, damage_type, symptom)
	if symptom_entry is None:
		return []
	return [pest for pest in known if any(names_match(pest, name) for name in symptom_entry.candidates)]


def spray_recommendations(pest: str, catalog: ReferenceCatalog | None = None) -> list[SprayRateEntry]:
	catalog = catalog or get_catalog()
	return [entry for entry in catalog.spray_rates if names_match(entry.pest, pest)]


def _find_symptom(catalog: ReferenceCatalog, damage_type: DamageType, label: str) -> SymptomEntry | None:
	for entry in catalog.symptoms_for(damage_type):
		if entry.label == label:
			return entry
	return None


def _crop_options(session: DiagnosticSession, catalog: ReferenceCatalog) -> list[str]:
	if session.province is None:
		return [crop.name for crop in catalog.crops]
	return [crop.name for crop in catalog.crops_for_province(session.province)]


def advance(
	session: DiagnosticSession,
	choice: str,
	catalog: ReferenceCatalog | None = None,
) -> DiagnosticSession:
	"""Apply ``choice`` to whichever stage ``session`` is waiting on.

	Raises ``DiagnosticStateError`` when the choice is not one of the options
	offered at that stage.
	"""
	catalog = catalog or get_catalog()
	result = resolve(session, catalog)
	if result.stage == DiagnosticStage.complete:
		raise DiagnosticStateError("diagnostic is complete; reset or change an earlier selection")
	if choice not in result.options:
		raise DiagnosticStateError(f"{choice!r} is not an option at the {result.stage.value} stage")

	if result.stage == DiagnosticStage.crop:
		return session.select_crop(choice)
	if result.stage == DiagnosticStage.damage_type:
		return session.select_damage_type(choice)
	if result.stage == DiagnosticStage.symptom:
		return session.select_symptom(choice)
	return session.select_pest(choice)


def resolve(session: DiagnosticSession, catalog: ReferenceCatalog | None = None) -> DiagnosticResult:
	catalog = catalog or get_catalog()
	stage = session.stage

	if stage == DiagnosticStage.crop:
		return DiagnosticResult(stage=stage, options=_crop_options(session, catalog))

	advisor = get_settings().advisor_name
	if catalog.find_crop(session.crop or "") is None:
		_logger.info("diagnostic_no_match", crop=session.crop, reason="unknown_crop")
		return DiagnosticResult(
			stage=stage,
			no_match=True,
			message=f"No reference data found for {session.crop}. Ask {advisor} for guidance.",
		)
	if stage == DiagnosticStage.damage_type:
		return DiagnosticResult(stage=stage, options=list(DAMAGE_TYPE_OPTIONS))

	assert session.crop is not None and session.damage_type is not None
	if stage == DiagnosticStage.symptom:
		return DiagnosticResult(
			stage=stage,
			options=[entry.label for entry in catalog.symptoms_for(session.damage_type)],
			candidates=candidate_pests(session.crop, session.damage_type, None, catalog),
		)

	candidates = candidate_pests(session.crop, session.damage_type, session.symptom, catalog)
	if stage == DiagnosticStage.pest:
		if not candidates:
			_logger.info(
				"diagnostic_no_match",
				crop=session.crop,
				damage_type=session.damage_type.value,
				symptom=session.symptom,
			)
			return DiagnosticResult(
				stage=stage,
				no_match=True,
				message=f"No matching pests found for this symptom on {session.crop}. Ask {advisor} for guidance.",
			)
		return DiagnosticResult(stage=stage, options=candidates, candidates=candidates)

	assert session.pest is not None
	recommendations = spray_recommendations(session.pest, catalog)
	if not recommendations:
		_logger.info("diagnostic_no_match", crop=session.crop, pest=session.pest)
		return DiagnosticResult(
			stage=stage,
			candidates=candidates,
			no_match=True,
			message=f"No specific product data found for {session.pest}. Ask {advisor} for guidance on this pest.",
		)
	return DiagnosticResult(stage=stage, candidates=candidates, recommendations=recommendations)
