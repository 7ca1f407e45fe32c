"""
Motor de matching lead <-> propiedad.

Scoring aditivo sobre una base de 50 puntos:
- Presupuesto: +20 si el precio entra, -15 si lo supera en más de un 20%
- Ubicación: +15 si la ciudad coincide
- Tipo, dormitorios y superficie: +10 cada uno
- Amenities imprescindibles presentes: +5 cada uno

Solo se evalúan propiedades activas. El resultado se acota a [0, 100].
"""

from typing import Iterable

import structlog

from inmoflow.models import Lead, MatchResult, Property

logger = structlog.get_logger()

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

# Por encima de este múltiplo del presupuesto el precio penaliza.
# Entre 1.0 y 1.2 no hay ajuste.
OVER_BUDGET_FACTOR = 1.2

DEFAULT_REASON = "Basic compatibility"

# amenity -> (atributo en Features, motivo)
AMENITY_CHECKS = {
    "elevator": ("has_elevator", "Has elevator"),
    "balcony": ("has_balcony", "Has balcony"),
    "parking": ("parking", "Has parking"),
}


def _city_matches(wanted: str, city: str) -> bool:
    wanted = wanted.strip().lower()
    city = (city or "").strip().lower()
    if not wanted or not city:
        return False
    return wanted in city or city in wanted


def score_property(lead: Lead, prop: Property) -> MatchResult:
    """
    Calcula el score de una propiedad para un lead.

    No filtra por estado: eso lo hace match_lead_to_properties.
    """
    prefs = lead.preferences
    features = prop.features
    score = BASE_SCORE
    reasons: list[str] = []

    # Presupuesto
    if lead.budget and prop.price <= lead.budget:
        score += 20
        reasons.append("Price within budget")
    elif lead.budget and prop.price > lead.budget * OVER_BUDGET_FACTOR:
        score -= 15
        reasons.append("Price above budget")

    # Ubicación
    if prefs.city and _city_matches(prefs.city, prop.address.city):
        score += 15
        reasons.append("Preferred location match")

    # Tipo de inmueble
    if prefs.types and prop.property_type in prefs.types:
        score += 10
        reasons.append("Property type matches preferences")

    # Dormitorios
    if prefs.min_rooms and features.rooms >= prefs.min_rooms:
        score += 10
        reasons.append("Sufficient bedrooms")

    # Superficie
    if prefs.min_area and features.area >= prefs.min_area:
        score += 10
        reasons.append("Adequate size")

    # Must-haves
    for amenity in prefs.must_have:
        check = AMENITY_CHECKS.get(amenity)
        if check is None:
            continue
        attr, reason = check
        if getattr(features, attr, False):
            score += 5
            reasons.append(reason)

    score = max(MIN_SCORE, min(MAX_SCORE, score))

    return MatchResult(
        lead_id=lead.id,
        property_id=prop.id,
        score=score,
        reasons=reasons or [DEFAULT_REASON],
    )


def match_lead_to_properties(
    lead: Lead,
    properties: Iterable[Property],
) -> list[MatchResult]:
    """
    Evalúa un lead contra un catálogo de propiedades.

    Args:
        lead: Lead con presupuesto y preferencias
        properties: Catálogo completo (se descartan las no activas)

    Returns:
        Lista de MatchResult ordenada por score descendente. El orden
        es estable: los empates conservan el orden de entrada.
    """
    results = [score_property(lead, prop) for prop in properties if prop.is_active]
    results.sort(key=lambda r: r.score, reverse=True)

    logger.debug(
        "Matching calculado",
        lead_id=lead.id,
        evaluated=len(results),
        best_score=results[0].score if results else None,
    )
    return results
