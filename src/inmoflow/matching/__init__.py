"""
Motor de matching.

Puntúa la compatibilidad entre las preferencias de un lead y el
catálogo de propiedades activas.
"""

from inmoflow.matching.engine import match_lead_to_properties, score_property

__all__ = [
    "match_lead_to_properties",
    "score_property",
]
