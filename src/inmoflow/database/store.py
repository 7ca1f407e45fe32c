"""
Store en memoria.

Sustituye al backend real: un único usuario, una sesión, sin
concurrencia. Los datos se pierden al terminar el proceso.
"""

from dataclasses import dataclass, field
from typing import Optional

import structlog

from inmoflow.models import Lead, Property, Visit

logger = structlog.get_logger()


@dataclass
class InMemoryStore:
    """Colecciones indexadas por id."""

    properties: dict[str, Property] = field(default_factory=dict)
    leads: dict[str, Lead] = field(default_factory=dict)
    visits: dict[str, Visit] = field(default_factory=dict)

    @classmethod
    def seeded(cls) -> "InMemoryStore":
        """Store con los datos de demostración."""
        from inmoflow.database.seed import seed_leads, seed_properties, seed_visits

        store = cls(
            properties={p.id: p for p in seed_properties()},
            leads={lead.id: lead for lead in seed_leads()},
            visits={v.id: v for v in seed_visits()},
        )
        logger.info(
            "Store inicializado con datos de demo",
            properties=len(store.properties),
            leads=len(store.leads),
            visits=len(store.visits),
        )
        return store


_default_store: Optional[InMemoryStore] = None


def get_store() -> InMemoryStore:
    """Store de demostración compartido por los scripts."""
    global _default_store
    if _default_store is None:
        _default_store = InMemoryStore.seeded()
    return _default_store
