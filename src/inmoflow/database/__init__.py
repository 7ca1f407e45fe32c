"""
Módulo de datos.

Provee el store en memoria y las operaciones CRUD sobre él.
"""

from inmoflow.database.store import InMemoryStore, get_store
from inmoflow.database.repositories import (
    PropertyRepository,
    LeadRepository,
    VisitRepository,
)

__all__ = [
    "InMemoryStore",
    "get_store",
    "PropertyRepository",
    "LeadRepository",
    "VisitRepository",
]
