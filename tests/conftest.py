"""
Configuración de pytest y fixtures compartidas.
"""

import asyncio
import random

import pytest

from inmoflow.config import Settings
from inmoflow.database import InMemoryStore
from inmoflow.models import Lead, Property


@pytest.fixture
def settings():
    """Settings aislados del .env, sin latencia simulada."""
    return Settings(_env_file=None, simulate_latency=False)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def store():
    """Store nuevo con los datos de demo para cada test."""
    return InMemoryStore.seeded()


@pytest.fixture
def run():
    """Ejecuta una corrutina hasta completarla."""
    return asyncio.run


@pytest.fixture
def make_property():
    """Factory de propiedades con valores por defecto razonables."""

    def _make(
        id="p-1",
        price=500000,
        city="Madrid",
        status="active",
        type="flat",
        **features,
    ) -> Property:
        base_features = {"rooms": 2, "baths": 1, "area": 80}
        base_features.update(features)
        return Property.model_validate(
            {
                "id": id,
                "ref": f"REF-{id}",
                "title": f"Piso {id}",
                "price": price,
                "status": status,
                "type": type,
                "address": {"street": "Calle Mayor 1", "city": city},
                "features": base_features,
            }
        )

    return _make


@pytest.fixture
def make_lead():
    """Factory de leads; las preferencias se pasan en snake_case."""

    def _make(id="l-1", budget=None, **preferences) -> Lead:
        return Lead(
            id=id,
            name="Cliente Test",
            stage="qualified",
            budget=budget,
            preferences=preferences,
        )

    return _make
