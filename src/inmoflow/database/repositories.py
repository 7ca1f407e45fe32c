"""
Repositorios para operaciones CRUD sobre el store en memoria.

Cada repositorio maneja una colección/entidad específica.
"""

import uuid
from typing import Generic, Optional, TypeVar

import structlog
from pydantic import BaseModel

from inmoflow.database.store import InMemoryStore, get_store
from inmoflow.exceptions import InvalidTransitionError, NotFoundError
from inmoflow.models import Lead, Property, Visit
from inmoflow.models.base import utc_now_iso

logger = structlog.get_logger()

ModelT = TypeVar("ModelT", bound=BaseModel)

# Estado actual -> estados alcanzables
PROPERTY_TRANSITIONS = {
    "draft": {"active"},
    "active": {"reserved", "sold", "rented", "draft"},
    "reserved": {"active", "sold", "rented"},
    "sold": set(),
    "rented": {"active"},
}

LOST_REASON_MAX_LENGTH = 240


def generate_id() -> str:
    return uuid.uuid4().hex[:12]


class BaseRepository(Generic[ModelT]):
    """Clase base para repositorios."""

    ENTITY = "Entity"
    COLLECTION = ""
    MODEL: type[BaseModel] = BaseModel
    TIMESTAMPED = True

    def __init__(self, store: Optional[InMemoryStore] = None):
        self._store = store or get_store()

    @property
    def items(self) -> dict[str, ModelT]:
        return getattr(self._store, self.COLLECTION)

    def list_all(self) -> list[ModelT]:
        return list(self.items.values())

    def get(self, entity_id: str) -> ModelT:
        """
        Obtiene una entidad por id.

        Raises:
            NotFoundError: Si no existe
        """
        item = self.items.get(entity_id)
        if item is None:
            logger.warning(f"{self.ENTITY} no encontrado", entity_id=entity_id)
            raise NotFoundError(self.ENTITY, entity_id)
        return item

    def create(self, data: dict) -> ModelT:
        """Crea una entidad nueva asignando id (y timestamps)."""
        payload = dict(data)
        payload["id"] = generate_id()
        if self.TIMESTAMPED:
            now = utc_now_iso()
            payload["created_at"] = now
            payload["updated_at"] = now
        item = self.MODEL.model_validate(payload)
        self.items[item.id] = item
        logger.info(f"{self.ENTITY} creado", entity_id=item.id)
        return item

    def update(self, entity_id: str, changes: dict) -> ModelT:
        """
        Actualización parcial; revalida el modelo completo.

        Las claves van en snake_case (nombres de atributo).
        """
        current = self.get(entity_id)
        data = current.model_dump()
        data.update(changes)
        data["id"] = entity_id
        if self.TIMESTAMPED:
            data["updated_at"] = utc_now_iso()
        item = self.MODEL.model_validate(data)
        self.items[entity_id] = item
        return item

    def delete(self, entity_id: str) -> None:
        self.get(entity_id)
        del self.items[entity_id]
        logger.info(f"{self.ENTITY} eliminado", entity_id=entity_id)


class PropertyRepository(BaseRepository[Property]):
    """Repositorio del catálogo de propiedades."""

    ENTITY = "Property"
    COLLECTION = "properties"
    MODEL = Property

    def list_active(self) -> list[Property]:
        return [p for p in self.list_all() if p.is_active]

    def change_status(self, property_id: str, status: str) -> Property:
        """
        Cambia el estado respetando el ciclo de vida.

        Raises:
            InvalidTransitionError: Si la transición no está permitida
        """
        prop = self.get(property_id)
        allowed = PROPERTY_TRANSITIONS.get(prop.status, set())
        if status not in allowed:
            raise InvalidTransitionError(prop.status, status)

        updated = self.update(property_id, {"status": status})
        logger.info(
            "Estado de propiedad actualizado",
            property_id=property_id,
            previous=prop.status,
            status=status,
        )
        return updated


class LeadRepository(BaseRepository[Lead]):
    """Repositorio de leads del pipeline."""

    ENTITY = "Lead"
    COLLECTION = "leads"
    MODEL = Lead

    def by_stage(self, stage: str) -> list[Lead]:
        return [lead for lead in self.list_all() if lead.stage == stage]

    def move_to_stage(
        self, lead_id: str, stage: str, lost_reason: Optional[str] = None
    ) -> Lead:
        """
        Mueve el lead a otra etapa del pipeline.

        El motivo de pérdida se guarda solo al pasar a "lost"; al salir
        de "lost" se borra.

        Raises:
            ValueError: Si el motivo supera LOST_REASON_MAX_LENGTH
        """
        lead = self.get(lead_id)
        if stage == "lost" and lost_reason and len(lost_reason) > LOST_REASON_MAX_LENGTH:
            raise ValueError(
                f"lost_reason admite hasta {LOST_REASON_MAX_LENGTH} caracteres"
            )
        updated = self.update(
            lead_id,
            {
                "stage": stage,
                "lost_reason": lost_reason if stage == "lost" else None,
            },
        )
        logger.info(
            "Lead movido de etapa",
            lead_id=lead_id,
            previous=lead.stage,
            stage=stage,
        )
        return updated


class VisitRepository(BaseRepository[Visit]):
    """Repositorio de visitas agendadas."""

    ENTITY = "Visit"
    COLLECTION = "visits"
    MODEL = Visit
    TIMESTAMPED = False

    def for_property(self, property_id: str) -> list[Visit]:
        return [v for v in self.list_all() if v.property_id == property_id]
