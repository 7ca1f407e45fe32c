"""
Modelo de Lead y sus preferencias de búsqueda.

Las preferencias son todas opcionales: un criterio ausente, vacío o en
cero se interpreta como "no pedido" por el motor de matching.
"""

from typing import Literal, Optional

from pydantic import Field, model_validator

from inmoflow.models.base import CamelModel, utc_now_iso
from inmoflow.models.property import PropertyType

LeadStage = Literal["new", "qualified", "visiting", "offer", "won", "lost"]
Amenity = Literal["elevator", "balcony", "parking"]


class LeadPreferences(CamelModel):
    """Criterios de búsqueda declarados por el lead."""

    city: Optional[str] = Field(None, description="Ciudad preferida")
    types: list[PropertyType] = Field(
        default_factory=list, alias="type", description="Tipos de inmueble aceptables"
    )
    min_rooms: Optional[int] = Field(None, ge=0, description="Mínimo de dormitorios")
    min_area: Optional[float] = Field(None, ge=0, description="Superficie mínima m²")
    max_price: Optional[float] = Field(None, ge=0, description="Precio máximo")
    must_have: list[Amenity] = Field(
        default_factory=list, description="Amenities imprescindibles"
    )


class Lead(CamelModel):
    """
    Comprador/inquilino potencial dentro del pipeline de ventas.

    El motivo de pérdida (lost_reason) lo gestiona
    LeadRepository.move_to_stage; el modelo acepta lo que venga del store.
    """

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    stage: LeadStage = Field(default="new")
    budget: Optional[float] = Field(None, ge=0, description="Presupuesto")
    preferences: LeadPreferences = Field(default_factory=LeadPreferences)

    source: Optional[str] = Field(None, description="Canal de captación")
    note: Optional[str] = None
    lost_reason: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    created_at: str = Field(default_factory=utc_now_iso)
    updated_at: str = Field(default_factory=utc_now_iso)

    @model_validator(mode="before")
    @classmethod
    def _null_preferences(cls, data):
        # El front envía preferences: null cuando el lead no tiene criterios
        if isinstance(data, dict) and data.get("preferences") is None:
            data = {k: v for k, v in data.items() if k != "preferences"}
        return data


class Visit(CamelModel):
    """Visita agendada de un lead a una propiedad."""

    id: str
    property_id: str
    lead_id: str
    when: str = Field(..., description="Fecha/hora ISO de la visita")
    note: Optional[str] = None
    status: Literal["scheduled", "done", "no_show", "canceled"] = "scheduled"
    reminder_mins: Optional[int] = Field(None, ge=0)
