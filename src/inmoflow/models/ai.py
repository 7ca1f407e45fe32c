"""
Modelos de entrada/salida del driver de IA.

Son resultados derivados: se recalculan bajo demanda y no se persisten.
"""

from typing import Optional

from pydantic import Field

from inmoflow.models.base import CamelModel
from inmoflow.models.property import Address, Features


class MatchResult(CamelModel):
    """Compatibilidad de un lead con una propiedad."""

    lead_id: str
    property_id: str
    score: int = Field(..., ge=0, le=100, description="Score de 0 a 100")
    reasons: list[str] = Field(
        default_factory=list, description="Motivos legibles, en orden de evaluación"
    )


class ValuationInput(CamelModel):
    """Datos mínimos para tasar un inmueble."""

    address: Address
    features: Features
    price_hint: Optional[float] = Field(None, description="Precio de referencia (opcional)")


class Comparable(CamelModel):
    """Propiedad comparable sintética usada para justificar la tasación."""

    ref: str
    distance_km: float
    price: int
    area: float
    rooms: int


class ValuationResult(CamelModel):
    """Precio sugerido con su rango, comparables y justificación."""

    suggested_price: int
    range: tuple[int, int]
    comps: list[Comparable] = Field(default_factory=list)
    rationale: list[str] = Field(default_factory=list)


class EmailContext(CamelModel):
    """Contexto para redactar un e-mail comercial."""

    to: str = Field(..., description="Nombre del destinatario")
    subject: str = ""
    goal: str = ""
    bullets: list[str] = Field(default_factory=list)


class KpiData(CamelModel):
    """Indicadores del dashboard."""

    active_properties: int
    new_leads: int
    weekly_visits: int
    conversion_rate: float
    pipeline_value: float


class FunnelStage(CamelModel):
    """Una etapa del embudo de ventas."""

    stage: str
    count: int
    value: float
