"""
Modelo de Propiedad.

Un inmueble del catálogo con su dirección, características físicas
y ciclo de vida comercial (draft -> active -> reserved/sold/rented).
"""

from typing import Literal, Optional

from pydantic import Field

from inmoflow.models.base import CamelModel, utc_now_iso

PropertyStatus = Literal["draft", "active", "reserved", "sold", "rented"]
PropertyType = Literal["flat", "house", "studio", "office", "plot"]
Heating = Literal["none", "gas", "electric", "central"]
EnergyLabel = Literal["A", "B", "C", "D", "E", "F", "G"]
Currency = Literal["EUR", "USD"]


class Address(CamelModel):
    """Dirección postal y coordenadas."""

    street: str = Field(default="", description="Calle y número")
    city: str = Field(..., description="Ciudad")
    state: Optional[str] = Field(None, description="Provincia / Comunidad")
    zip: Optional[str] = Field(None, description="Código postal")
    country: str = Field(default="España")
    lat: Optional[float] = None
    lng: Optional[float] = None


class Features(CamelModel):
    """Características físicas del inmueble."""

    rooms: int = Field(default=0, ge=0, description="Dormitorios")
    baths: int = Field(default=0, ge=0, description="Baños")
    area: float = Field(default=0, ge=0, description="Superficie en m²")
    floor: Optional[int] = Field(None, description="Planta")
    has_elevator: bool = False
    has_balcony: bool = False
    parking: bool = False
    heating: Optional[Heating] = None
    year: Optional[int] = Field(None, description="Año de construcción")
    energy_label: Optional[EnergyLabel] = Field(None, description="Calificación energética A-G")


class MediaItem(CamelModel):
    """Foto, plano o vídeo asociado a la propiedad."""

    id: str
    url: str
    kind: Literal["photo", "plan", "video"] = "photo"
    w: Optional[int] = None
    h: Optional[int] = None


class Property(CamelModel):
    """
    Propiedad del catálogo.

    La identidad (id, ref) es inmutable; estado, precio y características
    cambian a lo largo de su ciclo de vida.
    """

    id: str = Field(..., description="Identificador interno")
    ref: str = Field(..., description="Código de referencia comercial")
    title: str = Field(default="", description="Título del anuncio")
    description: Optional[str] = Field(None, description="Descripción libre")

    price: float = Field(..., ge=0, description="Precio de venta/alquiler")
    currency: Currency = Field(default="EUR")
    status: PropertyStatus = Field(default="draft")
    property_type: PropertyType = Field(default="flat", alias="type")

    address: Address
    features: Features = Field(default_factory=Features)
    media: list[MediaItem] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    created_at: str = Field(default_factory=utc_now_iso)
    updated_at: str = Field(default_factory=utc_now_iso)

    @property
    def is_active(self) -> bool:
        return self.status == "active"
