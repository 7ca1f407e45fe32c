"""
Modelo base con formato de intercambio camelCase.

Los atributos Python son snake_case; el JSON que viaja hacia/desde el
servicio de IA usa camelCase (hasElevator, suggestedPrice, ...).
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now_iso() -> str:
    """Timestamp ISO en UTC."""
    return datetime.now(timezone.utc).isoformat()


class CamelModel(BaseModel):
    """Base para todos los modelos del dominio."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_wire(self) -> dict:
        """Convierte a diccionario JSON-serializable con claves camelCase."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
