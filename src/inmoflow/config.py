"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py -> inmoflow/ -> src/ -> raíz del proyecto (donde está el .env)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Driver de IA
    ai_driver: str = Field(
        "mock",
        description="Driver de IA a usar: 'mock' (local) o 'http' (servicio remoto)",
    )
    ai_base_url: Optional[str] = Field(
        None, description="URL base del servicio de IA (ej: https://api.inmoflow.com/api)"
    )
    ai_http_timeout: float = Field(30.0, description="Timeout de requests HTTP (segundos)")

    # Latencia simulada del driver mock (milisegundos)
    simulate_latency: bool = Field(True, description="Simular latencia de red en el driver mock")
    match_latency_ms: int = Field(800, ge=0)
    valuation_latency_ms: int = Field(1200, ge=0)
    ad_latency_ms: int = Field(600, ge=0)
    email_latency_ms: int = Field(500, ge=0)
    reel_latency_ms: int = Field(400, ge=0)

    mock_failure_rate: float = Field(
        0.0, ge=0.0, le=1.0, description="Probabilidad de fallo simulado del driver mock"
    )

    # Valuación
    default_price_per_sqm: int = Field(
        2500, description="Precio €/m² para ciudades fuera de la tabla"
    )

    # Firma de los e-mails
    agency_name: str = Field("Equipo InmoFlow AI", description="Firma de los e-mails")
    agency_phone: str = Field("+34 900 123 456")
    agency_email: str = Field("info@inmoflow.com")

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema
CITY_PRICE_PER_SQM = {
    "Madrid": 4500,
    "Barcelona": 4200,
    "Valencia": 2800,
    "Sevilla": 2200,
    "Bilbao": 3500,
    "Málaga": 3200,
    "Zaragoza": 2000,
}

AD_STYLES = ["friendly", "luxury", "investor"]
