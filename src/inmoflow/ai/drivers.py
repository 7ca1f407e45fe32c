"""
Abstracción de drivers de IA.

Permite alternar entre el motor local (mock) y un servicio remoto (HTTP)
sin cambiar el código que consume las operaciones.
"""

import asyncio
import random
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional

import structlog

from inmoflow.config import Settings, get_settings
from inmoflow.exceptions import AiOperationError
from inmoflow.marketing import Copywriter
from inmoflow.matching import match_lead_to_properties
from inmoflow.models import (
    EmailContext,
    Lead,
    MatchResult,
    Property,
    ValuationInput,
    ValuationResult,
)
from inmoflow.valuation import PriceEstimator

logger = structlog.get_logger()


class BaseAiDriver(ABC):
    """Interfaz común de los drivers de IA."""

    driver_name: str = "base"

    @abstractmethod
    async def match_lead_to_properties(
        self, lead: Lead, properties: list[Property]
    ) -> list[MatchResult]:
        """
        Puntúa el catálogo para un lead.

        Returns:
            MatchResult de las propiedades activas, por score descendente
        """

    @abstractmethod
    async def estimate_price(self, valuation_input: ValuationInput) -> ValuationResult:
        """Tasa un inmueble a partir de su dirección y características."""

    @abstractmethod
    async def write_ad(self, prop: Property, style: str) -> str:
        """Redacta un anuncio en el estilo pedido (friendly, luxury, investor)."""

    @abstractmethod
    async def write_email(self, context: EmailContext) -> str:
        """Redacta un e-mail comercial."""

    @abstractmethod
    async def write_reel_script(self, prop: Property, seconds: int) -> str:
        """Genera el guion de un reel de la duración indicada."""

    async def aclose(self) -> None:
        """Libera recursos del driver (si tiene)."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


class MockAiDriver(BaseAiDriver):
    """
    Driver local: ejecuta las heurísticas en proceso.

    Simula la latencia de una llamada de red y, opcionalmente, fallos
    aleatorios para ejercitar el manejo de errores de los consumidores.
    """

    driver_name = "mock"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self._sleep = sleep
        self.estimator = PriceEstimator(settings=self.settings, rng=self.rng)
        self.copywriter = Copywriter(settings=self.settings, rng=self.rng)
        logger.info(
            "MockAiDriver inicializado",
            simulate_latency=self.settings.simulate_latency,
            failure_rate=self.settings.mock_failure_rate,
        )

    async def _simulate(self, operation: str, latency_ms: int) -> None:
        if self.settings.simulate_latency and latency_ms > 0:
            await self._sleep(latency_ms / 1000)

        failure_rate = self.settings.mock_failure_rate
        if failure_rate and self.rng.random() < failure_rate:
            logger.warning("Fallo simulado del driver mock", operation=operation)
            raise AiOperationError(f"Simulated failure in {operation}")

    async def match_lead_to_properties(
        self, lead: Lead, properties: list[Property]
    ) -> list[MatchResult]:
        await self._simulate("match", self.settings.match_latency_ms)
        results = match_lead_to_properties(lead, properties)
        logger.info("Matching completado", lead_id=lead.id, matches=len(results))
        return results

    async def estimate_price(self, valuation_input: ValuationInput) -> ValuationResult:
        await self._simulate("valuation", self.settings.valuation_latency_ms)
        result = self.estimator.estimate(valuation_input)
        logger.info(
            "Valuación completada",
            city=valuation_input.address.city,
            suggested_price=result.suggested_price,
        )
        return result

    async def write_ad(self, prop: Property, style: str) -> str:
        await self._simulate("ad", self.settings.ad_latency_ms)
        return self.copywriter.write_ad(prop, style)

    async def write_email(self, context: EmailContext) -> str:
        await self._simulate("email", self.settings.email_latency_ms)
        return self.copywriter.write_email(context)

    async def write_reel_script(self, prop: Property, seconds: int) -> str:
        await self._simulate("reel", self.settings.reel_latency_ms)
        return self.copywriter.write_reel_script(prop, seconds)


def get_ai_driver(
    settings: Optional[Settings] = None,
    driver: Optional[str] = None,
    base_url: Optional[str] = None,
    **kwargs,
) -> BaseAiDriver:
    """
    Factory para obtener el driver de IA configurado.

    Cada llamada crea una instancia nueva: quien la pide la conserva y la
    pasa a los componentes que la necesitan.

    Args:
        settings: Configuración (default: get_settings())
        driver: 'mock' o 'http' (default: settings.ai_driver)
        base_url: URL del servicio remoto (default: settings.ai_base_url)
        **kwargs: Argumentos extra para el constructor del driver

    Returns:
        Instancia del driver configurado
    """
    settings = settings or get_settings()
    base_url = base_url or settings.ai_base_url
    driver = (driver or ("http" if base_url else settings.ai_driver)).lower()

    if driver == "http":
        from inmoflow.ai.http_driver import HttpAiDriver

        if not base_url:
            raise ValueError("AI_BASE_URL no configurada para el driver http")
        return HttpAiDriver(
            base_url=base_url, timeout=settings.ai_http_timeout, **kwargs
        )
    elif driver == "mock":
        return MockAiDriver(settings=settings, **kwargs)
    else:
        raise ValueError(f"Driver de IA no soportado: {driver}. Usar 'mock' o 'http'")
