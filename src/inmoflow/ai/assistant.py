"""
Asistente de IA orientado a ids.

Resuelve leads y propiedades en los repositorios y delega en el driver
de IA que recibe por constructor.
"""

import structlog

from inmoflow.ai.drivers import BaseAiDriver
from inmoflow.database import LeadRepository, PropertyRepository
from inmoflow.models import EmailContext, MatchResult, ValuationInput, ValuationResult

logger = structlog.get_logger()


class AiAssistant:
    """
    Fachada de las operaciones de IA para la capa de aplicación.

    Flujo:
    1. Buscar las entidades por id (NotFoundError si no existen)
    2. Llamar al driver configurado
    3. Devolver el resultado tal cual (no se persiste)
    """

    def __init__(
        self,
        driver: BaseAiDriver,
        properties: PropertyRepository,
        leads: LeadRepository,
    ):
        self.driver = driver
        self.properties = properties
        self.leads = leads

    async def match_lead(self, lead_id: str) -> list[MatchResult]:
        """Matching del lead contra todo el catálogo (el driver descarta las no activas)."""
        lead = self.leads.get(lead_id)
        results = await self.driver.match_lead_to_properties(lead, self.properties.list_all())
        logger.info(
            "Matches calculados",
            lead_id=lead_id,
            total=len(results),
            driver=self.driver.driver_name,
        )
        return results

    async def value_property(self, property_id: str) -> ValuationResult:
        """Tasa una propiedad del catálogo usando su precio actual como referencia."""
        prop = self.properties.get(property_id)
        valuation_input = ValuationInput(
            address=prop.address,
            features=prop.features,
            price_hint=prop.price,
        )
        return await self.driver.estimate_price(valuation_input)

    async def write_ad(self, property_id: str, style: str) -> str:
        prop = self.properties.get(property_id)
        return await self.driver.write_ad(prop, style)

    async def write_reel_script(self, property_id: str, seconds: int) -> str:
        prop = self.properties.get(property_id)
        return await self.driver.write_reel_script(prop, seconds)

    async def write_email(self, context: EmailContext) -> str:
        return await self.driver.write_email(context)
