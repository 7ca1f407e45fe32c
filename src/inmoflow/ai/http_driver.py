"""
Driver de IA remoto sobre HTTP.

Cada operación es un POST con cuerpo JSON (formato camelCase) contra
el servicio de IA. Sin reintentos: un fallo se propaga como
AiOperationError y el usuario decide si repetir la acción.
"""

from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from inmoflow.ai.drivers import BaseAiDriver
from inmoflow.exceptions import AiOperationError
from inmoflow.models import (
    EmailContext,
    Lead,
    MatchResult,
    Property,
    ValuationInput,
    ValuationResult,
)

logger = structlog.get_logger()


class HttpAiDriver(BaseAiDriver):
    """Cliente del servicio de IA remoto."""

    driver_name = "http"

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        logger.info("HttpAiDriver inicializado", base_url=self.base_url)

    def _get_headers(self) -> dict:
        return {"Content-Type": "application/json"}

    async def _post(self, path: str, payload: dict, failure_message: str) -> tuple:
        """POST JSON y devuelve el cuerpo decodificado junto al status."""
        url = f"{self.base_url}{path}"
        try:
            response = await self._client.post(url, json=payload, headers=self._get_headers())
        except httpx.HTTPError as e:
            logger.error("Error de transporte con el servicio de IA", url=url, error=str(e))
            raise AiOperationError(failure_message) from e

        if not response.is_success:
            logger.error(
                "El servicio de IA respondió con error",
                url=url,
                status=response.status_code,
            )
            raise AiOperationError(failure_message, status_code=response.status_code)

        try:
            return response.json(), response.status_code
        except ValueError as e:
            logger.error("Respuesta no JSON del servicio de IA", url=url)
            raise AiOperationError(failure_message, status_code=response.status_code) from e

    def _malformed(
        self, path: str, failure_message: str, status_code: int, error: str
    ) -> AiOperationError:
        """Registra una respuesta 2xx con formato inesperado y arma el error."""
        logger.error(
            "Respuesta con formato inesperado del servicio de IA",
            url=f"{self.base_url}{path}",
            status=status_code,
            error=error,
        )
        return AiOperationError(failure_message, status_code=status_code)

    async def match_lead_to_properties(
        self, lead: Lead, properties: list[Property]
    ) -> list[MatchResult]:
        path = "/ai/match"
        failure_message = "Failed to match lead to properties"
        data, status = await self._post(
            path,
            {"lead": lead.to_wire(), "properties": [p.to_wire() for p in properties]},
            failure_message,
        )
        if not isinstance(data, list):
            raise self._malformed(path, failure_message, status, "se esperaba una lista")
        try:
            return [MatchResult.model_validate(item) for item in data]
        except ValidationError as e:
            raise self._malformed(path, failure_message, status, str(e)) from e

    async def estimate_price(self, valuation_input: ValuationInput) -> ValuationResult:
        path = "/ai/valuation"
        failure_message = "Failed to estimate price"
        data, status = await self._post(path, valuation_input.to_wire(), failure_message)
        try:
            return ValuationResult.model_validate(data)
        except ValidationError as e:
            raise self._malformed(path, failure_message, status, str(e)) from e

    async def _marketing(self, payload: dict, key: str, failure_message: str) -> str:
        path = "/ai/marketing"
        data, status = await self._post(path, payload, failure_message)
        if not isinstance(data, dict) or not isinstance(data.get(key), str):
            raise self._malformed(path, failure_message, status, f"falta el texto '{key}'")
        return data[key]

    async def write_ad(self, prop: Property, style: str) -> str:
        return await self._marketing(
            {"type": "ad", "property": prop.to_wire(), "style": style},
            "ad",
            "Failed to generate ad",
        )

    async def write_email(self, context: EmailContext) -> str:
        return await self._marketing(
            {"type": "email", "context": context.to_wire()},
            "email",
            "Failed to generate email",
        )

    async def write_reel_script(self, prop: Property, seconds: int) -> str:
        return await self._marketing(
            {"type": "reel", "property": prop.to_wire(), "seconds": seconds},
            "reel",
            "Failed to generate reel script",
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
